"""
CLI Subpackage.

Contains the application entry-points and command handlers for the command-line interface.

Modules:
    - ``__main__``: The argparse definition and dispatcher.
    - ``commands``: Top-level facade for command handlers.
    - ``render``: Rich table rendering of build configurations.
    - ``handlers/*``: Implementation modules for specific CLI actions.
"""
