"""
Entry point for module execution (``python -m pectin``).

This module delegates execution to the CLI handler in ``pectin.cli.__main__``.
"""

import sys
from pectin.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
