"""
CLI Command Handlers Facade.

Re-exports handlers from ``pectin.cli.handlers`` so the dispatcher and tests
have a single patch target.
"""

from pectin.cli.handlers.build import handle_config, handle_targets
from pectin.cli.handlers.naming import handle_name

__all__ = [
  "handle_config",
  "handle_name",
  "handle_targets",
]
