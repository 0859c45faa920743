"""
CLI handlers for build configuration commands.

Errors raised while loading the manifest or deriving its targets (missing
file, invalid JSON, missing ``main``, UMD output without a package name) are
reported through the logger and mapped to exit code 1.
"""

from pathlib import Path

from rich.markup import escape

from pectin.cli.render import build_targets_table, render_config_table, render_json
from pectin.config import RuntimeConfig
from pectin.core import pectin_core
from pectin.enums import OutputStyle
from pectin.utils.console import console, log_error


def handle_config(pkg_path: Path, config: RuntimeConfig) -> int:
  """
  Handles 'config' command: prints the full build configuration.

  Args:
      pkg_path (Path): Path to package.json.
      config (RuntimeConfig): Resolved runtime settings.

  Returns:
      int: Exit code.
  """
  try:
    build = pectin_core(pkg_path, config)
  except (OSError, TypeError, ValueError) as e:
    log_error(f"Could not derive config from [path]{escape(str(pkg_path))}[/path]: {escape(str(e))}")
    return 1

  if config.output_format == OutputStyle.TABLE:
    render_config_table(build)
  else:
    render_json(build.to_rollup())
  return 0


def handle_targets(pkg_path: Path, config: RuntimeConfig) -> int:
  """
  Handles 'targets' command: prints only the derived output targets.

  Args:
      pkg_path (Path): Path to package.json.
      config (RuntimeConfig): Resolved runtime settings.

  Returns:
      int: Exit code.
  """
  try:
    build = pectin_core(pkg_path, config)
  except (OSError, TypeError, ValueError) as e:
    log_error(f"Could not derive targets from [path]{escape(str(pkg_path))}[/path]: {escape(str(e))}")
    return 1

  if config.output_format == OutputStyle.TABLE:
    console.print(build_targets_table(build.output, title=f"Output Targets ({escape(str(pkg_path))})"))
  else:
    render_json([target.to_rollup() for target in build.output])
  return 0
