"""
Main Entry Point for pectin CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `pectin.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.markup import escape

from pectin.cli import commands
from pectin.config import RuntimeConfig
from pectin.enums import OutputStyle
from pectin.utils.console import log_error, set_verbosity
from pectin import __version__


def _add_build_arguments(cmd: argparse.ArgumentParser) -> None:
  cmd.add_argument(
    "pkg",
    type=Path,
    nargs="?",
    default=Path("package.json"),
    help="Path to package.json (default: ./package.json)",
  )
  cmd.add_argument(
    "--format",
    dest="output_format",
    choices=[style.value for style in OutputStyle],
    default=None,
    help="Output style (default: from toml, else json)",
  )
  cmd.add_argument(
    "--options-key",
    default=None,
    help="Dotted key of the build options record in package.json (default: rollup)",
  )
  cmd.add_argument("--root-dir", default=None, help="Source directory when rootDir is unset (default: src)")
  cmd.add_argument("-v", "--verbose", action="store_true", default=None, help="Enable debug logging")


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="pectin: derive bundler configuration from package.json")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CONFIG ---
  cmd_config = subparsers.add_parser("config", help="Print the full build configuration")
  _add_build_arguments(cmd_config)

  # --- Command: TARGETS ---
  cmd_targets = subparsers.add_parser("targets", help="Print the derived output targets")
  _add_build_arguments(cmd_targets)

  # --- Command: NAME ---
  cmd_name = subparsers.add_parser("name", help="Print the UMD global name for package names")
  cmd_name.add_argument("names", nargs="+", help="Package names (e.g. @scope/my-pkg)")

  args = parser.parse_args(argv)

  if args.command == "name":
    return commands.handle_name(args.names)

  try:
    config = RuntimeConfig.load(
      options_key=args.options_key,
      default_root_dir=args.root_dir,
      output_format=args.output_format,
      verbose=args.verbose,
      search_path=args.pkg.parent,
    )
  except ValidationError as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return 1

  set_verbosity(config.verbose)

  if args.command == "config":
    return commands.handle_config(args.pkg, config)

  elif args.command == "targets":
    return commands.handle_targets(args.pkg, config)

  return 0


if __name__ == "__main__":
  sys.exit(main())
