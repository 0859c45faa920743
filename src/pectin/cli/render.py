"""
Build Configuration rendering.

Presents derived output targets either as a Rich table (terminal) or as the
JSON structure handed to the bundler.
"""

import json
from typing import Any, List

from rich.markup import escape
from rich.table import Table

from pectin.core import BuildConfig
from pectin.output import OutputTarget
from pectin.utils.console import console


def _location(target: OutputTarget) -> str:
  if target.file:
    return target.file
  return f"{target.dir}/{target.entry_file_names}"


def _flags(target: OutputTarget) -> str:
  flags = []
  if target.browser:
    flags.append("browser")
  if target.env:
    flags.append(target.env.value)
  if target.sourcemap:
    flags.append("sourcemap")
  return ", ".join(flags)


def build_targets_table(targets: List[OutputTarget], title: str = "Output Targets") -> Table:
  """
  Builds a Rich table with one row per output target.

  Args:
      targets (List[OutputTarget]): Targets in derivation order.
      title (str): Table title.

  Returns:
      Table: The populated table.
  """
  table = Table(title=title)
  table.add_column("#", justify="right")
  table.add_column("Format", style="magenta", no_wrap=True)
  table.add_column("Location", style="cyan")
  table.add_column("Exports")
  table.add_column("Flags")
  table.add_column("Global")

  for idx, target in enumerate(targets):
    table.add_row(
      str(idx),
      target.format.value,
      escape(_location(target)),
      target.exports.value if target.exports else "",
      _flags(target),
      target.name or "",
    )

  return table


def render_json(data: Any) -> None:
  """
  Prints data as indented JSON on standard output.

  Args:
      data (Any): JSON-serialisable data.
  """
  print(json.dumps(data, indent=2))


def render_config_table(build: BuildConfig) -> None:
  """
  Prints a build configuration as a Rich table plus input/plugin summary.

  Args:
      build (BuildConfig): The configuration to display.
  """
  console.print(f"[bold]input:[/bold] [path]{escape(build.input)}[/path]")
  console.print(f"[bold]plugins:[/bold] {' -> '.join(build.plugins)}")
  console.print(build_targets_table(build.output))

