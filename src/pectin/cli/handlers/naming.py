"""CLI handler for the 'name' command."""

from typing import List

from rich.markup import escape

from pectin.naming import name_to_pascal_case
from pectin.utils.console import log_error


def handle_name(names: List[str]) -> int:
  """
  Prints the UMD global identifier for each package name.

  Args:
      names (List[str]): Package names, possibly scoped.

  Returns:
      int: 0 if every name was valid, 1 otherwise.
  """
  status = 0
  for name in names:
    try:
      print(f"{name}\t{name_to_pascal_case(name)}")
    except ValueError as e:
      log_error(escape(str(e)))
      status = 1
  return status
