"""
Runtime Configuration Store.

Settings are read from ``[tool.pectin]`` in the nearest ``pyproject.toml``
and overridden by CLI arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from rich.markup import escape

from pectin.enums import OutputStyle
from pectin.utils.console import log_warning

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Global configuration container for config derivation and the CLI.
  """

  options_key: str = Field("rollup", description="Dotted key path of the build options record in package.json.")
  default_root_dir: str = Field("src", description="Source directory used when the manifest sets no rootDir.")
  output_format: OutputStyle = Field(OutputStyle.JSON, description="CLI rendering style.")
  verbose: bool = Field(False, description="If True, emit DEBUG logs.")

  @field_validator("options_key")
  @classmethod
  def validate_options_key(cls, v: str) -> str:
    """
    Ensures the key path has no empty segments.

    Args:
        v (str): The dotted key path.

    Returns:
        str: The stripped key path.

    Raises:
        ValueError: If the path is empty or contains empty segments.
    """
    v_clean = v.strip()
    if not v_clean or any(not part for part in v_clean.split(".")):
      raise ValueError(f"Invalid options key: '{v}'")
    return v_clean

  @classmethod
  def load(
    cls,
    options_key: Optional[str] = None,
    default_root_dir: Optional[str] = None,
    output_format: Optional[str] = None,
    verbose: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        options_key (Optional[str]): Override for the options key path.
        default_root_dir (Optional[str]): Override for the default source dir.
        output_format (Optional[str]): Override for CLI rendering ("json" or "table").
        verbose (Optional[bool]): Override for debug logging.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    overrides = {
      "options_key": options_key,
      "default_root_dir": default_root_dir,
      "output_format": output_format,
      "verbose": verbose,
    }

    final: Dict[str, Any] = {k: v for k, v in toml_config.items() if k in cls.model_fields}
    final.update({k: v for k, v in overrides.items() if v is not None})

    return cls(**final)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the start directory and its parents for 'pyproject.toml'.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The ``[tool.pectin]`` table and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        log_warning(f"Ignoring malformed [path]{escape(str(toml_path))}[/path]: {escape(str(e))}")
        return {}, None

      return data.get("tool", {}).get("pectin", {}), parent

  return {}, None
