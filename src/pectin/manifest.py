"""
Package Manifest Schema and Loader.

Defines the typed view of ``package.json`` consumed by the output derivation
engine, and the loader that reads it from disk.

The bundler options record (``rootDir``, ``input``, file-name patterns,
feature toggles) lives under a configurable key of the manifest (``rollup``
by default). It is resolved once by the loader into an explicit
``BuildOptions`` instance so downstream code never performs key-path lookups.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from pectin.config import RuntimeConfig

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_FILE_NAMES = "[name]-[hash].[format].js"
DEFAULT_ENTRY_FILE_NAMES = "[name].[format].js"


class BuildOptions(BaseModel):
  """
  Bundler overrides read from the manifest's options record.
  """

  model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

  root_dir: Optional[str] = Field(None, alias="rootDir", description="Source directory holding the entry module.")
  input: Optional[str] = Field(None, description="Explicit entry module, relative to the package root.")
  chunk_file_names: str = Field(
    DEFAULT_CHUNK_FILE_NAMES, alias="chunkFileNames", description="Naming pattern for generated chunks."
  )
  entry_file_names: str = Field(
    DEFAULT_ENTRY_FILE_NAMES, alias="entryFileNames", description="Naming pattern for entry chunks."
  )
  inline_svg: bool = Field(False, alias="inlineSVG", description="Inline imported SVG files as data URIs.")


class Manifest(BaseModel):
  """
  Typed subset of ``package.json`` relevant to bundle output derivation.

  Unknown keys are ignored. The build options are attached by the loader
  under the internal ``__options__`` key.
  """

  model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

  name: Optional[str] = None
  main: Optional[str] = Field(None, description="Primary CommonJS entry.")
  module: Optional[str] = Field(None, description="ES module entry.")

  # Basic form: "dist/index.browser.js"
  # Advanced form: {"./dist/index.js": "./dist/index.browser.js", "./dist/index.esm.js": false}
  browser: Union[str, Dict[str, Union[str, bool]], None] = None

  unpkg: Optional[str] = Field(None, description="CDN (UMD) bundle path.")
  dependencies: Dict[str, str] = Field(default_factory=dict)
  peer_dependencies: Dict[str, str] = Field(default_factory=dict, alias="peerDependencies")

  options: BuildOptions = Field(default_factory=BuildOptions, alias="__options__")


def get_key_path(data: Dict[str, Any], key_path: str) -> Any:
  """
  Resolves a dotted key path inside nested dictionaries.

  Args:
      data (Dict[str, Any]): The root mapping.
      key_path (str): Dotted path, e.g. ``"config.rollup"``.

  Returns:
      Any: The value found, or None if any segment is missing.
  """
  current: Any = data
  for segment in key_path.split("."):
    if not isinstance(current, dict) or segment not in current:
      return None
    current = current[segment]
  return current


def parse_manifest(raw: Dict[str, Any], options_key: str = "rollup") -> Manifest:
  """
  Validates a decoded ``package.json`` mapping into a ``Manifest``.

  Args:
      raw (Dict[str, Any]): Decoded JSON content.
      options_key (str): Dotted key path of the build options record.

  Returns:
      Manifest: The typed manifest.

  Raises:
      pydantic.ValidationError: If a recognised field has the wrong type.
  """
  options = get_key_path(raw, options_key) or {}
  return Manifest.model_validate({**raw, "__options__": options})


def load_manifest(pkg_path: Union[str, Path], config: Optional[RuntimeConfig] = None) -> Tuple[Manifest, str]:
  """
  Reads and validates a ``package.json`` file.

  Args:
      pkg_path (Union[str, Path]): Path to the manifest. Relative paths are
          resolved against the current working directory.
      config (Optional[RuntimeConfig]): Runtime settings (options key).

  Returns:
      Tuple[Manifest, str]: The manifest and its containing directory.

  Raises:
      FileNotFoundError: If the manifest does not exist.
      json.JSONDecodeError: If the file is not valid JSON.
      ValueError: If the manifest is not an object or lacks ``main``.
  """
  cfg = config or RuntimeConfig()
  path = Path(os.path.normpath(os.path.join(os.getcwd(), pkg_path)))

  with open(path, "r", encoding="utf-8") as f:
    raw = json.load(f)

  if not isinstance(raw, dict):
    raise ValueError(f"Manifest must be a JSON object: {path}")

  if not raw.get("main"):
    raise ValueError(f"required field 'main' missing in {path}")

  manifest = parse_manifest(raw, cfg.options_key)
  logger.debug("Loaded manifest %s (%s)", manifest.name, path)

  return manifest, str(path.parent)
