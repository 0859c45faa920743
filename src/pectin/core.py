"""
Build Configuration Assembler.

Pairs the derived output targets with the bundle entry module and the
ordered list of bundler plugins, producing one complete build configuration
per package. Plugins are only named here; nothing is executed.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, Field

from pectin.config import RuntimeConfig
from pectin.manifest import Manifest, load_manifest
from pectin.output import OutputTarget, get_output

logger = logging.getLogger(__name__)

# Plugins in application order. "svg" is inserted before "babel" on opt-in.
BASE_PLUGINS_PRE = ["main-entry", "subpath-externals", "node-resolve", "json"]
BASE_PLUGINS_POST = ["babel", "commonjs"]
SVG_PLUGIN = "svg"


class BuildConfig(BaseModel):
  """
  Complete bundler configuration for a single package.
  """

  input: str = Field(..., description="Absolute path of the entry module.")
  output: List[OutputTarget] = Field(default_factory=list, description="Ordered output targets.")
  plugins: List[str] = Field(default_factory=list, description="Ordered plugin names.")

  def to_rollup(self) -> Dict[str, Any]:
    """
    Renders the configuration as a bundler options mapping.

    Returns:
        Dict[str, Any]: ``{"input", "output", "plugins"}``.
    """
    return {
      "input": self.input,
      "output": [target.to_rollup() for target in self.output],
      "plugins": list(self.plugins),
    }


def get_input(manifest: Manifest, base_dir: str, default_root_dir: str = "src") -> str:
  """
  Resolves the entry module of a package.

  An explicit ``input`` option wins. Otherwise the entry is the file named like
  ``main`` inside the source directory (``rootDir`` option or the default).

  Args:
      manifest (Manifest): The package manifest.
      base_dir (str): Package root directory.
      default_root_dir (str): Source directory used when ``rootDir`` is unset.

  Returns:
      str: Absolute entry path.
  """
  opts = manifest.options
  if opts.input:
    return os.path.normpath(os.path.join(base_dir, opts.input))

  root_dir = opts.root_dir or default_root_dir
  return os.path.normpath(os.path.join(base_dir, root_dir, os.path.basename(manifest.main)))


def get_plugins(manifest: Manifest) -> List[str]:
  """
  Lists the bundler plugins for a package, in application order.

  Args:
      manifest (Manifest): The package manifest.

  Returns:
      List[str]: Plugin names.
  """
  plugins = list(BASE_PLUGINS_PRE)
  if manifest.options.inline_svg:
    # must run before babel transpiles the import
    plugins.append(SVG_PLUGIN)
  plugins.extend(BASE_PLUGINS_POST)
  return plugins


def create_config(manifest: Manifest, base_dir: str, config: Optional[RuntimeConfig] = None) -> BuildConfig:
  """
  Assembles the build configuration for a loaded manifest.

  Args:
      manifest (Manifest): The package manifest.
      base_dir (str): Package root directory.
      config (Optional[RuntimeConfig]): Runtime settings.

  Returns:
      BuildConfig: Input, outputs and plugins.
  """
  cfg = config or RuntimeConfig()
  build = BuildConfig(
    input=get_input(manifest, base_dir, cfg.default_root_dir),
    output=get_output(manifest, base_dir),
    plugins=get_plugins(manifest),
  )
  logger.debug("Derived %d output target(s) for %s", len(build.output), manifest.name)
  return build


def pectin_core(pkg_path: Union[str, Path], config: Optional[RuntimeConfig] = None) -> BuildConfig:
  """
  Loads a ``package.json`` and assembles its build configuration.

  Args:
      pkg_path (Union[str, Path]): Manifest path, relative to the cwd if not absolute.
      config (Optional[RuntimeConfig]): Runtime settings.

  Returns:
      BuildConfig: The build configuration.

  Raises:
      ValueError: If the manifest lacks ``main``.
  """
  manifest, base_dir = load_manifest(pkg_path, config)
  return create_config(manifest, base_dir, config)


def create_multi_config(
  pkg_paths: Sequence[Union[str, Path]], config: Optional[RuntimeConfig] = None
) -> List[BuildConfig]:
  """
  Assembles build configurations for several packages (e.g. a monorepo).

  Args:
      pkg_paths (Sequence): Manifest paths, processed in order.
      config (Optional[RuntimeConfig]): Runtime settings shared by all packages.

  Returns:
      List[BuildConfig]: One configuration per manifest, in input order.
  """
  return [pectin_core(pkg_path, config) for pkg_path in pkg_paths]
