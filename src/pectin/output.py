"""
Output Target Derivation.

Computes the ordered list of bundle outputs a package ships, from the entry
fields of its manifest:

1.  ``main`` -> CommonJS (always).
2.  ``module`` -> ES module.
3.  ``browser`` -> browser overrides (basic string form or advanced map form).
4.  ``unpkg`` -> UMD development + production pair.

The derivation is pure: paths are computed with string math against the base
directory, the filesystem is never touched, and the manifest is never mutated.
"""

import os
import re
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from pectin.enums import BuildEnv, ExportsMode, ModuleFormat
from pectin.manifest import Manifest
from pectin.naming import name_to_pascal_case

# "dist/foo.min.js" and "dist/foo.js" both map to "dist/foo.dev.js"
_UNPKG_SUFFIX_RE = re.compile(r"(\.min)?\.js$")


class OutputTarget(BaseModel):
  """
  A single bundler output entry.

  Directory-based targets (from ``main``/``module``) carry ``dir`` and the two
  naming patterns; file-based targets (browser, unpkg) carry ``file``.
  """

  model_config = ConfigDict(frozen=True, populate_by_name=True)

  format: ModuleFormat
  dir: Optional[str] = None
  chunk_file_names: Optional[str] = Field(None, alias="chunkFileNames")
  entry_file_names: Optional[str] = Field(None, alias="entryFileNames")
  file: Optional[str] = None

  browser: bool = False
  env: Optional[BuildEnv] = None
  sourcemap: bool = False
  exports: Optional[ExportsMode] = None

  # UMD only
  name: Optional[str] = None
  globals: Optional[Mapping[str, str]] = None
  indent: Optional[bool] = None

  @field_validator("globals")
  @classmethod
  def freeze_globals(cls, v: Optional[Mapping[str, str]]) -> Optional[Mapping[str, str]]:
    """
    Wraps the globals mapping in a read-only proxy.

    Args:
        v (Optional[Mapping[str, str]]): Dependency name to global identifier.

    Returns:
        Optional[Mapping[str, str]]: A read-only view, or None.
    """
    return None if v is None else MappingProxyType(dict(v))

  @field_serializer("globals")
  def serialize_globals(self, v: Optional[Mapping[str, str]]) -> Optional[Dict[str, str]]:
    return None if v is None else dict(v)

  def to_rollup(self) -> Dict[str, Union[str, bool, Dict[str, str]]]:
    """
    Renders the target as a bundler output options mapping.

    Unset fields are omitted, as are ``browser`` and ``sourcemap`` when false.

    Returns:
        Dict: camelCase keyed options.
    """
    data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
    for flag in ("browser", "sourcemap"):
      if not data.get(flag):
        data.pop(flag, None)
    return data


def _resolve(base_dir: str, rel_path: str) -> str:
  return os.path.normpath(os.path.join(base_dir, rel_path))


def _main_target(manifest: Manifest, base_dir: str) -> OutputTarget:
  main = manifest.main
  return OutputTarget(
    format=ModuleFormat.CJS,
    dir=os.path.dirname(_resolve(base_dir, main)),
    chunk_file_names=manifest.options.chunk_file_names,
    # only one entry point, so the file name itself is the pattern
    entry_file_names=os.path.basename(main),
  )


def _module_target(manifest: Manifest, base_dir: str) -> Optional[OutputTarget]:
  if not manifest.module:
    return None
  return OutputTarget(
    format=ModuleFormat.ESM,
    dir=os.path.dirname(_resolve(base_dir, manifest.module)),
    chunk_file_names=manifest.options.chunk_file_names,
    entry_file_names=manifest.options.entry_file_names,
  )


def _browser_file_target(
  manifest: Manifest, base_dir: str, entry: Optional[str], fmt: ModuleFormat
) -> Optional[OutputTarget]:
  """
  Builds an advanced-form browser override for one entry field.

  The map is keyed by the literal ``main``/``module`` string; an equivalent
  but differently spelled path does not match.
  """
  if not isinstance(manifest.browser, dict) or entry is None:
    return None

  replacement = manifest.browser.get(entry)
  # `false` means "exclude from browser bundles"
  if not replacement:
    return None
  if not isinstance(replacement, str):
    raise TypeError(f"browser override for '{entry}' must be a path string, got {replacement!r}")

  return OutputTarget(format=fmt, file=_resolve(base_dir, replacement), browser=True)


def _browser_targets(manifest: Manifest, base_dir: str) -> List[Optional[OutputTarget]]:
  # @see https://github.com/defunctzombie/package-browser-field-spec
  if isinstance(manifest.browser, str):
    # alternative main (basic)
    return [OutputTarget(format=ModuleFormat.CJS, file=_resolve(base_dir, manifest.browser), browser=True)]

  # specific files (advanced)
  return [
    _browser_file_target(manifest, base_dir, manifest.main, ModuleFormat.CJS),
    _browser_file_target(manifest, base_dir, manifest.module, ModuleFormat.ESM),
  ]


def _unpkg_targets(manifest: Manifest, base_dir: str) -> List[OutputTarget]:
  if not manifest.unpkg:
    return []

  return [
    OutputTarget(
      format=ModuleFormat.UMD,
      file=_resolve(base_dir, _UNPKG_SUFFIX_RE.sub(".dev.js", manifest.unpkg)),
      env=BuildEnv.DEVELOPMENT,
    ),
    OutputTarget(
      format=ModuleFormat.UMD,
      file=_resolve(base_dir, manifest.unpkg),
      sourcemap=True,
      env=BuildEnv.PRODUCTION,
    ),
  ]


def _enrich(target: OutputTarget, manifest: Manifest) -> OutputTarget:
  extra = {
    "exports": ExportsMode.NAMED if target.format == ModuleFormat.ESM else ExportsMode.AUTO,
  }

  if target.format == ModuleFormat.UMD:
    extra["name"] = name_to_pascal_case(manifest.name)
    extra["globals"] = MappingProxyType({dep: name_to_pascal_case(dep) for dep in manifest.peer_dependencies})
    extra["indent"] = False

  return target.model_copy(update=extra)


def get_output(manifest: Manifest, base_dir: str) -> List[OutputTarget]:
  """
  Derives the ordered bundle outputs for a package.

  Order is fixed: main (cjs), module (esm), browser overrides, unpkg
  development (umd), unpkg production (umd). Branches whose manifest field is
  absent contribute nothing.

  Args:
      manifest (Manifest): The package manifest. ``main`` must be set.
      base_dir (str): Absolute directory the manifest paths are relative to.

  Returns:
      List[OutputTarget]: A freshly built list of immutable targets.

  Raises:
      TypeError: If ``main`` is missing (validated upstream by the loader), a
          browser override is not a path string, or a UMD target has no package name.
      ValueError: If a UMD target is derived and the package name is invalid.
  """
  candidates: List[Optional[OutputTarget]] = [
    _main_target(manifest, base_dir),
    _module_target(manifest, base_dir),
    *_browser_targets(manifest, base_dir),
    *_unpkg_targets(manifest, base_dir),
  ]

  return [_enrich(target, manifest) for target in candidates if target is not None]
