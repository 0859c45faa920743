"""
Enumerations for pectin.

Module formats, export modes and build environments shared by the output
derivation engine and the CLI renderers.
"""

from enum import Enum


class ModuleFormat(str, Enum):
  """
  Bundle module formats a package can ship.
  """

  CJS = "cjs"
  ESM = "esm"
  UMD = "umd"  # Global script + AMD/CommonJS loader wrapper


class ExportsMode(str, Enum):
  """
  Export interop mode passed through to the bundler.
  """

  AUTO = "auto"
  NAMED = "named"


class BuildEnv(str, Enum):
  """
  Environment tag for the CDN (unpkg) builds.
  """

  DEVELOPMENT = "development"
  PRODUCTION = "production"


class OutputStyle(str, Enum):
  """
  Rendering style for CLI output.
  """

  JSON = "json"
  TABLE = "table"
