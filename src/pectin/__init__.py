"""
pectin Package.

Derives bundler configuration (entry module, ordered output targets, plugin
names) from a package's ``package.json``. The derivation is deterministic and
performs no bundling.

Usage
-----

From a manifest on disk
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import pectin
    config = pectin.pectin_core("packages/widget/package.json")
    print(config.to_rollup())

From an in-memory manifest
^^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from pectin import Manifest, get_output

    manifest = Manifest(name="@acme/widget", main="dist/index.js", unpkg="dist/widget.min.js")
    for target in get_output(manifest, "/repo/packages/widget"):
        print(target.format, target.file or target.dir)
"""

__version__ = "0.1.0"

from pectin.config import RuntimeConfig
from pectin.core import BuildConfig, create_config, create_multi_config, get_input, get_plugins, pectin_core
from pectin.enums import BuildEnv, ExportsMode, ModuleFormat
from pectin.manifest import BuildOptions, Manifest, load_manifest, parse_manifest
from pectin.naming import name_to_pascal_case, safe_name, to_pascal_case
from pectin.output import OutputTarget, get_output

__all__ = [
  "BuildConfig",
  "BuildEnv",
  "BuildOptions",
  "ExportsMode",
  "Manifest",
  "ModuleFormat",
  "OutputTarget",
  "RuntimeConfig",
  "__version__",
  "create_config",
  "create_multi_config",
  "get_input",
  "get_output",
  "get_plugins",
  "load_manifest",
  "name_to_pascal_case",
  "parse_manifest",
  "pectin_core",
  "safe_name",
  "to_pascal_case",
]
