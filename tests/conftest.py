"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A factory fixture writing package.json fixtures into a temp directory.
- Console/logging isolation so handler swaps do not leak between tests.
"""

import json
import sys
import pytest
from pathlib import Path
from typing import Any, Callable, Dict

# Add src to path so we can import 'pectin' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from pectin.utils.console import reset_console  # noqa: E402


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[..., Path]:
  """
  Returns a factory that writes a package.json and returns its path.

  The optional ``subdir`` argument places the manifest in a nested package
  directory (monorepo layout).
  """

  def _write(content: Dict[str, Any], subdir: str = "") -> Path:
    pkg_dir = tmp_path / subdir if subdir else tmp_path
    pkg_dir.mkdir(parents=True, exist_ok=True)
    pkg_path = pkg_dir / "package.json"
    pkg_path.write_text(json.dumps(content), encoding="utf-8")
    return pkg_path

  return _write


@pytest.fixture(autouse=True)
def isolate_console():
  """
  Restores the default console and INFO log level after each test.
  """
  yield
  reset_console()
