"""
Tests for the pectin CLI.

Verifies that:
1. `config` prints the bundler configuration as JSON.
2. `targets` prints only the output targets and supports table rendering.
3. `name` prints normalized global names.
4. Manifest errors are reported and mapped to exit code 1.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from pectin.cli.__main__ import main
from pectin.config import RuntimeConfig
from pectin.utils.console import set_console


def test_config_command_json(write_manifest, tmp_path, capsys):
  pkg_path = write_manifest({"name": "pkg-module", "main": "dist/index.js", "module": "dist/index.module.js"})

  ret_code = main(["config", str(pkg_path)])

  assert ret_code == 0
  data = json.loads(capsys.readouterr().out)
  assert data["input"] == str(tmp_path / "src" / "index.js")
  assert [o["format"] for o in data["output"]] == ["cjs", "esm"]
  assert data["output"][1]["exports"] == "named"
  assert data["plugins"][-1] == "commonjs"


def test_targets_command_json(write_manifest, tmp_path, capsys):
  pkg_path = write_manifest({"name": "@scope/widget", "main": "dist/index.js", "unpkg": "dist/widget.min.js"})

  ret_code = main(["targets", str(pkg_path)])

  assert ret_code == 0
  data = json.loads(capsys.readouterr().out)
  assert [o.get("env") for o in data] == [None, "development", "production"]
  assert data[1]["file"] == str(tmp_path / "dist" / "widget.dev.js")
  assert data[2]["name"] == "Widget"


def test_targets_command_table(write_manifest):
  """
  Scenario: User requests table output.
  Expectation: Rich table lists each target's format and global name.
  """
  pkg_path = write_manifest({"name": "widget", "main": "dist/index.js", "unpkg": "dist/widget.min.js"})
  capture = Console(record=True, width=400)
  set_console(capture)

  ret_code = main(["targets", str(pkg_path), "--format", "table"])

  assert ret_code == 0
  text = capture.export_text()
  assert "umd" in text
  assert "Widget" in text
  assert "production" in text


def test_config_command_table(write_manifest):
  pkg_path = write_manifest({"name": "widget", "main": "dist/index.js"})
  capture = Console(record=True, width=400)
  set_console(capture)

  assert main(["config", str(pkg_path), "--format", "table"]) == 0

  text = capture.export_text()
  assert "main-entry -> subpath-externals" in text
  assert "cjs" in text


def test_options_key_and_root_dir_flags(write_manifest, tmp_path, capsys):
  pkg_path = write_manifest({"main": "dist/index.js", "bundle": {"input": "app.js"}})

  assert main(["config", str(pkg_path), "--options-key", "bundle"]) == 0
  assert json.loads(capsys.readouterr().out)["input"] == str(tmp_path / "app.js")

  assert main(["config", str(pkg_path), "--root-dir", "lib"]) == 0
  assert json.loads(capsys.readouterr().out)["input"] == str(tmp_path / "lib" / "index.js")


def test_missing_main_returns_error(write_manifest):
  pkg_path = write_manifest({"name": "no-pkg-main"})
  capture = Console(record=True, width=400)
  set_console(capture)

  ret_code = main(["config", str(pkg_path)])

  assert ret_code == 1
  assert "required field 'main' missing" in capture.export_text()


def test_missing_file_returns_error(tmp_path):
  set_console(Console(record=True, width=400))

  assert main(["targets", str(tmp_path / "nope" / "package.json")]) == 1


def test_invalid_json_returns_error(tmp_path):
  pkg_path = tmp_path / "package.json"
  pkg_path.write_text("{not json", encoding="utf-8")
  set_console(Console(record=True, width=400))

  assert main(["config", str(pkg_path)]) == 1


def test_invalid_options_key_returns_error(write_manifest):
  pkg_path = write_manifest({"main": "dist/index.js"})
  set_console(Console(record=True, width=400))

  assert main(["config", str(pkg_path), "--options-key", "a..b"]) == 1


def test_name_command(capsys):
  ret_code = main(["name", "@myscope/my-cool-pkg", "simple"])

  assert ret_code == 0
  lines = capsys.readouterr().out.strip().splitlines()
  assert lines == ["@myscope/my-cool-pkg\tMyCoolPkg", "simple\tSimple"]


def test_name_command_invalid():
  set_console(Console(record=True, width=400))

  assert main(["name", "_bad"]) == 1


@patch("pectin.cli.commands.handle_config")
def test_config_dispatch_defaults(mock_handle, tmp_path, monkeypatch):
  """
  Scenario: User runs `pectin config` with no arguments.
  Expectation: Handler receives ./package.json and the default config.
  """
  monkeypatch.chdir(tmp_path)
  mock_handle.return_value = 0

  assert main(["config"]) == 0

  mock_handle.assert_called_once()
  pkg_path, config = mock_handle.call_args[0]
  assert pkg_path == Path("package.json")
  assert isinstance(config, RuntimeConfig)
  assert config.options_key == "rollup"


def test_version(capsys):
  with pytest.raises(SystemExit) as excinfo:
    main(["--version"])

  assert excinfo.value.code == 0
  assert "0.1.0" in capsys.readouterr().out


@pytest.mark.parametrize("command", ["config", "targets"])
def test_unnamed_umd_manifest_returns_error(write_manifest, command):
  """
  Scenario: Manifest sets `unpkg` but no `name`.
  Expectation: Error logged, exit code 1, no traceback.
  """
  pkg_path = write_manifest({"main": "dist/index.js", "unpkg": "dist/x.min.js"})
  capture = Console(record=True, width=400)
  set_console(capture)

  assert main([command, str(pkg_path)]) == 1
  assert "Package name must be a string" in capture.export_text()
