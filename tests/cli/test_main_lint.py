"""
Tests for the CLI 'lint' and 'rules' commands.

Verifies:
1. Argument parsing dispatches to the handlers facade.
2. Exit codes reflect findings and load failures.
3. `lint --json` prints a machine-readable list.
4. Human output is a Rich table routed through the console proxy.
"""

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from neverthrow_lint.cli.__main__ import main
from neverthrow_lint.cli.handlers.lint import collect_inputs, handle_lint
from neverthrow_lint.utils.console import set_console
from estree_helpers import at, call, expr, method, neverthrow_import, program


@pytest.fixture
def workspace(tmp_path, monkeypatch):
  """Runs each test from an empty directory so no pyproject.toml is picked up."""
  monkeypatch.chdir(tmp_path)
  return tmp_path


@pytest.fixture
def recorded():
  capture = Console(record=True, width=240, file=io.StringIO())
  set_console(capture)
  yield capture


def _write(path: Path, *statements) -> Path:
  path.parent.mkdir(parents=True, exist_ok=True)
  path.write_text(json.dumps(program(neverthrow_import(), *statements)), encoding="utf-8")
  return path


@patch("neverthrow_lint.cli.commands.handle_lint")
def test_lint_dispatch_defaults(mock_handle):
  mock_handle.return_value = 0

  assert main(["lint", "src/"]) == 0

  mock_handle.assert_called_once()
  args = mock_handle.call_args[0]
  assert args[0] == [Path("src/")]
  assert args[1] == "must-use-result"
  assert args[2] is False
  assert args[3] is None


@patch("neverthrow_lint.cli.commands.handle_lint")
def test_lint_dispatch_options(mock_handle):
  mock_handle.return_value = 1

  assert main(["lint", "a.json", "b.json", "--json", "--target-module", "@acme/result"]) == 1

  args = mock_handle.call_args[0]
  assert args[0] == [Path("a.json"), Path("b.json")]
  assert args[2] is True
  assert args[3] == "@acme/result"


def test_unknown_rule_is_rejected_by_parser():
  with pytest.raises(SystemExit):
    main(["lint", "a.json", "--rule", "no-such-rule"])


def test_clean_file_exits_zero(workspace, recorded):
  path = _write(workspace / "clean.json", expr(method(call("ok", "x"), "unwrapOr", "d")))

  assert main(["lint", str(path)]) == 0
  assert "No unhandled Results" in recorded.export_text()


def test_findings_exit_one_and_render_table(workspace, recorded):
  _write(workspace / "dirty.json", expr(at(call("ok", "x"), 3, 0)), expr(at(call("err", "y"), 4, 2)))

  # Relative path keeps the Location column narrow.
  assert main(["lint", "dirty.json"]) == 1

  output = recorded.export_text()
  assert "Unhandled Results" in output
  assert "neverthrow/must-use-result" in output
  assert "dirty.json:3:0" in output
  assert "dirty.json:4:2" in output
  assert "2 problem(s)" in output


def test_json_output(workspace, capsys):
  path = _write(workspace / "dirty.json", expr(at(call("ok", "x"), 3, 0)))

  ret = handle_lint([path], json_mode=True)

  assert ret == 1
  data = json.loads(capsys.readouterr().out)
  assert data == [
    {
      "file": str(path),
      "rule": "neverthrow/must-use-result",
      "message": "Result must be handled with either match, unwrapOr, or _unsafeUnwrap",
      "node": "CallExpression",
      "line": 3,
      "column": 0,
    }
  ]


def test_json_output_suppresses_progress_logs(workspace, capsys):
  path = _write(workspace / "clean.json", expr(method(call("ok", "x"), "match", "f", "g")))

  with patch("neverthrow_lint.cli.handlers.lint.log_info") as mock_log:
    assert handle_lint([path], json_mode=True) == 0
    mock_log.assert_not_called()

  assert json.loads(capsys.readouterr().out) == []


def test_directory_input_is_searched_recursively(workspace, recorded):
  _write(workspace / "trees" / "a.json", expr(call("ok", "x")))
  _write(workspace / "trees" / "nested" / "b.json", expr(call("err", "y")))
  (workspace / "trees" / "notes.txt").write_text("ignored", encoding="utf-8")

  assert main(["lint", str(workspace / "trees")]) == 1
  assert "2 problem(s) in 2 file(s)" in recorded.export_text()


def test_missing_path_fails(workspace, recorded):
  assert main(["lint", str(workspace / "absent.json")]) == 1
  assert "Path not found" in recorded.export_text()


def test_malformed_file_fails_but_others_are_checked(workspace, recorded):
  bad = workspace / "bad.json"
  bad.write_text('{"type": "Program", "body": [{"type": "CallExpression"}]}', encoding="utf-8")
  good = _write(workspace / "good.json", expr(call("ok", "x")))

  assert main(["lint", str(bad), str(good)]) == 1

  output = recorded.export_text()
  assert "Failed to load" in output
  assert "callee" in output
  assert "1 problem(s)" in output


def test_target_module_from_pyproject(workspace, recorded):
  (workspace / "pyproject.toml").write_text('[tool.neverthrow_lint]\ntarget_module = "@acme/result"\n', encoding="utf-8")
  path = _write(workspace / "unit.json", expr(call("ok", "x")))

  # Factories imported from "neverthrow" are no longer tracked.
  assert main(["lint", str(path)]) == 0


def test_invalid_pyproject_fails(workspace, recorded):
  (workspace / "pyproject.toml").write_text("[tool.neverthrow_lint\n", encoding="utf-8")
  path = _write(workspace / "unit.json", expr(call("ok", "x")))

  assert main(["lint", str(path)]) == 1
  assert "Could not parse" in recorded.export_text()


def test_collect_inputs(workspace):
  _write(workspace / "x" / "one.json")
  single = _write(workspace / "two.json")

  files, missing = collect_inputs([workspace / "x", single, workspace / "nope"])

  assert files == [workspace / "x" / "one.json", single]
  assert missing == [workspace / "nope"]


def test_rules_command(recorded):
  assert main(["rules"]) == 0

  output = recorded.export_text()
  assert "neverthrow/must-use-result" in output
  assert "Plugin: neverthrow" in output
