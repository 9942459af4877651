"""
Lint Command Handler.

Loads ESTree JSON dumps produced by an external JavaScript/TypeScript parser,
runs the selected rule over each compilation unit and reports the findings
as a Rich table or as JSON.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from rich.table import Table

from neverthrow_lint.config import LintConfig
from neverthrow_lint.diagnostics import Diagnostic
from neverthrow_lint.rules import MUST_USE_RESULT, get_rule, qualified_name
from neverthrow_lint.syntax.estree import MalformedTreeError, load_tree
from neverthrow_lint.utils.console import console, log_error, log_info, log_success


def collect_inputs(paths: List[Path]) -> Tuple[List[Path], List[Path]]:
  """
  Expands input paths into the list of tree files to lint.

  Directories are searched recursively for ``*.json``.

  Args:
      paths: Files or directories given on the command line.

  Returns:
      Tuple[List[Path], List[Path]]: (files found, paths that do not exist).
  """
  files: List[Path] = []
  missing: List[Path] = []

  for path in paths:
    if not path.exists():
      missing.append(path)
    elif path.is_dir():
      files.extend(sorted(path.rglob("*.json")))
    else:
      files.append(path)

  return files, missing


def handle_lint(
  paths: List[Path],
  rule_id: str = MUST_USE_RESULT,
  json_mode: bool = False,
  target_module: Optional[str] = None,
) -> int:
  """
  Lints every ESTree file under ``paths``.

  Args:
      paths: Input files or directories.
      rule_id: Identifier of the rule to run.
      json_mode: If True, print a JSON array to stdout instead of a table.
      target_module: Override for the tracked module (default from pyproject.toml).

  Returns:
      int: Exit code (0 if clean, 1 if findings or load errors occurred).
  """
  try:
    config = LintConfig.load(target_module=target_module)
  except ValueError as e:
    log_error(str(e))
    return 1

  rule = get_rule(rule_id, config)
  if rule is None:
    log_error(f"Unknown rule: '{rule_id}'")
    return 1

  files, missing = collect_inputs(paths)
  for path in missing:
    log_error(f"Path not found: {path}")

  if not json_mode:
    log_info(f"Linting {len(files)} file(s) with [rule]{qualified_name(rule_id)}[/rule]...")

  results: Dict[Path, List[Diagnostic]] = {}
  failures = len(missing)

  for f in files:
    try:
      tree = load_tree(f)
    except (OSError, MalformedTreeError) as e:
      log_error(f"Failed to load {f}: {e}")
      failures += 1
      continue
    results[f] = rule.check(tree)

  total = sum(len(diags) for diags in results.values())

  if json_mode:
    output = []
    for f, diags in results.items():
      for diag in diags:
        item = {"file": str(f)}
        item.update(diag.to_dict())
        item["rule"] = qualified_name(diag.rule)
        output.append(item)
    print(json.dumps(output, indent=2))
    return 1 if total or failures else 0

  if total:
    _render_table(results)
    console.print(f"[bold red]{total} problem(s)[/bold red] in {sum(1 for d in results.values() if d)} file(s)")
  elif not failures:
    log_success(f"No unhandled Results in {len(results)} file(s).")

  return 1 if total or failures else 0


def _render_table(results: Dict[Path, List[Diagnostic]]) -> None:
  table = Table(title="Unhandled Results")
  table.add_column("Location", style="cyan")
  table.add_column("Rule", style="magenta")
  table.add_column("Message")

  for f, diags in results.items():
    for diag in diags:
      location = str(f)
      if diag.line is not None:
        location += f":{diag.line}:{diag.column or 0}"
      table.add_row(location, qualified_name(diag.rule), diag.message)

  console.print(table)
