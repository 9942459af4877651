"""
Main Entry Point for neverthrow-lint CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `neverthrow_lint.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from neverthrow_lint.cli import commands
from neverthrow_lint.rules import MUST_USE_RESULT, available_rules
from neverthrow_lint import __version__


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="neverthrow-lint: Unhandled Result detection for ESTree syntax trees")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: LINT ---
  cmd_lint = subparsers.add_parser("lint", help="Check ESTree JSON files for unhandled Results")
  cmd_lint.add_argument("paths", nargs="+", type=Path, help="ESTree JSON files or directories")
  cmd_lint.add_argument(
    "--rule",
    default=MUST_USE_RESULT,
    choices=available_rules(),
    help=f"Rule to run (default: {MUST_USE_RESULT})",
  )
  cmd_lint.add_argument("--json", action="store_true", help="Print findings as JSON to stdout")
  cmd_lint.add_argument(
    "--target-module",
    default=None,
    help="Module whose imports define Result factories (default: from toml, else 'neverthrow')",
  )

  # --- Command: RULES ---
  subparsers.add_parser("rules", help="List available rules")

  args = parser.parse_args(argv)

  if args.command == "lint":
    return commands.handle_lint(args.paths, args.rule, args.json, args.target_module)

  elif args.command == "rules":
    return commands.handle_rules()

  return 0


if __name__ == "__main__":
  sys.exit(main())
