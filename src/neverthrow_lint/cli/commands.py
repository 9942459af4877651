"""
CLI Command Handlers Facade.

Re-exports the handlers from `neverthrow_lint.cli.handlers` so the dispatcher
and tests have a single patch target.
"""

from neverthrow_lint.cli.handlers.lint import handle_lint, collect_inputs
from neverthrow_lint.cli.handlers.rules import handle_rules

__all__ = [
  "collect_inputs",
  "handle_lint",
  "handle_rules",
]
