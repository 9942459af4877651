"""CLI handlers for rule discovery."""

from rich.table import Table

from neverthrow_lint.rules import PLUGIN_NAME, available_rules, get_rule, qualified_name
from neverthrow_lint.utils.console import console


def handle_rules() -> int:
  """Handles 'rules' command."""
  table = Table(title=f"Plugin: {PLUGIN_NAME}")
  table.add_column("Rule", style="magenta")
  table.add_column("Description")

  for rule_id in available_rules():
    rule = get_rule(rule_id)
    table.add_row(qualified_name(rule_id), getattr(rule, "description", ""))

  console.print(table)
  return 0
