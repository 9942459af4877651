"""
Lint Rules Package.

Importing this package registers the bundled rules under the ``neverthrow``
plugin:

    - ``must-use-result``: Results must be resolved, returned, or delegated.
"""

from neverthrow_lint.rules.base import (
  PLUGIN_NAME,
  LintRule,
  available_rules,
  get_rule,
  qualified_name,
  register_rule,
)
from neverthrow_lint.rules.must_use_result import RULE_ID as MUST_USE_RESULT, MustUseResultRule

__all__ = [
  "MUST_USE_RESULT",
  "PLUGIN_NAME",
  "LintRule",
  "MustUseResultRule",
  "available_rules",
  "get_rule",
  "qualified_name",
  "register_rule",
]
