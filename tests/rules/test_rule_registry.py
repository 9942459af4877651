"""
Tests for the rule registry and plugin metadata.
"""

from neverthrow_lint.config import LintConfig
from neverthrow_lint.rules import (
  MUST_USE_RESULT,
  PLUGIN_NAME,
  MustUseResultRule,
  available_rules,
  get_rule,
  qualified_name,
)
from neverthrow_lint.rules.base import _RULE_REGISTRY, register_rule


def test_plugin_metadata():
  assert PLUGIN_NAME == "neverthrow"
  assert MUST_USE_RESULT == "must-use-result"
  assert qualified_name(MUST_USE_RESULT) == "neverthrow/must-use-result"


def test_must_use_result_is_registered():
  assert MUST_USE_RESULT in available_rules()

  rule = get_rule(MUST_USE_RESULT)

  assert isinstance(rule, MustUseResultRule)
  assert rule.name == MUST_USE_RESULT
  assert rule.config == LintConfig()


def test_get_rule_passes_config():
  config = LintConfig(target_module="@acme/result")

  assert get_rule(MUST_USE_RESULT, config).config is config


def test_unknown_rule():
  assert get_rule("no-such-rule") is None


def test_register_custom_rule():
  @register_rule("always-clean")
  class AlwaysClean:
    name = "always-clean"
    description = "Never reports anything."

    def __init__(self, config=None):
      self.config = config

    def check(self, tree):
      return []

  try:
    assert "always-clean" in available_rules()
    assert isinstance(get_rule("always-clean"), AlwaysClean)
  finally:
    _RULE_REGISTRY.pop("always-clean", None)
