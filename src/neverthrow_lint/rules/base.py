"""
Base Protocol and Registry for Lint Rules.

Rules register themselves under a stable identifier with ``@register_rule``.
The host (CLI or an embedding application) looks them up by id, instantiates
them with a ``LintConfig`` and calls ``check`` once per compilation unit.
"""

from typing import Dict, List, Optional, Protocol, Type

from neverthrow_lint.config import LintConfig
from neverthrow_lint.diagnostics import Diagnostic
from neverthrow_lint.syntax.nodes import SyntaxNode

PLUGIN_NAME = "neverthrow"


class LintRule(Protocol):
  """
  Interface every rule implements.
  """

  name: str
  description: str

  def __init__(self, config: Optional[LintConfig] = None) -> None: ...

  def check(self, tree: SyntaxNode) -> List[Diagnostic]:
    """
    Analyses one compilation unit.

    Args:
        tree: Root node of the unit.

    Returns:
        List[Diagnostic]: Findings in traversal order.
    """
    ...


_RULE_REGISTRY: Dict[str, Type[LintRule]] = {}


def register_rule(name: str):
  def wrapper(cls):
    _RULE_REGISTRY[name] = cls
    return cls

  return wrapper


def get_rule(name: str, config: Optional[LintConfig] = None) -> Optional[LintRule]:
  cls = _RULE_REGISTRY.get(name)
  if cls:
    return cls(config)
  return None


def available_rules() -> List[str]:
  """
  Returns the ids of all registered rules, sorted.

  Returns:
      List[str]: Rule identifiers (e.g. ``["must-use-result"]``).
  """
  return sorted(_RULE_REGISTRY.keys())


def qualified_name(rule_id: str) -> str:
  """
  Prefixes a rule id with the plugin name, as lint hosts display it.

  Args:
      rule_id: Bare rule identifier.

  Returns:
      str: e.g. ``"neverthrow/must-use-result"``.
  """
  return f"{PLUGIN_NAME}/{rule_id}"
