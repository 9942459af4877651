"""
The ``must-use-result`` Rule.

Enforces that neverthrow Results are resolved with ``match``, ``unwrapOr`` or
``_unsafeUnwrap`` instead of being dropped. Detection is syntactic:

1.  **Imports** from the target module are recorded so that factory calls
    (``ok``, ``err``, ``okAsync``, ``errAsync``) are only flagged when they really
    come from neverthrow, aliases included.
2.  **Producers** are classified by ``NodeClassifier``: ``new Ok/Err``, bound
    factory calls, and calls whose name mentions ``result``.
3.  **Exemptions**: a producer that is returned / forms an arrow body
    (``is_delegated``) or is resolved by its own method chain
    (``is_immediately_handled``) is not reported.

.. code-block:: javascript

    ok("value");                              // reported
    ok("value").map(f).unwrapOr("");          // fine
    const get = () => ok("value");            // fine (delegated)
"""

from typing import List, Optional, Set

from neverthrow_lint.analysis.chain import is_immediately_handled
from neverthrow_lint.analysis.classifier import NodeClassifier
from neverthrow_lint.analysis.context import is_delegated
from neverthrow_lint.analysis.imports import ImportRegistry
from neverthrow_lint.config import LintConfig
from neverthrow_lint.diagnostics import MUST_USE_RESULT_MESSAGE, Diagnostic
from neverthrow_lint.rules.base import register_rule
from neverthrow_lint.syntax.nodes import SyntaxNode
from neverthrow_lint.syntax.visitor import SyntaxVisitor

RULE_ID = "must-use-result"


class _UnitChecker(SyntaxVisitor):
  """
  Single forward traversal over one compilation unit.

  Owns the unit's ``ImportRegistry``; nothing here outlives the traversal.
  """

  def __init__(self, config: LintConfig) -> None:
    super().__init__()
    self.registry = ImportRegistry(config.target_module)
    self.classifier = NodeClassifier(self.registry, config)
    self.diagnostics: List[Diagnostic] = []
    self._seen: Set[int] = set()

  def visit_Program(self, node: SyntaxNode) -> None:
    self.registry.reset()

  def visit_ImportDeclaration(self, node: SyntaxNode) -> None:
    self.registry.record(node)

  def visit_CallExpression(self, node: SyntaxNode) -> None:
    self._check_producer(node)

  def visit_NewExpression(self, node: SyntaxNode) -> None:
    self._check_producer(node)

  def _check_producer(self, node: SyntaxNode) -> None:
    if id(node) in self._seen:
      return
    self._seen.add(id(node))

    if not self.classifier.classify(node).is_producing:
      return
    if is_delegated(node):
      return
    if is_immediately_handled(node, self.classifier):
      return

    self.diagnostics.append(Diagnostic(anchor=node, message=MUST_USE_RESULT_MESSAGE, rule=RULE_ID))


@register_rule(RULE_ID)
class MustUseResultRule:
  """
  Lint rule reporting Results that are neither handled, returned nor passed up
  through an arrow-function body.

  Each ``check`` call runs with a fresh import registry, so one instance can
  serve many compilation units, including from independent threads.
  """

  name = RULE_ID
  description = "Results must be handled with match, unwrapOr or _unsafeUnwrap."

  def __init__(self, config: Optional[LintConfig] = None) -> None:
    self.config = config or LintConfig()

  def check(self, tree: SyntaxNode) -> List[Diagnostic]:
    """
    Analyses one compilation unit.

    Args:
        tree: Root node of the unit (usually a ``Program``).

    Returns:
        List[Diagnostic]: One diagnostic per unhandled producer, in document order.
    """
    checker = _UnitChecker(self.config)
    checker.visit(tree)
    return checker.diagnostics
