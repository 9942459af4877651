"""
Syntax Tree Visitor.

A minimal visitor in the style of ``ast.NodeVisitor``: subclasses declare
``visit_<Type>`` methods (e.g. ``visit_CallExpression``) and ``visit`` dispatches
every node of the tree to the matching method in document order.
"""

from typing import Callable, Dict, Optional

from neverthrow_lint.syntax.nodes import SyntaxNode


class SyntaxVisitor:
  """
  Base class for single-pass, forward tree traversals.
  """

  def __init__(self) -> None:
    self._dispatch: Dict[str, Optional[Callable[[SyntaxNode], None]]] = {}

  def visit(self, tree: SyntaxNode) -> None:
    """
    Traverses ``tree`` and dispatches each node to its ``visit_<Type>`` handler.

    Args:
        tree: Root of the subtree to traverse.
    """
    for node in tree.walk():
      handler = self._handler_for(node.type)
      if handler is not None:
        handler(node)

  def _handler_for(self, node_type: str) -> Optional[Callable[[SyntaxNode], None]]:
    if node_type not in self._dispatch:
      self._dispatch[node_type] = getattr(self, f"visit_{node_type}", None)
    return self._dispatch[node_type]
