"""
Delegation Context Analysis.

A Result that is returned to the caller is not the current function's
responsibility. This module decides, purely syntactically, whether a producing
node sits in such a delegated position:

1.  **Return operand**: ``return ok(x)``, ``return wrap(ok(x).map(f))``.
2.  **Expression-bodied arrow**: ``() => ok(x)``, ``x => foo(ok(x))``.

The upward walk stops at the nearest function or block boundary, so a call
inside an ``if``/loop body is never delegated by a return elsewhere in the
enclosing function.
"""

from neverthrow_lint.enums import NodeType
from neverthrow_lint.syntax.nodes import SyntaxNode

_BOUNDARIES = (
  NodeType.FUNCTION_DECLARATION.value,
  NodeType.FUNCTION_EXPRESSION.value,
  NodeType.BLOCK_STATEMENT.value,
)


def is_delegated(node: SyntaxNode) -> bool:
  """
  Checks whether ``node`` is returned or forms the body of an arrow function.

  Args:
      node: A producing ``CallExpression`` or ``NewExpression``.

  Returns:
      bool: True if handling responsibility passes to the caller.
  """
  child = node
  current = node.parent

  while current is not None:
    if current.type == NodeType.RETURN_STATEMENT.value:
      return True

    if current.type == NodeType.ARROW_FUNCTION_EXPRESSION.value:
      body = current.get("body")
      if body is child and body.type != NodeType.BLOCK_STATEMENT.value:
        return True

    if current.type in _BOUNDARIES:
      return False

    child, current = current, current.parent

  return False
