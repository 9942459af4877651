"""
Method Chain Analysis.

Decides whether a producing call is resolved on the spot by a handling method,
possibly through any number of transforming steps:

.. code-block:: javascript

    ok(x).unwrapOr(d);                        // handled
    ok(x).map(f).andThen(g).match(h, k);      // handled
    ok(x).map(f).isOk();                      // not handled

The walk follows parent links from the producing node and never re-traverses
the tree.
"""

from neverthrow_lint.analysis.classifier import NodeClassifier
from neverthrow_lint.enums import NodeCategory, NodeType
from neverthrow_lint.syntax.nodes import SyntaxNode


def is_immediately_handled(node: SyntaxNode, classifier: NodeClassifier) -> bool:
  """
  Checks whether ``node`` is terminated by an invoked handling method.

  Walk rules, applied at each parent:

  * ``MemberExpression`` with the current node as receiver: a handling method
    that is actually called succeeds; a transforming method continues the walk;
    anything else fails.
  * ``CallExpression``: the call consumes the current step, continue from it.
  * Anything else fails.

  Args:
      node: A producing ``CallExpression`` or ``NewExpression``.
      classifier: Classifier providing the method name sets.

  Returns:
      bool: True if the Result is resolved within the same expression chain.
  """
  current = node
  parent = node.parent

  while parent is not None:
    if parent.type == NodeType.MEMBER_EXPRESSION.value:
      if parent.get("object") is not current:
        return False

      category = classifier.classify_member(parent)
      if category is NodeCategory.HANDLING_METHOD_CALL:
        return _is_invoked(parent)
      if category is not NodeCategory.TRANSFORMING_METHOD_CALL:
        return False

    elif parent.type != NodeType.CALL_EXPRESSION.value:
      return False

    current, parent = parent, parent.parent

  return False


def _is_invoked(member: SyntaxNode) -> bool:
  # `ok(x).unwrapOr` alone is a reference, not a call.
  call = member.parent
  return call is not None and call.type == NodeType.CALL_EXPRESSION.value and call.get("callee") is member
