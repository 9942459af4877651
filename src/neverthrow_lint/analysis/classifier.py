"""
Node Classification.

This module provides the ``NodeClassifier``, which sorts call-like and
member-access nodes into the closed set of ``NodeCategory`` values using only
literal names and import provenance (no type information):

1.  **ConstructorCall**: ``new Ok(..)`` / ``new Err(..)``. Name only.
2.  **FactoryCall**: ``ok(..)``, ``err(..)``, ``okAsync(..)``, ``errAsync(..)`` whose
    callee is bound by an import from the target module (aliases included).
3.  **HeuristicCall**: any other bare call whose name contains ``result``
    (case-insensitive) and is not a known helper.
4.  **HandlingMethodCall**: ``.match``, ``.unwrapOr``, ``._unsafeUnwrap``.
5.  **TransformingMethodCall**: ``.map``, ``.mapErr``, ``.andThen``, ``.orElse``,
    ``.asyncAndThen``, ``.asyncMap``, ``.isOk``, ``.isErr``.

The module also exposes stateless helpers for method-name extraction and
Result method-chain detection.
"""

from typing import Optional

from neverthrow_lint.analysis.imports import ImportRegistry
from neverthrow_lint.config import LintConfig
from neverthrow_lint.enums import NodeCategory, NodeType
from neverthrow_lint.syntax.nodes import SyntaxNode

# Export names of the neverthrow package.
NEVERTHROW_IMPORTS = (
  "Result",
  "Ok",
  "Err",
  "ok",
  "err",
  "ResultAsync",
  "okAsync",
  "errAsync",
)


class NodeClassifier:
  """
  Assigns a ``NodeCategory`` to syntax nodes.

  Attributes:
      config (LintConfig): Name sets to classify against.
      registry (ImportRegistry): Import bindings of the current compilation unit.
  """

  def __init__(self, registry: ImportRegistry, config: Optional[LintConfig] = None) -> None:
    self.config = config or LintConfig()
    self.registry = registry
    self._constructors = frozenset(self.config.constructor_names)
    self._factories = frozenset(self.config.factory_names)
    self._handlers = frozenset(self.config.handling_methods)
    self._transformers = frozenset(self.config.transforming_methods)
    self._exclusions = frozenset(self.config.heuristic_exclusions)
    self._token = self.config.heuristic_token.lower()

  def classify(self, node: SyntaxNode) -> NodeCategory:
    """
    Determines the category of a node.

    Args:
        node: Any syntax node. Only ``NewExpression``, ``CallExpression`` and
            ``MemberExpression`` can receive a category other than OTHER.

    Returns:
        NodeCategory: The first matching category in precedence order.
    """
    if node.type == NodeType.NEW_EXPRESSION.value:
      return self._classify_new(node)
    if node.type == NodeType.CALL_EXPRESSION.value:
      return self._classify_call(node)
    if node.type == NodeType.MEMBER_EXPRESSION.value:
      return self.classify_member(node)
    return NodeCategory.OTHER

  def classify_member(self, node: SyntaxNode) -> NodeCategory:
    """
    Categorizes a member access by its property name.

    Args:
        node: A ``MemberExpression`` node.

    Returns:
        NodeCategory: HANDLING_METHOD_CALL, TRANSFORMING_METHOD_CALL or OTHER.
    """
    method = get_method_name(node)
    if method is None:
      return NodeCategory.OTHER
    if method in self._handlers:
      return NodeCategory.HANDLING_METHOD_CALL
    if method in self._transformers:
      return NodeCategory.TRANSFORMING_METHOD_CALL
    return NodeCategory.OTHER

  def _classify_new(self, node: SyntaxNode) -> NodeCategory:
    name = _callee_name(node)
    if name is not None and name in self._constructors:
      return NodeCategory.CONSTRUCTOR_CALL
    return NodeCategory.OTHER

  def _classify_call(self, node: SyntaxNode) -> NodeCategory:
    name = _callee_name(node)
    if name is None:
      return NodeCategory.OTHER

    if self.registry.is_bound(name):
      if name in self._factories or self.registry.imported_name(name) in self._factories:
        return NodeCategory.FACTORY_CALL

    # Same-named functions from unrelated modules are not Result producers.
    if name in self._factories:
      return NodeCategory.OTHER

    if self._token in name.lower() and name not in self._exclusions:
      return NodeCategory.HEURISTIC_CALL

    return NodeCategory.OTHER


def _callee_name(node: SyntaxNode) -> Optional[str]:
  callee = node.get("callee")
  if callee is not None and callee.type == NodeType.IDENTIFIER.value:
    return callee.get("name")
  return None


def get_method_name(node: SyntaxNode) -> Optional[str]:
  """
  Extracts the method name from a member expression like ``obj.methodName``.

  Computed access with a string literal (``obj["match"]``) is resolved too;
  computed access through a variable (``obj[key]``) is not.

  Args:
      node: The node to inspect.

  Returns:
      Optional[str]: The property name, or None if not statically known.
  """
  if node.type != NodeType.MEMBER_EXPRESSION.value:
    return None

  prop = node.get("property")
  if prop is None:
    return None

  if node.get("computed"):
    value = prop.get("value") if prop.type == NodeType.LITERAL.value else None
    return value if isinstance(value, str) else None

  if prop.type == NodeType.IDENTIFIER.value:
    return prop.get("name")
  return None


def is_handled_method_call(node: SyntaxNode, config: Optional[LintConfig] = None) -> bool:
  """
  Checks if a member expression names a method that resolves a Result.

  Args:
      node: The node to check.
      config: Name sets to use (defaults to the neverthrow API).

  Returns:
      bool: True for ``.match``, ``.unwrapOr`` or ``._unsafeUnwrap`` by default.
  """
  config = config or LintConfig()
  return get_method_name(node) in config.handling_methods


def is_result_method_call(node: SyntaxNode, config: Optional[LintConfig] = None) -> bool:
  """
  Checks if a member expression names any Result method, handling or transforming.

  Args:
      node: The node to check.
      config: Name sets to use (defaults to the neverthrow API).

  Returns:
      bool: True if the property is a known Result method.
  """
  config = config or LintConfig()
  method = get_method_name(node)
  return method in config.handling_methods or method in config.transforming_methods


def has_result_method_chain(node: SyntaxNode, config: Optional[LintConfig] = None) -> bool:
  """
  Checks whether a call chain contains at least one Result method.

  Walks down the receiver side of ``something.map(..).andThen(..)`` style
  chains, counting Result methods along the way.

  Args:
      node: Outermost node of the chain.
      config: Name sets to use (defaults to the neverthrow API).

  Returns:
      bool: True if any link of the chain is a Result method.
  """
  config = config or LintConfig()
  current: Optional[SyntaxNode] = node

  while current is not None:
    if current.type == NodeType.CALL_EXPRESSION.value:
      callee = current.get("callee")
      if callee is None or callee.type != NodeType.MEMBER_EXPRESSION.value:
        return False
      current = callee
    elif current.type == NodeType.MEMBER_EXPRESSION.value:
      if is_result_method_call(current, config):
        return True
      current = current.get("object")
    else:
      return False

  return False


def is_result_identifier(node: SyntaxNode) -> bool:
  """
  Checks if an identifier name contains one of the neverthrow export names.

  Args:
      node: The node to check.

  Returns:
      bool: True for identifiers such as ``parseResult`` or ``okValue``.
  """
  if node.type != NodeType.IDENTIFIER.value:
    return False
  name = node.get("name") or ""
  return any(export in name for export in NEVERTHROW_IMPORTS)
