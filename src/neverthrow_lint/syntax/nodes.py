"""
Generic Syntax Tree Nodes.

This module defines the language-agnostic node structure the rule engine walks.
A tree is produced by an external parser (see ``neverthrow_lint.syntax.estree``)
and is treated as immutable once built.

Each ``SyntaxNode`` carries:
1.  **type**: The discriminant tag (ESTree names, e.g. ``CallExpression``).
2.  **parent**: A lookup link to the enclosing node. Parents never own children
    through this link and it is never reassigned after the tree is built.
3.  **fields**: Tag-specific values (child nodes, lists of nodes, or scalars).
4.  **loc**: Optional source location (``{"start": {"line", "column"}, ...}``).
"""

from typing import Any, Dict, Iterator, List, Optional


class SyntaxNode:
  """
  A single node of a parsed syntax tree.

  Attributes:
      type (str): The node tag (e.g. ``"MemberExpression"``).
      parent (Optional[SyntaxNode]): Enclosing node, None for the root.
      fields (Dict[str, Any]): Tag-specific fields in source order.
      loc (Optional[Dict[str, Any]]): Source location mapping, if known.
  """

  __slots__ = ("type", "parent", "fields", "loc")

  def __init__(
    self,
    type: str,
    fields: Optional[Dict[str, Any]] = None,
    loc: Optional[Dict[str, Any]] = None,
    parent: Optional["SyntaxNode"] = None,
  ) -> None:
    self.type = type
    self.fields: Dict[str, Any] = fields if fields is not None else {}
    self.loc = loc
    self.parent = parent

  def get(self, name: str, default: Any = None) -> Any:
    """
    Reads a tag-specific field.

    Args:
        name: Field name (e.g. ``"callee"``).
        default: Value returned when the field is absent.

    Returns:
        The field value or ``default``.
    """
    return self.fields.get(name, default)

  def children(self) -> Iterator["SyntaxNode"]:
    """
    Yields direct child nodes in field order.

    Lists of nodes are flattened; ``None`` holes (e.g. array elisions) are skipped.
    """
    for value in self.fields.values():
      if isinstance(value, SyntaxNode):
        yield value
      elif isinstance(value, list):
        for item in value:
          if isinstance(item, SyntaxNode):
            yield item

  def walk(self) -> Iterator["SyntaxNode"]:
    """
    Yields this node and all descendants in document (pre-)order.

    Uses an explicit stack so that deeply nested trees (long method chains)
    are not bounded by the interpreter recursion limit.
    """
    stack: List[SyntaxNode] = [self]
    while stack:
      node = stack.pop()
      yield node
      stack.extend(reversed(list(node.children())))

  def ancestors(self) -> Iterator["SyntaxNode"]:
    """Yields the parent chain, nearest first."""
    current = self.parent
    while current is not None:
      yield current
      current = current.parent

  @property
  def line(self) -> Optional[int]:
    """1-based start line, if the parser supplied locations."""
    return self._position("line")

  @property
  def column(self) -> Optional[int]:
    """0-based start column, if the parser supplied locations."""
    return self._position("column")

  def _position(self, key: str) -> Optional[int]:
    if not self.loc:
      return None
    start = self.loc.get("start") or {}
    value = start.get(key)
    return value if isinstance(value, int) else None

  def __repr__(self) -> str:
    name = self.fields.get("name")
    if isinstance(name, str):
      return f"SyntaxNode({self.type}, name={name!r})"
    return f"SyntaxNode({self.type})"
