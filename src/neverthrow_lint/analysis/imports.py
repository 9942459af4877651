"""
Import Registry.

Tracks which local names of a compilation unit are bound to exports of the
target module (``neverthrow`` by default), including aliases:

.. code-block:: javascript

    import { ok, err as failure } from "neverthrow";  // ok -> ok, failure -> err
    import nt from "neverthrow";                      // nt -> default
    import * as N from "neverthrow";                  // N  -> *

A registry belongs to exactly one analysis run and is reset at the start of
every compilation unit.
"""

from typing import Dict, Optional

from neverthrow_lint.enums import NodeType
from neverthrow_lint.syntax.nodes import SyntaxNode

DEFAULT_IMPORT = "default"
NAMESPACE_IMPORT = "*"


class ImportRegistry:
  """
  Maps local identifiers to the name they were imported under from the target module.
  """

  def __init__(self, target_module: str = "neverthrow") -> None:
    """
    Initializes an empty registry.

    Args:
        target_module: Source literal whose imports are tracked.
    """
    self.target_module = target_module
    self._bindings: Dict[str, str] = {}

  def record(self, node: SyntaxNode) -> None:
    """
    Registers every specifier of an import declaration from the target module.

    Declarations from other modules, and nodes that are not import
    declarations, are ignored.

    Args:
        node: An ``ImportDeclaration`` node.
    """
    if node.type != NodeType.IMPORT_DECLARATION.value:
      return

    source = node.get("source")
    if source is None or source.get("value") != self.target_module:
      return

    for specifier in node.get("specifiers") or []:
      local = _identifier_name(specifier.get("local"))
      if local is None:
        continue

      if specifier.type == NodeType.IMPORT_SPECIFIER.value:
        imported = _identifier_name(specifier.get("imported")) or local
      elif specifier.type == NodeType.IMPORT_DEFAULT_SPECIFIER.value:
        imported = DEFAULT_IMPORT
      elif specifier.type == NodeType.IMPORT_NAMESPACE_SPECIFIER.value:
        imported = NAMESPACE_IMPORT
      else:
        continue

      self._bindings[local] = imported

  def is_bound(self, name: str) -> bool:
    """
    Checks whether ``name`` was imported from the target module.

    Args:
        name: Local identifier.

    Returns:
        bool: True if the name is bound.
    """
    return name in self._bindings

  def imported_name(self, name: str) -> Optional[str]:
    """
    Resolves a local alias to the exported name it binds.

    Args:
        name: Local identifier.

    Returns:
        Optional[str]: The exported name, ``"default"``, ``"*"``, or None if unbound.
    """
    return self._bindings.get(name)

  def reset(self) -> None:
    """Clears all bindings. Called when a new compilation unit starts."""
    self._bindings.clear()

  def __contains__(self, name: object) -> bool:
    return name in self._bindings

  def __len__(self) -> int:
    return len(self._bindings)


def _identifier_name(node: Optional[SyntaxNode]) -> Optional[str]:
  # Named specifiers may use string literals: import { "ok" as good } from ...
  if node is None:
    return None
  if node.type == NodeType.IDENTIFIER.value:
    return node.get("name")
  if node.type == NodeType.LITERAL.value and isinstance(node.get("value"), str):
    return node.get("value")
  return None
