"""
ESTree Ingestion.

Builds ``SyntaxNode`` trees from ESTree-shaped JSON, the serialisation emitted by
espree, typescript-estree and the Deno lint host. Parent links are populated
while building so that analysis passes can walk upward without re-traversing
from the root.

The builder is strict: structurally broken input raises
``MalformedTreeError`` instead of producing a tree the classifier would
silently misread.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from neverthrow_lint.enums import NodeType
from neverthrow_lint.syntax.nodes import SyntaxNode

# Keys carrying position or bookkeeping data rather than syntax.
_META_KEYS = frozenset({"type", "loc", "range", "start", "end", "parent", "comments", "tokens"})

# Fields that must be present for a node tag to be analysable.
_REQUIRED_FIELDS: Dict[str, Tuple[str, ...]] = {
  NodeType.CALL_EXPRESSION.value: ("callee",),
  NodeType.NEW_EXPRESSION.value: ("callee",),
  NodeType.MEMBER_EXPRESSION.value: ("object", "property"),
  NodeType.IMPORT_DECLARATION.value: ("source", "specifiers"),
}


class MalformedTreeError(ValueError):
  """
  Raised when ESTree input does not describe a well-formed syntax tree.
  """


# Location of a node in the input, as a linked (parent, segment) pair; rendered only on error.
_Trail = Optional[Tuple["_Trail", str]]


def _render(trail: _Trail) -> str:
  segments: List[str] = []
  while trail is not None:
    trail, segment = trail
    segments.append(segment)
  return "$" + "".join(reversed(segments))


def _is_node(value: Any) -> bool:
  return isinstance(value, dict) and "type" in value


def _validate(raw: Dict[str, Any], trail: _Trail) -> None:
  node_type = raw.get("type")
  if not isinstance(node_type, str) or not node_type:
    raise MalformedTreeError(f"Node at '{_render(trail)}' has no string 'type' tag.")

  for required in _REQUIRED_FIELDS.get(node_type, ()):
    if raw.get(required) is None:
      raise MalformedTreeError(f"{node_type} at '{_render(trail)}' is missing required field '{required}'.")


def build_tree(raw: Dict[str, Any]) -> SyntaxNode:
  """
  Converts an ESTree dictionary into a linked ``SyntaxNode`` tree.

  Child dictionaries (anything with a ``type`` key) become nodes, lists of them
  become lists of nodes, and remaining values are kept as scalar fields.
  Construction is iterative, so arbitrarily deep input is supported.

  Args:
      raw: The root ESTree object (usually a ``Program``).

  Returns:
      SyntaxNode: The root node with parent links populated.

  Raises:
      MalformedTreeError: If the input, or any nested node, is structurally invalid.
  """
  if not _is_node(raw):
    raise MalformedTreeError("Root of an ESTree document must be an object with a 'type' tag.")

  _validate(raw, None)
  root = SyntaxNode(raw["type"], loc=raw.get("loc"))
  pending: List[Tuple[Dict[str, Any], SyntaxNode, _Trail]] = [(raw, root, None)]

  while pending:
    source, node, trail = pending.pop()

    for key, value in source.items():
      if key in _META_KEYS:
        continue

      if _is_node(value):
        child_trail = (trail, f".{key}")
        _validate(value, child_trail)
        child = SyntaxNode(value["type"], loc=value.get("loc"), parent=node)
        node.fields[key] = child
        pending.append((value, child, child_trail))

      elif isinstance(value, list) and any(_is_node(item) for item in value):
        items: List[Any] = []
        for index, item in enumerate(value):
          if item is None:
            items.append(None)
            continue
          child_trail = (trail, f".{key}[{index}]")
          if not _is_node(item):
            raise MalformedTreeError(f"Expected a node at '{_render(child_trail)}', got {type(item).__name__}.")
          _validate(item, child_trail)
          child = SyntaxNode(item["type"], loc=item.get("loc"), parent=node)
          items.append(child)
          pending.append((item, child, child_trail))
        node.fields[key] = items

      else:
        node.fields[key] = value

  return root


def parse_tree(text: str) -> SyntaxNode:
  """
  Parses an ESTree JSON document.

  Args:
      text: JSON text.

  Returns:
      SyntaxNode: The root node.

  Raises:
      MalformedTreeError: If the text is not valid JSON or not a valid tree.
  """
  try:
    raw = json.loads(text)
  except json.JSONDecodeError as e:
    raise MalformedTreeError(f"Invalid JSON: {e}") from e
  return build_tree(raw)


def load_tree(path: Union[str, Path]) -> SyntaxNode:
  """
  Reads and builds an ESTree JSON file.

  Args:
      path: File containing the serialized tree.

  Returns:
      SyntaxNode: The root node.

  Raises:
      OSError: If the file cannot be read.
      MalformedTreeError: If the content is not a valid tree.
  """
  return parse_tree(Path(path).read_text("utf-8"))
