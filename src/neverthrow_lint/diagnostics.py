"""
Diagnostic Model.

Value objects emitted by lint rules. A diagnostic is anchored to the offending
syntax node; its location is read from the node when the parser supplied one.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from neverthrow_lint.syntax.nodes import SyntaxNode

MUST_USE_RESULT_MESSAGE = "Result must be handled with either match, unwrapOr, or _unsafeUnwrap"


@dataclass(frozen=True)
class Diagnostic:
  """
  A single lint finding.

  Attributes:
      anchor (SyntaxNode): The node the finding is reported on.
      message (str): Human-readable description.
      rule (str): Identifier of the rule that produced it.
  """

  anchor: SyntaxNode
  message: str
  rule: str

  @property
  def line(self) -> Optional[int]:
    """1-based line of the anchor, if known."""
    return self.anchor.line

  @property
  def column(self) -> Optional[int]:
    """0-based column of the anchor, if known."""
    return self.anchor.column

  def to_dict(self) -> Dict[str, Any]:
    """
    Serializes the diagnostic for JSON reporting.

    Returns:
        Dict[str, Any]: Rule id, message, node type and position.
    """
    return {
      "rule": self.rule,
      "message": self.message,
      "node": self.anchor.type,
      "line": self.line,
      "column": self.column,
    }

  def __str__(self) -> str:
    if self.line is not None:
      return f"{self.line}:{self.column or 0} [{self.rule}] {self.message}"
    return f"[{self.rule}] {self.message}"
