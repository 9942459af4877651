"""
Syntax Tree Package.

Defines the tree representation consumed by the rule engine and the ingestion
of ESTree JSON produced by external JavaScript/TypeScript parsers.
"""

from neverthrow_lint.syntax.estree import MalformedTreeError, build_tree, load_tree, parse_tree
from neverthrow_lint.syntax.nodes import SyntaxNode
from neverthrow_lint.syntax.visitor import SyntaxVisitor

__all__ = [
  "MalformedTreeError",
  "SyntaxNode",
  "SyntaxVisitor",
  "build_tree",
  "load_tree",
  "parse_tree",
]
