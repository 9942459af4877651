"""
Static Analysis Package.

This package contains the syntactic passes the rule engine composes. None of
them consult type information; every decision derives from literal names,
import provenance and the ancestor chain of a node.

Modules:
    - ``imports``: Per-unit registry of names imported from the target module.
    - ``classifier``: Closed-category classification of calls and member accesses.
    - ``context``: Detection of delegated (returned / arrow-body) positions.
    - ``chain``: Detection of producing calls terminated by a handling method.
"""

from neverthrow_lint.analysis.chain import is_immediately_handled
from neverthrow_lint.analysis.classifier import NodeClassifier, get_method_name
from neverthrow_lint.analysis.context import is_delegated
from neverthrow_lint.analysis.imports import ImportRegistry

__all__ = [
  "ImportRegistry",
  "NodeClassifier",
  "get_method_name",
  "is_delegated",
  "is_immediately_handled",
]
