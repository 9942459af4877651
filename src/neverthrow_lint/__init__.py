"""
neverthrow-lint Package.

A syntactic lint rule that reports neverthrow Results which are created but
never resolved with ``match``, ``unwrapOr`` or ``_unsafeUnwrap``. It operates on
ESTree syntax trees supplied by an external JavaScript/TypeScript parser and
uses no type information.

Usage
-----

.. code-block:: python

    import json
    import neverthrow_lint

    tree = json.load(open("module.estree.json"))
    for diagnostic in neverthrow_lint.lint(tree):
        print(diagnostic)
"""

from typing import Any, Dict, List, Optional, Union

from neverthrow_lint.config import LintConfig
from neverthrow_lint.diagnostics import Diagnostic
from neverthrow_lint.rules import MustUseResultRule
from neverthrow_lint.syntax import MalformedTreeError, SyntaxNode, build_tree

__version__ = "0.1.0"


def lint(tree: Union[SyntaxNode, Dict[str, Any]], config: Optional[LintConfig] = None) -> List[Diagnostic]:
  """
  Runs the must-use-result rule over one compilation unit.

  Args:
      tree (SyntaxNode | dict): A built tree, or a raw ESTree dictionary.
      config (LintConfig, optional): Name sets and target module. Defaults
          to the neverthrow API.

  Returns:
      List[Diagnostic]: Findings in document order.

  Raises:
      MalformedTreeError: If a raw dictionary is not a well-formed tree.
  """
  root = tree if isinstance(tree, SyntaxNode) else build_tree(tree)
  return MustUseResultRule(config).check(root)


__all__ = [
  "Diagnostic",
  "LintConfig",
  "MalformedTreeError",
  "MustUseResultRule",
  "SyntaxNode",
  "lint",
  "__version__",
]
