"""
Enumerations for neverthrow-lint.

This module defines the node tags the engine reacts to and the closed set of
categories the classifier assigns to call-like and member-access nodes.
"""

from enum import Enum


class NodeType(str, Enum):
  """
  ESTree node tags consulted by the analysis passes.

  Only the tags with special meaning are listed; every other tag is treated
  as an opaque wrapper.
  """

  PROGRAM = "Program"
  IMPORT_DECLARATION = "ImportDeclaration"
  IMPORT_SPECIFIER = "ImportSpecifier"
  IMPORT_DEFAULT_SPECIFIER = "ImportDefaultSpecifier"
  IMPORT_NAMESPACE_SPECIFIER = "ImportNamespaceSpecifier"
  CALL_EXPRESSION = "CallExpression"
  NEW_EXPRESSION = "NewExpression"
  MEMBER_EXPRESSION = "MemberExpression"
  IDENTIFIER = "Identifier"
  LITERAL = "Literal"
  RETURN_STATEMENT = "ReturnStatement"
  ARROW_FUNCTION_EXPRESSION = "ArrowFunctionExpression"
  FUNCTION_DECLARATION = "FunctionDeclaration"
  FUNCTION_EXPRESSION = "FunctionExpression"
  BLOCK_STATEMENT = "BlockStatement"


class NodeCategory(str, Enum):
  """
  Classification of a syntax node with respect to Result handling.
  """

  CONSTRUCTOR_CALL = "constructor_call"  # new Ok(..), new Err(..)
  FACTORY_CALL = "factory_call"  # ok(..) bound to the target module
  HEURISTIC_CALL = "heuristic_call"  # getResult(..)
  HANDLING_METHOD_CALL = "handling_method_call"  # .match / .unwrapOr / ._unsafeUnwrap
  TRANSFORMING_METHOD_CALL = "transforming_method_call"  # .map / .andThen / .isOk ...
  OTHER = "other"

  @property
  def is_producing(self) -> bool:
    """
    Whether nodes of this category construct a Result that must be handled.

    Returns:
        bool: True for constructor, factory and heuristic calls.
    """
    return self in (
      NodeCategory.CONSTRUCTOR_CALL,
      NodeCategory.FACTORY_CALL,
      NodeCategory.HEURISTIC_CALL,
    )
