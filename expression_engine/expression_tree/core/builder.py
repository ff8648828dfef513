from typing import List, Sequence

from ...errors import EvaluationError
from ...parsing.tokenizer import Token, TokenKind
from .node import BinaryOpNode, ConstantNode, Node, UnaryOpNode, VariableNode


def _pop(stack: List[Node], token: Token) -> Node:
  if not stack:
    raise EvaluationError(f"Missing operand for {token.text!r}")
  return stack.pop()


def to_tree(rpn: Sequence[Token]) -> Node:
  """Build an expression tree by replaying an RPN sequence onto a node stack"""
  stack: List[Node] = []
  for token in rpn:
    if token.kind is TokenKind.NUMBER:
      stack.append(ConstantNode(float(token.text)))
    elif token.kind is TokenKind.OPERATOR:
      right = _pop(stack, token)
      left = _pop(stack, token)
      stack.append(BinaryOpNode(token.text, left, right))
    elif token.kind is TokenKind.FUNCTION:
      stack.append(UnaryOpNode(token.text, _pop(stack, token)))
    elif token.kind is TokenKind.IDENTIFIER:
      stack.append(VariableNode(token.text))
    else:
      raise EvaluationError(f"Unexpected token {token.text!r} in RPN sequence")
  if len(stack) != 1:
    raise EvaluationError(f"Malformed RPN sequence leaves {len(stack)} nodes on the stack")
  return stack[0]
