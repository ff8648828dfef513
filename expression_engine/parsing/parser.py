from typing import Sequence

from ..errors import ExpressionSyntaxError
from ..logging_system import log_debug, log_diagnostic
from .shunting_yard import RpnSequence, handle_unary_operators, shunting_yard
from .tokenizer import Token, TokenKind, tokenize

_ARITY = {
  TokenKind.NUMBER: 0,
  TokenKind.IDENTIFIER: 0,
  TokenKind.FUNCTION: 1,
  TokenKind.OPERATOR: 2,
}


def check_rpn_arity(rpn: Sequence[Token]) -> bool:
  """True when the sequence never underflows and leaves exactly one value"""
  depth = 0
  for token in rpn:
    arity = _ARITY.get(token.kind)
    if arity is None or depth < arity:
      return False
    depth += 1 - arity
  return depth == 1


def parse(source: str) -> RpnSequence:
  """
  Tokenize, normalize signs and convert to RPN.

  Raises:
      LexError: unknown character or malformed number
      ExpressionSyntaxError: unbalanced parentheses or missing operands
  """
  tokens = handle_unary_operators(tokenize(source))
  rpn = shunting_yard(tokens)
  if not check_rpn_arity(rpn):
    log_diagnostic("Invalid expression", source)
    raise ExpressionSyntaxError(f"Operators and operands do not match in {source!r}")
  log_debug(f"parsed {source!r} -> {' '.join(t.text for t in rpn)}")
  return rpn
