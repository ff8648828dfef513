"""
Stack-machine evaluation of RPN sequences.

The sequence itself is never consumed: evaluation walks it with a cursor, so
a parsed expression can be evaluated repeatedly with different bindings.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Set

from ..errors import EvaluationError
from ..logging_system import log_warning
from ..numeric.operations import Numeric, as_numeric
from ..operators import evaluate_binary_op, evaluate_unary_op
from ..parsing.parser import parse
from ..parsing.tokenizer import Token, TokenKind


def _normalize_bindings(bindings: Optional[Mapping[str, object]]) -> Dict[str, Numeric]:
  if not bindings:
    return {}
  return {name: as_numeric(value) for name, value in bindings.items()}


def _pop(stack: List[Numeric], token: Token) -> Numeric:
  if not stack:
    raise EvaluationError(f"Missing operand for {token.text!r}")
  return stack.pop()


def evaluate(rpn: Sequence[Token], bindings: Optional[Mapping[str, object]] = None) -> Numeric:
  """
  Evaluate an RPN sequence.

  Args:
      rpn: Sequence produced by parse()
      bindings: Free variable name -> real or complex value

  Returns:
      float for purely real computations, Complex otherwise

  Raises:
      EvaluationError: unbound identifier or malformed sequence
  """
  variables = _normalize_bindings(bindings)
  stack: List[Numeric] = []
  for token in rpn:
    if token.kind is TokenKind.NUMBER:
      stack.append(float(token.text))
    elif token.kind is TokenKind.OPERATOR:
      right = _pop(stack, token)
      left = _pop(stack, token)
      stack.append(evaluate_binary_op(left, right, token.text))
    elif token.kind is TokenKind.FUNCTION:
      stack.append(evaluate_unary_op(_pop(stack, token), token.text))
    elif token.kind is TokenKind.IDENTIFIER:
      if token.text not in variables:
        log_warning(f"Unbound variable '{token.text}'")
        raise EvaluationError(f"No value bound to variable '{token.text}'")
      stack.append(variables[token.text])
    else:
      raise EvaluationError(f"Unexpected token {token.text!r} in RPN sequence")
  if len(stack) != 1:
    raise EvaluationError(f"Malformed RPN sequence leaves {len(stack)} values on the stack")
  return stack[0]


def free_variables(rpn: Sequence[Token]) -> Set[str]:
  """Identifiers that must be bound before evaluation (function names excluded)"""
  return {token.text for token in rpn if token.kind is TokenKind.IDENTIFIER}


def compute_expression(source: str, bindings: Optional[Mapping[str, object]] = None) -> Numeric:
  """Parse and evaluate in one step"""
  return evaluate(parse(source), bindings)
