from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from .numeric.operations import BINARY_OPERATIONS, FUNCTIONS, Numeric


class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3


OPS = '^/*+-'

FUNCTION_NAMES = frozenset(FUNCTIONS)

PRECEDENCE_RANK: Mapping[str, int] = MappingProxyType({
  **{name: 3 for name in FUNCTION_NAMES},
  '^': 2,
  '*': 1, '/': 1,
  '+': 0, '-': 0,
})


def precedence_of(symbol: str) -> int:
  return PRECEDENCE_RANK[symbol]


def is_operator(symbol) -> bool:
  return isinstance(symbol, str) and len(symbol) == 1 and symbol in OPS


def is_function_name(symbol) -> bool:
  return isinstance(symbol, str) and symbol in FUNCTION_NAMES


def evaluate_binary_op(left: Numeric, right: Numeric, operator: str) -> Numeric:
  return BINARY_OPERATIONS[operator](left, right)


def evaluate_unary_op(operand: Numeric, operator: str) -> Numeric:
  return FUNCTIONS[operator](operand)
