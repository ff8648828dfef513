import sympy as sp
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Tuple

from ...errors import EvaluationError
from ...numeric.operations import Numeric
from ...operators import (
  NodeType, is_function_name, is_operator, precedence_of,
  evaluate_binary_op, evaluate_unary_op
)

# Integral constants below this magnitude print without a fractional part
_INTEGER_PRINT_LIMIT = 1e15

# Literals that overflow to inf when read back
_INFINITY_TEXT = '1e999'


def format_constant(value: float) -> str:
  if value != value:
    return "(0/0)"
  if value == float('inf'):
    return _INFINITY_TEXT
  if value == float('-inf'):
    return f"(0-{_INFINITY_TEXT})"
  if value.is_integer() and abs(value) < _INTEGER_PRINT_LIMIT:
    text = str(int(value))
  else:
    text = repr(value)
  # negative literals cannot be re-read after an operator, so wrap them
  return f"({text})" if value < 0 else text


class Node(ABC):
  """Base node class; trees are treated as immutable once built"""

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @property
  @abstractmethod
  def value(self):
    pass

  @property
  def children(self) -> Tuple['Node', ...]:
    return ()

  @abstractmethod
  def evaluate(self, bindings: Mapping[str, Numeric]) -> Numeric:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def _key(self) -> tuple:
    pass

  def contains(self, symbol) -> bool:
    if self.value == symbol:
      return True
    return any(child.contains(symbol) for child in self.children)

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children)
    return self._size_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = hash(self._key())
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    return self._key() == other._key()

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()!r})"


class ConstantNode(Node):
  __slots__ = ('_value',)

  def __init__(self, value: float):
    super().__init__()
    self._value = float(value)

  @property
  def value(self) -> float:
    return self._value

  def evaluate(self, bindings: Mapping[str, Numeric]) -> Numeric:
    return self._value

  def to_string(self) -> str:
    return format_constant(self._value)

  def copy(self) -> 'ConstantNode':
    return ConstantNode(self._value)

  def to_sympy(self) -> sp.Expr:
    if self._value.is_integer():
      return sp.Integer(int(self._value))
    return sp.Float(self._value)

  def _key(self) -> tuple:
    return (NodeType.CONSTANT, self._value)


class VariableNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    super().__init__()
    self.name = name

  @property
  def value(self) -> str:
    return self.name

  def evaluate(self, bindings: Mapping[str, Numeric]) -> Numeric:
    if self.name not in bindings:
      raise EvaluationError(f"No value bound to variable '{self.name}'")
    return bindings[self.name]

  def to_string(self) -> str:
    return self.name

  def copy(self) -> 'VariableNode':
    return VariableNode(self.name)

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def _key(self) -> tuple:
    return (NodeType.VARIABLE, self.name)


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: str, left: Node, right: Node):
    if not is_operator(operator):
      raise ValueError(f"'{operator}' is not a binary operator")
    super().__init__()
    self.operator = operator
    self.left = left
    self.right = right

  @property
  def value(self) -> str:
    return self.operator

  @property
  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def evaluate(self, bindings: Mapping[str, Numeric]) -> Numeric:
    return evaluate_binary_op(self.left.evaluate(bindings),
                              self.right.evaluate(bindings), self.operator)

  def to_string(self) -> str:
    rank = precedence_of(self.operator)
    left_str = self.left.to_string()
    right_str = self.right.to_string()
    if isinstance(self.left, BinaryOpNode) and precedence_of(self.left.operator) < rank:
      left_str = f"({left_str})"
    # operators associate to the left, so an equal-rank right operand needs parentheses
    if isinstance(self.right, BinaryOpNode) and precedence_of(self.right.operator) <= rank:
      right_str = f"({right_str})"
    return f"{left_str}{self.operator}{right_str}"

  def copy(self) -> 'BinaryOpNode':
    return BinaryOpNode(self.operator, self.left.copy(), self.right.copy())

  def to_sympy(self) -> sp.Expr:
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if self.operator == '+':
      return sp.Add(left, right)
    elif self.operator == '-':
      return sp.Add(left, sp.Mul(-1, right))
    elif self.operator == '*':
      return sp.Mul(left, right)
    elif self.operator == '/':
      return sp.Mul(left, sp.Pow(right, -1))
    return sp.Pow(left, right)

  def _key(self) -> tuple:
    return (NodeType.BINARY_OP, self.operator, self.left._key(), self.right._key())


_SYMPY_FUNCTIONS = {
  'abs': sp.Abs,
  'exp': sp.exp,
  'sin': sp.sin, 'cos': sp.cos, 'tan': sp.tan,
  'sinh': sp.sinh, 'cosh': sp.cosh, 'tanh': sp.tanh,
  'log': sp.log,
  'step': lambda arg: sp.Heaviside(arg, 1),
}


class UnaryOpNode(Node):
  __slots__ = ('operator', 'operand')

  def __init__(self, operator: str, operand: Node):
    if not is_function_name(operator):
      raise ValueError(f"'{operator}' is not a supported function")
    super().__init__()
    self.operator = operator
    self.operand = operand

  @property
  def value(self) -> str:
    return self.operator

  @property
  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)

  def evaluate(self, bindings: Mapping[str, Numeric]) -> Numeric:
    return evaluate_unary_op(self.operand.evaluate(bindings), self.operator)

  def to_string(self) -> str:
    return f"{self.operator}({self.operand.to_string()})"

  def copy(self) -> 'UnaryOpNode':
    return UnaryOpNode(self.operator, self.operand.copy())

  def to_sympy(self) -> sp.Expr:
    return _SYMPY_FUNCTIONS[self.operator](self.operand.to_sympy())

  def _key(self) -> tuple:
    return (NodeType.UNARY_OP, self.operator, self.operand._key())


def to_infix_string(node: Node) -> str:
  return node.to_string()
