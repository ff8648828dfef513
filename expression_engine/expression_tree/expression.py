import sympy as sp
from typing import Mapping, Optional, Set

from .core.builder import to_tree
from .core.node import Node
from .utils.differentiator import derivative
from .utils.simplifier import DEFAULT_MAX_PASSES, simplify
from .utils.tree_utils import calculate_tree_depth, get_variables, validate_tree_structure
from ..numeric.operations import Numeric, as_numeric
from ..parsing.parser import parse
from ..parsing.shunting_yard import RpnSequence
from ..rpn.codegen import NamingConvention, to_source_string
from ..rpn.evaluator import evaluate, free_variables


class Expression:
  """A parsed expression: its RPN sequence (when parsed from text) and its tree"""

  __slots__ = ('root', 'rpn', '_string_cache')

  def __init__(self, root: Node, rpn: Optional[RpnSequence] = None):
    if not validate_tree_structure(root):
      raise ValueError(f"Malformed expression tree rooted at {type(root).__name__}")
    self.root = root
    self.rpn = rpn
    self._string_cache: Optional[str] = None

  @classmethod
  def from_string(cls, source: str) -> 'Expression':
    rpn = parse(source)
    return cls(to_tree(rpn), rpn)

  def evaluate(self, bindings: Optional[Mapping[str, object]] = None) -> Numeric:
    if self.rpn is not None:
      return evaluate(self.rpn, bindings)
    variables = {name: as_numeric(value) for name, value in (bindings or {}).items()}
    return self.root.evaluate(variables)

  def free_variables(self) -> Set[str]:
    if self.rpn is not None:
      return free_variables(self.rpn)
    return get_variables(self.root)

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def to_source_string(self, dialect: Optional[NamingConvention] = None) -> str:
    # trees built in memory have no RPN yet; re-parse their infix form
    rpn = self.rpn if self.rpn is not None else parse(self.to_string())
    return to_source_string(rpn, dialect)

  def simplify(self, max_passes: int = DEFAULT_MAX_PASSES) -> 'Expression':
    return Expression(simplify(self.root, max_passes))

  def derivative(self, variable: str, max_passes: int = DEFAULT_MAX_PASSES) -> 'Expression':
    return Expression(derivative(self.root, variable, max_passes))

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def copy(self) -> 'Expression':
    return Expression(self.root.copy(), self.rpn)

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"
