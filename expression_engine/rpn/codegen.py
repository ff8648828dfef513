"""
Cross-compilation of RPN sequences into call-expression source.

The GLSL dialect produces the nested calls understood by the complex-number
shader library (add, sub, mul, div, powC, sinC, ..., r2C for literals). The
Python dialect produces calls into expression_engine.numeric.operations.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

import numpy as np

from ..errors import EvaluationError
from ..parsing.tokenizer import Token, TokenKind
from .evaluator import free_variables


@dataclass(frozen=True)
class NamingConvention:
  """How literals, operators and functions are spelled in generated source"""
  name: str
  literal_template: str
  operator_names: Mapping[str, str] = field(hash=False)
  function_template: str = '{}'

  def literal(self, text: str) -> str:
    return self.literal_template.format(format_literal(float(text)))

  def binary_call(self, operator: str, left: str, right: str) -> str:
    return f"{self.operator_names[operator]}({left}, {right})"

  def function_call(self, function: str, argument: str) -> str:
    return f"{self.function_template.format(function)}({argument})"


GLSL_DIALECT = NamingConvention(
  name='glsl',
  literal_template='r2C({})',
  operator_names=MappingProxyType({'+': 'add', '-': 'sub', '*': 'mul', '/': 'div', '^': 'powC'}),
  function_template='{}C',
)

PYTHON_DIALECT = NamingConvention(
  name='python',
  literal_template='{}',
  operator_names=MappingProxyType({'+': 'add', '-': 'sub', '*': 'mul', '/': 'div', '^': 'pow'}),
  function_template='{}',
)


def format_literal(value: float) -> str:
  """Shortest round-trip scientific notation, e.g. 1e+0, 2.5e+0, 1.25e-3"""
  return np.format_float_scientific(value, trim='-', exp_digits=1)


def to_source_string(rpn: Sequence[Token], dialect: NamingConvention = None) -> str:
  """Render an RPN sequence as nested calls in the given dialect"""
  if dialect is None:
    dialect = GLSL_DIALECT
  stack: List[str] = []
  for token in rpn:
    if token.kind is TokenKind.NUMBER:
      stack.append(dialect.literal(token.text))
    elif token.kind is TokenKind.OPERATOR:
      if len(stack) < 2:
        raise EvaluationError(f"Missing operand for {token.text!r}")
      right = stack.pop()
      left = stack.pop()
      stack.append(dialect.binary_call(token.text, left, right))
    elif token.kind is TokenKind.FUNCTION:
      if not stack:
        raise EvaluationError(f"Missing argument for {token.text!r}")
      stack.append(dialect.function_call(token.text, stack.pop()))
    elif token.kind is TokenKind.IDENTIFIER:
      stack.append(token.text)
    else:
      raise EvaluationError(f"Unexpected token {token.text!r} in RPN sequence")
  if len(stack) != 1:
    raise EvaluationError(f"Malformed RPN sequence leaves {len(stack)} values on the stack")
  return stack[0]


@dataclass(frozen=True)
class ShaderSource:
  uniforms: Tuple[str, ...]
  declarations: str
  function_source: str

  @property
  def source(self) -> str:
    return self.declarations + self.function_source


def build_shader_source(rpn: Sequence[Token],
                        reserved_names: Sequence[str] = ('i', 'x', 'pi', 't')) -> ShaderSource:
  """
  Wrap a user expression in a GLSL 'complex function (vec2 uv)'.

  Free variables other than the reserved ones become complex uniforms that the
  caller must supply; i, pi, t and x are defined inside the wrapper.
  """
  uniforms = tuple(sorted(free_variables(rpn) - set(reserved_names)))
  declarations = ''.join(f"uniform complex {name};\n" for name in uniforms)
  body = to_source_string(rpn, GLSL_DIALECT)
  function_source = (
    "complex function (vec2 uv) {"
    "    complex i = IMAG_UNIT;"
    "    complex pi = complex(PI, 0.0);"
    "    complex t = complex(uv[1], 0.0);"
    "    complex x = complex(uv[0], 0.0);"
    f"    return {body};"
    "}"
  )
  return ShaderSource(uniforms, declarations, function_source)
