"""Complex Expression Engine

Parses user-entered math expressions, evaluates them over real and complex
values, cross-compiles them to shader source and differentiates them
symbolically.
"""

from .errors import (
  ExpressionError, ParseError, LexError, ExpressionSyntaxError,
  EvaluationError, DifferentiationGap
)
from .numeric import Complex, Numeric, FUNCTIONS
from .operators import OPS, FUNCTION_NAMES, PRECEDENCE_RANK
from .parsing import Token, TokenKind, RpnSequence, tokenize
from .rpn import (
  NamingConvention, GLSL_DIALECT, PYTHON_DIALECT, ShaderSource,
  compute_expression, build_shader_source
)
from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
)
from .config import EngineConfig
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level
from .engine import (
  ExpressionEngine, parse, evaluate, free_variables, to_source_string,
  to_tree, simplify, derivative, to_infix_string
)

__version__ = "0.1.0"
__all__ = [
  "ExpressionError", "ParseError", "LexError", "ExpressionSyntaxError",
  "EvaluationError", "DifferentiationGap",
  "Complex", "Numeric", "FUNCTIONS",
  "OPS", "FUNCTION_NAMES", "PRECEDENCE_RANK",
  "Token", "TokenKind", "RpnSequence", "tokenize",
  "NamingConvention", "GLSL_DIALECT", "PYTHON_DIALECT", "ShaderSource",
  "compute_expression", "build_shader_source",
  "Expression", "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
  "EngineConfig", "LogLevel", "configure_logging", "get_logger", "set_log_level",
  "ExpressionEngine", "parse", "evaluate", "free_variables", "to_source_string",
  "to_tree", "simplify", "derivative", "to_infix_string"
]
