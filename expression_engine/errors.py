"""Exception hierarchy for the expression engine."""


class ExpressionError(ValueError):
  """Base class for every failure raised by the engine"""


class ParseError(ExpressionError):
  """The source text could not be turned into an RPN sequence"""


class LexError(ParseError):
  """Unknown character or malformed numeric literal"""

  def __init__(self, message: str, source: str = '', position: int = -1):
    super().__init__(message)
    self.source = source
    self.position = position


class ExpressionSyntaxError(ParseError):
  """Unbalanced parentheses or operators without enough operands"""


class EvaluationError(ExpressionError):
  """Unbound identifier or malformed RPN sequence during evaluation"""


class DifferentiationGap(ExpressionError):
  """No derivative rule exists for a node"""

  def __init__(self, message: str, operator: str = ''):
    super().__init__(message)
    self.operator = operator
