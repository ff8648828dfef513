import math
import numba

# Compiled with numpy's error model so that division by zero, overflow and
# domain errors produce inf/nan instead of Python exceptions.


@numba.njit(cache=True, error_model='numpy')
def real_binary_op(left, right, operator):
  if operator == '+':
    return left + right
  elif operator == '-':
    return left - right
  elif operator == '*':
    return left * right
  elif operator == '/':
    return left / right
  elif operator == '^':
    return left ** right
  return math.nan


@numba.njit(cache=True, error_model='numpy')
def real_unary_op(operand, operator):
  if operator == 'abs':
    return abs(operand)
  elif operator == 'exp':
    return math.exp(operand)
  elif operator == 'sin':
    return math.sin(operand)
  elif operator == 'cos':
    return math.cos(operand)
  elif operator == 'tan':
    return math.tan(operand)
  elif operator == 'sinh':
    return math.sinh(operand)
  elif operator == 'cosh':
    return math.cosh(operand)
  elif operator == 'tanh':
    return math.tanh(operand)
  elif operator == 'log':
    return math.log(operand)
  elif operator == 'step':
    return 1.0 if operand >= 0.0 else 0.0
  elif operator == 'neg':
    return -operand
  return math.nan


@numba.njit(cache=True, error_model='numpy')
def complex_arg(real, imag):
  """Principal argument in (-pi, pi]; the imaginary axis (and 0) maps to +-pi/2"""
  if real == 0.0:
    if imag >= 0.0:
      return math.pi / 2.0
    return -math.pi / 2.0
  val = math.atan(imag / real)
  if real < 0.0:
    if imag >= 0.0:
      return math.pi + val
    return -math.pi + val
  return val


@numba.njit(cache=True, error_model='numpy')
def complex_exp(real, imag):
  scale = math.exp(real)
  return scale * math.cos(imag), scale * math.sin(imag)
