"""Complex number type and real/complex polymorphic arithmetic."""

from .complex_number import Complex
from .operations import (
    Numeric, IMAG_UNIT, FUNCTIONS, BINARY_OPERATIONS,
    real, imag, as_numeric,
    add, sub, mul, div, pow, exp, log,
    sin, cos, tan, sinh, cosh, tanh, abs, step, negate,
    lorentz_boost
)

__all__ = [
    'Complex', 'Numeric', 'IMAG_UNIT', 'FUNCTIONS', 'BINARY_OPERATIONS',
    'real', 'imag', 'as_numeric',
    'add', 'sub', 'mul', 'div', 'pow', 'exp', 'log',
    'sin', 'cos', 'tan', 'sinh', 'cosh', 'tanh', 'abs', 'step', 'negate',
    'lorentz_boost'
]
