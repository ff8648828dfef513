"""
Polymorphic numeric operations.

Every function accepts either a plain real (float) or a Complex value. Two
reals are handled by the compiled real kernels; as soon as one operand is
Complex the other is promoted with Complex(r, 0) and the complex formula is
applied. The names match the calls emitted by the Python code
generation dialect, so generated source can be evaluated against this module.
"""

import math
from types import MappingProxyType
from typing import Callable, Mapping, Tuple, Union

from .complex_number import Complex
from .kernels import complex_exp, real_binary_op, real_unary_op

Numeric = Union[float, Complex]

IMAG_UNIT = Complex(0.0, 1.0)


def real(r: float) -> Complex:
  return Complex(float(r), 0.0)


def imag(r: float) -> Complex:
  return Complex(0.0, float(r))


def as_numeric(value) -> Numeric:
  """Normalize ints, numpy scalars and builtin complex values to Numeric"""
  if isinstance(value, Complex):
    return value
  if isinstance(value, complex):
    return Complex.from_builtin(value)
  return float(value)


def _promote(z: Numeric) -> Complex:
  if isinstance(z, Complex):
    return z
  return Complex(float(z), 0.0)


def _is_complex_pair(z: Numeric, w: Numeric) -> bool:
  return isinstance(z, Complex) or isinstance(w, Complex)


def _complex_add(z: Complex, w: Complex) -> Complex:
  return Complex(z.real + w.real, z.imag + w.imag)


def _complex_sub(z: Complex, w: Complex) -> Complex:
  return Complex(z.real - w.real, z.imag - w.imag)


def _complex_mul(z: Complex, w: Complex) -> Complex:
  return Complex(z.real * w.real - z.imag * w.imag,
                 z.real * w.imag + z.imag * w.real)


def _complex_div(z: Complex, w: Complex) -> Complex:
  inv_w = _complex_mul(real(w.inverse_abs2()), w.conj())
  return _complex_mul(z, inv_w)


def _needs_complex_power(base: float, exponent: float) -> bool:
  # negative bases only have a real power for integral exponents
  return base < 0.0 and math.isfinite(exponent) and not float(exponent).is_integer()


def _complex_pow(z: Complex, w: Complex) -> Complex:
  if z.imag == 0.0 and w.imag == 0.0 and not _needs_complex_power(z.real, w.real):
    return Complex(real_binary_op(float(z.real), float(w.real), '^'), 0.0)
  return exp(mul(log(z), w))


def add(z: Numeric, w: Numeric) -> Numeric:
  if _is_complex_pair(z, w):
    return _complex_add(_promote(z), _promote(w))
  return real_binary_op(float(z), float(w), '+')


def sub(z: Numeric, w: Numeric) -> Numeric:
  if _is_complex_pair(z, w):
    return _complex_sub(_promote(z), _promote(w))
  return real_binary_op(float(z), float(w), '-')


def mul(z: Numeric, w: Numeric) -> Numeric:
  if _is_complex_pair(z, w):
    return _complex_mul(_promote(z), _promote(w))
  return real_binary_op(float(z), float(w), '*')


def div(z: Numeric, w: Numeric) -> Numeric:
  if _is_complex_pair(z, w):
    return _complex_div(_promote(z), _promote(w))
  return real_binary_op(float(z), float(w), '/')


def pow(z: Numeric, w: Numeric) -> Numeric:
  if _is_complex_pair(z, w) or _needs_complex_power(float(z), float(w)):
    return _complex_pow(_promote(z), _promote(w))
  return real_binary_op(float(z), float(w), '^')


def exp(z: Numeric) -> Numeric:
  if isinstance(z, Complex):
    re, im = complex_exp(float(z.real), float(z.imag))
    return Complex(re, im)
  return real_unary_op(float(z), 'exp')


def log(z: Numeric) -> Numeric:
  if isinstance(z, Complex):
    return Complex(real_unary_op(z.abs, 'log'), z.arg)
  return real_unary_op(float(z), 'log')


def cos(z: Numeric) -> Numeric:
  if isinstance(z, Complex):
    return mul(real(0.5), add(exp(mul(imag(1.0), z)), exp(mul(imag(-1.0), z))))
  return real_unary_op(float(z), 'cos')


def sin(z: Numeric) -> Numeric:
  if isinstance(z, Complex):
    return mul(imag(-0.5), sub(exp(mul(imag(1.0), z)), exp(mul(imag(-1.0), z))))
  return real_unary_op(float(z), 'sin')


def tan(z: Numeric) -> Numeric:
  if isinstance(z, Complex):
    return div(sin(z), cos(z))
  return real_unary_op(float(z), 'tan')


def cosh(z: Numeric) -> Numeric:
  if isinstance(z, Complex):
    return mul(real(0.5), add(exp(z), exp(mul(real(-1.0), z))))
  return real_unary_op(float(z), 'cosh')


def sinh(z: Numeric) -> Numeric:
  if isinstance(z, Complex):
    return mul(real(0.5), sub(exp(z), exp(mul(real(-1.0), z))))
  return real_unary_op(float(z), 'sinh')


def tanh(z: Numeric) -> Numeric:
  if isinstance(z, Complex):
    return div(sinh(z), cosh(z))
  return real_unary_op(float(z), 'tanh')


def abs(z: Numeric) -> float:
  if isinstance(z, Complex):
    return z.abs
  return real_unary_op(float(z), 'abs')


def step(z: Numeric) -> float:
  """1.0 when the real part is non-negative, regardless of the imaginary part"""
  if isinstance(z, Complex):
    return 1.0 if z.real >= 0.0 else 0.0
  return real_unary_op(float(z), 'step')


def negate(z: Numeric) -> Numeric:
  if isinstance(z, Complex):
    return Complex(-z.real, -z.imag)
  return real_unary_op(float(z), 'neg')


def lorentz_boost(angle: Numeric, t: Numeric, x: Numeric) -> Tuple[Numeric, Numeric]:
  """Boost the event (t, x) by the given rapidity"""
  return (add(mul(cosh(angle), t), mul(sinh(angle), x)),
          add(mul(sinh(angle), t), mul(cosh(angle), x)))


FUNCTIONS: Mapping[str, Callable[[Numeric], Numeric]] = MappingProxyType({
  'abs': abs,
  'exp': exp,
  'sin': sin, 'cos': cos, 'tan': tan,
  'sinh': sinh, 'cosh': cosh, 'tanh': tanh,
  'log': log,
  'step': step,
})

BINARY_OPERATIONS: Mapping[str, Callable[[Numeric, Numeric], Numeric]] = MappingProxyType({
  '+': add, '-': sub, '*': mul, '/': div, '^': pow,
})
