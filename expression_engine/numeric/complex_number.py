import math
from dataclasses import dataclass

from .kernels import complex_arg, real_binary_op


@dataclass(frozen=True)
class Complex:
  """Immutable complex value; an imaginary part of 0 is never collapsed to a real"""
  real: float
  imag: float

  @classmethod
  def from_real(cls, r: float) -> 'Complex':
    return cls(float(r), 0.0)

  @classmethod
  def from_imag(cls, r: float) -> 'Complex':
    return cls(0.0, float(r))

  @classmethod
  def from_builtin(cls, z: complex) -> 'Complex':
    return cls(float(z.real), float(z.imag))

  def conj(self) -> 'Complex':
    return Complex(self.real, -self.imag)

  @property
  def abs2(self) -> float:
    return self.real * self.real + self.imag * self.imag

  @property
  def abs(self) -> float:
    return math.sqrt(self.abs2)

  @property
  def arg(self) -> float:
    return complex_arg(float(self.real), float(self.imag))

  def inverse_abs2(self) -> float:
    """1/|z|^2, inf for z == 0"""
    return real_binary_op(1.0, float(self.abs2), '/')

  def __complex__(self) -> complex:
    return complex(self.real, self.imag)

  def __repr__(self) -> str:
    return f"Complex({self.real!r}, {self.imag!r})"
