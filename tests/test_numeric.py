"""Complex type and real/complex polymorphic arithmetic"""

import cmath
import dataclasses
import math

import pytest

from expression_engine.numeric import (
    Complex, add, sub, mul, div, pow, exp, log, sin, cos, tan,
    sinh, cosh, tanh, abs, step, negate, lorentz_boost, as_numeric
)


def test_complex_magnitude_and_conjugate():
    z = Complex(3.0, 4.0)
    assert z.abs == 5.0
    assert z.abs2 == 25.0
    assert z.conj() == Complex(3.0, -4.0)


@pytest.mark.parametrize("z, expected", [
    (Complex(1.0, 1.0), math.pi / 4),
    (Complex(0.0, 1.0), math.pi / 2),
    (Complex(0.0, -1.0), -math.pi / 2),
    (Complex(0.0, 0.0), math.pi / 2),
    (Complex(-1.0, 0.0), math.pi),
    (Complex(-1.0, 1.0), 3 * math.pi / 4),
    (Complex(-1.0, -1.0), -3 * math.pi / 4),
])
def test_complex_argument_quadrants(z, expected):
    assert z.arg == pytest.approx(expected)


def test_complex_is_immutable():
    z = Complex(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        z.real = 5.0


def test_real_operands_stay_real():
    result = add(1.0, 2.0)
    assert result == 3.0
    assert isinstance(result, float)
    assert mul(3.0, 4.0) == 12.0
    assert sub(3.0, 4.0) == -1.0
    assert div(3.0, 4.0) == 0.75


def test_mixed_operands_promote_to_complex():
    assert add(1.0, Complex(0.0, 1.0)) == Complex(1.0, 1.0)
    assert sub(Complex(0.0, 1.0), 1.0) == Complex(-1.0, 1.0)
    assert mul(Complex(1.0, 2.0), Complex(3.0, 4.0)) == Complex(-5.0, 10.0)


def test_imaginary_part_zero_is_not_collapsed():
    result = add(Complex(1.0, 0.0), 1.0)
    assert isinstance(result, Complex)
    assert result == Complex(2.0, 0.0)


def test_complex_division():
    result = div(Complex(1.0, 0.0), Complex(0.0, 1.0))
    assert result.real == pytest.approx(0.0)
    assert result.imag == pytest.approx(-1.0)


def test_division_by_zero_propagates_non_finite_values():
    assert div(1.0, 0.0) == math.inf
    assert math.isnan(div(0.0, 0.0))
    result = div(Complex(1.0, 0.0), Complex(0.0, 0.0))
    assert not math.isfinite(result.real)


def test_real_powers():
    assert pow(2.0, 3.0) == 8.0
    assert pow(-2.0, 3.0) == -8.0
    assert pow(0.0, 0.0) == 1.0
    assert pow(4.0, 0.5) == 2.0


def test_negative_base_fractional_power_goes_through_complex_log():
    result = pow(-1.0, 0.5)
    assert isinstance(result, Complex)
    assert result.real == pytest.approx(0.0, abs=1e-12)
    assert result.imag == pytest.approx(1.0)


def test_complex_exponential_identity():
    result = exp(Complex(0.0, math.pi))
    assert result.real == pytest.approx(-1.0)
    assert result.imag == pytest.approx(0.0, abs=1e-12)


def test_complex_log_uses_principal_argument():
    result = log(Complex(-1.0, 0.0))
    assert result.real == pytest.approx(0.0)
    assert result.imag == pytest.approx(math.pi)


@pytest.mark.parametrize("function, reference", [
    (exp, cmath.exp), (log, cmath.log),
    (sin, cmath.sin), (cos, cmath.cos), (tan, cmath.tan),
    (sinh, cmath.sinh), (cosh, cmath.cosh), (tanh, cmath.tanh),
])
def test_complex_branch_matches_cmath(function, reference):
    z = 0.3 + 0.4j
    result = function(Complex.from_builtin(z))
    assert complex(result) == pytest.approx(reference(z))


@pytest.mark.parametrize("function, reference", [
    (exp, math.exp), (sin, math.sin), (cos, math.cos), (tan, math.tan),
    (sinh, math.sinh), (cosh, math.cosh), (tanh, math.tanh), (log, math.log),
])
def test_real_branch_matches_math(function, reference):
    result = function(0.7)
    assert isinstance(result, float)
    assert result == pytest.approx(reference(0.7))


def test_sin_of_imaginary_unit():
    result = sin(Complex(0.0, 1.0))
    assert result.real == pytest.approx(0.0, abs=1e-12)
    assert result.imag == pytest.approx(math.sinh(1.0))


def test_abs_and_step():
    assert abs(Complex(3.0, 4.0)) == 5.0
    assert abs(-2.0) == 2.0
    assert step(0.0) == 1.0
    assert step(-0.1) == 0.0
    assert step(Complex(0.0, -5.0)) == 1.0
    assert step(Complex(-1.0, 5.0)) == 0.0


def test_negate():
    assert negate(2.0) == -2.0
    assert negate(Complex(1.0, -2.0)) == Complex(-1.0, 2.0)


def test_as_numeric_normalizes_builtin_values():
    assert as_numeric(2) == 2.0
    assert isinstance(as_numeric(2), float)
    assert as_numeric(1j) == Complex(0.0, 1.0)


def test_lorentz_boost_preserves_interval():
    t, x = 1.0, 2.0
    assert lorentz_boost(0.0, t, x) == (1.0, 2.0)
    t2, x2 = lorentz_boost(0.5, t, x)
    assert t2 * t2 - x2 * x2 == pytest.approx(t * t - x * x)
