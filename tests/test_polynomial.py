"""Tests for polynomial operations and Lagrange interpolation."""

import pytest

from gf import rng
from gf.field import GF
from gf.polynomial import Polynomial, lagrange_coefficients_at_zero

F = GF[1_000_000_007]


@pytest.fixture(autouse=True)
def seeded():
    rng.set_seed(42)
    yield
    rng.set_seed(None)


def test_evaluate_constant():
    p = Polynomial([F(42)])
    assert p.evaluate(F(0)) == 42
    assert p.evaluate(F(99)) == 42

def test_evaluate_linear():
    p = Polynomial([F(3), F(2)])
    assert p.evaluate(F(0)) == 3
    assert p.evaluate(F(1)) == 5
    assert p.evaluate(5) == 13

def test_evaluate_quadratic():
    p = Polynomial([F(1), F(0), F(1)])
    assert p.evaluate(F(0)) == 1
    assert p.evaluate(F(3)) == 10

def test_int_coefficients_with_field():
    p = Polynomial([1, -1], F)
    assert p.coeffs == [F(1), F(-1)]
    assert p.evaluate(1) == 0

def test_field_required():
    with pytest.raises(ValueError):
        Polynomial([1, 2])
    with pytest.raises(ValueError):
        Polynomial([])

def test_trailing_zeros_trimmed():
    p = Polynomial([F(1), F(0), F(0)])
    assert p.degree == 0
    zero = Polynomial([0, 0], F)
    assert zero.degree == -1
    assert zero.evaluate(123) == 0

def test_add_sub():
    a = Polynomial([1, 2, 3], F)
    b = Polynomial([5, 0, -3], F)
    assert a + b == Polynomial([6, 2], F)
    assert (a - a).degree == -1
    assert a - b + b == a

def test_mul_convolution():
    a = Polynomial([1, 1], F)
    assert a * a == Polynomial([1, 2, 1], F)
    b = Polynomial([F(-1), F(0), F(2)])
    c = a * b
    for x in range(5):
        assert c.evaluate(x) == a.evaluate(x) * b.evaluate(x)

def test_mul_large_coefficients():
    a = Polynomial([-1, -1, -1], F)
    assert a * a == Polynomial([1, 2, 3, 2, 1], F)

def test_mul_scalar():
    a = Polynomial([1, 2], F)
    assert a * 3 == Polynomial([3, 6], F)
    assert 3 * a == a * F(3)
    assert a * 0 == Polynomial([], F)

def test_mixed_fields_rejected():
    a = Polynomial([1], F)
    b = Polynomial([1], GF[7])
    with pytest.raises(TypeError):
        a + b
    with pytest.raises(TypeError):
        a * b
    assert a != b

def test_random_polynomial():
    p = Polynomial.random(F, degree=1, constant=F(42))
    assert p.evaluate(F(0)) == 42
    assert p.degree == 1

def test_interpolate_at_zero_degree1():
    secret = F(42)
    p = Polynomial.random(F, degree=1, constant=secret)
    pts = [(F(1), p.evaluate(F(1))),
           (F(2), p.evaluate(F(2)))]
    assert Polynomial.interpolate_at_zero(pts) == secret

def test_interpolate_at_zero_degree1_other_points():
    secret = F(99)
    p = Polynomial.random(F, degree=1, constant=secret)
    pts = [(F(3), p.evaluate(F(3))),
           (F(4), p.evaluate(F(4)))]
    assert Polynomial.interpolate_at_zero(pts) == secret

def test_interpolate_at_zero_degree2():
    secret = F(7)
    p = Polynomial([F(7), F(3), F(5)])
    pts = [(F(i), p.evaluate(F(i))) for i in range(1, 4)]
    assert Polynomial.interpolate_at_zero(pts) == secret

def test_interpolate_overdetermined():
    secret = F(42)
    p = Polynomial.random(F, degree=1, constant=secret)
    pts = [(F(i), p.evaluate(F(i))) for i in range(1, 5)]
    assert Polynomial.interpolate_at_zero(pts) == secret

def test_interpolate_recovers_polynomial():
    p = Polynomial.random(F, degree=4, constant=F(123))
    pts = [(F(i), p.evaluate(i)) for i in range(10, 15)]
    assert Polynomial.interpolate(pts) == p

def test_interpolate_duplicate_x():
    pts = [(F(1), F(2)), (F(1), F(3))]
    with pytest.raises(ValueError):
        Polynomial.interpolate(pts)
    with pytest.raises(ValueError):
        Polynomial.interpolate_at_zero(pts)

def test_interpolate_empty():
    with pytest.raises(ValueError):
        Polynomial.interpolate([])
    with pytest.raises(ValueError):
        Polynomial.interpolate_at_zero([])

def test_lagrange_coefficients():
    x_vals = [F(1), F(2)]
    lambdas = lagrange_coefficients_at_zero(x_vals)
    assert lambdas[0] == F(2)
    assert lambdas[1] == F(-1)
    assert lagrange_coefficients_at_zero([]) == []
