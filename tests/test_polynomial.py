# file: tests/test_polynomial.py

"""
Unit tests for Polynomial.

Test coverage:
    - Construction and leading-zero trimming
    - Addition, multiplication, monomial and scalar products
    - Division identity over random polynomials
    - Horner evaluation, evaluate_at(0), vectorised evaluation
    - Formal derivative in characteristic 2
"""

import random

import numpy as np
import pytest

from barcode_ecc import (
    AZTEC_PARAM,
    ArithmeticInvariantViolation,
    InvalidInputError,
    Polynomial,
)


def random_polynomial(field, rng, max_degree=12):
    degree = rng.randint(0, max_degree)
    return Polynomial(field, [rng.randint(0, field.size - 1) for _ in range(degree + 1)])


def naive_evaluate(poly, x):
    """Sum of c * x^k without Horner's shortcut."""
    field = poly.field
    total = 0
    for power in range(poly.degree + 1):
        total ^= field.multiply(poly.get_coefficient(power), field.power(x, power))
    return total


class TestConstruction:
    """Test construction invariants."""

    def test_leading_zeros_trimmed(self, qr_field):
        p = Polynomial(qr_field, [0, 0, 3, 0, 1])
        assert p.coefficients == (3, 0, 1)
        assert p.degree == 2

    def test_zero_polynomial(self, qr_field):
        p = Polynomial(qr_field, [0, 0, 0])
        assert p.is_zero
        assert p.coefficients == (0,)
        assert p.degree == 0

    def test_empty_coefficients_rejected(self, qr_field):
        with pytest.raises(InvalidInputError, match="at least one"):
            Polynomial(qr_field, [])

    def test_out_of_range_coefficient_rejected(self, qr_field):
        with pytest.raises(InvalidInputError, match="not an element"):
            Polynomial(qr_field, [1, 256])

    @pytest.mark.parametrize("bad", [1.5, 2.0, "3", None, True])
    def test_non_integer_coefficient_rejected(self, qr_field, bad):
        with pytest.raises(InvalidInputError, match="not an integer"):
            Polynomial(qr_field, [1, bad])

    def test_get_coefficient(self, qr_field):
        p = Polynomial(qr_field, [5, 6, 7])
        assert p.get_coefficient(0) == 7
        assert p.get_coefficient(2) == 5
        assert p.get_coefficient(9) == 0

    def test_accepts_numpy_and_bytes(self, qr_field):
        assert Polynomial(qr_field, np.array([0, 1, 2], dtype=np.uint8)).coefficients == (1, 2)
        assert Polynomial(qr_field, b'\x00\x04').coefficients == (4,)

    def test_mixed_fields_rejected(self, qr_field, data_matrix_field):
        a = Polynomial(qr_field, [1, 2])
        b = Polynomial(data_matrix_field, [1, 2])
        with pytest.raises(InvalidInputError, match="same Galois field"):
            a.add(b)

    def test_repr(self, qr_field):
        assert repr(Polynomial(qr_field, [3, 1, 0, 7])) == "Polynomial(3x^3 + x^2 + 7)"
        assert repr(qr_field.zero) == "Polynomial(0)"


class TestArithmetic:
    """Test arithmetic operations."""

    def test_add_pads_shorter_operand(self, qr_field):
        a = Polynomial(qr_field, [1, 2, 3])
        b = Polynomial(qr_field, [3])
        assert a.add(b).coefficients == (1, 2, 0)

    def test_add_self_is_zero(self, qr_field):
        rng = random.Random(1)
        for _ in range(20):
            p = random_polynomial(qr_field, rng)
            assert p.add(p).is_zero

    def test_add_commutative_and_associative(self, qr_field):
        rng = random.Random(2)
        for _ in range(20):
            a, b, c = (random_polynomial(qr_field, rng) for _ in range(3))
            assert a.add(b) == b.add(a)
            assert a.add(b).add(c) == a.add(b.add(c))

    def test_multiply_degree_is_sum(self, qr_field):
        a = Polynomial(qr_field, [1, 5, 9])
        b = Polynomial(qr_field, [7, 0, 0, 2])
        assert a.multiply(b).degree == a.degree + b.degree

    def test_multiply_known_product(self, qr_field):
        # (x + 1)(x + 2) = x^2 + 3x + 2 under XOR addition
        a = Polynomial(qr_field, [1, 1])
        b = Polynomial(qr_field, [1, 2])
        assert a.multiply(b).coefficients == (1, 3, 2)

    def test_multiply_by_zero(self, qr_field):
        a = Polynomial(qr_field, [4, 5, 6])
        assert a.multiply(qr_field.zero).is_zero
        assert a.multiply_scalar(0).is_zero
        assert a.multiply_by_monomial(3, 0).is_zero

    def test_multiply_scalar(self, qr_field):
        a = Polynomial(qr_field, [1, 2])
        assert a.multiply_scalar(2).coefficients == (2, 4)
        assert a.multiply_scalar(1) is a

    def test_multiply_by_monomial(self, qr_field):
        a = Polynomial(qr_field, [1, 2])
        assert a.multiply_by_monomial(2, 2).coefficients == (2, 4, 0, 0)
        with pytest.raises(InvalidInputError):
            a.multiply_by_monomial(-1, 2)

    def test_operands_are_not_mutated(self, qr_field):
        a = Polynomial(qr_field, [9, 8, 7])
        b = Polynomial(qr_field, [1, 2])
        a.add(b)
        a.multiply(b)
        a.divide(b)
        assert a.coefficients == (9, 8, 7)
        assert b.coefficients == (1, 2)


class TestDivision:
    """Test polynomial long division."""

    @pytest.mark.parametrize("seed", range(10))
    def test_division_identity(self, qr_field, seed):
        """dividend == quotient * divisor + remainder, deg(remainder) < deg(divisor)."""
        rng = random.Random(seed)
        for _ in range(10):
            dividend = random_polynomial(qr_field, rng, max_degree=20)
            divisor = random_polynomial(qr_field, rng, max_degree=8)
            if divisor.is_zero:
                continue
            quotient, remainder = dividend.divide(divisor)
            assert quotient.multiply(divisor).add(remainder) == dividend
            assert remainder.is_zero or remainder.degree < divisor.degree

    def test_division_identity_small_field(self):
        rng = random.Random(99)
        for _ in range(30):
            dividend = random_polynomial(AZTEC_PARAM, rng)
            divisor = random_polynomial(AZTEC_PARAM, rng, max_degree=4)
            if divisor.is_zero:
                continue
            quotient, remainder = dividend.divide(divisor)
            assert quotient.multiply(divisor).add(remainder) == dividend

    def test_divide_by_constant(self, qr_field):
        p = Polynomial(qr_field, [4, 6, 8])
        quotient, remainder = p.divide(Polynomial(qr_field, [2]))
        assert quotient.coefficients == (2, 3, 4)
        assert remainder.is_zero

    def test_divide_smaller_degree(self, qr_field):
        p = Polynomial(qr_field, [3, 1])
        quotient, remainder = p.divide(Polynomial(qr_field, [1, 0, 0]))
        assert quotient.is_zero
        assert remainder == p

    def test_divide_by_zero_polynomial(self, qr_field):
        p = Polynomial(qr_field, [1, 2, 3])
        with pytest.raises(ArithmeticInvariantViolation, match="zero polynomial"):
            p.divide(qr_field.zero)


class TestEvaluation:
    """Test evaluation at field elements."""

    def test_evaluate_at_zero_is_constant_term(self, qr_field):
        rng = random.Random(5)
        for _ in range(30):
            p = random_polynomial(qr_field, rng)
            assert p.evaluate_at(0) == p.get_coefficient(0)
            assert p.evaluate_at(0) == naive_evaluate(p, 0)

    def test_evaluate_at_one_is_coefficient_sum(self, qr_field):
        p = Polynomial(qr_field, [1, 2, 4, 8])
        assert p.evaluate_at(1) == 15

    def test_horner_matches_naive(self, qr_field):
        rng = random.Random(6)
        for _ in range(30):
            p = random_polynomial(qr_field, rng)
            x = rng.randint(0, 255)
            assert p.evaluate_at(x) == naive_evaluate(p, x)

    def test_evaluate_many_matches_scalar(self, qr_field):
        rng = random.Random(8)
        xs = np.arange(256)
        for _ in range(10):
            p = random_polynomial(qr_field, rng)
            vector = p.evaluate_many(xs).tolist()
            assert vector == [p.evaluate_at(int(x)) for x in xs]

    def test_evaluate_many_constant(self, qr_field):
        p = Polynomial(qr_field, [9])
        assert p.evaluate_many(np.array([0, 1, 200])).tolist() == [9, 9, 9]


class TestFormalDerivative:
    """Test the characteristic-2 derivative."""

    def test_even_terms_vanish(self, qr_field):
        # d/dx (5x^4 + 3x^3 + 7x^2 + 2x + 1) = 3x^2 + 2
        p = Polynomial(qr_field, [5, 3, 7, 2, 1])
        assert p.formal_derivative().coefficients == (3, 0, 2)

    def test_constant_has_zero_derivative(self, qr_field):
        assert Polynomial(qr_field, [42]).formal_derivative().is_zero

    def test_derivative_of_product_rule(self, qr_field):
        """(ab)' == a'b + ab' holds for formal derivatives."""
        rng = random.Random(11)
        for _ in range(10):
            a = random_polynomial(qr_field, rng, max_degree=6)
            b = random_polynomial(qr_field, rng, max_degree=6)
            left = a.multiply(b).formal_derivative()
            right = a.formal_derivative().multiply(b).add(a.multiply(b.formal_derivative()))
            assert left == right
