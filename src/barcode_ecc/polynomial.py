# file: src/barcode_ecc/polynomial.py

"""
Polynomials with coefficients in a Galois field.

Polynomials are immutable values: every arithmetic operation returns a new
Polynomial and leaves its operands alone. Coefficients are stored highest
degree first with leading zeros trimmed; the zero polynomial is (0,).
"""

from typing import Iterable, Tuple

import numpy as np

from .errors import ArithmeticInvariantViolation, InvalidInputError


class Polynomial:
    """
    Polynomial over a GaloisField.

    Parameters:
        field: The GaloisField the coefficients belong to (shared, not copied)
        coefficients: Field elements, highest degree first

    Example:
        >>> p = Polynomial(QR_CODE_FIELD_256, [0, 0, 3, 0, 1])  # 3x^2 + 1
        >>> p.degree
        2
    """

    __slots__ = ('field', '_coefficients')

    def __init__(self, field, coefficients: Iterable[int]):
        values = []
        for c in coefficients:
            if isinstance(c, bool) or not isinstance(c, (int, np.integer)):
                raise InvalidInputError(f"Coefficient {c!r} is not an integer")
            values.append(int(c))
        coefficients = values
        if not coefficients:
            raise InvalidInputError("Polynomial needs at least one coefficient")
        for c in coefficients:
            if not 0 <= c < field.size:
                raise InvalidInputError(f"Coefficient {c} is not an element of GF({field.size})")

        first_nonzero = 0
        while first_nonzero < len(coefficients) - 1 and coefficients[first_nonzero] == 0:
            first_nonzero += 1

        self.field = field
        self._coefficients = tuple(coefficients[first_nonzero:])

    @property
    def coefficients(self) -> Tuple[int, ...]:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    @property
    def is_zero(self) -> bool:
        return self._coefficients[0] == 0

    def get_coefficient(self, degree: int) -> int:
        """Return the coefficient of x^degree (0 above the polynomial's degree)."""
        if degree < 0:
            raise InvalidInputError(f"Degree must be >= 0, got {degree}")
        if degree > self.degree:
            return 0
        return self._coefficients[self.degree - degree]

    def evaluate_at(self, x: int) -> int:
        """Evaluate the polynomial at a field element using Horner's method."""
        if x == 0:
            return self._coefficients[-1]
        if x == 1:
            # Sum of all coefficients, since every power of 1 is 1
            result = 0
            for c in self._coefficients:
                result ^= c
            return result

        multiply = self.field.multiply
        result = self._coefficients[0]
        for c in self._coefficients[1:]:
            result = multiply(x, result) ^ c
        return result

    def evaluate_many(self, xs: np.ndarray) -> np.ndarray:
        """
        Evaluate at every element of xs at once.

        Args:
            xs: 1-D integer array of field elements

        Returns:
            Array of the same shape holding p(x) for each x
        """
        xs = np.asarray(xs, dtype=np.int64)
        exp_table = self.field.exp_table
        log_table = self.field.log_table

        log_x = log_table[xs]
        x_nonzero = xs != 0

        result = np.full(xs.shape, self._coefficients[0], dtype=np.int64)
        for c in self._coefficients[1:]:
            nonzero = (result != 0) & x_nonzero
            product = np.where(nonzero, exp_table[log_table[result] + log_x], 0)
            result = product ^ c
        return result

    def _check_field(self, other: 'Polynomial'):
        if self.field != other.field:
            raise InvalidInputError("Polynomials do not share the same Galois field")

    def add_or_subtract(self, other: 'Polynomial') -> 'Polynomial':
        self._check_field(other)
        if self.is_zero:
            return other
        if other.is_zero:
            return self

        smaller, larger = self._coefficients, other._coefficients
        if len(smaller) > len(larger):
            smaller, larger = larger, smaller

        length_diff = len(larger) - len(smaller)
        summed = list(larger[:length_diff])
        for a, b in zip(smaller, larger[length_diff:]):
            summed.append(a ^ b)
        return Polynomial(self.field, summed)

    add = add_or_subtract
    subtract = add_or_subtract

    def multiply(self, other: 'Polynomial') -> 'Polynomial':
        self._check_field(other)
        if self.is_zero or other.is_zero:
            return self.field.zero

        multiply = self.field.multiply
        a, b = self._coefficients, other._coefficients
        product = [0] * (len(a) + len(b) - 1)
        for i, a_coeff in enumerate(a):
            for j, b_coeff in enumerate(b):
                product[i + j] ^= multiply(a_coeff, b_coeff)
        return Polynomial(self.field, product)

    def multiply_scalar(self, scalar: int) -> 'Polynomial':
        if scalar == 0:
            return self.field.zero
        if scalar == 1:
            return self
        multiply = self.field.multiply
        return Polynomial(self.field, [multiply(c, scalar) for c in self._coefficients])

    def multiply_by_monomial(self, degree: int, coefficient: int) -> 'Polynomial':
        """Return self * coefficient * x^degree."""
        if degree < 0:
            raise InvalidInputError(f"Monomial degree must be >= 0, got {degree}")
        if coefficient == 0:
            return self.field.zero
        multiply = self.field.multiply
        product = [multiply(c, coefficient) for c in self._coefficients]
        return Polynomial(self.field, product + [0] * degree)

    def divide(self, other: 'Polynomial') -> Tuple['Polynomial', 'Polynomial']:
        """
        Polynomial long division.

        Returns:
            (quotient, remainder) with self == quotient * other + remainder
            and remainder.degree < other.degree (or remainder zero)

        Raises:
            ArithmeticInvariantViolation: If other is the zero polynomial
        """
        self._check_field(other)
        if other.is_zero:
            raise ArithmeticInvariantViolation("Division by the zero polynomial")

        field = self.field
        quotient = field.zero
        remainder = self

        inverse_leading_term = field.inverse(other.get_coefficient(other.degree))

        while remainder.degree >= other.degree and not remainder.is_zero:
            degree_difference = remainder.degree - other.degree
            scale = field.multiply(remainder.get_coefficient(remainder.degree), inverse_leading_term)
            quotient = quotient.add_or_subtract(field.build_monomial(degree_difference, scale))
            remainder = remainder.add_or_subtract(other.multiply_by_monomial(degree_difference, scale))

        return quotient, remainder

    def formal_derivative(self) -> 'Polynomial':
        """
        Formal derivative in characteristic 2.

        d/dx(a*x^k) is a*x^(k-1) for odd k and vanishes for even k.
        """
        if self.degree == 0:
            return self.field.zero
        derivative = []
        for power in range(self.degree, 0, -1):
            derivative.append(self.get_coefficient(power) if power % 2 == 1 else 0)
        return Polynomial(self.field, derivative)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.field == other.field and self._coefficients == other._coefficients

    def __hash__(self):
        return hash((self.field, self._coefficients))

    def __repr__(self):
        if self.is_zero:
            return "Polynomial(0)"
        terms = []
        for power in range(self.degree, -1, -1):
            c = self.get_coefficient(power)
            if c == 0:
                continue
            if power == 0:
                terms.append(str(c))
            else:
                coeff = '' if c == 1 else str(c)
                terms.append(coeff + ('x' if power == 1 else f'x^{power}'))
        return f"Polynomial({' + '.join(terms)})"
