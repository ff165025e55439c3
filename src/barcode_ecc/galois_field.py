# file: src/barcode_ecc/galois_field.py

"""
Galois field GF(2^m) arithmetic for barcode Reed-Solomon codes.

Elements are plain ints in [0, size). Addition and subtraction are both XOR;
multiplication, division and inversion go through log/exp lookup tables that
are built once per field and never written again, so one field instance can
be shared by any number of polynomials and decoders.

The named presets cover the fields used by the common 2-D symbologies:

    QR_CODE_FIELD_256      x^8 + x^4 + x^3 + x^2 + 1    (0x11D), b = 0
    DATA_MATRIX_FIELD_256  x^8 + x^5 + x^3 + x^2 + 1    (0x12D), b = 1
    AZTEC_DATA_12          x^12 + x^6 + x^5 + x^3 + 1   (0x1069), b = 1
    AZTEC_DATA_10          x^10 + x^3 + 1               (0x409), b = 1
    AZTEC_DATA_6           x^6 + x + 1                  (0x43), b = 1
    AZTEC_PARAM            x^4 + x + 1                  (0x13), b = 1
"""

from typing import Dict

import numpy as np

from .errors import (
    ArithmeticInvariantViolation,
    ECCConfigurationError,
    FieldConstructionError,
    InvalidInputError,
)
from .polynomial import Polynomial


def _carryless_multiply(a: int, b: int, primitive: int, size: int) -> int:
    """Multiply two field elements bit by bit, reducing by the primitive polynomial."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        b >>= 1
        a <<= 1
        if a & size:
            a ^= primitive
    return result


class GaloisField:
    """
    Finite field GF(size) with log/exp lookup tables.

    Parameters:
        primitive (int): Modulus polynomial as a bitmask (0x11D for QR)
        size (int): Field order, a power of two (default: 256)
        generator_base (int): Exponent of the first consecutive root of the
            code generator polynomial (0 for QR, 1 for Data Matrix/Aztec)
        generator (int): Primitive element alpha whose powers fill the table

    Invariants:
        - exp(log(x)) == x for every nonzero x
        - log(0) is undefined and raises ArithmeticInvariantViolation
        - exp_table / log_table are read-only after construction
    """

    def __init__(self, primitive: int, size: int = 256, generator_base: int = 0, generator: int = 2):
        if size < 4 or size & (size - 1) != 0:
            raise FieldConstructionError(f"Field size must be a power of two >= 4, got {size}")
        if not size <= primitive < 2 * size:
            raise FieldConstructionError(
                f"Primitive polynomial 0x{primitive:X} does not have degree {size.bit_length() - 1}"
            )
        if not 1 < generator < size:
            raise FieldConstructionError(f"Generator {generator} is not a usable element of GF({size})")
        if generator_base < 0:
            raise FieldConstructionError(f"generator_base must be >= 0, got {generator_base}")

        self.primitive = primitive
        self.size = size
        self.generator_base = generator_base
        self.generator = generator
        self.order = size - 1

        exp_table = np.zeros(2 * self.order, dtype=np.int64)
        log_table = np.full(size, -1, dtype=np.int64)

        x = 1
        for i in range(self.order):
            if x == 0 or log_table[x] != -1:
                raise FieldConstructionError(
                    f"Generator {generator} does not span GF({size}) under modulus 0x{primitive:X} "
                    f"(cycle closed after {i} steps)"
                )
            exp_table[i] = x
            log_table[x] = i
            x = _carryless_multiply(x, generator, primitive, size)
        if x != 1:
            raise FieldConstructionError(
                f"Generator {generator} does not return to 1 under modulus 0x{primitive:X}"
            )

        # Doubled exp table lets multiply() index log(a) + log(b) without a modulo
        exp_table[self.order:] = exp_table[:self.order]
        # log(0) is never read through log(); vector code masks zeros itself
        log_table[0] = 0

        exp_table.flags.writeable = False
        log_table.flags.writeable = False
        self.exp_table = exp_table
        self.log_table = log_table

        # Plain lists for scalar lookups, numpy arrays above for vectorised work
        self._exp = exp_table.tolist()
        self._log = log_table.tolist()

        self._zero = Polynomial(self, [0])
        self._one = Polynomial(self, [1])

    @property
    def zero(self) -> Polynomial:
        return self._zero

    @property
    def one(self) -> Polynomial:
        return self._one

    @staticmethod
    def add_or_subtract(a: int, b: int) -> int:
        return a ^ b

    add = add_or_subtract
    subtract = add_or_subtract

    def is_element(self, value) -> bool:
        """True for an int (not bool) in [0, size)."""
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            return False
        return 0 <= value < self.size

    def exp(self, power: int) -> int:
        """Return generator**power; powers wrap modulo size - 1."""
        return self._exp[power % self.order]

    def log(self, a: int) -> int:
        """Return the discrete log of a nonzero element."""
        if a == 0:
            raise ArithmeticInvariantViolation("log(0) is undefined")
        return self._log[a]

    def inverse(self, a: int) -> int:
        if a == 0:
            raise ArithmeticInvariantViolation("0 has no multiplicative inverse")
        return self._exp[self.order - self._log[a]]

    def multiply(self, a: int, b: int) -> int:
        if a == 0 or b == 0:
            return 0
        return self._exp[self._log[a] + self._log[b]]

    def divide(self, a: int, b: int) -> int:
        if b == 0:
            raise ArithmeticInvariantViolation("Division by zero in GF(%d)" % self.size)
        if a == 0:
            return 0
        return self._exp[(self._log[a] - self._log[b]) % self.order]

    def power(self, a: int, n: int) -> int:
        if a == 0:
            if n < 0:
                raise ArithmeticInvariantViolation("0 cannot be raised to a negative power")
            return 1 if n == 0 else 0
        return self._exp[(self._log[a] * n) % self.order]

    def build_monomial(self, degree: int, coefficient: int) -> Polynomial:
        """Return coefficient * x^degree."""
        if degree < 0:
            raise InvalidInputError(f"Monomial degree must be >= 0, got {degree}")
        if coefficient == 0:
            return self._zero
        return Polynomial(self, [coefficient] + [0] * degree)

    def __eq__(self, other):
        if not isinstance(other, GaloisField):
            return NotImplemented
        return (
            self.primitive == other.primitive
            and self.size == other.size
            and self.generator_base == other.generator_base
            and self.generator == other.generator
        )

    def __hash__(self):
        return hash((self.primitive, self.size, self.generator_base, self.generator))

    def __repr__(self):
        return f"GF(0x{self.primitive:X},{self.size},b={self.generator_base})"


QR_CODE_FIELD_256 = GaloisField(0x011D, 256, 0)
DATA_MATRIX_FIELD_256 = GaloisField(0x012D, 256, 1)
AZTEC_DATA_12 = GaloisField(0x1069, 4096, 1)
AZTEC_DATA_10 = GaloisField(0x409, 1024, 1)
AZTEC_DATA_6 = GaloisField(0x43, 64, 1)
AZTEC_PARAM = GaloisField(0x13, 16, 1)
AZTEC_DATA_8 = DATA_MATRIX_FIELD_256
MAXICODE_FIELD_64 = AZTEC_DATA_6

FIELDS: Dict[str, GaloisField] = {
    'qr_code': QR_CODE_FIELD_256,
    'data_matrix': DATA_MATRIX_FIELD_256,
    'aztec_data_12': AZTEC_DATA_12,
    'aztec_data_10': AZTEC_DATA_10,
    'aztec_data_8': AZTEC_DATA_8,
    'aztec_data_6': AZTEC_DATA_6,
    'aztec_param': AZTEC_PARAM,
    'maxicode': MAXICODE_FIELD_64,
}


def get_field(name: str) -> GaloisField:
    """
    Look up a preset field by name.

    Raises:
        ECCConfigurationError: If the name is not registered
    """
    try:
        return FIELDS[name.lower()]
    except (KeyError, AttributeError) as e:
        raise ECCConfigurationError(
            f"Unknown Galois field '{name}', expected one of {sorted(FIELDS)}"
        ) from e
