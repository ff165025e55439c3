# file: tests/conftest.py

"""
Shared fixtures and codeword builders for the barcode_ecc test suite.

Valid codewords come from two independent sources:
    - reedsolo.RSCodec, for the byte-sized QR Code and Data Matrix fields
    - systematic_encode(), a small polynomial-division encoder built on
      barcode_ecc.Polynomial, for fields reedsolo does not cover here
"""

from typing import List, Sequence

import pytest
from reedsolo import RSCodec

from barcode_ecc import (
    DATA_MATRIX_FIELD_256,
    QR_CODE_FIELD_256,
    GaloisField,
    Polynomial,
)


# QR Code version 1-M, "HELLO WORLD": 16 data codewords + 10 ECC codewords
HELLO_WORLD_DATA = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
HELLO_WORLD_ECC = [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]
HELLO_WORLD_CODEWORD = HELLO_WORLD_DATA + HELLO_WORLD_ECC


def reedsolo_codeword(data: Sequence[int], nsym: int, field: GaloisField = QR_CODE_FIELD_256) -> bytearray:
    """Encode with reedsolo using the conventions of the given 256-element field."""
    # A fresh codec per call: older reedsolo releases keep module-level tables
    codec = RSCodec(nsym, fcr=field.generator_base, prim=field.primitive)
    return bytearray(codec.encode(bytes(data)))


def generator_polynomial(field: GaloisField, two_s: int) -> Polynomial:
    """Product of (x - alpha^(b + i)) for i in [0, two_s)."""
    generator = field.one
    for i in range(two_s):
        root = field.exp(i + field.generator_base)
        generator = generator.multiply(Polynomial(field, [1, root]))
    return generator


def check_symbols(field: GaloisField, poly: Polynomial, two_s: int) -> List[int]:
    """poly mod g(x), padded to exactly two_s symbols."""
    _, remainder = poly.divide(generator_polynomial(field, two_s))
    check = list(remainder.coefficients)
    return [0] * (two_s - len(check)) + check


def systematic_encode(field: GaloisField, data: Sequence[int], two_s: int) -> List[int]:
    """Append two_s check symbols so that the result has all-zero syndromes."""
    shifted = Polynomial(field, list(data)).multiply_by_monomial(two_s, 1)
    return list(data) + check_symbols(field, shifted, two_s)


@pytest.fixture
def hello_world():
    """Fresh mutable copy of the QR 1-M HELLO WORLD codeword."""
    return bytearray(HELLO_WORLD_CODEWORD)


@pytest.fixture
def qr_field():
    return QR_CODE_FIELD_256


@pytest.fixture
def data_matrix_field():
    return DATA_MATRIX_FIELD_256
