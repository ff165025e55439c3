# file: src/barcode_ecc/rs_decoder.py

"""
Reed-Solomon decoder for barcode codewords.

Pipeline for one decode() call:
    received symbols
    → syndromes S_i = r(alpha^(i + b))
    → (all zero? done, buffer untouched)
    → extended Euclidean algorithm → error locator sigma, evaluator omega
    → exhaustive root search over the field → error positions
    → Forney formula → error magnitudes
    → verification on a scratch copy
    → XOR corrections into the caller's buffer

Position convention: received[0] is the coefficient of the highest power,
so an error locator alpha^j refers to received[n - 1 - j].

The caller's buffer is only written once every correction has been found
and verified; any failure leaves it exactly as it was.
"""

import collections.abc
import logging
from dataclasses import dataclass, field as dataclass_field
from typing import List, MutableSequence, Optional, Sequence, Tuple

import numpy as np

from .errors import (
    ArithmeticInvariantViolation,
    ECCError,
    InvalidInputError,
    UncorrectableError,
)
from .galois_field import GaloisField, QR_CODE_FIELD_256
from .polynomial import Polynomial

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymbolCorrection:
    """One located error: XOR magnitude into received[position]."""
    position: int
    magnitude: int


@dataclass
class DecodeResult:
    """
    Outcome of ReedSolomonDecoder.try_decode().

    Attributes:
        success: True if the codeword is now consistent
        corrections: Applied corrections (empty when nothing was wrong)
        error: The InvalidInputError / UncorrectableError on failure
    """
    success: bool
    corrections: List[SymbolCorrection] = dataclass_field(default_factory=list)
    error: Optional[ECCError] = None

    @property
    def error_kind(self) -> Optional[str]:
        return type(self.error).__name__ if self.error is not None else None

    @property
    def corrected_positions(self) -> List[int]:
        return [c.position for c in self.corrections]


class ReedSolomonDecoder:
    """
    Reed-Solomon decoder over a shared GaloisField.

    Parameters:
        field: Field the code is defined over (default: QR Code field)
        verify: Recompute syndromes on the corrected data before writing back

    Invariants:
        - Corrects up to two_s // 2 symbol errors
        - No state is kept between calls; one instance may be shared
        - The received buffer is never modified when an exception is raised
    """

    def __init__(self, field: GaloisField = QR_CODE_FIELD_256, verify: bool = True):
        self.field = field
        self.verify = verify

    def decode(self, received: MutableSequence[int], two_s: int) -> List[SymbolCorrection]:
        """
        Correct received in place.

        Args:
            received: Codeword symbols (data followed by ECC), mutable
            two_s: Number of error-correction symbols in the codeword

        Returns:
            Corrections applied, sorted by position (empty if none needed)

        Raises:
            InvalidInputError: Malformed arguments
            UncorrectableError: More errors than two_s // 2 can certify
        """
        if not isinstance(received, (collections.abc.MutableSequence, np.ndarray)):
            raise InvalidInputError(
                f"received must be a mutable sequence, got {type(received).__name__}"
            )
        self._validate(received, two_s)

        received_poly = Polynomial(self.field, received)
        syndromes = self._syndromes(received_poly, two_s)
        if not any(syndromes):
            logger.debug("All %d syndromes zero, codeword is consistent", two_s)
            return []

        logger.debug("Syndromes: %s", syndromes)

        # Syndrome polynomial with S_i as the coefficient of x^i
        syndrome_poly = Polynomial(self.field, syndromes[::-1])
        sigma, omega = self.run_euclidean_algorithm(
            self.field.build_monomial(two_s, 1),
            syndrome_poly,
            two_s // 2,
        )
        logger.debug("Error locator degree %d: %r", sigma.degree, sigma)

        corrections = self._find_corrections(sigma, omega, len(received), two_s)

        if self.verify:
            self._verify(received, corrections, two_s)

        for correction in corrections:
            received[correction.position] ^= correction.magnitude

        logger.info(
            "Corrected %d symbol(s) at positions %s",
            len(corrections), [c.position for c in corrections]
        )
        return corrections

    def try_decode(self, received: MutableSequence[int], two_s: int) -> DecodeResult:
        """
        Like decode(), but reports expected failures as a DecodeResult.

        ArithmeticInvariantViolation is not converted: it signals a defect.
        """
        try:
            corrections = self.decode(received, two_s)
        except (InvalidInputError, UncorrectableError) as e:
            logger.debug("Decode failed (%s): %s", type(e).__name__, e)
            return DecodeResult(success=False, error=e)
        return DecodeResult(success=True, corrections=corrections)

    def compute_syndromes(self, received: Sequence[int], two_s: int) -> List[int]:
        """Return S_0 .. S_{two_s - 1} for received."""
        self._validate(received, two_s)
        return self._syndromes(Polynomial(self.field, received), two_s)

    def run_euclidean_algorithm(
        self,
        a: Polynomial,
        b: Polynomial,
        R: int
    ) -> Tuple[Polynomial, Polynomial]:
        """
        Solve the key equation with the extended Euclidean algorithm.

        Divides successive remainders until the remainder degree drops below R.

        Args:
            a: x^two_s
            b: Syndrome polynomial
            R: two_s // 2

        Returns:
            (sigma, omega) normalised so that sigma(0) == 1

        Raises:
            UncorrectableError: The algorithm degenerates
            ArithmeticInvariantViolation: A division step failed to reduce degree
        """
        field = self.field
        if a.degree < b.degree:
            a, b = b, a

        r_last, r = a, b
        t_last, t = field.zero, field.one

        while r.degree >= R:
            r_last_last, t_last_last = r_last, t_last
            r_last, t_last = r, t

            if r_last.is_zero:
                raise UncorrectableError(
                    "Euclidean algorithm reached a zero remainder before degree bound",
                    max_correctable=R
                )

            q, r = r_last_last.divide(r_last)
            t = q.multiply(t_last).add_or_subtract(t_last_last)

            if not r.is_zero and r.degree >= r_last.degree:
                raise ArithmeticInvariantViolation(
                    f"Division failed to reduce degree {r.degree} below {r_last.degree}"
                )

        sigma_tilde_at_zero = t.get_coefficient(0)
        if sigma_tilde_at_zero == 0:
            raise UncorrectableError("Error locator has zero constant term", max_correctable=R)

        inverse = field.inverse(sigma_tilde_at_zero)
        sigma = t.multiply_scalar(inverse)
        omega = r.multiply_scalar(inverse)
        return sigma, omega

    def _validate(self, received: Sequence[int], two_s: int):
        if isinstance(two_s, bool) or not isinstance(two_s, (int, np.integer)):
            raise InvalidInputError(f"two_s must be an int, got {type(two_s).__name__}")

        n = len(received)
        if n == 0:
            raise InvalidInputError("Cannot decode an empty codeword")
        if two_s <= 0 or two_s % 2 != 0:
            raise InvalidInputError(f"two_s must be a positive even number, got {two_s}")
        if two_s >= n:
            raise InvalidInputError(
                f"two_s={two_s} must be smaller than the codeword length {n}"
            )
        if n > self.field.order:
            raise InvalidInputError(
                f"Codeword length {n} exceeds {self.field.order}, the maximum for GF({self.field.size})"
            )
        for index, value in enumerate(received):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidInputError(
                    f"Symbol {value!r} at position {index} is not an integer"
                )
            if not self.field.is_element(value):
                raise InvalidInputError(
                    f"Symbol {value} at position {index} is not an element of GF({self.field.size})"
                )

    def _syndromes(self, received_poly: Polynomial, two_s: int) -> List[int]:
        base = self.field.generator_base
        return [
            received_poly.evaluate_at(self.field.exp(i + base))
            for i in range(two_s)
        ]

    def _find_corrections(
        self,
        sigma: Polynomial,
        omega: Polynomial,
        n: int,
        two_s: int
    ) -> List[SymbolCorrection]:
        field = self.field
        max_correctable = two_s // 2
        num_errors = sigma.degree

        if num_errors == 0:
            raise UncorrectableError(
                "Nonzero syndromes but the error locator has no roots",
                num_errors=0,
                max_correctable=max_correctable
            )
        if num_errors > max_correctable:
            raise UncorrectableError(
                f"Error locator degree {num_errors} exceeds correction capacity {max_correctable}",
                num_errors=num_errors,
                max_correctable=max_correctable
            )

        # Chien-style search: sigma(alpha^i) for every nonzero element in one pass
        values = sigma.evaluate_many(field.exp_table[:field.order])
        root_powers = np.flatnonzero(values == 0).tolist()
        if len(root_powers) != num_errors:
            raise UncorrectableError(
                f"Error locator degree {num_errors} does not match {len(root_powers)} roots found",
                num_errors=num_errors,
                max_correctable=max_correctable
            )

        derivative = sigma.formal_derivative()
        # Forney scale X^(1 - b)
        scale_power = 1 - field.generator_base

        corrections = []
        for i in root_powers:
            root = field.exp(i)
            # The root is X^-1, so log(X) = -i
            locator_log = (-i) % field.order
            position = n - 1 - locator_log
            if not 0 <= position < n:
                raise UncorrectableError(
                    f"Error location alpha^{locator_log} lies outside codeword of length {n}",
                    num_errors=num_errors,
                    max_correctable=max_correctable
                )

            denominator = derivative.evaluate_at(root)
            if denominator == 0:
                raise UncorrectableError(
                    "Error locator has a repeated root",
                    num_errors=num_errors,
                    max_correctable=max_correctable
                )
            magnitude = field.divide(omega.evaluate_at(root), denominator)
            magnitude = field.multiply(magnitude, field.exp(locator_log * scale_power))
            if magnitude == 0:
                raise UncorrectableError(
                    f"Zero error magnitude at position {position}",
                    num_errors=num_errors,
                    max_correctable=max_correctable
                )
            corrections.append(SymbolCorrection(position=position, magnitude=magnitude))

        corrections.sort(key=lambda c: c.position)
        return corrections

    def _verify(self, received: Sequence[int], corrections: List[SymbolCorrection], two_s: int):
        corrected = [int(v) for v in received]
        for correction in corrections:
            corrected[correction.position] ^= correction.magnitude
        if any(self._syndromes(Polynomial(self.field, corrected), two_s)):
            raise UncorrectableError(
                "Corrected codeword still has nonzero syndromes",
                num_errors=len(corrections),
                max_correctable=two_s // 2
            )
