# file: src/barcode_ecc/errors.py

"""
ECC-specific exception hierarchy.

All exceptions inherit from ECCError for unified handling.

    ECCError
    ├── ECCConfigurationError
    │   └── FieldConstructionError
    ├── InvalidInputError
    ├── ECCDecodingError
    │   └── UncorrectableError
    └── ArithmeticInvariantViolation

UncorrectableError is an expected outcome for badly damaged codewords and
callers may recover from it (e.g. by recapturing). ArithmeticInvariantViolation
means the field tables or the algorithm are broken and should be escalated.
"""

from typing import Optional


class ECCError(Exception):
    """Base exception for all ECC-related errors."""
    pass


class ECCConfigurationError(ECCError):
    """Raised when ECC configuration is invalid."""
    pass


class FieldConstructionError(ECCConfigurationError):
    """Raised when Galois field parameters do not describe a valid field."""
    pass


class InvalidInputError(ECCError):
    """Raised when decode arguments are malformed."""
    pass


class ECCDecodingError(ECCError):
    """Raised when decoding fails."""
    pass


class UncorrectableError(ECCDecodingError):
    """Raised when error correction capability is exceeded."""

    def __init__(
        self,
        message: str,
        num_errors: Optional[int] = None,
        max_correctable: Optional[int] = None
    ):
        super().__init__(message)
        self.num_errors = num_errors
        self.max_correctable = max_correctable


class ArithmeticInvariantViolation(ECCError):
    """Raised on impossible field arithmetic (log of zero, division by zero)."""
    pass
