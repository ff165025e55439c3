# file: src/barcode_ecc/testing_utils.py

"""
Testing utilities for ECC module.

Provides symbol error injection for validation and robustness testing.
Used only in test/evaluation contexts.
"""

import random
from typing import List, Optional, Sequence, Tuple


def inject_symbol_errors(
    codeword: Sequence[int],
    num_errors: int,
    seed: Optional[int] = None,
    field_size: int = 256
) -> Tuple[Sequence[int], List[int]]:
    """
    Corrupt num_errors distinct symbols of a codeword.

    Every chosen symbol is XORed with a nonzero value, so each position
    really changes.

    Args:
        codeword: Original codeword
        num_errors: Number of symbols to corrupt
        seed: Random seed for reproducibility (optional)
        field_size: Symbols stay inside [0, field_size)

    Returns:
        (corrupted codeword, sorted corrupted positions); the codeword is
        bytes for byte-sized fields and a list of ints for larger ones

    Example:
        >>> corrupted, positions = inject_symbol_errors(codeword, 3, seed=42)
        >>> assert len(positions) == 3
    """
    if not 0 <= num_errors <= len(codeword):
        raise ValueError(
            f"num_errors must be in [0, {len(codeword)}], got {num_errors}"
        )

    rng = random.Random(seed)

    corrupted = bytearray(codeword) if field_size <= 256 else list(codeword)
    positions = sorted(rng.sample(range(len(codeword)), num_errors))
    for pos in positions:
        corrupted[pos] ^= rng.randint(1, field_size - 1)

    if isinstance(corrupted, bytearray):
        return bytes(corrupted), positions
    return corrupted, positions


def inject_burst_errors(
    codeword: Sequence[int],
    start: int,
    length: int,
    seed: Optional[int] = None,
    field_size: int = 256
) -> Sequence[int]:
    """
    Corrupt a run of consecutive symbols.

    Burst errors model a smudge or glare patch covering neighbouring modules.

    Returns:
        Corrupted codeword; bytes for byte-sized fields, a list of ints
        for larger ones (as inject_symbol_errors)

    Raises:
        ValueError: If the burst does not fit in the codeword
    """
    if start < 0 or length < 0 or start + length > len(codeword):
        raise ValueError("Burst exceeds codeword length")

    rng = random.Random(seed)
    corrupted = bytearray(codeword) if field_size <= 256 else list(codeword)
    for pos in range(start, start + length):
        corrupted[pos] ^= rng.randint(1, field_size - 1)

    if isinstance(corrupted, bytearray):
        return bytes(corrupted)
    return corrupted
