# file: src/barcode_ecc/metrics.py

"""
ECC performance metrics.

Provides utilities to compute Symbol Error Rate (SER), redundancy overhead
and correction statistics for evaluating decoder behaviour.
"""

from typing import Dict, List, Optional, Sequence

from .rs_decoder import SymbolCorrection


def count_symbol_errors(original: Sequence[int], received: Sequence[int]) -> int:
    """
    Count positions where two codewords differ.

    Raises:
        ValueError: If inputs have different lengths
    """
    if len(original) != len(received):
        raise ValueError(
            f"Length mismatch: original={len(original)}, received={len(received)}"
        )
    return sum(1 for s1, s2 in zip(original, received) if s1 != s2)


def compute_ser(original: Sequence[int], received: Sequence[int]) -> float:
    """
    Compute Symbol Error Rate (SER) between two codewords.

    SER = (number of differing symbols) / (total number of symbols)

    Args:
        original: Original codeword
        received: Received (possibly corrupted) codeword

    Returns:
        SER as a float in [0.0, 1.0]

    Raises:
        ValueError: If inputs have different lengths

    Example:
        >>> original = b'\x00\x00\x00\x00'
        >>> received = b'\x01\x00\x02\x00'  # 2 symbols corrupted
        >>> ser = compute_ser(original, received)
        >>> assert ser == 2.0 / 4
    """
    symbol_errors = count_symbol_errors(original, received)
    if len(original) == 0:
        return 0.0
    return symbol_errors / len(original)


def compute_redundancy_overhead(codeword_length: int, two_s: int) -> float:
    """
    Compute the ECC redundancy of a codeword as a percentage of its data.

    Overhead = (two_s / (codeword_length - two_s)) * 100

    Args:
        codeword_length: Total symbols n (data followed by ECC)
        two_s: Number of ECC symbols

    Raises:
        ValueError: Unless 0 < two_s < codeword_length

    Example:
        >>> overhead = compute_redundancy_overhead(26, 10)  # QR 1-M
        >>> assert overhead == 62.5
    """
    if not 0 < two_s < codeword_length:
        raise ValueError(
            f"two_s must be in (0, {codeword_length}), got {two_s}"
        )

    return (two_s / (codeword_length - two_s)) * 100.0


def max_correctable_errors(two_s: int) -> int:
    """Number of symbol errors a code with two_s ECC symbols can correct."""
    if two_s < 0:
        raise ValueError(f"two_s must be >= 0, got {two_s}")
    return two_s // 2


def summarize_corrections(
    corrections: List[SymbolCorrection],
    codeword_length: int,
    two_s: Optional[int] = None
) -> Dict[str, object]:
    """
    Summarise a decode() result.

    Returns:
        Dictionary with:
            - num_corrected: Number of corrected symbols
            - positions: Corrected positions in ascending order
            - symbol_error_rate: num_corrected / codeword_length
        and, when two_s is given:
            - max_correctable: two_s // 2
            - redundancy_overhead: ECC overhead in percent
    """
    if codeword_length <= 0:
        raise ValueError(f"codeword_length must be > 0, got {codeword_length}")

    positions = sorted(c.position for c in corrections)
    summary = {
        'num_corrected': len(positions),
        'positions': positions,
        'symbol_error_rate': len(positions) / codeword_length,
    }
    if two_s is not None:
        summary['max_correctable'] = max_correctable_errors(two_s)
        summary['redundancy_overhead'] = compute_redundancy_overhead(codeword_length, two_s)
    return summary
