# file: src/barcode_ecc/decoder.py

"""
ECC decoding entry points.

Provides ecc_decode() for config-driven use and correct_errors() /
decode_blocks() for readers that already know the block layout of a symbol
(e.g. the de-interleaved blocks of a multi-block QR Code version).
"""

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from .config import build_decoder, get_rs_config
from .errors import ECCConfigurationError, InvalidInputError, UncorrectableError
from .rs_decoder import ReedSolomonDecoder

logger = logging.getLogger(__name__)


def ecc_decode(codeword: bytes, config: Dict[str, Any]) -> bytes:
    """
    Correct a single codeword and return its data symbols.

    Args:
        codeword: Data symbols followed by ECC symbols
        config: Configuration dictionary with 'ecc' section

    Returns:
        Corrected data symbols (the ECC symbols are stripped)

    Raises:
        InvalidInputError: If the codeword is not bytes or is malformed
        UncorrectableError: If errors exceed correction capability
        ECCConfigurationError: If configuration is invalid

    Configuration Schema:
        config['ecc']['type']: 'reed_solomon' (required)
        config['ecc']['reed_solomon']['field']: Preset field name (default: 'qr_code')
        config['ecc']['reed_solomon']['ecc_symbols']: Number of ECC symbols (required)
        config['ecc']['reed_solomon']['verify']: Re-check syndromes (default: True)

    Example:
        >>> try:
        ...     data = ecc_decode(received, config)
        ... except UncorrectableError as e:
        ...     print(f"Too many errors, can fix at most {e.max_correctable}")
    """
    if not isinstance(codeword, (bytes, bytearray)):
        raise InvalidInputError(f"Input must be bytes, got {type(codeword)}")

    rs_config = get_rs_config(config)
    try:
        ecc_symbols = int(rs_config['ecc_symbols'])
    except KeyError as e:
        raise ECCConfigurationError(f"Missing required config key: {e}") from e

    decoder = build_decoder(config)

    buffer = bytearray(codeword)
    decoder.decode(buffer, ecc_symbols)
    return bytes(buffer[:len(buffer) - ecc_symbols])


def correct_errors(
    codeword_bytes: bytearray,
    num_data_codewords: int,
    decoder: Optional[ReedSolomonDecoder] = None
) -> int:
    """
    Correct one block in place.

    Args:
        codeword_bytes: Data + ECC codewords of one block (modified in place)
        num_data_codewords: How many leading codewords are data
        decoder: Decoder to use (default: QR Code field)

    Returns:
        Number of symbols corrected

    Raises:
        InvalidInputError: If num_data_codewords leaves no room for ECC symbols
        UncorrectableError: Block is too damaged; codeword_bytes is unchanged
    """
    if decoder is None:
        decoder = ReedSolomonDecoder()

    if not 0 < num_data_codewords < len(codeword_bytes):
        raise InvalidInputError(
            f"num_data_codewords={num_data_codewords} invalid for block of {len(codeword_bytes)}"
        )

    two_s = len(codeword_bytes) - num_data_codewords
    corrections = decoder.decode(codeword_bytes, two_s)
    return len(corrections)


def decode_blocks(
    blocks: Iterable[Tuple[bytearray, int]],
    decoder: Optional[ReedSolomonDecoder] = None
) -> bytes:
    """
    Correct every block and concatenate their data codewords.

    Args:
        blocks: (codeword_bytes, num_data_codewords) pairs in symbol order
        decoder: Decoder to use (default: QR Code field)

    Returns:
        Concatenated data codewords of all blocks

    Raises:
        UncorrectableError: Naming the first block that could not be corrected
    """
    if decoder is None:
        decoder = ReedSolomonDecoder()

    data = bytearray()
    total_corrected = 0
    num_blocks = 0
    for index, (codeword_bytes, num_data_codewords) in enumerate(blocks):
        try:
            total_corrected += correct_errors(codeword_bytes, num_data_codewords, decoder)
        except UncorrectableError as e:
            raise UncorrectableError(
                f"Block {index} could not be corrected: {e}",
                num_errors=e.num_errors,
                max_correctable=e.max_correctable
            ) from e
        data.extend(codeword_bytes[:num_data_codewords])
        num_blocks += 1

    logger.debug(f"Decoded {num_blocks} block(s), {total_corrected} symbol(s) corrected")
    return bytes(data)
