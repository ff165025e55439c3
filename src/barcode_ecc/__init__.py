# file: src/barcode_ecc/__init__.py

"""
barcode_ecc: Reed-Solomon error correction for 2-D barcode codewords

Recovers codewords sampled from QR Code, Data Matrix, Aztec and MaxiCode
symbols. Sits between module-grid demodulation (which produces the ordered
codeword sequence) and message reconstruction (which parses the corrected
data codewords). Encoding is not provided.

Public API:
    - ReedSolomonDecoder(field).decode(received, two_s) -> List[SymbolCorrection]
    - ReedSolomonDecoder(field).try_decode(received, two_s) -> DecodeResult
    - ecc_decode(codeword: bytes, config) -> bytes
    - correct_errors(codeword_bytes, num_data_codewords) -> int
    - decode_blocks(blocks) -> bytes
    - GaloisField, Polynomial and the preset fields
"""

from .errors import (
    ECCError,
    ECCConfigurationError,
    FieldConstructionError,
    InvalidInputError,
    ECCDecodingError,
    UncorrectableError,
    ArithmeticInvariantViolation,
)
from .polynomial import Polynomial
from .galois_field import (
    GaloisField,
    QR_CODE_FIELD_256,
    DATA_MATRIX_FIELD_256,
    AZTEC_DATA_12,
    AZTEC_DATA_10,
    AZTEC_DATA_8,
    AZTEC_DATA_6,
    AZTEC_PARAM,
    MAXICODE_FIELD_64,
    FIELDS,
    get_field,
)
from .rs_decoder import ReedSolomonDecoder, SymbolCorrection, DecodeResult
from .decoder import ecc_decode, correct_errors, decode_blocks
from .config import load_config, get_default_config, build_field, build_decoder
from .metrics import (
    compute_ser,
    count_symbol_errors,
    compute_redundancy_overhead,
    max_correctable_errors,
    summarize_corrections,
)

__version__ = "1.0.0"

__all__ = [
    "ReedSolomonDecoder",
    "SymbolCorrection",
    "DecodeResult",
    "GaloisField",
    "Polynomial",
    "QR_CODE_FIELD_256",
    "DATA_MATRIX_FIELD_256",
    "AZTEC_DATA_12",
    "AZTEC_DATA_10",
    "AZTEC_DATA_8",
    "AZTEC_DATA_6",
    "AZTEC_PARAM",
    "MAXICODE_FIELD_64",
    "FIELDS",
    "get_field",
    "ecc_decode",
    "correct_errors",
    "decode_blocks",
    "load_config",
    "get_default_config",
    "build_field",
    "build_decoder",
    "compute_ser",
    "count_symbol_errors",
    "compute_redundancy_overhead",
    "max_correctable_errors",
    "summarize_corrections",
    "ECCError",
    "ECCConfigurationError",
    "FieldConstructionError",
    "InvalidInputError",
    "ECCDecodingError",
    "UncorrectableError",
    "ArithmeticInvariantViolation",
]
