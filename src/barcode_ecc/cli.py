# file: src/barcode_ecc/cli.py

"""
Command-line Reed-Solomon correction of a single codeword.

Usage:
    barcode-ecc-decode --ecc-symbols 10 2043...17c4...
    python -m barcode_ecc --field data_matrix --ecc-symbols 5 <hex>

Exit codes:
    0  codeword consistent or corrected
    1  too many errors to correct
    2  invalid input or configuration
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import build_decoder, get_rs_config, load_config
from .errors import ECCConfigurationError, InvalidInputError, UncorrectableError
from .metrics import summarize_corrections

EXIT_OK = 0
EXIT_UNCORRECTABLE = 1
EXIT_INVALID = 2


def setup_logging(verbose: bool = False, level: str = 'WARNING'):
    """Configure logging for the command-line tool."""
    level = logging.DEBUG if verbose else getattr(logging, str(level).upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Correct a Reed-Solomon protected barcode codeword',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # QR Code version 1-M "HELLO WORLD" codeword (16 data + 10 ECC)
  barcode-ecc-decode --ecc-symbols 10 \\
      205b0b78d172dc4d4340ec11ec11ec11c4232777ebd7e7e25d17

  # Data Matrix field, settings from a YAML file
  barcode-ecc-decode --config my_config.yaml --field data_matrix <hex>
        """
    )

    parser.add_argument(
        'codeword',
        type=str,
        help='Codeword as a hex string (data symbols followed by ECC symbols)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration YAML file (default: packaged defaults)'
    )

    parser.add_argument(
        '--field',
        type=str,
        default=None,
        help='Preset Galois field name (overrides config)'
    )

    parser.add_argument(
        '--ecc-symbols',
        type=int,
        default=None,
        help='Number of ECC symbols in the codeword (overrides config)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ECCConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    setup_logging(args.verbose, config.get('logging', {}).get('level', 'WARNING'))

    try:
        rs_config = get_rs_config(config)
        if args.field is not None:
            rs_config['field'] = args.field
            rs_config.pop('primitive', None)
        if args.ecc_symbols is not None:
            rs_config['ecc_symbols'] = args.ecc_symbols
        config['ecc']['reed_solomon'] = rs_config

        decoder = build_decoder(config)
        codeword = bytearray.fromhex(args.codeword)
        two_s = int(rs_config['ecc_symbols'])
        corrections = decoder.decode(codeword, two_s)
    except (ECCConfigurationError, InvalidInputError, KeyError, ValueError) as e:
        logging.error(f"Invalid input: {e}")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID
    except UncorrectableError as e:
        logging.warning(f"Uncorrectable codeword: {e}")
        print(f"uncorrectable: {e}", file=sys.stderr)
        return EXIT_UNCORRECTABLE

    summary = summarize_corrections(corrections, len(codeword), two_s)
    print(codeword.hex())
    print(
        f"corrected {summary['num_corrected']} symbol(s) at positions {summary['positions']} "
        f"(capacity {summary['max_correctable']}, "
        f"redundancy {summary['redundancy_overhead']:.1f}%)"
    )
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
