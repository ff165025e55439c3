# file: src/barcode_ecc/config.py

"""
Configuration loading for the ECC decoder.

Configuration is a plain dict with an 'ecc' section (and an optional
'logging' section), normally read from YAML. The packaged
default_config.yaml mirrors get_default_config().
"""

import copy
import logging
import os
from typing import Any, Dict, Optional

import yaml

from .errors import ECCConfigurationError
from .galois_field import GaloisField, get_field
from .rs_decoder import ReedSolomonDecoder

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


def get_default_config() -> Dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        'ecc': {
            'type': 'reed_solomon',
            'reed_solomon': {
                'field': 'qr_code',
                'ecc_symbols': 10,
                'verify': True,
            },
        },
        'logging': {
            'level': 'WARNING',
        },
    }


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file, layered over the defaults.

    Args:
        config_path: Path to YAML config file (None = packaged defaults)

    Returns:
        config: Configuration dictionary

    Raises:
        ECCConfigurationError: If the file is not valid YAML or not a mapping
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    defaults = get_default_config()
    if not os.path.exists(config_path):
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return defaults

    try:
        with open(config_path, 'r') as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ECCConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ECCConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(loaded).__name__}"
        )

    logger.info(f"Loaded configuration from {config_path}")
    return merge_config(defaults, loaded)


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_rs_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract the Reed-Solomon section of a config.

    Raises:
        ECCConfigurationError: If required keys are missing or the type is unsupported
    """
    try:
        ecc_config = config['ecc']
        ecc_type = ecc_config['type']
    except (KeyError, TypeError) as e:
        raise ECCConfigurationError(f"Missing required config key: {e}") from e

    if ecc_type != 'reed_solomon':
        raise ECCConfigurationError(f"Unknown ECC type: {ecc_type}")

    return ecc_config.get('reed_solomon') or {}


def build_field(rs_config: Dict[str, Any]) -> GaloisField:
    """
    Build the Galois field described by a reed_solomon config section.

    A 'primitive' key takes precedence over a preset 'field' name.

    Raises:
        ECCConfigurationError: Unknown preset name
        FieldConstructionError: Explicit parameters do not form a field
    """
    if 'primitive' in rs_config:
        return GaloisField(
            primitive=int(rs_config['primitive']),
            size=int(rs_config.get('size', 256)),
            generator_base=int(rs_config.get('generator_base', 0)),
            generator=int(rs_config.get('generator', 2)),
        )
    return get_field(rs_config.get('field', 'qr_code'))


def build_decoder(config: Dict[str, Any]) -> ReedSolomonDecoder:
    """Construct a ReedSolomonDecoder from a full configuration dict."""
    rs_config = get_rs_config(config)
    field = build_field(rs_config)
    return ReedSolomonDecoder(field, verify=bool(rs_config.get('verify', True)))
