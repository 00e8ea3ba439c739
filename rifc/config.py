"""
Configuration loading for the cipher.
Reads key material and codec settings from environment variables, with
optional .env file support.
"""

import os
from typing import Dict, Optional

from dotenv import load_dotenv

from .constants import DEFAULT_SYMBOLS, DEFAULT_EPSILON, DEFAULT_KEY, DEFAULT_ORIGIN
from .errors import ConfigurationError


def parse_complex(text: str) -> complex:
    """
    Parse a complex coordinate from text.

    Accepts Python complex literals ("-0.75+0.09j") or a "real,imag" pair
    ("-0.75,0.09").

    Raises:
        ConfigurationError: If the text is not a complex number
    """
    if isinstance(text, complex):
        return text

    value = str(text).strip().replace(' ', '')

    try:
        if ',' in value:
            real, imag = value.split(',', 1)
            return complex(float(real), float(imag))
        return complex(value)
    except ValueError:
        raise ConfigurationError(f"Invalid complex value: {text!r}") from None


def load_config(env_file: Optional[str] = None) -> Dict[str, Optional[str]]:
    """
    Load codec configuration from the environment.

    Args:
        env_file: Path to a .env file (default: search from the working directory)

    Returns:
        dict: RIFC_SYMBOLS, RIFC_KEY, RIFC_ORIGIN, RIFC_BASE, RIFC_EPSILON
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return {
        'RIFC_SYMBOLS': os.getenv('RIFC_SYMBOLS', DEFAULT_SYMBOLS),
        'RIFC_KEY': os.getenv('RIFC_KEY', repr(DEFAULT_KEY)),
        'RIFC_ORIGIN': os.getenv('RIFC_ORIGIN', repr(DEFAULT_ORIGIN)),
        'RIFC_BASE': os.getenv('RIFC_BASE'),
        'RIFC_EPSILON': os.getenv('RIFC_EPSILON', str(DEFAULT_EPSILON))
    }
