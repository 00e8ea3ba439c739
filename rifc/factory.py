"""
Codec factory.
Creates RIFCCodec instances from configuration dictionaries.
"""

from typing import Dict, Optional

from .alphabet import Alphabet
from .codec import RIFCCodec
from .config import parse_complex
from .constants import DEFAULT_SYMBOLS, DEFAULT_EPSILON, DEFAULT_KEY, DEFAULT_ORIGIN
from .errors import ConfigurationError


class CodecFactory:
    """
    Factory for creating codec instances.

    Handles parsing and validation of configuration values.
    """

    @staticmethod
    def create_codec(config: Dict[str, Optional[str]]) -> RIFCCodec:
        """
        Create a codec from configuration.

        Args:
            config: Configuration dictionary (see config.load_config)

        Returns:
            RIFCCodec: Configured codec

        Raises:
            ConfigurationError: If any value is invalid, naming the variable
        """
        symbols = config.get('RIFC_SYMBOLS') or DEFAULT_SYMBOLS
        try:
            alphabet = Alphabet(symbols)
        except ConfigurationError as e:
            raise ConfigurationError(f"RIFC_SYMBOLS: {e}") from e

        key = CodecFactory._complex_setting(config, 'RIFC_KEY', DEFAULT_KEY)
        origin = CodecFactory._complex_setting(config, 'RIFC_ORIGIN', DEFAULT_ORIGIN)

        base = config.get('RIFC_BASE')
        if base not in (None, ''):
            try:
                base = int(base)
            except (TypeError, ValueError):
                raise ConfigurationError(f"RIFC_BASE must be an integer, got {base!r}") from None
        else:
            base = None

        epsilon = config.get('RIFC_EPSILON')
        if epsilon in (None, ''):
            epsilon = DEFAULT_EPSILON
        try:
            epsilon = float(epsilon)
        except (TypeError, ValueError):
            raise ConfigurationError(f"RIFC_EPSILON must be a number, got {epsilon!r}") from None

        try:
            return RIFCCodec(key=key, origin=origin, base=base,
                             alphabet=alphabet, epsilon=epsilon)
        except ConfigurationError as e:
            raise ConfigurationError(f"Invalid codec configuration: {e}") from e

    @staticmethod
    def _complex_setting(config, name, default):
        value = config.get(name)
        if value in (None, ''):
            return default
        try:
            return parse_complex(value)
        except ConfigurationError as e:
            raise ConfigurationError(f"{name}: {e}") from e
