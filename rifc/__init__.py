"""
RIFC Package
Reverse Iteration Fractal Cipher: stores a symbol sequence as one point of the
complex plane by iterating inverse Julia maps, and loads it back
"""

from .constants import (
    TWO_PI,
    DEFAULT_SYMBOLS,
    MIN_BASE,
    DEFAULT_EPSILON,
    DEFAULT_KEY,
    DEFAULT_ORIGIN,
    TRACE_PRECISION,
    DEMO_BITS,
    DEMO_DEPTH
)

from .errors import (
    RIFCError,
    ConfigurationError,
    DecodeAmbiguityError,
    NumericOverflowError
)

from .roots import (
    complex_root,
    branch_roots,
    compare_complex,
    find_branch,
    ensure_finite
)

from .alphabet import Alphabet

from .codec import (
    DEFAULT_ALPHABET,
    TraceEvent,
    log_trace,
    trace_frame,
    store,
    load,
    RIFCCodec
)

from .config import parse_complex, load_config
from .factory import CodecFactory

__all__ = [
    # Constants
    'TWO_PI',
    'DEFAULT_SYMBOLS',
    'MIN_BASE',
    'DEFAULT_EPSILON',
    'DEFAULT_KEY',
    'DEFAULT_ORIGIN',
    'TRACE_PRECISION',
    'DEMO_BITS',
    'DEMO_DEPTH',

    # Errors
    'RIFCError',
    'ConfigurationError',
    'DecodeAmbiguityError',
    'NumericOverflowError',

    # Root selection
    'complex_root',
    'branch_roots',
    'compare_complex',
    'find_branch',
    'ensure_finite',

    # Alphabet
    'Alphabet',

    # Codec
    'DEFAULT_ALPHABET',
    'TraceEvent',
    'log_trace',
    'trace_frame',
    'store',
    'load',
    'RIFCCodec',

    # Configuration
    'parse_complex',
    'load_config',
    'CodecFactory'
]
