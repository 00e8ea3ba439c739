"""
RIFC (Reverse Iteration Fractal Cipher) Codec
Stores a symbol sequence as a single complex coordinate by iterating the
inverse Julia map z -> root(z - c), one root branch per symbol, and loads it
back by iterating the forward map z -> z**base + c.
"""

import logging
import math
from collections import namedtuple

import numpy as np
import pandas as pd

from .alphabet import Alphabet
from .constants import (
    DEFAULT_SYMBOLS,
    DEFAULT_EPSILON,
    DEFAULT_KEY,
    DEFAULT_ORIGIN,
    MIN_BASE,
    TRACE_PRECISION
)
from .errors import ConfigurationError, DecodeAmbiguityError, NumericOverflowError
from .roots import complex_root, find_branch, ensure_finite

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = Alphabet(DEFAULT_SYMBOLS)

# One step of a store or load pass
TraceEvent = namedtuple('TraceEvent', ['stage', 'step', 'symbol', 'index', 'z'])


def log_trace(event):
    """Trace sink writing each step to the module logger at DEBUG level."""
    logger.debug(
        "%s:%s:%d:(%.*f, %.*f)",
        event.stage, event.symbol, event.index,
        TRACE_PRECISION, event.z.real,
        TRACE_PRECISION, event.z.imag
    )


def trace_frame(events):
    """
    Convert collected trace events into a DataFrame.

    Args:
        events: Iterable of TraceEvent

    Returns:
        pd.DataFrame: Columns step, stage, symbol, index, real, imag
    """
    rows = [
        {
            'step': event.step,
            'stage': event.stage,
            'symbol': event.symbol,
            'index': event.index,
            'real': event.z.real,
            'imag': event.z.imag
        }
        for event in events
    ]
    return pd.DataFrame(rows, columns=['step', 'stage', 'symbol', 'index', 'real', 'imag'])


def _check_base(base):
    if isinstance(base, bool) or not isinstance(base, (int, np.integer)):
        raise ConfigurationError(f"Base must be an integer, got {base!r}")
    if base < MIN_BASE:
        raise ConfigurationError(f"Base must be at least {MIN_BASE}, got {base}")
    return int(base)


def _check_epsilon(epsilon):
    try:
        epsilon = float(epsilon)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Tolerance must be a real number, got {epsilon!r}") from None
    if not math.isfinite(epsilon) or epsilon <= 0:
        raise ConfigurationError(f"Tolerance must be positive and finite, got {epsilon}")
    return epsilon


def _check_coordinate(value, name):
    try:
        z = complex(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a complex number, got {value!r}") from None
    if not (math.isfinite(z.real) and math.isfinite(z.imag)):
        raise ConfigurationError(f"{name} must be finite, got {z!r}")
    return z


def _power(z, base):
    try:
        zb = z ** base
    except OverflowError as e:
        raise NumericOverflowError(f"Overflow raising {z!r} to power {base}") from e
    return ensure_finite(zb, "load")


def store(origin, key, symbols, base, alphabet=DEFAULT_ALPHABET, trace=None):
    """
    Fold a symbol sequence into one complex coordinate.

    Args:
        origin: Starting coordinate
        key: Secret offset subtracted before every root
        symbols: Sequence of alphabet symbols
        base: Number of root branches per step
        alphabet: Symbol table (default: hexadecimal)
        trace: Optional callable receiving a TraceEvent per step

    Returns:
        complex: Encoded coordinate

    Raises:
        ConfigurationError: Unknown symbol, or base too small for the sequence
        NumericOverflowError: A step produced a non-finite coordinate
    """
    base = _check_base(base)
    z = _check_coordinate(origin, "Origin")
    key = _check_coordinate(key, "Key")

    symbols = list(symbols)
    indices = alphabet.indices(symbols)

    required = alphabet.min_base_for(symbols)
    if required > base:
        raise ConfigurationError(
            f"Base {base} cannot represent the sequence; at least {required} branches are required"
        )

    for step, (symbol, index) in enumerate(zip(symbols, indices)):
        z = ensure_finite(complex_root(z - key, index, base), "store")

        if trace is not None:
            trace(TraceEvent('store', step, symbol, index, z))

    logger.debug("Stored %d symbols in base %d", len(symbols), base)
    return z


def load(origin, key, encoded, base, count, alphabet=DEFAULT_ALPHABET,
         epsilon=DEFAULT_EPSILON, trace=None, fast_path=True):
    """
    Unfold an encoded coordinate back into its symbol sequence.

    Each forward step z -> z**base + key peels off the most recently stored
    root, so symbols are recovered last-first and reversed at the end.

    Forward iteration never reads origin: a different origin leaves the
    decoded output unchanged, it only shifts the logged drift. The key,
    base and count are what must match the store call.

    Rounding error is re-expanded by about base * |z|**(base - 1) per step,
    so deep sequences decode unreliably (roughly 34 symbols at base 2, 10 at
    base 16). Past that depth a wrong sequence can come back without error;
    only a tolerance too small for the accumulated error raises
    DecodeAmbiguityError.

    Args:
        origin: Starting coordinate used by store
        key: Secret offset used by store
        encoded: Coordinate returned by store
        base: Number of root branches per step
        count: Number of symbols to recover
        alphabet: Symbol table (default: hexadecimal)
        epsilon: Componentwise tolerance for the general root search
        trace: Optional callable receiving a TraceEvent per step
        fast_path: Use the sign shortcut when base is 2

    Returns:
        str: Decoded symbols in original order

    Raises:
        ConfigurationError: Invalid base, count or tolerance, or a decoded
            index outside the alphabet
        DecodeAmbiguityError: No branch matched at some step
        NumericOverflowError: A step produced a non-finite coordinate
    """
    base = _check_base(base)
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)) or count < 0:
        raise ConfigurationError(f"Symbol count must be a non-negative integer, got {count!r}")

    epsilon = _check_epsilon(epsilon)
    origin = _check_coordinate(origin, "Origin")
    key = _check_coordinate(key, "Key")
    z = _check_coordinate(encoded, "Encoded coordinate")

    indices = []

    for step in range(count):
        sz = ensure_finite(_power(z, base) + key, "load")

        if base == 2 and fast_path:
            # Branch 0 of a square root has a non-negative real part
            index = 1 if z.real < 0 else 0
        else:
            index = find_branch(sz - key, z, base, epsilon)
            if index is None:
                raise DecodeAmbiguityError(
                    f"No root branch matches coordinate {z!r} at step {step} "
                    f"(base {base}, epsilon {epsilon})",
                    step=step,
                    z=z
                )

        symbol = alphabet.symbol_at(index)
        indices.append(index)

        if trace is not None:
            trace(TraceEvent('load', step, symbol, index, z))

        z = sz

    indices.reverse()

    logger.debug("Loaded %d symbols in base %d, drift from origin %.3e", count, base, abs(z - origin))
    return alphabet.decode_indices(indices)


class RIFCCodec:
    """
    Reverse Iteration Fractal Cipher bound to one set of key material.

    Wraps store/load with a fixed alphabet, key, origin and tolerance, and
    packs results into a JSON-serialisable envelope.
    """

    def __init__(self, key=DEFAULT_KEY, origin=DEFAULT_ORIGIN, base=None,
                 alphabet=None, epsilon=DEFAULT_EPSILON):
        """
        Initialize the codec.

        Args:
            key: Secret complex offset (default: -0.75+0.09j)
            origin: Starting coordinate (default: 0)
            base: Fixed branch count, or None to pick the minimum per sequence
            alphabet: Alphabet instance or symbol string (default: hexadecimal)
            epsilon: Decode tolerance (default: 0.0001)
        """
        if alphabet is None:
            alphabet = DEFAULT_ALPHABET
        elif not isinstance(alphabet, Alphabet):
            alphabet = Alphabet(alphabet)

        if base is not None:
            base = _check_base(base)

        self.alphabet = alphabet
        self.key = _check_coordinate(key, "Key")
        self.origin = _check_coordinate(origin, "Origin")
        self.base = base
        self.epsilon = _check_epsilon(epsilon)

    def __repr__(self):
        return (f"RIFCCodec(key={self.key!r}, origin={self.origin!r}, base={self.base!r}, "
                f"alphabet={self.alphabet.symbols!r}, epsilon={self.epsilon!r})")

    def resolve_base(self, symbols):
        """Fixed base if configured, else the minimum base for symbols."""
        if self.base is not None:
            return self.base
        return self.alphabet.min_base_for(symbols)

    def store(self, symbols, base=None, trace=None):
        symbols = list(symbols)
        base = self.resolve_base(symbols) if base is None else base
        return store(self.origin, self.key, symbols, base, alphabet=self.alphabet, trace=trace)

    def load(self, encoded, count, base=None, trace=None, fast_path=True):
        base = self.base if base is None else base
        if base is None:
            raise ConfigurationError("Base is required to load when the codec has no fixed base")
        return load(self.origin, self.key, encoded, base, count,
                    alphabet=self.alphabet, epsilon=self.epsilon,
                    trace=trace, fast_path=fast_path)

    def encode(self, symbols, base=None, trace=None):
        """
        Encode symbols into an envelope.

        Args:
            symbols: Sequence of alphabet symbols
            base: Branch count override (default: resolve_base)
            trace: Optional trace sink

        Returns:
            dict: {'encoded': {'real', 'imag'}, 'metadata': {'base', 'count', 'epsilon'}}
        """
        symbols = list(symbols)
        base = self.resolve_base(symbols) if base is None else base
        z = self.store(symbols, base=base, trace=trace)

        return {
            'encoded': {
                'real': z.real,
                'imag': z.imag
            },
            'metadata': {
                'base': base,
                'count': len(symbols),
                'epsilon': self.epsilon
            }
        }

    def decode(self, envelope, trace=None):
        """
        Decode an envelope produced by encode().

        Raises:
            ConfigurationError: If the envelope is malformed
        """
        try:
            encoded = envelope['encoded']
            metadata = envelope['metadata']
            z = complex(encoded['real'], encoded['imag'])
            base = metadata['base']
            count = metadata['count']
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Malformed envelope: {e}") from e

        epsilon = _check_epsilon(metadata.get('epsilon', self.epsilon))

        return load(self.origin, self.key, z, base, count,
                    alphabet=self.alphabet, epsilon=epsilon, trace=trace)

    def roundtrip(self, symbols, trace=None):
        """Encode then decode symbols, returning the decoded string."""
        return self.decode(self.encode(symbols, trace=trace), trace=trace)

    @staticmethod
    def validate_roundtrip(original, decoded):
        """
        Compare an original sequence with its decoded counterpart.

        Returns:
            dict: is_coherent, length, mismatches, first_mismatch
        """
        original = ''.join(original)
        decoded = ''.join(decoded)

        mismatches = [
            i for i, (a, b) in enumerate(zip(original, decoded)) if a != b
        ]
        length_diff = abs(len(original) - len(decoded))
        if length_diff:
            mismatches.extend(range(min(len(original), len(decoded)),
                                    max(len(original), len(decoded))))

        return {
            'is_coherent': not mismatches,
            'length': len(original),
            'mismatches': len(mismatches),
            'first_mismatch': mismatches[0] if mismatches else None
        }
