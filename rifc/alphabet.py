"""
Symbol Alphabet
Ordered, immutable symbol table mapping characters to branch indices
"""

from .constants import DEFAULT_SYMBOLS, MIN_BASE
from .errors import ConfigurationError


class Alphabet:
    """
    Fixed ordered set of distinct symbols.

    A symbol's index is its position. The table is read-only once built, so
    one instance can be shared across independent encode/decode calls.
    """

    __slots__ = ('_symbols', '_index')

    def __init__(self, symbols=DEFAULT_SYMBOLS):
        """
        Build an alphabet.

        Args:
            symbols: String (or sequence) of distinct single-character symbols

        Raises:
            ConfigurationError: If the alphabet is empty or has duplicates
        """
        symbols = ''.join(symbols)

        if not symbols:
            raise ConfigurationError("Alphabet must contain at least one symbol")

        seen = set()
        for char in symbols:
            if char in seen:
                raise ConfigurationError(f"Duplicate symbol in alphabet: {char!r}")
            seen.add(char)

        object.__setattr__(self, '_symbols', symbols)
        object.__setattr__(self, '_index', {char: i for i, char in enumerate(symbols)})

    def __setattr__(self, name, value):
        raise AttributeError("Alphabet is immutable")

    @property
    def symbols(self):
        return self._symbols

    def __len__(self):
        return len(self._symbols)

    def __contains__(self, symbol):
        return symbol in self._index

    def __iter__(self):
        return iter(self._symbols)

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self):
        return hash(self._symbols)

    def __repr__(self):
        return f"Alphabet({self._symbols!r})"

    def index_of(self, symbol):
        """
        Get the index of a symbol.

        Raises:
            ConfigurationError: If the symbol is not in the alphabet
        """
        try:
            return self._index[symbol]
        except KeyError:
            raise ConfigurationError(
                f"Invalid symbol: {symbol!r} (alphabet: {self._symbols!r})"
            ) from None

    def symbol_at(self, index):
        """
        Get the symbol at an index.

        Raises:
            ConfigurationError: If the index is out of range
        """
        if not 0 <= index < len(self._symbols):
            raise ConfigurationError(
                f"Symbol index {index} out of range for alphabet of size {len(self._symbols)}"
            )
        return self._symbols[index]

    def indices(self, sequence):
        """Map a symbol sequence to its list of indices."""
        return [self.index_of(symbol) for symbol in sequence]

    def decode_indices(self, indices):
        """Map a list of indices back to a symbol string."""
        return ''.join(self.symbol_at(index) for index in indices)

    def min_base_for(self, sequence):
        """
        Smallest base able to represent every symbol in sequence.

        One plus the largest index used, never below MIN_BASE.

        Raises:
            ConfigurationError: If a symbol is not in the alphabet
        """
        highest = max(self.indices(sequence), default=0)
        return max(MIN_BASE, highest + 1)
