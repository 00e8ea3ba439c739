import pytest

from rifc.alphabet import Alphabet
from rifc.errors import ConfigurationError


def test_index_and_symbol_lookup():
    alphabet = Alphabet("0123456789ABCDEF")
    assert alphabet.index_of("0") == 0
    assert alphabet.index_of("F") == 15
    assert alphabet.symbol_at(10) == "A"
    assert len(alphabet) == 16
    assert "C" in alphabet
    assert "G" not in alphabet


def test_unknown_symbol_is_an_error():
    alphabet = Alphabet("01")
    with pytest.raises(ConfigurationError):
        alphabet.index_of("2")


def test_out_of_range_index_is_an_error():
    alphabet = Alphabet("01")
    with pytest.raises(ConfigurationError):
        alphabet.symbol_at(2)
    with pytest.raises(ConfigurationError):
        alphabet.symbol_at(-1)


def test_min_base_for():
    alphabet = Alphabet("0123456789ABCDEF")
    assert alphabet.min_base_for("0110") == 2
    assert alphabet.min_base_for("3A7F") == 16
    assert alphabet.min_base_for("012") == 3


def test_min_base_never_below_two():
    alphabet = Alphabet("0123")
    assert alphabet.min_base_for("") == 2
    assert alphabet.min_base_for("000") == 2


def test_indices_and_decode():
    alphabet = Alphabet("abc")
    assert alphabet.indices("cab") == [2, 0, 1]
    assert alphabet.decode_indices([2, 0, 1]) == "cab"


def test_rejects_empty_and_duplicate_alphabets():
    with pytest.raises(ConfigurationError):
        Alphabet("")
    with pytest.raises(ConfigurationError):
        Alphabet("0120")


def test_alphabet_is_immutable_value():
    alphabet = Alphabet("01")
    with pytest.raises(AttributeError):
        alphabet.foo = 1
    assert alphabet == Alphabet("01")
    assert alphabet != Alphabet("10")
    assert hash(alphabet) == hash(Alphabet("01"))
