import pytest

from rifc import (
    Alphabet,
    CodecFactory,
    ConfigurationError,
    DEFAULT_EPSILON,
    DEFAULT_KEY,
    load_config,
    parse_complex
)


@pytest.mark.parametrize("text,expected", [
    ("-0.75+0.09j", complex(-0.75, 0.09)),
    ("(-0.75+0.09j)", complex(-0.75, 0.09)),
    ("-0.75,0.09", complex(-0.75, 0.09)),
    (" -0.75 , 0.09 ", complex(-0.75, 0.09)),
    ("0j", 0j),
    ("1.5", complex(1.5, 0.0)),
])
def test_parse_complex(text, expected):
    assert parse_complex(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1,2,3", "1+"])
def test_parse_complex_rejects_garbage(text):
    with pytest.raises(ConfigurationError):
        parse_complex(text)


def test_load_config_defaults(clean_env, tmp_path):
    config = load_config(str(tmp_path / "missing.env"))

    assert config['RIFC_SYMBOLS'] == "0123456789ABCDEF"
    assert parse_complex(config['RIFC_KEY']) == DEFAULT_KEY
    assert parse_complex(config['RIFC_ORIGIN']) == 0j
    assert config['RIFC_BASE'] is None
    assert float(config['RIFC_EPSILON']) == DEFAULT_EPSILON


def test_load_config_from_environment(clean_env, tmp_path):
    clean_env.setenv('RIFC_KEY', '0.285,0.01')
    clean_env.setenv('RIFC_BASE', '4')

    config = load_config(str(tmp_path / "missing.env"))

    assert config['RIFC_KEY'] == '0.285,0.01'
    assert config['RIFC_BASE'] == '4'


def test_load_config_from_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("RIFC_SYMBOLS=ACGT\nRIFC_EPSILON=1e-6\n")

    config = load_config(str(env_file))

    assert config['RIFC_SYMBOLS'] == "ACGT"
    assert config['RIFC_EPSILON'] == "1e-6"


def test_factory_builds_codec():
    codec = CodecFactory.create_codec({
        'RIFC_SYMBOLS': 'ACGT',
        'RIFC_KEY': '0.285+0.01j',
        'RIFC_ORIGIN': '0.1,-0.1',
        'RIFC_BASE': '4',
        'RIFC_EPSILON': '1e-5'
    })

    assert codec.alphabet == Alphabet('ACGT')
    assert codec.key == complex(0.285, 0.01)
    assert codec.origin == complex(0.1, -0.1)
    assert codec.base == 4
    assert codec.epsilon == 1e-5


def test_factory_defaults_for_missing_values():
    codec = CodecFactory.create_codec({'RIFC_BASE': ''})

    assert codec.key == DEFAULT_KEY
    assert codec.origin == 0j
    assert codec.base is None
    assert codec.epsilon == DEFAULT_EPSILON
    assert len(codec.alphabet) == 16


@pytest.mark.parametrize("name,value", [
    ('RIFC_SYMBOLS', 'AAB'),
    ('RIFC_KEY', 'oops'),
    ('RIFC_ORIGIN', '1,2,3'),
    ('RIFC_BASE', 'two'),
    ('RIFC_BASE', '1'),
    ('RIFC_EPSILON', 'tiny'),
    ('RIFC_EPSILON', '-1'),
])
def test_factory_rejects_bad_values(name, value):
    with pytest.raises(ConfigurationError):
        CodecFactory.create_codec({name: value})


def test_factory_accepts_base_above_alphabet_size():
    codec = CodecFactory.create_codec({'RIFC_SYMBOLS': '01', 'RIFC_BASE': '17'})
    assert codec.base == 17
    assert codec.roundtrip('0110') == '0110'


def test_factory_error_names_variable():
    with pytest.raises(ConfigurationError, match="RIFC_KEY"):
        CodecFactory.create_codec({'RIFC_KEY': 'oops'})
