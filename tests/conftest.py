import pytest

RIFC_VARS = ['RIFC_SYMBOLS', 'RIFC_KEY', 'RIFC_ORIGIN', 'RIFC_BASE', 'RIFC_EPSILON']


@pytest.fixture
def clean_env(monkeypatch):
    """Remove RIFC_* variables, including any a .env file sets during the test."""
    for name in RIFC_VARS:
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    return monkeypatch
