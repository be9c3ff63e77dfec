import pytest

import slavic_namecase


@pytest.mark.parametrize(
    "symbol_name",
    [
        "NameCase",
        "NameCaseEngine",
        "NameCaseConfig",
        "NameWord",
        "LanguageRegistry",
        "UkrainianLanguage",
        "RussianLanguage",
        "Gender",
        "Case",
        "decline_full_name",
        "detect_gender",
    ],
)
def test_import_symbol(symbol_name):
    """Test that each key symbol can be imported from slavic_namecase."""
    module = __import__("slavic_namecase", fromlist=[symbol_name])
    symbol = getattr(module, symbol_name, None)
    assert symbol is not None, f"{symbol_name} could not be imported"


def test_import_failure():
    """Test that importing a non-existent symbol raises ImportError or AttributeError."""
    with pytest.raises((ImportError, AttributeError)):
        from slavic_namecase import NotARealClass


def test_version():
    assert slavic_namecase.__version__
