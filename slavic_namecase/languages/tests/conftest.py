"""
Pytest fixtures for language module tests.
"""
from __future__ import annotations

import pytest

from slavic_namecase.languages.russian import RussianLanguage
from slavic_namecase.languages.ukrainian import UkrainianLanguage


@pytest.fixture
def ua() -> UkrainianLanguage:
    return UkrainianLanguage()


@pytest.fixture
def ru() -> RussianLanguage:
    return RussianLanguage()
