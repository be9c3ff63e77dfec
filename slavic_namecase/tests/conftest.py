"""
Pytest fixtures for slavic_namecase tests.
"""
from __future__ import annotations

import pytest

from slavic_namecase.config import NameCaseConfig
from slavic_namecase.engine import NameCaseEngine
from slavic_namecase.languages.registry import LanguageRegistry, build_default_registry
from slavic_namecase.namecase import NameCase


@pytest.fixture
def config() -> NameCaseConfig:
    """Built-in default configuration."""
    return NameCaseConfig()


@pytest.fixture
def registry(config) -> LanguageRegistry:
    """Registry with both built-in languages."""
    return build_default_registry(config)


@pytest.fixture
def ua_engine(registry, config) -> NameCaseEngine:
    """Fresh Ukrainian engine."""
    return NameCaseEngine('ua', registry, config)


@pytest.fixture
def ru_engine(registry, config) -> NameCaseEngine:
    """Fresh Russian engine."""
    return NameCaseEngine('ru', registry, config)


@pytest.fixture
def namecase(config, registry) -> NameCase:
    """Facade built from default configuration."""
    return NameCase(config=config, registry=registry)


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a temporary config file and return its path."""
    def _write(text: str, name: str = "config.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding='utf-8')
        return path
    return _write
