"""
namecase.py - high-level entry points.

NameCase bundles a configuration and a language registry and hands out
engines. The module-level helpers run each call on a fresh engine from a
shared, read-only NameCase built from the packaged configuration.

Module: slavic_namecase.namecase
"""
from __future__ import annotations

__all__ = [
    'NameCase',
    'decline_given_name',
    'decline_family_name',
    'decline_patronymic',
    'decline_full_name',
    'decline_full_name_parts',
    'detect_gender',
    'full_name_format',
]

import logging
from functools import lru_cache
from typing import List, Optional, Union

from .config import NameCaseConfig
from .engine import CaseResult, NameCaseEngine
from .languages.base import LanguageModule
from .languages.registry import LanguageRegistry, build_default_registry
from .model import Gender

logger = logging.getLogger(__name__)


class NameCase:
    """
    Factory for declension engines.

    Attributes:
        config (NameCaseConfig): Configuration shared by every engine.
        registry (LanguageRegistry): Language modules available to engines.
    """

    def __init__(self, config: Optional[NameCaseConfig] = None, registry: Optional[LanguageRegistry] = None):
        self.config = config or NameCaseConfig.default()
        self.registry = registry or build_default_registry(self.config)

    @property
    def languages(self) -> List[str]:
        return self.registry.codes()

    def engine(self, language: Union[str, LanguageModule, None] = None) -> NameCaseEngine:
        """New engine for ``language`` (default: ``config.default_language``)."""
        return NameCaseEngine(language or self.config.default_language, self.registry, self.config)

    def _session(self, language: Union[str, LanguageModule, None], gender: Optional[Gender]) -> NameCaseEngine:
        engine = self.engine(language)
        if gender is not None:
            engine.set_gender(gender)
        return engine

    def decline_given_name(self, text: str, case: Optional[int] = None, gender: Optional[Gender] = None,
                           language: Union[str, LanguageModule, None] = None) -> CaseResult:
        engine = self._session(language, gender)
        engine.set_given_name(text)
        return engine.get_given_name_case(case)

    def decline_family_name(self, text: str, case: Optional[int] = None, gender: Optional[Gender] = None,
                            language: Union[str, LanguageModule, None] = None) -> CaseResult:
        engine = self._session(language, gender)
        engine.set_family_name(text)
        return engine.get_family_name_case(case)

    def decline_patronymic(self, text: str, case: Optional[int] = None, gender: Optional[Gender] = None,
                           language: Union[str, LanguageModule, None] = None) -> CaseResult:
        engine = self._session(language, gender)
        engine.set_patronymic(text)
        return engine.get_patronymic_case(case)

    def decline_full_name(self, text: str, case: Optional[int] = None, gender: Optional[Gender] = None,
                          language: Union[str, LanguageModule, None] = None,
                          template: Optional[str] = None) -> CaseResult:
        """
        Decline a whitespace-separated full name.

        Without a template the words keep their input order.
        """
        engine = self._session(language, gender)
        words = engine.split_full_name(text)
        return engine.format_cases(case, template if template is not None else words)

    def decline_full_name_parts(self, family: str = '', given: str = '', patronymic: str = '',
                                case: Optional[int] = None, gender: Optional[Gender] = None,
                                template: Optional[str] = None,
                                language: Union[str, LanguageModule, None] = None) -> CaseResult:
        """Decline explicitly labelled parts, rendered with ``template``."""
        engine = self._session(language, gender)
        engine.set_full_name(family, given, patronymic)
        return engine.format_cases(case, template)

    def detect_gender(self, text: str, language: Union[str, LanguageModule, None] = None) -> Gender:
        return self.engine(language).detect_gender(text)

    def full_name_format(self, text: str, language: Union[str, LanguageModule, None] = None) -> str:
        return self.engine(language).full_name_format(text)


@lru_cache(maxsize=None)
def _default_namecase() -> NameCase:
    return NameCase()


def decline_given_name(text: str, case: Optional[int] = None, gender: Optional[Gender] = None,
                       language: Union[str, LanguageModule, None] = None) -> CaseResult:
    """
    Decline a given name.

    Args:
        text: The given name.
        case: Case index; None or out of range returns every case.
        gender: Explicit gender; detected when omitted.
        language: Language code or module.

    Returns:
        Union[str, List[str]]: One form, or one form per case.
    """
    return _default_namecase().decline_given_name(text, case, gender, language)


def decline_family_name(text: str, case: Optional[int] = None, gender: Optional[Gender] = None,
                        language: Union[str, LanguageModule, None] = None) -> CaseResult:
    """Decline a family name; see decline_given_name."""
    return _default_namecase().decline_family_name(text, case, gender, language)


def decline_patronymic(text: str, case: Optional[int] = None, gender: Optional[Gender] = None,
                       language: Union[str, LanguageModule, None] = None) -> CaseResult:
    return _default_namecase().decline_patronymic(text, case, gender, language)


def decline_full_name(text: str, case: Optional[int] = None, gender: Optional[Gender] = None,
                      language: Union[str, LanguageModule, None] = None,
                      template: Optional[str] = None) -> CaseResult:
    """
    Decline a full name such as 'Шевченко Тарас Григорович'.

    Args:
        text: Whitespace-separated name components in any order.
        case: Case index; None or out of range returns every case.
        gender: Explicit gender; detected when omitted.
        language: Language code or module.
        template: Marker template; when omitted the input order is kept.
    """
    return _default_namecase().decline_full_name(text, case, gender, language, template)


def decline_full_name_parts(family: str = '', given: str = '', patronymic: str = '',
                            case: Optional[int] = None, gender: Optional[Gender] = None,
                            template: Optional[str] = None,
                            language: Union[str, LanguageModule, None] = None) -> CaseResult:
    return _default_namecase().decline_full_name_parts(family, given, patronymic, case, gender, template, language)


def detect_gender(text: str, language: Union[str, LanguageModule, None] = None) -> Gender:
    """Gender of a full name (ties resolve to Gender.FEMININE)."""
    return _default_namecase().detect_gender(text, language)


def full_name_format(text: str, language: Union[str, LanguageModule, None] = None) -> str:
    """Part markers of a full name in input order, e.g. 'S N F'."""
    return _default_namecase().full_name_format(text, language)
