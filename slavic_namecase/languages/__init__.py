"""
Language modules for slavic_namecase.

Each module subclasses LanguageModule and declares its case count,
letter classes, rule chains and classification heuristics.
"""
from .base import LanguageModule, RuleMatch, WorkingWord
from .registry import BUILTIN_LANGUAGES, LanguageRegistry, build_default_registry
from .russian import RussianLanguage
from .ukrainian import UkrainianLanguage

__all__ = [
    'LanguageModule',
    'RuleMatch',
    'WorkingWord',
    'LanguageRegistry',
    'build_default_registry',
    'BUILTIN_LANGUAGES',
    'RussianLanguage',
    'UkrainianLanguage',
]
