"""slavic_namecase package: Declension of Ukrainian and Russian personal names (given name, family name, patronymic)."""

from slavic_namecase.config import NameCaseConfig
from slavic_namecase.engine import EngineState, NameCaseEngine
from slavic_namecase.errors import ContractViolation, NameCaseError, UnknownLanguageError, UnknownRuleReference
from slavic_namecase.languages import LanguageModule, LanguageRegistry, RussianLanguage, UkrainianLanguage, build_default_registry
from slavic_namecase.model import NO_RULE, Case, Gender, NamePart
from slavic_namecase.name_word import LetterCaseMask, NameWord
from slavic_namecase.namecase import (
    NameCase,
    decline_family_name,
    decline_full_name,
    decline_full_name_parts,
    decline_given_name,
    decline_patronymic,
    detect_gender,
    full_name_format,
)

__version__ = "0.1.0"

__all__ = [
    "Case",
    "ContractViolation",
    "EngineState",
    "Gender",
    "LanguageModule",
    "LanguageRegistry",
    "LetterCaseMask",
    "NO_RULE",
    "NameCase",
    "NameCaseConfig",
    "NameCaseEngine",
    "NameCaseError",
    "NamePart",
    "NameWord",
    "RussianLanguage",
    "UkrainianLanguage",
    "UnknownLanguageError",
    "UnknownRuleReference",
    "build_default_registry",
    "decline_family_name",
    "decline_full_name",
    "decline_full_name_parts",
    "decline_given_name",
    "decline_patronymic",
    "detect_gender",
    "full_name_format",
]
