"""
Registry of language modules.

A LanguageRegistry is an ordinary object built once (usually through
build_default_registry) and handed to engines; there is no module-level
mutable registry.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Type, Union

from slavic_namecase.errors import ContractViolation, UnknownLanguageError
from .base import LanguageModule
from .russian import RussianLanguage
from .ukrainian import UkrainianLanguage

if TYPE_CHECKING:
    from slavic_namecase.config import NameCaseConfig

logger = logging.getLogger(__name__)

BUILTIN_LANGUAGES: List[Type[LanguageModule]] = [UkrainianLanguage, RussianLanguage]


class LanguageRegistry:
    """Language modules keyed by language code."""

    def __init__(self) -> None:
        self._modules: Dict[str, LanguageModule] = {}

    def __contains__(self, code: object) -> bool:
        return code in self._modules

    def __iter__(self) -> Iterator[LanguageModule]:
        return iter(self._modules.values())

    def __len__(self) -> int:
        return len(self._modules)

    def register(self, module: Union[LanguageModule, Type[LanguageModule]]) -> LanguageModule:
        """
        Register a language module instance or class.

        A class is instantiated here, which binds and validates its rule
        chains; a broken rule table therefore fails at registration.

        Args:
            module: LanguageModule subclass or instance.

        Returns:
            LanguageModule: The registered instance.

        Raises:
            ContractViolation: If ``module`` is not a LanguageModule.
            UnknownRuleReference: If the module's rule table is incomplete.
        """
        if isinstance(module, type) and issubclass(module, LanguageModule):
            module = module()
        if not isinstance(module, LanguageModule):
            raise ContractViolation(f"Expected a LanguageModule, got {type(module).__name__}")
        if module.code in self._modules:
            logger.warning(f"Replacing registered language module: {module.code}")
        self._modules[module.code] = module
        logger.debug(f"Registered language module: {module.code} (build {module.build})")
        return module

    def get(self, code: str) -> LanguageModule:
        """
        Look up a module by code.

        Raises:
            UnknownLanguageError: If nothing is registered under ``code``.
        """
        try:
            return self._modules[code]
        except KeyError:
            raise UnknownLanguageError(
                f"Unknown language '{code}'. Registered: {', '.join(self.codes()) or 'none'}"
            ) from None

    def codes(self) -> List[str]:
        return list(self._modules.keys())


def build_default_registry(config: Optional['NameCaseConfig'] = None) -> LanguageRegistry:
    """
    Registry holding the built-in languages.

    Args:
        config: When given, languages disabled in ``config.languages`` are skipped.

    Returns:
        LanguageRegistry: A fresh registry.
    """
    registry = LanguageRegistry()
    for language_cls in BUILTIN_LANGUAGES:
        if config is not None and not config.language_enabled(language_cls.code):
            logger.debug(f"Language module disabled by configuration: {language_cls.code}")
            continue
        registry.register(language_cls)
    return registry
