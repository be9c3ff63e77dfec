"""
config.py - YAML-backed configuration for name declension.

Module: slavic_namecase.config
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

__all__ = ['NameCaseConfig', 'DEFAULT_CONFIG_PATH']

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"
CONFIG_SECTION = 'namecase'


@dataclass
class NameCaseConfig:
    """
    Configuration for name declension.

    Attributes:
        default_language: Language code used when none is given.
        default_template: Template used by format_cases when none is given.
        invariant_surname_heads: Compound-surname head components that never inflect.
        languages: Dict of language code -> enabled status.
        config_file: Path to YAML config file (optional).
    """
    default_language: str = 'ua'
    default_template: str = 'S N F'
    invariant_surname_heads: List[str] = field(default_factory=lambda: ['тулуз'])
    languages: Dict[str, bool] = field(default_factory=dict)
    config_file: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.config_file:
            self._load_from_file(Path(self.config_file))

    def _load_from_file(self, yaml_path: Path) -> None:
        """
        Read the 'namecase' section from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not valid YAML.
        """
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")
        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing {yaml_path}: {e}")

        self._apply(data.get(CONFIG_SECTION, {}) or {})
        logger.debug(f"Loaded namecase config from {yaml_path}")

    def _apply(self, section: Dict[str, Any]) -> None:
        known = {f.name for f in fields(self) if f.name != 'config_file'}
        for key, value in section.items():
            if key not in known:
                logger.warning(f"Ignoring unknown namecase config key: {key}")
                continue
            if key == 'languages':
                value = self._parse_languages(value)
            elif key == 'invariant_surname_heads':
                value = [str(head).lower() for head in (value or [])]
            setattr(self, key, value)

    @staticmethod
    def _parse_languages(languages: Any) -> Dict[str, bool]:
        parsed: Dict[str, bool] = {}
        for code, settings in (languages or {}).items():
            if isinstance(settings, dict):
                parsed[code] = settings.get('enabled', True)
            else:
                parsed[code] = bool(settings)
        return parsed

    def language_enabled(self, code: str) -> bool:
        # default: enabled unless explicitly false
        return self.languages.get(code, True)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> NameCaseConfig:
        """
        Load configuration from a specific YAML file.

        Args:
            yaml_path: Path to YAML config file.

        Returns:
            NameCaseConfig: Defaults overridden by the file's 'namecase' section.
        """
        return cls(config_file=Path(yaml_path))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> NameCaseConfig:
        """
        Create configuration from a dictionary.

        Useful for testing and programmatic configuration. Missing keys keep
        their defaults.

        Args:
            data: Either the 'namecase' section itself or a dict containing it.

        Returns:
            NameCaseConfig instance
        """
        instance = cls()
        instance._apply(data.get(CONFIG_SECTION, data) or {})
        return instance

    @classmethod
    def default(cls) -> NameCaseConfig:
        """Configuration from the packaged config.yaml."""
        return cls.from_yaml(DEFAULT_CONFIG_PATH)
