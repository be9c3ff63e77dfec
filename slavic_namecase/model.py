"""
model.py - shared enums and small value types for name declension.

Module: slavic_namecase.model
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Sequence

__all__ = ['Gender', 'NamePart', 'Case', 'PartScores', 'GenderScores', 'NO_RULE']

# Rule id recorded when a rule chain is exhausted and the identity forms are used
NO_RULE = -1


class Gender(IntEnum):
    """Grammatical gender of a full name."""
    UNRESOLVED = 0
    MASCULINE = 1
    FEMININE = 2


class NamePart(Enum):
    """
    Anthroponym part. The value doubles as the marker character used in
    format templates ('S N F' = family, given, patronymic).
    """
    GIVEN = 'N'
    FAMILY = 'S'
    PATRONYMIC = 'F'
    UNCLASSIFIED = ''

    @classmethod
    def from_marker(cls, marker: str) -> Optional['NamePart']:
        """Return the part selected by a template marker, or None for a literal character."""
        if not marker:
            return None
        for part in (cls.GIVEN, cls.FAMILY, cls.PATRONYMIC):
            if part.value == marker:
                return part
        return None


class Case(IntEnum):
    """
    Case indexes. Both languages share indexes 0-5; index 6 (vocative)
    exists only for Ukrainian.
    """
    NOMINATIVE = 0
    GENITIVE = 1
    DATIVE = 2
    ACCUSATIVE = 3
    INSTRUMENTAL = 4
    LOCATIVE = 5
    PREPOSITIONAL = 5
    VOCATIVE = 6


@dataclass(frozen=True)
class PartScores:
    """Likelihood scores that a word is a given name, family name or patronymic."""
    given: float = 0.0
    family: float = 0.0
    patronymic: float = 0.0

    def score(self, part: NamePart) -> float:
        return {
            NamePart.GIVEN: self.given,
            NamePart.FAMILY: self.family,
            NamePart.PATRONYMIC: self.patronymic,
        }.get(part, 0.0)

    def best(self, priority: Sequence[NamePart]) -> NamePart:
        """
        Highest scoring part; ties go to the part listed first in ``priority``.

        Args:
            priority: Tie-break order supplied by the language module.

        Returns:
            NamePart: The winning label.
        """
        top = max(self.given, self.family, self.patronymic)
        for part in priority:
            if self.score(part) == top:
                return part
        return priority[-1]


@dataclass(frozen=True)
class GenderScores:
    """Gender evidence increments produced for one word."""
    masculine: float = 0.0
    feminine: float = 0.0

    @property
    def spread(self) -> float:
        return abs(self.masculine - self.feminine)
