"""
Base classes for language modules.

A language module supplies everything language-specific: the number of
cases, letter classes, the ordered rule chains per (gender, part), and
the heuristics that classify a word and weigh its gender. The engine
only talks to this contract.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Callable, Dict, Optional, Sequence, Tuple

from slavic_namecase.errors import UnknownRuleReference
from slavic_namecase.model import Gender, GenderScores, NamePart, PartScores
from slavic_namecase.text_utils import drop_last, tail

logger = logging.getLogger(__name__)

RuleKey = Tuple[Gender, NamePart]


@dataclass(frozen=True)
class RuleMatch:
    """
    Result of a rule that matched.

    Attributes:
        forms: One form per case, nominative first.
        rule_id: Identifier of the rule within its language module.
    """
    forms: Tuple[str, ...]
    rule_id: int


class WorkingWord:
    """
    The lower-cased token currently being classified or declined.

    Keeps a small tail-lookup cache that lives and dies with this object,
    so it never leaks between words.
    """
    __slots__ = ['text', 'case_count', '_tail_cache']

    def __init__(self, text: str, case_count: int):
        self.text = text
        self.case_count = case_count
        self._tail_cache: Dict[Tuple[int, int], str] = {}

    def __repr__(self) -> str:
        return f"WorkingWord({self.text!r})"

    def __len__(self) -> int:
        return len(self.text)

    def last(self, length: int = 1, stop_after: int = 0) -> str:
        """Trailing ``length`` letters, truncated to ``stop_after`` letters when given."""
        key = (length, stop_after)
        if key not in self._tail_cache:
            self._tail_cache[key] = tail(self.text, length, stop_after)
        return self._tail_cache[key]

    def forms(self, stem: str, endings: Sequence[str], replace_last: int = 0, rule_id: int = 0) -> RuleMatch:
        """
        Build the case forms by suffix substitution.

        Args:
            stem: Base to which the endings are appended.
            endings: One ending per non-nominative case.
            replace_last: Number of trailing letters cut from ``stem`` first.
            rule_id: Identifier recorded for the match.

        Returns:
            RuleMatch: Nominative (the working word itself) followed by the built forms.
        """
        if len(endings) != self.case_count - 1:
            raise ValueError(
                f"Rule {rule_id} produced {len(endings)} endings, expected {self.case_count - 1}"
            )
        base = drop_last(stem, replace_last)
        return RuleMatch(forms=(self.text,) + tuple(base + ending for ending in endings), rule_id=rule_id)

    def fixed(self, forms: Sequence[str], rule_id: int) -> RuleMatch:
        """Use a complete table of forms (irregular names)."""
        if len(forms) != self.case_count:
            raise ValueError(f"Rule {rule_id} produced {len(forms)} forms, expected {self.case_count}")
        return RuleMatch(forms=tuple(forms), rule_id=rule_id)

    def same(self, rule_id: int) -> RuleMatch:
        """The word does not inflect: every case equals the nominative."""
        return RuleMatch(forms=(self.text,) * self.case_count, rule_id=rule_id)


Rule = Callable[[WorkingWord], Optional[RuleMatch]]


class LanguageModule(ABC):
    """
    Base class for language modules.

    Subclasses declare ``RULE_CHAINS``: a mapping of (gender, part) to the
    ordered names of rule methods. The names are resolved to bound methods
    when the module is instantiated, so a typo or a missing chain fails at
    registration time rather than while declining a word.

    Attributes:
        code: Language code used by the registry ('ua', 'ru').
        build: Version of the rule tables.
        case_count: Number of grammatical cases, nominative included.
        vowels: Vowel letters used by the rule predicates.
        consonants: Consonant letters used by the rule predicates.
        PART_PRIORITY: Tie-break order for part classification.
    """
    code: str = ""
    build: str = "0"
    case_count: int = 6
    vowels: str = ""
    consonants: str = ""

    PART_PRIORITY: Tuple[NamePart, ...] = (NamePart.GIVEN, NamePart.FAMILY, NamePart.PATRONYMIC)
    RULE_CHAINS: Dict[RuleKey, Tuple[str, ...]] = {}

    def __init__(self) -> None:
        if not self.code:
            raise ValueError(f"{self.__class__.__name__} must define code")
        if self.case_count < 1:
            raise ValueError(f"{self.__class__.__name__} must have at least one case")
        self._chains: Dict[RuleKey, Tuple[Rule, ...]] = self._bind_rule_chains()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, build={self.build!r})"

    def _bind_rule_chains(self) -> Dict[RuleKey, Tuple[Rule, ...]]:
        chains: Dict[RuleKey, Tuple[Rule, ...]] = {}
        for gender in (Gender.MASCULINE, Gender.FEMININE):
            for part in (NamePart.GIVEN, NamePart.FAMILY, NamePart.PATRONYMIC):
                if (gender, part) not in self.RULE_CHAINS:
                    raise UnknownRuleReference(
                        f"{self.__class__.__name__} declares no rule chain for {gender.name}/{part.name}"
                    )
                bound = []
                for rule_name in self.RULE_CHAINS[(gender, part)]:
                    rule = getattr(self, rule_name, None)
                    if not callable(rule):
                        raise UnknownRuleReference(
                            f"{self.__class__.__name__}: rule '{rule_name}' for "
                            f"{gender.name}/{part.name} is not implemented"
                        )
                    bound.append(rule)
                chains[(gender, part)] = tuple(bound)
        return chains

    def working_word(self, text: str) -> WorkingWord:
        return WorkingWord(text, self.case_count)

    def rule_chain(self, gender: Gender, part: NamePart) -> Tuple[Rule, ...]:
        """Ordered rules for a (gender, part) pair; empty for unresolved input."""
        return self._chains.get((gender, part), ())

    def decline(self, text: str, gender: Gender, part: NamePart) -> Optional[RuleMatch]:
        """
        Run the rule chain for a lower-cased word.

        Returns:
            Optional[RuleMatch]: The first match, or None when every rule declines.
        """
        word = self.working_word(text)
        for rule in self.rule_chain(gender, part):
            match = rule(word)
            if match is not None:
                logger.debug(f"[{self.code}] '{text}' {gender.name}/{part.name}: rule {match.rule_id} ({rule.__name__})")
                return match
        logger.debug(f"[{self.code}] '{text}' {gender.name}/{part.name}: no rule matched")
        return None

    def best_part(self, text: str) -> NamePart:
        """Winning part label for a word, ties broken by PART_PRIORITY."""
        return self.classify_part(text).best(self.PART_PRIORITY)

    @abstractmethod
    def classify_part(self, text: str) -> PartScores:
        """
        Score how much a lower-cased word looks like each name part.

        Args:
            text: Lower-cased word.

        Returns:
            PartScores: given, family and patronymic scores.
        """

    @abstractmethod
    def infer_gender(self, text: str, part: NamePart) -> GenderScores:
        """
        Gender evidence for a lower-cased word of the given part.

        Returns:
            GenderScores: Non-negative masculine and feminine increments.
        """
