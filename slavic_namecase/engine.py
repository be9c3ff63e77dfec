"""
engine.py - declension engine for one full-name session.

This module provides NameCaseEngine, which owns the NameWord records of a
single full name and drives them through the pipeline:
    - Ingestion (explicit parts or a whitespace-split full name)
    - Part classification by the language module
    - One gender for the whole name (explicit, or summed evidence)
    - Declension via the language module's rule chains, per hyphen component
    - Letter-case restoration and template formatting

The engine is composed with a LanguageModule rather than subclassed per
language. It is mutable and meant to be used by one caller at a time.

Module: slavic_namecase.engine
"""
from __future__ import annotations

__all__ = ['NameCaseEngine', 'EngineState']

import logging
from enum import IntEnum
from typing import Dict, List, Optional, Sequence, Union

from .config import NameCaseConfig
from .errors import ContractViolation
from .languages.base import LanguageModule
from .languages.registry import LanguageRegistry, build_default_registry
from .model import NO_RULE, Gender, NamePart
from .name_word import LetterCaseMask, NameWord

logger = logging.getLogger(__name__)

HYPHEN = '-'

CaseResult = Union[str, List[str]]


class EngineState(IntEnum):
    """Progress of the current analysis pass; later states imply the earlier ones."""
    EMPTY = 0
    INGESTED = 1
    CLASSIFIED = 2
    GENDER_RESOLVED = 3
    DECLINED = 4
    FORMATTED = 5


class NameCaseEngine:
    """
    Declines the components of one full name.

    Attributes:
        language (LanguageModule): Module supplying rules and heuristics.
        config (NameCaseConfig): Active configuration.
        state (EngineState): Progress of the current pass.
        gender_confidence (Optional[float]): Largest |masculine - feminine| spread
            among the words after automatic gender resolution; None when the
            gender was set explicitly or not resolved yet.
    """

    def __init__(self, language: Union[str, LanguageModule, None] = None,
                 registry: Optional[LanguageRegistry] = None,
                 config: Optional[NameCaseConfig] = None):
        """
        Initialize the engine.

        Args:
            language: Language code or LanguageModule instance; defaults to
                ``config.default_language``.
            registry: Registry used to resolve a language code.
            config: Configuration; built-in defaults when omitted.

        Raises:
            ContractViolation: If ``language`` is neither a code nor a LanguageModule.
            UnknownLanguageError: If the code is not registered.
        """
        self.config : NameCaseConfig = config or NameCaseConfig()
        if language is None:
            language = self.config.default_language
        if isinstance(language, LanguageModule):
            self.language : LanguageModule = language
        elif isinstance(language, str):
            registry = registry or build_default_registry(self.config)
            self.language = registry.get(language)
        else:
            raise ContractViolation(f"Expected a language code or LanguageModule, got {type(language).__name__}")

        self._invariant_heads = {head.lower() for head in self.config.invariant_surname_heads}
        self._words : List[NameWord] = []
        self._index : Dict[NamePart, List[NameWord]] = {}
        self._gender_override : Optional[Gender] = None
        self.gender_confidence : Optional[float] = None
        self.state : EngineState = EngineState.EMPTY

    def __repr__(self) -> str:
        return f"NameCaseEngine(language={self.language.code!r}, words={len(self._words)}, state={self.state.name})"

    @property
    def case_count(self) -> int:
        return self.language.case_count

    @property
    def words(self) -> List[NameWord]:
        """Records in ingestion order."""
        return list(self._words)

    @property
    def gender(self) -> Gender:
        """Gender of the current name, UNRESOLVED before the gender pass."""
        if self._gender_override is not None:
            return self._gender_override
        for word in self._words:
            if word.is_gender_resolved:
                return word.gender
        return Gender.UNRESOLVED

    def words_of(self, part: NamePart) -> List[NameWord]:
        """Records classified as ``part``, in their original relative order."""
        self.prepare()
        return list(self._index.get(part, []))

    # Ingestion

    def reset(self) -> None:
        """Discard every record and any explicit gender."""
        self._clear_words()
        self._gender_override = None

    def _clear_words(self) -> None:
        self._words = []
        self._index = {}
        self.gender_confidence = None
        self.state = EngineState.EMPTY

    def ingest(self, token: str, part: Optional[NamePart] = None) -> NameWord:
        """
        Append one token as a new record.

        Adding a record invalidates the analysis of every other record.

        Args:
            token: The name component.
            part: Explicit part label, if known.

        Returns:
            NameWord: The new record.
        """
        if not isinstance(token, str):
            raise ContractViolation(f"Name token must be str, got {type(token).__name__}")
        if part is not None and not isinstance(part, NamePart):
            raise ContractViolation(f"Expected a NamePart, got {type(part).__name__}")
        word = NameWord(token, part)
        if self._gender_override is not None:
            word.resolve_gender(self._gender_override, explicit=True)
        for existing in self._words:
            existing.clear_analysis()
        self._words.append(word)
        self._index = {}
        self.gender_confidence = None
        self.state = EngineState.INGESTED
        return word

    def _ingest_part(self, text: str, part: NamePart) -> None:
        if not isinstance(text, str):
            raise ContractViolation(f"Name text must be str, got {type(text).__name__}")
        for token in text.split():
            self.ingest(token, part)

    def set_given_name(self, name: str) -> None:
        self._ingest_part(name, NamePart.GIVEN)

    def set_family_name(self, name: str) -> None:
        self._ingest_part(name, NamePart.FAMILY)

    def set_patronymic(self, name: str) -> None:
        self._ingest_part(name, NamePart.PATRONYMIC)

    def set_full_name(self, family: str = '', given: str = '', patronymic: str = '') -> None:
        """Ingest explicitly labelled parts; empty strings are skipped."""
        self.set_family_name(family)
        self.set_given_name(given)
        self.set_patronymic(patronymic)

    def set_gender(self, gender: Gender) -> None:
        """
        Override gender detection for this session.

        Applies to every current and future record and drops any computed
        declension. Gender.UNRESOLVED switches back to automatic detection.
        """
        if not isinstance(gender, Gender):
            raise ContractViolation(f"Expected a Gender, got {type(gender).__name__}")
        if gender is Gender.UNRESOLVED:
            self._gender_override = None
            for word in self._words:
                word.gender_explicit = False
                word.clear_analysis()
            self._index = {}
            self.state = min(self.state, EngineState.INGESTED)
            return

        self._gender_override = gender
        self.gender_confidence = None
        for word in self._words:
            word.resolve_gender(gender, explicit=True)
            word.case_forms = []
            word.rule_id = None
        if self.state > EngineState.GENDER_RESOLVED:
            self.state = EngineState.GENDER_RESOLVED

    def split_full_name(self, text: str) -> List[NameWord]:
        """
        Start a new name from whitespace-separated text and analyse it.

        A gender set with set_gender is kept.

        Returns:
            List[NameWord]: One record per token, left to right.
        """
        if not isinstance(text, str):
            raise ContractViolation(f"Full name must be str, got {type(text).__name__}")
        self._clear_words()
        for token in text.split():
            self.ingest(token)
        self.prepare()
        return self.words

    # Analysis

    def classify_all(self) -> None:
        """Label every record without an explicit part and rebuild the part index."""
        for word in self._words:
            if word.part_explicit:
                continue
            scores = self.language.classify_part(word.normalized)
            word.set_part(scores.best(self.language.PART_PRIORITY))
            logger.debug(f"Classified '{word.original}' as {word.part.name} "
                         f"(N={scores.given:.2f} S={scores.family:.2f} F={scores.patronymic:.2f})")
        self._rebuild_index()
        self.state = max(self.state, EngineState.CLASSIFIED)

    def _rebuild_index(self) -> None:
        index: Dict[NamePart, List[NameWord]] = {}
        for word in self._words:
            index.setdefault(word.part, []).append(word)
        self._index = index

    def resolve_gender(self) -> Gender:
        """
        Resolve one gender for the whole name.

        An explicit gender is propagated to every record. Otherwise the
        language module's evidence is summed over all records; the larger
        total wins and a tie resolves to Gender.FEMININE.

        Returns:
            Gender: The resolved gender.
        """
        if self.state < EngineState.CLASSIFIED:
            self.classify_all()

        explicit = self._gender_override
        if explicit is None:
            for word in self._words:
                if word.gender_explicit:
                    explicit = word.gender
                    break

        if explicit is not None:
            for word in self._words:
                word.resolve_gender(explicit, explicit=True)
            self.gender_confidence = None
            logger.debug(f"Gender set explicitly: {explicit.name}")
            resolved = explicit
        else:
            masculine = 0.0
            feminine = 0.0
            spread = 0.0
            for word in self._words:
                word.masculine_score = 0.0
                word.feminine_score = 0.0
                scores = self.language.infer_gender(word.normalized, word.part)
                word.add_gender_scores(scores.masculine, scores.feminine)
                masculine += word.masculine_score
                feminine += word.feminine_score
                spread = max(spread, word.gender_scores.spread)
            resolved = Gender.MASCULINE if masculine > feminine else Gender.FEMININE
            for word in self._words:
                word.resolve_gender(resolved)
            self.gender_confidence = spread
            logger.debug(f"Gender totals m={masculine:.2f} f={feminine:.2f} -> {resolved.name}")

        self.state = max(self.state, EngineState.GENDER_RESOLVED)
        return resolved

    def prepare(self) -> None:
        """Run classification and gender resolution if they are not current."""
        if self.state < EngineState.CLASSIFIED:
            self.classify_all()
        if self.state < EngineState.GENDER_RESOLVED:
            self.resolve_gender()

    # Declension

    def decline_record(self, word: NameWord) -> List[str]:
        """
        Compute and store the case forms of one record.

        The token is declined per hyphen component. In a family name every
        component but the last inflects only if it still looks like a family
        name on its own and is not a configured invariant head. Letter casing
        is restored per component.

        Returns:
            List[str]: One form per case.
        """
        if not isinstance(word, NameWord):
            raise ContractViolation(f"Expected a NameWord, got {type(word).__name__}")
        self.prepare()
        if not word.is_gender_resolved or word.part is NamePart.UNCLASSIFIED:
            # record created outside this engine
            if not word.part_explicit and word.part is NamePart.UNCLASSIFIED:
                word.set_part(self.language.best_part(word.normalized))
            if not word.is_gender_resolved:
                word.resolve_gender(self.gender)

        count = self.case_count
        components = word.normalized.split(HYPHEN)
        originals = word.original.split(HYPHEN)
        if len(originals) != len(components):
            originals = components
        last_position = len(components) - 1

        declined: List[Sequence[str]] = []
        rule_id = NO_RULE
        for position, component in enumerate(components):
            forms: Sequence[str] = (component,) * count
            component_rule = NO_RULE
            if component and not self._held_invariant(word.part, component, position == last_position):
                match = self.language.decline(component, word.gender, word.part)
                if match is not None:
                    forms = match.forms
                    component_rule = match.rule_id
            if position == last_position:
                rule_id = component_rule
            mask = LetterCaseMask.from_text(originals[position])
            declined.append([mask.apply(form) for form in forms])

        word.set_case_forms(
            [HYPHEN.join(component_forms[index] for component_forms in declined) for index in range(count)],
            restore_mask=False,
        )
        word.rule_id = rule_id
        return list(word.case_forms)

    def _held_invariant(self, part: NamePart, component: str, is_last: bool) -> bool:
        if part is not NamePart.FAMILY or is_last:
            return False
        if component in self._invariant_heads:
            return True
        return self.language.best_part(component) is not NamePart.FAMILY

    def decline_all(self) -> None:
        self.prepare()
        for word in self._words:
            self.decline_record(word)
        self.state = EngineState.DECLINED

    def _ensure_declined(self) -> None:
        if self.state < EngineState.DECLINED or any(not word.is_declined for word in self._words):
            self.decline_all()

    # Output

    def _valid_case(self, case: Optional[int]) -> bool:
        return isinstance(case, int) and not isinstance(case, bool) and 0 <= case < self.case_count

    def _part_case(self, part: NamePart, case: Optional[int]) -> CaseResult:
        self._ensure_declined()
        words = self._index.get(part, [])
        if self._valid_case(case):
            return ' '.join(word.case_forms[case] for word in words)
        return [' '.join(word.case_forms[index] for word in words) for index in range(self.case_count)]

    def get_given_name_case(self, case: Optional[int] = None) -> CaseResult:
        return self._part_case(NamePart.GIVEN, case)

    def get_family_name_case(self, case: Optional[int] = None) -> CaseResult:
        return self._part_case(NamePart.FAMILY, case)

    def get_patronymic_case(self, case: Optional[int] = None) -> CaseResult:
        return self._part_case(NamePart.PATRONYMIC, case)

    def get_word_case(self, word: NameWord, case: Optional[int] = None) -> CaseResult:
        """One case of a single record, or all of its cases."""
        if not isinstance(word, NameWord):
            raise ContractViolation(f"Expected a NameWord, got {type(word).__name__}")
        self._ensure_declined()
        if not word.is_declined:
            self.decline_record(word)
        if self._valid_case(case):
            return word.case_forms[case]
        return list(word.case_forms)

    def format_cases(self, case: Optional[int] = None,
                     template: Union[str, Sequence[NameWord], None] = None) -> CaseResult:
        """
        Render the declined name.

        Args:
            case: Case index; None or out of range returns every case.
            template: Marker string ('S' family, 'N' given, 'F' patronymic,
                anything else copied through), or an ordered list of records
                joined with single spaces. Defaults to ``config.default_template``.

        Returns:
            Union[str, List[str]]: One string, or one string per case.
        """
        if template is None:
            template = self.config.default_template
        records: Sequence[NameWord] = ()
        if isinstance(template, str):
            render = self._render_template
        elif isinstance(template, (list, tuple)):
            for word in template:
                if not isinstance(word, NameWord):
                    raise ContractViolation(f"Template records must be NameWord, got {type(word).__name__}")
            records = template
            render = self._render_words
        else:
            raise ContractViolation(f"Template must be str or a list of NameWord, got {type(template).__name__}")

        self._ensure_declined()
        for word in records:
            if not word.is_declined:
                self.decline_record(word)
        self.state = EngineState.FORMATTED

        if self._valid_case(case):
            return render(template, case)
        return [render(template, index) for index in range(self.case_count)]

    def _render_template(self, template: str, case: int) -> str:
        pieces = []
        for marker in template:
            part = NamePart.from_marker(marker)
            if part is None:
                pieces.append(marker)
            else:
                pieces.append(' '.join(word.case_forms[case] for word in self._index.get(part, [])))
        return ''.join(pieces)

    @staticmethod
    def _render_words(words: Sequence[NameWord], case: int) -> str:
        return ' '.join(word.case_forms[case] for word in words)

    # Detection helpers

    def full_name_format(self, text: str) -> str:
        """
        Part markers of a full name in input order, e.g. 'S N F'.

        Starts a new session.
        """
        self.reset()
        words = self.split_full_name(text)
        return ' '.join(word.part.value for word in words)

    def detect_gender(self, text: str) -> Gender:
        """Gender of a full name by automatic detection; starts a new session."""
        self.reset()
        self.split_full_name(text)
        return self.gender
