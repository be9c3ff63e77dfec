"""
Tests for the language contract and registry.
"""
from __future__ import annotations

from typing import Optional

import pytest

from slavic_namecase.config import NameCaseConfig
from slavic_namecase.engine import NameCaseEngine
from slavic_namecase.errors import ContractViolation, UnknownLanguageError, UnknownRuleReference
from slavic_namecase.languages.base import LanguageModule, RuleMatch, WorkingWord
from slavic_namecase.languages.registry import LanguageRegistry, build_default_registry
from slavic_namecase.languages.ukrainian import UkrainianLanguage
from slavic_namecase.model import NO_RULE, Gender, GenderScores, NamePart, PartScores

ALL_CHAINS = [(gender, part)
              for gender in (Gender.MASCULINE, Gender.FEMININE)
              for part in (NamePart.GIVEN, NamePart.FAMILY, NamePart.PATRONYMIC)]


# Toy language for testing (three cases; words in -a inflect, everything else is invariant)
class FlatLanguage(LanguageModule):
    code = 'xx'
    build = '1'
    case_count = 3
    vowels = 'aeiou'
    consonants = 'bcdfghjklmnpqrstvwxz'
    RULE_CHAINS = dict.fromkeys(ALL_CHAINS, ('suffix_rule',))

    def suffix_rule(self, w: WorkingWord) -> Optional[RuleMatch]:
        if w.last() == 'a':
            return w.forms(w.text, ['e', 'i'], 1, rule_id=7)
        return None

    def classify_part(self, text: str) -> PartScores:
        return PartScores()

    def infer_gender(self, text: str, part: NamePart) -> GenderScores:
        return GenderScores(masculine=1, feminine=1)


class MisspelledRuleLanguage(FlatLanguage):
    code = 'yy'
    RULE_CHAINS = dict(FlatLanguage.RULE_CHAINS)
    RULE_CHAINS[(Gender.FEMININE, NamePart.FAMILY)] = ('suffix_rule', 'sufix_rule')


class IncompleteLanguage(FlatLanguage):
    code = 'zz'
    RULE_CHAINS = {key: ('suffix_rule',) for key in ALL_CHAINS if key[1] is not NamePart.PATRONYMIC}


@pytest.fixture
def flat() -> FlatLanguage:
    return FlatLanguage()


class TestLanguageModuleContract:
    """Tests for LanguageModule."""

    def test_abstract(self):
        with pytest.raises(TypeError):
            LanguageModule()

    def test_rule_chain_bound(self, flat):
        chain = flat.rule_chain(Gender.MASCULINE, NamePart.GIVEN)
        assert [rule.__name__ for rule in chain] == ['suffix_rule']

    def test_unresolved_gender_has_no_chain(self, flat):
        assert flat.rule_chain(Gender.UNRESOLVED, NamePart.GIVEN) == ()

    def test_unknown_rule_reference(self):
        """Test that a misspelled rule name fails when the module is created."""
        with pytest.raises(UnknownRuleReference):
            MisspelledRuleLanguage()

    def test_missing_chain(self):
        with pytest.raises(UnknownRuleReference):
            IncompleteLanguage()

    def test_forms_checks_ending_count(self):
        word = WorkingWord('anna', 3)
        with pytest.raises(ValueError):
            word.forms('anna', ['e'], 1)

    def test_working_word_tail_cache(self):
        word = WorkingWord('шевченко', 7)
        assert word.last(2) == 'ко'
        assert word.last(2) == 'ко'
        assert word.last(3, 1) == 'н'

    def test_same_and_fixed(self):
        word = WorkingWord('ван', 3)
        assert word.same(9).forms == ('ван', 'ван', 'ван')
        with pytest.raises(ValueError):
            word.fixed(['a', 'b'], 1)


class TestLanguageRegistry:
    """Tests for LanguageRegistry."""

    def test_default_registry(self):
        registry = build_default_registry()
        assert registry.codes() == ['ua', 'ru']
        assert 'ua' in registry
        assert len(registry) == 2

    def test_disabled_by_config(self):
        registry = build_default_registry(NameCaseConfig(languages={'ua': False}))
        assert registry.codes() == ['ru']

    def test_unknown_code(self):
        registry = build_default_registry()
        with pytest.raises(UnknownLanguageError):
            registry.get('pl')
        with pytest.raises(ValueError):
            registry.get('pl')

    def test_register_class_and_instance(self):
        registry = LanguageRegistry()
        instance = registry.register(FlatLanguage)
        assert isinstance(instance, FlatLanguage)
        ua = UkrainianLanguage()
        assert registry.register(ua) is ua
        assert registry.get('ua') is ua

    def test_register_broken_module(self):
        with pytest.raises(UnknownRuleReference):
            LanguageRegistry().register(MisspelledRuleLanguage)

    def test_register_non_module(self):
        with pytest.raises(ContractViolation):
            LanguageRegistry().register(object())

    def test_registries_are_independent(self):
        first = LanguageRegistry()
        first.register(FlatLanguage)
        assert 'xx' not in build_default_registry()


class TestPluggedLanguage:
    """An engine composed with a custom language module."""

    def test_gender_tie_resolves_feminine(self, flat):
        engine = NameCaseEngine(flat)
        engine.split_full_name('anna bob')
        assert engine.gender is Gender.FEMININE
        assert engine.gender_confidence == 0

    def test_priority_breaks_part_ties(self, flat):
        engine = NameCaseEngine(flat)
        words = engine.split_full_name('anna bob')
        assert all(word.part is NamePart.GIVEN for word in words)

    def test_declension_and_identity(self, flat):
        engine = NameCaseEngine(flat)
        anna, bob = engine.split_full_name('Anna bob')
        assert engine.format_cases(None, 'N') == ['Anna bob', 'Anne bob', 'Anni bob']
        assert anna.rule_id == 7
        assert bob.rule_id == NO_RULE
