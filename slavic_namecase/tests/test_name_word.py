"""
Tests for name_word module.
"""
from __future__ import annotations

import pytest

from slavic_namecase.errors import ContractViolation
from slavic_namecase.model import NO_RULE, Gender, NamePart
from slavic_namecase.name_word import LetterCaseMask, NameWord

OREL_FORMS = 'орел,орла,орлові,орла,орлом,орлові,орле'.split(',')


class TestLetterCaseMask:
    """Tests for LetterCaseMask."""

    def test_title_case(self):
        mask = LetterCaseMask.from_text('Тарас')
        assert mask.all_upper is False
        assert mask.upper == (True, False, False, False, False)

    def test_all_upper(self):
        mask = LetterCaseMask.from_text('ШЕВЧЕНКО')
        assert mask.all_upper is True
        assert mask.apply('шевченкові') == 'ШЕВЧЕНКОВІ'

    def test_letters_past_mask_keep_produced_case(self):
        """Test that endings longer than the original stay lower case."""
        mask = LetterCaseMask.from_text('ТаРас')
        assert mask.apply('тарасові') == 'ТаРасові'

    def test_empty(self):
        mask = LetterCaseMask.from_text('')
        assert mask.all_upper is False
        assert mask.apply('') == ''


class TestNameWord:
    """Tests for NameWord."""

    def test_empty_word(self):
        word = NameWord('')
        assert word.normalized == ''
        assert word.part is NamePart.UNCLASSIFIED
        assert word.masculine_score == 0
        assert word.feminine_score == 0
        assert word.gender is Gender.UNRESOLVED
        assert word.case_forms == []
        assert word.rule_id is None

    def test_filled_word(self):
        word = NameWord('Тарас')
        assert word.original == 'Тарас'
        assert word.normalized == 'тарас'
        assert not word.is_declined
        assert not word.part_explicit

    def test_explicit_part(self):
        word = NameWord('Тарас', NamePart.GIVEN)
        assert word.part is NamePart.GIVEN
        assert word.part_explicit

    def test_rejects_non_string(self):
        with pytest.raises(ContractViolation):
            NameWord(42)
        with pytest.raises(TypeError):
            NameWord(None)

    def test_set_case_forms_without_mask(self):
        word = NameWord('Орел')
        word.set_case_forms(OREL_FORMS, restore_mask=False)
        assert word.case_forms == OREL_FORMS

    def test_set_case_forms_with_mask(self):
        word = NameWord('Орел')
        word.set_case_forms(OREL_FORMS, restore_mask=True)
        assert ','.join(word.case_forms) == 'Орел,Орла,Орлові,Орла,Орлом,Орлові,Орле'

    def test_restore_mask(self):
        word = NameWord('Орел')
        word.case_forms = list(OREL_FORMS)
        word.restore_mask()
        assert word.get_case(1) == 'Орла'

    def test_get_case_out_of_range(self):
        word = NameWord('Орел')
        word.set_case_forms(OREL_FORMS)
        assert word.get_case(0) == 'Орел'
        assert word.get_case(7) is None
        assert word.get_case(-1) is None

    def test_gender_scores_accumulate(self):
        word = NameWord('Тарас')
        word.add_gender_scores(masculine=0.5)
        word.add_gender_scores(masculine=0.25, feminine=0.1)
        assert word.masculine_score == pytest.approx(0.75)
        assert word.feminine_score == pytest.approx(0.1)
        assert word.gender_scores.spread == pytest.approx(0.65)

    def test_negative_gender_increment_rejected(self):
        word = NameWord('Тарас')
        with pytest.raises(ValueError):
            word.add_gender_scores(masculine=-1)

    def test_clear_analysis_keeps_explicit_labels(self):
        """Test that caller-supplied part and gender survive a reset of derived data."""
        word = NameWord('Тарас', NamePart.GIVEN)
        word.resolve_gender(Gender.MASCULINE, explicit=True)
        word.add_gender_scores(masculine=1)
        word.set_case_forms(['тарас'] * 7)
        word.clear_analysis()
        assert word.part is NamePart.GIVEN
        assert word.gender is Gender.MASCULINE
        assert word.masculine_score == 0
        assert not word.is_declined

    def test_clear_analysis_drops_derived_labels(self):
        word = NameWord('Тарас')
        word.set_part(NamePart.GIVEN)
        word.resolve_gender(Gender.MASCULINE)
        word.clear_analysis()
        assert word.part is NamePart.UNCLASSIFIED
        assert word.gender is Gender.UNRESOLVED

    def test_clear_analysis_forgets_rule(self):
        """Test that a cleared word reports None, not NO_RULE, until declined again."""
        word = NameWord('Ван')
        word.set_case_forms(['ван'] * 6)
        word.rule_id = NO_RULE
        word.clear_analysis()
        assert word.rule_id is None
