"""
Tests for the Russian language module.
"""
from __future__ import annotations

import pytest

from slavic_namecase.model import Gender, GenderScores, NamePart

MAN = Gender.MASCULINE
WOMAN = Gender.FEMININE


class TestMasculineRules:
    """Masculine rule chains."""

    @pytest.mark.parametrize(
        "word,part,forms,rule_id",
        [
            ('денис', NamePart.GIVEN, 'денис дениса денису дениса денисом денисе', 204),
            ('игорь', NamePart.GIVEN, 'игорь игоря игорю игоря игорем игоре', 102),
            ('николай', NamePart.GIVEN, 'николай николая николаю николая николаем николае', 102),
            ('павел', NamePart.GIVEN, 'павел павла павлу павла павлом павле', 201),
            ('лев', NamePart.GIVEN, 'лев льва льву льва львом льве', 202),
            ('фома', NamePart.GIVEN, 'фома фомы фоме фому фомой фоме', 302),
            ('иванов', NamePart.FAMILY, 'иванов иванова иванову иванова ивановым иванове', 603),
            ('облогин', NamePart.FAMILY, 'облогин облогина облогину облогина облогиным облогине', 603),
            ('абрамович', NamePart.FAMILY, 'абрамович абрамовича абрамовичу абрамовича абрамовичем абрамовиче', 601),
            ('кравец', NamePart.FAMILY, 'кравец кравца кравцу кравца кравцом кравце', 604),
            ('толстой', NamePart.FAMILY, 'толстой толстого толстому толстого толстым толстом', 402),
            ('римский', NamePart.FAMILY, 'римский римского римскому римского римским римском', 404),
            ('глинка', NamePart.FAMILY, 'глинка глинки глинке глинку глинкой глинке', 703),
            ('сковорода', NamePart.FAMILY, 'сковорода сковороды сковороде сковороду сковородой сковороде', 704),
            ('рерих', NamePart.FAMILY, 'рерих рериха рериху рериха рерихом рерихе', 602),
            ('андреевич', NamePart.PATRONYMIC,
             'андреевич андреевича андреевичу андреевича андреевичем андреевиче', 2),
            ('ильич', NamePart.PATRONYMIC, 'ильич ильича ильичу ильича ильичом ильиче', 1),
        ]
    )
    def test_declension(self, ru, word, part, forms, rule_id):
        match = ru.decline(word, MAN, part)
        assert match.forms == tuple(forms.split())
        assert match.rule_id == rule_id

    @pytest.mark.parametrize(
        "word,part,rule_id",
        [
            ('черных', NamePart.FAMILY, 8),
            ('дурново', NamePart.FAMILY, 8),
            ('ван', NamePart.GIVEN, 203),
            ('дега', NamePart.GIVEN, 301),
        ]
    )
    def test_indeclinable(self, ru, word, part, rule_id):
        """Test that indeclinable words match a rule that keeps every case unchanged."""
        match = ru.decline(word, MAN, part)
        assert match.forms == (word,) * 6
        assert match.rule_id == rule_id


class TestExactWordExceptions:
    """Exception lists match whole words, never a shared suffix."""

    @pytest.mark.parametrize(
        "word,part,rule_id",
        [
            ('да', NamePart.FAMILY, 701),
            ('сковорода', NamePart.FAMILY, 704),
            ('дель', NamePart.GIVEN, 101),
            ('адель', NamePart.GIVEN, 102),
            ('ван', NamePart.GIVEN, 203),
            ('иван', NamePart.GIVEN, 204),
            ('мариа', NamePart.GIVEN, 2),
            ('амариа', NamePart.GIVEN, 302),
            ('дега', NamePart.GIVEN, 301),
            ('омдега', NamePart.GIVEN, 303),
            ('рерих', NamePart.FAMILY, 602),
            ('шрерих', NamePart.FAMILY, 8),
        ]
    )
    def test_masculine_rule(self, ru, word, part, rule_id):
        assert ru.decline(word, MAN, part).rule_id == rule_id

    @pytest.mark.parametrize(
        "word,expected",
        [
            ('да', NamePart.FAMILY),
            ('надежда', NamePart.GIVEN),
            ('валадон', NamePart.FAMILY),
            ('сваладон', NamePart.GIVEN),
            ('данбар', NamePart.FAMILY),
            ('иданбар', NamePart.GIVEN),
            ('мауриц', NamePart.GIVEN),
            ('шмауриц', NamePart.FAMILY),
        ]
    )
    def test_part(self, ru, word, expected):
        assert ru.best_part(word) is expected


class TestFeminineRules:
    """Feminine rule chains."""

    @pytest.mark.parametrize(
        "word,part,forms,rule_id",
        [
            ('анна', NamePart.GIVEN, 'анна анны анне анну анной анне', 101),
            ('мария', NamePart.GIVEN, 'мария марии марии марию марией марии', 202),
            ('любовь', NamePart.GIVEN, 'любовь любови любови любовь любовью любови', 3),
            ('иванова', NamePart.FAMILY, 'иванова ивановой ивановой иванову ивановой ивановой', 403),
            ('толстая', NamePart.FAMILY, 'толстая толстой толстой толстую толстой толстой', 404),
            ('петровна', NamePart.PATRONYMIC, 'петровна петровны петровне петровну петровной петровне', 3),
        ]
    )
    def test_declension(self, ru, word, part, forms, rule_id):
        match = ru.decline(word, WOMAN, part)
        assert match.forms == tuple(forms.split())
        assert match.rule_id == rule_id


class TestHeuristics:
    """Part classification and gender evidence."""

    @pytest.mark.parametrize(
        "word,expected",
        [
            ('облогин', NamePart.FAMILY),
            ('денис', NamePart.GIVEN),
            ('иванова', NamePart.FAMILY),
            ('мария', NamePart.GIVEN),
            ('петровна', NamePart.PATRONYMIC),
            ('андреевич', NamePart.PATRONYMIC),
            ('николай', NamePart.GIVEN),
            ('екатерина', NamePart.GIVEN),
            ('линда', NamePart.GIVEN),
            ('толстой', NamePart.FAMILY),
        ]
    )
    def test_best_part(self, ru, word, expected):
        assert ru.best_part(word) is expected

    def test_patronymic_gender(self, ru):
        assert ru.infer_gender('иванович', NamePart.PATRONYMIC) == GenderScores(masculine=10)
        assert ru.infer_gender('ивановна', NamePart.PATRONYMIC) == GenderScores(feminine=12)

    def test_foreign_given_names(self, ru):
        assert ru.infer_gender('бриджет', NamePart.GIVEN).feminine >= 10
        assert ru.infer_gender('джеймс', NamePart.GIVEN).masculine >= 10

    def test_unclassified_has_no_evidence(self, ru):
        assert ru.infer_gender('иванов', NamePart.UNCLASSIFIED) == GenderScores()

    def test_case_count(self, ru):
        assert ru.case_count == 6
        assert ru.build == '11072716'
