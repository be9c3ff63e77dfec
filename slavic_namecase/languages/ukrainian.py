"""
Ukrainian language module (seven cases, vocative last).

Case order: називний, родовий, давальний, знахідний, орудний, місцевий, кличний.

The suffix lists, exception names and weights below are empirically tuned
tables; they are kept exactly as tuned.
"""
from __future__ import annotations

import logging
from typing import Optional

from slavic_namecase.model import Gender, GenderScores, NamePart, PartScores
from slavic_namecase.text_utils import char_at, contains, in_names
from .base import LanguageModule, RuleMatch, WorkingWord

logger = logging.getLogger(__name__)

APOSTROPHE = '’'

# Part classification tables
PATRONYMIC_ENDINGS_3 = ('вна', 'чна', 'ліч')
PATRONYMIC_ENDINGS_4 = ('ьмич', 'ович')
GIVEN_ENDINGS_3 = ('тин',)
GIVEN_ENDINGS_4 = ('ьмич', 'юбов', 'івна', 'явка', 'орив', 'кіян')
GIVEN_EXCEPTIONS = (
    'Лев', 'Гаїна', 'Афіна', 'Антоніна', 'Ангеліна', 'Альвіна', 'Альбіна', 'Аліна',
    'Павло', 'Олесь', 'Микола', 'Мая', 'Англеліна', 'Елькін', 'Мерлін',
)
FAMILY_ENDINGS_2 = (
    'ов', 'ін', 'ев', 'єв', 'ий', 'ин', 'ой', 'ко', 'ук', 'як', 'ца', 'их', 'ик', 'ун', 'ок',
    'ша', 'ая', 'га', 'єк', 'аш', 'ив', 'юк', 'ус', 'це', 'ак', 'бр', 'яр', 'іл', 'ів', 'ич',
    'сь', 'ей', 'нс', 'яс', 'ер', 'ай', 'ян', 'ах', 'ць', 'ющ', 'іс', 'ач', 'уб', 'ох', 'юх',
    'ут', 'ча', 'ул', 'вк', 'зь', 'уц', 'їн', 'де', 'уз', 'юр', 'ік', 'іч', 'ро',
)
FAMILY_ENDINGS_3 = (
    'ова', 'ева', 'єва', 'тих', 'рик', 'вач', 'аха', 'шен', 'мей', 'арь', 'вка', 'шир', 'бан',
    'чий', 'іна', 'їна', 'ька', 'ань', 'ива', 'аль', 'ура', 'ран', 'ало', 'ола', 'кур', 'оба',
    'оль', 'нта', 'зій', 'ґан', 'іло', 'шта', 'юпа', 'рна', 'бла', 'еїн', 'има', 'мар', 'кар',
    'оха', 'чур', 'ниш', 'ета', 'тна', 'зур', 'нір', 'йма', 'орж', 'рба', 'іла', 'лас', 'дід',
    'роз', 'аба', 'чан', 'ган',
)
FAMILY_ENDINGS_4 = (
    'ьник', 'нчук', 'тник', 'кирь', 'ский', 'шена', 'шина', 'вина', 'нина', 'гана', 'хній',
    'зюба', 'орош', 'орон', 'сило', 'руба', 'лест', 'мара', 'обка', 'рока', 'сика', 'одна',
    'нчар', 'вата', 'ндар', 'грій',
)

# Gender inference tables
MASCULINE_GIVEN_NAMES = ('Петро', 'Микола')
MASCULINE_GIVEN_ENDINGS_2 = ('он', 'ов', 'ав', 'ам', 'ол', 'ан', 'рд', 'мп', 'ко', 'ло')
FEMININE_GIVEN_ENDINGS_3 = ('бов', 'нка', 'яра', 'ила', 'опа')
FEMININE_SOFT_ENDINGS_3 = ('ель', 'бов')
MASCULINE_FAMILY_ENDINGS_2 = ('ов', 'ин', 'ев', 'єв', 'ін', 'їн', 'ий', 'їв', 'ів', 'ой', 'ей')
FEMININE_FAMILY_ENDINGS_3 = ('ова', 'ина', 'ева', 'єва', 'іна', 'мін')


class UkrainianLanguage(LanguageModule):
    code = 'ua'
    build = '11071222'
    case_count = 7
    vowels = 'аеиоуіїєюя'
    consonants = 'бвгджзйклмнпрстфхцчшщ'

    sibilants = 'жчшщ'
    non_sibilants = 'бвгдзклмнпрстфхц'
    softeners = 'ьюяєї'
    labials = 'мвпбф'

    RULE_CHAINS = {
        (Gender.MASCULINE, NamePart.GIVEN): ('man_rule_1', 'man_rule_2', 'man_rule_3'),
        (Gender.FEMININE, NamePart.GIVEN): ('woman_rule_1', 'woman_rule_2'),
        (Gender.MASCULINE, NamePart.FAMILY): ('man_rule_5', 'man_rule_1', 'man_rule_2', 'man_rule_3', 'man_rule_4'),
        (Gender.FEMININE, NamePart.FAMILY): ('woman_rule_3', 'woman_rule_1'),
        (Gender.MASCULINE, NamePart.PATRONYMIC): ('man_patronymic',),
        (Gender.FEMININE, NamePart.PATRONYMIC): ('woman_patronymic',),
    }

    # Letter alternations

    @staticmethod
    def dative_alternation(letter: str) -> str:
        """г, к, х before і in dative/locative: г -> з, к -> ц, х -> с."""
        return {'г': 'з', 'к': 'ц', 'х': 'с'}.get(letter, letter)

    @staticmethod
    def vocative_alternation(letter: str) -> str:
        """г, к, х before е in the vocative: г -> ж, к -> ч, х -> ш."""
        return {'г': 'ж', 'к': 'ч', 'х': 'ш'}.get(letter, letter)

    def is_apostrophe(self, char: str) -> bool:
        """Anything that is neither a letter of the alphabet nor a space counts as an apostrophe."""
        return not contains(char, ' ' + self.consonants + self.vowels)

    # Stem helpers

    def stem(self, word: str) -> str:
        """Strip trailing vowels and soft signs."""
        while word and word[-1] in self.vowels + 'ь':
            word = word[:-1]
        return word

    def declension_group(self, word: str) -> int:
        """
        Declension group of a noun: 1 = hard, 2 = mixed, 3 = soft.
        """
        stripped = []
        stem = word
        while stem and stem[-1] in self.vowels + 'ь':
            stripped.append(stem[-1])
            stem = stem[:-1]
        ending = stripped[0] if stripped else ''
        stem_end = stem[-1:]
        if contains(stem_end, self.non_sibilants) and not contains(ending, self.softeners):
            return 1
        if contains(stem_end, self.sibilants) and not contains(ending, self.softeners):
            return 2
        return 3

    @staticmethod
    def last_vowel(word: str, letters: str) -> Optional[str]:
        """The right-most letter of ``word`` found in ``letters``, ignoring the first letter."""
        for index in range(len(word) - 1, 0, -1):
            if word[index] in letters:
                return word[index]
        return None

    # Masculine rules

    def man_rule_1(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Names in -а / -я."""
        before_last = w.last(2, 1)
        dative = self.dative_alternation(before_last)
        if w.last() == 'а':
            return w.forms(w.text, [before_last + 'и', dative + 'і', before_last + 'у',
                                    before_last + 'ою', dative + 'і', before_last + 'о'], 2, rule_id=101)
        if w.last() == 'я':
            if before_last == 'і':
                return w.forms(w.text, ['ї', 'ї', 'ю', 'єю', 'ї', 'є'], 1, rule_id=102)
            return w.forms(w.text, [before_last + 'і', dative + 'і', before_last + 'ю',
                                    before_last + 'ею', dative + 'і', before_last + 'е'], 2, rule_id=103)
        return None

    def man_rule_2(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Names in -р."""
        if w.last() != 'р':
            return None
        if in_names(w.text, ['Ігор', 'Лазар']):
            return w.forms(w.text, ['я', 'еві', 'я', 'ем', 'еві', 'е'], rule_id=201)
        stem = w.text
        if char_at(stem, -2) == 'і':
            stem = stem[:-2] + 'о' + stem[-1:]
        return w.forms(stem, ['а', 'ові', 'а', 'ом', 'ові', 'е'], rule_id=202)

    def man_rule_3(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Second declension: hard, mixed and soft groups."""
        before_last = w.last(2, 1)
        if not contains(w.last(), self.consonants + 'оь'):
            return None

        group = self.declension_group(w.text)
        stem = self.stem(w.text)
        stem_last = stem[-1:]
        vocative = self.vocative_alternation(stem_last)

        # і -> о in oblique cases: Антін -> Антона, Федір -> Федора
        if (stem_last != 'й' and char_at(stem, -2) == 'і'
                and stem[-4:] not in ('світ', 'цвіт')
                and not in_names(w.text, 'Гліб')
                and w.last(2) not in ('ік', 'іч')):
            stem = stem[:-2] + 'о' + stem[-1:]

        # Fleeting е: Орел -> Орла
        if stem[:1] == 'о' and self.last_vowel(stem, self.vowels + 'гк') == 'е' and w.last(2) != 'сь':
            position = stem.rfind('е')
            stem = stem[:position] + stem[position + 1:]

        if group == 1:
            if w.last(2) == 'ок' and w.last(3) != 'оок':
                return w.forms(w.text, ['ка', 'кові', 'ка', 'ком', 'кові', 'че'], 2, rule_id=301)
            if w.last(2) in ('ов', 'ев', 'єв') and not in_names(w.text, ['Лев', 'Остромов']):
                return w.forms(stem, [stem_last + 'а', stem_last + 'у', stem_last + 'а', stem_last + 'им',
                                      stem_last + 'у', vocative + 'е'], 1, rule_id=302)
            if w.last(2) == 'ін':
                return w.forms(w.text, ['а', 'у', 'а', 'ом', 'у', 'е'], rule_id=303)
            return w.forms(stem, [stem_last + 'а', stem_last + 'ові', stem_last + 'а', stem_last + 'ом',
                                  stem_last + 'ові', vocative + 'е'], 1, rule_id=304)

        if group == 2:
            return w.forms(stem, ['а', 'еві', 'а', 'ем', 'еві', 'е'], rule_id=305)

        # Soft group
        if w.last(2) == 'ей' and contains(w.last(3, 1), self.labials):
            # Соловей -> Солов'я
            stem = w.text[:-2] + APOSTROPHE
            return w.forms(stem, ['я', 'єві', 'я', 'єм', 'єві', 'ю'], rule_id=306)
        if w.last() == 'й' or before_last == 'і':
            return w.forms(w.text, ['я', 'єві', 'я', 'єм', 'єві', 'ю'], 1, rule_id=307)
        if w.text == 'швець':
            return w.forms(w.text, ['евця', 'евцеві', 'евця', 'евцем', 'евцеві', 'евцю'], 4, rule_id=308)
        if w.last(3) == 'ець':
            return w.forms(w.text, ['ця', 'цеві', 'ця', 'цем', 'цеві', 'цю'], 3, rule_id=309)
        if w.last(3) in ('єць', 'яць'):
            return w.forms(w.text, ['йця', 'йцеві', 'йця', 'йцем', 'йцеві', 'йцю'], 3, rule_id=310)
        return w.forms(stem, ['я', 'еві', 'я', 'ем', 'еві', 'ю'], rule_id=311)

    def man_rule_4(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Plural-form surnames in -і."""
        if w.last() == 'і':
            return w.forms(w.text, ['их', 'им', 'их', 'ими', 'их', 'і'], 1, rule_id=4)
        return None

    def man_rule_5(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Adjectival surnames in -ий / -ой."""
        if w.last(2) in ('ий', 'ой'):
            return w.forms(w.text, ['ого', 'ому', 'ого', 'им', 'ому', 'ий'], 2, rule_id=5)
        return None

    # Feminine rules

    def woman_rule_1(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Names in -а / -я, including the -ніга alternation."""
        before_last = w.last(2, 1)
        dative = self.dative_alternation(before_last)
        if w.last(4) == 'ніга':
            stem = w.text[:-3] + 'о'
            return w.forms(stem, ['ги', 'зі', 'гу', 'гою', 'зі', 'го'], rule_id=101)
        if w.last() == 'а':
            return w.forms(w.text, [before_last + 'и', dative + 'і', before_last + 'у',
                                    before_last + 'ою', dative + 'і', before_last + 'о'], 2, rule_id=102)
        if w.last() == 'я':
            if contains(before_last, self.vowels) or self.is_apostrophe(before_last):
                return w.forms(w.text, ['ї', 'ї', 'ю', 'єю', 'ї', 'є'], 1, rule_id=103)
            return w.forms(w.text, [before_last + 'і', dative + 'і', before_last + 'ю',
                                    before_last + 'ею', dative + 'і', before_last + 'е'], 2, rule_id=104)
        return None

    def woman_rule_2(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Third declension: Любов, Нінель."""
        if not contains(w.last(), self.consonants + 'ь'):
            return None
        stem = self.stem(w.text)
        stem_last = stem[-1:]
        apostrophe = ''
        doubled = ''
        if contains(stem_last, 'мвпбф') and contains(char_at(stem, -2), self.vowels):
            apostrophe = APOSTROPHE
        if contains(stem_last, 'дтзсцлн'):
            doubled = stem_last
        if w.last() == 'ь':
            return w.forms(stem, ['і', 'і', 'ь', doubled + apostrophe + 'ю', 'і', 'е'], rule_id=201)
        return w.forms(stem, ['і', 'і', '', doubled + apostrophe + 'ю', 'і', 'е'], rule_id=202)

    def woman_rule_3(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Adjectival surnames: Донская, Ковальська."""
        before_last = w.last(2, 1)
        if w.last(2) == 'ая':
            return w.forms(w.text, ['ої', 'ій', 'ую', 'ою', 'ій', 'ая'], 2, rule_id=301)
        if w.last() == 'а' and (contains(w.last(2, 1), 'чнв') or w.last(3, 2) == 'ьк'):
            return w.forms(w.text, [before_last + 'ої', before_last + 'ій', before_last + 'у',
                                    before_last + 'ою', before_last + 'ій', before_last + 'о'], 2, rule_id=302)
        return None

    # Patronymics

    def man_patronymic(self, w: WorkingWord) -> Optional[RuleMatch]:
        if w.last(2) in ('ич', 'іч'):
            return w.forms(w.text, ['а', 'у', 'а', 'ем', 'у', 'у'], rule_id=1)
        return None

    def woman_patronymic(self, w: WorkingWord) -> Optional[RuleMatch]:
        if w.last(3) == 'вна':
            return w.forms(w.text, ['и', 'і', 'у', 'ою', 'і', 'о'], 1, rule_id=2)
        return None

    # Heuristics

    def infer_gender(self, text: str, part: NamePart) -> GenderScores:
        w = self.working_word(text)
        if part is NamePart.GIVEN:
            return self._gender_by_given_name(w)
        if part is NamePart.FAMILY:
            return self._gender_by_family_name(w)
        if part is NamePart.PATRONYMIC:
            return self._gender_by_patronymic(w)
        return GenderScores()

    def _gender_by_given_name(self, w: WorkingWord) -> GenderScores:
        man = 0.0
        woman = 0.0
        if w.last() == 'й':
            man += 0.9
        if in_names(w.text, MASCULINE_GIVEN_NAMES):
            man += 30
        if w.last(2) in MASCULINE_GIVEN_ENDINGS_2:
            man += 0.5
        if w.last(3) in FEMININE_GIVEN_ENDINGS_3:
            woman += 0.5
        if contains(w.last(), self.consonants):
            man += 0.01
        if w.last() == 'ь':
            man += 0.02
        if w.last(2) == 'дь':
            woman += 0.1
        if w.last(3) in FEMININE_SOFT_ENDINGS_3:
            woman += 0.4
        return GenderScores(masculine=man, feminine=woman)

    def _gender_by_family_name(self, w: WorkingWord) -> GenderScores:
        man = 0.0
        woman = 0.0
        if w.last(2) in MASCULINE_FAMILY_ENDINGS_2:
            man += 0.4
        if w.last(3) in FEMININE_FAMILY_ENDINGS_3:
            woman += 0.4
        if w.last(2) == 'ая':
            woman += 0.4
        return GenderScores(masculine=man, feminine=woman)

    def _gender_by_patronymic(self, w: WorkingWord) -> GenderScores:
        if w.last(2) == 'ич':
            return GenderScores(masculine=10)
        if w.last(2) == 'на':
            return GenderScores(feminine=12)
        return GenderScores()

    def classify_part(self, text: str) -> PartScores:
        w = self.working_word(text)
        given = 0.0
        family = 0.0
        patronymic = 0.0

        if w.last(3) in PATRONYMIC_ENDINGS_3 or w.last(4) in PATRONYMIC_ENDINGS_4:
            patronymic += 3

        if w.last(3) in GIVEN_ENDINGS_3 or w.last(4) in GIVEN_ENDINGS_4:
            given += 0.5
        if in_names(text, GIVEN_EXCEPTIONS):
            given += 10

        if w.last(2) in FAMILY_ENDINGS_2:
            family += 0.4
        if w.last(3) in FAMILY_ENDINGS_3:
            family += 0.4
        if w.last(4) in FAMILY_ENDINGS_4:
            family += 0.4
        if w.last() == 'і':
            family += 0.2

        return PartScores(given=given, family=family, patronymic=patronymic)
