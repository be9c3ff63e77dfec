"""
Russian language module (six cases, no vocative).

Case order: именительный, родительный, дательный, винительный, творительный, предложный.
"""
from __future__ import annotations

import logging
from typing import Optional

from slavic_namecase.model import Gender, GenderScores, NamePart, PartScores
from slavic_namecase.text_utils import contains, in_names
from .base import LanguageModule, RuleMatch, WorkingWord

logger = logging.getLogger(__name__)

# Surname endings that never inflect
INVARIANT_ENDINGS_3 = ('ово', 'аго', 'яго', 'ирь')
INVARIANT_ENDINGS_2 = ('их', 'ых', 'ко', 'уа')

# For a penultimate letter, the final letters after which a word does NOT
# look like a family name. An empty entry disables the check.
FAMILY_FINAL_EXCLUSIONS = {
    'а': 'взйкмнпрстфя', 'б': 'а', 'в': 'аь', 'г': 'а', 'д': 'ар',
    'е': 'бвгдйлмня', 'ё': 'бвгдйлмня', 'ж': '', 'з': 'а', 'и': 'гдйклмнопрсфя',
    'й': 'ля', 'к': 'аст', 'л': 'аилоья', 'м': 'аип', 'н': 'ат', 'о': 'вдлнпря',
    'п': 'п', 'р': 'адикпть', 'с': 'атуя', 'т': 'аор', 'у': 'дмр', 'ф': 'аь',
    'х': 'а', 'ц': 'а', 'ч': '', 'ш': 'а', 'щ': '', 'ъ': '', 'ы': 'дн', 'ь': 'я',
    'э': '', 'ю': '', 'я': 'нс',
}

FOREIGN_MASCULINE_NAMES = (
    'Вова', 'Анри', 'Питер', 'Пауль', 'Франц', 'Вильям', 'Уильям', 'Альфонс', 'Ганс', 'Франс',
    'Филиппо', 'Андреа', 'Корнелис', 'Фрэнк', 'Леонардо', 'Джеймс', 'Отто', 'жан-пьер',
    'Джованни', 'Джозеф', 'Педро', 'Адольф', 'Уолтер', 'Антонио', 'Якоб', 'Эсташ', 'Адрианс',
    'Франческо', 'Доменико', 'Ханс', 'Гун', 'Шарль', 'Хендрик', 'Амброзиус', 'Таддео',
    'Фердинанд', 'Джошуа', 'Изак', 'Иоганн', 'Фридрих', 'Эмиль', 'Умберто', 'Франсуа', 'Ян',
    'Эрнст', 'Георг', 'Карл',
)
FOREIGN_FEMININE_NAMES = ('Бриджет', 'Элизабет', 'Маргарет', 'Джанет', 'Жаклин', 'Эвелин')

GIVEN_EXCEPTIONS = (
    'Лев', 'Яков', 'Вова', 'Маша', 'Ольга', 'Еремей', 'Исак', 'Исаак', 'Ева', 'Ирина',
    'Элькин', 'Мерлин', 'Макс', 'Алекс', 'Мариа',
) + FOREIGN_FEMININE_NAMES
GIVEN_NAMES_IN_INA = (
    'Мальвина', 'Антонина', 'Альбина', 'Агриппина', 'Фаина', 'Карина', 'Марина', 'Валентина',
    'Калина', 'Аделина', 'Алина', 'Ангелина', 'Галина', 'Каролина', 'Павлина', 'Полина',
    'Элина', 'Мина', 'Нина', 'Дина',
)
CONSONANT_CLUSTERS_IN_GIVEN = ('др', 'кт', 'лл', 'пп', 'рд', 'рк', 'рп', 'рт', 'тр')
FAMILY_ENDINGS_2 = (
    'ов', 'ин', 'ев', 'ёв', 'ый', 'ын', 'ой', 'ук', 'як', 'ца', 'ун', 'ок', 'ая', 'ёк', 'ив',
    'ус', 'ак', 'яр', 'уз', 'ах', 'ай',
)
FAMILY_ENDINGS_3 = (
    'ова', 'ева', 'ёва', 'ына', 'шен', 'мей', 'вка', 'шир', 'бан', 'чий', 'кий', 'бей', 'чан',
    'ган', 'ким', 'кан', 'мар', 'лис',
)

MASCULINE_GIVEN_ENDINGS_2 = ('он', 'ов', 'ав', 'ам', 'ол', 'ан', 'рд', 'мп', 'по', 'до', 'др', 'рт')
FEMININE_GIVEN_ENDINGS_2 = ('вь', 'фь', 'ль', 'на')
MASCULINE_GIVEN_ENDINGS_3 = ('лья', 'вва', 'ока', 'ука', 'ита', 'эль', 'реа')
FEMININE_GIVEN_ENDINGS_3 = ('лия', 'ния', 'сия', 'дра', 'лла', 'кла', 'опа', 'вия')
FEMININE_GIVEN_ENDINGS_4 = ('льда', 'фира', 'нина', 'лита', 'алья')
MASCULINE_FAMILY_ENDINGS_2 = ('ов', 'ин', 'ев', 'ий', 'ёв', 'ый', 'ын', 'ой')
FEMININE_FAMILY_ENDINGS_3 = ('ова', 'ина', 'ева', 'ёва', 'ына', 'мин')


class RussianLanguage(LanguageModule):
    code = 'ru'
    build = '11072716'
    case_count = 6
    vowels = 'аеёиоуыэюя'
    consonants = 'бвгджзйклмнпрстфхцчшщ'

    RULE_CHAINS = {
        (Gender.MASCULINE, NamePart.GIVEN): ('man_given_exceptions', 'man_rule_1', 'man_rule_2', 'man_rule_3'),
        (Gender.FEMININE, NamePart.GIVEN): ('woman_rule_1', 'woman_rule_2', 'woman_rule_3'),
        (Gender.MASCULINE, NamePart.FAMILY): ('man_rule_8', 'man_rule_4', 'man_rule_5', 'man_rule_6', 'man_rule_7'),
        (Gender.FEMININE, NamePart.FAMILY): ('woman_rule_4',),
        (Gender.MASCULINE, NamePart.PATRONYMIC): ('man_patronymic',),
        (Gender.FEMININE, NamePart.PATRONYMIC): ('woman_patronymic',),
    }

    # Masculine rules

    def man_given_exceptions(self, w: WorkingWord) -> Optional[RuleMatch]:
        if in_names(w.text, ['Старший', 'Младший']):
            return w.forms(w.text, ['его', 'ему', 'его', 'им', 'ем'], 2, rule_id=1)
        if in_names(w.text, 'Мариа'):
            return w.forms(w.text, ['и', 'и', 'ю', 'ей', 'ии'], 1, rule_id=2)
        return None

    def man_rule_1(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Names in -ь / -й: Игорь, Николай."""
        if not contains(w.last(), 'ьй'):
            return None
        if in_names(w.text, 'Дель'):
            return w.same(rule_id=101)
        if w.last(2, 1) != 'и':
            return w.forms(w.text, ['я', 'ю', 'я', 'ем', 'е'], 1, rule_id=102)
        return w.forms(w.text, ['я', 'ю', 'я', 'ем', 'и'], 1, rule_id=103)

    def man_rule_2(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Names in a consonant, with the fleeting-vowel exceptions."""
        if not contains(w.last(), self.consonants):
            return None
        if in_names(w.text, 'Павел'):
            return w.fixed(['павел', 'павла', 'павлу', 'павла', 'павлом', 'павле'], rule_id=201)
        if in_names(w.text, 'Лев'):
            return w.fixed(['лев', 'льва', 'льву', 'льва', 'львом', 'льве'], rule_id=202)
        if in_names(w.text, 'ван'):
            return w.same(rule_id=203)
        return w.forms(w.text, ['а', 'у', 'а', 'ом', 'е'], rule_id=204)

    def man_rule_3(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Masculine names in -а / -я: Фома, Илья."""
        if w.last() == 'а':
            if in_names(w.text, ['фра', 'Дега', 'Андреа', 'Сёра', 'Сера']):
                return w.same(rule_id=301)
            if not contains(w.last(2, 1), 'кшгх'):
                return w.forms(w.text, ['ы', 'е', 'у', 'ой', 'е'], 1, rule_id=302)
            return w.forms(w.text, ['и', 'е', 'у', 'ой', 'е'], 1, rule_id=303)
        if w.last() == 'я':
            return w.forms(w.text, ['и', 'е', 'ю', 'ей', 'е'], 1, rule_id=304)
        return None

    def man_rule_4(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Surnames in -ь / -й, including adjectival ones: Толстой, Соболев-Бей."""
        if not contains(w.last(), 'ьй'):
            return None
        if w.last(3) == 'бей':
            return w.forms(w.text, ['ья', 'ью', 'ья', 'ьем', 'ье'], 2, rule_id=400)
        if w.last(3, 1) == 'а' or contains(w.last(2, 1), 'ел'):
            return w.forms(w.text, ['я', 'ю', 'я', 'ем', 'е'], 1, rule_id=401)
        if w.last(2, 1) == 'ы' or w.last(3, 1) == 'т':
            return w.forms(w.text, ['ого', 'ому', 'ого', 'ым', 'ом'], 2, rule_id=402)
        if w.last(3) == 'чий':
            return w.forms(w.text, ['ьего', 'ьему', 'ьего', 'ьим', 'ьем'], 2, rule_id=403)
        if not contains(w.last(2, 1), self.vowels) or w.last(2, 1) == 'и':
            return w.forms(w.text, ['ого', 'ому', 'ого', 'им', 'ом'], 2, rule_id=404)
        return w.same(rule_id=405)

    def man_rule_5(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Surnames in -к, with the fleeting е/ё: Воробушек, Волчек."""
        if w.last() != 'к':
            return None
        if w.last(4) in ('енок', 'ёнок'):
            return w.forms(w.text, ['ка', 'ку', 'ка', 'ком', 'ке'], 2, rule_id=501)
        if w.last(2, 1) == 'е' and w.last(3, 1) != 'р':
            return w.forms(w.text, ['ька', 'ьку', 'ька', 'ьком', 'ьке'], 2, rule_id=502)
        return w.forms(w.text, ['а', 'у', 'а', 'ом', 'е'], rule_id=503)

    def man_rule_6(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Surnames in a consonant: Иванов, Абрамович, Кравец."""
        if w.last() == 'ч':
            return w.forms(w.text, ['а', 'у', 'а', 'ем', 'е'], rule_id=601)
        if w.last(2) == 'ец':
            return w.forms(w.text, ['ца', 'цу', 'ца', 'цом', 'це'], 2, rule_id=604)
        if contains(w.last(), 'цсршмхт'):
            return w.forms(w.text, ['а', 'у', 'а', 'ом', 'е'], rule_id=602)
        if contains(w.last(), self.consonants):
            return w.forms(w.text, ['а', 'у', 'а', 'ым', 'е'], rule_id=603)
        return None

    def man_rule_7(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Surnames in -а / -я: Глинка, Берия. The particle `да` on its own stays unchanged."""
        if w.last() == 'а':
            if in_names(w.text, 'да'):
                return w.same(rule_id=701)
            if w.last(2, 1) == 'ш':
                return w.forms(w.text, ['и', 'е', 'у', 'ей', 'е'], 1, rule_id=702)
            if contains(w.last(2, 1), 'хкг'):
                return w.forms(w.text, ['и', 'е', 'у', 'ой', 'е'], 1, rule_id=703)
            return w.forms(w.text, ['ы', 'е', 'у', 'ой', 'е'], 1, rule_id=704)
        if w.last() == 'я':
            return w.forms(w.text, ['ой', 'ой', 'ую', 'ой', 'ой'], 2, rule_id=705)
        return None

    def man_rule_8(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Surnames that do not inflect: Дурново, Черных, Шевченко."""
        if w.last(3) in INVARIANT_ENDINGS_3 or w.last(2) in INVARIANT_ENDINGS_2:
            if w.text == 'рерих':
                return None
            return w.same(rule_id=8)
        return None

    # Feminine rules

    def woman_rule_1(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Names in -а: Анна, Маша, Ольга."""
        if w.last() != 'а' or w.last(2, 1) == 'и':
            return None
        if not contains(w.last(2, 1), 'шхкг'):
            return w.forms(w.text, ['ы', 'е', 'у', 'ой', 'е'], 1, rule_id=101)
        if w.last(2, 1) == 'ш':
            return w.forms(w.text, ['и', 'е', 'у', 'ей', 'е'], 1, rule_id=102)
        return w.forms(w.text, ['и', 'е', 'у', 'ой', 'е'], 1, rule_id=103)

    def woman_rule_2(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Names in -я: Таня, Мария."""
        if w.last() != 'я':
            return None
        if w.last(2, 1) != 'и':
            return w.forms(w.text, ['и', 'е', 'ю', 'ей', 'е'], 1, rule_id=201)
        return w.forms(w.text, ['и', 'и', 'ю', 'ей', 'и'], 1, rule_id=202)

    def woman_rule_3(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Names in -ь: Любовь."""
        if w.last() == 'ь':
            return w.forms(w.text, ['и', 'и', 'ь', 'ью', 'и'], 1, rule_id=3)
        return None

    def woman_rule_4(self, w: WorkingWord) -> Optional[RuleMatch]:
        """Feminine surnames: Иванова, Толстая, Глинка."""
        if w.last() == 'а':
            if contains(w.last(2, 1), 'гк'):
                return w.forms(w.text, ['и', 'е', 'у', 'ой', 'е'], 1, rule_id=401)
            if w.last(2, 1) == 'ш':
                return w.forms(w.text, ['и', 'е', 'у', 'ей', 'е'], 1, rule_id=402)
            return w.forms(w.text, ['ой', 'ой', 'у', 'ой', 'ой'], 1, rule_id=403)
        if w.last() == 'я':
            return w.forms(w.text, ['ой', 'ой', 'ую', 'ой', 'ой'], 2, rule_id=404)
        return None

    # Patronymics

    def man_patronymic(self, w: WorkingWord) -> Optional[RuleMatch]:
        if in_names(w.text, 'Ильич'):
            return w.forms(w.text, ['а', 'у', 'а', 'ом', 'е'], rule_id=1)
        if w.last(2) == 'ич':
            return w.forms(w.text, ['а', 'у', 'а', 'ем', 'е'], rule_id=2)
        return None

    def woman_patronymic(self, w: WorkingWord) -> Optional[RuleMatch]:
        if w.last(2) == 'на':
            return w.forms(w.text, ['ы', 'е', 'у', 'ой', 'е'], 1, rule_id=3)
        return None

    # Heuristics

    def infer_gender(self, text: str, part: NamePart) -> GenderScores:
        w = self.working_word(text)
        if part is NamePart.GIVEN:
            return self._gender_by_given_name(w)
        if part is NamePart.FAMILY:
            return self._gender_by_family_name(w)
        if part is NamePart.PATRONYMIC:
            if w.last(2) == 'ич':
                return GenderScores(masculine=10)
            if w.last(2) == 'на':
                return GenderScores(feminine=12)
        return GenderScores()

    def _gender_by_given_name(self, w: WorkingWord) -> GenderScores:
        man = 0.0
        woman = 0.0
        if w.last() == 'й':
            man += 0.9
        if w.last(2) in MASCULINE_GIVEN_ENDINGS_2:
            man += 0.3
        if contains(w.last(), self.consonants):
            man += 0.01
        if w.last() == 'ь':
            man += 0.02
        if w.last(2) in FEMININE_GIVEN_ENDINGS_2:
            woman += 0.1
        if w.last(2) == 'ла':
            woman += 0.04
        if w.last(2) in ('то', 'ма'):
            man += 0.01
        if w.last(3) in MASCULINE_GIVEN_ENDINGS_3:
            man += 0.2
        if w.last(3) == 'има':
            woman += 0.15
        if w.last(3) in FEMININE_GIVEN_ENDINGS_3:
            woman += 0.5
        if w.last(4) in FEMININE_GIVEN_ENDINGS_4:
            woman += 0.5
        if in_names(w.text, FOREIGN_MASCULINE_NAMES):
            man += 10
        if in_names(w.text, FOREIGN_FEMININE_NAMES):
            woman += 10
        if in_names(w.text, 'Берил'):
            woman += 0.05
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

    def classify_part(self, text: str) -> PartScores:
        w = self.working_word(text)
        given = 0.0
        family = 0.0
        patronymic = 0.0
        last = w.last()

        if w.last(3) in ('вна', 'чна', 'вич', 'ьич'):
            patronymic += 3

        if w.last(2) == 'ша':
            given += 0.5
        if w.last(3) == 'эль':
            given += 0.5

        if contains(last, 'еёжхцочшщъыэю'):
            if in_names(text, 'Мауриц'):
                given += 10
            else:
                family += 0.3

        exclusions = FAMILY_FINAL_EXCLUSIONS.get(w.last(2, 1), '')
        if exclusions and not contains(last, exclusions):
            family += 0.4

        if last == 'я' and contains(w.last(3, 1), self.vowels):
            given += 0.5
        if contains(w.last(2, 1), 'жчщъэю'):
            family += 0.3

        if last == 'ь':
            if w.last(3, 2) == 'ел':
                given += 0.7
            elif in_names(text, ['Лазарь', 'Игорь', 'Любовь']):
                given += 10
            else:
                family += 0.3
        elif (contains(last, self.consonants + 'ь') and contains(w.last(2, 1), self.consonants + 'ь')
                and w.last(2) not in CONSONANT_CLUSTERS_IN_GIVEN):
            family += 0.25

        if w.last(3) == 'тин' and contains(w.last(4, 1), 'нст'):
            given += 0.5

        if in_names(text, GIVEN_EXCEPTIONS) or in_names(text, FOREIGN_MASCULINE_NAMES):
            given += 10

        if w.last(2) == 'ли' and w.last(3, 1) != 'а':
            family += 0.4
        if w.last(2) == 'ян' and len(w) > 2 and not contains(w.last(3, 1), 'ьи'):
            family += 0.4
        if w.last(2) == 'ур' and not in_names(text, ['Артур', 'Тимур']):
            family += 0.4
        if w.last(2) == 'ик':
            if contains(w.last(3, 1), 'лшхд'):
                given += 0.3
            else:
                family += 0.4
        if w.last(3) == 'ина':
            if w.last(7) in ('атерина', 'ристина'):
                given += 10
            elif in_names(text, GIVEN_NAMES_IN_INA):
                given += 10
            else:
                family += 0.4
        if w.last(4) == 'олай':
            given += 0.6

        if w.last(2) in FAMILY_ENDINGS_2:
            family += 0.4
        if w.last(3) in FAMILY_ENDINGS_3:
            family += 0.4
        if w.last(4) == 'шена':
            family += 0.4

        if in_names(text, ['да', 'валадон', 'Данбар']):
            family += 10

        return PartScores(given=given, family=family, patronymic=patronymic)
