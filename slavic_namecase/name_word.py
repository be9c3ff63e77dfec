"""
name_word.py - per-token record for one component of a full name.

This module provides the NameWord class, which carries a single token
through its whole lifecycle:
    - Original and lower-cased text
    - The letter-case mask used to restore casing after declension
    - Part classification (given name / family name / patronymic)
    - Gender evidence and the resolved gender
    - The computed case forms and the id of the rule that produced them

Module: slavic_namecase.name_word
"""
from __future__ import annotations

__all__ = ['NameWord', 'LetterCaseMask']

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .errors import ContractViolation
from .model import Gender, GenderScores, NamePart
from .text_utils import split_letters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LetterCaseMask:
    """
    Records which letters of the original token were upper case.

    Attributes:
        all_upper (bool): True when the token had no lower-case letters at all.
        upper (Tuple[bool, ...]): Per-letter flags aligned with the original token.
    """
    all_upper: bool
    upper: Tuple[bool, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> LetterCaseMask:
        flags = tuple(not letter.islower() for letter in split_letters(text))
        return cls(all_upper=bool(flags) and all(flags), upper=flags)

    def apply(self, form: str) -> str:
        """
        Re-apply the mask to a lower-case form.

        Letters past the end of the mask keep the case the rule produced.
        """
        if self.all_upper:
            return form.upper()
        limit = min(len(form), len(self.upper))
        head = ''.join(
            letter.upper() if self.upper[index] else letter
            for index, letter in enumerate(form[:limit])
        )
        return head + form[limit:]


class NameWord:
    """
    One token of a full name.

    Attributes:
        original (str): Text as supplied, casing preserved.
        normalized (str): Lower-case text used for all rule matching.
        mask (LetterCaseMask): Casing of ``original``.
        part (NamePart): Classification; UNCLASSIFIED until analysed.
        part_explicit (bool): True when the caller supplied the part.
        masculine_score (float): Accumulated masculine evidence.
        feminine_score (float): Accumulated feminine evidence.
        gender (Gender): Resolved gender, UNRESOLVED until the analysis pass.
        gender_explicit (bool): True when the gender came from the caller.
        case_forms (List[str]): Empty, or exactly one form per case.
        rule_id (Optional[int]): Rule that produced ``case_forms``; NO_RULE for identity,
            None while the word has not been declined.
    """
    __slots__ = ['original', 'normalized', 'mask',
                 'part', 'part_explicit',
                 'masculine_score', 'feminine_score',
                 'gender', 'gender_explicit',
                 'case_forms', 'rule_id']

    def __init__(self, text: str, part: Optional[NamePart] = None):
        """
        Initialize a NameWord.

        Args:
            text (str): The token as supplied by the caller.
            part (Optional[NamePart]): Explicit part label, if known.
        """
        if not isinstance(text, str):
            raise ContractViolation(f"NameWord text must be str, got {type(text).__name__}")
        self.original : str = text
        self.normalized : str = text.lower()
        self.mask : LetterCaseMask = LetterCaseMask.from_text(text)

        self.part : NamePart = part or NamePart.UNCLASSIFIED
        self.part_explicit : bool = part is not None and part is not NamePart.UNCLASSIFIED

        self.masculine_score : float = 0.0
        self.feminine_score : float = 0.0
        self.gender : Gender = Gender.UNRESOLVED
        self.gender_explicit : bool = False

        self.case_forms : List[str] = []
        self.rule_id : Optional[int] = None

    def __str__(self) -> str:
        return f"NameWord({self.original!r}, part={self.part.name})"

    def __repr__(self) -> str:
        return (f"[ {self.original} : {self.part.name} {self.gender.name} "
                f"m={self.masculine_score} f={self.feminine_score} rule={self.rule_id} ]")

    def set_part(self, part: NamePart, explicit: bool = False) -> None:
        self.part = part
        self.part_explicit = explicit

    def add_gender_scores(self, masculine: float = 0.0, feminine: float = 0.0) -> None:
        """
        Add gender evidence. Scores only ever grow within an analysis pass.

        Raises:
            ValueError: If either increment is negative.
        """
        if masculine < 0 or feminine < 0:
            raise ValueError(f"Gender score increments must be non-negative, got ({masculine}, {feminine})")
        self.masculine_score += masculine
        self.feminine_score += feminine

    @property
    def gender_scores(self) -> GenderScores:
        return GenderScores(masculine=self.masculine_score, feminine=self.feminine_score)

    @property
    def is_gender_resolved(self) -> bool:
        return self.gender is not Gender.UNRESOLVED

    def resolve_gender(self, gender: Gender, explicit: bool = False) -> None:
        self.gender = Gender(gender)
        self.gender_explicit = explicit

    def clear_analysis(self) -> None:
        """Drop everything derived by an analysis pass; caller-supplied labels survive."""
        if not self.part_explicit:
            self.part = NamePart.UNCLASSIFIED
        self.masculine_score = 0.0
        self.feminine_score = 0.0
        if not self.gender_explicit:
            self.gender = Gender.UNRESOLVED
        self.case_forms = []
        self.rule_id = None

    def set_case_forms(self, forms: Sequence[str], restore_mask: bool = True) -> None:
        """
        Store the declined forms.

        Args:
            forms: One form per case, nominative first.
            restore_mask: Re-apply the original letter casing before storing.
        """
        forms = list(forms)
        if restore_mask:
            forms = [self.mask.apply(form) for form in forms]
        self.case_forms = forms

    def restore_mask(self) -> None:
        """Re-apply the letter-case mask to the stored forms."""
        self.case_forms = [self.mask.apply(form) for form in self.case_forms]

    @property
    def is_declined(self) -> bool:
        return bool(self.case_forms)

    def get_case(self, index: int) -> Optional[str]:
        """Return one case form, or None if the index is not available."""
        if 0 <= index < len(self.case_forms):
            return self.case_forms[index]
        return None
