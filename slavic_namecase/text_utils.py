"""
text_utils.py - small Unicode-safe string helpers used by the rule tables.

Python strings are sequences of code points, so slicing is already
letter-safe for Cyrillic; these helpers only pin down the edge-case
behaviour the rule tables rely on (empty needles, short words).

Module: slavic_namecase.text_utils
"""
from typing import Iterable, List, Union

__all__ = ['split_letters', 'tail', 'char_at', 'contains', 'in_names', 'drop_last']


def split_letters(text: str) -> List[str]:
    """Split a word into its letters."""
    return list(text)


def tail(text: str, length: int = 1, stop_after: int = 0) -> str:
    """
    Return the last ``length`` letters of ``text``, optionally keeping only
    the first ``stop_after`` of them.

    Examples:
        >>> tail('задерищенко', 3)
        'нко'
        >>> tail('задерищенко', 3, 1)
        'н'
    """
    if length <= 0:
        return ''
    if stop_after > 0:
        return text[-length:len(text) - length + stop_after]
    return text[-length:]


def char_at(text: str, index: int) -> str:
    """Letter at ``index`` (negative counts from the end), or '' when out of range."""
    try:
        return text[index]
    except IndexError:
        return ''


def contains(needle: str, haystack: Union[str, Iterable[str]]) -> bool:
    """
    Membership test used by the rule predicates.

    With a string haystack this is a substring test (typically a letter
    against a letter class); with a tuple/list it is exact membership.
    An empty needle never matches.
    """
    if not needle:
        return False
    if isinstance(haystack, str):
        return needle in haystack
    return needle in tuple(haystack)


def in_names(word: str, names: Union[str, Iterable[str]]) -> bool:
    """Case-insensitive check that ``word`` equals one of ``names``."""
    if isinstance(names, str):
        names = [names]
    needle = word.lower()
    return any(needle == name.lower() for name in names)


def drop_last(text: str, count: int) -> str:
    """Remove ``count`` trailing letters."""
    if count <= 0:
        return text
    return text[:max(len(text) - count, 0)]
