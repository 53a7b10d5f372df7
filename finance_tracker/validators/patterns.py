"""
Grammar checks for transaction fields.

Each check is a plain predicate over characters and structure so the rules
do not depend on a particular regex dialect. Letters cover ASCII plus the
Latin-1 accented range (À-ÿ).
"""
from typing import List

DIGITS = frozenset("0123456789")

# Latin-1 symbols that sit inside the À-ÿ range but are not letters
_LATIN1_NON_LETTERS = frozenset("×÷")


def is_letter(ch: str) -> bool:
    """ASCII letter or accented Latin-1 letter."""
    if ('A' <= ch <= 'Z') or ('a' <= ch <= 'z'):
        return True
    return 'À' <= ch <= 'ÿ' and ch not in _LATIN1_NON_LETTERS


def contains_digit(text: str) -> bool:
    """Any ASCII or other Unicode decimal digit."""
    return any(ch.isdigit() for ch in text)


def split_words(text: str) -> List[str]:
    """Split on single spaces, keeping empty items so double spaces stay visible."""
    return text.split(' ')


def is_well_formed_description(text: str) -> bool:
    """
    Letters-only words joined by exactly one space.

    Rejects leading/trailing spaces, doubled spaces, tabs, digits and
    punctuation.
    """
    if not text:
        return False
    for word in split_words(text):
        if not word or not all(is_letter(ch) for ch in word):
            return False
    return True


def has_adjacent_duplicate_word(text: str) -> bool:
    """
    True when two neighbouring words are equal ignoring case.

    Words are whitespace separated, so "coffee coffee" and "Coffee  COFFEE"
    both match while "the theater" does not.
    """
    words = [w.lower() for w in text.split()]
    return any(first == second for first, second in zip(words, words[1:]))


def _all_digits(text: str) -> bool:
    return bool(text) and all(ch in DIGITS for ch in text)


def is_well_formed_amount(text: str) -> bool:
    """
    Unsigned decimal with at most two fractional digits.

    Accepted: ``0``, ``12``, ``12.5``, ``12.50``, ``0.99``.
    Rejected: ``-1``, ``+1``, ``01``, ``1,000``, ``1.``, ``.5``, ``1.234``.
    """
    integer, sep, fraction = text.partition('.')
    if not _all_digits(integer):
        return False
    if len(integer) > 1 and integer[0] == '0':
        return False
    if sep:
        return _all_digits(fraction) and len(fraction) <= 2
    return True


def is_well_formed_date(text: str) -> bool:
    """
    ``YYYY-MM-DD`` with month 01-12 and day 01-31.

    Days are not checked against the month, so 2025-02-31 passes.
    """
    if len(text) != 10 or text[4] != '-' or text[7] != '-':
        return False
    year, month, day = text[:4], text[5:7], text[8:]
    if not (_all_digits(year) and _all_digits(month) and _all_digits(day)):
        return False
    return 1 <= int(month) <= 12 and 1 <= int(day) <= 31
