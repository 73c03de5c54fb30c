"""
Word legality checks.

This module answers the question: "Is this string a playable word?"
A word is legal iff:
  - it has exactly WORD_LENGTH characters
  - every character is a lowercase ASCII letter a–z
  - no letter appears more than once

All checks are pure and never raise; anything that is not a string is
simply illegal.
"""

from typing import Any

# Single source of truth for word length.
WORD_LENGTH = 5
START_LETTER = "a"
END_LETTER = "z"

# 'a'..'z', used by the duplicate check
ALPHABET = tuple(chr(c) for c in range(ord(START_LETTER), ord(END_LETTER) + 1))


def has_correct_length(candidate: Any) -> bool:
    """True iff `candidate` is a string of exactly WORD_LENGTH characters."""
    return isinstance(candidate, str) and len(candidate) == WORD_LENGTH


def all_letters(candidate: Any) -> bool:
    """
    True iff every character lies in START_LETTER..END_LETTER.

    Plain code-point comparison (not str.isalpha, which accepts accented and
    uppercase letters). Stops at the first offending character.
    """
    if not isinstance(candidate, str):
        return False
    for ch in candidate:
        if not (START_LETTER <= ch <= END_LETTER):
            return False
    return True


def no_duplicate_letters(candidate: Any) -> bool:
    """True iff no letter a–z occurs more than once in `candidate`."""
    if not isinstance(candidate, str):
        return False
    return all(candidate.count(letter) <= 1 for letter in ALPHABET)


def is_legal(candidate: Any) -> bool:
    """
    Return True if `candidate` passes all three checks.

    Examples:
      is_legal("crane") -> True
      is_legal("aabbc") -> False  (duplicates)
      is_legal("abc")   -> False  (length)
      is_legal("ab1de") -> False  (non-letter)
    """
    return (
        has_correct_length(candidate)
        and all_letters(candidate)
        and no_duplicate_letters(candidate)
    )
