"""
Per-letter feedback for a single (guess, secret) pair.

Conventions:
  - 'exact' : the letter is in the secret at this position
  - 'near'  : the letter is in the secret, somewhere else
  - 'miss'  : the letter is not in the secret

Algorithm (single pass, position by position):
  A letter is 'exact' when its FIRST occurrence in the secret sits at the
  guessed position. With repeated letters in the secret, a later copy that
  is correctly placed therefore scores 'near':

      score("spoon", "nonos") -> ('near', 'miss', 'near', 'near', 'near')

  Legal words never repeat a letter, so in play this coincides with plain
  positional matching. A full match short-circuits to an empty result.
"""

from typing import Iterable, Literal, Tuple

Mark = Literal["exact", "near", "miss"]

EXACT: Mark = "exact"
NEAR: Mark = "near"
MISS: Mark = "miss"


def score(guess: str, secret: str) -> Tuple[Mark, ...]:
    """
    Compute feedback marks for `guess` against `secret`.

    Returns:
      - () when guess == secret (a win carries no per-letter feedback)
      - otherwise one mark per letter of `guess`, in guess order

    Examples:
      score("light", "night") -> ('miss', 'exact', 'exact', 'exact', 'exact')
      score("crane", "crane") -> ()
    """
    if guess == secret:
        return ()

    marks = []
    for i, letter in enumerate(guess):
        first = secret.find(letter)
        if first == i:
            marks.append(EXACT)
        elif first == -1:
            marks.append(MISS)
        else:
            marks.append(NEAR)
    return tuple(marks)


def format_feedback(marks: Iterable[str]) -> str:
    """Render marks as a space-separated line, e.g. "miss exact near"."""
    return " ".join(marks)
