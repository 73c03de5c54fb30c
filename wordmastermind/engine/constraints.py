"""
Candidate filtering given a round's history.

Given:
  - a pool of words (usually the legal word list)
  - a history of (guess, feedback) pairs from the current round

Return:
  - words that would have produced exactly the same feedback for every
    guess seen so far.

The auto-play simulator uses this to keep its guesses consistent with
everything the engine has reported.
"""

from typing import Iterable, List, Sequence, Tuple
from .scoring import score
from .validation import is_legal

# History is a sequence of (guess, feedback) tuples produced by the engine.
History = Iterable[Tuple[str, Sequence[str]]]  # (guess, marks)


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only legal words that reproduce every recorded feedback.

    A winning guess has empty feedback, so a candidate equal to an earlier
    guess survives only if that guess was the win.

    Args:
      words   : iterable of candidate words
      history : iterable of (guess, feedback) seen so far

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = [(g, tuple(fb)) for g, fb in history]
    out: List[str] = []

    for w in words:
        if not is_legal(w):
            continue

        # Scoring the old guess against this candidate must reproduce the
        # recorded feedback, otherwise the candidate cannot be the secret.
        if all(score(g, w) == fb for g, fb in history):
            out.append(w)

    return out
