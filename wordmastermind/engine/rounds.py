"""
Round engine: secret word, guess counter and round lifecycle.

One call to `submit_guess` processes one line of player input and returns a
GuessOutcome describing what happened. The engine never prints; rendering
outcomes is the caller's job (see wordmastermind.harness.messages).

Lifecycle per round:
  AwaitingGuess --legal guess == secret--> RoundWon    -> new round
  AwaitingGuess --MAX_GUESS-th miss------> SessionLost -> new round
  AwaitingGuess --illegal guess----------> AwaitingGuess (no attempt used)
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Literal, Optional, Tuple

from .scoring import Mark, score
from .validation import is_legal

logger = logging.getLogger(__name__)

# Guess budget per round.
MAX_GUESS = 10

# Input that ends the session.
EXIT_TOKEN = "/"

OutcomeKind = Literal["exit", "invalid", "feedback", "won", "lost"]


class EmptyWordListError(ValueError):
    """Raised when there is no legal word to pick a secret from."""


@dataclass(frozen=True)
class GuessOutcome:
    """Result of a single submit_guess call."""
    kind: OutcomeKind
    guess: str
    guess_count: int                 # guesses used in the round the guess belonged to
    remaining: int                   # MAX_GUESS - guess_count
    feedback: Tuple[Mark, ...] = ()  # empty for exit/invalid/won
    secret: Optional[str] = None     # only set when a round ends (won/lost)

    @property
    def round_over(self) -> bool:
        return self.kind in ("won", "lost")


class RoundEngine:
    """
    Owns the legal word list and the state of the current round.

    Args:
      words : words to draw secrets from; illegal entries are dropped
      rng   : random.Random used for secret selection
      seed  : convenience seed when no rng is given
    """

    def __init__(self, words: Iterable[str], *, rng: random.Random | None = None,
                 seed: int | None = None):
        # Secrets are always legal words
        self.words: Tuple[str, ...] = tuple(w for w in words if is_legal(w))
        if not self.words:
            raise EmptyWordListError("word list contains no legal words; cannot pick a secret")

        self.rng = rng if rng is not None else random.Random(seed)

        self.secret: str = ""
        self.guess_count = 0
        self.feedback: Tuple[Mark, ...] = ()
        self.history: List[Tuple[str, Tuple[Mark, ...]]] = []

        # Session tallies
        self.rounds_won = 0
        self.rounds_lost = 0

        self.start_round()

    @property
    def remaining(self) -> int:
        return MAX_GUESS - self.guess_count

    def start_round(self) -> None:
        """Reset the counter and feedback, then draw a new secret (repeats allowed)."""
        self.guess_count = 0
        self.feedback = ()
        self.history = []
        self.secret = self.rng.choice(self.words)
        logger.debug("new round started; secret=%s", self.secret)

    def submit_guess(self, raw_input: str) -> GuessOutcome:
        """
        Process one line of player input.

        Trailing CR/LF is stripped first. The exit token and illegal words
        leave the round untouched; a legal guess always uses one attempt.
        """
        guess = raw_input.rstrip("\r\n") if isinstance(raw_input, str) else raw_input

        if guess == EXIT_TOKEN:
            return GuessOutcome("exit", guess, self.guess_count, self.remaining)

        if not is_legal(guess):
            return GuessOutcome("invalid", guess, self.guess_count, self.remaining)

        self.guess_count += 1
        self.feedback = score(guess, self.secret)
        self.history.append((guess, self.feedback))

        if guess == self.secret:
            outcome = GuessOutcome("won", guess, self.guess_count, self.remaining,
                                   secret=self.secret)
            self.rounds_won += 1
            logger.debug("round won in %d guess(es)", self.guess_count)
            self.start_round()
            return outcome

        if self.guess_count == MAX_GUESS:
            outcome = GuessOutcome("lost", guess, self.guess_count, self.remaining,
                                   feedback=self.feedback, secret=self.secret)
            self.rounds_lost += 1
            logger.debug("round lost; secret was %s", self.secret)
            self.start_round()
            return outcome

        return GuessOutcome("feedback", guess, self.guess_count, self.remaining,
                            feedback=self.feedback)
