"""
Session harness primitives.

- play_session:    drive a RoundEngine from an input console until '/'.
- play_round:      auto-play one round with a consistent-random player.
- simulate_rounds: auto-play many rounds in sequence.

These functions are UI-agnostic: consoles are plain callables, so the
same loop serves the terminal CLI, the simulator and the tests.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Dict, Iterable, List, Tuple

from wordmastermind.engine import MAX_GUESS, GuessOutcome, RoundEngine, filter_candidates
from . import messages

logger = logging.getLogger(__name__)

InputConsole = Callable[[], str]
OutputConsole = Callable[[str], None]


def play_session(engine: RoundEngine, read_line: InputConsole,
                 write: OutputConsole) -> List[GuessOutcome]:
    """
    Run the interactive loop until the exit token (or end of input).

    Prints the help banner and the first round banner, then for every line
    read: submit it, render the outcome. Returns all outcomes, the final
    'exit' one included when the player typed it.
    """
    write(messages.help_banner())
    write(messages.round_banner())

    outcomes: List[GuessOutcome] = []
    while True:
        write(messages.PROMPT)
        try:
            line = read_line()
        except EOFError:
            logger.debug("input closed; ending session")
            break

        outcome = engine.submit_guess(line)
        outcomes.append(outcome)
        if outcome.kind == "exit":
            break
        for text in messages.render_outcome(outcome):
            write(text)

    logger.debug("session over: %d won, %d lost", engine.rounds_won, engine.rounds_lost)
    return outcomes


def play_round(engine: RoundEngine, rng: random.Random) -> Dict:
    """
    Play the engine's current round to completion.

    The player guesses uniformly at random among words still consistent
    with the round's feedback. Returns a result dict:
        round (filled by caller), secret, success, guesses, history, time_ms
    """
    history: List[Tuple[str, Tuple[str, ...]]] = []
    candidates = list(engine.words)

    t0 = time.time()
    for _ in range(MAX_GUESS):
        pool = candidates if candidates else list(engine.words)
        guess = pool[rng.randrange(len(pool))]

        outcome = engine.submit_guess(guess)
        history.append((guess, outcome.feedback))

        if outcome.round_over:
            dt = (time.time() - t0) * 1000.0
            return {
                "secret": outcome.secret,
                "success": outcome.kind == "won",
                "guesses": outcome.guess_count,
                "time_ms": dt,
                "history": history,
            }

        candidates = filter_candidates(candidates, [(guess, outcome.feedback)])

    # Unreachable: the engine ends every round by the MAX_GUESS-th legal guess
    raise RuntimeError("round did not finish within the guess budget")


def simulate_rounds(engine: RoundEngine, rounds: int, *, seed: int | None = None,
                    progress: Callable[[Iterable[int]], Iterable[int]] | None = None) -> List[Dict]:
    """
    Auto-play `rounds` rounds back-to-back on one engine.

    `progress` optionally wraps the round iterator (e.g. a tqdm bar).
    """
    if rounds <= 0:
        raise ValueError(f"rounds must be positive; got {rounds}")

    rng = random.Random(seed)
    iterator: Iterable[int] = range(1, rounds + 1)
    if progress is not None:
        iterator = progress(iterator)

    out: List[Dict] = []
    for idx in iterator:
        r = play_round(engine, rng)
        r["round"] = idx
        out.append(r)
    return out
