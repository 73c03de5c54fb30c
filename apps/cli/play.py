# apps/cli/play.py
"""
CLI entry point for playing Word Mastermind in the terminal.

This script:
  1) Loads the word list, keeping only legal words.
  2) Starts the round engine (first secret is drawn immediately).
  3) Prints the rules and reads guesses until '/' is entered.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from wordmastermind.datasets import DEFAULT_WORDLIST, load_wordlist
from wordmastermind.engine import EmptyWordListError, RoundEngine
from wordmastermind.harness import play_session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Word Mastermind — guess the 5-letter word")
    ap.add_argument("--words", default=str(DEFAULT_WORDLIST),
                    help="path to the word list (one word per line)")
    ap.add_argument("--seed", type=int, help="RNG seed for secret selection (reproducible rounds)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="diagnostic log level (stderr)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, load the word list and run the session.
    Fatal startup problems exit with a message instead of a traceback.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="[%(levelname)s] %(message)s")

    try:
        words = load_wordlist(args.words)
        engine = RoundEngine(words, seed=args.seed)
    except FileNotFoundError as e:
        raise SystemExit(f"Word list not found: {e}") from e
    except EmptyWordListError as e:
        raise SystemExit(f"Cannot start game: {e}") from e
    except OSError as e:
        raise SystemExit(f"Could not read word list {args.words}: {e}") from e

    logger.info("loaded %d legal words from %s", len(engine.words), args.words)
    play_session(engine, read_line=input, write=print)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
