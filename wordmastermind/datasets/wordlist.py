"""
Legal word list loading.

Raw lines come from a line provider (normally `iter_lines` on a text file);
only lines that pass the word validator are kept, in file order. Lines that
fail are dropped without telling the player.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Tuple

from wordmastermind.engine import EmptyWordListError, is_legal
from .io import iter_lines

logger = logging.getLogger(__name__)

# Word list shipped with the package (one word per line).
DEFAULT_WORDLIST = Path(__file__).parent / "data" / "word-list.txt"


def load_legal_words(lines: Iterable[str]) -> Tuple[str, ...]:
    """
    Filter raw lines down to legal words.

    Only a trailing newline is removed; any other whitespace makes the line
    illegal. Duplicated lines are kept, so a word listed twice is twice as
    likely to be drawn.
    """
    kept = []
    skipped = 0
    for raw in lines:
        w = raw.rstrip("\r\n")
        if is_legal(w):
            kept.append(w)
        else:
            skipped += 1
    logger.debug("loaded %d legal word(s), skipped %d line(s)", len(kept), skipped)
    return tuple(kept)


def load_wordlist(path: Path | str = DEFAULT_WORDLIST) -> Tuple[str, ...]:
    """
    Read and filter a word list file.

    Raises:
      FileNotFoundError  : the file does not exist
      EmptyWordListError : the file holds no legal word
    """
    words = load_legal_words(iter_lines(path))
    if not words:
        raise EmptyWordListError(f"no legal words in word list: {path}")
    return words
