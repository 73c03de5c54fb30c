"""Line provider for word list files."""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, List


def iter_lines(p: Path | str) -> Iterator[str]:
    """
    Yield the lines of a UTF-8 text file one at a time, without CR/LF.
    Undecodable bytes become U+FFFD, so such lines fail the word check.
    Raises FileNotFoundError (on first iteration) if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8", errors="replace", newline="") as f:
        for ln in f:
            yield ln.rstrip("\r\n")


def read_lines(p: Path | str) -> List[str]:
    """Read a whole word list file; see iter_lines."""
    return list(iter_lines(p))


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
