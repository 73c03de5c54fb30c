"""
Word list validator.

What this module does:
- Inspect a word list file against the game's legality rules
  (exact length, lowercase a–z only, no repeated letter, one per line).
- Count legal, unique and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a one-line summary.

Typical use:
    from wordmastermind.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordmastermind/datasets/data/word-list.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from wordmastermind.engine import WORD_LENGTH
from .io import read_lines
from .wordlist import load_legal_words


@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    word_length: int     # required word length
    total_lines: int     # lines read
    count: int           # legal words (duplicates included)
    unique_count: int    # distinct legal words
    invalid_lines: int   # lines rejected by the validator
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_wordlist(path: Path | str) -> Dict:
    """
    Validate a word list file.

    Returns a JSON-serializable dict (see WordListReport). `passed` is True
    when the file exists and holds at least one legal word; invalid and
    duplicate lines are reported as issues but do not fail the check, since
    the game skips them on load.
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(str(path), False, WORD_LENGTH, 0, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    lines = read_lines(p)
    words = load_legal_words(lines)

    issues: List[str] = []
    invalid = len(lines) - len(words)
    unique = len(set(words))

    if not words:
        issues.append("word list contains 0 legal words")
    if invalid:
        issues.append(f"{invalid} invalid line(s) will be skipped")
    if unique != len(words):
        issues.append("word list contains duplicate words")

    rep = WordListReport(
        path=str(p),
        exists=True,
        word_length=WORD_LENGTH,
        total_lines=len(lines),
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        word-list.txt | N=5 | legal=412 (uniq=412, invalid=3, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{Path(report['path']).name} | N={report['word_length']} "
        f"| legal={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
