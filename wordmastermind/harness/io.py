"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      flatten per-round results into a tidy CSV (one row per round).
- write_manifest: dump a JSON manifest with config, word list report and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from wordmastermind.engine import MAX_GUESS, format_feedback


def write_csv(results: List[Dict], path: str, max_guess: int = MAX_GUESS) -> str:
    """
    Serialize simulated rounds to CSV.

    Schema (columns):
      round, secret, success, guesses, time_ms,
      guess_1, feedback_1, ..., guess_<max_guess>, feedback_<max_guess>

    Feedback cells hold the space-separated marks; a winning guess has an
    empty feedback cell.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["round", "secret", "success", "guesses", "time_ms"]
    for i in range(1, max_guess + 1):
        fields += [f"guess_{i}", f"feedback_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "round": r.get("round", ""),
                "secret": r["secret"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r.get("time_ms", 0.0)), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_guess + 1):
                if i <= len(hist):
                    g, fb = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"feedback_{i}"] = format_feedback(fb)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"feedback_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest describing a simulation run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words, rounds, seed, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - rounds_won, rounds_lost
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
