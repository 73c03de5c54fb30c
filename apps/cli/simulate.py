# apps/cli/simulate.py
"""
Auto-play many rounds of Word Mastermind and record the results.

Writes to <outdir>/sim_<timestamp>.csv + sim_<timestamp>_manifest.json.
The simulated player guesses at random among words still consistent with
the feedback it has seen, so every round runs through the real engine.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from wordmastermind.datasets import DEFAULT_WORDLIST, load_wordlist, pretty_summary, validate_wordlist
from wordmastermind.engine import EmptyWordListError, RoundEngine
from wordmastermind.harness import simulate_rounds, write_csv, write_manifest
from wordmastermind.harness.io import git_commit_or_unknown, timestamp_id

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Word Mastermind — simulate rounds")
    ap.add_argument("--words", default=str(DEFAULT_WORDLIST), help="path to the word list")
    ap.add_argument("--rounds", type=int, default=100, help="number of rounds to play")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar",
                    help="show a progress bar on stderr")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="[%(levelname)s] %(message)s")

    if args.rounds <= 0:
        ap.error("--rounds must be positive")

    # 1) Report on the word list (counts, SHA, skipped lines), then load it
    try:
        rep = validate_wordlist(args.words)
        print(pretty_summary(rep))
        engine = RoundEngine(load_wordlist(args.words), seed=args.seed)
    except FileNotFoundError as e:
        raise SystemExit(f"Word list not found: {e}") from e
    except EmptyWordListError as e:
        raise SystemExit(f"Cannot start simulation: {e}") from e
    except OSError as e:
        raise SystemExit(f"Could not read word list {args.words}: {e}") from e

    progress = None
    if args.progress == "bar":
        progress = lambda it: tqdm(it, total=args.rounds, ncols=80, desc="Playing",
                                   unit="round", file=sys.stderr)

    # 2) Play; the player's RNG is offset so it never mirrors the secret draws
    results = simulate_rounds(engine, args.rounds, seed=args.seed + 1013904223,
                              progress=progress)

    # 3) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"sim_{run_id}.csv"
    manifest_path = outdir / f"sim_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_rounds": len(results),
        "rounds_won": engine.rounds_won,
        "rounds_lost": engine.rounds_lost,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Won {engine.rounds_won}/{len(results)} rounds")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
