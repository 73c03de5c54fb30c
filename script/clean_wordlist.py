"""
Reduce a word list file to unique legal words.

Features:
- Keeps only lines that pass the game's legality check
  (5 lowercase letters a–z, no repeated letter).
- Optional lowercasing/stripping before the check (--normalize).
- Preserves original order by default (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical).
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.clean_wordlist --in wordmastermind/datasets/data/word-list.txt --normalize
"""

import argparse
from pathlib import Path

from wordmastermind.datasets import load_legal_words, pretty_summary, read_lines, validate_wordlist, write_lines


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def main():
    ap = argparse.ArgumentParser(description="Keep only unique legal words in a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--normalize", action="store_true", help="strip whitespace and lowercase before checking")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    print(f"Before: {pretty_summary(validate_wordlist(inp))}")

    if args.normalize:
        lines = [s.strip().lower() for s in lines]

    out = unique_preserve_order(list(load_legal_words(lines)))
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"After:  {pretty_summary(validate_wordlist(outp))}")


if __name__ == "__main__":
    main()
