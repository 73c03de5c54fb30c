from .io import iter_lines, read_lines, write_lines
from .wordlist import DEFAULT_WORDLIST, load_legal_words, load_wordlist
from .validator import validate_wordlist, pretty_summary

__all__ = [
    "DEFAULT_WORDLIST", "iter_lines", "read_lines", "write_lines",
    "load_legal_words", "load_wordlist", "validate_wordlist", "pretty_summary",
]
