from .validation import WORD_LENGTH, is_legal, has_correct_length, all_letters, no_duplicate_letters
from .scoring import score, format_feedback
from .constraints import filter_candidates
from .rounds import MAX_GUESS, EXIT_TOKEN, RoundEngine, GuessOutcome, EmptyWordListError

__all__ = [
    "WORD_LENGTH", "MAX_GUESS", "EXIT_TOKEN",
    "is_legal", "has_correct_length", "all_letters", "no_duplicate_letters",
    "score", "format_feedback", "filter_candidates",
    "RoundEngine", "GuessOutcome", "EmptyWordListError",
]
