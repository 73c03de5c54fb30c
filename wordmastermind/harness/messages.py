"""
Player-facing text.

Every message the terminal game prints is produced here, so the engine and
the session loop stay free of wording. `render_outcome` turns one
GuessOutcome into the lines to show, in display order.
"""

from typing import List

from wordmastermind.engine import EXIT_TOKEN, MAX_GUESS, WORD_LENGTH, GuessOutcome, format_feedback

PROMPT = "Your Guess:"


def help_banner() -> str:
    return (
        "\t\t\t-- WORD MASTERMIND --\n"
        f"\n\tYou will be given a {WORD_LENGTH} letter word and you must guess what the word is."
        f"\n\n\tYou are allowed a maximum of {MAX_GUESS} guesses per round."
        f"\n\n\t\tEnter '{EXIT_TOKEN}' key to stop playing."
    )


def round_banner() -> str:
    return "\t\tNext Round!\n" + "?" * WORD_LENGTH


def feedback_line(outcome: GuessOutcome) -> str:
    return format_feedback(outcome.feedback)


def remaining_line(remaining: int) -> str:
    return f"You have {remaining} guesses remaining.\n" + "?" * WORD_LENGTH


def invalid_message() -> str:
    return (
        "That guess doesn't count! Your guess can only be "
        f"{WORD_LENGTH} characters in length, contain no duplicate letters "
        "and only contain letters."
    )


def win_message(guess_count: int) -> str:
    return f"Correct! You got the answer in {guess_count} guesses!"


def loss_message(secret: str) -> str:
    return f"\tYou lost! You've used up all your guesses! The word was '{secret}'."


def render_outcome(outcome: GuessOutcome) -> List[str]:
    """
    Lines to print for one outcome.

      invalid  -> warning
      feedback -> marks, remaining count
      won      -> win message, next-round banner
      lost     -> marks, remaining count, loss message, next-round banner
      exit     -> nothing (the session loop stops)
    """
    kind = outcome.kind
    if kind == "invalid":
        return [invalid_message()]
    if kind == "feedback":
        return [feedback_line(outcome), remaining_line(outcome.remaining)]
    if kind == "won":
        return [win_message(outcome.guess_count), round_banner()]
    if kind == "lost":
        return [
            feedback_line(outcome),
            remaining_line(outcome.remaining),
            loss_message(outcome.secret or ""),
            round_banner(),
        ]
    return []
