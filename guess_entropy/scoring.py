"""
scoring.py

Scores a guess against an answer with Wordle-style feedback.

Each position of the guess is classified as:

    exact   = same letter in the same position
    partial = letter present elsewhere in the answer
    none    = letter absent (or all copies already used up)

Only the two summary counts are kept: fully_correct and partially_correct.

Duplicate letters in the guess are rationed against the answer's supply:

1. Every exact match consumes one copy of its letter from the answer.

2. Remaining copies are handed out left to right, so when a guess repeats a
   letter more often than the answer still has it, only the leading
   occurrences count as partial matches.

Words are assumed to be WORD_LENGTH long; callers validate that.
"""

from collections import Counter
from typing import NamedTuple


WORD_LENGTH = 5


class PreprocessedGuess(NamedTuple):
    text: str
    has_dups: bool


class PreprocessedAnswer(NamedTuple):
    text: str
    char_counts: Counter


class CheckedGuess(NamedTuple):
    guess: str
    fully_correct: int
    partially_correct: int

    @property
    def feedback(self) -> tuple[int, int]:
        return self.fully_correct, self.partially_correct


def has_duplicate_letters(word: str) -> bool:
    return len(set(word)) != len(word)


def preprocess_guess(word: str) -> PreprocessedGuess:
    return PreprocessedGuess(word, has_duplicate_letters(word))


def preprocess_answer(word: str) -> PreprocessedAnswer:
    return PreprocessedAnswer(word, Counter(word))


def is_correct_guess(checked: CheckedGuess) -> bool:
    return checked.fully_correct == WORD_LENGTH


def check_word_exact(guess: PreprocessedGuess, answer: PreprocessedAnswer) -> tuple[bool, ...]:
    """Per-position exact matches."""
    return tuple(g == a for g, a in zip(guess.text, answer.text))


def check_word_partial_no_dups(guess, answer, exact_arr):
    # No letter repeats in the guess, so plain containment cannot overcount.
    return tuple(
        not exact and c in answer.char_counts
        for c, exact in zip(guess.text, exact_arr)
    )


def check_word_partial_dups(guess, answer, exact_arr):
    """
    Partial matches for a guess containing repeated letters.

    The answer's letter counts are reduced by the exact matches first, then
    the guess is scanned left to right. The k-th non-exact occurrence of a
    letter is partial only if at least k copies are still available.
    """
    available = answer.char_counts.copy()
    for c, exact in zip(guess.text, exact_arr):
        if exact:
            available[c] -= 1

    seen = Counter()
    result = []
    for c, exact in zip(guess.text, exact_arr):
        if exact:
            result.append(False)
            continue
        seen[c] += 1
        result.append(seen[c] <= available[c])

    return tuple(result)


def check_word_partial(guess: PreprocessedGuess, answer: PreprocessedAnswer, exact_arr) -> tuple[bool, ...]:
    if guess.has_dups:
        return check_word_partial_dups(guess, answer, exact_arr)
    return check_word_partial_no_dups(guess, answer, exact_arr)


def check_word(guess: PreprocessedGuess, answer: PreprocessedAnswer):
    """Per-position (exact, partial) arrays; no partial pass once all are exact."""
    exact_arr = check_word_exact(guess, answer)
    if all(exact_arr):
        return exact_arr, (False,) * len(exact_arr)
    return exact_arr, check_word_partial(guess, answer, exact_arr)


def checked_from_arrays(guess: str, exact_arr, partial_arr) -> CheckedGuess:
    return CheckedGuess(guess, sum(exact_arr), sum(partial_arr))


def score(guess: PreprocessedGuess, answer: PreprocessedAnswer) -> CheckedGuess:
    """
    Score a preprocessed guess against a preprocessed answer.

    Both sides are expected to come from preprocess_guess / preprocess_answer
    so letter tables are built once per word, not once per pair.
    """
    exact_arr, partial_arr = check_word(guess, answer)
    return checked_from_arrays(guess.text, exact_arr, partial_arr)


def score_guess(guess: str, answer: str) -> CheckedGuess:
    """Score two raw words."""
    return score(preprocess_guess(guess), preprocess_answer(answer))
