"""
patterns.py

Precomputed per-word tables and feedback rows.

A feedback pattern is the (fully_correct, partially_correct) pair produced by
the scorer. It is packed into one small integer:

    code = fully_correct * (WORD_LENGTH + 1) + partially_correct

so code 0 (NO_INFO) is the "nothing matched" pattern and every code fits in a
uint8. A feedback row holds the code of one guess against every word in the
list, which is all the entropy engine needs for that guess.
"""

from typing import NamedTuple

import numpy as np

from .scoring import (
    WORD_LENGTH,
    PreprocessedAnswer,
    PreprocessedGuess,
    preprocess_answer,
    preprocess_guess,
    score,
)


NO_INFO = 0
CODE_SPACE = WORD_LENGTH * (WORD_LENGTH + 1) + 1


class WordTables(NamedTuple):
    words: list[str]
    guesses: list[PreprocessedGuess]
    answers: list[PreprocessedAnswer]
    masks: list[int]


def encode_feedback(fully_correct: int, partially_correct: int) -> int:
    return fully_correct * (WORD_LENGTH + 1) + partially_correct


def letter_mask(word: str, alphabet: dict[str, int]) -> int:
    mask = 0
    for c in word:
        mask |= 1 << alphabet[c]
    return mask


def preprocess_words(words: list[str]) -> WordTables:
    """
    Build guess/answer tables and letter bitmasks once for the whole list.

    The bitmask has one bit per distinct letter seen in the list, so two words
    share no letter exactly when their masks do not intersect.
    """
    alphabet = {}
    for word in words:
        for c in word:
            alphabet.setdefault(c, len(alphabet))

    return WordTables(
        words=list(words),
        guesses=[preprocess_guess(w) for w in words],
        answers=[preprocess_answer(w) for w in words],
        masks=[letter_mask(w, alphabet) for w in words],
    )


def feedback_row(tables: WordTables, guess_index: int) -> np.ndarray:
    """
    Feedback codes of one guess against every word in the list.

    Words with no letter in common with the guess are set to NO_INFO straight
    from the bitmasks; only the rest go through the scorer.
    """
    guess = tables.guesses[guess_index]
    guess_mask = tables.masks[guess_index]
    row = np.zeros(len(tables.words), dtype=np.uint8)

    for j, (answer, mask) in enumerate(zip(tables.answers, tables.masks)):
        if mask & guess_mask == 0:
            continue
        checked = score(guess, answer)
        row[j] = encode_feedback(checked.fully_correct, checked.partially_correct)

    return row


def consistent_counts(row: np.ndarray) -> np.ndarray:
    """
    For each answer position, how many words give the same feedback code.

    Entry j is the number of candidates that stay indistinguishable from
    words[j] after this guess.
    """
    counts = np.bincount(row, minlength=CODE_SPACE)
    return counts[row]
