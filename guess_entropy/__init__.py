"""Wordle guess scoring and entropy ranking."""

from .entropy import GuessEntropy, entropy, rank_entropies
from .scoring import CheckedGuess, WORD_LENGTH, score, score_guess
