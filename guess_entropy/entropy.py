"""
entropy.py

Computes the entropy value of every word in a list used as a guess.

For a guess g and each word a of the list taken as the true answer:

    consistent(g, a) = number of words giving the same feedback as a
    mass(g, a)       = consistent(g, a) / n

    entropy(g) = log2( sum_a mass(g, a) / n )

This is the log of the average surviving fraction of the list, not the
Shannon entropy of the feedback distribution (pattern_entropy gives that one
for comparison). Values are <= 0; lower means the guess narrows the list more.
"""

import multiprocessing as mp
from operator import itemgetter
from typing import NamedTuple

import numpy as np
from tqdm import tqdm

from .patterns import WordTables, consistent_counts, feedback_row, preprocess_words
from .words import dedupe_words, validate_words


_WORKER_STATE = {}


class GuessEntropy(NamedTuple):
    word: str
    entropy: float


def pattern_entropy(row):
    """Shannon entropy of one guess's feedback row, in bits."""
    buckets = np.bincount(row)
    probs = buckets[buckets > 0] / row.size
    return float(-np.sum(probs * np.log2(probs)))


def single_guess_entropy(tables: WordTables, guess_index: int) -> float:
    """Entropy value of a single guess against the whole list."""
    n = len(tables.words)
    masses = consistent_counts(feedback_row(tables, guess_index)) / n
    average_probability = masses.sum() / n
    return float(np.log2(average_probability))


def _init_worker(tables):
    _WORKER_STATE["tables"] = tables


def _worker_chunk(task):
    start, end = task
    tables = _WORKER_STATE["tables"]
    return [(i, single_guess_entropy(tables, i)) for i in range(start, end)]


def _entropy_parallel(tables, workers, chunk_size, progress):
    n = len(tables.words)
    values = [0.0] * n
    tasks = [(start, min(start + chunk_size, n)) for start in range(0, n, chunk_size)]

    start_methods = mp.get_all_start_methods()
    start_method = "fork" if "fork" in start_methods else "spawn"
    ctx = mp.get_context(start_method)

    with ctx.Pool(processes=workers, initializer=_init_worker, initargs=(tables,)) as pool:
        with tqdm(total=n, desc="Guesses", disable=not progress) as bar:
            for chunk in pool.imap_unordered(_worker_chunk, tasks, chunksize=1):
                for i, value in chunk:
                    values[i] = value
                bar.update(len(chunk))

    return values


def entropy(words, workers=1, progress=False, chunk_size=64):
    """
    Map every distinct word of WORDS to its entropy value as a guess.

    WORDS may be any iterable of strings, all WORD_LENGTH long (ValueError
    otherwise). Repeated words are collapsed to their first occurrence before
    anything is counted, so n is the number of distinct words. An empty input
    gives an empty dict.

    With workers > 1 the guesses are split into chunks of CHUNK_SIZE over a
    process pool; every guess is independent so the values do not change.
    """
    words = list(words)
    validate_words(words)
    unique = dedupe_words(words)
    if not unique:
        return {}

    tables = preprocess_words(unique)
    workers = max(1, int(workers))

    if workers == 1:
        values = [
            single_guess_entropy(tables, i)
            for i in tqdm(range(len(unique)), desc="Guesses", disable=not progress)
        ]
    else:
        values = _entropy_parallel(tables, workers, max(1, int(chunk_size)), progress)

    return dict(zip(unique, values))


def rank_entropies(entropies, by="entropy"):
    """
    Sort an entropy mapping for display.

    by="entropy": best guesses first (lowest value), ties broken by word.
    by="word":    alphabetical.
    """
    if by not in ("entropy", "word"):
        raise ValueError(f"unknown sort key: {by}")

    ranked = [GuessEntropy(word, value) for word, value in entropies.items()]
    if by == "entropy":
        ranked.sort(key=itemgetter(1, 0))
    else:
        ranked.sort(key=itemgetter(0))
    return ranked
