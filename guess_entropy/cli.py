"""
cli.py

Command line driver for guess scoring and entropy ranking.

Modes:
(default): entropy of every word in the list, best TOP_GUESSES shown
-score GUESS ANSWER: score one guess against one answer; overrides the default

Optional:
-word-file PATH: newline-separated word list (default: bundled list).
-sort entropy|word: ordering of the printed table.
-workers N: worker processes for the entropy pass (default: 1).
-progress: show a progress bar over guesses.
-verbose: also show the Shannon entropy of each listed guess's feedback split.
"""

import argparse
import time

from .entropy import entropy, pattern_entropy, rank_entropies
from .patterns import feedback_row, preprocess_words
from .scoring import (
    check_word,
    checked_from_arrays,
    is_correct_guess,
    preprocess_answer,
    preprocess_guess,
)
from .words import DEFAULT_WORDS_PATH, dedupe_words, load_word_list, validate_words


TOP_GUESSES = 20


def timed(fn, *args, **kwargs):
    """Run FN and return (result, elapsed seconds)."""
    start_time = time.perf_counter()
    result = fn(*args, **kwargs)
    return result, time.perf_counter() - start_time


def _tiles(exact_arr, partial_arr):
    out = []
    for exact, partial in zip(exact_arr, partial_arr):
        if exact:
            out.append("G")
        elif partial:
            out.append("Y")
        else:
            out.append("-")
    return "".join(out)


def run_score(guess, answer):
    validate_words([guess, answer])

    exact_arr, partial_arr = check_word(preprocess_guess(guess), preprocess_answer(answer))
    checked = checked_from_arrays(guess, exact_arr, partial_arr)

    print(f"{guess} vs {answer}: {_tiles(exact_arr, partial_arr)}")
    print(f"fully correct: {checked.fully_correct}, partially correct: {checked.partially_correct}")
    if is_correct_guess(checked):
        print("Solved.")


def run_entropy(words, top, sort_by, workers, progress, verbose):
    unique = dedupe_words(words)
    dropped = len(words) - len(unique)
    if dropped:
        print(f"Dropped {dropped} duplicate word(s); first occurrence kept.")

    print(f"Computing entropies for {len(unique)} words...")
    entropies, elapsed = timed(entropy, unique, workers=workers, progress=progress)
    print(f"Done in {elapsed:.2f}s.")

    if not entropies:
        print("Word list is empty, nothing to rank.")
        return

    ranked = rank_entropies(entropies, by=sort_by)[:top]

    shannon = {}
    if verbose:
        tables = preprocess_words(unique)
        index = {w: i for i, w in enumerate(unique)}
        shannon = {
            g.word: pattern_entropy(feedback_row(tables, index[g.word])) for g in ranked
        }

    print(f"\nTop {len(ranked)} guesses (sorted by {sort_by}):")
    if verbose:
        print("Legend: word: log2(avg surviving fraction) | Shannon bits")
    else:
        print("Legend: word: log2(avg surviving fraction)")

    for g in ranked:
        if verbose:
            print(f"{g.word}: {g.entropy:.4f} | {shannon[g.word]:.4f} bits")
        else:
            print(f"{g.word}: {g.entropy:.4f}")


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Score Wordle guesses and rank a word list by expected narrowing."
    )
    parser.add_argument(
        "-word-file",
        type=str,
        default=str(DEFAULT_WORDS_PATH),
        help="Newline-separated word list (default: bundled list).",
    )
    parser.add_argument(
        "-score",
        nargs=2,
        metavar=("GUESS", "ANSWER"),
        help="Score one guess against one answer; overrides the entropy mode.",
    )
    parser.add_argument(
        "-top",
        type=_positive_int,
        default=TOP_GUESSES,
        help=f"Number of guesses to print (default: {TOP_GUESSES}).",
    )
    parser.add_argument(
        "-sort",
        choices=("entropy", "word"),
        default="entropy",
        help="Ordering of the printed table (default: entropy, best first).",
    )
    parser.add_argument(
        "-workers",
        type=_positive_int,
        default=1,
        help="Worker processes for the entropy pass (default: 1).",
    )
    parser.add_argument(
        "-progress",
        action="store_true",
        help="Show a progress bar over guesses.",
    )
    parser.add_argument(
        "-verbose",
        action="store_true",
        help="Also show the Shannon entropy of each listed guess.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.score is not None:
        guess, answer = (w.lower() for w in args.score)
        try:
            run_score(guess, answer)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
        return

    try:
        words = load_word_list(args.word_file)
    except OSError as exc:
        raise SystemExit(f"cannot read word list: {exc}") from exc

    try:
        run_entropy(words, args.top, args.sort, args.workers, args.progress, args.verbose)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
