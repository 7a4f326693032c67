"""
words.py

Handles loading and checking word lists.
No numpy here, just clean text handling.
"""

from pathlib import Path

from .scoring import WORD_LENGTH


DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_WORDS_PATH = DATA_DIR / "words.txt"


def load_word_list(path):
    """Load a newline-separated word list into a lower-cased Python list."""
    with open(path, "r") as f:
        return [line.strip().lower() for line in f if line.strip()]


def validate_words(words, length=WORD_LENGTH):
    """Raise ValueError if any word is not exactly LENGTH characters long."""
    bad = [w for w in words if len(w) != length]
    if bad:
        shown = ", ".join(repr(w) for w in bad[:5])
        more = f" (and {len(bad) - 5} more)" if len(bad) > 5 else ""
        raise ValueError(f"expected {length}-letter words, got {shown}{more}")


def dedupe_words(words):
    """Drop repeated words, keeping the first occurrence and the list order."""
    return list(dict.fromkeys(words))
