import pytest

from guess_entropy.words import DEFAULT_WORDS_PATH, load_word_list


@pytest.fixture(scope="session")
def bundled_words():
    return load_word_list(DEFAULT_WORDS_PATH)
