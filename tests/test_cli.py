import pytest

from guess_entropy.cli import main, timed


def test_score_mode(capsys):
    main(["-score", "CREST", "trees"])
    out = capsys.readouterr().out
    assert "crest vs trees: -GGYY" in out
    assert "fully correct: 2, partially correct: 2" in out
    assert "Solved." not in out


def test_score_mode_solved(capsys):
    main(["-score", "guess", "guess"])
    out = capsys.readouterr().out
    assert "GGGGG" in out
    assert "Solved." in out


def test_score_mode_rejects_bad_length():
    with pytest.raises(SystemExit, match="5-letter"):
        main(["-score", "cat", "trees"])


def test_entropy_mode(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("abcde\nfghij\nklmno\nabcde\n")
    main(["-word-file", str(path), "-top", "2", "-sort", "word", "-verbose"])
    out = capsys.readouterr().out
    assert "Dropped 1 duplicate word(s)" in out
    assert "Computing entropies for 3 words" in out
    assert "Top 2 guesses (sorted by word)" in out
    assert "abcde: -0.8480 | 0.9183 bits" in out
    assert "klmno" not in out.split("Top 2")[1]


def test_entropy_mode_empty_list(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("\n")
    main(["-word-file", str(path)])
    assert "Word list is empty" in capsys.readouterr().out


def test_entropy_mode_bad_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("crane\nslates\n")
    with pytest.raises(SystemExit, match="slates"):
        main(["-word-file", str(path)])


def test_missing_word_file(tmp_path):
    with pytest.raises(SystemExit, match="cannot read word list"):
        main(["-word-file", str(tmp_path / "nope.txt")])


def test_timed():
    result, elapsed = timed(sum, [1, 2, 3])
    assert result == 6
    assert elapsed >= 0.0


@pytest.mark.parametrize("flag, value", [("-top", "-1"), ("-top", "0"), ("-workers", "0")])
def test_rejects_non_positive_counts(tmp_path, capsys, flag, value):
    path = tmp_path / "words.txt"
    path.write_text("crane\nslate\nirate\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["-word-file", str(path), flag, value])
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert "must be at least 1" in captured.err
    assert "Top" not in captured.out


def test_entropy_mode_prints_every_word_when_top_exceeds_list(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("crane\nslate\nirate\n")
    main(["-word-file", str(path), "-top", "10"])
    out = capsys.readouterr().out
    assert "Top 3 guesses (sorted by entropy)" in out
