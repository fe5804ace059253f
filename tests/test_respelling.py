import random

import pytest

from tinkerkit.respelling import find_alternative_spelling, main

ALT = {
    "F": ["=", "f", "ph", "gh"],
    "IH": ["=", "i", "o"],
    "SH": ["=", "sh", "ti"],
    "H": ["=", "h"],
}


def _words(**extra):
    words = {
        "fish": ["F", "IH", "SH"],
        "phi": ["F", "IH"],
        "ho": ["H", "IH"],
        "ti": ["SH"],
    }
    words.update(extra)
    return words


@pytest.mark.parametrize("seed", [0, 1, 2, 7, 42])
def test_unique_sources_give_fixed_result(seed):
    result = find_alternative_spelling("fish", _words(), ALT, random.Random(seed))
    assert result == ["ph", "o", "ti"]


@pytest.mark.parametrize("seed", range(10))
def test_several_sources_stay_within_other_spellings(seed):
    words = _words(gho=["F", "IH"])
    result = find_alternative_spelling("fish", words, ALT, random.Random(seed))
    assert set(result) <= {"ph", "gh", "o", "ti"}
    assert "ti" in result
    assert 2 <= len(result) <= 3
    assert "f" not in result and "i" not in result and "sh" not in result


def test_unknown_word_raises_key_error():
    with pytest.raises(KeyError):
        find_alternative_spelling("cat", _words(), ALT, random.Random(0))


def test_sound_without_other_spelling_raises():
    with pytest.raises(LookupError):
        find_alternative_spelling("ho", _words(), ALT, random.Random(0))


def test_incomplete_splits_are_not_used():
    words = {
        "fish": ["F", "IH", "SH"],
        "ph": ["F", "IH"],
        "ho": ["H", "IH"],
        "ti": ["SH"],
    }
    with pytest.raises(LookupError):
        find_alternative_spelling("fish", words, ALT, random.Random(0))


def test_main_prints_new_spellings(tmp_path, capsys):
    words_file = tmp_path / "words.txt"
    words_file.write_text(
        "fish F IH SH\nphi F IH\nho H IH1 # note\nti SH\n", encoding="utf-8"
    )
    alt_file = tmp_path / "alt.txt"
    alt_file.write_text(
        "F = f ph gh\nIH = i o\nIH1 @ IH\nSH = sh ti\nH = h\n", encoding="utf-8"
    )
    code = main(
        ["FISH", "--words", str(words_file), "--spellings", str(alt_file), "--seed", "3"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "Disassembled Word: f i sh" in out
    assert "New Spellings: ph o ti" in out


def test_main_reports_unknown_word(tmp_path, capsys):
    words_file = tmp_path / "words.txt"
    words_file.write_text("fish F IH SH\n", encoding="utf-8")
    alt_file = tmp_path / "alt.txt"
    alt_file.write_text("F = f\nIH = i\nSH = sh\n", encoding="utf-8")
    code = main(["dog", "--words", str(words_file), "--spellings", str(alt_file)])
    assert code == 1
    assert "Word not found in dictionary" in capsys.readouterr().out