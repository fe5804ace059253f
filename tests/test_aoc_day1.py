import pytest

from tinkerkit.aoc_day1 import main, parse_pairs, similarity_score, total_distance

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_parse_pairs():
    left, right = parse_pairs(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_parse_pairs_skips_blank_lines():
    assert parse_pairs("1 2\n\n3 4\n") == ([1, 3], [2, 4])


def test_parse_pairs_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_pairs("1 2\n3\n")
    with pytest.raises(ValueError):
        parse_pairs("1 x\n")


def test_example_values():
    left, right = parse_pairs(EXAMPLE)
    assert total_distance(left, right) == 11
    assert similarity_score(left, right) == 31


def test_distance_of_identical_lists_is_zero():
    assert total_distance([5, 1, 9], [9, 5, 1]) == 0


def test_distance_is_symmetric():
    left, right = parse_pairs(EXAMPLE)
    assert total_distance(left, right) == total_distance(right, left)


def test_distance_needs_equal_lengths():
    with pytest.raises(ValueError):
        total_distance([1, 2], [1])


def test_similarity_without_common_values_is_zero():
    assert similarity_score([1, 2, 3], [4, 5, 6]) == 0


def test_main_prints_both_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == ["11", "31"]


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1