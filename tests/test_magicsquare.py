import random

import pytest

from tinkerkit.magicsquare import (
    alternator,
    alternator_grid,
    doubly_even,
    format_square,
    generate,
    is_magic,
    main,
    random_grid,
    search_random_magic,
    siamese,
    strachey,
    write_csv,
)


def _is_permutation_of_range(square):
    n = len(square)
    values = sorted(value for row in square for value in row)
    return values == list(range(1, n * n + 1))


def test_siamese_three_is_classic_square():
    assert siamese(1, 3, 1) == [[8, 1, 6], [3, 5, 7], [4, 9, 2]]


def test_alternator_first_row_pattern():
    assert alternator_grid(4)[0] == [1, 0, 0, 1]


def test_alternator_grid_matches_function():
    grid = alternator_grid(6)
    assert all(grid[i][j] == alternator(i, j) for i in range(6) for j in range(6))


@pytest.mark.parametrize("size", [1, 3, 4, 5, 6, 7, 8, 10, 12, 14, 16])
def test_generate_builds_magic_squares(size):
    square = generate(size)
    assert len(square) == size
    assert is_magic(square)
    assert _is_permutation_of_range(square)


@pytest.mark.parametrize("size", [6, 10, 18])
def test_strachey_is_magic(size):
    square = strachey(size, 1)
    assert is_magic(square)
    assert _is_permutation_of_range(square)


@pytest.mark.parametrize("size", [5, 8, 4])
def test_strachey_rejects_other_sizes(size):
    with pytest.raises(ValueError):
        strachey(size, 1)


def test_siamese_rejects_even_size():
    with pytest.raises(ValueError):
        siamese(1, 4, 1)


def test_siamese_with_offset_start_is_still_magic():
    square = siamese(5, 5, 2)
    assert is_magic(square)
    assert min(value for row in square for value in row) == 5


def test_doubly_even_is_magic():
    assert is_magic(doubly_even(8))


def test_generate_size_two_uses_doubly_even():
    assert generate(2) == doubly_even(2)


def test_generate_rejects_negative():
    with pytest.raises(ValueError):
        generate(-3)


def test_is_magic_false_and_non_square():
    assert not is_magic([[1, 2], [3, 4]])
    with pytest.raises(ValueError):
        is_magic([[1, 2], [3]])


def test_random_grid_bounds():
    grid = random_grid(5, 3, 7, random.Random(1))
    assert len(grid) == 5
    assert all(3 <= value <= 7 for row in grid for value in row)


def test_search_random_magic_constant_range():
    grid, attempts = search_random_magic(4, random.Random(2), 9, 9)
    assert attempts == 1
    assert grid == [[9] * 4 for _ in range(4)]


def test_format_square_contains_sums():
    square = generate(3)
    text = format_square(square).splitlines()
    assert text[0] == "Magic Square:"
    assert text[1].endswith(f"| {sum(square[0])}")
    assert text[-1].endswith(f"\\{sum(square[i][i] for i in range(3))} /{sum(square[i][2 - i] for i in range(3))}")


def test_write_csv_round_trip(tmp_path):
    square = generate(4)
    path = tmp_path / "square.csv"
    magic = write_csv(square, path)
    lines = path.read_text().splitlines()
    assert magic == sum(square[i][i] for i in range(4))
    parsed = [[int(cell) for cell in line.split(",")[:4]] for line in lines[:4]]
    assert parsed == square
    assert all(int(line.split(",")[-1]) == magic for line in lines[:4])
    assert lines[4] == ",,,,,"


def test_main_writes_csv(tmp_path, capsys):
    path = tmp_path / "out.csv"
    assert main(["5", "--csv", str(path)]) == 0
    output = capsys.readouterr().out
    assert "Magic Square:" in output
    first = [int(cell) for cell in path.read_text().splitlines()[0].split(",")[:5]]
    assert first == generate(5)[0]