"""Magic square construction, checking and export."""

from __future__ import annotations

import argparse
import random
import time
from pathlib import Path
from typing import Optional, Sequence

Square = list[list[int]]

GREEN = "\033[0;102m"
RED = "\033[0;101m"
RESET = "\033[0m"

ODD_START = 1
ODD_STEP = 1
STRACHEY_STEP = 1


def alternator(i: int, j: int) -> int:
    """Return 1 where a doubly even square keeps the running number, else 0."""
    return ((i + 1) // 2 + (j + 1) // 2 + 1) % 2


def alternator_grid(size: int) -> Square:
    """Return the alternation pattern for a square of the given size."""
    return [[alternator(i, j) for j in range(size)] for i in range(size)]


def _line_sums(grid: Sequence[Sequence[int]]) -> tuple[list[int], list[int], int, int]:
    n = len(grid)
    rows = [sum(row) for row in grid]
    cols = [sum(col) for col in zip(*grid)] if n else []
    main_diag = sum(grid[i][i] for i in range(n))
    anti_diag = sum(grid[i][n - 1 - i] for i in range(n))
    return rows, cols, main_diag, anti_diag


def is_magic(grid: Sequence[Sequence[int]]) -> bool:
    """Tell whether every row, column and both diagonals share one sum."""
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")
    if n == 0:
        return True
    rows, cols, main_diag, anti_diag = _line_sums(grid)
    target = rows[0]
    return all(total == target for total in (*rows, *cols, main_diag, anti_diag))


def random_grid(
    size: int, low: int = 1, high: int = 99, rng: Optional[random.Random] = None
) -> Square:
    """Fill a square grid with random integers in [low, high]."""
    rng = rng or random.Random()
    return [[rng.randint(low, high) for _ in range(size)] for _ in range(size)]


def search_random_magic(
    size: int = 4,
    rng: Optional[random.Random] = None,
    low: int = 1,
    high: int = 99,
) -> tuple[Square, int]:
    """Fill grids at random until one is magic; return it and the attempt count."""
    rng = rng or random.Random()
    attempts = 0
    while True:
        attempts += 1
        grid = random_grid(size, low, high, rng)
        if is_magic(grid):
            return grid, attempts


def siamese(start: int, size: int, step: int = 1) -> Square:
    """Build an odd-order magic square with the Siamese method."""
    if size < 1 or size % 2 == 0:
        raise ValueError("the Siamese method needs a positive odd size")
    cells: list[list[Optional[int]]] = [[None] * size for _ in range(size)]
    row, col = 0, size // 2
    number = start
    for _ in range(size * size):
        cells[row][col] = number
        next_row, next_col = (row - 1) % size, (col + 1) % size
        if cells[next_row][next_col] is not None:
            row = (row + 1) % size
        else:
            row, col = next_row, next_col
        number += step
    return [[int(value) for value in row_values] for row_values in cells]  # type: ignore[arg-type]


def strachey(size: int, step: int = 1) -> Square:
    """Build a singly even magic square with Strachey's method."""
    if size % 4 != 2 or size < 6:
        raise ValueError("Strachey's method needs a size of the form 4k + 2, at least 6")
    half = size // 2
    k = (size - 2) // 4
    a = siamese(1, half, step)
    b = siamese(size * size // 4 + 1, half, step)
    c = siamese(size * size // 2 + 1, half, step)
    d = siamese(3 * size * size // 4 + 1, half, step)

    for i in range(half):
        for j in range(k):
            a[i][j], d[i][j] = d[i][j], a[i][j]
        for j in range(half - k + 1, half):
            b[i][j], c[i][j] = c[i][j], b[i][j]

    middle = size // 4
    a[middle][0], d[middle][0] = d[middle][0], a[middle][0]
    a[middle][middle], d[middle][middle] = d[middle][middle], a[middle][middle]

    top = [a_row + c_row for a_row, c_row in zip(a, c)]
    bottom = [d_row + b_row for d_row, b_row in zip(d, b)]
    return top + bottom


def doubly_even(size: int) -> Square:
    """Build a magic square for a size that is a multiple of four."""
    total = size * size
    return [
        [
            (i * size + j + 1) if alternator(i, j) == 1 else total + 1 - (i * size + j + 1)
            for j in range(size)
        ]
        for i in range(size)
    ]


def generate(size: int) -> Square:
    """Pick the construction that suits the size and build the square."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size % 2 == 1:
        return siamese(ODD_START, size, ODD_STEP)
    if size % 4 == 2 and size >= 6:
        return strachey(size, STRACHEY_STEP)
    return doubly_even(size)


def format_square(square: Sequence[Sequence[int]]) -> str:
    """Render the square with its row, column and diagonal sums."""
    n = len(square)
    rows, cols, main_diag, anti_diag = _line_sums(square)
    lines = ["Magic Square:"]
    for row, row_sum in zip(square, rows):
        lines.append("".join(f"{value}\t" for value in row) + f"| {row_sum}")
    lines.append("--------" * n)
    lines.append("".join(f"{col}\t" for col in cols) + f"\\{main_diag} /{anti_diag}")
    return "\n".join(lines)


def write_csv(square: Sequence[Sequence[int]], path: str | Path) -> int:
    """Write the square and its sums as CSV; return the main diagonal sum."""
    n = len(square)
    rows, cols, main_diag, anti_diag = _line_sums(square)
    lines = [
        "".join(f"{value}," for value in row) + f",{row_sum}"
        for row, row_sum in zip(square, rows)
    ]
    lines.append("," * (n + 1))
    lines.append("".join(f"{col}," for col in cols) + f",\\{main_diag} /{anti_diag}")
    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")
    return main_diag


def _format_pattern(size: int) -> str:
    lines = []
    for row in alternator_grid(size):
        lines.append(
            "".join(f"{GREEN if bit == 1 else RED}{bit} {RESET}" for bit in row)
        )
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="magicsquare", description="Build magic squares.")
    parser.add_argument("size", type=int, nargs="?", help="order of the square")
    parser.add_argument("--csv", default="test.csv", help="CSV file to write")
    parser.add_argument(
        "--pattern", action="store_true", help="show the doubly even alternation pattern"
    )
    parser.add_argument(
        "--search", action="store_true", help="fill grids at random until one is magic"
    )
    args = parser.parse_args(argv)

    size = args.size
    if size is None:
        size = int(input("What size magic square would you like? (Clock starts after input)\n"))

    if args.pattern:
        print(_format_pattern(size))
        return 0

    if args.search:
        grid, attempts = search_random_magic(size)
        print(f"Magic Square Found after {attempts} attempts!")
        print("The Magic Square:")
        for row in grid:
            print("".join(f"{value}\t" for value in row))
        return 0

    started = time.perf_counter()
    square = generate(size)
    generated = time.perf_counter()
    gen_seconds = generated - started
    print(f"Time to generate: {gen_seconds * 1000:.2f}ms ({gen_seconds:.2f}s)")
    print(format_square(square))
    magic_sum = write_csv(square, args.csv)
    print(f"Written magic square to {args.csv}. M = {magic_sum}")
    finished = time.perf_counter()
    write_seconds = finished - generated
    total_seconds = finished - started
    print(f"Time to write: {write_seconds * 1000:.2f}ms ({write_seconds:.2f}s)")
    print(f"System total runtime: {total_seconds * 1000:.2f}ms ({total_seconds:.2f}s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())