"""Compare two lists of location ids."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import Optional, Sequence


def parse_pairs(text: str) -> tuple[list[int], list[int]]:
    """Split lines of two integers into a left and a right list."""
    left: list[int] = []
    right: list[int] = []
    for number, line in enumerate(text.splitlines(), start=1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) < 2:
            raise ValueError(f"line {number}: expected two numbers")
        try:
            a, b = int(parts[0]), int(parts[1])
        except ValueError:
            raise ValueError(f"line {number}: expected two numbers") from None
        left.append(a)
        right.append(b)
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Pair the lists smallest to smallest and sum the distances."""
    if len(left) != len(right):
        raise ValueError("the lists must have the same length")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum each left number times how often it appears on the right."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="aoc-day1", description="Compare two id lists.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    try:
        text = Path(args.input).read_text(encoding="utf-8")
    except OSError:
        print(f"Could not open input file {args.input}")
        return 1
    left, right = parse_pairs(text)
    print(total_distance(left, right))
    print(similarity_score(left, right))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())