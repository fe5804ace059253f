"""Count safe reports of reactor levels, with and without dampening."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Optional, Sequence

MAX_STEP = 3


def parse_reports(text: str) -> list[list[int]]:
    """Read one report of whitespace-separated levels per non-blank line."""
    reports = []
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            reports.append([int(token) for token in line.split()])
        except ValueError:
            raise ValueError(f"line {number}: levels must be integers") from None
    return reports


def is_safe(levels: Sequence[int]) -> bool:
    """Tell whether the levels all rise or all fall, by 1 to 3 each step."""
    steps = [b - a for a, b in zip(levels, levels[1:])]
    return all(1 <= step <= MAX_STEP for step in steps) or all(
        -MAX_STEP <= step <= -1 for step in steps
    )


def is_safe_dampened(levels: Sequence[int]) -> bool:
    """Tell whether the report is safe, or becomes safe with one level removed."""
    if is_safe(levels):
        return True
    return any(is_safe([*levels[:i], *levels[i + 1:]]) for i in range(len(levels)))


def count_safe(reports: Iterable[Sequence[int]], dampen: bool = False) -> int:
    """Count the safe reports, allowing one removal when ``dampen`` is set."""
    check = is_safe_dampened if dampen else is_safe
    return sum(1 for report in reports if check(report))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="aoc-day2", description="Count safe reports.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    try:
        text = Path(args.input).read_text(encoding="utf-8")
    except OSError:
        print("Could not open file.")
        return 1
    reports = parse_reports(text)
    print(f"Safe reports: {count_safe(reports)}")
    print(f"Safe reports with dampening: {count_safe(reports, dampen=True)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())