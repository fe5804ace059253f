"""Lowest-sum combinations that reach a wanted remainder."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence


def find_lowest_combination(
    required: Sequence[int],
    supplementary: Sequence[int],
    desired_modulo: int,
    modulus: int,
) -> list[int]:
    """Return the required ints plus the supplementary subset of lowest total
    whose sum leaves ``desired_modulo`` when divided by ``modulus``.

    Subsets are tried in bit-mask order; the first of equal lowest totals wins.
    An empty list means no combination fits. A zero total never counts.
    """
    if modulus == 0:
        raise ValueError("modulus must not be zero")
    base = sum(required)
    best: list[int] = []
    best_sum: Optional[int] = None
    for mask in range(1 << len(supplementary)):
        chosen = [value for bit, value in enumerate(supplementary) if mask >> bit & 1]
        total = base + sum(chosen)
        if total % modulus == desired_modulo and total != 0:
            if best_sum is None or total < best_sum:
                best_sum = total
                best = [*required, *chosen]
    return best


def subset_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the first subset of ``nums`` (include-first search) summing to
    ``target``, or an empty list when there is none."""
    chosen: list[int] = []

    def search(index: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        if remaining < 0 or index == len(nums):
            return False
        chosen.append(nums[index])
        if search(index + 1, remaining - nums[index]):
            return True
        chosen.pop()
        return search(index + 1, remaining)

    return chosen if search(0, target) else []


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="combination",
        description="Find the lowest combination reaching a wanted remainder.",
    )
    parser.add_argument("--required", type=int, nargs="*", default=[408])
    parser.add_argument(
        "--supplementary",
        type=int,
        nargs="*",
        default=[1527, 1938, 587, 595, 2379, 639, 5895],
    )
    parser.add_argument("--modulo", type=int, default=0, help="wanted remainder")
    parser.add_argument("--modulus", type=int, default=25)
    args = parser.parse_args(argv)

    print("Required Ints: " + " ".join(map(str, args.required)) + f" sum: {sum(args.required)}")
    print("Supplementary Ints: " + " ".join(map(str, args.supplementary)))
    result = find_lowest_combination(args.required, args.supplementary, args.modulo, args.modulus)
    print("Lowest Sum: " + " ".join(map(str, result)))
    if result:
        print(f"sum: {sum(result)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())