"""Where a dart thrown from below reaches the xz-plane."""

from __future__ import annotations

import argparse
import math
from typing import NamedTuple, Optional, Sequence


class Point(NamedTuple):
    """A point or direction in space."""

    x: float
    y: float
    z: float


def _norm(direction: Sequence[float]) -> float:
    a, b, c = direction
    length = math.sqrt(a * a + b * b + c * c)
    if length == 0:
        raise ValueError("direction must not be the zero vector")
    return length


def time_to_plane(position: Sequence[float], direction: Sequence[float], speed: float) -> float:
    """Return the time at which the dart reaches the xz-plane."""
    _, y0, _ = position
    _, b, _ = direction
    length = _norm(direction)
    if b == 0:
        raise ValueError("the direction must have a non-zero y component")
    return -y0 / b + speed * (b / length)


def position_at(
    position: Sequence[float], direction: Sequence[float], speed: float, t: float
) -> Point:
    """Return the dart's location on the xz-plane at time ``t``."""
    x0, _, z0 = position
    a, _, c = direction
    length = _norm(direction)
    return Point(x0 + speed * (a / length) * t, 0.0, z0 + speed * (c / length) * t)


def _is_valid(position: Sequence[float], direction: Sequence[float]) -> bool:
    return position[1] < 0 and direction[1] > 0


def _read_floats(prompt: str, count: int) -> list[float]:
    while True:
        parts = input(prompt).split()
        try:
            values = [float(part) for part in parts]
        except ValueError:
            values = []
        if len(values) == count:
            return values
        print(f"Please enter {count} number(s).")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="dart", description="Find where a dart hits the xz-plane.")
    parser.add_argument("--position", type=float, nargs=3, metavar=("X0", "Y0", "Z0"))
    parser.add_argument("--direction", type=float, nargs=3, metavar=("A", "B", "C"))
    parser.add_argument("--speed", type=float)
    args = parser.parse_args(argv)

    message = "Invalid input. y0 should be less than 0 and b should be greater than 0."
    if args.position and args.direction and args.speed is not None:
        position, direction, speed = args.position, args.direction, args.speed
        if not _is_valid(position, direction):
            print(message)
            return 1
    else:
        while True:
            position = _read_floats("Enter initial position (x0 y0 z0): ", 3)
            direction = _read_floats("Enter direction (a b c): ", 3)
            speed = _read_floats("Enter initial speed (vo): ", 1)[0]
            if _is_valid(position, direction):
                break
            print(message)

    t = time_to_plane(position, direction, speed)
    hit = position_at(position, direction, speed, t)
    print(f"Time to hit xz-plane: {t:g} seconds")
    print(f"Location at time t: ({hit.x:g}, {hit.y:g}, {hit.z:g})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())