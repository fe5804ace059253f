"""Board helpers for the bridges (hashi) puzzle."""

from __future__ import annotations

import argparse
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

Coord = tuple[int, int]


class Tile(Enum):
    """Contents of one board cell; the value is the character shown for it."""

    EMPTY = " "
    V_BRIDGE = "'"
    V_DOUBLE_BRIDGE = '"'
    H_BRIDGE = "-"
    H_DOUBLE_BRIDGE = "="
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"

    @property
    def char(self) -> str:
        return self.value

    @property
    def is_island(self) -> bool:
        return self.value.isdigit()

    @property
    def number(self) -> int:
        """The number of bridges an island tile asks for."""
        if not self.is_island:
            raise ValueError(f"{self.name} is not an island")
        return int(self.value)


class Direction(Enum):
    """Compass directions as (row, column) steps."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    @property
    def delta(self) -> Coord:
        return self.value


Board = list[list[Tile]]

_HORIZONTAL = {Tile.H_BRIDGE: 1, Tile.H_DOUBLE_BRIDGE: 2}
_VERTICAL = {Tile.V_BRIDGE: 1, Tile.V_DOUBLE_BRIDGE: 2}
_ANY_BRIDGE = {**_HORIZONTAL, **_VERTICAL}

DEMO_BOARD = (
    "          ",
    " 4       3",
    "  4  5 3  ",
    "         2",
    "   3 6 5  ",
    " 4        ",
    "   2 3 3  ",
    "          ",
    "  3      2",
    " 3 2 3  2 ",
)


def parse_board(rows: Iterable[Iterable[str]]) -> Board:
    """Turn rows of characters into a board of tiles."""
    board: Board = []
    for row in rows:
        tiles = []
        for char in row:
            try:
                tiles.append(Tile(char))
            except ValueError:
                raise ValueError(f"unknown tile character: {char!r}") from None
        board.append(tiles)
    return board


def format_board(board: Sequence[Sequence[Tile]]) -> str:
    """Render the board as lines of tile characters."""
    return "\n".join("".join(tile.char for tile in row) for row in board)


def _in_bounds(board: Sequence[Sequence[Tile]], row: int, col: int) -> bool:
    return 0 <= row < len(board) and 0 <= col < len(board[row])


def _walk(board: Sequence[Sequence[Tile]], row: int, col: int, direction: Direction) -> Iterator[Coord]:
    dr, dc = direction.delta
    r, c = row + dr, col + dc
    while _in_bounds(board, r, c):
        yield r, c
        r, c = r + dr, c + dc


def next_non_blank(
    board: Sequence[Sequence[Tile]], row: int, col: int, direction: Direction
) -> Optional[Coord]:
    """Return the first non-empty cell from (row, col) in a direction, or None."""
    return next(
        ((r, c) for r, c in _walk(board, row, col, direction) if board[r][c] is not Tile.EMPTY),
        None,
    )


def next_island(
    board: Sequence[Sequence[Tile]], row: int, col: int, direction: Direction
) -> Optional[Coord]:
    """Return the first island from (row, col) in a direction, passing over
    empty cells and bridges, or None."""
    return next(
        ((r, c) for r, c in _walk(board, row, col, direction) if board[r][c].is_island),
        None,
    )


def adjacent_islands(board: Sequence[Sequence[Tile]], row: int, col: int) -> dict[Direction, Coord]:
    """Return the nearest island in each direction that has one."""
    found = {}
    for direction in Direction:
        island = next_island(board, row, col, direction)
        if island is not None:
            found[direction] = island
    return found


def adjacent_tiles(board: Sequence[Sequence[Tile]], row: int, col: int) -> dict[Direction, Tile]:
    """Return the directly neighbouring tiles that lie on the board."""
    tiles = {}
    for direction in Direction:
        dr, dc = direction.delta
        if _in_bounds(board, row + dr, col + dc):
            tiles[direction] = board[row + dr][col + dc]
    return tiles


def fill_line(
    board: Board, start_row: int, start_col: int, end_row: int, end_col: int, tile: Tile
) -> None:
    """Fill the cells strictly between the start and end with ``tile``.

    The line must run along a row or a column, from lower to higher index;
    the end cells themselves are left alone.
    """
    if start_row == end_row:
        for c in range(start_col + 1, end_col):
            board[start_row][c] = tile
    elif start_col == end_col:
        for r in range(start_row + 1, end_row):
            board[r][start_col] = tile


def island_remaining_value(board: Sequence[Sequence[Tile]], row: int, col: int) -> int:
    """Return the island's number less the bridges already touching it."""
    value = board[row][col].number
    checks = (
        (Direction.RIGHT, _HORIZONTAL),
        (Direction.LEFT, _HORIZONTAL),
        (Direction.UP, _VERTICAL),
        (Direction.DOWN, _VERTICAL),
    )
    bridges = 0
    for direction, counts in checks:
        dr, dc = direction.delta
        if _in_bounds(board, row + dr, col + dc):
            bridges += counts.get(board[row + dr][col + dc], 0)
    return value - bridges


def available_bridges(
    board: Sequence[Sequence[Tile]], row: int, col: int, direction: Direction
) -> int:
    """Return how many more bridges may run from (row, col) in a direction.

    The nearest island caps it at two or its own remaining value, and any
    bridge already leaving (row, col) that way is subtracted.
    """
    available = 0
    island = next_island(board, row, col, direction)
    if island is not None:
        available = min(2, island_remaining_value(board, *island))
    dr, dc = direction.delta
    if _in_bounds(board, row + dr, col + dc):
        available -= _ANY_BRIDGE.get(board[row + dr][col + dc], 0)
    return available


def _show(coord: Optional[Coord]) -> str:
    return "-1 -1" if coord is None else f"{coord[0]} {coord[1]}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="hashi", description="Explore a bridges puzzle board.")
    parser.add_argument("board", nargs="?", help="file holding the board, one row per line")
    args = parser.parse_args(argv)

    if args.board:
        rows = Path(args.board).read_text(encoding="utf-8").splitlines()
    else:
        rows = list(DEMO_BOARD)
    board = parse_board(rows)
    print(format_board(board))

    print("Testing functions")
    for row, col in ((1, 1), (2, 5)):
        print(f"islandRemainingValue({row}, {col}): {island_remaining_value(board, row, col)}")
    for row, col in ((1, 1), (2, 5)):
        print(f"getAdjacentTiles({row}, {col}):")
        print(" ".join(tile.char for tile in adjacent_tiles(board, row, col).values()))
    for row, col in ((1, 1), (2, 5)):
        for direction in Direction:
            print(f"nextNonBlankSpace({row}, {col}, {direction.name}):")
            print(_show(next_non_blank(board, row, col, direction)))

    fills = (
        (1, 1, 1, 9, Tile.H_DOUBLE_BRIDGE),
        (1, 1, 5, 1, Tile.V_DOUBLE_BRIDGE),
        (2, 5, 2, 7, Tile.H_BRIDGE),
        (2, 5, 4, 5, Tile.V_BRIDGE),
    )
    for start_row, start_col, end_row, end_col, tile in fills:
        if max(start_row, end_row) < len(board) and all(
            max(start_col, end_col) < len(line) for line in board
        ):
            print(f"fillLine({start_row}, {start_col}, {end_row}, {end_col}, {tile.name})")
            fill_line(board, start_row, start_col, end_row, end_col, tile)
    print(format_board(board))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())