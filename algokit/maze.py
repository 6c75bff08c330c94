"""Shortest path through a character maze by breadth-first search."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from algokit.fifo import Queue

START = "X"
TARGET = "Y"
WALL = "#"
FLOOR = "."
PATH = "x"

# left, right, up, down
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class UnknownTileError(ValueError):
    """The search met a character that is not a known tile."""

    def __init__(self, tile: str) -> None:
        super().__init__(f"Unknown tile type {tile}")
        self.tile = tile


@dataclass
class Tile:
    """A map cell: its character and its distance from the start."""

    ch: str = "@"
    weight: int = -1


def parse_map(lines: Iterable[str]) -> list[list[Tile]]:
    """Turn text lines into rows of tiles, each at distance zero."""
    return [[Tile(ch, 0) for ch in line.rstrip("\n")] for line in lines]


def _neighbours(grid: list[list[Tile]], x: int, y: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]):
            yield nx, ny


def _start(grid: list[list[Tile]]) -> tuple[int, int]:
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile.ch == START:
                return x, y
    raise ValueError(f"map has no start tile {START!r}")


def _search(grid: list[list[Tile]], start: tuple[int, int]) -> tuple[int, int] | None:
    queue = Queue()
    queue.insert(start)
    while queue:
        x, y = queue.front()
        current = grid[y][x].weight
        for nx, ny in _neighbours(grid, x, y):
            tile = grid[ny][nx]
            if tile.ch in (WALL, START):
                continue
            if tile.ch == FLOOR:
                if tile.weight != 0:
                    continue
                tile.weight = current + 1
                queue.insert((nx, ny))
            elif tile.ch == TARGET:
                tile.weight = current + 1
                return nx, ny
            else:
                raise UnknownTileError(tile.ch)
        queue.remove()
    return None


def _trace_back(grid: list[list[Tile]], position: tuple[int, int]) -> None:
    x, y = position
    while True:
        weight = grid[y][x].weight
        for nx, ny in _neighbours(grid, x, y):
            tile = grid[ny][nx]
            if tile.ch == START:
                return
            if tile.weight == 0 or weight - tile.weight != 1:
                continue
            tile.ch = PATH
            x, y = nx, ny
            break
        else:
            raise RuntimeError("no way back to the start")


def find_path(lines: Iterable[str]) -> list[str] | None:
    """Mark the shortest path from ``X`` to the nearest ``Y`` with ``x``.

    Returns the map rows with the path drawn in, or ``None`` when no ``Y``
    can be reached.
    """
    grid = parse_map(lines)
    found = _search(grid, _start(grid))
    if found is None:
        return None
    _trace_back(grid, found)
    return ["".join(tile.ch for tile in row) for row in grid]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a maze file and print it with the shortest path drawn in."""
    parser = argparse.ArgumentParser(prog="maze", description="Find a path from X to Y.")
    parser.add_argument("path", nargs="?", default="input.txt", help="maze file")
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8") as handle:
            lines = list(handle)
    except OSError:
        print("Input file not found")
        return 1

    try:
        rows = find_path(lines)
    except UnknownTileError as error:
        print(error)
        return 2
    except ValueError as error:
        print(error)
        return 1

    if rows is None:
        print("IMPOSSIBLE")
        return 0
    for row in rows:
        print(row)
    return 0