"""Rope bridge: a knotted rope whose knots follow the head across a grid."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """A direction the head of the rope can move in, keyed by its letter."""

    UP = "U"
    RIGHT = "R"
    DOWN = "D"
    LEFT = "L"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
}


@dataclass(frozen=True)
class Move:
    """Move the head ``steps`` times in ``direction``."""

    direction: Direction
    steps: int


@dataclass(frozen=True)
class Point:
    """A position on the grid."""

    x: int = 0
    y: int = 0


def _follow(knot: int, leader: int, diff: int, diagonal: bool) -> int:
    if diff == -2:
        return leader + 1
    if diff == 2:
        return leader - 1
    return leader if diagonal else knot


class Rope:
    """A rope of ``length`` knots, all starting at the origin."""

    def __init__(self, length: int = 2) -> None:
        if length < 1:
            raise ValueError("a rope needs at least one knot")
        self.knots: list[Point] = [Point() for _ in range(length)]

    def step(self, direction: Direction) -> None:
        """Move the head one step and let the other knots follow."""
        dx, dy = direction.offset
        head = self.knots[0]
        self.knots[0] = Point(head.x + dx, head.y + dy)

        for index in range(1, len(self.knots)):
            knot = self.knots[index]
            leader = self.knots[index - 1]
            diff_x = leader.x - knot.x
            diff_y = leader.y - knot.y
            if abs(diff_x) != 2 and abs(diff_y) != 2:
                # A knot that stays put leaves every knot behind it in place.
                return
            diagonal = abs(diff_x) + abs(diff_y) == 3
            self.knots[index] = Point(
                _follow(knot.x, leader.x, diff_x, diagonal),
                _follow(knot.y, leader.y, diff_y, diagonal),
            )

    def apply(self, move: Move) -> None:
        """Carry out every step of a move."""
        for _ in range(move.steps):
            self.step(move.direction)

    def head(self) -> Point:
        """Position of the first knot."""
        return self.knots[0]

    def tail(self) -> Point:
        """Position of the last knot."""
        return self.knots[-1]


def parse_moves(text: str) -> Iterator[Move]:
    """Yield moves from lines such as ``R 4``."""
    for line in text.strip().splitlines():
        letter, separator, steps = line.partition(" ")
        if not separator:
            raise ValueError(f"bad move: {line!r}")
        try:
            direction = Direction(letter)
        except ValueError:
            raise ValueError(f"bad direction: {letter!r}") from None
        try:
            count = int(steps)
        except ValueError:
            raise ValueError(f"bad step count: {steps!r}") from None
        yield Move(direction, count)


def count_tail_positions(text: str, length: int) -> int:
    """Number of distinct positions the tail occupies after each step."""
    rope = Rope(length)
    visited: set[Point] = set()
    for move in parse_moves(text):
        for _ in range(move.steps):
            rope.step(move.direction)
            visited.add(rope.tail())
    return len(visited)