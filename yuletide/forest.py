"""Tree-house survey: which trees are visible and which spot has the best view."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class VisibleDirection(Enum):
    """The first direction from which a tree can be seen."""

    EDGE = "edge"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


def _viewing_distance(line_of_sight: Sequence[int], own_height: int) -> int:
    """Count trees seen along a line that ends at the forest's edge.

    The count starts at one and stops at a blocking tree or at the last tree
    before the edge, so a tree on the edge still scores one in that direction.
    """
    distance = 1
    last = len(line_of_sight) - 1
    for index, height in enumerate(line_of_sight):
        if height >= own_height or index == last:
            break
        distance += 1
    return distance


@dataclass(frozen=True)
class Forest:
    """A rectangular grid of tree heights, indexed as ``rows[y][x]``."""

    rows: tuple[tuple[int, ...], ...]

    @classmethod
    def from_text(cls, text: str) -> Forest:
        """Parse lines of digits, one digit per tree."""
        lines = [line.strip() for line in text.strip().splitlines()]
        if not lines or not lines[0]:
            raise ValueError("forest is empty")
        width = len(lines[0])
        rows = []
        for line in lines:
            if len(line) != width:
                raise ValueError(f"row has {len(line)} trees, expected {width}: {line!r}")
            if not all(ch in "0123456789" for ch in line):
                raise ValueError(f"bad tree height in row: {line!r}")
            rows.append(tuple(int(ch) for ch in line))
        return cls(tuple(rows))

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"no tree at ({x}, {y})")

    def _column(self, x: int) -> list[int]:
        return [row[x] for row in self.rows]

    def visible_direction(self, x: int, y: int) -> VisibleDirection | None:
        """Return the first direction the tree is visible from, or None."""
        self._check(x, y)
        if x in (0, self.width - 1) or y in (0, self.height - 1):
            return VisibleDirection.EDGE

        row = self.rows[y]
        column = self._column(x)
        own = row[x]
        candidates = (
            (VisibleDirection.TOP, column[:y]),
            (VisibleDirection.BOTTOM, column[y + 1:]),
            (VisibleDirection.LEFT, row[:x]),
            (VisibleDirection.RIGHT, row[x + 1:]),
        )
        for direction, others in candidates:
            if all(height < own for height in others):
                return direction
        return None

    def count_visible(self) -> int:
        """Number of trees visible from outside the forest."""
        return sum(
            self.visible_direction(x, y) is not None
            for y in range(self.height)
            for x in range(self.width)
        )

    def scenic_score(self, x: int, y: int) -> int:
        """Product of the viewing distances in all four directions."""
        self._check(x, y)
        row = self.rows[y]
        column = self._column(x)
        own = row[x]
        up = column[:y][::-1]
        down = column[y + 1:]
        left = row[:x][::-1]
        right = row[x + 1:]
        score = 1
        for line_of_sight in (up, down, left, right):
            score *= _viewing_distance(line_of_sight, own)
        return score

    def best_scenic_score(self) -> int:
        """Highest scenic score of any tree."""
        return max(
            (
                self.scenic_score(x, y)
                for y in range(self.height)
                for x in range(self.width)
            ),
            default=0,
        )