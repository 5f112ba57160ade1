"""Hill climbing: shortest walks across a height map."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

Point = tuple[int, int]


def to_height(char: str) -> int:
    """Height of a map letter: ``a`` is 0 and ``z`` is 25."""
    if len(char) != 1 or not "a" <= char <= "z":
        raise ValueError(f"bad height character: {char!r}")
    return ord(char) - ord("a")


@dataclass(frozen=True)
class HeightMap:
    """A grid of heights indexed as ``rows[y][x]``, with a start and an end point."""

    rows: tuple[tuple[int, ...], ...]
    start: Point
    end: Point

    @classmethod
    def from_text(cls, text: str) -> HeightMap:
        """Parse a map of letters where ``S`` marks the start and ``E`` the end."""
        start: Point | None = None
        end: Point | None = None
        rows = []
        width: int | None = None
        for y, raw in enumerate(text.strip().splitlines()):
            line = raw.strip()
            if width is None:
                width = len(line)
            elif len(line) != width:
                raise ValueError(f"row {y} has {len(line)} cells, expected {width}")
            row = []
            for x, char in enumerate(line):
                if char == "S":
                    if start is not None:
                        raise ValueError("map has more than one start")
                    start = (x, y)
                    char = "a"
                elif char == "E":
                    if end is not None:
                        raise ValueError("map has more than one end")
                    end = (x, y)
                    char = "z"
                row.append(to_height(char))
            rows.append(tuple(row))
        if start is None or end is None:
            raise ValueError("map needs both a start and an end")
        return cls(tuple(rows), start, end)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height_count(self) -> int:
        return len(self.rows)

    def height(self, point: Point) -> int:
        """Height at ``(x, y)``."""
        x, y = point
        if not (0 <= x < self.width and 0 <= y < self.height_count):
            raise IndexError(f"no cell at {point}")
        return self.rows[y][x]

    def _neighbours(self, point: Point):
        x, y = point
        for nx, ny in ((x, y - 1), (x + 1, y), (x, y + 1), (x - 1, y)):
            if 0 <= nx < self.width and 0 <= ny < self.height_count:
                yield nx, ny

    def shortest_path(self, start: Point) -> int | None:
        """Fewest steps from ``start`` to the end, climbing at most one per step.

        Returns None when the end cannot be reached.
        """
        self.height(start)
        distances = {start: 0}
        queue = deque([start])
        while queue:
            point = queue.popleft()
            if point == self.end:
                return distances[point]
            here = self.rows[point[1]][point[0]]
            for neighbour in self._neighbours(point):
                if neighbour in distances:
                    continue
                if self.rows[neighbour[1]][neighbour[0]] - here <= 1:
                    distances[neighbour] = distances[point] + 1
                    queue.append(neighbour)
        return None

    def shortest_from_lowest(self) -> int:
        """Fewest steps to the end from any cell of height zero."""
        lengths = [
            length
            for y, row in enumerate(self.rows)
            for x, value in enumerate(row)
            if value == 0
            for length in (self.shortest_path((x, y)),)
            if length is not None
        ]
        if not lengths:
            raise ValueError("the end cannot be reached from any lowest cell")
        return min(lengths)


def path_to_string(path: Sequence[Point], width: int, height: int) -> str:
    """Draw a path with arrows on a ``width`` by ``height`` grid, ending at ``E``."""
    grid = [["."] * width for _ in range(height)]
    for (x, y), following in zip(path, [*path[1:], None]):
        if following is None:
            mark = "E"
        else:
            nx, ny = following
            if nx > x:
                mark = ">"
            elif nx < x:
                mark = "<"
            elif ny > y:
                mark = "v"
            elif ny < y:
                mark = "^"
            else:
                raise ValueError(f"path repeats point {(x, y)}")
        grid[y][x] = mark
    return "".join("".join(row) + "\n" for row in grid)