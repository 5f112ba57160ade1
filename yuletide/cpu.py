"""A tiny two-instruction CPU driving a cathode-ray display."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_CYCLES = {"noop": 1, "addx": 2}

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6
_SIGNAL_CHECKPOINTS = (19, 40, 40, 40, 40, 40)


@dataclass(frozen=True)
class Instruction:
    """A single instruction: ``noop`` or ``addx`` with an argument."""

    name: str
    argument: int = 0

    def __post_init__(self) -> None:
        if self.name not in _CYCLES:
            raise ValueError(f"unknown instruction: {self.name!r}")

    def cycles(self) -> int:
        """Number of cycles the instruction takes to complete."""
        return _CYCLES[self.name]


def parse_instructions(text: str) -> Iterator[Instruction]:
    """Yield the instructions of a program, one per line."""
    for line in text.strip().splitlines():
        parts = line.split()
        if parts and parts[0] == "noop":
            yield Instruction("noop")
        elif len(parts) >= 2 and parts[0] == "addx":
            yield Instruction("addx", int(parts[1]))
        else:
            raise ValueError(f"unknown instruction: {parts!r}")


class Machine:
    """Executes instructions cycle by cycle, tracking the X register."""

    def __init__(self, instructions: Iterable[Instruction]) -> None:
        self.instructions: deque[Instruction] = deque(instructions)
        self.current: Instruction | None = None
        self.remaining = 0
        self.executed_cycles = 0
        self.x = 1

    def finished(self) -> bool:
        """True once every instruction has completed."""
        return not self.instructions and self.current is None

    def execute_cycles(self, cycles: int) -> None:
        """Run the given number of cycles."""
        for _ in range(cycles):
            if self.current is None:
                if not self.instructions:
                    raise IndexError("no instructions left to execute")
                self.current = self.instructions.popleft()
                self.remaining = self.current.cycles()

            self.executed_cycles += 1
            self.remaining -= 1

            if self.remaining == 0:
                if self.current.name == "addx":
                    self.x += self.current.argument
                self.current = None


def signal_strength(instructions: Iterable[Instruction]) -> int:
    """Sum of cycle number times X during cycles 20, 60, ..., 220."""
    machine = Machine(instructions)
    total = 0
    for cycles in _SIGNAL_CHECKPOINTS:
        machine.execute_cycles(cycles)
        total += (machine.executed_cycles + 1) * machine.x
    return total


def render_screen(instructions: Iterable[Instruction]) -> str:
    """Draw the screen the program produces, one row of 40 pixels per line."""
    machine = Machine(instructions)
    pixels = ["."] * (SCREEN_WIDTH * SCREEN_HEIGHT)

    while not machine.finished():
        column = machine.executed_cycles % SCREEN_WIDTH
        if machine.x - 1 <= column <= machine.x + 1:
            cell = machine.executed_cycles // SCREEN_WIDTH * SCREEN_WIDTH + column
            if cell >= len(pixels):
                raise ValueError("program runs past the end of the screen")
            pixels[cell] = "#"
        machine.execute_cycles(1)

    rows = (
        "".join(pixels[start:start + SCREEN_WIDTH])
        for start in range(0, len(pixels), SCREEN_WIDTH)
    )
    return "\n" + "".join(row + "\n" for row in rows)