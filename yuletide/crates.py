"""Supply stacks: rearrange crates with a crane and read the top of each stack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

EMPTY_CRATE_MARKER = "_"


@dataclass(frozen=True)
class Move:
    """Move ``count`` crates from stack ``source`` to stack ``target`` (1-based)."""

    count: int
    source: int
    target: int


def parse_stacks(text: str, count: int) -> list[list[str]]:
    """Parse a drawing of ``count`` stacks into lists ordered bottom to top.

    Every slot is drawn as ``[X]``; an empty slot is drawn as ``[_]``.
    """
    stacks: list[list[str]] = [[] for _ in range(count)]
    for line in text.strip().splitlines():
        for index, stack in enumerate(stacks):
            start = index * 4
            chunk = line[start:start + 3].strip()
            if len(chunk) < 2:
                raise ValueError(f"missing crate {index + 1} in line: {line!r}")
            crate = chunk[1]
            if crate == EMPTY_CRATE_MARKER:
                continue
            stack.insert(0, crate)
    return stacks


def parse_moves(text: str) -> list[Move]:
    """Parse lines of the form ``move N from A to B``."""
    moves = []
    for line in text.strip().splitlines():
        parts = line.split()
        try:
            moves.append(Move(int(parts[1]), int(parts[3]), int(parts[5])))
        except (IndexError, ValueError) as error:
            raise ValueError(f"bad move: {line!r}") from error
    return moves


def _stack_index(stacks: Sequence[list[str]], number: int) -> int:
    if not 1 <= number <= len(stacks):
        raise ValueError(f"no stack numbered {number}")
    return number - 1


def move_one_at_a_time(
    stacks: Sequence[Sequence[str]], moves: Iterable[Move]
) -> list[list[str]]:
    """Apply moves lifting one crate at a time; the input is left untouched."""
    out = [list(stack) for stack in stacks]
    for move in moves:
        source = out[_stack_index(out, move.source)]
        target = out[_stack_index(out, move.target)]
        for _ in range(move.count):
            if not source:
                break
            target.append(source.pop())
    return out


def move_in_batches(
    stacks: Sequence[Sequence[str]], moves: Iterable[Move]
) -> list[list[str]]:
    """Apply moves lifting all crates of a move at once, keeping their order."""
    out = [list(stack) for stack in stacks]
    for move in moves:
        source = out[_stack_index(out, move.source)]
        target = out[_stack_index(out, move.target)]
        if not source:
            continue
        taken = min(len(source), move.count)
        chunk = source[len(source) - taken:]
        target.extend(chunk)
        del source[max(0, len(source) - move.count):]
    return out


def top_crates(stacks: Iterable[Sequence[str]]) -> str:
    """Return the crate on top of each non-empty stack, in stack order."""
    return "".join(stack[-1] for stack in stacks if stack)