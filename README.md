# yuletide

Small, dependency-free solvers for a set of festive programming puzzles. Each
module takes the puzzle text as a string and returns the answer.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it solves |
| --- | --- |
| `yuletide.rucksack` | Item priorities shared between rucksack halves and among groups of three |
| `yuletide.crates` | Crate stacks rearranged one crate at a time or in batches |
| `yuletide.forest` | Tree visibility and scenic scores on a grid of tree heights |
| `yuletide.rope` | Positions visited by the tail of a knotted rope |
| `yuletide.cpu` | Signal strength and screen output of a two-instruction CPU |
| `yuletide.hills` | Shortest climbing route across a height map |

## Examples

### Rucksacks

```python
from yuletide.rucksack import priority, sum_misplaced_priorities, sum_badge_priorities

priority("p")  # 16
priority("L")  # 38
sum_misplaced_priorities(puzzle_text)
sum_badge_priorities(puzzle_text)  # lines must divide into groups of three
```

### Crates

The drawing shows every slot as `[X]`; an empty slot is drawn as `[_]`.
Stacks come back as lists ordered bottom to top, and the moving functions
return new lists without touching their input.

```python
from yuletide.crates import parse_stacks, parse_moves, move_one_at_a_time, move_in_batches, top_crates

drawing = """
[_] [D] [_]
[N] [C] [_]
[Z] [M] [P]
"""
procedure = """
move 1 from 2 to 1
move 3 from 1 to 3
move 2 from 2 to 1
move 1 from 1 to 2
"""
stacks = parse_stacks(drawing, 3)
moves = parse_moves(procedure)
top_crates(move_one_at_a_time(stacks, moves))  # "CMZ"
top_crates(move_in_batches(stacks, moves))     # "MCD"
```

### Forest

```python
from yuletide.forest import Forest

forest = Forest.from_text(grid)
forest.count_visible()
forest.scenic_score(2, 1)
forest.best_scenic_score()
forest.visible_direction(0, 0)  # VisibleDirection.EDGE
```

### Rope

```python
from yuletide.rope import Rope, Direction, parse_moves, count_tail_positions

count_tail_positions(motions, 2)
count_tail_positions(motions, 10)

rope = Rope(10)
for move in parse_moves(motions):
    rope.apply(move)
rope.head(), rope.tail()
```

### CPU

```python
from yuletide.cpu import Machine, parse_instructions, signal_strength, render_screen

program = list(parse_instructions(listing))
signal_strength(program)
print(render_screen(program))

machine = Machine(program)
machine.execute_cycles(5)
machine.x
```

`render_screen` returns a 40 by 6 picture of `#` and `.`, starting with a
newline and ending each row with one.

### Hills

```python
from yuletide.hills import HeightMap

hills = HeightMap.from_text(heightmap)
hills.shortest_path(hills.start)  # None when the end cannot be reached
hills.shortest_from_lowest()
```

## Errors

Malformed puzzle text raises `ValueError`. Asking a `Forest` or `HeightMap`
about a position outside the grid raises `IndexError`, as does running a
`Machine` for more cycles than its program lasts.

## What this package does not do

It is a library only: there is no command-line program, and no puzzle inputs
are bundled. Read your puzzle text yourself and pass it in as a string.