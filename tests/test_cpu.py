import pytest

from yuletide.cpu import (
    Instruction,
    Machine,
    parse_instructions,
    render_screen,
    signal_strength,
)

SHORT_PROGRAM = """
noop
addx 3
addx -5
"""

LONG_PROGRAM = """
addx 15
addx -11
addx 6
addx -3
addx 5
addx -1
addx -8
addx 13
addx 4
noop
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx -35
addx 1
addx 24
addx -19
addx 1
addx 16
addx -11
noop
noop
addx 21
addx -15
noop
noop
addx -3
addx 9
addx 1
addx -3
addx 8
addx 1
addx 5
noop
noop
noop
noop
noop
addx -36
noop
addx 1
addx 7
noop
noop
noop
addx 2
addx 6
noop
noop
noop
noop
noop
addx 1
noop
noop
addx 7
addx 1
noop
addx -13
addx 13
addx 7
noop
addx 1
addx -33
noop
noop
noop
addx 2
noop
noop
noop
addx 8
noop
addx -1
addx 2
addx 1
noop
addx 17
addx -9
addx 1
addx 1
addx -3
addx 11
noop
noop
addx 1
noop
addx 1
noop
noop
addx -13
addx -19
addx 1
addx 3
addx 26
addx -30
addx 12
addx -1
addx 3
addx 1
noop
noop
noop
addx -9
addx 18
addx 1
addx 2
noop
noop
addx 9
noop
noop
noop
addx -1
addx 2
addx -37
addx 1
addx 3
noop
addx 15
addx -21
addx 22
addx -6
addx 1
noop
addx 2
addx 1
noop
addx -10
noop
noop
addx 20
addx 1
addx 2
addx 2
addx -6
addx -11
noop
noop
noop
"""


def test_parsing():
    assert list(parse_instructions(SHORT_PROGRAM)) == [
        Instruction("noop"),
        Instruction("addx", 3),
        Instruction("addx", -5),
    ]


@pytest.mark.parametrize("line", ["jump 3", "addx", ""])
def test_parsing_rejects_unknown_instructions(line):
    with pytest.raises(ValueError):
        list(parse_instructions(f"noop\n{line}\nnoop"))


def test_instruction_cycles():
    assert Instruction("noop").cycles() == 1
    assert Instruction("addx", 7).cycles() == 2


def test_instruction_rejects_unknown_name():
    with pytest.raises(ValueError):
        Instruction("mul", 2)


def test_execute_cycles_one_at_a_time():
    machine = Machine(parse_instructions(SHORT_PROGRAM))
    seen = []
    for _ in range(5):
        machine.execute_cycles(1)
        seen.append(machine.x)
    assert seen == [1, 1, 4, 4, -1]
    assert machine.executed_cycles == 5
    assert machine.finished()


def test_execute_cycles_batched():
    machine = Machine(parse_instructions(SHORT_PROGRAM))
    machine.execute_cycles(5)
    assert machine.x == -1


def test_running_past_the_program_raises():
    machine = Machine(parse_instructions(SHORT_PROGRAM))
    machine.execute_cycles(5)
    with pytest.raises(IndexError):
        machine.execute_cycles(1)


def test_signal_strength():
    assert signal_strength(parse_instructions(LONG_PROGRAM)) == 13_140


def test_render_screen():
    expected = (
        "\n"
        "##..##..##..##..##..##..##..##..##..##..\n"
        "###...###...###...###...###...###...###.\n"
        "####....####....####....####....####....\n"
        "#####.....#####.....#####.....#####.....\n"
        "######......######......######......####\n"
        "#######.......#######.......#######.....\n"
    )
    assert render_screen(parse_instructions(LONG_PROGRAM)) == expected


def test_render_screen_shape():
    screen = render_screen(parse_instructions(SHORT_PROGRAM))
    rows = screen.strip("\n").split("\n")
    assert len(rows) == 6
    assert all(len(row) == 40 for row in rows)
    assert rows[0].startswith("##")
    assert rows[1] == "." * 40