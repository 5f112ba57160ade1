import pytest

from yuletide.hills import HeightMap, path_to_string, to_height

EXAMPLE = """
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""


def test_parsing():
    height_map = HeightMap.from_text(EXAMPLE)
    assert height_map.start == (0, 0)
    assert height_map.height((0, 0)) == 0
    assert height_map.height((2, 1)) == 2
    assert height_map.end == (5, 2)
    assert height_map.height(height_map.end) == 25


def test_find_shortest_path():
    height_map = HeightMap.from_text(EXAMPLE)
    assert height_map.shortest_path(height_map.start) == 31


def test_shortest_from_lowest():
    assert HeightMap.from_text(EXAMPLE).shortest_from_lowest() == 29


def test_unreachable_end_gives_none():
    height_map = HeightMap.from_text("SaE")
    assert height_map.shortest_path(height_map.start) is None


def test_unreachable_from_every_lowest_cell_raises():
    with pytest.raises(ValueError):
        HeightMap.from_text("SaE").shortest_from_lowest()


@pytest.mark.parametrize("char, expected", [("a", 0), ("c", 2), ("z", 25)])
def test_to_height(char, expected):
    assert to_height(char) == expected


def test_to_height_rejects_other_characters():
    with pytest.raises(ValueError):
        to_height("A")


def test_height_outside_map_raises():
    with pytest.raises(IndexError):
        HeightMap.from_text(EXAMPLE).height((8, 0))


def test_ragged_map_is_rejected():
    with pytest.raises(ValueError):
        HeightMap.from_text("Sab\naE")


def test_missing_end_is_rejected():
    with pytest.raises(ValueError):
        HeightMap.from_text("Sab\nabc")


def test_two_starts_are_rejected():
    with pytest.raises(ValueError):
        HeightMap.from_text("SSE")


def test_path_to_string():
    assert path_to_string([(0, 0), (1, 0), (1, 1)], 3, 2) == ">v.\n.E.\n"


def test_path_to_string_rejects_repeated_point():
    with pytest.raises(ValueError):
        path_to_string([(0, 0), (0, 0)], 2, 2)