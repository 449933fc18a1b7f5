import pytest

from game_of_life.generation import InvalidPointError
from game_of_life.patterns import PATTERNS, get_pattern, parse_points, pattern_names
from game_of_life.world import Status, new_world


def test_get_pattern_translates():
    assert get_pattern("block", offset=(2, 3)) == [(2, 3), (3, 3), (2, 4), (3, 4)]
    assert get_pattern("block") == PATTERNS["block"]


def test_get_pattern_returns_a_copy():
    get_pattern("glider").append((9, 9))
    assert (9, 9) not in PATTERNS["glider"]


def test_unknown_pattern():
    with pytest.raises(KeyError, match="unknown pattern"):
        get_pattern("spaceship-9000")


def test_pattern_names_sorted():
    assert pattern_names() == sorted(PATTERNS)
    assert "sample" in pattern_names()


@pytest.mark.parametrize("name", ["toad", "beacon"])
def test_period_two_oscillators_repeat(name):
    w = new_world(10, 10, get_pattern(name, offset=(3, 3)))
    start = w.current.cells.alive_positions()
    w.step()
    assert w.current.cells.alive_positions() != start
    w.step()
    assert w.current.cells.alive_positions() == start


def test_lwss_keeps_population():
    w = new_world(None, None, get_pattern("lwss"), bounded=False)
    for _ in range(4):
        w.step()
    assert w.count_alive() == 9


def test_sample_board_settles():
    w = new_world(10, 10, get_pattern("sample"))
    seen = {}
    status = w.status(seen)
    for _ in range(50):
        if status.terminal:
            break
        w.step()
        status = w.status(seen)
    assert status.terminal


def test_parse_points():
    assert parse_points("1,1;1,2 2,1") == [(1, 1), (1, 2), (2, 1)]
    assert parse_points("-1,4") == [(-1, 4)]
    assert parse_points("") == []


@pytest.mark.parametrize("text", ["1", "1,2,3", "a,b", "1;2"])
def test_parse_points_rejects_malformed(text):
    with pytest.raises(InvalidPointError):
        parse_points(text)
