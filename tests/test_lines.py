from reversi.engine.cell import Cell
from reversi.engine.lines import DIRECTIONS, Position, exist_line, is_within_range, stones_to_flip, walk

from helpers import parse_rows

RIGHT = (1, 0)


def test_directions_cover_all_neighbours():
    assert len(DIRECTIONS) == 8
    assert (0, 0) not in DIRECTIONS
    assert set(DIRECTIONS) == {(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)} - {(0, 0)}


def test_is_within_range():
    assert is_within_range(8, Position(0, 0))
    assert is_within_range(8, Position(7, 7))
    assert not is_within_range(8, Position(-1, 0))
    assert not is_within_range(8, Position(0, 8))


def test_walk_stops_at_edge():
    grid = parse_rows(
        ". . . .",
        ". . . .",
        ". . . .",
        ". . . .",
    )
    assert list(walk(grid, Position(3, 0), RIGHT)) == []
    positions = [position for position, _ in walk(grid, Position(0, 0), (1, 1))]
    assert positions == [Position(1, 1), Position(2, 2), Position(3, 3)]


def test_exist_line_flanks_opponent_run():
    grid = parse_rows(
        ". W W B",
        ". . . .",
        ". . . .",
        ". . . .",
    )
    assert exist_line(grid, Position(0, 0), RIGHT, Cell.BLACK)
    assert not exist_line(grid, Position(0, 0), RIGHT, Cell.WHITE)


def test_exist_line_needs_an_opponent_stone_first():
    grid = parse_rows(
        ". B W B",
        ". . . .",
        ". . . .",
        ". . . .",
    )
    assert not exist_line(grid, Position(0, 0), RIGHT, Cell.BLACK)


def test_exist_line_broken_by_gap():
    grid = parse_rows(
        ". W . B",
        ". . . .",
        ". . . .",
        ". . . .",
    )
    assert not exist_line(grid, Position(0, 0), RIGHT, Cell.BLACK)
    grid[0][2] = Cell.PLAYABLE
    assert not exist_line(grid, Position(0, 0), RIGHT, Cell.BLACK)


def test_exist_line_false_when_run_reaches_edge():
    grid = parse_rows(
        ". W W W",
        ". . . .",
        ". . . .",
        ". . . .",
    )
    assert not exist_line(grid, Position(0, 0), RIGHT, Cell.BLACK)


def test_exist_line_ignores_origin_content():
    grid = parse_rows(
        "B W B .",
        ". . . .",
        ". . . .",
        ". . . .",
    )
    assert exist_line(grid, Position(0, 0), RIGHT, Cell.BLACK)


def test_stones_to_flip_returns_the_run():
    grid = parse_rows(
        ". W W B",
        "W . . .",
        "W . . .",
        ". . . .",
    )
    assert stones_to_flip(grid, Position(0, 0), RIGHT, Cell.BLACK) == [Position(1, 0), Position(2, 0)]
    # Run down the first column reaches an empty cell
    assert stones_to_flip(grid, Position(0, 0), (0, 1), Cell.BLACK) == []


def test_stones_to_flip_does_not_touch_grid():
    grid = parse_rows(
        ". W W B",
        ". . . .",
        ". . . .",
        ". . . .",
    )
    before = [row[:] for row in grid]
    stones_to_flip(grid, Position(0, 0), RIGHT, Cell.BLACK)
    assert grid == before
