"""
Direction walks over a board grid.

All functions here are pure: they read a grid snapshot indexed as
``grid[y][x]`` and never write to it. The engine uses them both to mark
legal moves and to find the stones a placement flips.
"""
from typing import Iterator, List, NamedTuple, Sequence, Tuple

from reversi.engine.cell import Cell, opponent_of

Grid = Sequence[Sequence[Cell]]


class Position(NamedTuple):
    x: int
    y: int

    def step(self, dx: int, dy: int, k: int = 1) -> "Position":
        return Position(self.x + dx * k, self.y + dy * k)


DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


def is_within_range(size: int, position: Position) -> bool:
    return 0 <= position.x < size and 0 <= position.y < size


def walk(grid: Grid, origin: Position, direction: Tuple[int, int]) -> Iterator[Tuple[Position, Cell]]:
    """Yield ``(position, cell)`` outward from ``origin``, excluding the origin itself."""
    size = len(grid)
    dx, dy = direction
    for k in range(1, size):
        position = origin.step(dx, dy, k)
        if not is_within_range(size, position):
            return
        yield position, grid[position.y][position.x]


def exist_line(grid: Grid, origin: Position, direction: Tuple[int, int], stone: Cell) -> bool:
    """
    Return True if a ``stone`` placed at ``origin`` outflanks at least one
    opponent stone in ``direction``.

    The origin cell itself is not inspected, so this works both for an
    empty candidate cell and for a cell that was just played.
    """
    opponent = opponent_of(stone)
    line_length = 0
    for _, cell in walk(grid, origin, direction):
        if cell is opponent:
            line_length += 1
            continue
        if cell is stone:
            # Own stone right next to the origin flanks nothing
            return line_length > 0
        # EMPTY or PLAYABLE breaks the line
        return False
    return False


def stones_to_flip(grid: Grid, origin: Position, direction: Tuple[int, int], stone: Cell) -> List[Position]:
    if not exist_line(grid, origin, direction, stone):
        return []
    opponent = opponent_of(stone)
    flipped = []
    for position, cell in walk(grid, origin, direction):
        if cell is not opponent:
            break
        flipped.append(position)
    return flipped
