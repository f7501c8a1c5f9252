import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from reversi.engine.cell import STONES, Cell, opponent_of
from reversi.engine.errors import GameFinishedError, InvalidMoveError
from reversi.engine.lines import DIRECTIONS, Position, exist_line, is_within_range, stones_to_flip

logger = logging.getLogger(__name__)

BOARD_SIZE = 8
PASSES_TO_FINISH = 2


class Othello:
    def __init__(self, size: int = BOARD_SIZE):
        if size < 4 or size % 2:
            raise ValueError(f"Board size must be an even number >= 4, got {size}")
        self.size = size
        self._grid: List[List[Cell]] = [[Cell.EMPTY for _ in range(size)] for _ in range(size)]
        self._turn = Cell.BLACK
        self._finished = False
        self._winner: Optional[Cell] = None
        self._pass_count = 0
        self._init_board()
        self.recompute_available_moves()

    def _init_board(self):
        """Place the standard 4 starting stones."""
        mid = self.size // 2
        # grid[y][x]; D4 and E5 white, E4 and D5 black
        self._grid[mid - 1][mid - 1] = Cell.WHITE
        self._grid[mid][mid] = Cell.WHITE
        self._grid[mid - 1][mid] = Cell.BLACK
        self._grid[mid][mid - 1] = Cell.BLACK

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]], turn: Cell = Cell.BLACK) -> "Othello":
        """Build a game from an explicit layout of ``rows[y][x]`` cells.

        PLAYABLE markers in the input are ignored; legal moves are
        recomputed for ``turn``.
        """
        size = len(rows)
        if size == 0 or any(len(row) != size for row in rows):
            raise ValueError("Board layout must be a non-empty square")
        if turn not in STONES:
            raise ValueError(f"Turn must be BLACK or WHITE, got {turn!r}")

        game = cls.__new__(cls)
        game.size = size
        game._grid = [[Cell.EMPTY if cell is Cell.PLAYABLE else Cell(cell) for cell in row] for row in rows]
        game._turn = turn
        game._finished = False
        game._winner = None
        game._pass_count = 0
        game.recompute_available_moves()
        return game

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def board(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    @property
    def turn(self) -> Cell:
        return self._turn

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def winner(self) -> Optional[Cell]:
        """The winning stone, or None while playing or after a draw."""
        return self._winner

    @property
    def pass_count(self) -> int:
        return self._pass_count

    def playable_positions(self) -> List[Position]:
        return [
            Position(x, y)
            for y, row in enumerate(self._grid)
            for x, cell in enumerate(row)
            if cell is Cell.PLAYABLE
        ]

    def count(self, stone: Cell) -> int:
        return sum(row.count(stone) for row in self._grid)

    def score(self) -> Dict[Cell, int]:
        return {stone: self.count(stone) for stone in STONES}

    def verify_move(self, position: Iterable[int]) -> bool:
        if self._finished:
            return False
        position = Position(*position)
        if not is_within_range(self.size, position):
            return False
        return self._grid[position.y][position.x] is Cell.PLAYABLE

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def put(self, position: Iterable[int]):
        """Place a stone for the side to move and flip every outflanked run.

        The turn is not advanced; call ``end_turn`` afterwards.
        """
        self._ensure_in_progress("put a stone")
        position = Position(*position)
        if not self.verify_move(position):
            if not is_within_range(self.size, position):
                raise InvalidMoveError(position, "outside the board")
            raise InvalidMoveError(position, "cell is not playable")

        flipped: List[Position] = []
        for direction in DIRECTIONS:
            flipped.extend(stones_to_flip(self._grid, position, direction, self._turn))

        self._pass_count = 0
        self._grid[position.y][position.x] = self._turn
        for target in flipped:
            self._grid[target.y][target.x] = self._turn
        # Markers belong to the position before this move
        self._clear_playable()
        logger.debug("%s put at %s, flipped %d", self._turn, tuple(position), len(flipped))

    def end_turn(self):
        self._ensure_in_progress("end the turn")
        self._advance_turn()

    def pass_turn(self):
        """Record a pass; two consecutive passes finish the game."""
        self._ensure_in_progress("pass")
        self._pass_count += 1
        logger.debug("%s passed (%d in a row)", self._turn, self._pass_count)
        if self._pass_count >= PASSES_TO_FINISH:
            self._finish()
            return
        self._advance_turn()

    def recompute_available_moves(self):
        if self._finished:
            return
        self._clear_playable()
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                if cell is not Cell.EMPTY:
                    continue
                origin = Position(x, y)
                if any(exist_line(self._grid, origin, direction, self._turn) for direction in DIRECTIONS):
                    row[x] = Cell.PLAYABLE

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _advance_turn(self):
        self._turn = opponent_of(self._turn)
        self.recompute_available_moves()

    def _clear_playable(self):
        for row in self._grid:
            for x, cell in enumerate(row):
                if cell is Cell.PLAYABLE:
                    row[x] = Cell.EMPTY

    def _finish(self):
        self._clear_playable()
        self._finished = True
        black = self.count(Cell.BLACK)
        white = self.count(Cell.WHITE)
        if black > white:
            self._winner = Cell.BLACK
        elif white > black:
            self._winner = Cell.WHITE
        else:
            self._winner = None
        logger.info("Game finished: BLACK %d - WHITE %d, winner %s", black, white, self._winner or "none")

    def _ensure_in_progress(self, operation: str):
        if self._finished:
            raise GameFinishedError(operation)
