from enum import Enum
from typing import Tuple

from reversi.engine.errors import InvalidStoneError


class Cell(Enum):
    EMPTY = "EMPTY"
    BLACK = "BLACK"
    WHITE = "WHITE"
    # Transient marker, recomputed for the side to move
    PLAYABLE = "PLAYABLE"

    @property
    def is_stone(self) -> bool:
        return self is Cell.BLACK or self is Cell.WHITE

    def __str__(self) -> str:
        return self.value


STONES: Tuple[Cell, Cell] = (Cell.BLACK, Cell.WHITE)


def opponent_of(stone: Cell) -> Cell:
    if stone is Cell.WHITE:
        return Cell.BLACK
    if stone is Cell.BLACK:
        return Cell.WHITE
    raise InvalidStoneError(stone)
