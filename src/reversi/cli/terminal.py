from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from reversi.engine.cell import Cell
from reversi.engine.lines import Position
from reversi.engine.othello import Othello

logger = logging.getLogger(__name__)

SYMBOLS = {
    Cell.EMPTY: " .",
    Cell.BLACK: " ●",
    Cell.WHITE: " ○",
    Cell.PLAYABLE: " *",
}


def render_board(board: Sequence[Sequence[Cell]]) -> str:
    header = "  " + "".join(f" {x + 1}" for x in range(len(board)))
    lines = [header]
    for y, row in enumerate(board):
        lines.append(f"{y + 1:>2}" + "".join(SYMBOLS[cell] for cell in row))
    return "\n".join(lines) + "\n"


def parse_move(text: str) -> Optional[Position]:
    """Parse a 1-based "column row" pair into a 0-based Position."""
    parts = text.split()
    if len(parts) != 2:
        return None
    try:
        x, y = (int(part) for part in parts)
    except ValueError:
        return None
    return Position(x - 1, y - 1)


class TerminalGame:
    def __init__(
        self,
        game: Optional[Othello] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.game = game or Othello()
        self.input_fn = input_fn
        self.output_fn = output_fn

    def run(self) -> Optional[Cell]:
        game = self.game
        while not game.is_finished:
            if not game.playable_positions():
                self.output_fn(f"{SYMBOLS[game.turn].strip()} passed.\n")
                game.pass_turn()
                continue

            mover = game.turn
            position = self._read_move()
            game.put(position)
            self.output_fn(f"{SYMBOLS[mover].strip()} was put at ({position.x + 1},{position.y + 1})\n")
            game.end_turn()

        self._print_result()
        return game.winner

    def _read_move(self) -> Position:
        game = self.game
        while True:
            self.output_fn(render_board(game.board))
            line = self.input_fn(f"Where do you put {SYMBOLS[game.turn].strip()}? > ")
            position = parse_move(line)
            if position is None or not game.verify_move(position):
                logger.debug("Rejected input %r for %s", line, game.turn)
                self.output_fn("\nInput error\n")
                continue
            return position

    def _print_result(self):
        game = self.game
        scores = game.score()
        self.output_fn("--- Result ---\n")
        self.output_fn(render_board(game.board))
        for stone in (Cell.BLACK, Cell.WHITE):
            self.output_fn(f"{SYMBOLS[stone].strip()}: {scores[stone]}")
        if game.winner is None:
            self.output_fn("\nDraw!!")
        else:
            self.output_fn(f"\n{SYMBOLS[game.winner].strip()} won!!\n")
