from reversi.engine.cell import Cell
from reversi.engine.othello import Othello

CHARS = {
    "B": Cell.BLACK,
    "W": Cell.WHITE,
    ".": Cell.EMPTY,
}


def parse_rows(*lines):
    return [[CHARS[ch] for ch in line.split()] for line in lines]


def make_game(*lines, turn=Cell.BLACK):
    return Othello.from_rows(parse_rows(*lines), turn=turn)
