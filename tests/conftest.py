import pytest

from helpers import make_game
from reversi.engine.othello import Othello


@pytest.fixture
def game():
    return Othello()


@pytest.fixture
def black_sweep_game():
    # Black's only move at (3, 3) fills the board, all black
    return make_game(
        "B B B B",
        "B B B B",
        "B B W W",
        "B B W .",
    )


@pytest.fixture
def drawn_game():
    # Black's only move at (3, 3) fills the board 8 to 8
    return make_game(
        "W W W W",
        "W W W W",
        "B B B B",
        "B B W .",
    )
