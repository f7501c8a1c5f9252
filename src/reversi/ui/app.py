import logging

import flet as ft

from reversi.engine.cell import Cell
from reversi.engine.lines import Position
from reversi.engine.othello import BOARD_SIZE, Othello
from reversi.ui.components.board import BoardComponent
from reversi.ui.components.scoreboard import ScoreboardComponent

logger = logging.getLogger(__name__)


class ReversiApp:
    def __init__(self, board_size: int = BOARD_SIZE):
        self.board_size = board_size
        self.game = Othello(board_size)
        self.page = None

        # Components
        self.board_component = BoardComponent(
            board_size=board_size,
            on_click_callback=self.on_board_click,
        )
        self.scoreboard_component = ScoreboardComponent()
        self.board_padding = 24

    def main(self, page: ft.Page):
        self.page = page
        page.title = "Reversi"
        page.theme_mode = ft.ThemeMode.LIGHT
        page.padding = 20

        board_grid = self.board_component.create_board()
        scoreboard = self.scoreboard_component.create()
        board_wrapper = ft.Container(
            content=board_grid,
            padding=self.board_padding,
            alignment=ft.alignment.center,
            border_radius=24,
            bgcolor="#145a1e",
        )
        new_game_button = ft.FilledButton("New Game", on_click=self.on_new_game)

        page.add(
            ft.Column(
                [scoreboard, board_wrapper, new_game_button],
                spacing=16,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            )
        )
        self.refresh()

    def on_new_game(self, e=None):
        logger.info("Starting new game")
        self.game = Othello(self.board_size)
        self.refresh()

    def on_board_click(self, position: Position):
        if not self.game.verify_move(position):
            logger.debug("Ignored click on %s", tuple(position))
            return

        self.game.put(position)
        self.game.end_turn()
        self._skip_blocked_turns()
        self.refresh()

    def refresh(self):
        self.board_component.render(self.game.board)
        self.scoreboard_component.update_scores(self.game.score())
        self.scoreboard_component.set_status(self.status_message())

    def status_message(self) -> str:
        if not self.game.is_finished:
            return f"{self._color_label(self.game.turn)} to move"
        if self.game.winner is None:
            return "Draw"
        return f"{self._color_label(self.game.winner)} wins"

    def _skip_blocked_turns(self):
        while not self.game.is_finished and not self.game.playable_positions():
            logger.info("%s has no legal move and passes", self.game.turn)
            self.game.pass_turn()

    @staticmethod
    def _color_label(stone: Cell) -> str:
        return "Black" if stone is Cell.BLACK else "White"
