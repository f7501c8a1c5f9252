from typing import Callable, Dict, Optional, Sequence

import flet as ft

from reversi.engine.cell import Cell
from reversi.engine.lines import Position


class BoardComponent:
    def __init__(self, board_size: int, on_click_callback: Callable[[Position], None], cell_size: float = 60):
        self.board_size = board_size
        self.on_click = on_click_callback
        self.cell_size = cell_size

        # State
        self.pieces: Dict[Position, ft.Container] = {}
        self.markers: Dict[Position, ft.Container] = {}
        self.board_grid: Optional[ft.Column] = None

    def create_board(self) -> ft.Column:
        rows = []
        piece_size = int(self.cell_size * 0.72)
        marker_size = max(12, int(self.cell_size * 0.3))
        for y in range(self.board_size):
            row_controls = []
            for x in range(self.board_size):
                position = Position(x, y)
                base_color = "#1B5E20" if (x + y) % 2 == 0 else "#215732"

                piece = ft.Container(
                    width=piece_size,
                    height=piece_size,
                    border_radius=piece_size / 2,
                    bgcolor=None,
                )
                marker = ft.Container(
                    width=marker_size,
                    height=marker_size,
                    border_radius=marker_size / 2,
                    bgcolor="rgba(235,235,235,0.88)",
                    opacity=0,
                )

                cell = ft.Container(
                    content=ft.Stack([piece, marker], alignment=ft.alignment.center),
                    width=self.cell_size,
                    height=self.cell_size,
                    bgcolor=base_color,
                    border=ft.border.all(1, "black"),
                    on_click=lambda e, position=position: self.on_click(position),
                    alignment=ft.alignment.center,
                    data=position,
                )

                self.pieces[position] = piece
                self.markers[position] = marker
                row_controls.append(cell)
            rows.append(ft.Row(row_controls, spacing=0, tight=True))

        self.board_grid = ft.Column(rows, spacing=0)
        return self.board_grid

    def render(self, board: Sequence[Sequence[Cell]]):
        for y, row in enumerate(board):
            for x, cell in enumerate(row):
                position = Position(x, y)
                if position not in self.pieces:
                    continue
                self._paint_piece(self.pieces[position], cell)
                self.markers[position].opacity = 1 if cell is Cell.PLAYABLE else 0
        if self.board_grid is not None and self.board_grid.page:
            self.board_grid.update()

    @staticmethod
    def _paint_piece(piece: ft.Container, cell: Cell):
        if cell is Cell.BLACK:
            piece.bgcolor = "#0f0f0f"
            piece.border = ft.border.all(1, "#4f4f4f")
        elif cell is Cell.WHITE:
            piece.bgcolor = "#f4f4f4"
            piece.border = ft.border.all(1, "#c5c5c5")
        else:
            piece.bgcolor = None
            piece.border = None
