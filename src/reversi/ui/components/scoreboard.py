from typing import Dict

import flet as ft

from reversi.engine.cell import Cell


class ScoreboardComponent:
    def __init__(self, height: float = 82):
        self.height = height
        self.black_score_text = ft.Text("2", size=26, weight=ft.FontWeight.BOLD, color="#111111")
        self.white_score_text = ft.Text("2", size=26, weight=ft.FontWeight.BOLD, color="#111111")
        self.status_text = ft.Text("", size=13, color="#333333", weight=ft.FontWeight.BOLD)
        self.container = None

    def create(self) -> ft.Container:
        header_row = ft.Row(
            [
                ft.Text("BLACK ●", size=11, color="#666666"),
                self.status_text,
                ft.Text("○ WHITE", size=11, color="#666666"),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
        score_row = ft.Row(
            [self.black_score_text, self.white_score_text],
            spacing=40,
            alignment=ft.MainAxisAlignment.CENTER,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

        self.container = ft.Container(
            content=ft.Column(
                [header_row, score_row],
                spacing=4,
                horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
            ),
            padding=ft.padding.symmetric(vertical=6, horizontal=14),
            bgcolor="#f9f9f9",
            border_radius=14,
            border=ft.border.all(1, "#e0e0e0"),
            height=self.height,
            alignment=ft.alignment.center,
        )
        return self.container

    def update_scores(self, scores: Dict[Cell, int]):
        self.black_score_text.value = str(scores[Cell.BLACK])
        self.white_score_text.value = str(scores[Cell.WHITE])
        for text in (self.black_score_text, self.white_score_text):
            if text.page:
                text.update()

    def set_status(self, message: str, color: str = "#333333"):
        self.status_text.value = message
        self.status_text.color = color
        if self.status_text.page:
            self.status_text.update()
