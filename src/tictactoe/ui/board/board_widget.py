"""BoardWidget — clickable N x N grid of cells."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from tictactoe.core.board import Board
from tictactoe.core.enums import Mark
from tictactoe.ui.styles.theme import CELL_SIZE, BoardTheme


class _Cell(QPushButton):
    """A single board square."""

    def __init__(self, row: int, col: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.row = row
        self.col = col
        self.setFixedSize(CELL_SIZE, CELL_SIZE)
        self.setFont(QFont("Helvetica Neue", 28, QFont.Weight.Bold))
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

    def show_mark(self, mark: Mark, theme: BoardTheme, clickable: bool) -> None:
        self.setText(mark.symbol)
        self.setEnabled(clickable)
        color = theme.mark_color(mark).name()
        hover = ""
        if clickable:
            hover = f"QPushButton:hover {{ background: {theme.cell_hover.name()}; }}"
        self.setStyleSheet(
            f"QPushButton {{ background: {theme.cell_background.name()}; color: {color}; "
            f"border: none; border-radius: 8px; }}"
            f"QPushButton:disabled {{ color: {color}; }}"
            f"{hover}"
        )


class BoardWidget(QWidget):
    """Renders a :class:`Board` and forwards clicks as ``cell_activated``.

    Filled cells and every cell of a finished match are disabled, so the
    engine only ever sees clicks it could accept.
    """

    cell_activated = pyqtSignal(int, int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._cells: list[_Cell] = []
        self._size = 0

        self._layout = QGridLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(8)

    @property
    def grid_size(self) -> int:
        return self._size

    def cell(self, row: int, col: int) -> _Cell:
        return self._cells[row * self._size + col]

    def set_board(self, board: Board, interactive: bool = True) -> None:
        if board.size != self._size:
            self._rebuild(board.size)
        for row, col, mark in board.cells():
            clickable = interactive and mark == Mark.EMPTY
            self.cell(row, col).show_mark(mark, self._theme, clickable)

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme

    def _rebuild(self, size: int) -> None:
        for cell in self._cells:
            self._layout.removeWidget(cell)
            cell.deleteLater()
        self._cells = []
        self._size = size
        for row in range(size):
            for col in range(size):
                cell = _Cell(row, col, self)
                cell.clicked.connect(
                    lambda _checked=False, r=row, c=col: self.cell_activated.emit(r, c)
                )
                self._layout.addWidget(cell, row, col)
                self._cells.append(cell)
