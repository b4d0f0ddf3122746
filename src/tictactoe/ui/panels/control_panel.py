"""ControlPanel — grid size selector and new game button."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QComboBox, QHBoxLayout, QPushButton, QWidget

from tictactoe.game.interfaces import DEFAULT_GRID_SIZE, MAX_GRID_SIZE, MIN_GRID_SIZE


class ControlPanel(QWidget):
    """Stages the board size for the next match and starts it.

    Changing the combo box only emits ``grid_size_changed``; the current
    match keeps its board until ``new_game_clicked`` is acted upon.
    """

    grid_size_changed = pyqtSignal(int)
    new_game_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(12)

        self._combo_size = QComboBox()
        self._combo_size.setFont(QFont("Helvetica Neue", 11))
        for size in range(MIN_GRID_SIZE, MAX_GRID_SIZE + 1):
            self._combo_size.addItem(f"{size}×{size}", size)
        self.set_grid_size(DEFAULT_GRID_SIZE)
        self._combo_size.currentIndexChanged.connect(self._on_size_index_changed)
        layout.addWidget(self._combo_size)

        self._btn_new = QPushButton("New Game")
        self._btn_new.setObjectName("newGameButton")
        self._btn_new.setMinimumHeight(36)
        self._btn_new.clicked.connect(self.new_game_clicked)
        layout.addWidget(self._btn_new)

    def grid_size(self) -> int:
        return int(self._combo_size.currentData())

    def set_grid_size(self, size: int) -> None:
        index = self._combo_size.findData(size)
        if index >= 0:
            self._combo_size.setCurrentIndex(index)

    def _on_size_index_changed(self, _index: int) -> None:
        self.grid_size_changed.emit(self.grid_size())
