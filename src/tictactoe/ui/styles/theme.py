"""Visual theme constants and QSS styles for the game window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from tictactoe.core.enums import Mark


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board cells and player cards."""

    cell_background: QColor
    cell_hover: QColor
    x_mark: QColor
    o_mark: QColor
    active_card: QColor  # background of the player holding the turn
    active_border: QColor
    idle_card: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            cell_background=QColor(255, 255, 255),
            cell_hover=QColor(249, 250, 251),
            x_mark=QColor(59, 130, 246),  # blue
            o_mark=QColor(239, 68, 68),  # red
            active_card=QColor(219, 234, 254),
            active_border=QColor(59, 130, 246),
            idle_card=QColor(243, 244, 246),
        )

    def mark_color(self, mark: Mark) -> QColor:
        return self.x_mark if mark == Mark.X else self.o_mark


CELL_SIZE = 80  # px, side of one board cell

# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #f3f4f6;
}

QLabel {
    color: #111827;
    font-family: "Helvetica Neue", sans-serif;
}

QPushButton#newGameButton {
    background: #3b82f6;
    color: white;
    border: none;
    border-radius: 4px;
    padding: 8px 16px;
    font-size: 13px;
}
QPushButton#newGameButton:hover {
    background: #2563eb;
}

QComboBox {
    padding: 6px;
    border: 1px solid #d1d5db;
    border-radius: 4px;
}
"""
