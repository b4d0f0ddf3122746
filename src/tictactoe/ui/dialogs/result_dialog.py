"""ResultDialog — end-of-match announcement."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QDialog, QLabel, QPushButton, QVBoxLayout, QWidget

from tictactoe.game.controller import MatchResult
from tictactoe.ui.panels.player_panel import format_elapsed


def result_headline(result: MatchResult) -> str:
    if result.is_draw or result.winner is None:
        return "Draw! Try again :)"
    return f"Player {result.winner} won. Congratulations!"


def result_detail(result: MatchResult) -> str:
    """Winning time line, empty for draws or when no time was recorded."""
    if result.is_draw or not result.winner_time:
        return ""
    return f"Winning time: {format_elapsed(result.winner_time)}"


class ResultDialog(QDialog):
    """Modal dialog showing who won (and how long they took) or a draw."""

    def __init__(self, result: MatchResult, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(340)
        self.setWindowTitle("Match over")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        self._result = result

        layout = QVBoxLayout(self)
        layout.setSpacing(10)

        self._headline = QLabel(result_headline(result))
        self._headline.setFont(QFont("Helvetica Neue", 16, QFont.Weight.Bold))
        self._headline.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._headline)

        self._detail = QLabel(result_detail(result))
        self._detail.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._detail.setVisible(bool(self._detail.text()))
        layout.addWidget(self._detail)

        self._btn_ok = QPushButton("OK")
        self._btn_ok.setObjectName("newGameButton")
        self._btn_ok.clicked.connect(self.accept)
        layout.addWidget(self._btn_ok, alignment=Qt.AlignmentFlag.AlignCenter)

    @property
    def result(self) -> MatchResult:
        return self._result

    def headline_text(self) -> str:
        return self._headline.text()

    def detail_text(self) -> str:
        return self._detail.text()

    @staticmethod
    def show_result(result: MatchResult, parent: QWidget | None = None) -> ResultDialog:
        """Open the dialog without blocking the event loop."""
        dlg = ResultDialog(result, parent)
        dlg.open()
        return dlg
