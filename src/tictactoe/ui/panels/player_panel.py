"""PlayerPanel — scoreboard card for one player."""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from tictactoe.core.enums import PlayerId
from tictactoe.game.player import PlayerRecord
from tictactoe.ui.styles.theme import BoardTheme


def format_elapsed(seconds: float) -> str:
    """``m:ss`` rendering of an elapsed duration, truncated to whole seconds."""
    total = int(max(0.0, seconds))
    return f"{total // 60}:{total % 60:02d}"


class PlayerPanel(QFrame):
    """Shows symbol, wins and time spent; highlighted while on turn."""

    def __init__(self, player_id: PlayerId, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._player_id = player_id
        self._theme = BoardTheme.default()
        self._active = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(4)

        self._title = QLabel(f"Player {player_id}")
        self._title.setFont(QFont("Helvetica Neue", 14, QFont.Weight.Bold))
        layout.addWidget(self._title)

        self._symbol_label = QLabel()
        self._wins_label = QLabel()
        self._time_label = QLabel()
        for label in (self._symbol_label, self._wins_label, self._time_label):
            layout.addWidget(label)

        self._apply_style()

    @property
    def player_id(self) -> PlayerId:
        return self._player_id

    @property
    def is_active(self) -> bool:
        return self._active

    def update_record(self, record: PlayerRecord) -> None:
        self._symbol_label.setText(f"Symbol: {record.symbol}")
        self._wins_label.setText(f"Wins: {record.wins}")
        self._time_label.setText(f"Time: {format_elapsed(record.time_spent)}")

    def time_text(self) -> str:
        return self._time_label.text()

    def wins_text(self) -> str:
        return self._wins_label.text()

    def set_active(self, active: bool) -> None:
        if active == self._active:
            return
        self._active = active
        self._apply_style()

    def _apply_style(self) -> None:
        if self._active:
            self.setStyleSheet(
                f"PlayerPanel {{ background-color: {self._theme.active_card.name()}; "
                f"border: 2px solid {self._theme.active_border.name()}; border-radius: 8px; }}"
            )
            return
        self.setStyleSheet(
            f"PlayerPanel {{ background-color: {self._theme.idle_card.name()}; "
            "border: 2px solid transparent; border-radius: 8px; }"
        )
