"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QCloseEvent, QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QVBoxLayout, QWidget

from tictactoe.core.enums import Mark, PlayerId
from tictactoe.game.controller import GameEngine, MatchResult
from tictactoe.game.interfaces import GameSettings
from tictactoe.game.state import MatchState, Session
from tictactoe.ui.board.board_widget import BoardWidget
from tictactoe.ui.dialogs.result_dialog import ResultDialog
from tictactoe.ui.panels.control_panel import ControlPanel
from tictactoe.ui.panels.player_panel import PlayerPanel

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window.

    Owns the session's :class:`GameEngine` and the two timers the core
    leaves to the host: the periodic clock tick and the delayed result
    dialog.
    """

    def __init__(self, settings: GameSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Tic-Tac-Toe")
        self.setMinimumSize(640, 560)

        self._settings = settings or GameSettings.default()
        self._engine = GameEngine(Session.create(self._settings.grid_size))
        self._result_dialog: ResultDialog | None = None

        self._clock_timer = QTimer(self)
        self._clock_timer.setInterval(self._settings.tick_interval_ms)
        self._clock_timer.timeout.connect(self._on_clock_tick)

        self._result_timer = QTimer(self)
        self._result_timer.setSingleShot(True)
        self._result_timer.timeout.connect(self._on_result_timeout)
        self._pending_result: MatchResult | None = None

        self._setup_ui()
        self._connect_signals()
        self._connect_game_events()

        self._control_panel.set_grid_size(self._engine.pending_grid_size)
        self._after_new_match(self._engine.state)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(24, 24, 24, 24)
        root.setSpacing(16)

        # Header: title + controls
        header = QHBoxLayout()
        title = QLabel("Tic-Tac-Toe")
        title.setFont(QFont("Helvetica Neue", 22, QFont.Weight.Bold))
        header.addWidget(title)
        header.addStretch(1)
        self._control_panel = ControlPanel()
        header.addWidget(self._control_panel)
        root.addLayout(header)

        # Scoreboard: player one | totals | player two
        scoreboard = QHBoxLayout()
        self._player_panels = {pid: PlayerPanel(pid) for pid in PlayerId}
        scoreboard.addWidget(self._player_panels[PlayerId.ONE])

        centre = QVBoxLayout()
        self._total_label = QLabel()
        self._turn_label = QLabel()
        for label in (self._total_label, self._turn_label):
            label.setFont(QFont("Helvetica Neue", 13, QFont.Weight.DemiBold))
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            centre.addWidget(label)
        scoreboard.addLayout(centre, stretch=1)

        scoreboard.addWidget(self._player_panels[PlayerId.TWO])
        root.addLayout(scoreboard)

        # Board (center)
        self._board_widget = BoardWidget()
        root.addWidget(self._board_widget, alignment=Qt.AlignmentFlag.AlignCenter)
        root.addStretch(1)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_widget.cell_activated.connect(self._on_cell_activated)
        self._control_panel.grid_size_changed.connect(self._on_grid_size_changed)
        self._control_panel.new_game_clicked.connect(self._on_new_game)

    def _connect_game_events(self) -> None:
        """Subscribe to GameEngine callbacks (idempotent)."""
        events = self._engine.events
        self._replace_callback(events.on_move, self._on_game_move)
        self._replace_callback(events.on_match_over, self._on_match_over)
        self._replace_callback(events.on_new_match, self._after_new_match)

    def _disconnect_game_events(self) -> None:
        """Detach this window from GameEngine callbacks."""
        events = self._engine.events
        self._remove_callback(events.on_move, self._on_game_move)
        self._remove_callback(events.on_match_over, self._on_match_over)
        self._remove_callback(events.on_new_match, self._after_new_match)

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> GameEngine:
        return self._engine

    @property
    def clock_timer(self) -> QTimer:
        return self._clock_timer

    @property
    def result_timer(self) -> QTimer:
        return self._result_timer

    # ── User actions ─────────────────────────────────────────────────────

    def _on_cell_activated(self, row: int, col: int) -> None:
        """Handle a click forwarded by the board."""
        self._engine.activate_cell(row, col)

    def _on_grid_size_changed(self, size: int) -> None:
        self._engine.set_pending_grid_size(size)

    def _on_new_game(self) -> None:
        self._engine.start_new_match()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._clock_timer.stop()
        self._result_timer.stop()
        self._disconnect_game_events()
        super().closeEvent(event)

    # ── Game event callbacks ─────────────────────────────────────────────

    def _after_new_match(self, state: MatchState) -> None:
        """Sync UI after a new match starts."""
        self._result_timer.stop()
        self._pending_result = None
        if self._result_dialog is not None:
            self._result_dialog.close()
            self._result_dialog.deleteLater()
            self._result_dialog = None
        self._board_widget.set_board(state.board, interactive=True)
        self._refresh_scoreboard()
        if state.clock_active:
            self._clock_timer.start()

    def _on_game_move(self, _row: int, _col: int, _mark: Mark, state: MatchState) -> None:
        """Called after every accepted move."""
        self._board_widget.set_board(state.board, interactive=not state.is_game_over)
        self._refresh_scoreboard()

    def _on_match_over(self, result: MatchResult) -> None:
        self._clock_timer.stop()
        self._refresh_scoreboard()
        # Keep the final board on screen for a moment before announcing.
        self._pending_result = result
        self._result_timer.start(self._settings.result_delay_ms)

    def _on_clock_tick(self) -> None:
        self._engine.tick()
        self._refresh_scoreboard()

    def _on_result_timeout(self) -> None:
        result, self._pending_result = self._pending_result, None
        if result is not None:
            self._show_result(result)

    def _show_result(self, result: MatchResult) -> None:
        if not self._engine.is_current(result):
            _LOGGER.debug("Dropping stale result for match %d", result.match_id)
            return
        self._result_dialog = ResultDialog.show_result(result, self)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _refresh_scoreboard(self) -> None:
        state = self._engine.state
        for pid, panel in self._player_panels.items():
            panel.update_record(self._engine.player(pid))
            panel.set_active(state.current_player == pid)
        self._total_label.setText(f"Total Games: {state.total_games}")
        if state.is_game_over:
            self._turn_label.setText("")
        else:
            self._turn_label.setText(f"Player {state.current_player}'s turn")
