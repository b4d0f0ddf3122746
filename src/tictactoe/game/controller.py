"""GameEngine — the central orchestrator of a tic-tac-toe session.

Coordinates: Session (match state + player records), MatchClock.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tictactoe.core.enums import Mark, MatchStatus, PlayerId
from tictactoe.game.clock import MatchClock
from tictactoe.game.interfaces import IGameEngine, clamp_grid_size
from tictactoe.game.player import PlayerRecord
from tictactoe.game.state import MatchState, Session

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Payload of the match-over notification."""

    match_id: int
    winner: PlayerId | None
    is_draw: bool
    winner_time: float | None = None  # seconds


MoveCallback = Callable[[int, int, Mark, MatchState], None]  # row, col, mark, state
MatchOverCallback = Callable[[MatchResult], None]
NewMatchCallback = Callable[[MatchState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_match_over: list[MatchOverCallback] = field(default_factory=list)
    on_new_match: list[NewMatchCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class GameEngine(IGameEngine):
    """Validates cell activations, detects wins and draws, keeps the clock.

    Illegal input (occupied cell, finished match, out-of-range size) is
    absorbed silently: moves return ``False`` and sizes are clamped.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread); clicks and timer ticks arrive one at a time.
    """

    __slots__ = ("_session", "_clock", "events")

    def __init__(self, session: Session | None = None, now: float | None = None) -> None:
        self._session = session if session is not None else Session.create()
        self._clock = MatchClock()
        self.events = GameEvents()
        if self._session.match.clock_active:
            self._clock.start(now)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> Session:
        return self._session

    @property
    def state(self) -> MatchState:
        return self._session.match

    @property
    def clock(self) -> MatchClock:
        return self._clock

    @property
    def players(self) -> dict[PlayerId, PlayerRecord]:
        return self._session.players

    @property
    def current_player(self) -> PlayerRecord:
        return self.player(self.state.current_player)

    @property
    def pending_grid_size(self) -> int:
        return self._session.pending_grid_size

    def player(self, player_id: PlayerId) -> PlayerRecord:
        return self._session.players[player_id]

    # ── IGameEngine impl ─────────────────────────────────────────────────

    def activate_cell(self, row: int, col: int, now: float | None = None) -> bool:
        state = self.state
        if state.is_game_over:
            _LOGGER.debug("Ignoring (%d, %d): match %d is over", row, col, state.match_id)
            return False
        if not state.board.is_empty(row, col):
            _LOGGER.debug("Ignoring (%d, %d): cell unavailable", row, col)
            return False

        mover = state.current_player
        # Time up to the click belongs to the player who made it.
        self.player(mover).add_time(self._clock.tick(now))

        mark = mover.mark
        state.board = state.board.with_mark(row, col, mark)

        if state.board.completes_line(row, col):
            self._finish(MatchStatus.WON, mover, now)
        elif state.board.is_full():
            self._finish(MatchStatus.DRAW, None, now)
        else:
            state.current_player = mover.opposite
            self._clock.restart(now)

        self._emit_move(row, col, mark)
        if state.is_game_over:
            self._emit_match_over(self._result())
        return True

    def start_new_match(
        self, grid_size: int | None = None, now: float | None = None
    ) -> MatchState:
        size = clamp_grid_size(
            self._session.pending_grid_size if grid_size is None else grid_size
        )
        previous = self.state
        total_games = previous.total_games + (1 if previous.is_game_over else 0)

        self._session.pending_grid_size = size
        self._session.match = MatchState.fresh(
            size,
            total_games=total_games,
            match_id=previous.match_id + 1,
        )
        for record in self.players.values():
            record.reset_time()
        self._clock.start(now)

        _LOGGER.info(
            "Match %d started on a %dx%d board (%d completed)",
            self.state.match_id,
            size,
            size,
            total_games,
        )
        self._emit_new_match()
        return self.state

    def set_pending_grid_size(self, size: int) -> int:
        self._session.pending_grid_size = clamp_grid_size(size)
        return self._session.pending_grid_size

    def tick(self, now: float | None = None) -> float:
        if not self.state.clock_active:
            return 0.0
        elapsed = self._clock.tick(now)
        self.current_player.add_time(elapsed)
        return elapsed

    # ── Queries ──────────────────────────────────────────────────────────

    def is_current(self, result: MatchResult) -> bool:
        """Does *result* still describe the match on the board?"""
        return result.match_id == self.state.match_id

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(
        self, status: MatchStatus, winner: PlayerId | None, now: float | None
    ) -> None:
        state = self.state
        state.status = status
        state.winner = winner
        state.clock_active = False
        self._clock.stop(now)
        if winner is not None:
            self.player(winner).record_win()
            _LOGGER.info("Match %d won by player %s", state.match_id, winner)
        else:
            _LOGGER.info("Match %d ended in a draw", state.match_id)

    def _result(self) -> MatchResult:
        state = self.state
        winner_time = None
        if state.winner is not None:
            winner_time = self.player(state.winner).time_spent
        return MatchResult(
            match_id=state.match_id,
            winner=state.winner,
            is_draw=state.is_draw,
            winner_time=winner_time,
        )

    def _emit_move(self, row: int, col: int, mark: Mark) -> None:
        for cb in self.events.on_move:
            cb(row, col, mark, self.state)

    def _emit_match_over(self, result: MatchResult) -> None:
        for cb in self.events.on_match_over:
            cb(result)

    def _emit_new_match(self) -> None:
        for cb in self.events.on_new_match:
            cb(self.state)
