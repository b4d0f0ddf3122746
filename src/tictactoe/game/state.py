"""Match state and the session that owns it."""

from __future__ import annotations

from dataclasses import dataclass, field

from tictactoe.core.board import Board
from tictactoe.core.enums import MatchStatus, PlayerId
from tictactoe.game.interfaces import DEFAULT_GRID_SIZE, clamp_grid_size
from tictactoe.game.player import PlayerRecord, new_player_records


@dataclass
class MatchState:
    """Everything that describes the match currently on the board.

    This is a pure data class — no timers, no UI. A new match never resets
    an existing instance; it is replaced by :meth:`fresh`.
    """

    board: Board
    current_player: PlayerId = PlayerId.ONE
    status: MatchStatus = MatchStatus.IN_PROGRESS
    winner: PlayerId | None = None
    clock_active: bool = True
    total_games: int = 0
    match_id: int = 0

    @classmethod
    def fresh(cls, grid_size: int, total_games: int = 0, match_id: int = 0) -> MatchState:
        return cls(
            board=Board.empty(grid_size),
            total_games=total_games,
            match_id=match_id,
        )

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def grid_size(self) -> int:
        return self.board.size

    @property
    def is_game_over(self) -> bool:
        return self.status != MatchStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == MatchStatus.DRAW


@dataclass
class Session:
    """State held for the lifetime of the application.

    Owns the current match, both player records and the board size staged
    for the next match.
    """

    match: MatchState = field(default_factory=lambda: MatchState.fresh(DEFAULT_GRID_SIZE))
    players: dict[PlayerId, PlayerRecord] = field(default_factory=new_player_records)
    pending_grid_size: int = DEFAULT_GRID_SIZE

    @classmethod
    def create(cls, grid_size: int = DEFAULT_GRID_SIZE) -> Session:
        size = clamp_grid_size(grid_size)
        return cls(match=MatchState.fresh(size), pending_grid_size=size)
