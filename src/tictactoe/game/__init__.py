"""Game management layer — engine, player records, clock, match state.

Quick start::

    from tictactoe.game import GameEngine

    engine = GameEngine()
    engine.activate_cell(0, 0)
    engine.set_pending_grid_size(4)
    engine.start_new_match()
"""

from tictactoe.game.clock import MatchClock
from tictactoe.game.controller import GameEngine, GameEvents, MatchResult
from tictactoe.game.interfaces import (
    DEFAULT_GRID_SIZE,
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
    RESULT_DELAY_MS,
    TICK_INTERVAL_MS,
    GameSettings,
    IGameEngine,
    IMatchClock,
    clamp_grid_size,
)
from tictactoe.game.player import PlayerRecord
from tictactoe.game.state import MatchState, Session

__all__ = [
    # Configuration
    "DEFAULT_GRID_SIZE",
    "MAX_GRID_SIZE",
    "MIN_GRID_SIZE",
    "RESULT_DELAY_MS",
    "TICK_INTERVAL_MS",
    "GameSettings",
    "clamp_grid_size",
    # Interfaces
    "IGameEngine",
    "IMatchClock",
    # Concrete
    "GameEngine",
    "GameEvents",
    "MatchClock",
    "MatchResult",
    "MatchState",
    "PlayerRecord",
    "Session",
]
