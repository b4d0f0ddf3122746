"""Abstract interfaces and configuration for the game layer.

Follows Dependency Inversion: the UI depends on these ABCs, not on the
concrete engine / clock implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tictactoe.game.state import MatchState

# ── Configuration ────────────────────────────────────────────────────────────

MIN_GRID_SIZE = 3
MAX_GRID_SIZE = 9
DEFAULT_GRID_SIZE = 3

TICK_INTERVAL_MS = 100  # match clock refresh period
RESULT_DELAY_MS = 2000  # final board stays visible before the result dialog


def clamp_grid_size(size: int) -> int:
    """Force *size* into the supported ``[MIN_GRID_SIZE, MAX_GRID_SIZE]`` range."""
    return max(MIN_GRID_SIZE, min(MAX_GRID_SIZE, int(size)))


@dataclass(frozen=True)
class GameSettings:
    """Session-wide knobs picked up by the presentation layer.

    Args:
        grid_size: Board side used for the first match.
        tick_interval_ms: Period of the match clock timer.
        result_delay_ms: Delay between the end of a match and the result dialog.
    """

    grid_size: int = DEFAULT_GRID_SIZE
    tick_interval_ms: int = TICK_INTERVAL_MS
    result_delay_ms: int = RESULT_DELAY_MS

    def __post_init__(self) -> None:
        object.__setattr__(self, "grid_size", clamp_grid_size(self.grid_size))
        object.__setattr__(self, "tick_interval_ms", max(1, self.tick_interval_ms))
        object.__setattr__(self, "result_delay_ms", max(0, self.result_delay_ms))

    @classmethod
    def default(cls) -> GameSettings:
        return cls()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IMatchClock(ABC):
    """Interface for the elapsed-time clock of a match."""

    @abstractmethod
    def start(self, now: float | None = None) -> None:
        """Start accruing time from *now*."""

    @abstractmethod
    def stop(self, now: float | None = None) -> float:
        """Stop the clock and return the unclaimed elapsed time."""

    @abstractmethod
    def tick(self, now: float | None = None) -> float:
        """Return the time elapsed since the previous tick and advance."""

    @abstractmethod
    def restart(self, now: float | None = None) -> None:
        """Move the reference point to *now* without returning a delta."""

    @property
    @abstractmethod
    def is_running(self) -> bool: ...


class IGameEngine(ABC):
    """Interface for the match orchestrator."""

    @abstractmethod
    def activate_cell(self, row: int, col: int, now: float | None = None) -> bool:
        """Place the current player's mark. Returns True if the move was applied."""

    @abstractmethod
    def start_new_match(
        self, grid_size: int | None = None, now: float | None = None
    ) -> MatchState:
        """Replace the current match with a fresh one."""

    @abstractmethod
    def set_pending_grid_size(self, size: int) -> int:
        """Stage a board size for the next match. Returns the clamped size."""

    @abstractmethod
    def tick(self, now: float | None = None) -> float:
        """Credit elapsed time to the player holding the turn."""
