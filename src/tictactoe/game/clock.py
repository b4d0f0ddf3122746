"""Match clock measuring how long each player holds the turn."""

from __future__ import annotations

import time

from tictactoe.game.interfaces import IMatchClock


class MatchClock(IMatchClock):
    """Elapsed-time source for the active player.

    The clock only measures; the engine decides whom to credit. Every call
    accepts an explicit ``now`` (seconds, monotonic scale) so a scheduler
    or a test can drive it; ``time.monotonic()`` is used otherwise.
    """

    __slots__ = ("_last_tick", "_running")

    def __init__(self) -> None:
        self._last_tick: float = 0.0
        self._running: bool = False

    # ── IMatchClock implementation ───────────────────────────────────────

    def start(self, now: float | None = None) -> None:
        self._last_tick = self._now(now)
        self._running = True

    def stop(self, now: float | None = None) -> float:
        if not self._running:
            return 0.0
        elapsed = self.tick(now)
        self._running = False
        return elapsed

    def tick(self, now: float | None = None) -> float:
        if not self._running:
            return 0.0
        current = self._now(now)
        elapsed = max(0.0, current - self._last_tick)
        self._last_tick = current
        return elapsed

    def restart(self, now: float | None = None) -> None:
        self._last_tick = self._now(now)

    @property
    def is_running(self) -> bool:
        return self._running

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def last_tick(self) -> float:
        return self._last_tick

    @staticmethod
    def _now(now: float | None) -> float:
        return time.monotonic() if now is None else now
