"""Core enumerations for the tic-tac-toe domain."""

from __future__ import annotations

from enum import IntEnum


class Mark(IntEnum):
    """Content of a single board cell."""

    EMPTY = 0
    X = 1
    O = 2  # noqa: E741

    @property
    def symbol(self) -> str:
        return "" if self is Mark.EMPTY else self.name

    def __str__(self) -> str:
        return self.symbol


class PlayerId(IntEnum):
    """Seat of a player. Player one always opens the match."""

    ONE = 1
    TWO = 2

    @property
    def opposite(self) -> PlayerId:
        return PlayerId.TWO if self is PlayerId.ONE else PlayerId.ONE

    @property
    def mark(self) -> Mark:
        return Mark.X if self is PlayerId.ONE else Mark.O

    def __str__(self) -> str:
        return str(self.value)


class MatchStatus(IntEnum):
    """Lifecycle of one match. WON and DRAW are terminal."""

    IN_PROGRESS = 0
    WON = 1
    DRAW = 2
