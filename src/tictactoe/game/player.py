"""Per-player scoreboard records."""

from __future__ import annotations

from dataclasses import dataclass, field

from tictactoe.core.enums import Mark, PlayerId


@dataclass
class PlayerRecord:
    """Win count and elapsed time of one seat.

    ``wins`` only ever grows during a session; ``time_spent`` (seconds) is
    cleared at the start of every match.
    """

    player_id: PlayerId
    mark: Mark = field(init=False)
    wins: int = 0
    time_spent: float = 0.0

    def __post_init__(self) -> None:
        self.mark = self.player_id.mark

    @property
    def symbol(self) -> str:
        return self.mark.symbol

    def record_win(self) -> None:
        self.wins += 1

    def add_time(self, seconds: float) -> None:
        if seconds > 0:
            self.time_spent += seconds

    def reset_time(self) -> None:
        self.time_spent = 0.0


def new_player_records() -> dict[PlayerId, PlayerRecord]:
    """Fresh records for both seats, as held at session start."""
    return {pid: PlayerRecord(pid) for pid in PlayerId}
