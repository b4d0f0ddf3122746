"""Core domain layer — pure board logic with zero external dependencies.

Quick start::

    from tictactoe.core import Board, Mark

    board = Board.empty(3).with_mark(1, 1, Mark.X)
    print(board.completes_line(1, 1))
"""

from tictactoe.core.board import Board
from tictactoe.core.enums import Mark, MatchStatus, PlayerId

__all__ = [
    # Enums
    "Mark",
    "MatchStatus",
    "PlayerId",
    # Domain objects
    "Board",
]
