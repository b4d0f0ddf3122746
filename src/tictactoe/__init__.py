"""Two-player tic-tac-toe with configurable board size, clocks and scoreboard."""

__version__ = "0.1.0"
