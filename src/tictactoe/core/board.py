"""Board - mark placement on an N x N grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from tictactoe.core.enums import Mark

_SYMBOLS: dict[str, Mark] = {"": Mark.EMPTY, "X": Mark.X, "O": Mark.O}


class Board:
    """Immutable square grid of marks.

    Placing a mark returns a new board, so any snapshot handed out earlier
    keeps describing the position it was taken from.
    """

    __slots__ = ("_size", "_cells")

    def __init__(self, size: int, cells: Sequence[Mark] | None = None) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        if cells is None:
            cells = (Mark.EMPTY,) * (size * size)
        if len(cells) != size * size:
            raise ValueError(f"Expected {size * size} cells, got {len(cells)}")
        self._size = size
        self._cells: tuple[Mark, ...] = tuple(Mark(c) for c in cells)

    # -- Construction -------------------------------------------------------

    @classmethod
    def empty(cls, size: int) -> Board:
        return cls(size)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Mark | str | None]]) -> Board:
        """Build a board from nested rows of marks or "X"/"O"/"" symbols."""
        size = len(rows)
        cells: list[Mark] = []
        for row in rows:
            if len(row) != size:
                raise ValueError("Board rows must form a square grid")
            for value in row:
                if isinstance(value, Mark):
                    cells.append(value)
                else:
                    cells.append(_SYMBOLS[(value or "").strip().upper()])
        return cls(size, cells)

    # -- Element access -----------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    def __getitem__(self, key: tuple[int, int]) -> Mark:
        row, col = key
        return self._cells[row * self._size + col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    def is_empty(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self[row, col] == Mark.EMPTY

    def with_mark(self, row: int, col: int, mark: Mark) -> Board:
        """Return a copy of the board with *mark* placed at (row, col)."""
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self._size}x{self._size} board")
        cells = list(self._cells)
        cells[row * self._size + col] = mark
        return Board(self._size, cells)

    # -- Query helpers ------------------------------------------------------

    def rows(self) -> list[list[Mark]]:
        n = self._size
        return [list(self._cells[r * n : (r + 1) * n]) for r in range(n)]

    def cells(self) -> Iterator[tuple[int, int, Mark]]:
        """Yield ``(row, col, mark)`` for every cell in row-major order."""
        for index, mark in enumerate(self._cells):
            yield index // self._size, index % self._size, mark

    def empty_cells(self) -> list[tuple[int, int]]:
        return [(r, c) for r, c, mark in self.cells() if mark == Mark.EMPTY]

    def is_full(self) -> bool:
        return Mark.EMPTY not in self._cells

    def completes_line(self, row: int, col: int) -> bool:
        """Does the mark at (row, col) sit on a fully owned line?

        Only the row, the column and the diagonals through the cell are
        inspected: a new line can only be completed by the latest move.
        """
        mark = self[row, col]
        if mark == Mark.EMPTY:
            return False
        n = self._size
        if all(self[row, c] == mark for c in range(n)):
            return True
        if all(self[r, col] == mark for r in range(n)):
            return True
        if row == col and all(self[i, i] == mark for i in range(n)):
            return True
        if row + col == n - 1 and all(self[i, n - 1 - i] == mark for i in range(n)):
            return True
        return False

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    def __hash__(self) -> int:
        return hash((self._size, self._cells))

    def __str__(self) -> str:
        return "\n".join(
            " ".join(mark.symbol or "." for mark in row) for row in self.rows()
        )

    def __repr__(self) -> str:
        return f"Board(size={self._size})"
