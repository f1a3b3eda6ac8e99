"""Board - mark placement on a 3x3 grid."""

from __future__ import annotations

from collections.abc import Iterator

from tictactoe.core.enums import Cell

SIZE = 3

Coord = tuple[int, int]

# Rows, columns, main diagonal, anti-diagonal.
WINNING_LINES: tuple[tuple[Coord, Coord, Coord], ...] = (
    *(((0, y), (1, y), (2, y)) for y in range(SIZE)),
    *(((x, 0), (x, 1), (x, 2)) for x in range(SIZE)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class Board:
    """Mutable 9-cell board indexed by ``(x, y)`` with x, y in [0, 2]."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Cell]] = [[Cell.FREE] * SIZE for _ in range(SIZE)]

    @staticmethod
    def _check(x: int, y: int) -> None:
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            raise IndexError(f"Cell out of range: ({x}, {y})")

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coord) -> Cell:
        x, y = coord
        self._check(x, y)
        return self._cells[x][y]

    def __setitem__(self, coord: Coord, cell: Cell) -> None:
        x, y = coord
        self._check(x, y)
        self._cells[x][y] = cell

    def __iter__(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(x, y, cell)`` with x as the outer loop."""
        for x in range(SIZE):
            for y in range(SIZE):
                yield x, y, self._cells[x][y]

    def is_free(self, x: int, y: int) -> bool:
        return self[x, y] == Cell.FREE

    # -- Query helpers ------------------------------------------------------

    def is_full(self) -> bool:
        return all(cell != Cell.FREE for _, _, cell in self)

    def has_line(self, mark: Cell) -> bool:
        """Return True if *mark* fills any row, column or diagonal."""
        for line in WINNING_LINES:
            if all(self._cells[x][y] == mark for x, y in line):
                return True
        return False

    def free_count(self) -> int:
        return sum(1 for _, _, cell in self if cell == Cell.FREE)

    # -- Mutation -----------------------------------------------------------

    def reset(self) -> None:
        for column in self._cells:
            column[:] = [Cell.FREE] * SIZE

    def copy(self) -> Board:
        b = Board()
        b._cells = [column[:] for column in self._cells]
        return b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(
            " ".join(str(self._cells[x][y]) for x in range(SIZE)) for y in range(SIZE)
        )

    def __repr__(self) -> str:
        return f"Board({str(self)!r})"
