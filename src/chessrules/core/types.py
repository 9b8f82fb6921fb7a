"""Square value type and coordinate helpers.

Board layout (row-major, row 0 is Black's home rank):
    row 0: a8 b8 ... h8
    row 1: a7 b7 ... h7
    ...
    row 7: a1 b1 ... h1
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Square:
    """A (row, col) coordinate on the 8x8 grid."""

    row: int
    col: int

    def is_valid(self) -> bool:
        """Both coordinates lie in ``[0, 8)``."""
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def offset(self, d_row: int, d_col: int) -> Square:
        """Square shifted by the given deltas (may be off-board)."""
        return Square(self.row + d_row, self.col + d_col)

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``Square(7, 4)`` → ``'e1'``."""
        return chr(ord("a") + self.col) + str(BOARD_SIZE - self.row)

    def __str__(self) -> str:
        return self.name


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` → ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


def all_squares() -> Iterator[Square]:
    """Every square in row-major order, starting at a8."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Square(row, col)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, c) for c in range(8))
