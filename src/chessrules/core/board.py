"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square, all_squares

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _check_on_board(sq: Square) -> None:
    if not sq.is_valid():
        raise IndexError(f"Square off the board: {sq!r}")


class Board:
    """Mutable 8x8 grid of optional pieces, indexed by :class:`Square`.

    Row 0 is Black's home rank, row 7 is White's.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        _check_on_board(sq)
        return self._grid[sq.row][sq.col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        _check_on_board(sq)
        self._grid[sq.row][sq.col] = piece

    def is_empty(self, sq: Square) -> bool:
        _check_on_board(sq)
        return self._grid[sq.row][sq.col] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` for every occupied square, row-major."""
        for sq in all_squares():
            piece = self._grid[sq.row][sq.col]
            if piece is not None:
                yield sq, piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` when it is absent."""
        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def reset(self) -> None:
        """Put every piece back on its starting square, all unmoved."""
        self.clear()
        for col, ptype in enumerate(_BACK_RANK):
            self._grid[0][col] = Piece(Color.BLACK, ptype)
            self._grid[1][col] = Piece(Color.BLACK, PieceType.PAWN)
            self._grid[6][col] = Piece(Color.WHITE, PieceType.PAWN)
            self._grid[7][col] = Piece(Color.WHITE, ptype)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset()
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Build a board from eight rows of piece letters, row 0 first.

        ``KQRBNP`` are white, ``kqrbnp`` black, ``.`` an empty square.
        Whitespace inside a row is ignored, so ``"r . . . k . . r"`` works.
        """
        lines = [line for line in diagram.strip().splitlines() if line.strip()]
        rows = ["".join(line.split()) for line in lines]
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Invalid diagram (must contain 8 rows): {diagram!r}")

        b = cls()
        for row, text in enumerate(rows):
            if len(text) != BOARD_SIZE:
                raise ValueError(f"Invalid diagram row width: {text!r}")
            for col, ch in enumerate(text):
                if ch != ".":
                    b._grid[row][col] = Piece.from_char(ch)
        return b

    # -- Dunder -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __str__(self) -> str:
        return "\n".join(
            "".join(str(p) if p else "." for p in row) for row in self._grid
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
