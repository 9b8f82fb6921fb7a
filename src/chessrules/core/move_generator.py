"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square, all_squares

if TYPE_CHECKING:
    from chessrules.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Row deltas and special ranks, indexed by Color.
_PAWN_DIR: tuple[int, int] = (-1, 1)
_PAWN_START_ROW: tuple[int, int] = (6, 1)
_PROMOTION_ROW: tuple[int, int] = (0, 7)
_BACK_ROW: tuple[int, int] = (7, 0)

_KING_HOME_COL = 4
_KINGSIDE_COL = 6
_QUEENSIDE_COL = 2


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class MoveGenerator:
    """Generates moves for pieces of a given :class:`Position`.

    Legality is decided on clones of the position; the position passed in
    is never mutated.
    """

    __slots__ = ("_pos", "_board", "_dispatch")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board
        self._dispatch: dict[PieceType, Callable[[Square, Piece, list[Move]], None]] = {
            PieceType.PAWN: self._gen_pawn,
            PieceType.KNIGHT: self._gen_knight,
            PieceType.BISHOP: self._gen_bishop,
            PieceType.ROOK: self._gen_rook,
            PieceType.QUEEN: self._gen_queen,
            PieceType.KING: self._gen_king,
        }

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, sq: Square) -> list[Move]:
        """Strictly legal moves for the piece on *sq*.

        Empty when *sq* is off-board, empty, or holds a piece that does not
        belong to the side to move.
        """
        if not sq.is_valid():
            return []
        piece = self._board[sq]
        if piece is None or piece.color != self._pos.side_to_move:
            return []

        return [
            move
            for move in self.generate_pseudo_legal_moves(sq)
            if not self._leaves_king_in_check(move, piece.color)
        ]

    def generate_all_legal_moves(self) -> list[Move]:
        """All legal moves for the side to move, in board scan order."""
        moves: list[Move] = []
        for sq in self._board.all_pieces(self._pos.side_to_move):
            moves.extend(self.generate_legal_moves(sq))
        return moves

    def has_legal_move(self) -> bool:
        """Whether the side to move has at least one legal move."""
        return any(
            self.generate_legal_moves(sq)
            for sq in self._board.all_pieces(self._pos.side_to_move)
        )

    def generate_pseudo_legal_moves(self, sq: Square) -> list[Move]:
        """Geometrically valid moves for the piece on *sq* (may expose the king)."""
        if not sq.is_valid():
            return []
        piece = self._board[sq]
        if piece is None:
            return []
        moves: list[Move] = []
        self._dispatch[piece.piece_type](sq, piece, moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A side without a king is never in check.
        """
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Could any piece of *by_color* reach *sq* this turn?

        Turn order and the attacker's own king safety are ignored.
        """
        for from_sq, piece in self._board.occupied():
            if piece.color == by_color and self._can_attack(from_sq, piece, sq):
                return True
        return False

    # -- Attack helpers (private) ------------------------------------------

    def _can_attack(self, from_sq: Square, piece: Piece, target: Square) -> bool:
        dr = target.row - from_sq.row
        dc = target.col - from_sq.col
        if dr == 0 and dc == 0:
            return False

        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            return dr == _PAWN_DIR[piece.color] and abs(dc) == 1
        if ptype == PieceType.KNIGHT:
            return (abs(dr), abs(dc)) in ((1, 2), (2, 1))
        if ptype == PieceType.KING:
            return abs(dr) <= 1 and abs(dc) <= 1

        diagonal = abs(dr) == abs(dc)
        straight = dr == 0 or dc == 0
        if ptype == PieceType.BISHOP and not diagonal:
            return False
        if ptype == PieceType.ROOK and not straight:
            return False
        if ptype == PieceType.QUEEN and not (diagonal or straight):
            return False
        return self._is_path_clear(from_sq, target)

    def _is_path_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """No piece strictly between two aligned squares."""
        step_r = _sign(to_sq.row - from_sq.row)
        step_c = _sign(to_sq.col - from_sq.col)
        sq = from_sq.offset(step_r, step_c)
        while sq != to_sq:
            if self._board[sq] is not None:
                return False
            sq = sq.offset(step_r, step_c)
        return True

    # -- Legality filter (private) -----------------------------------------

    def _leaves_king_in_check(self, move: Move, color: Color) -> bool:
        probe = self._pos.copy()
        probe.apply_move(move)
        return MoveGenerator(probe).is_in_check(color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        color = piece.color
        direction = _PAWN_DIR[color]
        promotion_row = _PROMOTION_ROW[color]

        one_step = sq.offset(direction, 0)
        if one_step.is_valid() and board.is_empty(one_step):
            moves.append(
                Move(sq, one_step, is_promotion=one_step.row == promotion_row)
            )
            if sq.row == _PAWN_START_ROW[color]:
                two_step = sq.offset(2 * direction, 0)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for dc in (-1, 1):
            cap_sq = sq.offset(direction, dc)
            if not cap_sq.is_valid():
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(
                    Move(sq, cap_sq, is_promotion=cap_sq.row == promotion_row)
                )
            elif cap_sq == self._pos.en_passant:
                moves.append(Move(sq, cap_sq, is_en_passant=True))

    def _gen_steps(
        self,
        sq: Square,
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for dr, dc in offsets:
            to_sq = sq.offset(dr, dc)
            if not to_sq.is_valid():
                continue
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for dr, dc in directions:
            to_sq = sq.offset(dr, dc)
            while to_sq.is_valid():
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    to_sq = to_sq.offset(dr, dc)
                    continue
                if target.color != piece.color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_knight(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        self._gen_steps(sq, piece, KNIGHT_OFFSETS, moves)

    def _gen_bishop(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(sq, piece, BISHOP_DIRS, moves)

    def _gen_rook(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(sq, piece, ROOK_DIRS, moves)

    def _gen_queen(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(sq, piece, QUEEN_DIRS, moves)

    def _gen_king(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        self._gen_steps(sq, piece, KING_OFFSETS, moves)
        self._gen_castling(sq, piece, moves)

    def _gen_castling(self, king_sq: Square, king: Piece, moves: list[Move]) -> None:
        row = _BACK_ROW[king.color]
        if king.has_moved or king_sq != Square(row, _KING_HOME_COL):
            return
        if self.is_in_check(king.color):
            return

        # Probe transit squares with the king lifted off its origin so it
        # cannot block a slider aimed along the back rank.
        probe = self._pos.copy()
        probe.board[king_sq] = None
        probe_gen = MoveGenerator(probe)
        opponent = king.color.opposite

        # (rook col, cols that must be empty, cols that must be safe, king target col)
        sides = (
            (7, (5, 6), (5, 6), _KINGSIDE_COL),
            (0, (1, 2, 3), (3, 2), _QUEENSIDE_COL),
        )
        for rook_col, empty_cols, safe_cols, king_to_col in sides:
            if not self._can_castle_with(Square(row, rook_col), king.color):
                continue
            if any(not self._board.is_empty(Square(row, c)) for c in empty_cols):
                continue
            if any(
                probe_gen.is_square_attacked(Square(row, c), opponent)
                for c in safe_cols
            ):
                continue
            moves.append(Move(king_sq, Square(row, king_to_col), is_castling=True))

    def _can_castle_with(self, rook_sq: Square, color: Color) -> bool:
        rook = self._board[rook_sq]
        return (
            rook is not None
            and rook.piece_type == PieceType.ROOK
            and rook.color == color
            and not rook.has_moved
        )
