"""Position — board plus the game-state fields that travel with it."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.types import Square


class Position:
    """Full game state: board, side to move, en passant target, status flags.

    :meth:`apply_move` only rearranges pieces (and may set a new en passant
    target). :meth:`play` wraps it with the per-turn bookkeeping. Neither
    recomputes check / checkmate / stalemate; that belongs to the caller,
    see :meth:`chessrules.game.state.GameState.make_move`.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "en_passant",
        "is_check",
        "is_checkmate",
        "is_stalemate",
        "last_move_from",
        "last_move_to",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        en_passant: Square | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.en_passant = en_passant
        self.is_check = False
        self.is_checkmate = False
        self.is_stalemate = False
        self.last_move_from: Square | None = None
        self.last_move_to: Square | None = None

    @classmethod
    def from_diagram(
        cls,
        diagram: str,
        side_to_move: Color = Color.WHITE,
        en_passant: Square | None = None,
    ) -> Position:
        return cls(Board.from_diagram(diagram), side_to_move, en_passant)

    # ── Core move operations ─────────────────────────────────────────────

    def apply_move(self, move: Move) -> None:
        """Rearrange the board for *move*. Does not flip the turn."""
        board = self.board
        piece = board[move.from_sq]
        assert piece is not None, f"No piece on {move.from_sq}"

        # En passant: the captured pawn sits beside the origin, not on to_sq
        if move.is_en_passant:
            board[Square(move.from_sq.row, move.to_sq.col)] = None

        # Slide the rook next to the king's destination
        if move.is_castling:
            row = move.from_sq.row
            if move.to_sq.col == 6:
                rook_from, rook_to = Square(row, 7), Square(row, 5)
            else:
                rook_from, rook_to = Square(row, 0), Square(row, 3)
            rook = board[rook_from]
            assert rook is not None
            board[rook_to] = rook.moved()
            board[rook_from] = None

        if (
            piece.piece_type == PieceType.PAWN
            and abs(move.to_sq.row - move.from_sq.row) == 2
        ):
            self.en_passant = Square(
                (move.from_sq.row + move.to_sq.row) // 2, move.from_sq.col
            )

        placed = piece.promoted(PieceType.QUEEN) if move.is_promotion else piece.moved()
        board[move.to_sq] = placed
        board[move.from_sq] = None

    def play(self, move: Move) -> None:
        """Record *move* as the last move, apply it and pass the turn."""
        self.last_move_from = move.from_sq
        self.last_move_to = move.to_sq
        self.en_passant = None
        self.apply_move(move)
        self.side_to_move = self.side_to_move.opposite

    # ── Utilities ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Back to the standard starting position with all state cleared."""
        self.board.reset()
        self.side_to_move = Color.WHITE
        self.en_passant = None
        self.is_check = False
        self.is_checkmate = False
        self.is_stalemate = False
        self.last_move_from = None
        self.last_move_to = None

    def copy(self) -> Position:
        """Fully independent clone; the board grid is not shared."""
        pos = Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            en_passant=self.en_passant,
        )
        pos.is_check = self.is_check
        pos.is_checkmate = self.is_checkmate
        pos.is_stalemate = self.is_stalemate
        pos.last_move_from = self.last_move_from
        pos.last_move_to = self.last_move_to
        return pos

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
