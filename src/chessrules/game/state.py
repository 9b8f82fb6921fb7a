"""Game state — the single owner of the live position and its transitions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import Square
from chessrules.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    was_check: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    @property
    def was_promotion(self) -> bool:
        return self.move.is_promotion


@dataclass
class GameState:
    """Owns the live :class:`Position` and is the only thing that mutates it.

    The game starts in the standard initial position. Callers ask
    :meth:`legal_moves` for a square and pass one of the returned moves to
    :meth:`make_move`; anything else is a programming error and is not
    checked here (see :meth:`GameController.submit_move` for a checked path).
    """

    position: Position = field(default_factory=Position)
    phase: GamePhase = field(default=GamePhase.AWAITING_MOVE, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        # Positions built by hand arrive without their status flags.
        Rules.update_status(self.position)
        self._sync_phase()

    # ── Initialisation ───────────────────────────────────────────────────

    def reset(self) -> None:
        """Reinitialise to the starting position and clear derived state."""
        self.position.reset()
        self.move_history.clear()
        self.phase = GamePhase.AWAITING_MOVE
        _LOGGER.info("Game reset to the initial position")

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self, square: Square) -> list[Move]:
        """Legal moves for the piece on *square* (empty if none apply)."""
        return MoveGenerator(self.position).generate_legal_moves(square)

    def all_legal_moves(self) -> list[Move]:
        """Every legal move for the side to move."""
        return MoveGenerator(self.position).generate_all_legal_moves()

    def piece_at(self, square: Square) -> Piece | None:
        if not square.is_valid():
            return None
        return self.position.board[square]

    # ── Move application ─────────────────────────────────────────────────

    def make_move(self, move: Move) -> MoveRecord:
        """Apply a move obtained from :meth:`legal_moves` and advance the game."""
        pos = self.position
        piece = pos.board[move.from_sq]
        assert piece is not None, f"No piece on {move.from_sq}"
        if move.is_en_passant:
            captured = pos.board[Square(move.from_sq.row, move.to_sq.col)]
        else:
            captured = pos.board[move.to_sq]

        pos.play(move)
        Rules.update_status(pos)

        record = MoveRecord(
            move=move, piece=piece, captured=captured, was_check=pos.is_check
        )
        self.move_history.append(record)
        _LOGGER.debug("%s played %s", piece.color, move)

        self._sync_phase()
        return record

    # ── Read-only observers ──────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self.position.board

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_check(self) -> bool:
        return self.position.is_check

    @property
    def is_checkmate(self) -> bool:
        return self.position.is_checkmate

    @property
    def is_stalemate(self) -> bool:
        return self.position.is_stalemate

    @property
    def en_passant(self) -> Square | None:
        return self.position.en_passant

    @property
    def last_move_from(self) -> Square | None:
        return self.position.last_move_from

    @property
    def last_move_to(self) -> Square | None:
        return self.position.last_move_to

    @property
    def result(self) -> GameResult:
        return Rules.result_from_flags(self.position)

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def status_text(self) -> str:
        """One-line status for a status bar."""
        if self.is_checkmate:
            return f"CHECKMATE! {self.side_to_move.opposite.label} wins!"
        if self.is_stalemate:
            return "STALEMATE! Draw!"
        text = f"{self.side_to_move.label}'s Turn"
        if self.is_check:
            text += "  CHECK!"
        return text

    def count_pieces(self, color: Color, piece_type: PieceType) -> int:
        return len(self.position.board.pieces(color, piece_type))

    # ── Internal ─────────────────────────────────────────────────────────

    def _sync_phase(self) -> None:
        if self.position.is_checkmate or self.position.is_stalemate:
            if self.phase != GamePhase.GAME_OVER:
                _LOGGER.info("Game over: %s", self.result.name)
            self.phase = GamePhase.GAME_OVER
        else:
            self.phase = GamePhase.AWAITING_MOVE
