"""High-level chess rules: check, checkmate, stalemate and game result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    These recompute from the board, so they hold for any position, not only
    ones reached through :meth:`GameState.make_move`.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).has_legal_move()

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).has_legal_move()

    @staticmethod
    def update_status(position: Position) -> None:
        """Recompute the check / checkmate / stalemate flags in place."""
        gen = MoveGenerator(position)
        in_check = gen.is_in_check(position.side_to_move)
        stuck = not gen.has_legal_move()
        position.is_check = in_check
        position.is_checkmate = stuck and in_check
        position.is_stalemate = stuck and not in_check

    @staticmethod
    def result_from_flags(position: Position) -> GameResult:
        """Result implied by the stored status flags."""
        if position.is_checkmate:
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if position.is_stalemate:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result from scratch."""
        gen = MoveGenerator(position)
        if gen.has_legal_move():
            return GameResult.IN_PROGRESS
        if gen.is_in_check(position.side_to_move):
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
