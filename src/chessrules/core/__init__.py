"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import MoveGenerator, Position, parse_square

    pos = Position()
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves(parse_square("g1")):
        print(move)
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import Square, all_squares, parse_square

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "all_squares",
    "parse_square",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
]
