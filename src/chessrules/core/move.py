"""Move descriptor value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (from, to) pair plus the three special-move flags.

    Instances are produced by :class:`~chessrules.core.move_generator.MoveGenerator`;
    applying one that did not come from the generator is a programming error.
    """

    from_sq: Square
    to_sq: Square
    is_en_passant: bool = False
    is_castling: bool = False
    is_promotion: bool = False

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"
