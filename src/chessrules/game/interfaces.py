"""Abstract interfaces for the game layer.

The presentation layer talks to :class:`IGameController`; it never mutates
the position directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Controller ───────────────────────────────────────────────────────────────


class IGameController(ABC):
    """Entry points a front end drives."""

    @abstractmethod
    def click(self, square: Square) -> bool:
        """Handle a click on *square*. Returns True if a move was played."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Play *move* if it is legal. Returns acceptance."""

    @abstractmethod
    def restart(self) -> bool:
        """Start over from the initial position. Returns whether it did."""
