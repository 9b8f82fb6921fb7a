"""Settings for the game layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ControllerSettings:
    """Behaviour switches for :class:`~chessrules.game.controller.GameController`."""

    # Only allow a restart once the game has ended.
    restart_requires_game_over: bool = False
    # Clicking another own piece while one is selected switches the selection.
    reselect_friendly_piece: bool = True
