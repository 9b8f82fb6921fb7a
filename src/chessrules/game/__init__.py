"""Game management layer — state owner, click controller, settings.

Quick start::

    from chessrules.core import parse_square
    from chessrules.game import GameController

    ctrl = GameController()
    ctrl.click(parse_square("e2"))
    ctrl.click(parse_square("e4"))
    print(ctrl.state.status_text())
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.interfaces import GamePhase, IGameController
from chessrules.game.settings import ControllerSettings
from chessrules.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "ControllerSettings",
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
