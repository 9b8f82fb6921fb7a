"""GameController — turns square clicks into moves on a :class:`GameState`.

Front ends translate pointer positions into squares and call :meth:`click`;
everything after that (selection, legality, turn flow) happens here.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import GameResult
from chessrules.core.move import Move
from chessrules.core.types import Square
from chessrules.game.interfaces import GamePhase, IGameController
from chessrules.game.settings import ControllerSettings
from chessrules.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameResult], None]
SelectionCallback = Callable[[Square | None], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Click-to-move flow for two players sharing one board.

    Methods are meant to be called from a single thread (the UI thread).
    """

    __slots__ = ("_state", "_settings", "_selected", "_selected_moves", "events")

    def __init__(
        self,
        state: GameState | None = None,
        settings: ControllerSettings | None = None,
    ) -> None:
        self._state = state if state is not None else GameState()
        self._settings = settings if settings is not None else ControllerSettings()
        self._selected: Square | None = None
        self._selected_moves: list[Move] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> ControllerSettings:
        return self._settings

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def selected_moves(self) -> list[Move]:
        return list(self._selected_moves)

    @property
    def move_targets(self) -> set[Square]:
        """Destination squares of the selected piece, for highlighting."""
        return {move.to_sq for move in self._selected_moves}

    # ── IGameController impl ─────────────────────────────────────────────

    def click(self, square: Square) -> bool:
        if self._state.is_game_over:
            return False
        if not square.is_valid():
            self.deselect()
            return False

        if self._selected is not None:
            move = next((m for m in self._selected_moves if m.to_sq == square), None)
            if move is not None:
                self.deselect()
                self._play(move)
                return True
            if self._is_own_piece(square) and self._settings.reselect_friendly_piece:
                self._select(square)
            else:
                self.deselect()
            return False

        if self._is_own_piece(square):
            self._select(square)
        return False

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False
        if move not in self._state.legal_moves(move.from_sq):
            _LOGGER.warning("Rejected move not in the legal set: %s", move)
            return False
        self.deselect()
        self._play(move)
        return True

    def restart(self) -> bool:
        if self._settings.restart_requires_game_over and not self._state.is_game_over:
            return False
        was_over = self._state.phase != GamePhase.AWAITING_MOVE
        self.deselect()
        self._state.reset()
        if was_over:
            self._emit_phase(GamePhase.AWAITING_MOVE)
        return True

    def deselect(self) -> None:
        if self._selected is None and not self._selected_moves:
            return
        self._selected = None
        self._selected_moves = []
        self._emit_selection(None)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _is_own_piece(self, square: Square) -> bool:
        piece = self._state.piece_at(square)
        return piece is not None and piece.color == self._state.side_to_move

    def _select(self, square: Square) -> None:
        self._selected = square
        self._selected_moves = self._state.legal_moves(square)
        _LOGGER.debug(
            "Selected %s with %d legal moves", square, len(self._selected_moves)
        )
        self._emit_selection(square)

    def _play(self, move: Move) -> None:
        record = self._state.make_move(move)
        self._emit_move(record)
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_selection(self, square: Square | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(square)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
