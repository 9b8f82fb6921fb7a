"""Tests for GameController — square clicks to moves."""

from __future__ import annotations

import logging

import pytest

from chessrules.core.enums import Color, GameResult
from chessrules.core.move import Move
from chessrules.core.types import (
    C3, E2, E3, E4, E5, E7, F3, G1, H3, Square, parse_square,
)
from chessrules.game.controller import GameController
from chessrules.game.interfaces import GamePhase
from chessrules.game.settings import ControllerSettings
from chessrules.game.state import GameState, MoveRecord


def _click_moves(ctrl: GameController, *moves: str) -> None:
    for text in moves:
        ctrl.click(parse_square(text[:2]))
        assert ctrl.click(parse_square(text[2:4])), f"{text} was not played"


def _fools_mate(ctrl: GameController) -> None:
    _click_moves(ctrl, "f2f3", "e7e5", "g2g4", "d8h4")


class TestSelection:
    def test_select_own_piece(self) -> None:
        ctrl = GameController()
        assert not ctrl.click(E2)
        assert ctrl.selected == E2
        assert ctrl.move_targets == {E3, E4}
        assert len(ctrl.selected_moves) == 2

    def test_opponent_piece_not_selectable(self) -> None:
        ctrl = GameController()
        ctrl.click(E7)
        assert ctrl.selected is None
        assert ctrl.move_targets == set()

    def test_empty_square_not_selectable(self) -> None:
        ctrl = GameController()
        ctrl.click(E4)
        assert ctrl.selected is None

    def test_reselect_friendly_piece(self) -> None:
        ctrl = GameController()
        ctrl.click(E2)
        ctrl.click(G1)
        assert ctrl.selected == G1
        assert ctrl.move_targets == {F3, H3}

    def test_reselect_disabled(self) -> None:
        ctrl = GameController(
            settings=ControllerSettings(reselect_friendly_piece=False)
        )
        ctrl.click(E2)
        ctrl.click(G1)
        assert ctrl.selected is None

    def test_non_target_deselects(self) -> None:
        ctrl = GameController()
        ctrl.click(E2)
        assert not ctrl.click(E5)
        assert ctrl.selected is None
        assert ctrl.state.side_to_move == Color.WHITE

    def test_off_board_deselects(self) -> None:
        ctrl = GameController()
        ctrl.click(E2)
        ctrl.click(Square(8, 3))
        assert ctrl.selected is None

    def test_selection_events(self) -> None:
        ctrl = GameController()
        seen: list[Square | None] = []
        ctrl.events.on_selection_changed.append(seen.append)
        ctrl.click(E2)
        ctrl.click(E5)
        assert seen == [E2, None]


class TestClickToMove:
    def test_click_target_plays_move(self) -> None:
        ctrl = GameController()
        ctrl.click(E2)
        assert ctrl.click(E4)
        assert ctrl.state.side_to_move == Color.BLACK
        assert ctrl.selected is None
        assert ctrl.state.last_move_to == E4

    def test_move_event(self) -> None:
        ctrl = GameController()
        records: list[MoveRecord] = []

        def on_move(record: MoveRecord, state: GameState) -> None:
            assert state is ctrl.state
            records.append(record)

        ctrl.events.on_move.append(on_move)
        _click_moves(ctrl, "b1c3")
        assert [r.move.to_sq for r in records] == [C3]

    def test_game_over_events(self) -> None:
        ctrl = GameController()
        results: list[GameResult] = []
        phases: list[GamePhase] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.events.on_phase_changed.append(phases.append)
        _fools_mate(ctrl)
        assert results == [GameResult.BLACK_WINS]
        assert phases == [GamePhase.GAME_OVER]

    def test_clicks_ignored_after_game_over(self) -> None:
        ctrl = GameController()
        _fools_mate(ctrl)
        assert not ctrl.click(parse_square("e1"))
        assert ctrl.selected is None


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = GameController()
        assert ctrl.submit_move(Move(E2, E4))
        assert ctrl.state.side_to_move == Color.BLACK

    def test_illegal_move_rejected(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        with caplog.at_level(logging.WARNING, logger="chessrules.game.controller"):
            assert not ctrl.submit_move(Move(E2, E5))
        assert "Rejected move" in caplog.text
        assert ctrl.state.side_to_move == Color.WHITE

    def test_wrong_flags_rejected(self) -> None:
        ctrl = GameController()
        assert not ctrl.submit_move(Move(E2, E4, is_castling=True))

    def test_rejected_after_game_over(self) -> None:
        ctrl = GameController()
        _fools_mate(ctrl)
        assert not ctrl.submit_move(Move(E2, E4))


class TestRestart:
    def test_restart_any_time_by_default(self) -> None:
        ctrl = GameController()
        _click_moves(ctrl, "e2e4")
        ctrl.click(E7)
        assert ctrl.restart()
        assert ctrl.selected is None
        assert ctrl.state.ply_count == 0
        assert ctrl.state.side_to_move == Color.WHITE

    def test_restart_requires_game_over(self) -> None:
        ctrl = GameController(
            settings=ControllerSettings(restart_requires_game_over=True)
        )
        _click_moves(ctrl, "e2e4")
        assert not ctrl.restart()
        assert ctrl.state.ply_count == 1

    def test_restart_after_mate(self) -> None:
        ctrl = GameController(
            settings=ControllerSettings(restart_requires_game_over=True)
        )
        phases: list[GamePhase] = []
        _fools_mate(ctrl)
        ctrl.events.on_phase_changed.append(phases.append)
        assert ctrl.restart()
        assert not ctrl.state.is_game_over
        assert phases == [GamePhase.AWAITING_MOVE]

    def test_restart_mid_game_keeps_phase_quiet(self) -> None:
        ctrl = GameController()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        _click_moves(ctrl, "e2e4", "e7e5")
        assert ctrl.restart()
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE
        assert phases == []

    def test_shares_given_state(self) -> None:
        state = GameState()
        ctrl = GameController(state=state)
        _click_moves(ctrl, "e2e4")
        assert state.ply_count == 1
