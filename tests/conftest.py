"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.move import Move
from chessrules.core.types import parse_square
from chessrules.game.state import GameState

PlayFn = Callable[..., GameState]


def find_move(state: GameState, text: str) -> Move:
    """Legal move matching a coordinate pair such as ``"e2e4"``."""
    from_sq, to_sq = parse_square(text[:2]), parse_square(text[2:4])
    matching = [m for m in state.legal_moves(from_sq) if m.to_sq == to_sq]
    assert matching, f"{text} is not a legal move"
    return matching[0]


@pytest.fixture
def state() -> GameState:
    """A fresh game in the initial position."""
    return GameState()


@pytest.fixture
def play() -> PlayFn:
    """Play coordinate moves (``"e2e4"``) on a game, asserting each is legal."""

    def _play(game: GameState, *moves: str) -> GameState:
        for text in moves:
            game.make_move(find_move(game, text))
        return game

    return _play


@pytest.fixture
def legal() -> Callable[[GameState, str], Move]:
    """Look up a legal move by coordinate pair without playing it."""
    return find_move
