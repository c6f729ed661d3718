"""Tests for the python-chess rule validator."""

from __future__ import annotations

import pytest
from chess import STARTING_FEN

from movetree.rules import IllegalMoveError, MoveSpec, PythonChessRules


@pytest.fixture
def rules() -> PythonChessRules:
    return PythonChessRules()


class TestSanInput:
    def test_pawn_push(self, rules: PythonChessRules) -> None:
        result = rules.apply(STARTING_FEN, "e4")
        assert result.move.san == "e4"
        assert result.move.uci == "e2e4"
        assert result.move.from_square == "e2"
        assert result.move.to_square == "e4"
        assert result.fen.startswith("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b")

    def test_san_is_canonicalised(self, rules: PythonChessRules) -> None:
        result = rules.apply(STARTING_FEN, "Ng1f3")
        assert result.move.san == "Nf3"

    def test_capture_and_check_flags(self, rules: PythonChessRules) -> None:
        fen = "rnbqkbnr/ppp2ppp/8/3pp3/4P3/5Q2/PPPP1PPP/RNB1KBNR w KQkq - 0 3"
        result = rules.apply(fen, "Qxf7+")
        assert result.move.was_capture
        assert result.move.was_check

    @pytest.mark.parametrize("san", ["e5", "Ke2", "Nf6", "xyz", ""])
    def test_illegal_san(self, rules: PythonChessRules, san: str) -> None:
        with pytest.raises(IllegalMoveError):
            rules.apply(STARTING_FEN, san)


class TestSpecInput:
    def test_knight_move(self, rules: PythonChessRules) -> None:
        result = rules.apply(STARTING_FEN, MoveSpec("b1", "c3"))
        assert result.move.san == "Nc3"

    def test_promotion_is_case_insensitive(self, rules: PythonChessRules) -> None:
        fen = "8/P7/8/8/8/8/8/k6K w - - 0 1"
        result = rules.apply(fen, MoveSpec("a7", "a8", "N"))
        assert result.move.promotion == "n"
        assert result.move.san == "a8=N"

    def test_missing_promotion_is_illegal(self, rules: PythonChessRules) -> None:
        with pytest.raises(IllegalMoveError):
            rules.apply("8/P7/8/8/8/8/8/k6K w - - 0 1", MoveSpec("a7", "a8"))

    def test_unreachable_square(self, rules: PythonChessRules) -> None:
        with pytest.raises(IllegalMoveError):
            rules.apply(STARTING_FEN, MoveSpec("e2", "e5"))

    def test_malformed_square(self, rules: PythonChessRules) -> None:
        with pytest.raises(IllegalMoveError):
            rules.apply(STARTING_FEN, MoveSpec("z9", "e4"))


@pytest.mark.parametrize("null_move", ["--", "0000", "Z0", "@@@@"])
def test_null_move_is_illegal(rules: PythonChessRules, null_move: str) -> None:
    with pytest.raises(IllegalMoveError):
        rules.apply(STARTING_FEN, null_move)


def test_invalid_fen_is_reported_as_illegal(rules: PythonChessRules) -> None:
    with pytest.raises(IllegalMoveError):
        rules.apply("not a fen", "e4")


def test_illegal_move_error_is_value_error() -> None:
    assert issubclass(IllegalMoveError, ValueError)
