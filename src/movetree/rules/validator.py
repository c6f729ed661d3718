"""Rule validation backed by python-chess."""

from __future__ import annotations

from typing import Protocol

import chess

from movetree.rules.models import (
    CanonicalMove,
    IllegalMoveError,
    MoveInput,
    MoveResult,
    MoveSpec,
)


class IRules(Protocol):
    """Protocol for the collaborator that validates and plays moves."""

    def apply(self, fen: str, move: MoveInput) -> MoveResult:
        """Play *move* in *fen*; raise :class:`IllegalMoveError` if illegal."""
        ...


class PythonChessRules:
    """Validates moves with :mod:`chess` and returns canonical results."""

    __slots__ = ()

    def apply(self, fen: str, move: MoveInput) -> MoveResult:
        board = _board_from_fen(fen)
        if isinstance(move, MoveSpec):
            parsed = _move_from_spec(board, move)
        else:
            try:
                parsed = board.parse_san(move)
            except ValueError as exc:
                raise IllegalMoveError(f"{move!r} in {fen}: {exc}") from exc
            if not parsed:
                raise IllegalMoveError(f"Null move {move!r} is not playable")

        canonical = CanonicalMove(
            san=board.san(parsed),
            uci=parsed.uci(),
            from_square=chess.square_name(parsed.from_square),
            to_square=chess.square_name(parsed.to_square),
            promotion=(
                chess.piece_symbol(parsed.promotion) if parsed.promotion else None
            ),
            was_capture=board.is_capture(parsed),
            was_check=board.gives_check(parsed),
        )
        board.push(parsed)
        return MoveResult(move=canonical, fen=board.fen())


def _board_from_fen(fen: str) -> chess.Board:
    try:
        return chess.Board(fen)
    except ValueError as exc:
        raise IllegalMoveError(f"Invalid FEN: {fen}") from exc


def _move_from_spec(board: chess.Board, spec: MoveSpec) -> chess.Move:
    try:
        from_sq = chess.parse_square(spec.from_square.lower())
        to_sq = chess.parse_square(spec.to_square.lower())
        promotion = (
            chess.PIECE_SYMBOLS.index(spec.promotion.lower())
            if spec.promotion
            else None
        )
    except ValueError as exc:
        raise IllegalMoveError(f"Malformed move {spec}") from exc

    move = chess.Move(from_sq, to_sq, promotion=promotion)
    if not board.is_legal(move):
        raise IllegalMoveError(f"{move.uci()} in {board.fen()}")
    return move
