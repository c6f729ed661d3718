"""Notation helpers: PGN tag pairs for tree headers."""

from movetree.notation.pgn import (
    game_name,
    headers_from_tags,
    headers_to_pgn,
    parse_tag_pairs,
)

__all__ = [
    "game_name",
    "headers_from_tags",
    "headers_to_pgn",
    "parse_tag_pairs",
]
