"""PGN tag-pair helpers for game headers."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping

from movetree.tree.models import GameHeaders, Orientation, Outcome

_PGN_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
_UNKNOWN = "?"
_UNKNOWN_DATE = "????.??.??"


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _tag(key: str, value: object) -> str:
    return f'[{key} "{_escape(str(value))}"]'


def headers_to_pgn(headers: GameHeaders) -> str:
    """Render *headers* as PGN tag pairs, one per line.

    The seven required tags always come first, with placeholders for
    missing values; ratings and repertoire tags follow when set.
    """
    lines = [
        _tag("Event", headers.event or _UNKNOWN),
        _tag("Site", headers.site or _UNKNOWN),
        _tag("Date", headers.date or _UNKNOWN_DATE),
        _tag("Round", headers.round or _UNKNOWN),
        _tag("White", headers.white or _UNKNOWN),
        _tag("Black", headers.black or _UNKNOWN),
        _tag("Result", headers.result.value),
    ]
    if headers.white_elo:
        lines.append(_tag("WhiteElo", headers.white_elo))
    if headers.black_elo:
        lines.append(_tag("BlackElo", headers.black_elo))
    if headers.start:
        lines.append(_tag("Start", json.dumps(headers.start)))
    if headers.orientation:
        lines.append(_tag("Orientation", headers.orientation.value))
    return "\n".join(lines) + "\n"


def game_name(headers: GameHeaders) -> str:
    """Short display title for a game."""
    if (headers.white and headers.white != _UNKNOWN) or (
        headers.black and headers.black != _UNKNOWN
    ):
        return f"{headers.white} - {headers.black}"
    if headers.event:
        return headers.event
    return "Unknown"


def parse_tag_pairs(pgn_text: str) -> dict[str, str]:
    """Parse the tag-pair section at the top of a PGN document."""
    tags: dict[str, str] = {}
    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        if not line:
            if tags:
                break
            continue
        if not line.startswith("["):
            break
        match = _PGN_HEADER_RE.match(line)
        if match is None:
            raise ValueError(f"Invalid PGN header line: {line}")
        key, raw_value = match.groups()
        tags[key] = raw_value.replace('\\"', '"').replace("\\\\", "\\")
    return tags


def _optional_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _known(value: str | None) -> str | None:
    if value is None or value in (_UNKNOWN, _UNKNOWN_DATE):
        return None
    return value


def _start_path(value: str | None) -> list[int] | None:
    if not value:
        return None
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        return None
    if not isinstance(parsed, list) or not all(isinstance(i, int) for i in parsed):
        return None
    return parsed


def headers_from_tags(
    tags: Mapping[str, str], *, fen: str | None = None
) -> GameHeaders:
    """Build :class:`GameHeaders` from parsed tag pairs.

    Unknown result tokens, ratings and orientations fall back to their
    defaults instead of failing.
    """
    headers = GameHeaders(
        event=_known(tags.get("Event")) or "",
        site=_known(tags.get("Site")) or "",
        date=_known(tags.get("Date")),
        time=tags.get("Time"),
        round=_known(tags.get("Round")),
        white=_known(tags.get("White")) or "",
        white_elo=_optional_int(tags.get("WhiteElo")),
        black=_known(tags.get("Black")) or "",
        black_elo=_optional_int(tags.get("BlackElo")),
        time_control=tags.get("TimeControl"),
        eco=tags.get("ECO"),
        start=_start_path(tags.get("Start")),
    )
    start_fen = fen or tags.get("FEN")
    if start_fen:
        headers.fen = start_fen
    result = tags.get("Result", Outcome.UNKNOWN.value)
    if result in {o.value for o in Outcome}:
        headers.result = Outcome(result)
    orientation = tags.get("Orientation")
    if orientation in {o.value for o in Orientation}:
        headers.orientation = Orientation(orientation)
    return headers
