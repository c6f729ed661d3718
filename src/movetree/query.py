"""Interface of the game database backend.

The tree core never talks to a database. These types describe what a
backend accepts and returns so loaders can build :class:`TreeState` values
from query results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Generic, Literal, Protocol, TypeVar

from movetree.tree.models import Outcome

T = TypeVar("T")

# A rating filter spanning the whole slider means "no filter".
_FULL_RATING_SPAN = 3000


class Sides(StrEnum):
    WHITE_BLACK = "WhiteBlack"
    BLACK_WHITE = "BlackWhite"
    ANY = "Any"


class Speed(StrEnum):
    ULTRA_BULLET = "UltraBullet"
    BULLET = "Bullet"
    BLITZ = "Blitz"
    RAPID = "Rapid"
    CLASSICAL = "Classical"
    CORRESPONDENCE = "Correspondence"
    UNKNOWN = "Unknown"


@dataclass(slots=True)
class QueryOptions:
    """Paging and sorting shared by every query."""

    sort: str = "id"
    direction: Literal["asc", "desc"] = "asc"
    page: int | None = None
    page_size: int | None = None
    skip_count: bool = False


@dataclass(slots=True)
class GameQuery:
    options: QueryOptions = field(default_factory=QueryOptions)
    player1: str | None = None
    player2: str | None = None
    range1: tuple[int, int] | None = None
    range2: tuple[int, int] | None = None
    sides: Sides | None = None
    speed: Speed | None = None
    outcome: Outcome | None = None


@dataclass(slots=True)
class PlayerQuery:
    options: QueryOptions = field(default_factory=QueryOptions)
    name: str | None = None
    range: tuple[int, int] | None = None


@dataclass(frozen=True)
class QueryResponse(Generic[T]):
    data: T
    count: int


@dataclass(slots=True, frozen=True)
class DatabaseInfo:
    """Metadata of a local or downloadable game database."""

    filename: str
    file: Path
    title: str | None = None
    description: str | None = None
    game_count: int | None = None
    player_count: int | None = None
    storage_size: int | None = None
    download_link: str | None = None


class IGameDatabase(Protocol):
    """Protocol for the game/player database backend."""

    def query_games(self, query: GameQuery) -> QueryResponse[list[object]]: ...

    def query_players(self, query: PlayerQuery) -> QueryResponse[list[object]]: ...

    def list_databases(self) -> list[DatabaseInfo]: ...


def normalize_range(value: tuple[int, int] | None) -> tuple[int, int] | None:
    """Drop a rating range that covers the full span."""
    if value is None or value[1] - value[0] == _FULL_RATING_SPAN:
        return None
    return value


def normalize_game_query(query: GameQuery) -> GameQuery:
    """Copy of *query* with full-span rating filters removed."""
    return GameQuery(
        options=query.options,
        player1=query.player1,
        player2=query.player2,
        range1=normalize_range(query.range1),
        range2=normalize_range(query.range2),
        sides=query.sides,
        speed=query.speed,
        outcome=query.outcome,
    )
