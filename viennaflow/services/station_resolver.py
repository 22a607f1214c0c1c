"""Resolve which stations a /stops request is about.

Exactly one query mode applies, chosen once from the request parameters by priority:
lineId, then stationIds, then the default (all metro stations).
"""
import logging
import re
from dataclasses import dataclass
from typing import Union

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from viennaflow.database import fetch_scalars
from viennaflow.models.line import Line
from viennaflow.models.platform import Platform
from viennaflow.services.stations import METRO_MODE

logger = logging.getLogger(__name__)

# Direction tag used for ordering stations along a line
OUTBOUND_DIRECTION = "H"

_LEADING_INT = re.compile(r"\s*[+-]?[0-9]+")


@dataclass(frozen=True)
class ByLine:
    line_id: int


@dataclass(frozen=True)
class ByIds:
    station_ids: tuple[int, ...]


@dataclass(frozen=True)
class DefaultMode:
    pass


QueryMode = Union[ByLine, ByIds, DefaultMode]


def parse_station_ids(raw: str) -> list[int]:
    """
    Split "5, abc,7" -> [5, 7]. Each token is read by its leading ASCII integer, so
    "12abc" -> 12 and "1_000" -> 1; tokens without one are dropped.
    """
    ids = []
    dropped = []
    for token in raw.split(","):
        match = _LEADING_INT.match(token)
        if match:
            ids.append(int(match.group()))
        else:
            dropped.append(token.strip())
    if dropped:
        logger.warning("Ignoring malformed station ids: %s", dropped)
    return ids


def select_query_mode(line_id: int | None = None, station_ids: str | None = None) -> QueryMode:
    if line_id is not None:
        return ByLine(line_id)
    if station_ids:
        return ByIds(tuple(parse_station_ids(station_ids)))
    return DefaultMode()


async def _stations_on_line(db: AsyncSession, line_id: int) -> list[int]:
    q = (
        select(Platform.fk_haltestellen_id)
        .where(Platform.fk_linien_id == line_id)
        .where(Platform.richtung == OUTBOUND_DIRECTION)
        .order_by(Platform.reihenfolge.asc())
    )
    # sequence order; a station with several platforms repeats and is collapsed by the assembler
    return await fetch_scalars(db, q)


async def _metro_stations(db: AsyncSession) -> list[int]:
    q = (
        select(Platform.fk_haltestellen_id)
        .join(Line, Platform.fk_linien_id == Line.linien_id)
        .where(Line.verkehrsmittel == METRO_MODE)
    )
    return sorted(set(await fetch_scalars(db, q)))


async def resolve_station_ids(db: AsyncSession, mode: QueryMode) -> list[int]:
    """Ordered station ids for the given mode; may be empty."""
    if isinstance(mode, ByLine):
        ids = await _stations_on_line(db, mode.line_id)
    elif isinstance(mode, ByIds):
        ids = list(mode.station_ids)
    else:
        ids = await _metro_stations(db)
    logger.debug("Resolved %d station ids for %r", len(ids), mode)
    return ids
