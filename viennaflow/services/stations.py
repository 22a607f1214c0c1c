"""Station rows and the metro lines serving them."""
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from viennaflow.database import fetch_all, fetch_scalars
from viennaflow.models.line import Line
from viennaflow.models.platform import Platform
from viennaflow.models.station import Station

# Only this transport mode is served; not selectable per request
METRO_MODE = "ptMetro"


async def fetch_stations(db: AsyncSession, station_ids: Sequence[int]) -> list[Station]:
    """All station rows whose id is in station_ids. Order is whatever the database returns."""
    q = select(Station).where(Station.haltestellen_id.in_(list(station_ids)))
    return await fetch_scalars(db, q)


async def fetch_line_membership(db: AsyncSession, station_ids: Sequence[int]) -> dict[int, list[int]]:
    """
    Map station id -> metro line ids serving it, in the order the join returned them.
    One row per platform, so a line with several platforms at a station appears more than once;
    repeats are kept.
    """
    q = (
        select(Platform.fk_haltestellen_id, Platform.fk_linien_id)
        .join(Line, Platform.fk_linien_id == Line.linien_id)
        .where(Platform.fk_haltestellen_id.in_(list(station_ids)))
        .where(Line.verkehrsmittel == METRO_MODE)
    )
    rows = await fetch_all(db, q)
    return group_line_ids(rows)


def group_line_ids(rows) -> dict[int, list[int]]:
    stop_lines: dict[int, list[int]] = {}
    for station_id, line_id in rows:
        stop_lines.setdefault(station_id, []).append(line_id)
    return stop_lines
