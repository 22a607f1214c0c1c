"""The /stops pipeline: resolve -> fetch -> assemble."""
import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from viennaflow.services.features import assemble_station_features, feature_collection
from viennaflow.services.station_resolver import QueryMode, resolve_station_ids
from viennaflow.services.stations import fetch_line_membership, fetch_stations

logger = logging.getLogger(__name__)


async def build_stops_collection(db: AsyncSession, mode: QueryMode) -> dict[str, Any]:
    station_ids = await resolve_station_ids(db, mode)
    if not station_ids:
        return feature_collection([])

    stations = await fetch_stations(db, station_ids)
    if not stations:
        return feature_collection([])
    # Same session, so the two fetches cannot overlap; assembly is keyed by station_ids anyway
    line_membership = await fetch_line_membership(db, station_ids)

    features = assemble_station_features(station_ids, stations, line_membership)
    logger.debug("Assembled %d of %d resolved stations", len(features), len(station_ids))
    return feature_collection(features)
