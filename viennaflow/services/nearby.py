"""Platforms near a point. Distance search is done by the get_nearby_steige stored procedure."""
import json
import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from viennaflow.database import fetch_all
from viennaflow.errors import GeometryDecodeError
from viennaflow.services.lines import metro_line_ids

logger = logging.getLogger(__name__)

NEARBY_STEIGE_QUERY = text("SELECT * FROM get_nearby_steige(:lat, :lon, :radius)")


def _parse_location(raw: Any) -> dict[str, Any]:
    """The procedure returns ST_AsGeoJSON text; some drivers hand it back already decoded."""
    if isinstance(raw, dict):
        return raw
    if not isinstance(raw, str):
        raise GeometryDecodeError("location is not a GeoJSON string")
    try:
        location = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise GeometryDecodeError(str(exc)) from exc
    if not isinstance(location, dict) or "type" not in location:
        raise GeometryDecodeError("location is not a GeoJSON geometry")
    return location


def _line_id(raw: Any) -> int | None:
    """Line id as int; None if the procedure returned something non-numeric (row is then filtered out)."""
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def normalize_nearby_row(row: dict[str, Any]) -> dict[str, Any]:
    item = dict(row)
    item["location"] = _parse_location(item.get("location"))
    item["fk_linien_id"] = _line_id(item.get("fk_linien_id"))
    if item.get("haltestellen_diva") is None:
        item["haltestellen_diva"] = 0
    return item


async def find_nearby_platforms(
    db: AsyncSession, lat: float, lon: float, radius_m: int
) -> list[dict[str, Any]]:
    """Nearby platforms of metro lines only, in the order the procedure returned them."""
    rows = await fetch_all(db, NEARBY_STEIGE_QUERY.bindparams(lat=lat, lon=lon, radius=radius_m))
    allowed = await metro_line_ids(db)
    if not allowed:
        logger.warning("No metro lines found; nearby search will return nothing")
    items = [normalize_nearby_row(r._mapping) for r in rows]
    return [item for item in items if item.get("fk_linien_id") in allowed]
