"""Stations as GeoJSON. Public, no auth."""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from viennaflow.database import get_db
from viennaflow.schemas.geojson import ErrorResponse, StationFeatureCollection
from viennaflow.services.station_resolver import select_query_mode
from viennaflow.services.stops import build_stops_collection

router = APIRouter(prefix="/stops", tags=["stops"])


@router.get("", response_model=StationFeatureCollection, responses={500: {"model": ErrorResponse}})
async def get_stops(
    lineId: int | None = Query(default=None, description="Stations of this line, in route order"),
    stationIds: str | None = Query(default=None, description="Comma-separated station ids"),
    db: AsyncSession = Depends(get_db),
):
    """
    Return stations as a FeatureCollection. lineId wins over stationIds; with neither,
    all metro stations are returned. Each feature lists the metro lines serving it.
    """
    mode = select_query_mode(line_id=lineId, station_ids=stationIds)
    return await build_stops_collection(db, mode)
