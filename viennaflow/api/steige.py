"""Platforms (Steige): per station, and near a point."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from viennaflow.config import settings
from viennaflow.database import get_db
from viennaflow.errors import MissingParameterError
from viennaflow.schemas.geojson import PlatformFeatureCollection
from viennaflow.schemas.steig import NearbyPlatformResponse
from viennaflow.services.nearby import find_nearby_platforms
from viennaflow.services.platforms import build_platform_collection

router = APIRouter(prefix="/steige", tags=["steige"])


@router.get("", response_model=PlatformFeatureCollection)
async def get_steige(stopid: int | None = None, db: AsyncSession = Depends(get_db)):
    """All platforms of one station as a FeatureCollection."""
    if stopid is None:
        raise MissingParameterError("stopid is mandatory")
    return await build_platform_collection(db, stopid)


@router.get("/nearby", response_model=list[NearbyPlatformResponse])
async def get_nearby_steige(
    lat: float | None = None,
    lon: float | None = None,
    radius: int | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Metro platforms within radius meters (default from settings) of lat/lon."""
    if lat is None or lon is None:
        raise MissingParameterError("Latitude and longitude are required.")
    radius_m = radius if radius is not None else settings.NEARBY_DEFAULT_RADIUS_M
    return await find_nearby_platforms(db, lat=lat, lon=lon, radius_m=radius_m)
