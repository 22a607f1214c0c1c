"""Platforms (Steige) of one station as GeoJSON."""
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from viennaflow.database import fetch_scalars
from viennaflow.models.platform import Platform
from viennaflow.services.features import feature_collection, platform_feature


async def build_platform_collection(db: AsyncSession, station_id: int) -> dict[str, Any]:
    q = (
        select(Platform)
        .where(Platform.fk_haltestellen_id == station_id)
        .order_by(Platform.fk_linien_id, Platform.richtung, Platform.reihenfolge)
    )
    platforms = await fetch_scalars(db, q)
    return feature_collection([platform_feature(p) for p in platforms])
