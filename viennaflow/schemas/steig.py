"""Schemas for platform (Steig) search results."""
from typing import Any

from pydantic import BaseModel


class NearbyPlatformResponse(BaseModel):
    """One row of get_nearby_steige; extra columns the procedure returns are passed through."""
    location: dict[str, Any]
    fk_linien_id: int
    haltestellen_diva: int = 0

    class Config:
        extra = "allow"
