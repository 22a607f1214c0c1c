"""GeoJSON response schemas for stations and platforms."""
from typing import Any, Literal

from pydantic import BaseModel


class StationProperties(BaseModel):
    haltestellen_id: int
    diva: int | None = None
    name: str | None = None
    linien_ids: list[int] = []


class PlatformProperties(BaseModel):
    steig_id: int
    fk_linien_id: int
    fk_haltestellen_id: int
    richtung: str
    reihenfolge: int
    rbl_nummer: int | None = None
    bereich: int | None = None
    steig: str | None = None


class StationFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    # {"type": "Point", "coordinates": [lon, lat]} or any other GeoJSON geometry
    geometry: dict[str, Any]
    properties: StationProperties


class PlatformFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    geometry: dict[str, Any]
    properties: PlatformProperties


class StationFeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[StationFeature]


class PlatformFeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[PlatformFeature]


class ErrorResponse(BaseModel):
    error: str
