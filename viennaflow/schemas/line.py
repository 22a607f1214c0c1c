"""Schemas for lines."""
from pydantic import BaseModel


class LineResponse(BaseModel):
    """Line in API responses."""
    linien_id: int
    bezeichnung: str | None = None
    verkehrsmittel: str
    farbe: str | None = None
    reihenfolge: int | None = None
    echtzeit: bool = False

    class Config:
        from_attributes = True
