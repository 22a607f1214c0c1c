"""Station (Haltestelle): a physical stop, served by lines through its platforms."""
from geoalchemy2 import Geometry
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from viennaflow.models.base import Base


class Station(Base):
    __tablename__ = "haltestellen"

    haltestellen_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    # PostGIS point, WGS84 (lng, lat); read back as WKB
    location: Mapped[str] = mapped_column(Geometry(geometry_type="POINT", srid=4326), nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    diva: Mapped[int | None] = mapped_column(Integer, nullable=True)  # external catalog code
