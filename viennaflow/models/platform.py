"""Platform (Steig): boarding point of one line in one direction at one station."""
from geoalchemy2 import Geometry
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from viennaflow.models.base import Base


class Platform(Base):
    __tablename__ = "steige"

    steig_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    fk_linien_id: Mapped[int] = mapped_column(ForeignKey("linien.linien_id"), nullable=False, index=True)
    fk_haltestellen_id: Mapped[int] = mapped_column(
        ForeignKey("haltestellen.haltestellen_id"), nullable=False, index=True
    )
    richtung: Mapped[str] = mapped_column(String(1), nullable=False)  # H = outbound, R = return
    reihenfolge: Mapped[int] = mapped_column(Integer, nullable=False)  # position along the line
    rbl_nummer: Mapped[int | None] = mapped_column(Integer, nullable=True)  # real-time stop code
    bereich: Mapped[int | None] = mapped_column(Integer, nullable=True)
    steig: Mapped[str | None] = mapped_column(String(32), nullable=True)
    location: Mapped[str] = mapped_column(Geometry(geometry_type="POINT", srid=4326), nullable=False)

    line = relationship("Line")
    station = relationship("Station")
