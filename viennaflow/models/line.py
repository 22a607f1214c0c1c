"""Line (Linie): one route of a transport mode (verkehrsmittel), e.g. U1 / ptMetro."""
from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from viennaflow.models.base import Base


class Line(Base):
    __tablename__ = "linien"

    linien_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    bezeichnung: Mapped[str | None] = mapped_column(String(64), nullable=True)
    verkehrsmittel: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    farbe: Mapped[str | None] = mapped_column(String(16), nullable=True)
    reihenfolge: Mapped[int | None] = mapped_column(Integer, nullable=True)  # display order
    echtzeit: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
