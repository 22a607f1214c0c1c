"""Test doubles for the database session plus hex WKB builders."""
import struct
from unittest.mock import AsyncMock, MagicMock

from viennaflow.models import Line, Platform, Station


def point_wkb(lon: float, lat: float, srid: int | None = None) -> str:
    """Little-endian (E)WKB point as hex, the way PostGIS stores it."""
    if srid is None:
        return struct.pack("<BIdd", 1, 1, lon, lat).hex()
    return struct.pack("<BIIdd", 1, 0x20000001, srid, lon, lat).hex()


def linestring_wkb(coords: list[tuple[float, float]]) -> str:
    body = b"".join(struct.pack("<dd", x, y) for x, y in coords)
    return (struct.pack("<BII", 1, 2, len(coords)) + body).hex()


def polygon_wkb(ring: list[tuple[float, float]]) -> str:
    body = b"".join(struct.pack("<dd", x, y) for x, y in ring)
    return (struct.pack("<BIII", 1, 3, 1, len(ring)) + body).hex()


def make_station(station_id: int, lon: float = 16.37, lat: float = 48.21, name: str | None = None, diva: int | None = None) -> Station:
    return Station(
        haltestellen_id=station_id,
        location=point_wkb(lon, lat),
        name=name or f"Station {station_id}",
        diva=diva,
    )


def make_platform(steig_id: int, station_id: int, line_id: int, reihenfolge: int = 1, richtung: str = "H") -> Platform:
    return Platform(
        steig_id=steig_id,
        fk_linien_id=line_id,
        fk_haltestellen_id=station_id,
        richtung=richtung,
        reihenfolge=reihenfolge,
        rbl_nummer=4000 + steig_id,
        bereich=None,
        steig=f"{line_id}-{richtung}",
        location=point_wkb(16.37, 48.21),
    )


def make_line(line_id: int, bezeichnung: str, reihenfolge: int = 1) -> Line:
    return Line(
        linien_id=line_id,
        bezeichnung=bezeichnung,
        verkehrsmittel="ptMetro",
        farbe="#e20210",
        reihenfolge=reihenfolge,
        echtzeit=True,
    )


class FakeResult:
    """Stands in for sqlalchemy Result: supports .all() and .scalars().all()."""

    def __init__(self, rows):
        self._rows = list(rows)

    def all(self):
        return list(self._rows)

    def scalars(self):
        scalars = MagicMock()
        scalars.all.return_value = [r[0] if isinstance(r, tuple) else r for r in self._rows]
        return scalars


def fake_session(*results) -> AsyncMock:
    """AsyncSession whose execute() returns the given results (or raises given exceptions) in call order."""
    db = AsyncMock()
    db.execute.side_effect = [r if isinstance(r, Exception) else FakeResult(r) for r in results]
    return db
