"""Metro lines listing."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from viennaflow.database import fetch_scalars
from viennaflow.models.line import Line
from viennaflow.services.stations import METRO_MODE


async def list_metro_lines(db: AsyncSession, line_id: int | None = None) -> list[Line]:
    q = select(Line).where(Line.verkehrsmittel == METRO_MODE)
    if line_id is not None:
        q = q.where(Line.linien_id == line_id)
    q = q.order_by(Line.reihenfolge, Line.linien_id)
    return await fetch_scalars(db, q)


async def metro_line_ids(db: AsyncSession) -> set[int]:
    q = select(Line.linien_id).where(Line.verkehrsmittel == METRO_MODE)
    return set(await fetch_scalars(db, q))
