from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from viennaflow.database import get_db
from viennaflow.schemas.line import LineResponse
from viennaflow.services.lines import list_metro_lines

router = APIRouter(prefix="/lines", tags=["lines"])


@router.get("", response_model=list[LineResponse])
async def get_lines(lineid: int | None = None, db: AsyncSession = Depends(get_db)):
    """Metro lines, optionally just the one with id lineid."""
    return await list_metro_lines(db, line_id=lineid)
