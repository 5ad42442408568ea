from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.db import get_db, store_errors
from marketplace.schemas.stats import ModerationStatsOut
from marketplace.services.auth import require_moderator
from marketplace.services.stats import moderation_stats

router = APIRouter()


@router.get("/admin/stats", response_model=ModerationStatsOut, dependencies=[Depends(require_moderator)])
async def get_stats(db: AsyncSession = Depends(get_db)) -> ModerationStatsOut:
    async with store_errors(db):
        counts = await moderation_stats(db)
    return ModerationStatsOut(**counts)
