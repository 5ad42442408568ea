from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.models.advertisement import Advertisement
from marketplace.models.business import Business
from marketplace.models.franchise import Franchise
from marketplace.models.inquiry import Inquiry
from marketplace.services.inquiries import InquiryStatus

LISTING_MODELS = (Franchise, Business, Advertisement)


async def _count(db: AsyncSession, model, *where) -> int:
    stmt = select(func.count()).select_from(model)
    if where:
        stmt = stmt.where(*where)
    return (await db.execute(stmt)).scalar_one()


async def moderation_stats(db: AsyncSession) -> dict[str, dict[str, int]]:
    """Counters behind the moderation dashboard header."""
    out: dict[str, dict[str, int]] = {}
    for model in LISTING_MODELS:
        out[model.__tablename__] = {
            "total": await _count(db, model),
            "active": await _count(db, model, model.is_active.is_(True)),
        }

    out["inquiries"] = {
        "total": await _count(db, Inquiry),
        "pending": await _count(db, Inquiry, Inquiry.status == InquiryStatus.PENDING.value),
    }
    return out
