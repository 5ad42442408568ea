from __future__ import annotations

import enum
import logging
from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.errors import NotFound, ValidationFailure
from marketplace.models.business import Business
from marketplace.models.franchise import Franchise
from marketplace.models.inquiry import Inquiry
from marketplace.services.audit import audit

log = logging.getLogger(__name__)


class InquiryStatus(str, enum.Enum):
    PENDING = "pending"
    REPLIED = "replied"
    CLOSED = "closed"


async def get_inquiry(*, db: AsyncSession, inquiry_id: int) -> Inquiry:
    inquiry = await db.get(Inquiry, inquiry_id)
    if inquiry is None:
        raise NotFound("Inquiry not found")
    return inquiry


async def list_inquiries(*, db: AsyncSession) -> Sequence[Inquiry]:
    return (await db.execute(select(Inquiry).order_by(Inquiry.id))).scalars().all()


async def create_inquiry(*, db: AsyncSession, fields: dict[str, Any]) -> Inquiry:
    franchise_id = fields.get("franchise_id")
    business_id = fields.get("business_id")
    if franchise_id is not None and business_id is not None:
        raise ValidationFailure("An inquiry may reference a franchise or a business, not both")

    if franchise_id is not None and await db.get(Franchise, franchise_id) is None:
        raise NotFound("Franchise not found")
    if business_id is not None and await db.get(Business, business_id) is None:
        raise NotFound("Business not found")

    data = {k: v for k, v in fields.items() if k not in ("id", "status")}
    inquiry = Inquiry(**data, status=InquiryStatus.PENDING.value)
    db.add(inquiry)
    await db.flush()
    return inquiry


async def set_inquiry_status(
    *,
    db: AsyncSession,
    inquiry_id: int,
    status: InquiryStatus,
    actor: str,
) -> Inquiry:
    inquiry = await get_inquiry(db=db, inquiry_id=inquiry_id)

    previous = inquiry.status
    if previous == status.value:
        return inquiry

    inquiry.status = status.value
    await audit(
        db,
        actor=actor,
        action="inquiry.status_changed",
        target_type="inquiry",
        target_id=str(inquiry.id),
        detail={"from": previous, "to": status.value},
    )
    await db.flush()

    log.info("inquiry %s status %s -> %s", inquiry.id, previous, status.value)
    return inquiry
