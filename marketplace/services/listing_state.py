from __future__ import annotations

import enum
import logging
from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.errors import ValidationFailure
from marketplace.models.base import ModeratedMixin
from marketplace.services.audit import audit
from marketplace.services.listings import get_listing

log = logging.getLogger(__name__)

L = TypeVar("L", bound=ModeratedMixin)


class ListingStatus(str, enum.Enum):
    PENDING = "pending"
    ACTIVE = "active"
    INACTIVE = "inactive"


def is_active_status(status: ListingStatus | str) -> bool:
    return ListingStatus(status) is ListingStatus.ACTIVE


def resolve_target(*, status: ListingStatus | str | None, is_active: bool | None) -> ListingStatus:
    """
    Turn a moderation request body into a single target status.

    `isActive` alone maps true -> active, false -> inactive (the only form
    franchises were ever sent). When both are given they must agree.
    """
    if status is None and is_active is None:
        raise ValidationFailure("Either status or isActive is required")

    if status is None:
        return ListingStatus.ACTIVE if is_active else ListingStatus.INACTIVE

    try:
        target = ListingStatus(status)
    except ValueError:
        raise ValidationFailure(f"Unknown listing status: {status}")

    if is_active is not None and is_active != is_active_status(target):
        raise ValidationFailure(
            f"isActive={str(is_active).lower()} contradicts status={target.value}"
        )
    return target


async def transition(
    *,
    db: AsyncSession,
    model: type[L],
    listing_id: int,
    target: ListingStatus,
    actor: str,
) -> L:
    """
    Move a listing to `target`, writing status and is_active together.

    Any state may move to any other. Re-applying the current state is a
    no-op success and leaves no audit entry. Raises NotFound for unknown ids.
    Caller commits.
    """
    listing = await get_listing(db=db, model=model, listing_id=listing_id)

    previous = listing.status
    changed = previous != target.value or listing.is_active != is_active_status(target)
    if not changed:
        return listing

    listing.status = target.value
    listing.is_active = is_active_status(target)

    await audit(
        db,
        actor=actor,
        action=f"{model.kind}.status_changed",
        target_type=model.kind,
        target_id=str(listing.id),
        detail={"from": previous, "to": target.value},
    )
    await db.flush()

    log.info("%s %s status %s -> %s", model.kind, listing.id, previous, target.value)
    return listing


async def activate(*, db: AsyncSession, model: type[L], listing_id: int, actor: str) -> L:
    return await transition(db=db, model=model, listing_id=listing_id, target=ListingStatus.ACTIVE, actor=actor)


async def deactivate(*, db: AsyncSession, model: type[L], listing_id: int, actor: str) -> L:
    return await transition(db=db, model=model, listing_id=listing_id, target=ListingStatus.INACTIVE, actor=actor)


async def set_pending(*, db: AsyncSession, model: type[L], listing_id: int, actor: str) -> L:
    return await transition(db=db, model=model, listing_id=listing_id, target=ListingStatus.PENDING, actor=actor)
