from __future__ import annotations

from typing import Any, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.errors import NotFound
from marketplace.models.base import ModeratedMixin

L = TypeVar("L", bound=ModeratedMixin)


async def get_listing(*, db: AsyncSession, model: type[L], listing_id: int) -> L:
    listing = await db.get(model, listing_id)
    if listing is None:
        raise NotFound(f"{model.kind.capitalize()} not found")
    return listing


async def list_listings(
    *,
    db: AsyncSession,
    model: type[L],
    active_only: bool = False,
    owner_user_id: int | None = None,
) -> Sequence[L]:
    stmt = select(model)
    if active_only:
        stmt = stmt.where(model.is_active.is_(True))
    if owner_user_id is not None:
        stmt = stmt.where(model.owner_user_id == owner_user_id)
    stmt = stmt.order_by(model.id)
    return (await db.execute(stmt)).scalars().all()


async def create_listing(
    *,
    db: AsyncSession,
    model: type[L],
    fields: dict[str, Any],
    owner_user_id: int | None,
) -> L:
    """
    Insert a new listing awaiting moderation.

    Lifecycle columns are never taken from `fields`: every submission starts
    pending and hidden.
    """
    data = {k: v for k, v in fields.items() if k not in ("id", "status", "is_active", "owner_user_id")}
    listing = model(**data, status="pending", is_active=False, owner_user_id=owner_user_id)
    db.add(listing)
    await db.flush()
    return listing


async def update_listing(*, db: AsyncSession, model: type[L], listing_id: int, patch: dict[str, Any]) -> L:
    # descriptive fields only; lifecycle goes through listing_state
    listing = await get_listing(db=db, model=model, listing_id=listing_id)
    for key, value in patch.items():
        if key in ("id", "status", "is_active"):
            continue
        setattr(listing, key, value)
    await db.flush()
    return listing
