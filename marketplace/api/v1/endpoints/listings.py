import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.db import get_db, store_errors
from marketplace.core.errors import NotFound
from marketplace.models.base import ModeratedMixin
from marketplace.schemas.listing import ListingStatusUpdate
from marketplace.services.auth import get_owner_id, require_moderator, require_owner_id
from marketplace.services.listing_state import resolve_target, transition
from marketplace.services.listings import create_listing, get_listing, list_listings, update_listing

log = logging.getLogger(__name__)


def build_listing_router(
    *,
    model: type[ModeratedMixin],
    path: str,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    out_schema: type[BaseModel],
) -> APIRouter:
    """
    Routes shared by every moderated listing kind:

    public reads (active only), submission, owner edits, the moderator
    status transition, and the moderator/owner full lists.
    """
    router = APIRouter()
    label = model.kind.capitalize()

    async def _refreshed(db: AsyncSession, listing):
        await db.commit()
        await db.refresh(listing)
        return out_schema.model_validate(listing)

    @router.get(f"/{path}", response_model=list[out_schema], name=f"list_active_{path}")
    async def list_active(db: AsyncSession = Depends(get_db)):
        async with store_errors(db):
            rows = await list_listings(db=db, model=model, active_only=True)
        return [out_schema.model_validate(r) for r in rows]

    @router.get(f"/{path}/{{listing_id}}", response_model=out_schema, name=f"get_{model.kind}")
    async def get_active(listing_id: int, db: AsyncSession = Depends(get_db)):
        async with store_errors(db):
            listing = await get_listing(db=db, model=model, listing_id=listing_id)
        if not listing.is_active:
            # hidden listings look the same as missing ones to the public
            raise NotFound(f"{label} not found")
        return out_schema.model_validate(listing)

    @router.post(f"/{path}", response_model=out_schema, status_code=201, name=f"create_{model.kind}")
    async def create(
        payload: create_schema,  # type: ignore[valid-type]
        owner_user_id: int | None = Depends(get_owner_id),
        db: AsyncSession = Depends(get_db),
    ):
        async with store_errors(db):
            listing = await create_listing(
                db=db,
                model=model,
                fields=payload.model_dump(),
                owner_user_id=owner_user_id,
            )
            out = await _refreshed(db, listing)
        log.info("%s %s submitted by user=%s", model.kind, listing.id, owner_user_id)
        return out

    @router.patch(f"/{path}/{{listing_id}}", response_model=out_schema, name=f"update_{model.kind}")
    async def update(
        listing_id: int,
        payload: update_schema,  # type: ignore[valid-type]
        owner_user_id: int = Depends(require_owner_id),
        db: AsyncSession = Depends(get_db),
    ):
        async with store_errors(db):
            listing = await get_listing(db=db, model=model, listing_id=listing_id)
            if listing.owner_user_id != owner_user_id:
                raise HTTPException(status_code=403, detail=f"{label} belongs to another user")

            listing = await update_listing(
                db=db,
                model=model,
                listing_id=listing_id,
                patch=payload.model_dump(exclude_unset=True),
            )
            return await _refreshed(db, listing)

    @router.patch(f"/{path}/{{listing_id}}/status", response_model=out_schema, name=f"set_{model.kind}_status")
    async def set_status(
        listing_id: int,
        payload: ListingStatusUpdate,
        actor: str = Depends(require_moderator),
        db: AsyncSession = Depends(get_db),
    ):
        target = resolve_target(status=payload.status, is_active=payload.is_active)
        async with store_errors(db):
            listing = await transition(db=db, model=model, listing_id=listing_id, target=target, actor=actor)
            return await _refreshed(db, listing)

    @router.get(
        f"/admin/{path}",
        response_model=list[out_schema],
        dependencies=[Depends(require_moderator)],
        name=f"list_all_{path}",
    )
    async def list_all(db: AsyncSession = Depends(get_db)):
        async with store_errors(db):
            rows = await list_listings(db=db, model=model)
        return [out_schema.model_validate(r) for r in rows]

    @router.get(f"/user/{path}", response_model=list[out_schema], name=f"list_own_{path}")
    async def list_own(
        owner_user_id: int = Depends(require_owner_id),
        db: AsyncSession = Depends(get_db),
    ):
        async with store_errors(db):
            rows = await list_listings(db=db, model=model, owner_user_id=owner_user_id)
        return [out_schema.model_validate(r) for r in rows]

    return router
