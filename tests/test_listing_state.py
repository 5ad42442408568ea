import pytest
from sqlalchemy import select, func

from marketplace.core.errors import NotFound, ValidationFailure
from marketplace.models.advertisement import Advertisement
from marketplace.models.audit_log import AuditLog
from marketplace.models.business import Business
from marketplace.models.franchise import Franchise
from marketplace.services.listing_state import (
    ListingStatus,
    activate,
    deactivate,
    is_active_status,
    resolve_target,
    set_pending,
)


async def _audit_count(db_session) -> int:
    return (await db_session.execute(select(func.count()).select_from(AuditLog))).scalar_one()


def test_is_active_derived_from_status():
    assert is_active_status(ListingStatus.ACTIVE) is True
    assert is_active_status("pending") is False
    assert is_active_status("inactive") is False


@pytest.mark.parametrize(
    "status, is_active, expected",
    [
        ("active", None, ListingStatus.ACTIVE),
        ("active", True, ListingStatus.ACTIVE),
        ("pending", False, ListingStatus.PENDING),
        ("inactive", None, ListingStatus.INACTIVE),
        (None, True, ListingStatus.ACTIVE),
        (None, False, ListingStatus.INACTIVE),
    ],
)
def test_resolve_target(status, is_active, expected):
    assert resolve_target(status=status, is_active=is_active) is expected


@pytest.mark.parametrize(
    "status, is_active",
    [("active", False), ("pending", True), ("inactive", True), (None, None), ("archived", None)],
)
def test_resolve_target_rejects_inconsistent_or_empty(status, is_active):
    with pytest.raises(ValidationFailure):
        resolve_target(status=status, is_active=is_active)


@pytest.mark.asyncio
@pytest.mark.parametrize("model", [Franchise, Business, Advertisement])
async def test_every_state_reaches_every_other(db_session, seed_listings, model):
    ops = {"active": activate, "inactive": deactivate, "pending": set_pending}

    for start in ("pending", "active", "inactive"):
        for target, op in ops.items():
            listing = seed_listings[model.kind][start]
            await op(db=db_session, model=model, listing_id=listing.id, actor="test")
            await db_session.commit()

            row = await db_session.get(model, listing.id)
            assert row.status == target
            assert row.is_active is (target == "active")


@pytest.mark.asyncio
async def test_activate_is_idempotent_and_audited_once(db_session, seed_listings):
    ad = seed_listings["advertisement"]["pending"]

    await activate(db=db_session, model=Advertisement, listing_id=ad.id, actor="test")
    await db_session.commit()
    first = (ad.status, ad.is_active)

    await activate(db=db_session, model=Advertisement, listing_id=ad.id, actor="test")
    await db_session.commit()

    assert (ad.status, ad.is_active) == first == ("active", True)
    assert await _audit_count(db_session) == 1

    entry = (await db_session.execute(select(AuditLog))).scalar_one()
    assert entry.action == "advertisement.status_changed"
    assert entry.target_id == str(ad.id)
    assert entry.detail == {"from": "pending", "to": "active"}


@pytest.mark.asyncio
async def test_activate_unknown_id_raises_not_found_without_mutation(db_session, seed_listings):
    before = [
        (r.id, r.status, r.is_active)
        for r in (await db_session.execute(select(Business).order_by(Business.id))).scalars()
    ]

    with pytest.raises(NotFound):
        await activate(db=db_session, model=Business, listing_id=9999, actor="test")

    after = [
        (r.id, r.status, r.is_active)
        for r in (await db_session.execute(select(Business).order_by(Business.id))).scalars()
    ]
    assert after == before
    assert await _audit_count(db_session) == 0
