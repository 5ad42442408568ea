import pytest
from sqlalchemy import select, func

from marketplace.models.advertisement import Advertisement
from marketplace.models.audit_log import AuditLog


def _ids(resp):
    return {row["id"] for row in resp.json()}


@pytest.mark.asyncio
async def test_e2e_new_advertisement_visible_only_after_activation(client, admin_headers):
    # 1) submit
    r = await client.post(
        "/api/v1/advertisements",
        json={"title": "Coffee franchise promo", "placement": "homepage", "price": 150},
    )
    assert r.status_code == 201, r.text
    ad = r.json()
    assert ad["status"] == "pending"
    assert ad["isActive"] is False
    assert ad["paymentStatus"] == "unpaid"

    # 2) hidden from the public list
    r = await client.get("/api/v1/advertisements")
    assert r.status_code == 200
    assert ad["id"] not in _ids(r)

    # 3) moderator activates
    r = await client.patch(
        f"/api/v1/advertisements/{ad['id']}/status",
        headers=admin_headers,
        json={"status": "active", "isActive": True},
    )
    assert r.status_code == 200, r.text
    assert r.json()["status"] == "active"
    assert r.json()["isActive"] is True

    # 4) now public
    r = await client.get("/api/v1/advertisements")
    assert ad["id"] in _ids(r)


@pytest.mark.asyncio
async def test_create_ignores_lifecycle_fields(client):
    r = await client.post(
        "/api/v1/advertisements",
        json={"title": "Sneaky", "status": "active", "isActive": True},
    )
    assert r.status_code == 201
    assert r.json()["status"] == "pending"
    assert r.json()["isActive"] is False


@pytest.mark.asyncio
async def test_create_stamps_owner_from_header(client):
    r = await client.post("/api/v1/advertisements", headers={"X-User-Id": "42"}, json={"title": "Mine"})
    assert r.status_code == 201
    assert r.json()["ownerUserId"] == 42


@pytest.mark.asyncio
async def test_create_validation_failure_is_400(client):
    r = await client.post("/api/v1/advertisements", json={"description": "no title"})
    assert r.status_code == 400
    assert "title" in r.json()["error"]


@pytest.mark.asyncio
async def test_status_patch_requires_moderator(client, seed_listings):
    ad = seed_listings["advertisement"]["pending"]
    r = await client.patch(f"/api/v1/advertisements/{ad.id}/status", json={"status": "active"})
    assert r.status_code == 403
    assert r.json() == {"error": "Moderator key required"}


@pytest.mark.asyncio
async def test_status_patch_unknown_id_is_404(client, admin_headers, db_session):
    r = await client.patch(
        "/api/v1/advertisements/4242/status",
        headers=admin_headers,
        json={"status": "active", "isActive": True},
    )
    assert r.status_code == 404
    assert r.json() == {"error": "Advertisement not found"}

    audit_count = (await db_session.execute(select(func.count()).select_from(AuditLog))).scalar_one()
    assert audit_count == 0


@pytest.mark.asyncio
async def test_status_patch_rejects_contradicting_pair(client, admin_headers, seed_listings):
    ad = seed_listings["advertisement"]["pending"]
    r = await client.patch(
        f"/api/v1/advertisements/{ad.id}/status",
        headers=admin_headers,
        json={"status": "active", "isActive": False},
    )
    assert r.status_code == 400
    assert "contradicts" in r.json()["error"]
    assert ad.status == "pending"


@pytest.mark.asyncio
async def test_status_patch_unknown_status_is_400(client, admin_headers, seed_listings):
    ad = seed_listings["advertisement"]["pending"]
    r = await client.patch(
        f"/api/v1/advertisements/{ad.id}/status",
        headers=admin_headers,
        json={"status": "archived"},
    )
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_repeat_deactivate_is_idempotent(client, admin_headers, seed_listings, db_session):
    ad = seed_listings["advertisement"]["active"]
    url = f"/api/v1/advertisements/{ad.id}/status"
    body = {"status": "inactive", "isActive": False}

    r1 = await client.patch(url, headers=admin_headers, json=body)
    r2 = await client.patch(url, headers=admin_headers, json=body)
    assert r1.status_code == r2.status_code == 200
    assert r1.json()["status"] == r2.json()["status"] == "inactive"

    row = await db_session.get(Advertisement, ad.id)
    assert (row.status, row.is_active) == ("inactive", False)

    audit_count = (await db_session.execute(select(func.count()).select_from(AuditLog))).scalar_one()
    assert audit_count == 1


@pytest.mark.asyncio
async def test_public_detail_hides_non_active(client, seed_listings):
    ads = seed_listings["advertisement"]

    r = await client.get(f"/api/v1/advertisements/{ads['active'].id}")
    assert r.status_code == 200
    assert r.json()["title"] == "advertisement active"

    for state in ("pending", "inactive"):
        r = await client.get(f"/api/v1/advertisements/{ads[state].id}")
        assert r.status_code == 404


@pytest.mark.asyncio
async def test_admin_list_returns_every_state(client, admin_headers, seed_listings):
    r = await client.get("/api/v1/admin/advertisements", headers=admin_headers)
    assert r.status_code == 200
    assert sorted(row["status"] for row in r.json()) == ["active", "inactive", "pending"]

    r = await client.get("/api/v1/admin/advertisements")
    assert r.status_code == 403
