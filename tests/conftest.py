import os

os.environ.setdefault("TELEMETRY_ENABLED", "false")
os.environ.setdefault("ADMIN_API_KEY", "test-admin")

import pytest
import httpx

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

# Import Base + all models so metadata is complete
from marketplace.models.base import Base
from marketplace.models.franchise import Franchise
from marketplace.models.business import Business
from marketplace.models.advertisement import Advertisement
from marketplace.models.inquiry import Inquiry  # noqa: F401
from marketplace.models.audit_log import AuditLog  # noqa: F401

from marketplace.main import app
from marketplace.core.db import get_db


ADMIN_HEADERS = {"X-Admin-Key": os.environ["ADMIN_API_KEY"]}


def _test_db_url(tmp_path) -> str:
    return os.getenv("DATABASE_URL_TEST") or f"sqlite+aiosqlite:///{tmp_path / 'marketplace.db'}"


@pytest.fixture
async def async_engine(tmp_path):
    engine = create_async_engine(_test_db_url(tmp_path), future=True)
    try:
        # Fresh schema per test
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(async_engine):
    session_factory = async_sessionmaker(bind=async_engine, expire_on_commit=False, class_=AsyncSession)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(db_session: AsyncSession):
    """
    HTTP client that uses the test DB session via dependency override.
    """
    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return dict(ADMIN_HEADERS)


@pytest.fixture
async def seed_listings(db_session):
    """One listing of each kind per lifecycle state, owned by user 7."""
    rows = {}
    for model, label_field in ((Franchise, "name"), (Business, "name"), (Advertisement, "title")):
        per_state = {}
        for status, is_active in (("pending", False), ("active", True), ("inactive", False)):
            row = model(**{label_field: f"{model.kind} {status}"}, status=status, is_active=is_active, owner_user_id=7)
            db_session.add(row)
            per_state[status] = row
        rows[model.kind] = per_state

    await db_session.commit()
    return rows
