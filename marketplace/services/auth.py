from fastapi import Header, HTTPException

from marketplace.core.config import settings

MODERATOR = "moderator"


async def require_moderator(x_admin_key: str | None = Header(default=None)) -> str:
    if not x_admin_key or x_admin_key != settings.admin_api_key:
        raise HTTPException(status_code=403, detail="Moderator key required")
    return MODERATOR


async def get_owner_id(x_user_id: int | None = Header(default=None)) -> int | None:
    return x_user_id


async def require_owner_id(x_user_id: int | None = Header(default=None)) -> int:
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="Missing X-User-Id")
    return x_user_id
