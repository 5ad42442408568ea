from fastapi import APIRouter

from marketplace.api.v1.endpoints.health import router as health_router
from marketplace.api.v1.endpoints.franchises import router as franchises_router
from marketplace.api.v1.endpoints.businesses import router as businesses_router
from marketplace.api.v1.endpoints.advertisements import router as advertisements_router
from marketplace.api.v1.endpoints.inquiries import router as inquiries_router
from marketplace.api.v1.endpoints.admin import router as admin_router
from marketplace.schemas.common import ErrorResponse


router = APIRouter(
    prefix="/api/v1",
    responses={code: {"model": ErrorResponse} for code in (400, 403, 404, 500)},
)
router.include_router(health_router, tags=["health"])
router.include_router(franchises_router, tags=["franchises"])
router.include_router(businesses_router, tags=["businesses"])
router.include_router(advertisements_router, tags=["advertisements"])
router.include_router(inquiries_router, tags=["inquiries"])
router.include_router(admin_router, tags=["admin"])
