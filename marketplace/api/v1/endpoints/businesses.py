from marketplace.api.v1.endpoints.listings import build_listing_router
from marketplace.models.business import Business
from marketplace.schemas.listing import BusinessCreate, BusinessOut, BusinessUpdate

router = build_listing_router(
    model=Business,
    path="businesses",
    create_schema=BusinessCreate,
    update_schema=BusinessUpdate,
    out_schema=BusinessOut,
)
