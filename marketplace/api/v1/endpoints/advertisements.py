from marketplace.api.v1.endpoints.listings import build_listing_router
from marketplace.models.advertisement import Advertisement
from marketplace.schemas.listing import AdvertisementCreate, AdvertisementOut, AdvertisementUpdate

router = build_listing_router(
    model=Advertisement,
    path="advertisements",
    create_schema=AdvertisementCreate,
    update_schema=AdvertisementUpdate,
    out_schema=AdvertisementOut,
)
