from marketplace.api.v1.endpoints.listings import build_listing_router
from marketplace.models.franchise import Franchise
from marketplace.schemas.listing import FranchiseCreate, FranchiseOut, FranchiseUpdate

router = build_listing_router(
    model=Franchise,
    path="franchises",
    create_schema=FranchiseCreate,
    update_schema=FranchiseUpdate,
    out_schema=FranchiseOut,
)
