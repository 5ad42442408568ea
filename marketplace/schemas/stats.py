from pydantic import BaseModel


class ListingCounts(BaseModel):
    total: int
    active: int


class InquiryCounts(BaseModel):
    total: int
    pending: int


class ModerationStatsOut(BaseModel):
    franchises: ListingCounts
    businesses: ListingCounts
    advertisements: ListingCounts
    inquiries: InquiryCounts
