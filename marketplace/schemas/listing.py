from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from marketplace.schemas.common import CamelModel
from marketplace.services.listing_state import ListingStatus


def _reject_null(value):
    # may be omitted from a patch, but never cleared
    if value is None:
        raise ValueError("may not be null")
    return value


class ListingStatusUpdate(CamelModel):
    status: ListingStatus | None = None
    is_active: bool | None = None


class ListingOut(CamelModel):
    id: int
    status: ListingStatus
    is_active: bool
    owner_user_id: int | None
    created_at: datetime
    updated_at: datetime


# Franchises

class FranchiseFields(CamelModel):
    description: str | None = None
    category: str | None = Field(default=None, max_length=100)
    location: str | None = Field(default=None, max_length=200)
    investment_min: int | None = Field(default=None, ge=0)
    investment_max: int | None = Field(default=None, ge=0)
    image_url: str | None = Field(default=None, max_length=500)
    contact_email: str | None = Field(default=None, max_length=200)
    contact_phone: str | None = Field(default=None, max_length=50)
    website: str | None = Field(default=None, max_length=500)


class FranchiseCreate(FranchiseFields):
    name: str = Field(min_length=1, max_length=200)


class FranchiseUpdate(FranchiseFields):
    name: str | None = Field(default=None, min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        return _reject_null(value)


class FranchiseOut(ListingOut, FranchiseFields):
    name: str


# Businesses

class BusinessFields(CamelModel):
    description: str | None = None
    category: str | None = Field(default=None, max_length=100)
    location: str | None = Field(default=None, max_length=200)
    price: int | None = Field(default=None, ge=0)
    annual_revenue: int | None = Field(default=None, ge=0)
    image_url: str | None = Field(default=None, max_length=500)
    contact_email: str | None = Field(default=None, max_length=200)
    contact_phone: str | None = Field(default=None, max_length=50)


class BusinessCreate(BusinessFields):
    name: str = Field(min_length=1, max_length=200)


class BusinessUpdate(BusinessFields):
    name: str | None = Field(default=None, min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        return _reject_null(value)


class BusinessOut(ListingOut, BusinessFields):
    name: str


# Advertisements

PaymentStatus = Literal["unpaid", "paid", "refunded"]


class AdvertisementFields(CamelModel):
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=500)
    target_url: str | None = Field(default=None, max_length=500)
    placement: str | None = Field(default=None, max_length=50)
    duration_days: int | None = Field(default=None, ge=1)
    price: int | None = Field(default=None, ge=0)


class AdvertisementCreate(AdvertisementFields):
    title: str = Field(min_length=1, max_length=200)
    payment_status: PaymentStatus = "unpaid"


class AdvertisementUpdate(AdvertisementFields):
    title: str | None = Field(default=None, min_length=1, max_length=200)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value):
        return _reject_null(value)


class AdvertisementOut(ListingOut, AdvertisementFields):
    title: str
    payment_status: PaymentStatus
