from datetime import datetime

from pydantic import Field, computed_field

from marketplace.schemas.common import CamelModel
from marketplace.services.filters import inquiry_type
from marketplace.services.inquiries import InquiryStatus


class InquiryCreate(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=200)
    phone: str | None = Field(default=None, max_length=50)
    subject: str = Field(min_length=1, max_length=300)
    message: str = Field(min_length=1)
    franchise_id: int | None = None
    business_id: int | None = None


class InquiryStatusUpdate(CamelModel):
    status: InquiryStatus


class InquiryOut(CamelModel):
    id: int
    name: str
    email: str
    phone: str | None
    subject: str
    message: str
    franchise_id: int | None
    business_id: int | None
    status: InquiryStatus
    created_at: datetime

    @computed_field
    @property
    def type(self) -> str:
        return inquiry_type(self)
