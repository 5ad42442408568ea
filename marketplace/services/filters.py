from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

ALL = "all"


class InquiryLike(Protocol):
    name: str
    email: str
    subject: str
    status: str
    franchise_id: int | None
    business_id: int | None


@dataclass(frozen=True)
class InquiryQuery:
    search: str = ""
    status: str = ALL
    type: str = ALL


def inquiry_type(inquiry: InquiryLike) -> str:
    if inquiry.franchise_id is not None:
        return "franchise"
    if inquiry.business_id is not None:
        return "business"
    return "general"


def matches_inquiry(inquiry: InquiryLike, query: InquiryQuery) -> bool:
    term = query.search.lower()
    if term and not any(
        term in (value or "").lower() for value in (inquiry.name, inquiry.email, inquiry.subject)
    ):
        return False

    if query.status != ALL and inquiry.status != query.status:
        return False

    if query.type != ALL and inquiry_type(inquiry) != query.type:
        return False

    return True


def filter_inquiries(inquiries: Iterable[InquiryLike], query: InquiryQuery) -> list:
    return [i for i in inquiries if matches_inquiry(i, query)]
