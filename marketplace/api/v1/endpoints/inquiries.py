from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.db import get_db, store_errors
from marketplace.schemas.inquiry import InquiryCreate, InquiryOut, InquiryStatusUpdate
from marketplace.services.auth import require_moderator
from marketplace.services.filters import ALL, InquiryQuery, filter_inquiries
from marketplace.services.inquiries import create_inquiry, list_inquiries, set_inquiry_status

router = APIRouter()


@router.post("/inquiries", response_model=InquiryOut, status_code=201)
async def submit_inquiry(payload: InquiryCreate, db: AsyncSession = Depends(get_db)) -> InquiryOut:
    async with store_errors(db):
        inquiry = await create_inquiry(db=db, fields=payload.model_dump())
        await db.commit()
        await db.refresh(inquiry)
    return InquiryOut.model_validate(inquiry)


@router.get("/inquiries", response_model=list[InquiryOut], dependencies=[Depends(require_moderator)])
async def get_inquiries(
    search: str = "",
    status: str = Query(default=ALL, pattern="^(all|pending|replied|closed)$"),
    type: str = Query(default=ALL, pattern="^(all|franchise|business|general)$"),
    db: AsyncSession = Depends(get_db),
) -> list[InquiryOut]:
    async with store_errors(db):
        rows = await list_inquiries(db=db)
    query = InquiryQuery(search=search, status=status, type=type)
    return [InquiryOut.model_validate(r) for r in filter_inquiries(rows, query)]


@router.patch("/inquiries/{inquiry_id}/status", response_model=InquiryOut)
async def update_inquiry_status(
    inquiry_id: int,
    payload: InquiryStatusUpdate,
    actor: str = Depends(require_moderator),
    db: AsyncSession = Depends(get_db),
) -> InquiryOut:
    async with store_errors(db):
        inquiry = await set_inquiry_status(db=db, inquiry_id=inquiry_id, status=payload.status, actor=actor)
        await db.commit()
        await db.refresh(inquiry)
    return InquiryOut.model_validate(inquiry)
