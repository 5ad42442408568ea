from typing import ClassVar

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.models.base import Base, ModeratedMixin


class Advertisement(ModeratedMixin, Base):
    __tablename__ = "advertisements"
    kind: ClassVar[str] = "advertisement"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    target_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # e.g. "homepage", "sidebar"
    placement: Mapped[str | None] = mapped_column(String(50), nullable=True)
    duration_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    price: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # "unpaid" | "paid" | "refunded"
    payment_status: Mapped[str] = mapped_column(String(20), nullable=False, default="unpaid")
