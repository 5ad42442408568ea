from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.models.base import Base, TimestampMixin


class Inquiry(TimestampMixin, Base):
    __tablename__ = "inquiries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    subject: Mapped[str] = mapped_column(String(300), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    # at most one is set; neither means a general inquiry
    franchise_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("franchises.id"), nullable=True)
    business_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("businesses.id"), nullable=True)

    # "pending" | "replied" | "closed"
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending", index=True)
