from sqlalchemy import String, Text, Integer, Uuid, Enum, ForeignKey, Date
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import Optional
from .base import Base, TimestampMixin
from app.core.utils.enums import ApplicationStatusEnum
from datetime import date
import uuid


class JobApplication(Base, TimestampMixin):
    __tablename__ = "job_applications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    company: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)

    status: Mapped[ApplicationStatusEnum] = mapped_column(
        Enum(
            ApplicationStatusEnum,
            name="application_status",
            values_callable=lambda members: [m.value for m in members],
        ),
        default=ApplicationStatusEnum.APPLIED,
        nullable=False,
        index=True,
    )
    applied_date: Mapped[date] = mapped_column(Date, nullable=False, default=date.today, index=True)
    response_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="job_applications")

    def __repr__(self):
        return f"<JobApplication(id={self.id}, company='{self.company}', status='{self.status.value}')>"
