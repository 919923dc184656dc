"""
company.py
- Purpose: Company owning employees.
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import relationship, Mapped, mapped_column

from app.models.base import Base


def utcnow() -> datetime:
    # Naive UTC; the columns are timezone=False
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Company(Base):
    __tablename__ = "companies"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    introduction: Mapped[str] = mapped_column(String(500), nullable=False)

    # Insertion order; listings are ordered by it
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utcnow, nullable=False)

    # No ORM delete cascade: CompanyWriteRepo.delete_company removes employees explicitly
    employees: Mapped[list["Employee"]] = relationship(
        back_populates="company",
        order_by="Employee.employee_no",
        passive_deletes=True,
    )
