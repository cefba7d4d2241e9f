"""
Student ORM Model
Maps to students table
"""
from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Date, String
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.infrastructure.database.base_model import Base


class StudentModel(Base):
    """
    SQLAlchemy model for students table.

    Owned by the student registry; the families context only reads it.
    """

    __tablename__ = "students"

    # Core Fields
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    student_code: Mapped[str | None] = mapped_column(String(50), unique=True, nullable=True)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)
    batch: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Address
    region: Mapped[str | None] = mapped_column(String(100), nullable=True)
    zone: Mapped[str | None] = mapped_column(String(100), nullable=True)
    wereda: Mapped[str | None] = mapped_column(String(100), nullable=True)
    kebele: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Status Flags
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<StudentModel(id={self.id}, batch={self.batch})>"
