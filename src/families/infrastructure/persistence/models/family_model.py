"""
Family ORM Models
Maps the family tree onto families → family_grandparents →
family_parent_pairs → family_children
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.domain.base_entity import utcnow
from src.shared.infrastructure.database.base_model import Base
from src.families.infrastructure.persistence.models.student_model import StudentModel


class FamilyModel(Base):
    """SQLAlchemy model for families table."""

    __tablename__ = "families"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    batch: Mapped[str] = mapped_column(String(50), nullable=False)
    allow_other_batches: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="current", index=True)

    # Leadership (student refs)
    leader_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("students.id", ondelete="SET NULL"), nullable=True
    )
    co_leader_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("students.id", ondelete="SET NULL"), nullable=True
    )
    secretary_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("students.id", ondelete="SET NULL"), nullable=True
    )

    grandparents: Mapped[list[FamilyGrandParentModel]] = relationship(
        back_populates="family",
        cascade="all, delete-orphan",
        order_by="FamilyGrandParentModel.position",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<FamilyModel(id={self.id}, title={self.title})>"


class FamilyGrandParentModel(Base):
    """One grandparent group of a family."""

    __tablename__ = "family_grandparents"
    __table_args__ = (UniqueConstraint("family_id", "position"),)

    family_id: Mapped[UUID] = mapped_column(
        ForeignKey("families.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    grandfather_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("students.id", ondelete="SET NULL"), nullable=True
    )
    grandmother_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("students.id", ondelete="SET NULL"), nullable=True
    )

    family: Mapped[FamilyModel] = relationship(back_populates="grandparents")
    parent_pairs: Mapped[list[FamilyParentPairModel]] = relationship(
        back_populates="grandparent",
        cascade="all, delete-orphan",
        order_by="FamilyParentPairModel.position",
        lazy="selectin",
    )


class FamilyParentPairModel(Base):
    """A father/mother unit under a grandparent group."""

    __tablename__ = "family_parent_pairs"
    __table_args__ = (UniqueConstraint("grandparent_id", "position"),)

    grandparent_id: Mapped[UUID] = mapped_column(
        ForeignKey("family_grandparents.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    father_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("students.id", ondelete="SET NULL"), nullable=True
    )
    mother_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("students.id", ondelete="SET NULL"), nullable=True
    )

    grandparent: Mapped[FamilyGrandParentModel] = relationship(back_populates="parent_pairs")
    father: Mapped[Optional[StudentModel]] = relationship(
        foreign_keys=[father_id], lazy="selectin"
    )
    mother: Mapped[Optional[StudentModel]] = relationship(
        foreign_keys=[mother_id], lazy="selectin"
    )
    children: Mapped[list[FamilyChildModel]] = relationship(
        back_populates="parent_pair",
        cascade="all, delete-orphan",
        order_by="FamilyChildModel.position",
        lazy="selectin",
    )


class FamilyChildModel(Base):
    """A child placed under a parent pair."""

    __tablename__ = "family_children"
    __table_args__ = (
        UniqueConstraint("parent_pair_id", "position"),
        UniqueConstraint("parent_pair_id", "student_id"),
    )

    parent_pair_id: Mapped[UUID] = mapped_column(
        ForeignKey("family_parent_pairs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # "relationship" would shadow sqlalchemy.orm.relationship in this class body
    relation: Mapped[str] = mapped_column("relationship", String(10), nullable=False)
    birth_order: Mapped[int] = mapped_column(Integer, nullable=False)
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    parent_pair: Mapped[FamilyParentPairModel] = relationship(back_populates="children")
    student: Mapped[StudentModel] = relationship(lazy="selectin")
