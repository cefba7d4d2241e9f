"""Family tree tables: students, families, grandparent groups, parent pairs, children.

- students: read-only registry rows used as parents and children
- families: title, batch, status, leadership refs
- family_grandparents / family_parent_pairs / family_children: ordered tree
  levels, each with a position column preserving list order
"""

from __future__ import annotations
from alembic import op
import sqlalchemy as sa

# --- Alembic identifiers ---
revision = "20261017_0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade():
    # ---------- students ----------
    op.create_table(
        "students",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("student_code", sa.String(50), nullable=True, unique=True),
        sa.Column("gender", sa.String(10), nullable=False),
        sa.Column("batch", sa.String(50), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("region", sa.String(100), nullable=True),
        sa.Column("zone", sa.String(100), nullable=True),
        sa.Column("wereda", sa.String(100), nullable=True),
        sa.Column("kebele", sa.String(100), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.CheckConstraint("gender IN ('male','female')", name="ck_students_gender"),
    )
    op.create_index("ix_students_batch", "students", ["batch"])

    # ---------- families ----------
    op.create_table(
        "families",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("batch", sa.String(50), nullable=False),
        sa.Column("allow_other_batches", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("status", sa.String(20), nullable=False, server_default="current"),
        sa.Column("leader_id", sa.Uuid(), sa.ForeignKey("students.id", ondelete="SET NULL"), nullable=True),
        sa.Column("co_leader_id", sa.Uuid(), sa.ForeignKey("students.id", ondelete="SET NULL"), nullable=True),
        sa.Column("secretary_id", sa.Uuid(), sa.ForeignKey("students.id", ondelete="SET NULL"), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("status IN ('current','finished')", name="ck_families_status"),
    )
    op.create_index("ix_families_status", "families", ["status"])

    # ---------- grandparent groups ----------
    op.create_table(
        "family_grandparents",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("family_id", sa.Uuid(), sa.ForeignKey("families.id", ondelete="CASCADE"), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False, server_default=""),
        sa.Column("grandfather_id", sa.Uuid(), sa.ForeignKey("students.id", ondelete="SET NULL"), nullable=True),
        sa.Column("grandmother_id", sa.Uuid(), sa.ForeignKey("students.id", ondelete="SET NULL"), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("family_id", "position"),
    )
    op.create_index("ix_family_grandparents_family_id", "family_grandparents", ["family_id"])

    # ---------- parent pairs ----------
    op.create_table(
        "family_parent_pairs",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("grandparent_id", sa.Uuid(), sa.ForeignKey("family_grandparents.id", ondelete="CASCADE"), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("father_id", sa.Uuid(), sa.ForeignKey("students.id", ondelete="SET NULL"), nullable=True),
        sa.Column("mother_id", sa.Uuid(), sa.ForeignKey("students.id", ondelete="SET NULL"), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("grandparent_id", "position"),
    )
    op.create_index("ix_family_parent_pairs_grandparent_id", "family_parent_pairs", ["grandparent_id"])

    # ---------- children ----------
    op.create_table(
        "family_children",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("parent_pair_id", sa.Uuid(), sa.ForeignKey("family_parent_pairs.id", ondelete="CASCADE"), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("student_id", sa.Uuid(), sa.ForeignKey("students.id", ondelete="CASCADE"), nullable=False),
        sa.Column("relationship", sa.String(10), nullable=False),
        sa.Column("birth_order", sa.Integer(), nullable=False),
        sa.Column("added_at", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("parent_pair_id", "position"),
        sa.UniqueConstraint("parent_pair_id", "student_id"),
        sa.CheckConstraint("relationship IN ('son','daughter')", name="ck_family_children_relationship"),
        sa.CheckConstraint("birth_order >= 1", name="ck_family_children_birth_order"),
    )
    op.create_index("ix_family_children_parent_pair_id", "family_children", ["parent_pair_id"])
    op.create_index("ix_family_children_student_id", "family_children", ["student_id"])


def downgrade():
    op.drop_table("family_children")
    op.drop_table("family_parent_pairs")
    op.drop_table("family_grandparents")
    op.drop_table("families")
    op.drop_table("students")
