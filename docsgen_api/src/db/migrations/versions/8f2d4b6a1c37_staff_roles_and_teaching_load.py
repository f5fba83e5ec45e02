"""Staff roles and teaching load.

- guarantors
- heads_of_smc
- teacher_loads
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "8f2d4b6a1c37"
down_revision: Union[str, None] = "3c1e9a7d5b20"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _role_table(name: str, extra: sa.Column) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("teacher_id", sa.Integer(), nullable=False),
        sa.Column("specialty_id", sa.Integer(), nullable=False),
        extra,
        sa.ForeignKeyConstraint(
            ["teacher_id"],
            ["teachers.id"],
            name=op.f(f"fk_{name}_teacher_id_teachers"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["specialty_id"],
            ["specialties.id"],
            name=op.f(f"fk_{name}_specialty_id_specialties"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f(f"pk_{name}")),
    )
    op.create_index(f"ix_{name}_specialty_id", name, ["specialty_id"])


def upgrade() -> None:
    _role_table("guarantors", sa.Column("educational_program", sa.Text(), nullable=True))
    _role_table("heads_of_smc", sa.Column("commission_name", sa.Text(), nullable=True))

    op.create_table(
        "teacher_loads",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("teacher_id", sa.Integer(), nullable=False),
        sa.Column("subject_id", sa.Integer(), nullable=False),
        sa.Column("academic_year", sa.Text(), nullable=False),
        sa.Column("semester", sa.Integer(), nullable=False),
        sa.Column("lecture_hours", sa.Integer(), nullable=False),
        sa.Column("practical_hours", sa.Integer(), nullable=False),
        sa.Column("laboratory_hours", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["teacher_id"],
            ["teachers.id"],
            name=op.f("fk_teacher_loads_teacher_id_teachers"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["subject_id"],
            ["subjects.id"],
            name=op.f("fk_teacher_loads_subject_id_subjects"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_teacher_loads")),
    )
    op.create_index("ix_teacher_loads_teacher_id", "teacher_loads", ["teacher_id"])


def downgrade() -> None:
    op.drop_index("ix_teacher_loads_teacher_id", table_name="teacher_loads")
    op.drop_table("teacher_loads")
    for name in ("heads_of_smc", "guarantors"):
        op.drop_index(f"ix_{name}_specialty_id", table_name=name)
        op.drop_table(name)
