from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.db.base import Entity


class KnowledgeBranch(Entity):
    """Branch of knowledge (top level of the specialty classifier)."""
    __tablename__ = "knowledge_branches"

    code: Mapped[str] = mapped_column(Text, nullable=False)  # e.g. 12
    name: Mapped[str] = mapped_column(Text, nullable=False)


class Specialty(Entity):
    """Specialty within a knowledge branch."""
    __tablename__ = "specialties"

    code: Mapped[str] = mapped_column(Text, nullable=False)  # e.g. 121
    name: Mapped[str] = mapped_column(Text, nullable=False)
    knowledge_branch_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("knowledge_branches.id", ondelete="SET NULL"), nullable=True
    )
