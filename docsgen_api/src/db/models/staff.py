from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.db.base import Entity


class Teacher(Entity):
    """Teaching staff member."""
    __tablename__ = "teachers"

    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    middle_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    position: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # docent, professor, etc.
    academic_degree: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Guarantor(Entity):
    """Teacher responsible for the educational program of a specialty."""
    __tablename__ = "guarantors"

    teacher_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("teachers.id", ondelete="CASCADE"), nullable=False
    )
    specialty_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("specialties.id", ondelete="CASCADE"), nullable=False, index=True
    )
    educational_program: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class HeadOfSmc(Entity):
    """Head of the scientific-methodical commission of a specialty."""
    __tablename__ = "heads_of_smc"

    teacher_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("teachers.id", ondelete="CASCADE"), nullable=False
    )
    specialty_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("specialties.id", ondelete="CASCADE"), nullable=False, index=True
    )
    commission_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
