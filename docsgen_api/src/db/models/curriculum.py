from __future__ import annotations

from typing import Optional

from sqlalchemy import Float, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.db.base import Entity


class Subject(Entity):
    """Subject (course) taught within a specialty."""
    __tablename__ = "subjects"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    code: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    specialty_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("specialties.id", ondelete="SET NULL"), nullable=True
    )
    credits: Mapped[float] = mapped_column(Float, nullable=False)  # ECTS
    hours: Mapped[int] = mapped_column(Integer, nullable=False)


class Syllabus(Entity):
    """Syllabus of a subject for one academic year and semester."""
    __tablename__ = "syllabi"

    subject_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    teacher_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("teachers.id", ondelete="SET NULL"), nullable=True
    )
    academic_year: Mapped[str] = mapped_column(Text, nullable=False)  # e.g. 2024-2025
    semester: Mapped[int] = mapped_column(Integer, nullable=False)
    language: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    objectives: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class TeacherLoad(Entity):
    """Hours a teacher gives in a subject during one semester."""
    __tablename__ = "teacher_loads"

    teacher_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("teachers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    subject_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False
    )
    academic_year: Mapped[str] = mapped_column(Text, nullable=False)
    semester: Mapped[int] = mapped_column(Integer, nullable=False)
    lecture_hours: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    practical_hours: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    laboratory_hours: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
