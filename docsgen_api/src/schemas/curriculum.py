from __future__ import annotations

from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field

from .common import IDModel


def check_academic_year(v: str) -> str:
    """Require 'YYYY-YYYY' with consecutive years."""
    parts = v.split("-")
    if len(parts) != 2 or not all(p.isdigit() and len(p) == 4 for p in parts):
        raise ValueError("academic_year must look like 2024-2025")
    if int(parts[1]) != int(parts[0]) + 1:
        raise ValueError("academic_year must span two consecutive years")
    return v


AcademicYear = Annotated[str, AfterValidator(check_academic_year)]


class SubjectWrite(BaseModel):
    """Create/replace subject payload."""
    name: str = Field(..., min_length=1, description="Subject name")
    code: Optional[str] = Field(None, description="Subject code in the curriculum")
    specialty_id: Optional[int] = Field(None, description="Specialty the subject belongs to")
    credits: float = Field(..., gt=0, description="ECTS credits")
    hours: int = Field(..., gt=0, description="Total hours")


class SubjectRead(IDModel, SubjectWrite):
    """Subject read model."""

    class Config:
        from_attributes = True


class SyllabusWrite(BaseModel):
    """Create/replace syllabus payload."""
    subject_id: int = Field(..., description="Subject the syllabus describes")
    teacher_id: Optional[int] = Field(None, description="Lecturer")
    academic_year: AcademicYear = Field(..., description="Academic year, e.g. 2024-2025")
    semester: int = Field(..., ge=1, le=12, description="Semester number")
    language: Optional[str] = Field(None, description="Language of instruction")
    objectives: Optional[str] = Field(None, description="Course objectives")


class SyllabusRead(IDModel, SyllabusWrite):
    """Syllabus read model."""

    class Config:
        from_attributes = True


class TeacherLoadWrite(BaseModel):
    """Create/replace teaching load payload."""
    teacher_id: int = Field(..., description="Teacher giving the hours")
    subject_id: int = Field(..., description="Subject taught")
    academic_year: AcademicYear = Field(..., description="Academic year, e.g. 2024-2025")
    semester: int = Field(..., ge=1, le=12, description="Semester number")
    lecture_hours: int = Field(0, ge=0)
    practical_hours: int = Field(0, ge=0)
    laboratory_hours: int = Field(0, ge=0)


class TeacherLoadRead(IDModel, TeacherLoadWrite):
    """Teaching load read model."""

    class Config:
        from_attributes = True
