from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from .common import IDModel


class TeacherWrite(BaseModel):
    """Create/replace teacher payload."""
    first_name: str = Field(..., min_length=1, description="First name")
    last_name: str = Field(..., min_length=1, description="Last name")
    middle_name: Optional[str] = Field(None, description="Middle name or patronymic")
    position: Optional[str] = Field(None, description="Position, e.g. docent")
    academic_degree: Optional[str] = Field(None, description="Academic degree")
    email: Optional[EmailStr] = Field(None, description="Contact email")


class TeacherRead(IDModel, TeacherWrite):
    """Teacher read model."""

    class Config:
        from_attributes = True


class GuarantorWrite(BaseModel):
    """Create/replace guarantor payload."""
    teacher_id: int = Field(..., description="Teacher acting as guarantor")
    specialty_id: int = Field(..., description="Specialty whose program is guaranteed")
    educational_program: Optional[str] = Field(None, description="Educational program name")


class GuarantorRead(IDModel, GuarantorWrite):
    """Guarantor read model."""

    class Config:
        from_attributes = True


class HeadOfSmcWrite(BaseModel):
    """Create/replace head of scientific-methodical commission payload."""
    teacher_id: int = Field(..., description="Teacher heading the commission")
    specialty_id: int = Field(..., description="Specialty the commission serves")
    commission_name: Optional[str] = Field(None, description="Commission name")


class HeadOfSmcRead(IDModel, HeadOfSmcWrite):
    class Config:
        from_attributes = True
