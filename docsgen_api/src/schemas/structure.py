from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .common import IDModel


class KnowledgeBranchWrite(BaseModel):
    """Create/replace knowledge branch payload."""
    code: str = Field(..., min_length=1, description="Branch code, e.g. 12")
    name: str = Field(..., min_length=1, description="Branch name")


class KnowledgeBranchRead(IDModel, KnowledgeBranchWrite):
    """Knowledge branch read model."""

    class Config:
        from_attributes = True


class SpecialtyWrite(BaseModel):
    """Create/replace specialty payload."""
    code: str = Field(..., min_length=1, description="Specialty code, e.g. 121")
    name: str = Field(..., min_length=1, description="Specialty name")
    knowledge_branch_id: Optional[int] = Field(None, description="Owning knowledge branch")


class SpecialtyRead(IDModel, SpecialtyWrite):
    """Specialty read model."""

    class Config:
        from_attributes = True
