from __future__ import annotations

from src.db.models.structure import KnowledgeBranch, Specialty
from src.schemas.structure import SpecialtyWrite
from src.services.base import EntityService


class KnowledgeBranchService(EntityService[KnowledgeBranch]):
    """Knowledge branch administration."""

    model = KnowledgeBranch


class SpecialtyService(EntityService[Specialty]):
    """Specialty administration; a specialty may point at a knowledge branch."""

    model = Specialty

    async def validate(self, payload: SpecialtyWrite) -> None:
        await self.ensure_reference(KnowledgeBranch, payload.knowledge_branch_id, "knowledge_branch_id")
