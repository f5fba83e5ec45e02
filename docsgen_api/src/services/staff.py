from __future__ import annotations

from src.db.models.staff import Guarantor, HeadOfSmc, Teacher
from src.db.models.structure import Specialty
from src.schemas.staff import GuarantorWrite, HeadOfSmcWrite
from src.services.base import EntityService


class TeacherService(EntityService[Teacher]):
    """Teacher administration."""

    model = Teacher


class GuarantorService(EntityService[Guarantor]):
    """Guarantors of educational programs; both the teacher and the specialty must exist."""

    model = Guarantor

    async def validate(self, payload: GuarantorWrite) -> None:
        await self.ensure_reference(Teacher, payload.teacher_id, "teacher_id")
        await self.ensure_reference(Specialty, payload.specialty_id, "specialty_id")


class HeadOfSmcService(EntityService[HeadOfSmc]):
    model = HeadOfSmc

    async def validate(self, payload: HeadOfSmcWrite) -> None:
        await self.ensure_reference(Teacher, payload.teacher_id, "teacher_id")
        await self.ensure_reference(Specialty, payload.specialty_id, "specialty_id")
