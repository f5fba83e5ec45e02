from __future__ import annotations

from src.db.models.curriculum import Subject, Syllabus, TeacherLoad
from src.db.models.staff import Teacher
from src.db.models.structure import Specialty
from src.schemas.curriculum import SubjectWrite, SyllabusWrite, TeacherLoadWrite
from src.services.base import EntityService


class SubjectService(EntityService[Subject]):
    """Subject administration."""

    model = Subject

    async def validate(self, payload: SubjectWrite) -> None:
        await self.ensure_reference(Specialty, payload.specialty_id, "specialty_id")


class SyllabusService(EntityService[Syllabus]):
    """
    Syllabus administration.

    A syllabus must describe an existing subject; the lecturer is optional but
    must exist when given.
    """

    model = Syllabus

    async def validate(self, payload: SyllabusWrite) -> None:
        await self.ensure_reference(Subject, payload.subject_id, "subject_id")
        await self.ensure_reference(Teacher, payload.teacher_id, "teacher_id")

    # PUBLIC_INTERFACE
    async def list_for_subject(self, subject_id: int) -> list[Syllabus]:
        """Return the syllabi of one subject, newest academic year first."""
        subject_repo = self.uow.repository(Subject)
        await subject_repo.get_by_id(subject_id)
        syllabi = [s for s in await self.repo.get_all() if s.subject_id == subject_id]
        return sorted(syllabi, key=lambda s: (s.academic_year, s.semester), reverse=True)


class TeacherLoadService(EntityService[TeacherLoad]):
    """Teaching load: hours per teacher, subject and semester."""

    model = TeacherLoad

    async def validate(self, payload: TeacherLoadWrite) -> None:
        await self.ensure_reference(Teacher, payload.teacher_id, "teacher_id")
        await self.ensure_reference(Subject, payload.subject_id, "subject_id")

    # PUBLIC_INTERFACE
    async def list_for_teacher(self, teacher_id: int) -> list[TeacherLoad]:
        """Return the load of one teacher, newest academic year first."""
        await self.uow.repository(Teacher).get_by_id(teacher_id)
        loads = [x for x in await self.repo.get_all() if x.teacher_id == teacher_id]
        return sorted(loads, key=lambda x: (x.academic_year, x.semester), reverse=True)
