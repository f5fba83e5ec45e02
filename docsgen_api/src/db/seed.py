"""
Database seeding with demo reference data.

Seeds:
- Knowledge branch 12 (Information technologies) and specialty 121
- Two teachers
- Two subjects of specialty 121
- A guarantor and a commission head for specialty 121
- One syllabus and one teaching load entry per subject for the current academic year

Everything is written in one transaction, so a failed run leaves nothing
behind and can be repeated. Seeding is skipped when the database already
has teachers.

Usage:
  python -m src.db.run_migrations upgrade head
  python -m src.db.seed
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from src.db.models import (
    Guarantor,
    HeadOfSmc,
    KnowledgeBranch,
    Specialty,
    Subject,
    Syllabus,
    Teacher,
    TeacherLoad,
)
from src.db.session import get_async_session
from src.repositories.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
async def seed_all() -> None:
    """Seed the database with demo data through the repositories."""
    async for session in get_async_session():
        await seed_session(session)


# PUBLIC_INTERFACE
async def seed_session(session: AsyncSession) -> bool:
    """
    Seed demo data using the given session.

    Returns:
        True when data was written, False when the database was not empty.
    """
    async with UnitOfWork(session) as uow:
        if await uow.repository(Teacher).get_all():
            logger.info("Database already has teachers; skipping seed.")
            return False

        branch = KnowledgeBranch(code="12", name="Information technologies")
        await uow.repository(KnowledgeBranch).add(branch)
        # ids are needed for the references below
        await uow.flush()

        specialty = Specialty(code="121", name="Software engineering", knowledge_branch_id=branch.id)
        await uow.repository(Specialty).add(specialty)
        lecturer = Teacher(
            first_name="Olena",
            last_name="Kovalenko",
            position="Docent",
            academic_degree="PhD",
            email="o.kovalenko@example.edu",
        )
        assistant = Teacher(first_name="Ivan", last_name="Petrenko", position="Senior lecturer")
        for teacher in (lecturer, assistant):
            await uow.repository(Teacher).add(teacher)
        await uow.flush()

        await uow.repository(Guarantor).add(
            Guarantor(teacher_id=lecturer.id, specialty_id=specialty.id, educational_program="Software engineering")
        )
        await uow.repository(HeadOfSmc).add(
            HeadOfSmc(teacher_id=lecturer.id, specialty_id=specialty.id, commission_name="SMC of specialty 121")
        )

        subjects = [
            Subject(name="Databases", code="PC-07", specialty_id=specialty.id, credits=5.0, hours=150),
            Subject(name="Web programming", code="PC-11", specialty_id=specialty.id, credits=4.0, hours=120),
        ]
        for subject in subjects:
            await uow.repository(Subject).add(subject)
        await uow.flush()

        year = _current_academic_year()
        for subject, teacher, semester in zip(subjects, (lecturer, assistant), (3, 5)):
            await uow.repository(Syllabus).add(
                Syllabus(
                    subject_id=subject.id,
                    teacher_id=teacher.id,
                    academic_year=year,
                    semester=semester,
                    language="Ukrainian",
                )
            )
            await uow.repository(TeacherLoad).add(
                TeacherLoad(
                    teacher_id=teacher.id,
                    subject_id=subject.id,
                    academic_year=year,
                    semester=semester,
                    lecture_hours=32,
                    laboratory_hours=32,
                )
            )
        await uow.commit()
        logger.info("Seeded demo data for academic year %s", year)
        return True


def _current_academic_year(today: date | None = None) -> str:
    """Academic years start on September 1st."""
    today = today or date.today()
    start = today.year if today.month >= 9 else today.year - 1
    return f"{start}-{start + 1}"


if __name__ == "__main__":
    asyncio.run(seed_all())
