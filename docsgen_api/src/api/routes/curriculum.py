from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from src.core.deps import get_current_admin, get_unit_of_work
from src.repositories.unit_of_work import UnitOfWork
from src.schemas.curriculum import (
    SubjectRead,
    SubjectWrite,
    SyllabusRead,
    SyllabusWrite,
    TeacherLoadRead,
    TeacherLoadWrite,
)
from src.services.curriculum import SubjectService, SyllabusService, TeacherLoadService

router = APIRouter(tags=["Curriculum"], dependencies=[Depends(get_current_admin)])


def get_subject_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> SubjectService:
    return SubjectService(uow)


def get_syllabus_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> SyllabusService:
    return SyllabusService(uow)


def get_teacher_load_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> TeacherLoadService:
    return TeacherLoadService(uow)


# PUBLIC_INTERFACE
@router.get(
    "/subjects",
    response_model=List[SubjectRead],
    summary="List subjects",
)
async def list_subjects(
    service: SubjectService = Depends(get_subject_service),
) -> List[SubjectRead]:
    return [SubjectRead.model_validate(x) for x in await service.list_all()]


# PUBLIC_INTERFACE
@router.get(
    "/subjects/{subject_id}",
    response_model=SubjectRead,
    summary="Get subject",
)
async def get_subject(
    subject_id: int = Path(...),
    service: SubjectService = Depends(get_subject_service),
) -> SubjectRead:
    return SubjectRead.model_validate(await service.get(subject_id))


# PUBLIC_INTERFACE
@router.get(
    "/subjects/{subject_id}/syllabi",
    response_model=List[SyllabusRead],
    summary="List syllabi of a subject",
    description="Syllabi of one subject, newest academic year first.",
)
async def list_subject_syllabi(
    subject_id: int = Path(...),
    service: SyllabusService = Depends(get_syllabus_service),
) -> List[SyllabusRead]:
    return [SyllabusRead.model_validate(x) for x in await service.list_for_subject(subject_id)]


# PUBLIC_INTERFACE
@router.post(
    "/subjects",
    response_model=SubjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create subject",
)
async def create_subject(
    payload: SubjectWrite,
    service: SubjectService = Depends(get_subject_service),
) -> SubjectRead:
    return SubjectRead.model_validate(await service.create(payload))


# PUBLIC_INTERFACE
@router.put(
    "/subjects/{subject_id}",
    response_model=SubjectRead,
    summary="Replace subject",
)
async def update_subject(
    payload: SubjectWrite,
    subject_id: int = Path(...),
    service: SubjectService = Depends(get_subject_service),
) -> SubjectRead:
    return SubjectRead.model_validate(await service.update(subject_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/subjects/{subject_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete subject",
)
async def delete_subject(
    subject_id: int = Path(...),
    service: SubjectService = Depends(get_subject_service),
) -> Response:
    await service.delete(subject_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# PUBLIC_INTERFACE
@router.get(
    "/syllabi",
    response_model=List[SyllabusRead],
    summary="List syllabi",
)
async def list_syllabi(
    service: SyllabusService = Depends(get_syllabus_service),
) -> List[SyllabusRead]:
    return [SyllabusRead.model_validate(x) for x in await service.list_all()]


# PUBLIC_INTERFACE
@router.get(
    "/syllabi/{syllabus_id}",
    response_model=SyllabusRead,
    summary="Get syllabus",
)
async def get_syllabus(
    syllabus_id: int = Path(...),
    service: SyllabusService = Depends(get_syllabus_service),
) -> SyllabusRead:
    return SyllabusRead.model_validate(await service.get(syllabus_id))


# PUBLIC_INTERFACE
@router.post(
    "/syllabi",
    response_model=SyllabusRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create syllabus",
    description="Create a syllabus. The subject must exist, and so must the teacher when given.",
)
async def create_syllabus(
    payload: SyllabusWrite,
    service: SyllabusService = Depends(get_syllabus_service),
) -> SyllabusRead:
    return SyllabusRead.model_validate(await service.create(payload))


# PUBLIC_INTERFACE
@router.put(
    "/syllabi/{syllabus_id}",
    response_model=SyllabusRead,
    summary="Replace syllabus",
)
async def update_syllabus(
    payload: SyllabusWrite,
    syllabus_id: int = Path(...),
    service: SyllabusService = Depends(get_syllabus_service),
) -> SyllabusRead:
    return SyllabusRead.model_validate(await service.update(syllabus_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/syllabi/{syllabus_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete syllabus",
)
async def delete_syllabus(
    syllabus_id: int = Path(...),
    service: SyllabusService = Depends(get_syllabus_service),
) -> Response:
    await service.delete(syllabus_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# PUBLIC_INTERFACE
@router.get(
    "/teacher-loads",
    response_model=List[TeacherLoadRead],
    summary="List teaching load",
)
async def list_teacher_loads(
    service: TeacherLoadService = Depends(get_teacher_load_service),
) -> List[TeacherLoadRead]:
    return [TeacherLoadRead.model_validate(x) for x in await service.list_all()]


# PUBLIC_INTERFACE
@router.get(
    "/teachers/{teacher_id}/loads",
    response_model=List[TeacherLoadRead],
    summary="Teaching load of a teacher",
    description="Load entries of one teacher, newest academic year first.",
)
async def list_loads_of_teacher(
    teacher_id: int = Path(...),
    service: TeacherLoadService = Depends(get_teacher_load_service),
) -> List[TeacherLoadRead]:
    return [TeacherLoadRead.model_validate(x) for x in await service.list_for_teacher(teacher_id)]


# PUBLIC_INTERFACE
@router.get(
    "/teacher-loads/{load_id}",
    response_model=TeacherLoadRead,
    summary="Get teaching load entry",
)
async def get_teacher_load(
    load_id: int = Path(...),
    service: TeacherLoadService = Depends(get_teacher_load_service),
) -> TeacherLoadRead:
    return TeacherLoadRead.model_validate(await service.get(load_id))


# PUBLIC_INTERFACE
@router.post(
    "/teacher-loads",
    response_model=TeacherLoadRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create teaching load entry",
)
async def create_teacher_load(
    payload: TeacherLoadWrite,
    service: TeacherLoadService = Depends(get_teacher_load_service),
) -> TeacherLoadRead:
    return TeacherLoadRead.model_validate(await service.create(payload))


# PUBLIC_INTERFACE
@router.put(
    "/teacher-loads/{load_id}",
    response_model=TeacherLoadRead,
    summary="Replace teaching load entry",
)
async def update_teacher_load(
    payload: TeacherLoadWrite,
    load_id: int = Path(...),
    service: TeacherLoadService = Depends(get_teacher_load_service),
) -> TeacherLoadRead:
    return TeacherLoadRead.model_validate(await service.update(load_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/teacher-loads/{load_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete teaching load entry",
)
async def delete_teacher_load(
    load_id: int = Path(...),
    service: TeacherLoadService = Depends(get_teacher_load_service),
) -> Response:
    await service.delete(load_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
