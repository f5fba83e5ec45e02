from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from src.core.deps import get_current_admin, get_unit_of_work
from src.repositories.unit_of_work import UnitOfWork
from src.schemas.staff import (
    GuarantorRead,
    GuarantorWrite,
    HeadOfSmcRead,
    HeadOfSmcWrite,
    TeacherRead,
    TeacherWrite,
)
from src.services.staff import GuarantorService, HeadOfSmcService, TeacherService

router = APIRouter(tags=["Teachers"], dependencies=[Depends(get_current_admin)])


def get_teacher_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> TeacherService:
    return TeacherService(uow)


def get_guarantor_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> GuarantorService:
    return GuarantorService(uow)


def get_head_of_smc_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> HeadOfSmcService:
    return HeadOfSmcService(uow)


# PUBLIC_INTERFACE
@router.get(
    "/teachers",
    response_model=List[TeacherRead],
    summary="List teachers",
)
async def list_teachers(
    service: TeacherService = Depends(get_teacher_service),
) -> List[TeacherRead]:
    return [TeacherRead.model_validate(x) for x in await service.list_all()]


# PUBLIC_INTERFACE
@router.get(
    "/teachers/{teacher_id}",
    response_model=TeacherRead,
    summary="Get teacher",
)
async def get_teacher(
    teacher_id: int = Path(...),
    service: TeacherService = Depends(get_teacher_service),
) -> TeacherRead:
    return TeacherRead.model_validate(await service.get(teacher_id))


# PUBLIC_INTERFACE
@router.post(
    "/teachers",
    response_model=TeacherRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create teacher",
)
async def create_teacher(
    payload: TeacherWrite,
    service: TeacherService = Depends(get_teacher_service),
) -> TeacherRead:
    return TeacherRead.model_validate(await service.create(payload))


# PUBLIC_INTERFACE
@router.put(
    "/teachers/{teacher_id}",
    response_model=TeacherRead,
    summary="Replace teacher",
    description="Overwrite every field of the teacher with the payload.",
)
async def update_teacher(
    payload: TeacherWrite,
    teacher_id: int = Path(...),
    service: TeacherService = Depends(get_teacher_service),
) -> TeacherRead:
    return TeacherRead.model_validate(await service.update(teacher_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/teachers/{teacher_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete teacher",
    description="Also removes the teacher's guarantor and commission roles and teaching load.",
)
async def delete_teacher(
    teacher_id: int = Path(...),
    service: TeacherService = Depends(get_teacher_service),
) -> Response:
    await service.delete(teacher_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# PUBLIC_INTERFACE
@router.get(
    "/guarantors",
    response_model=List[GuarantorRead],
    summary="List guarantors",
)
async def list_guarantors(
    service: GuarantorService = Depends(get_guarantor_service),
) -> List[GuarantorRead]:
    return [GuarantorRead.model_validate(x) for x in await service.list_all()]


# PUBLIC_INTERFACE
@router.get(
    "/guarantors/{guarantor_id}",
    response_model=GuarantorRead,
    summary="Get guarantor",
)
async def get_guarantor(
    guarantor_id: int = Path(...),
    service: GuarantorService = Depends(get_guarantor_service),
) -> GuarantorRead:
    return GuarantorRead.model_validate(await service.get(guarantor_id))


# PUBLIC_INTERFACE
@router.post(
    "/guarantors",
    response_model=GuarantorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Appoint guarantor",
    description="Make a teacher the guarantor of a specialty's educational program.",
)
async def create_guarantor(
    payload: GuarantorWrite,
    service: GuarantorService = Depends(get_guarantor_service),
) -> GuarantorRead:
    return GuarantorRead.model_validate(await service.create(payload))


# PUBLIC_INTERFACE
@router.put(
    "/guarantors/{guarantor_id}",
    response_model=GuarantorRead,
    summary="Replace guarantor",
)
async def update_guarantor(
    payload: GuarantorWrite,
    guarantor_id: int = Path(...),
    service: GuarantorService = Depends(get_guarantor_service),
) -> GuarantorRead:
    return GuarantorRead.model_validate(await service.update(guarantor_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/guarantors/{guarantor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete guarantor",
)
async def delete_guarantor(
    guarantor_id: int = Path(...),
    service: GuarantorService = Depends(get_guarantor_service),
) -> Response:
    await service.delete(guarantor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# PUBLIC_INTERFACE
@router.get(
    "/heads-of-smc",
    response_model=List[HeadOfSmcRead],
    summary="List heads of scientific-methodical commissions",
)
async def list_heads_of_smc(
    service: HeadOfSmcService = Depends(get_head_of_smc_service),
) -> List[HeadOfSmcRead]:
    return [HeadOfSmcRead.model_validate(x) for x in await service.list_all()]


# PUBLIC_INTERFACE
@router.get(
    "/heads-of-smc/{head_id}",
    response_model=HeadOfSmcRead,
    summary="Get head of commission",
)
async def get_head_of_smc(
    head_id: int = Path(...),
    service: HeadOfSmcService = Depends(get_head_of_smc_service),
) -> HeadOfSmcRead:
    return HeadOfSmcRead.model_validate(await service.get(head_id))


# PUBLIC_INTERFACE
@router.post(
    "/heads-of-smc",
    response_model=HeadOfSmcRead,
    status_code=status.HTTP_201_CREATED,
    summary="Appoint head of commission",
)
async def create_head_of_smc(
    payload: HeadOfSmcWrite,
    service: HeadOfSmcService = Depends(get_head_of_smc_service),
) -> HeadOfSmcRead:
    return HeadOfSmcRead.model_validate(await service.create(payload))


# PUBLIC_INTERFACE
@router.put(
    "/heads-of-smc/{head_id}",
    response_model=HeadOfSmcRead,
    summary="Replace head of commission",
)
async def update_head_of_smc(
    payload: HeadOfSmcWrite,
    head_id: int = Path(...),
    service: HeadOfSmcService = Depends(get_head_of_smc_service),
) -> HeadOfSmcRead:
    return HeadOfSmcRead.model_validate(await service.update(head_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/heads-of-smc/{head_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete head of commission",
)
async def delete_head_of_smc(
    head_id: int = Path(...),
    service: HeadOfSmcService = Depends(get_head_of_smc_service),
) -> Response:
    await service.delete(head_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
