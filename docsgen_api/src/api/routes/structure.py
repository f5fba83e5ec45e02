from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from src.core.deps import get_current_admin, get_unit_of_work
from src.repositories.unit_of_work import UnitOfWork
from src.schemas.structure import (
    KnowledgeBranchRead,
    KnowledgeBranchWrite,
    SpecialtyRead,
    SpecialtyWrite,
)
from src.services.structure import KnowledgeBranchService, SpecialtyService

router = APIRouter(tags=["Structure"], dependencies=[Depends(get_current_admin)])


def get_knowledge_branch_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> KnowledgeBranchService:
    return KnowledgeBranchService(uow)


def get_specialty_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> SpecialtyService:
    return SpecialtyService(uow)


# PUBLIC_INTERFACE
@router.get(
    "/knowledge-branches",
    response_model=List[KnowledgeBranchRead],
    summary="List knowledge branches",
)
async def list_knowledge_branches(
    service: KnowledgeBranchService = Depends(get_knowledge_branch_service),
) -> List[KnowledgeBranchRead]:
    return [KnowledgeBranchRead.model_validate(x) for x in await service.list_all()]


# PUBLIC_INTERFACE
@router.get(
    "/knowledge-branches/{branch_id}",
    response_model=KnowledgeBranchRead,
    summary="Get knowledge branch",
)
async def get_knowledge_branch(
    branch_id: int = Path(...),
    service: KnowledgeBranchService = Depends(get_knowledge_branch_service),
) -> KnowledgeBranchRead:
    return KnowledgeBranchRead.model_validate(await service.get(branch_id))


# PUBLIC_INTERFACE
@router.post(
    "/knowledge-branches",
    response_model=KnowledgeBranchRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create knowledge branch",
)
async def create_knowledge_branch(
    payload: KnowledgeBranchWrite,
    service: KnowledgeBranchService = Depends(get_knowledge_branch_service),
) -> KnowledgeBranchRead:
    return KnowledgeBranchRead.model_validate(await service.create(payload))


# PUBLIC_INTERFACE
@router.put(
    "/knowledge-branches/{branch_id}",
    response_model=KnowledgeBranchRead,
    summary="Replace knowledge branch",
)
async def update_knowledge_branch(
    payload: KnowledgeBranchWrite,
    branch_id: int = Path(...),
    service: KnowledgeBranchService = Depends(get_knowledge_branch_service),
) -> KnowledgeBranchRead:
    return KnowledgeBranchRead.model_validate(await service.update(branch_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/knowledge-branches/{branch_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete knowledge branch",
)
async def delete_knowledge_branch(
    branch_id: int = Path(...),
    service: KnowledgeBranchService = Depends(get_knowledge_branch_service),
) -> Response:
    await service.delete(branch_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# PUBLIC_INTERFACE
@router.get(
    "/specialties",
    response_model=List[SpecialtyRead],
    summary="List specialties",
)
async def list_specialties(
    service: SpecialtyService = Depends(get_specialty_service),
) -> List[SpecialtyRead]:
    return [SpecialtyRead.model_validate(x) for x in await service.list_all()]


# PUBLIC_INTERFACE
@router.get(
    "/specialties/{specialty_id}",
    response_model=SpecialtyRead,
    summary="Get specialty",
)
async def get_specialty(
    specialty_id: int = Path(...),
    service: SpecialtyService = Depends(get_specialty_service),
) -> SpecialtyRead:
    return SpecialtyRead.model_validate(await service.get(specialty_id))


# PUBLIC_INTERFACE
@router.post(
    "/specialties",
    response_model=SpecialtyRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create specialty",
    description="Create a specialty. The knowledge branch, when given, must exist.",
)
async def create_specialty(
    payload: SpecialtyWrite,
    service: SpecialtyService = Depends(get_specialty_service),
) -> SpecialtyRead:
    return SpecialtyRead.model_validate(await service.create(payload))


# PUBLIC_INTERFACE
@router.put(
    "/specialties/{specialty_id}",
    response_model=SpecialtyRead,
    summary="Replace specialty",
)
async def update_specialty(
    payload: SpecialtyWrite,
    specialty_id: int = Path(...),
    service: SpecialtyService = Depends(get_specialty_service),
) -> SpecialtyRead:
    return SpecialtyRead.model_validate(await service.update(specialty_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/specialties/{specialty_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete specialty",
)
async def delete_specialty(
    specialty_id: int = Path(...),
    service: SpecialtyService = Depends(get_specialty_service),
) -> Response:
    await service.delete(specialty_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
