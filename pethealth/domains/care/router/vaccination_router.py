from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from pethealth.core.clock import get_today
from pethealth.core.path_params import PetId, VaccinationId
from pethealth.db import get_db
from pethealth.domains.care.exception import (
    CARE_DELETE_RESPONSES,
    CARE_READ_RESPONSES,
    CARE_WRITE_RESPONSES,
)
from pethealth.domains.care.service.vaccination_service import VaccinationService
from pethealth.schemas.care.vaccination_schema import (
    VaccinationCreateRequest,
    VaccinationUpdateRequest,
    VaccinationWithStatusOut,
)
from pethealth.schemas.error_schema import ErrorResponse


router = APIRouter(tags=["Vaccinations"])


@router.get(
    "/pets/{pet_id}/vaccinations",
    summary="반려동물 접종 기록 조회",
    description="접종일 내림차순. 각 기록에 상태(overdue/today/soon/current/recorded)가 포함됩니다.",
    response_model=List[VaccinationWithStatusOut],
    responses={400: {"model": ErrorResponse, "description": "잘못된 ID"}},
)
def list_vaccinations(
    pet_id: PetId,
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    return VaccinationService(db).list_for_pet(pet_id, today)


@router.post(
    "/pets/{pet_id}/vaccinations",
    summary="접종 기록 추가",
    status_code=201,
    response_model=VaccinationWithStatusOut,
    responses=CARE_WRITE_RESPONSES,
)
def create_vaccination(
    pet_id: PetId,
    request: Request,
    body: VaccinationCreateRequest,
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    return VaccinationService(db).create_vaccination(request, pet_id, body, today)


@router.get(
    "/vaccinations/{vaccination_id}",
    summary="접종 기록 단건 조회",
    response_model=VaccinationWithStatusOut,
    responses=CARE_READ_RESPONSES,
)
def get_vaccination(
    vaccination_id: VaccinationId,
    request: Request,
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    return VaccinationService(db).get_vaccination(request, vaccination_id, today)


@router.patch(
    "/vaccinations/{vaccination_id}",
    summary="접종 기록 부분 수정",
    response_model=VaccinationWithStatusOut,
    responses=CARE_WRITE_RESPONSES,
)
def update_vaccination(
    vaccination_id: VaccinationId,
    request: Request,
    body: VaccinationUpdateRequest,
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    return VaccinationService(db).update_vaccination(request, vaccination_id, body, today)


@router.delete(
    "/vaccinations/{vaccination_id}",
    summary="접종 기록 삭제",
    status_code=204,
    responses=CARE_DELETE_RESPONSES,
)
def delete_vaccination(vaccination_id: VaccinationId, request: Request, db: Session = Depends(get_db)):
    return VaccinationService(db).delete_vaccination(request, vaccination_id)
