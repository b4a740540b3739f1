from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from pethealth.core.path_params import MedicationId, PetId
from pethealth.db import get_db
from pethealth.domains.care.exception import (
    CARE_DELETE_RESPONSES,
    CARE_READ_RESPONSES,
    CARE_WRITE_RESPONSES,
)
from pethealth.domains.care.service.medication_service import MedicationService
from pethealth.schemas.care.medication_schema import (
    MedicationCreateRequest,
    MedicationUpdateRequest,
    MedicationWithStatusOut,
)
from pethealth.schemas.error_schema import ErrorResponse


router = APIRouter(tags=["Medications"])


@router.get(
    "/pets/{pet_id}/medications",
    summary="반려동물 투약 기록 조회",
    description="시작일 내림차순. status는 active 플래그로만 결정됩니다.",
    response_model=List[MedicationWithStatusOut],
    responses={400: {"model": ErrorResponse, "description": "잘못된 ID"}},
)
def list_medications(pet_id: PetId, db: Session = Depends(get_db)):
    return MedicationService(db).list_for_pet(pet_id)


@router.post(
    "/pets/{pet_id}/medications",
    summary="투약 기록 추가",
    status_code=201,
    response_model=MedicationWithStatusOut,
    responses=CARE_WRITE_RESPONSES,
)
def create_medication(
    pet_id: PetId,
    request: Request,
    body: MedicationCreateRequest,
    db: Session = Depends(get_db),
):
    return MedicationService(db).create_medication(request, pet_id, body)


@router.get(
    "/medications/{medication_id}",
    summary="투약 기록 단건 조회",
    response_model=MedicationWithStatusOut,
    responses=CARE_READ_RESPONSES,
)
def get_medication(medication_id: MedicationId, request: Request, db: Session = Depends(get_db)):
    return MedicationService(db).get_medication(request, medication_id)


@router.patch(
    "/medications/{medication_id}",
    summary="투약 기록 부분 수정 (복용 완료 토글 포함)",
    response_model=MedicationWithStatusOut,
    responses=CARE_WRITE_RESPONSES,
)
def update_medication(
    medication_id: MedicationId,
    request: Request,
    body: MedicationUpdateRequest,
    db: Session = Depends(get_db),
):
    return MedicationService(db).update_medication(request, medication_id, body)


@router.delete(
    "/medications/{medication_id}",
    summary="투약 기록 삭제",
    status_code=204,
    responses=CARE_DELETE_RESPONSES,
)
def delete_medication(medication_id: MedicationId, request: Request, db: Session = Depends(get_db)):
    return MedicationService(db).delete_medication(request, medication_id)
