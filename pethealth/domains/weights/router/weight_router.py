from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from pethealth.core.path_params import PetId
from pethealth.db import get_db
from pethealth.domains.weights.exception import WEIGHT_CREATE_RESPONSES
from pethealth.domains.weights.service.weight_service import WeightService
from pethealth.schemas.error_schema import ErrorResponse
from pethealth.schemas.weights.weight_schema import (
    WeightEntryCreateRequest,
    WeightEntryOut,
    WeightEntryWithPetOut,
)


router = APIRouter(tags=["Weights"])


@router.get(
    "/pets/{pet_id}/weights",
    summary="반려동물 몸무게 기록 조회",
    description="측정일 오름차순으로 반환합니다.",
    response_model=List[WeightEntryOut],
    responses={400: {"model": ErrorResponse, "description": "잘못된 ID"}},
)
def list_pet_weights(pet_id: PetId, db: Session = Depends(get_db)):
    return WeightService(db).list_for_pet(pet_id)


@router.get(
    "/weight-entries",
    summary="전체 몸무게 기록 조회 (반려동물 이름 포함)",
    response_model=List[WeightEntryWithPetOut],
)
def list_weight_entries(db: Session = Depends(get_db)):
    return WeightService(db).list_all()


@router.post(
    "/weight-entries",
    summary="몸무게 기록",
    description="몸무게 기록은 수정/삭제할 수 없습니다.",
    status_code=201,
    response_model=WeightEntryOut,
    responses=WEIGHT_CREATE_RESPONSES,
)
def record_weight(request: Request, body: WeightEntryCreateRequest, db: Session = Depends(get_db)):
    return WeightService(db).record_weight(request, body)
