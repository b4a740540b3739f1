from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from pethealth.core.path_params import PetId
from pethealth.db import get_db
from pethealth.domains.pets.exception import (
    PET_DELETE_RESPONSES,
    PET_READ_RESPONSES,
    PET_WRITE_RESPONSES,
)
from pethealth.domains.pets.service.pet_service import PetService
from pethealth.schemas.pets.pet_schema import PetCreateRequest, PetOut, PetUpdateRequest


router = APIRouter(
    prefix="/pets",
    tags=["Pets"]
)


@router.get(
    "",
    summary="반려동물 목록 조회",
    description="모든 반려동물을 이름순으로 조회합니다.",
    response_model=List[PetOut],
)
def list_pets(db: Session = Depends(get_db)):
    return PetService(db).list_pets()


@router.get(
    "/{pet_id}",
    summary="반려동물 단건 조회",
    response_model=PetOut,
    responses=PET_READ_RESPONSES,
)
def get_pet(pet_id: PetId, request: Request, db: Session = Depends(get_db)):
    return PetService(db).get_pet(request, pet_id)


# ------------------------
# 반려동물 등록
# ------------------------
@router.post(
    "",
    summary="반려동물 신규 등록",
    status_code=201,
    response_model=PetOut,
    responses=PET_WRITE_RESPONSES,
)
def create_pet(request: Request, body: PetCreateRequest, db: Session = Depends(get_db)):
    """
    반려동물을 등록합니다.

    - name, breed 필수 / species 기본값 dog
    - avatarUrl은 외부 스토리지에 업로드된 이미지 URL
    """
    return PetService(db).create_pet(request, body)


# ------------------------
# 반려동물 정보 부분 수정
# ------------------------
@router.patch(
    "/{pet_id}",
    summary="반려동물 정보 부분 수정",
    description="전송한 필드만 업데이트됩니다.",
    response_model=PetOut,
    responses=PET_WRITE_RESPONSES,
)
def update_pet(pet_id: PetId, request: Request, body: PetUpdateRequest, db: Session = Depends(get_db)):
    return PetService(db).update_pet(request, pet_id, body)


@router.delete(
    "/{pet_id}",
    summary="반려동물 삭제",
    description="몸무게 기록, 이벤트 연결, 접종/투약 기록이 함께 삭제됩니다. 이벤트 자체는 유지됩니다.",
    status_code=204,
    responses=PET_DELETE_RESPONSES,
)
def delete_pet(pet_id: PetId, request: Request, db: Session = Depends(get_db)):
    return PetService(db).delete_pet(request, pet_id)
