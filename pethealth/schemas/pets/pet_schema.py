from datetime import date, datetime
from typing import Optional

from pydantic import Field

from pethealth.models.pet import Species
from pethealth.schemas.base_schema import CamelModel


class PetFields(CamelModel):
    """선택 입력 항목 (등록/수정 공통)"""
    date_of_birth: Optional[date] = Field(None, description="생년월일 (YYYY-MM-DD)")
    avatar_url: Optional[str] = Field(None, max_length=255, description="프로필 이미지 URL")
    color: Optional[str] = Field(None, max_length=50)
    gender: Optional[str] = Field(None, max_length=20)
    microchip_number: Optional[str] = Field(None, max_length=50)
    microchip_location: Optional[str] = Field(None, max_length=100)
    vet_name: Optional[str] = Field(None, max_length=100, description="주치의")
    father_name: Optional[str] = Field(None, max_length=100)
    mother_name: Optional[str] = Field(None, max_length=100)
    hair_length: Optional[str] = Field(None, max_length=50)
    desexed: Optional[str] = Field(None, max_length=20)
    food_brand: Optional[str] = Field(None, max_length=100)
    per_meal_amount: Optional[str] = Field(None, max_length=50)
    meals_per_day: Optional[str] = Field(None, max_length=20)
    yearly_vaccination_date: Optional[date] = None
    food_bowl_colour: Optional[str] = Field(None, max_length=50)
    traits: Optional[str] = Field(None, description="성격, 습관 등")


class PetCreateRequest(PetFields):
    """반려동물 등록 요청"""
    name: str = Field(..., min_length=1, max_length=100, description="이름")
    breed: str = Field(..., min_length=1, max_length=100, description="품종")
    species: Species = Field(Species.dog, description="dog | cat | bird | rabbit | other")


class PetUpdateRequest(PetFields):
    """반려동물 부분 수정 요청 (전송한 필드만 반영, name/breed/species는 null 불가)"""
    name: str = Field(None, min_length=1, max_length=100)
    breed: str = Field(None, min_length=1, max_length=100)
    species: Species = None


class PetOut(PetCreateRequest):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
