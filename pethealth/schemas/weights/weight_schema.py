from datetime import date
from typing import Optional

from pydantic import Field

from pethealth.core.path_params import MAX_ID
from pethealth.models.weight_entry import WeightUnit
from pethealth.schemas.base_schema import CamelModel


class WeightEntryCreateRequest(CamelModel):
    """몸무게 기록 요청"""
    pet_id: int = Field(..., ge=1, le=MAX_ID, description="반려동물 ID")
    weight: float = Field(..., gt=0, description="몸무게")
    unit: WeightUnit = Field(WeightUnit.lbs, description="lbs | kg")
    recorded_at: date = Field(..., description="측정일 (YYYY-MM-DD)")


class WeightEntryOut(WeightEntryCreateRequest):
    id: int


class WeightEntryWithPetOut(WeightEntryOut):
    pet_name: str
