from datetime import date, datetime
from typing import Optional

from pydantic import Field

from pethealth.core.path_params import MAX_ID
from pethealth.schemas.base_schema import CamelModel


class MedicationFields(CamelModel):
    dosage: Optional[str] = Field(None, max_length=100, description="예: 16mg")
    frequency: Optional[str] = Field(None, max_length=100)
    end_date: Optional[date] = None
    prescribed_by: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = None
    source_event_id: Optional[int] = Field(None, ge=1, le=MAX_ID)


class MedicationCreateRequest(MedicationFields):
    name: str = Field(..., min_length=1, max_length=100)
    start_date: date
    active: bool = True


class MedicationUpdateRequest(MedicationFields):
    name: str = Field(None, min_length=1, max_length=100)
    start_date: date = None
    active: bool = Field(None, description="복용 중 여부 토글")


class MedicationOut(MedicationCreateRequest):
    id: int
    pet_id: int
    created_at: Optional[datetime] = None


class MedicationWithStatusOut(MedicationOut):
    status: str = Field(..., description="active | completed")
