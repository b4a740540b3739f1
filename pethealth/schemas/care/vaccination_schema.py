from datetime import date, datetime
from typing import Optional

from pydantic import Field

from pethealth.core.path_params import MAX_ID
from pethealth.schemas.base_schema import CamelModel


class VaccinationFields(CamelModel):
    next_due_date: Optional[date] = Field(None, description="다음 접종 예정일")
    veterinarian: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = None
    source_event_id: Optional[int] = Field(None, ge=1, le=MAX_ID, description="빠른 생성 시 원본 이벤트 ID")


class VaccinationCreateRequest(VaccinationFields):
    name: str = Field(..., min_length=1, max_length=100)
    date_administered: date


class VaccinationUpdateRequest(VaccinationFields):
    name: str = Field(None, min_length=1, max_length=100)
    date_administered: date = None


class VaccinationOut(VaccinationCreateRequest):
    id: int
    pet_id: int
    created_at: Optional[datetime] = None


class VaccinationWithStatusOut(VaccinationOut):
    status: str = Field(..., description="overdue | today | soon | current | recorded")
    status_label: str
    days_until_due: Optional[int] = None
