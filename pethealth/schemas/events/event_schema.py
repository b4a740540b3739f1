from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from pethealth.models.event import EventCategory
from pethealth.schemas.base_schema import CamelModel
from pethealth.schemas.pets.pet_schema import PetOut


class EventCreateRequest(CamelModel):
    """
    이벤트 필드 검증용 스키마.
    petIds는 body에 함께 오지만 서비스에서 따로 꺼내 검사함
    """
    title: str = Field(..., min_length=1, max_length=200)
    category: EventCategory = Field(..., description="vet_visit | medication | vaccination | appointment")
    notes: Optional[str] = Field(None, description="rich-text HTML")
    event_date: date
    reminder_date: Optional[date] = None
    location: Optional[str] = Field(None, max_length=200)


class EventOut(EventCreateRequest):
    id: int
    created_at: Optional[datetime] = None


class EventWithPetsOut(EventOut):
    pets: List[PetOut] = []
