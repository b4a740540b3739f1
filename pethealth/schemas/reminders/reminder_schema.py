from typing import Any, Dict, List, Optional

from pydantic import Field

from pethealth.schemas.base_schema import CamelModel
from pethealth.schemas.care.medication_schema import MedicationWithStatusOut
from pethealth.schemas.care.vaccination_schema import VaccinationWithStatusOut
from pethealth.schemas.events.event_schema import EventWithPetsOut
from pethealth.schemas.weights.weight_schema import WeightEntryOut


class ReminderOut(EventWithPetsOut):
    status: str = Field(..., description="overdue | today | soon | upcoming")
    label: str
    days_until: int


class ReminderCounts(CamelModel):
    overdue: int = 0
    today: int = 0
    soon: int = 0


class ReminderListResponse(CamelModel):
    """리마인더 목록 (오늘 기준 -7일 ~ +90일, 가장 많이 지난 것부터)"""
    reminders: List[ReminderOut]
    counts: ReminderCounts


class CategoryCount(CamelModel):
    category: str
    count: int


class WeightSeries(CamelModel):
    """차트용 몸무게 시계열. points는 {date, <반려동물 이름>: weight, ...}"""
    pet_names: List[str]
    points: List[Dict[str, Any]]


class DashboardResponse(CamelModel):
    total_pets: int
    upcoming_count: int
    upcoming_events: List[EventWithPetsOut]
    overdue_count: int
    overdue_reminders: List[EventWithPetsOut]
    recent_events: List[EventWithPetsOut]
    category_counts: List[CategoryCount]
    weight_series: WeightSeries


class UpcomingCareItem(CamelModel):
    type: str = Field(..., description="vaccination | medication")
    label: str
    detail: str
    days_until: int
    variant: str = Field(..., description="overdue | due | scheduled | active")


class CareSummaryResponse(CamelModel):
    pet_id: int
    latest_weight: Optional[WeightEntryOut] = None
    upcoming: List[UpcomingCareItem]
    vaccinations: List[VaccinationWithStatusOut]
    active_medications: List[MedicationWithStatusOut]
    past_medications: List[MedicationWithStatusOut]
