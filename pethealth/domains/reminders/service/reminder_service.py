from datetime import date

from fastapi import Request
from sqlalchemy.orm import Session

from pethealth.domains.care.repository.medication_repository import MedicationRepository
from pethealth.domains.care.repository.vaccination_repository import VaccinationRepository
from pethealth.domains.care.service.medication_service import serialize_medication
from pethealth.domains.care.service.vaccination_service import serialize_vaccination
from pethealth.domains.events.repository.event_repository import EventRepository
from pethealth.domains.events.service.event_service import serialize_event
from pethealth.domains.pets.repository.pet_repository import PetRepository
from pethealth.domains.reminders.exception import reminder_error
from pethealth.domains.reminders.status import build_reminders, count_by_status, pet_upcoming_items
from pethealth.domains.weights.repository.weight_repository import WeightRepository
from pethealth.domains.weights.service.weight_service import serialize_weight


class ReminderService:
    def __init__(self, db: Session):
        self.db = db
        self.event_repo = EventRepository(db)

    # ------------------------
    # 리마인더 목록 (-7일 ~ +90일)
    # ------------------------
    def list_reminders(self, today: date):
        events = [
            serialize_event(event, pets)
            for event, pets in self.event_repo.list_events_with_pets()
        ]
        reminders = build_reminders(events, today)
        return {
            "reminders": reminders,
            "counts": count_by_status(reminders),
        }


class CareSummaryService:
    """반려동물 상세 화면용 요약: 최근 몸무게, 다가오는 접종/복용 중인 약"""

    def __init__(self, db: Session):
        self.db = db
        self.pet_repo = PetRepository(db)
        self.weight_repo = WeightRepository(db)
        self.vax_repo = VaccinationRepository(db)
        self.med_repo = MedicationRepository(db)

    def get_summary(self, request: Request, pet_id: int, today: date):
        if self.pet_repo.get_by_id(pet_id) is None:
            return reminder_error("CARE_SUMMARY_404_1", request.url.path)

        vaccinations = [serialize_vaccination(v, today) for v in self.vax_repo.list_for_pet(pet_id)]
        medications = [serialize_medication(m) for m in self.med_repo.list_for_pet(pet_id)]
        latest = self.weight_repo.latest_for_pet(pet_id)

        return {
            "pet_id": pet_id,
            "latest_weight": serialize_weight(latest) if latest else None,
            "upcoming": pet_upcoming_items(vaccinations, medications, today),
            "vaccinations": vaccinations,
            "active_medications": [m for m in medications if m["active"]],
            "past_medications": [m for m in medications if not m["active"]],
        }
