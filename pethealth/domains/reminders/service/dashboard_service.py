from datetime import date

from sqlalchemy.orm import Session

from pethealth.domains.events.repository.event_repository import EventRepository
from pethealth.domains.events.service.event_service import serialize_event
from pethealth.domains.pets.repository.pet_repository import PetRepository
from pethealth.domains.reminders.status import (
    RECENT_EVENTS_LIMIT,
    category_counts,
    is_overdue_reminder,
    is_recent_event,
    is_upcoming_event,
    weight_series,
)
from pethealth.domains.weights.repository.weight_repository import WeightRepository


class DashboardService:
    def __init__(self, db: Session):
        self.db = db
        self.pet_repo = PetRepository(db)
        self.event_repo = EventRepository(db)
        self.weight_repo = WeightRepository(db)

    def get_dashboard(self, today: date):
        # 이벤트는 event_date 내림차순으로 옴
        events = [
            serialize_event(event, pets)
            for event, pets in self.event_repo.list_events_with_pets()
        ]

        upcoming = [e for e in events if is_upcoming_event(e["event_date"], today)]
        overdue = [
            e for e in events
            if is_overdue_reminder(e["event_date"], e["reminder_date"], today)
        ]
        recent = [e for e in events if is_recent_event(e["event_date"], today)][:RECENT_EVENTS_LIMIT]

        rows = [
            (entry.recorded_at, pet_name, entry.weight)
            for entry, pet_name in self.weight_repo.list_all_with_pet_name()
        ]

        return {
            "total_pets": self.pet_repo.count_pets(),
            "upcoming_count": len(upcoming),
            "upcoming_events": upcoming,
            "overdue_count": len(overdue),
            "overdue_reminders": overdue,
            "recent_events": recent,
            "category_counts": category_counts(events),
            "weight_series": weight_series(rows),
        }
