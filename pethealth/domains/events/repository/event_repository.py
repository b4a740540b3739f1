from collections import OrderedDict
from sqlalchemy import select
from sqlalchemy.orm import Session
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pethealth.models.event import Event, EventCategory
from pethealth.models.pet import Pet
from pethealth.models.pet_event import PetEvent
from pethealth.models.vaccination import Vaccination
from pethealth.models.medication import Medication


class EventRepository:
    def __init__(self, db: Session):
        self.db = db

    # -------------------------------
    # 이벤트 + 연결된 반려동물 조회
    # -------------------------------
    def list_events_with_pets(
        self,
        category: Optional[EventCategory] = None,
        pet_id: Optional[int] = None,
        event_id: Optional[int] = None,
    ) -> List[Tuple[Event, List[Pet]]]:
        """
        Return list of (Event, [Pet, ...]) ordered by event_date desc.
        pet_id를 주면 해당 반려동물과 연결된 이벤트만 (연결된 반려동물 전체 포함)
        """
        q = (
            self.db.query(Event, Pet)
            .outerjoin(PetEvent, PetEvent.event_id == Event.event_id)
            .outerjoin(Pet, Pet.pet_id == PetEvent.pet_id)
        )
        if category is not None:
            q = q.filter(Event.category == category)
        if pet_id is not None:
            linked = select(PetEvent.event_id).where(PetEvent.pet_id == pet_id)
            q = q.filter(Event.event_id.in_(linked))
        if event_id is not None:
            q = q.filter(Event.event_id == event_id)

        rows = q.order_by(
            Event.event_date.desc(),
            Event.event_id.desc(),
            PetEvent.link_id.asc(),
        ).all()

        grouped: "OrderedDict[int, Tuple[Event, List[Pet]]]" = OrderedDict()
        for event, pet in rows:
            if event.event_id not in grouped:
                grouped[event.event_id] = (event, [])
            if pet is not None:
                grouped[event.event_id][1].append(pet)
        return list(grouped.values())

    # -------------------------------
    # 생성: 이벤트 insert → 연결 row insert (같은 트랜잭션)
    # -------------------------------
    def create_event(self, data: Dict[str, Any], pet_ids: Iterable[int]) -> Event:
        event = Event(**data)
        self.db.add(event)
        self.db.flush()  # event.event_id 사용 가능

        for pet_id in dict.fromkeys(pet_ids):  # 중복 제거, 순서 유지
            self.db.add(PetEvent(pet_id=pet_id, event_id=event.event_id))
        self.db.flush()
        return event

    # -------------------------------
    # 삭제: 연결 row → 접종/투약 역참조 해제 → 이벤트
    # -------------------------------
    def delete_event(self, event_id: int) -> None:
        self.db.query(PetEvent).filter(PetEvent.event_id == event_id).delete(synchronize_session=False)
        self.db.query(Vaccination).filter(Vaccination.source_event_id == event_id).update(
            {Vaccination.source_event_id: None}, synchronize_session=False
        )
        self.db.query(Medication).filter(Medication.source_event_id == event_id).update(
            {Medication.source_event_id: None}, synchronize_session=False
        )
        self.db.query(Event).filter(Event.event_id == event_id).delete(synchronize_session=False)
        self.db.flush()
