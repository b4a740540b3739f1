import logging
from typing import Annotated, Any, Dict, List, Optional

from fastapi import Request, Response, status
from pydantic import Field, StrictInt, TypeAdapter, ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pethealth.core.error_handler import validation_error_response
from pethealth.core.path_params import MAX_ID
from pethealth.models.event import Event, EventCategory
from pethealth.models.pet import Pet
from pethealth.domains.events.exception import event_error
from pethealth.domains.events.repository.event_repository import EventRepository
from pethealth.domains.pets.service.pet_service import serialize_pet
from pethealth.schemas.events.event_schema import EventCreateRequest

logger = logging.getLogger(__name__)

# bool(true → 1)이나 "1" 같은 문자열, 저장소 범위를 넘는 값은 ID로 받지 않음
_PET_IDS = TypeAdapter(List[Annotated[StrictInt, Field(ge=1, le=MAX_ID)]])


def serialize_event(event: Event, pets: Optional[List[Pet]] = None) -> Dict[str, Any]:
    data = {
        "id": event.event_id,
        "title": event.title,
        "category": event.category.value if event.category else None,
        "notes": event.notes,
        "event_date": event.event_date,
        "reminder_date": event.reminder_date,
        "location": event.location,
        "created_at": event.created_at,
    }
    if pets is not None:
        data["pets"] = [serialize_pet(p) for p in pets]
    return data


class EventService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = EventRepository(db)

    def list_events(self, category: Optional[EventCategory] = None):
        return [
            serialize_event(event, pets)
            for event, pets in self.repo.list_events_with_pets(category=category)
        ]

    def list_for_pet(self, pet_id: int):
        return [
            serialize_event(event, pets)
            for event, pets in self.repo.list_events_with_pets(pet_id=pet_id)
        ]

    # --------------------------------------------------
    # 이벤트 생성 + 반려동물 연결
    # --------------------------------------------------
    def create_event(self, request: Request, payload: Optional[Dict[str, Any]]):
        path = request.url.path

        # 1) petIds 검사 (필드 검증과 별개로 먼저)
        fields = dict(payload or {})
        raw_pet_ids = fields.pop("petIds", None)
        if raw_pet_ids is None:
            raw_pet_ids = fields.pop("pet_ids", None)
        if not isinstance(raw_pet_ids, list) or len(raw_pet_ids) == 0:
            return event_error("EVENT_400_1", path)

        try:
            pet_ids = _PET_IDS.validate_python(raw_pet_ids)
        except ValidationError as e:
            issues = [{**err, "loc": ("petIds",) + tuple(err["loc"])} for err in e.errors()]
            return validation_error_response(issues, path)

        # 2) 이벤트 필드 검증
        try:
            body = EventCreateRequest.model_validate(fields)
        except ValidationError as e:
            return validation_error_response(e.errors(), path)

        # 3) 저장 (이벤트 → 연결 row, 한 번에 commit)
        try:
            event = self.repo.create_event(body.model_dump(), pet_ids)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("EVENT_CREATE_INTEGRITY pet_ids=%s: %s", pet_ids, e.orig)
            return event_error("EVENT_400_INTEGRITY", path, str(e.orig))
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("EVENT_CREATE_ERROR")
            return event_error("EVENT_500_1", path)

        logger.info("Event created: event_id=%s pets=%s", event.event_id, pet_ids)
        rows = self.repo.list_events_with_pets(event_id=event.event_id)
        created, pets = rows[0]
        return serialize_event(created, pets)

    # --------------------------------------------------
    # 삭제 (없는 ID여도 204)
    # --------------------------------------------------
    def delete_event(self, request: Request, event_id: int):
        try:
            self.repo.delete_event(event_id)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("EVENT_DELETE_ERROR")
            return event_error("EVENT_500_2", request.url.path)

        logger.info("Event deleted: event_id=%s", event_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
