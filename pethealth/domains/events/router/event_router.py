from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from sqlalchemy.orm import Session

from pethealth.core.path_params import EventId, PetId
from pethealth.db import get_db
from pethealth.models.event import EventCategory
from pethealth.domains.events.exception import EVENT_CREATE_RESPONSES, EVENT_DELETE_RESPONSES
from pethealth.domains.events.service.event_service import EventService
from pethealth.schemas.error_schema import ErrorResponse
from pethealth.schemas.events.event_schema import EventWithPetsOut


router = APIRouter(tags=["Events"])


@router.get(
    "/events",
    summary="이벤트 목록 조회 (연결된 반려동물 포함)",
    description="이벤트 날짜 내림차순. category로 필터링할 수 있습니다.",
    response_model=List[EventWithPetsOut],
    responses={400: {"model": ErrorResponse, "description": "잘못된 category"}},
)
def list_events(
    category: Optional[EventCategory] = Query(None, description="vet_visit | medication | vaccination | appointment"),
    db: Session = Depends(get_db),
):
    return EventService(db).list_events(category)


@router.get(
    "/pets/{pet_id}/events",
    summary="반려동물별 이벤트 조회",
    response_model=List[EventWithPetsOut],
    responses={400: {"model": ErrorResponse, "description": "잘못된 ID"}},
)
def list_pet_events(pet_id: PetId, db: Session = Depends(get_db)):
    return EventService(db).list_for_pet(pet_id)


@router.post(
    "/events",
    summary="이벤트 생성",
    status_code=201,
    response_model=EventWithPetsOut,
    responses=EVENT_CREATE_RESPONSES,
)
def create_event(
    request: Request,
    payload: Optional[Dict[str, Any]] = Body(
        None,
        examples=[{
            "title": "Rabies Vaccination",
            "category": "vaccination",
            "eventDate": "2026-01-20",
            "reminderDate": "2026-01-13",
            "location": "City Vet Clinic",
            "petIds": [1, 2],
        }],
    ),
    db: Session = Depends(get_db),
):
    """
    이벤트를 생성하고 반려동물과 연결합니다.

    - petIds: 연결할 반려동물 ID 배열 (1개 이상 필수)
    - 나머지 필드는 이벤트 정보 (title, category, eventDate 필수)
    """
    return EventService(db).create_event(request, payload)


@router.delete(
    "/events/{event_id}",
    summary="이벤트 삭제",
    description="연결 정보를 먼저 지운 뒤 이벤트를 삭제합니다.",
    status_code=204,
    responses=EVENT_DELETE_RESPONSES,
)
def delete_event(event_id: EventId, request: Request, db: Session = Depends(get_db)):
    return EventService(db).delete_event(request, event_id)
