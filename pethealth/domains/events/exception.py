from dataclasses import dataclass
from typing import Dict, Optional

from pethealth.core.error_handler import error_response
from pethealth.schemas.error_schema import ErrorResponse


@dataclass(frozen=True)
class EventError:
    status: int
    code: str
    reason: str


EVENT_ERRORS: Dict[str, EventError] = {
    "EVENT_400_1": EventError(400, "EVENT_400_1", "At least one pet must be selected"),
    "EVENT_400_ID": EventError(400, "EVENT_400_ID", "Invalid event ID"),
    "EVENT_400_INTEGRITY": EventError(400, "EVENT_400_INTEGRITY", "Event references a missing pet"),
    "EVENT_500_1": EventError(500, "EVENT_500_1", "Failed to create event"),
    "EVENT_500_2": EventError(500, "EVENT_500_2", "Failed to delete event"),
}


def event_error(code: str, path: str, reason: Optional[str] = None):
    err = EVENT_ERRORS.get(code)
    if not err:
        return error_response(500, "EVENT_500_1", "Internal server error", path)
    return error_response(err.status, err.code, reason or err.reason, path)


EVENT_CREATE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "petIds 누락/빈 배열, 필드 검증 실패, 존재하지 않는 반려동물"},
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}

EVENT_DELETE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "잘못된 ID"},
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}
