from dataclasses import dataclass
from typing import Dict

from pethealth.core.error_handler import error_response
from pethealth.schemas.error_schema import ErrorResponse


@dataclass(frozen=True)
class ReminderError:
    status: int
    code: str
    reason: str


REMINDER_ERRORS: Dict[str, ReminderError] = {
    "CARE_SUMMARY_404_1": ReminderError(404, "CARE_SUMMARY_404_1", "Pet not found"),
}


def reminder_error(code: str, path: str):
    err = REMINDER_ERRORS.get(code)
    if not err:
        return error_response(500, "REMINDER_500_1", "Internal server error", path)
    return error_response(err.status, err.code, err.reason, path)


CARE_SUMMARY_RESPONSES = {
    400: {"model": ErrorResponse, "description": "잘못된 ID"},
    404: {"model": ErrorResponse, "description": "반려동물을 찾을 수 없음"},
}
