from dataclasses import dataclass
from typing import Dict, Optional

from pethealth.core.error_handler import error_response
from pethealth.schemas.error_schema import ErrorResponse


@dataclass(frozen=True)
class CareError:
    status: int
    code: str
    reason: str


CARE_ERRORS: Dict[str, CareError] = {
    # Vaccination
    "VACCINATION_400_INTEGRITY": CareError(400, "VACCINATION_400_INTEGRITY", "Vaccination references a missing pet or event"),
    "VACCINATION_404_1": CareError(404, "VACCINATION_404_1", "Vaccination not found"),
    "VACCINATION_500_1": CareError(500, "VACCINATION_500_1", "Failed to save vaccination"),
    "VACCINATION_500_2": CareError(500, "VACCINATION_500_2", "Failed to delete vaccination"),

    # Medication
    "MEDICATION_400_INTEGRITY": CareError(400, "MEDICATION_400_INTEGRITY", "Medication references a missing pet or event"),
    "MEDICATION_404_1": CareError(404, "MEDICATION_404_1", "Medication not found"),
    "MEDICATION_500_1": CareError(500, "MEDICATION_500_1", "Failed to save medication"),
    "MEDICATION_500_2": CareError(500, "MEDICATION_500_2", "Failed to delete medication"),
}


def care_error(code: str, path: str, reason: Optional[str] = None):
    err = CARE_ERRORS.get(code)
    if not err:
        return error_response(500, "CARE_500_1", "Internal server error", path)
    return error_response(err.status, err.code, reason or err.reason, path)


CARE_READ_RESPONSES = {
    400: {"model": ErrorResponse, "description": "잘못된 ID"},
    404: {"model": ErrorResponse, "description": "기록을 찾을 수 없음"},
}

CARE_WRITE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "필드 검증 실패 또는 존재하지 않는 반려동물/이벤트"},
    404: {"model": ErrorResponse, "description": "기록을 찾을 수 없음"},
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}

CARE_DELETE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "잘못된 ID"},
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}
