from dataclasses import dataclass
from typing import Dict, Optional

from pethealth.core.error_handler import error_response
from pethealth.schemas.error_schema import ErrorResponse


@dataclass(frozen=True)
class WeightError:
    status: int
    code: str
    reason: str


WEIGHT_ERRORS: Dict[str, WeightError] = {
    "WEIGHT_400_INTEGRITY": WeightError(400, "WEIGHT_400_INTEGRITY", "Weight entry references a missing pet"),
    "WEIGHT_500_1": WeightError(500, "WEIGHT_500_1", "Failed to record weight"),
}


def weight_error(code: str, path: str, reason: Optional[str] = None):
    err = WEIGHT_ERRORS.get(code)
    if not err:
        return error_response(500, "WEIGHT_500_1", "Internal server error", path)
    return error_response(err.status, err.code, reason or err.reason, path)


WEIGHT_CREATE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "필드 검증 실패 또는 존재하지 않는 반려동물"},
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}
