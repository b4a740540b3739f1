from dataclasses import dataclass
from typing import Dict, Optional

from pethealth.core.error_handler import error_response
from pethealth.schemas.error_schema import ErrorResponse


@dataclass(frozen=True)
class PetError:
    status: int
    code: str
    reason: str


# 공통 에러 코드 정의
PET_ERRORS: Dict[str, PetError] = {
    "PET_400_ID": PetError(400, "PET_400_ID", "Invalid pet ID"),
    "PET_400_INTEGRITY": PetError(400, "PET_400_INTEGRITY", "Pet data violates a store constraint"),
    "PET_404_1": PetError(404, "PET_404_1", "Pet not found"),
    "PET_500_1": PetError(500, "PET_500_1", "Failed to save pet"),
    "PET_500_2": PetError(500, "PET_500_2", "Failed to delete pet"),
}


def pet_error(code: str, path: str, reason: Optional[str] = None):
    """reason을 넘기면 기본 메시지 대신 사용 (DB 에러 메시지 전달용)"""
    err = PET_ERRORS.get(code)
    if not err:
        return error_response(500, "PET_500_1", "Internal server error", path)
    return error_response(err.status, err.code, reason or err.reason, path)


# Swagger responses
PET_READ_RESPONSES = {
    400: {"model": ErrorResponse, "description": "잘못된 ID"},
    404: {"model": ErrorResponse, "description": "반려동물을 찾을 수 없음"},
}

PET_WRITE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "잘못된 요청 (필드 검증 실패 등)"},
    404: {"model": ErrorResponse, "description": "반려동물을 찾을 수 없음"},
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}

PET_DELETE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "잘못된 ID"},
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}
