import logging
from datetime import datetime
from typing import Any, Dict, List, Sequence, Union

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pethealth.schemas.error_schema import ErrorResponse

logger = logging.getLogger(__name__)

# path 파라미터 이름 → (에러 코드, 메시지)
PATH_ID_ERRORS: Dict[str, tuple] = {
    "pet_id": ("PET_400_ID", "Invalid pet ID"),
    "event_id": ("EVENT_400_ID", "Invalid event ID"),
    "vaccination_id": ("VACCINATION_400_ID", "Invalid vaccination ID"),
    "medication_id": ("MEDICATION_400_ID", "Invalid medication ID"),
}


def error_response(
    status: int,
    code: str,
    reason: Union[str, List[Dict[str, Any]]],
    path: str,
) -> JSONResponse:

    error = ErrorResponse(
        success=False,
        status=status,
        code=code,
        error=reason,
        timeStamp=datetime.utcnow().isoformat(),
        path=path
    )

    return JSONResponse(
        status_code=status,
        content=error.model_dump()
    )


def format_issues(errors: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """pydantic 에러 목록을 JSON 직렬화 가능한 형태로 정리"""
    return [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in errors
    ]


def validation_error_response(errors: Sequence[Dict[str, Any]], path: str) -> JSONResponse:
    return error_response(400, "VALIDATION_400", format_issues(errors), path)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    요청 검증 실패를 400으로 변환.
    - path 파라미터(정수 ID) 오류는 저장소 접근 전에 'Invalid ... ID'로 응답
    - 그 외 body/query 오류는 필드별 오류 목록을 그대로 전달
    """
    path = request.url.path
    errors = exc.errors()

    for err in errors:
        loc = err.get("loc", ())
        if len(loc) >= 2 and loc[0] == "path" and loc[1] in PATH_ID_ERRORS:
            code, message = PATH_ID_ERRORS[loc[1]]
            return error_response(400, code, message, path)

    logger.info("Validation failed on %s: %d issue(s)", path, len(errors))
    return validation_error_response(errors, path)
