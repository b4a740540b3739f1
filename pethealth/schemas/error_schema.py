from pydantic import BaseModel, Field
from typing import Any, Dict, List, Union


class ErrorResponse(BaseModel):
    """에러 응답"""
    success: bool = Field(False, description="성공 여부 (항상 false)")
    status: int = Field(..., description="HTTP 상태 코드")
    code: str = Field(..., description="에러 코드")
    error: Union[str, List[Dict[str, Any]]] = Field(
        ..., description="에러 사유 또는 필드별 검증 오류 목록"
    )
    timeStamp: str = Field(..., description="응답 시간 (ISO 형식)")
    path: str = Field(..., description="요청 경로")
