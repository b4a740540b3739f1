from typing import Annotated

from fastapi import Path

# 저장소 정수 범위(64bit signed)를 넘는 ID는 DB에 바인딩하기 전에 400으로 거른다
MAX_ID = 2**63 - 1

PetId = Annotated[int, Path(ge=1, le=MAX_ID, description="반려동물 ID")]
EventId = Annotated[int, Path(ge=1, le=MAX_ID, description="이벤트 ID")]
VaccinationId = Annotated[int, Path(ge=1, le=MAX_ID, description="접종 기록 ID")]
MedicationId = Annotated[int, Path(ge=1, le=MAX_ID, description="투약 기록 ID")]
