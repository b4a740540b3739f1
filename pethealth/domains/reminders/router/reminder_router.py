from datetime import date

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from pethealth.core.clock import get_today
from pethealth.core.path_params import PetId
from pethealth.db import get_db
from pethealth.domains.reminders.exception import CARE_SUMMARY_RESPONSES
from pethealth.domains.reminders.service.dashboard_service import DashboardService
from pethealth.domains.reminders.service.reminder_service import CareSummaryService, ReminderService
from pethealth.schemas.reminders.reminder_schema import (
    CareSummaryResponse,
    DashboardResponse,
    ReminderListResponse,
)


router = APIRouter(tags=["Reminders"])


@router.get(
    "/reminders",
    summary="리마인더 목록",
    description="오늘 기준 지난 7일 ~ 앞으로 90일 사이의 이벤트를 남은 일수 오름차순(가장 많이 지난 것부터)으로 반환합니다.",
    response_model=ReminderListResponse,
)
def list_reminders(today: date = Depends(get_today), db: Session = Depends(get_db)):
    return ReminderService(db).list_reminders(today)


@router.get(
    "/dashboard",
    summary="대시보드 요약",
    description="30일 내 예정 이벤트, 지난 리마인더, 최근 이벤트, 카테고리별 개수, 몸무게 추이",
    response_model=DashboardResponse,
)
def get_dashboard(today: date = Depends(get_today), db: Session = Depends(get_db)):
    return DashboardService(db).get_dashboard(today)


@router.get(
    "/pets/{pet_id}/care-summary",
    summary="반려동물 케어 요약",
    description="90일 이내 접종 예정 + 복용 중인 약, 최근 몸무게",
    response_model=CareSummaryResponse,
    responses=CARE_SUMMARY_RESPONSES,
)
def get_care_summary(
    pet_id: PetId,
    request: Request,
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    return CareSummaryService(db).get_summary(request, pet_id, today)
