"""
리마인더/상태 계산 (순수 함수).

모든 함수는 기준일 `today`를 인자로 받는다. 저장하지 않고 조회 시점에 계산한다.
"""
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

SOON_DAYS = 3
UPCOMING_WINDOW_DAYS = 30
REMINDER_PAST_DAYS = 7
REMINDER_FUTURE_DAYS = 90
CARE_LOOKAHEAD_DAYS = 90
VACCINATION_DUE_DAYS = 14
RECENT_EVENTS_LIMIT = 5


@dataclass(frozen=True)
class DueStatus:
    status: str
    label: str
    days_until: Optional[int]


def _plural_days(n: int) -> str:
    return f"{n} day" if n == 1 else f"{n} days"


def days_until(target: date, today: date) -> int:
    return (target - today).days


def classify_due(target: date, today: date) -> DueStatus:
    """overdue(<0) / today(0) / soon(1~3) / upcoming(>3)"""
    offset = days_until(target, today)
    if offset < 0:
        return DueStatus("overdue", f"{_plural_days(abs(offset))} overdue", offset)
    if offset == 0:
        return DueStatus("today", "Today", offset)
    if offset <= SOON_DAYS:
        return DueStatus("soon", f"In {_plural_days(offset)}", offset)
    return DueStatus("upcoming", f"In {offset} days", offset)


def vaccination_status(next_due_date: Optional[date], today: date) -> DueStatus:
    if next_due_date is None:
        return DueStatus("recorded", "Recorded", None)
    result = classify_due(next_due_date, today)
    if result.status == "upcoming":
        return DueStatus("current", result.label, result.days_until)
    return result


def medication_status(active: bool) -> str:
    # end_date는 보지 않음: 사용자가 직접 완료 처리해야 completed
    return "active" if active else "completed"


# -------------------------------
# 대시보드 기준
# -------------------------------
def is_upcoming_event(event_date: date, today: date) -> bool:
    return today < event_date < today + timedelta(days=UPCOMING_WINDOW_DAYS)


def is_overdue_reminder(event_date: date, reminder_date: Optional[date], today: date) -> bool:
    return reminder_date is not None and reminder_date < today and event_date > today


def is_recent_event(event_date: date, today: date) -> bool:
    return event_date < today


def in_reminder_window(event_date: date, today: date) -> bool:
    return (
        today - timedelta(days=REMINDER_PAST_DAYS)
        < event_date
        < today + timedelta(days=REMINDER_FUTURE_DAYS)
    )


def build_reminders(events: Iterable[Mapping[str, Any]], today: date) -> List[Dict[str, Any]]:
    """
    리마인더 목록 생성.
    - 이벤트 dict(event_date 포함)를 받아 윈도우 안의 것만 남기고
    - status/label/days_until을 붙여 days_until 오름차순 정렬
    """
    reminders = []
    for event in events:
        if not in_reminder_window(event["event_date"], today):
            continue
        due = classify_due(event["event_date"], today)
        reminders.append({
            **event,
            "status": due.status,
            "label": due.label,
            "days_until": due.days_until,
        })
    reminders.sort(key=lambda r: r["days_until"])
    return reminders


def count_by_status(reminders: Iterable[Mapping[str, Any]]) -> Dict[str, int]:
    counts = {"overdue": 0, "today": 0, "soon": 0}
    for r in reminders:
        if r["status"] in counts:
            counts[r["status"]] += 1
    return counts


def category_counts(events: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    counts: "OrderedDict[str, int]" = OrderedDict()
    for event in events:
        key = event["category"]
        key = getattr(key, "value", key)
        counts[key] = counts.get(key, 0) + 1
    return [{"category": k, "count": v} for k, v in counts.items()]


def weight_series(rows: Iterable[Tuple[date, str, float]]) -> Dict[str, Any]:
    """
    (측정일, 반려동물 이름, 몸무게) 행들을 날짜별 차트 포인트로 묶는다.
    같은 날짜·같은 이름이 여러 번이면 마지막 값이 남음.
    "date"는 x축 키라서 같은 이름의 반려동물 값으로 덮어쓰지 않음
    """
    points: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
    pet_names: List[str] = []
    for recorded_at, pet_name, weight in sorted(rows, key=lambda r: r[0]):
        key = recorded_at.isoformat()
        if key not in points:
            points[key] = {"date": key}
        if pet_name != "date":
            points[key][pet_name] = weight
        if pet_name not in pet_names:
            pet_names.append(pet_name)
    return {"pet_names": pet_names, "points": list(points.values())}


def _format_due(d: date) -> str:
    return f"Due {d.strftime('%b')} {d.day}, {d.year}"


def _medication_detail(dosage: Optional[str], frequency: Optional[str]) -> str:
    parts = [p for p in (dosage, frequency) if p]
    if not frequency:
        parts.append("Active")
    return " · ".join(parts)


def pet_upcoming_items(
    vaccinations: Sequence[Mapping[str, Any]],
    medications: Sequence[Mapping[str, Any]],
    today: date,
) -> List[Dict[str, Any]]:
    """반려동물 상세 화면의 '다가오는 케어' 목록 (90일 이내 접종 + 복용 중 약)"""
    items: List[Dict[str, Any]] = []

    for vax in vaccinations:
        due = vax.get("next_due_date")
        if due is None:
            continue
        offset = days_until(due, today)
        if offset > CARE_LOOKAHEAD_DAYS:
            continue
        if offset < 0:
            variant = "overdue"
        elif offset <= VACCINATION_DUE_DAYS:
            variant = "due"
        else:
            variant = "scheduled"
        items.append({
            "type": "vaccination",
            "label": vax["name"],
            "detail": _format_due(due),
            "days_until": offset,
            "variant": variant,
        })

    for med in medications:
        if not med.get("active"):
            continue
        items.append({
            "type": "medication",
            "label": med["name"],
            "detail": _medication_detail(med.get("dosage"), med.get("frequency")),
            "days_until": 0,
            "variant": "active",
        })

    items.sort(key=lambda i: i["days_until"])
    return items
