from datetime import date, datetime

import pytz

from pethealth.core.config import settings


def get_today() -> date:
    """설정된 TIMEZONE 기준 오늘 날짜 (FastAPI dependency, 테스트에서 override)"""
    tz = pytz.timezone(settings.TIMEZONE)
    return datetime.now(tz).date()
