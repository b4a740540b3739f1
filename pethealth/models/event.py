from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Enum
from sqlalchemy.sql import func
from pethealth.models.base import Base
import enum

class EventCategory(str, enum.Enum):
    vet_visit = "vet_visit"
    medication = "medication"
    vaccination = "vaccination"
    appointment = "appointment"

class Event(Base):
    __tablename__ = "events"

    event_id = Column(Integer, primary_key=True, autoincrement=True)

    title = Column(String(200), nullable=False)
    category = Column(Enum(EventCategory), nullable=False)
    notes = Column(Text)  # rich-text HTML (에디터에서 정제된 문자열 그대로 저장)
    event_date = Column(Date, nullable=False)
    reminder_date = Column(Date)
    location = Column(String(200))

    created_at = Column(DateTime, default=func.now())
