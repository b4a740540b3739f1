from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey
from sqlalchemy.sql import func
from pethealth.models.base import Base

class Vaccination(Base):
    __tablename__ = "vaccinations"

    vaccination_id = Column(Integer, primary_key=True, autoincrement=True)
    pet_id = Column(
        Integer,
        ForeignKey("pets.pet_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name = Column(String(100), nullable=False)
    date_administered = Column(Date, nullable=False)
    next_due_date = Column(Date)
    veterinarian = Column(String(100))
    notes = Column(Text)

    # 이벤트에서 빠르게 생성된 경우의 원본 이벤트 (이벤트 삭제 시 NULL)
    source_event_id = Column(
        Integer,
        ForeignKey("events.event_id", ondelete="SET NULL"),
        nullable=True,
    )

    created_at = Column(DateTime, default=func.now())
