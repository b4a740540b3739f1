from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Boolean, ForeignKey
from sqlalchemy.sql import func
from pethealth.models.base import Base

class Medication(Base):
    __tablename__ = "medications"

    medication_id = Column(Integer, primary_key=True, autoincrement=True)
    pet_id = Column(
        Integer,
        ForeignKey("pets.pet_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name = Column(String(100), nullable=False)
    dosage = Column(String(100))
    frequency = Column(String(100))
    start_date = Column(Date, nullable=False)
    end_date = Column(Date)
    prescribed_by = Column(String(100))
    notes = Column(Text)

    # 사용자가 직접 토글 (end_date로 자동 계산하지 않음)
    active = Column(Boolean, default=True, nullable=False)

    source_event_id = Column(
        Integer,
        ForeignKey("events.event_id", ondelete="SET NULL"),
        nullable=True,
    )

    created_at = Column(DateTime, default=func.now())
