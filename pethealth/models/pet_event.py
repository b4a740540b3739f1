from sqlalchemy import Column, Integer, ForeignKey
from pethealth.models.base import Base

class PetEvent(Base):
    """Pet ↔ Event 다대다 연결 테이블"""
    __tablename__ = "pet_events"

    link_id = Column(Integer, primary_key=True, autoincrement=True)
    pet_id = Column(
        Integer,
        ForeignKey("pets.pet_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    event_id = Column(
        Integer,
        ForeignKey("events.event_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
