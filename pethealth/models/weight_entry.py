from sqlalchemy import Column, Integer, Float, Date, Enum, ForeignKey
from pethealth.models.base import Base
import enum

class WeightUnit(str, enum.Enum):
    lbs = "lbs"
    kg = "kg"

class WeightEntry(Base):
    __tablename__ = "weight_entries"

    entry_id = Column(Integer, primary_key=True, autoincrement=True)
    pet_id = Column(
        Integer,
        ForeignKey("pets.pet_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    weight = Column(Float, nullable=False)
    unit = Column(Enum(WeightUnit), default=WeightUnit.lbs, nullable=False)
    recorded_at = Column(Date, nullable=False)
