from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Enum
from sqlalchemy.sql import func
from pethealth.models.base import Base
import enum

class Species(str, enum.Enum):
    dog = "dog"
    cat = "cat"
    bird = "bird"
    rabbit = "rabbit"
    other = "other"

class Pet(Base):
    __tablename__ = "pets"

    pet_id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(100), nullable=False)
    breed = Column(String(100), nullable=False)
    species = Column(Enum(Species), default=Species.dog, nullable=False)
    date_of_birth = Column(Date)
    avatar_url = Column(String(255))  # 외부 스토리지 URL (업로드는 범위 밖)
    color = Column(String(50))
    gender = Column(String(20))

    # 식별 & 주치의
    microchip_number = Column(String(50))
    microchip_location = Column(String(100))
    vet_name = Column(String(100))

    # 가족
    father_name = Column(String(100))
    mother_name = Column(String(100))
    hair_length = Column(String(50))
    desexed = Column(String(20))

    # 급여
    food_brand = Column(String(100))
    per_meal_amount = Column(String(50))
    meals_per_day = Column(String(20))
    yearly_vaccination_date = Column(Date)
    food_bowl_colour = Column(String(50))

    traits = Column(Text)

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
