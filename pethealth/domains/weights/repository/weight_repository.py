from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional, Tuple

from pethealth.models.pet import Pet
from pethealth.models.weight_entry import WeightEntry


class WeightRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_for_pet(self, pet_id: int) -> List[WeightEntry]:
        return (
            self.db.query(WeightEntry)
            .filter(WeightEntry.pet_id == pet_id)
            .order_by(WeightEntry.recorded_at.asc(), WeightEntry.entry_id.asc())
            .all()
        )

    def latest_for_pet(self, pet_id: int) -> Optional[WeightEntry]:
        return (
            self.db.query(WeightEntry)
            .filter(WeightEntry.pet_id == pet_id)
            .order_by(WeightEntry.recorded_at.desc(), WeightEntry.entry_id.desc())
            .first()
        )

    def list_all_with_pet_name(self) -> List[Tuple[WeightEntry, str]]:
        """전체 몸무게 기록 + 반려동물 이름 (차트용, 측정일 오름차순)"""
        return (
            self.db.query(WeightEntry, Pet.name)
            .join(Pet, Pet.pet_id == WeightEntry.pet_id)
            .order_by(WeightEntry.recorded_at.asc(), WeightEntry.entry_id.asc())
            .all()
        )

    def create_entry(self, data: Dict[str, Any]) -> WeightEntry:
        entry = WeightEntry(**data)
        self.db.add(entry)
        self.db.flush()
        return entry
