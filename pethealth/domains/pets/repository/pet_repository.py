from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from pethealth.models.pet import Pet
from pethealth.models.pet_event import PetEvent
from pethealth.models.weight_entry import WeightEntry
from pethealth.models.vaccination import Vaccination
from pethealth.models.medication import Medication


class PetRepository:
    def __init__(self, db: Session):
        self.db = db

    # -------------------------------
    # PET: CRUD
    # -------------------------------
    def list_pets(self) -> List[Pet]:
        return (
            self.db.query(Pet)
            .order_by(Pet.name.asc(), Pet.pet_id.asc())
            .all()
        )

    def count_pets(self) -> int:
        return self.db.query(Pet).count()

    def get_by_id(self, pet_id: int) -> Optional[Pet]:
        return self.db.get(Pet, pet_id)

    def create_pet(self, data: Dict[str, Any]) -> Pet:
        pet = Pet(**data)
        self.db.add(pet)
        self.db.flush()  # pet.pet_id 사용 가능
        return pet

    def update_partial(self, pet_id: int, data: Dict[str, Any]) -> Optional[Pet]:
        """전달된 키만 반영 (None도 값으로 취급). 대상이 없으면 None"""
        pet = self.get_by_id(pet_id)
        if pet is None:
            return None
        for k, v in data.items():
            setattr(pet, k, v)
        self.db.flush()
        return pet

    def delete_pet(self, pet_id: int) -> None:
        """
        반려동물 삭제.
        몸무게 기록, 이벤트 연결, 접종, 투약 기록을 먼저 지우고 본체를 삭제.
        연결이 끊긴 이벤트 자체는 남겨둔다.
        """
        self.db.query(PetEvent).filter(PetEvent.pet_id == pet_id).delete(synchronize_session=False)
        self.db.query(WeightEntry).filter(WeightEntry.pet_id == pet_id).delete(synchronize_session=False)
        self.db.query(Vaccination).filter(Vaccination.pet_id == pet_id).delete(synchronize_session=False)
        self.db.query(Medication).filter(Medication.pet_id == pet_id).delete(synchronize_session=False)
        self.db.query(Pet).filter(Pet.pet_id == pet_id).delete(synchronize_session=False)
        self.db.flush()
