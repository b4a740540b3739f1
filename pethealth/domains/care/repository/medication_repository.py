from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from pethealth.models.medication import Medication


class MedicationRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_for_pet(self, pet_id: int) -> List[Medication]:
        return (
            self.db.query(Medication)
            .filter(Medication.pet_id == pet_id)
            .order_by(Medication.start_date.desc(), Medication.medication_id.desc())
            .all()
        )

    def get_by_id(self, medication_id: int) -> Optional[Medication]:
        return self.db.get(Medication, medication_id)

    def create(self, data: Dict[str, Any]) -> Medication:
        med = Medication(**data)
        self.db.add(med)
        self.db.flush()
        return med

    def update_partial(self, medication_id: int, data: Dict[str, Any]) -> Optional[Medication]:
        med = self.get_by_id(medication_id)
        if med is None:
            return None
        for k, v in data.items():
            setattr(med, k, v)
        self.db.flush()
        return med

    def delete(self, medication_id: int) -> None:
        self.db.query(Medication).filter(
            Medication.medication_id == medication_id
        ).delete(synchronize_session=False)
        self.db.flush()
