from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from pethealth.models.vaccination import Vaccination


class VaccinationRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_for_pet(self, pet_id: int) -> List[Vaccination]:
        return (
            self.db.query(Vaccination)
            .filter(Vaccination.pet_id == pet_id)
            .order_by(Vaccination.date_administered.desc(), Vaccination.vaccination_id.desc())
            .all()
        )

    def get_by_id(self, vaccination_id: int) -> Optional[Vaccination]:
        return self.db.get(Vaccination, vaccination_id)

    def create(self, data: Dict[str, Any]) -> Vaccination:
        vax = Vaccination(**data)
        self.db.add(vax)
        self.db.flush()
        return vax

    def update_partial(self, vaccination_id: int, data: Dict[str, Any]) -> Optional[Vaccination]:
        vax = self.get_by_id(vaccination_id)
        if vax is None:
            return None
        for k, v in data.items():
            setattr(vax, k, v)
        self.db.flush()
        return vax

    def delete(self, vaccination_id: int) -> None:
        self.db.query(Vaccination).filter(
            Vaccination.vaccination_id == vaccination_id
        ).delete(synchronize_session=False)
        self.db.flush()
