import logging
from typing import Any, Dict

from fastapi import Request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pethealth.models.weight_entry import WeightEntry
from pethealth.domains.weights.exception import weight_error
from pethealth.domains.weights.repository.weight_repository import WeightRepository
from pethealth.schemas.weights.weight_schema import WeightEntryCreateRequest

logger = logging.getLogger(__name__)


def serialize_weight(entry: WeightEntry) -> Dict[str, Any]:
    return {
        "id": entry.entry_id,
        "pet_id": entry.pet_id,
        "weight": entry.weight,
        "unit": entry.unit.value if entry.unit else None,
        "recorded_at": entry.recorded_at,
    }


class WeightService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = WeightRepository(db)

    def list_for_pet(self, pet_id: int):
        return [serialize_weight(w) for w in self.repo.list_for_pet(pet_id)]

    def list_all(self):
        return [
            {**serialize_weight(entry), "pet_name": pet_name}
            for entry, pet_name in self.repo.list_all_with_pet_name()
        ]

    def record_weight(self, request: Request, body: WeightEntryCreateRequest):
        path = request.url.path
        try:
            entry = self.repo.create_entry(body.model_dump())
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("WEIGHT_CREATE_INTEGRITY pet_id=%s: %s", body.pet_id, e.orig)
            return weight_error("WEIGHT_400_INTEGRITY", path, str(e.orig))
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("WEIGHT_CREATE_ERROR")
            return weight_error("WEIGHT_500_1", path)

        self.db.refresh(entry)
        logger.info("Weight recorded: pet_id=%s %s%s", entry.pet_id, entry.weight, entry.unit.value)
        return serialize_weight(entry)
