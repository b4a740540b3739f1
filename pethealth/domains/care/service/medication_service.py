import logging
from typing import Any, Dict

from fastapi import Request, Response, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pethealth.models.medication import Medication
from pethealth.domains.care.exception import care_error
from pethealth.domains.care.repository.medication_repository import MedicationRepository
from pethealth.domains.reminders.status import medication_status
from pethealth.schemas.care.medication_schema import (
    MedicationCreateRequest,
    MedicationUpdateRequest,
)

logger = logging.getLogger(__name__)


def serialize_medication(med: Medication) -> Dict[str, Any]:
    return {
        "id": med.medication_id,
        "pet_id": med.pet_id,
        "name": med.name,
        "dosage": med.dosage,
        "frequency": med.frequency,
        "start_date": med.start_date,
        "end_date": med.end_date,
        "prescribed_by": med.prescribed_by,
        "notes": med.notes,
        "active": med.active,
        "source_event_id": med.source_event_id,
        "created_at": med.created_at,
        "status": medication_status(med.active),
    }


class MedicationService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = MedicationRepository(db)

    def list_for_pet(self, pet_id: int):
        return [serialize_medication(m) for m in self.repo.list_for_pet(pet_id)]

    def get_medication(self, request: Request, medication_id: int):
        med = self.repo.get_by_id(medication_id)
        if not med:
            return care_error("MEDICATION_404_1", request.url.path)
        return serialize_medication(med)

    def create_medication(self, request: Request, pet_id: int, body: MedicationCreateRequest):
        path = request.url.path
        data = body.model_dump()
        data["pet_id"] = pet_id
        try:
            med = self.repo.create(data)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("MEDICATION_CREATE_INTEGRITY pet_id=%s: %s", pet_id, e.orig)
            return care_error("MEDICATION_400_INTEGRITY", path, str(e.orig))
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("MEDICATION_CREATE_ERROR")
            return care_error("MEDICATION_500_1", path)

        self.db.refresh(med)
        logger.info("Medication recorded: medication_id=%s pet_id=%s", med.medication_id, pet_id)
        return serialize_medication(med)

    def update_medication(self, request: Request, medication_id: int, body: MedicationUpdateRequest):
        """active 토글도 이 경로로 처리 (end_date와 무관)"""
        path = request.url.path
        try:
            med = self.repo.update_partial(medication_id, body.model_dump(exclude_unset=True))
            if med is None:
                return care_error("MEDICATION_404_1", path)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("MEDICATION_UPDATE_INTEGRITY: %s", e.orig)
            return care_error("MEDICATION_400_INTEGRITY", path, str(e.orig))
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("MEDICATION_UPDATE_ERROR")
            return care_error("MEDICATION_500_1", path)

        self.db.refresh(med)
        return serialize_medication(med)

    def delete_medication(self, request: Request, medication_id: int):
        try:
            self.repo.delete(medication_id)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("MEDICATION_DELETE_ERROR")
            return care_error("MEDICATION_500_2", request.url.path)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
