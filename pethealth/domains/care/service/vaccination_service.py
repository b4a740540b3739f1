import logging
from datetime import date
from typing import Any, Dict

from fastapi import Request, Response, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pethealth.models.vaccination import Vaccination
from pethealth.domains.care.exception import care_error
from pethealth.domains.care.repository.vaccination_repository import VaccinationRepository
from pethealth.domains.reminders.status import vaccination_status
from pethealth.schemas.care.vaccination_schema import (
    VaccinationCreateRequest,
    VaccinationUpdateRequest,
)

logger = logging.getLogger(__name__)


def serialize_vaccination(vax: Vaccination, today: date) -> Dict[str, Any]:
    due = vaccination_status(vax.next_due_date, today)
    return {
        "id": vax.vaccination_id,
        "pet_id": vax.pet_id,
        "name": vax.name,
        "date_administered": vax.date_administered,
        "next_due_date": vax.next_due_date,
        "veterinarian": vax.veterinarian,
        "notes": vax.notes,
        "source_event_id": vax.source_event_id,
        "created_at": vax.created_at,
        "status": due.status,
        "status_label": due.label,
        "days_until_due": due.days_until,
    }


class VaccinationService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = VaccinationRepository(db)

    def list_for_pet(self, pet_id: int, today: date):
        return [serialize_vaccination(v, today) for v in self.repo.list_for_pet(pet_id)]

    def get_vaccination(self, request: Request, vaccination_id: int, today: date):
        vax = self.repo.get_by_id(vaccination_id)
        if not vax:
            return care_error("VACCINATION_404_1", request.url.path)
        return serialize_vaccination(vax, today)

    def create_vaccination(self, request: Request, pet_id: int, body: VaccinationCreateRequest, today: date):
        path = request.url.path
        data = body.model_dump()
        data["pet_id"] = pet_id
        try:
            vax = self.repo.create(data)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("VACCINATION_CREATE_INTEGRITY pet_id=%s: %s", pet_id, e.orig)
            return care_error("VACCINATION_400_INTEGRITY", path, str(e.orig))
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("VACCINATION_CREATE_ERROR")
            return care_error("VACCINATION_500_1", path)

        self.db.refresh(vax)
        logger.info("Vaccination recorded: vaccination_id=%s pet_id=%s", vax.vaccination_id, pet_id)
        return serialize_vaccination(vax, today)

    def update_vaccination(self, request: Request, vaccination_id: int, body: VaccinationUpdateRequest, today: date):
        path = request.url.path
        try:
            vax = self.repo.update_partial(vaccination_id, body.model_dump(exclude_unset=True))
            if vax is None:
                return care_error("VACCINATION_404_1", path)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("VACCINATION_UPDATE_INTEGRITY: %s", e.orig)
            return care_error("VACCINATION_400_INTEGRITY", path, str(e.orig))
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("VACCINATION_UPDATE_ERROR")
            return care_error("VACCINATION_500_1", path)

        self.db.refresh(vax)
        return serialize_vaccination(vax, today)

    def delete_vaccination(self, request: Request, vaccination_id: int):
        try:
            self.repo.delete(vaccination_id)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("VACCINATION_DELETE_ERROR")
            return care_error("VACCINATION_500_2", request.url.path)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
