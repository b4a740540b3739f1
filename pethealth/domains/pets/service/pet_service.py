# pethealth/domains/pets/service/pet_service.py

import logging
from typing import Any, Dict

from fastapi import Request, Response, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pethealth.models.pet import Pet
from pethealth.domains.pets.exception import pet_error
from pethealth.domains.pets.repository.pet_repository import PetRepository
from pethealth.schemas.pets.pet_schema import PetCreateRequest, PetUpdateRequest

logger = logging.getLogger(__name__)

PET_FIELDS = (
    "name", "breed", "species", "date_of_birth", "avatar_url", "color", "gender",
    "microchip_number", "microchip_location", "vet_name",
    "father_name", "mother_name", "hair_length", "desexed",
    "food_brand", "per_meal_amount", "meals_per_day", "yearly_vaccination_date",
    "food_bowl_colour", "traits",
)


def serialize_pet(pet: Pet) -> Dict[str, Any]:
    data = {"id": pet.pet_id}
    for field in PET_FIELDS:
        data[field] = getattr(pet, field)
    data["species"] = pet.species.value if pet.species else None
    data["created_at"] = pet.created_at
    data["updated_at"] = pet.updated_at
    return data


class PetService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = PetRepository(db)

    def list_pets(self):
        return [serialize_pet(p) for p in self.repo.list_pets()]

    def get_pet(self, request: Request, pet_id: int):
        pet = self.repo.get_by_id(pet_id)
        if not pet:
            return pet_error("PET_404_1", request.url.path)
        return serialize_pet(pet)

    # --------------------------------------------------
    # 등록
    # --------------------------------------------------
    def create_pet(self, request: Request, body: PetCreateRequest):
        path = request.url.path
        try:
            pet = self.repo.create_pet(body.model_dump())
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("PET_CREATE_INTEGRITY: %s", e.orig)
            return pet_error("PET_400_INTEGRITY", path, str(e.orig))
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("PET_CREATE_ERROR")
            return pet_error("PET_500_1", path)

        self.db.refresh(pet)
        logger.info("Pet created: pet_id=%s name=%s", pet.pet_id, pet.name)
        return serialize_pet(pet)

    # --------------------------------------------------
    # 부분 수정
    # --------------------------------------------------
    def update_pet(self, request: Request, pet_id: int, body: PetUpdateRequest):
        path = request.url.path
        try:
            pet = self.repo.update_partial(pet_id, body.model_dump(exclude_unset=True))
            if pet is None:
                return pet_error("PET_404_1", path)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("PET_UPDATE_INTEGRITY: %s", e.orig)
            return pet_error("PET_400_INTEGRITY", path, str(e.orig))
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("PET_UPDATE_ERROR")
            return pet_error("PET_500_1", path)

        self.db.refresh(pet)
        return serialize_pet(pet)

    # --------------------------------------------------
    # 삭제 (없는 ID여도 204)
    # --------------------------------------------------
    def delete_pet(self, request: Request, pet_id: int):
        try:
            self.repo.delete_pet(pet_id)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("PET_DELETE_ERROR")
            return pet_error("PET_500_2", request.url.path)

        logger.info("Pet deleted: pet_id=%s", pet_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
