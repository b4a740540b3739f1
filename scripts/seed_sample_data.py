"""
샘플 데이터 추가 스크립트 (반려동물 3마리 + 몸무게 + 이벤트 + 접종/투약)

사용법:
    python scripts/seed_sample_data.py [--force]

예시:
    python scripts/seed_sample_data.py
    # pets 테이블이 비어 있을 때만 샘플 데이터 추가

    python scripts/seed_sample_data.py --force
    # 기존 데이터가 있어도 추가
"""
import sys
import os
from datetime import date

# 프로젝트 루트를 Python path에 추가
sys.path.insert(0, os.path.abspath(os.path.dirname(os.path.dirname(__file__))))

from sqlalchemy.exc import SQLAlchemyError

from pethealth.db import SessionLocal, engine
from pethealth.models import (
    Base,
    Event,
    EventCategory,
    Medication,
    Pet,
    PetEvent,
    Species,
    Vaccination,
    WeightEntry,
    WeightUnit,
)


SAMPLE_PETS = [
    {"name": "Buddy", "breed": "Pug", "date_of_birth": date(2020, 3, 15), "gender": "male", "color": "Fawn"},
    {"name": "Luna", "breed": "Puggle", "date_of_birth": date(2021, 7, 22), "gender": "female", "color": "Black & Tan"},
    {"name": "Max", "breed": "French Bulldog", "date_of_birth": date(2019, 11, 8), "gender": "male", "color": "Brindle"},
]

# 2025-08 ~ 2026-01 매월 1일 기록 (lbs)
SAMPLE_WEIGHTS = {
    "Buddy": [14.2, 14.5, 14.8, 15.1, 14.9, 15.0],
    "Luna": [18.0, 18.3, 18.5, 18.2, 18.6, 18.4],
    "Max": [24.0, 24.5, 25.0, 24.8, 25.2, 25.0],
}
WEIGHT_DATES = [
    date(2025, 8, 1), date(2025, 9, 1), date(2025, 10, 1),
    date(2025, 11, 1), date(2025, 12, 1), date(2026, 1, 1),
]

SAMPLE_EVENTS = [
    {
        "title": "Annual Wellness Exam",
        "category": EventCategory.vet_visit,
        "notes": "<p>Routine annual checkup. <strong>All vitals normal.</strong></p>",
        "event_date": date(2025, 12, 10),
        "location": "City Vet Clinic",
        "pets": ["Buddy", "Luna"],
    },
    {
        "title": "Rabies Vaccination",
        "category": EventCategory.vaccination,
        "notes": "<p>3-year rabies booster administered.</p>",
        "event_date": date(2025, 12, 10),
        "location": "City Vet Clinic",
        "pets": ["Buddy", "Luna", "Max"],
    },
    {
        "title": "Heartworm Prevention",
        "category": EventCategory.medication,
        "notes": "<p>Monthly heartworm prevention given. Brand: <em>Heartgard Plus</em>.</p>",
        "event_date": date(2026, 1, 1),
        "reminder_date": date(2026, 1, 28),
        "pets": ["Buddy", "Luna", "Max"],
    },
    {
        "title": "Dental Cleaning",
        "category": EventCategory.appointment,
        "notes": "<p>Scheduled dental cleaning. <strong>Fasting required</strong> 12 hours before.</p>",
        "event_date": date(2026, 3, 15),
        "reminder_date": date(2026, 3, 10),
        "location": "City Vet Clinic",
        "pets": ["Buddy"],
    },
    {
        "title": "Skin Allergy Checkup",
        "category": EventCategory.vet_visit,
        "notes": "<p>Follow-up for seasonal allergies. Prescribed <em>Apoquel</em> for 2 weeks.</p>",
        "event_date": date(2026, 1, 20),
        "location": "PetCare Specialists",
        "pets": ["Luna"],
    },
    {
        "title": "DHPP Booster",
        "category": EventCategory.vaccination,
        "notes": "<p>Distemper/Parvo combination vaccine booster.</p>",
        "event_date": date(2026, 2, 14),
        "reminder_date": date(2026, 2, 10),
        "location": "City Vet Clinic",
        "pets": ["Max"],
    },
]


def seed_sample_data(force: bool = False):
    """샘플 데이터 추가 (pets 테이블이 비어 있을 때만, force=True면 항상)"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        existing = db.query(Pet).count()
        if existing > 0 and not force:
            print(f"[OK] 이미 {existing}마리의 반려동물이 등록되어 있어 건너뜁니다. (--force로 강제 추가)")
            return True

        print("[추가] 샘플 반려동물을 생성합니다...")
        pets = {}
        for data in SAMPLE_PETS:
            pet = Pet(species=Species.dog, **data)
            db.add(pet)
            pets[data["name"]] = pet
        db.flush()
        for pet in pets.values():
            print(f"  pet_id={pet.pet_id:2d} | {pet.name:10s} | {pet.breed}")

        weights_created = 0
        for name, values in SAMPLE_WEIGHTS.items():
            for recorded_at, weight in zip(WEIGHT_DATES, values):
                db.add(WeightEntry(
                    pet_id=pets[name].pet_id,
                    weight=weight,
                    unit=WeightUnit.lbs,
                    recorded_at=recorded_at,
                ))
                weights_created += 1
        print(f"[추가] 몸무게 기록 {weights_created}개")

        events = {}
        for data in SAMPLE_EVENTS:
            fields = {k: v for k, v in data.items() if k != "pets"}
            event = Event(**fields)
            db.add(event)
            db.flush()
            for name in data["pets"]:
                db.add(PetEvent(pet_id=pets[name].pet_id, event_id=event.event_id))
            events[data["title"]] = event
            print(f"  [{event.category.value:11s}] {event.event_date} {event.title} ({', '.join(data['pets'])})")

        # 이벤트에서 빠르게 만든 접종/투약 기록
        db.add(Vaccination(
            pet_id=pets["Buddy"].pet_id,
            name="Rabies",
            date_administered=date(2025, 12, 10),
            next_due_date=date(2028, 12, 10),
            veterinarian="City Vet Clinic",
            source_event_id=events["Rabies Vaccination"].event_id,
        ))
        db.add(Medication(
            pet_id=pets["Luna"].pet_id,
            name="Apoquel",
            dosage="5.4mg",
            frequency="Twice daily",
            start_date=date(2026, 1, 20),
            end_date=date(2026, 2, 3),
            prescribed_by="PetCare Specialists",
            active=True,
            source_event_id=events["Skin Allergy Checkup"].event_id,
        ))

        db.commit()
        print(f"\n[성공] 반려동물 {len(pets)}마리, 이벤트 {len(events)}개, 접종 1건, 투약 1건이 추가되었습니다!")
        return True

    except SQLAlchemyError as e:
        db.rollback()
        print(f"[오류] 오류 발생: {e}")
        import traceback
        traceback.print_exc()
        return False
    finally:
        db.close()


if __name__ == "__main__":
    force = "--force" in sys.argv[1:]
    ok = seed_sample_data(force=force)
    sys.exit(0 if ok else 1)
