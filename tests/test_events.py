"""
이벤트 API 테스트
"""
from fastapi import status


def test_create_event_links_every_pet(client, make_pet):
    buddy = make_pet()
    luna = make_pet(name="Luna", breed="Puggle")
    response = client.post("/api/events", json={
        "title": "Rabies Vaccination",
        "category": "vaccination",
        "notes": "<p>3-year booster</p>",
        "eventDate": "2026-01-20",
        "reminderDate": "2026-01-13",
        "location": "City Vet Clinic",
        "petIds": [buddy["id"], luna["id"]],
    })
    assert response.status_code == status.HTTP_201_CREATED
    event = response.json()
    assert event["title"] == "Rabies Vaccination"
    assert event["reminderDate"] == "2026-01-13"
    assert sorted(p["id"] for p in event["pets"]) == sorted([buddy["id"], luna["id"]])

    for pet in (buddy, luna):
        ids = [e["id"] for e in client.get(f"/api/pets/{pet['id']}/events").json()]
        assert ids == [event["id"]]


def test_create_event_duplicate_pet_ids_link_once(client, make_pet, make_event):
    pet = make_pet()
    event = make_event([pet["id"], pet["id"]])
    assert len(event["pets"]) == 1


def test_create_event_requires_pets(client):
    for body in (
        {"title": "Checkup", "category": "vet_visit", "eventDate": "2026-01-20", "petIds": []},
        {"title": "Checkup", "category": "vet_visit", "eventDate": "2026-01-20"},
        {"title": "Checkup", "category": "vet_visit", "eventDate": "2026-01-20", "petIds": "1"},
    ):
        response = client.post("/api/events", json=body)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["code"] == "EVENT_400_1"
        assert data["error"] == "At least one pet must be selected"


def test_create_event_pet_check_runs_before_field_validation(client):
    response = client.post("/api/events", json={"petIds": []})
    assert response.json()["error"] == "At least one pet must be selected"


def test_create_event_invalid_fields(client, make_pet):
    pet = make_pet()
    response = client.post("/api/events", json={
        "title": "Checkup",
        "category": "grooming",
        "petIds": [pet["id"]],
    })
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    data = response.json()
    assert data["code"] == "VALIDATION_400"
    fields = {issue["loc"][-1] for issue in data["error"]}
    assert {"category", "eventDate"} <= fields


def test_create_event_non_integer_pet_ids(client):
    response = client.post("/api/events", json={
        "title": "Checkup", "category": "vet_visit", "eventDate": "2026-01-20", "petIds": ["abc"],
    })
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"][0]["loc"][0] == "petIds"


def test_create_event_for_missing_pet_rolls_back(client):
    response = client.post("/api/events", json={
        "title": "Checkup", "category": "vet_visit", "eventDate": "2026-01-20", "petIds": [999],
    })
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["code"] == "EVENT_400_INTEGRITY"
    assert client.get("/api/events").json() == []


def test_list_events_ordered_by_date_desc(client, make_pet, make_event):
    pet = make_pet()
    make_event([pet["id"]], title="Old", event_date="2025-12-10")
    make_event([pet["id"]], title="Future", event_date="2026-03-15")
    make_event([pet["id"]], title="Soon", event_date="2026-01-20")

    titles = [e["title"] for e in client.get("/api/events").json()]
    assert titles == ["Future", "Soon", "Old"]


def test_list_events_by_category(client, make_pet, make_event):
    pet = make_pet()
    make_event([pet["id"]], title="Exam", category="vet_visit")
    make_event([pet["id"]], title="Rabies", category="vaccination")

    response = client.get("/api/events", params={"category": "vaccination"})
    assert [e["title"] for e in response.json()] == ["Rabies"]

    assert client.get("/api/events", params={"category": "grooming"}).status_code == status.HTTP_400_BAD_REQUEST


def test_pet_events_include_all_linked_pets(client, make_pet, make_event):
    buddy = make_pet()
    luna = make_pet(name="Luna", breed="Puggle")
    make_event([luna["id"]], title="Luna only")
    shared = make_event([buddy["id"], luna["id"]], title="Shared")

    events = client.get(f"/api/pets/{buddy['id']}/events").json()
    assert [e["id"] for e in events] == [shared["id"]]
    assert len(events[0]["pets"]) == 2


def test_delete_event_removes_links(client, make_pet, make_event):
    pet = make_pet()
    event = make_event([pet["id"]])

    assert client.delete(f"/api/events/{event['id']}").status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/api/pets/{pet['id']}/events").json() == []
    assert client.get("/api/events").json() == []
    # 이미 없는 이벤트도 204
    assert client.delete(f"/api/events/{event['id']}").status_code == status.HTTP_204_NO_CONTENT


def test_delete_event_detaches_care_records(client, make_pet, make_event):
    pet = make_pet()
    event = make_event([pet["id"]], category="vaccination")
    vax = client.post(f"/api/pets/{pet['id']}/vaccinations", json={
        "name": "Rabies", "dateAdministered": "2026-01-20", "sourceEventId": event["id"],
    }).json()
    assert vax["sourceEventId"] == event["id"]

    client.delete(f"/api/events/{event['id']}")

    fetched = client.get(f"/api/vaccinations/{vax['id']}").json()
    assert fetched["sourceEventId"] is None


def test_create_event_without_body_asks_for_pets(client):
    response = client.post("/api/events")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "At least one pet must be selected"


def test_create_event_rejects_boolean_and_oversized_pet_ids(client, make_pet):
    make_pet()
    for pet_ids in ([True], ["1"], [99999999999999999999999]):
        response = client.post("/api/events", json={
            "title": "Checkup", "category": "vet_visit", "eventDate": "2026-01-20", "petIds": pet_ids,
        })
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "VALIDATION_400"
    assert client.get("/api/events").json() == []
