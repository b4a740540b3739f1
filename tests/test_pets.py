"""
반려동물 API 테스트
"""
from fastapi import status


def test_create_pet_round_trips_fields(client, pet_data):
    pet_data.update({
        "microchipNumber": "985112003456789",
        "vetName": "Dr. Kim",
        "mealsPerDay": "2",
        "yearlyVaccinationDate": "2026-03-01",
        "traits": "Loves belly rubs",
    })
    response = client.post("/api/pets", json=pet_data)
    assert response.status_code == status.HTTP_201_CREATED
    created = response.json()
    assert "id" in created

    fetched = client.get(f"/api/pets/{created['id']}").json()
    for key, value in pet_data.items():
        assert fetched[key] == value


def test_create_pet_defaults_species_to_dog(client):
    response = client.post("/api/pets", json={"name": "Luna", "breed": "Puggle"})
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["species"] == "dog"


def test_create_pet_missing_name(client):
    response = client.post("/api/pets", json={"breed": "Pug"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    data = response.json()
    assert data["code"] == "VALIDATION_400"
    assert any(issue["loc"][-1] == "name" for issue in data["error"])


def test_create_pet_invalid_species(client):
    response = client.post("/api/pets", json={"name": "Nemo", "breed": "Clown", "species": "fish"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert isinstance(response.json()["error"], list)


def test_list_pets_ordered_by_name(client, make_pet):
    make_pet(name="Max", breed="French Bulldog")
    make_pet(name="Buddy")
    make_pet(name="Luna", breed="Puggle")

    names = [p["name"] for p in client.get("/api/pets").json()]
    assert names == ["Buddy", "Luna", "Max"]


def test_get_pet_not_found(client):
    response = client.get("/api/pets/999")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["error"] == "Pet not found"


def test_update_pet_partial(client, make_pet):
    pet = make_pet(color="Fawn")
    response = client.patch(f"/api/pets/{pet['id']}", json={"vetName": "Dr. Lee"})
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["vetName"] == "Dr. Lee"
    assert data["color"] == "Fawn"
    assert data["name"] == "Buddy"


def test_update_pet_empty_body_returns_unchanged(client, make_pet):
    pet = make_pet()
    response = client.patch(f"/api/pets/{pet['id']}", json={})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "Buddy"


def test_update_pet_rejects_null_name(client, make_pet):
    pet = make_pet()
    response = client.patch(f"/api/pets/{pet['id']}", json={"name": None})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_update_pet_not_found(client):
    response = client.patch("/api/pets/999", json={"color": "Black"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_pet_is_idempotent(client, make_pet):
    pet = make_pet()
    assert client.delete(f"/api/pets/{pet['id']}").status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/api/pets/{pet['id']}").status_code == status.HTTP_404_NOT_FOUND
    assert client.delete(f"/api/pets/{pet['id']}").status_code == status.HTTP_204_NO_CONTENT


def test_delete_pet_removes_dependents_but_keeps_events(client, make_pet, make_event):
    buddy = make_pet()
    luna = make_pet(name="Luna", breed="Puggle")
    solo = make_event([buddy["id"]], title="Solo Visit")
    shared = make_event([buddy["id"], luna["id"]], title="Shared Visit")

    client.post("/api/weight-entries", json={"petId": buddy["id"], "weight": 14.2, "recordedAt": "2025-08-01"})
    client.post(f"/api/pets/{buddy['id']}/vaccinations", json={"name": "Rabies", "dateAdministered": "2025-12-10"})
    client.post(f"/api/pets/{buddy['id']}/medications", json={"name": "Apoquel", "startDate": "2026-01-01"})

    assert client.delete(f"/api/pets/{buddy['id']}").status_code == status.HTTP_204_NO_CONTENT

    assert client.get(f"/api/pets/{buddy['id']}/weights").json() == []
    assert client.get(f"/api/pets/{buddy['id']}/vaccinations").json() == []
    assert client.get(f"/api/pets/{buddy['id']}/medications").json() == []
    assert client.get("/api/weight-entries").json() == []

    events = {e["id"]: e for e in client.get("/api/events").json()}
    # 반려동물이 없어진 이벤트도 남아 있음
    assert events[solo["id"]]["pets"] == []
    assert [p["id"] for p in events[shared["id"]]["pets"]] == [luna["id"]]
