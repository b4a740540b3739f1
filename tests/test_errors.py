"""
에러 응답 형식 테스트
"""
import json

import pytest
from fastapi import status


@pytest.mark.parametrize(
    "method, path, message",
    [
        ("get", "/api/pets/abc", "Invalid pet ID"),
        ("patch", "/api/pets/abc", "Invalid pet ID"),
        ("delete", "/api/pets/abc", "Invalid pet ID"),
        ("get", "/api/pets/abc/weights", "Invalid pet ID"),
        ("get", "/api/pets/abc/events", "Invalid pet ID"),
        ("delete", "/api/events/abc", "Invalid event ID"),
        ("get", "/api/vaccinations/abc", "Invalid vaccination ID"),
        ("delete", "/api/medications/abc", "Invalid medication ID"),
        ("get", "/api/pets/abc/care-summary", "Invalid pet ID"),
    ],
)
def test_non_integer_path_id(client, method, path, message):
    kwargs = {"json": {}} if method == "patch" else {}
    response = getattr(client, method)(path, **kwargs)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == message


def test_error_envelope_shape(client):
    response = client.get("/api/pets/404")
    data = response.json()
    assert data["success"] is False
    assert data["status"] == 404
    assert data["code"] == "PET_404_1"
    assert data["path"] == "/api/pets/404"
    assert "timeStamp" in data


def test_validation_issue_shape(client):
    response = client.post("/api/pets", json={"name": "", "breed": "Pug", "dateOfBirth": "not-a-date"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    issues = response.json()["error"]
    assert {issue["loc"][-1] for issue in issues} == {"name", "dateOfBirth"}
    for issue in issues:
        assert set(issue) == {"loc", "msg", "type"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "ok"


@pytest.mark.parametrize(
    "method, path, message",
    [
        ("get", "/api/pets/99999999999999999999999", "Invalid pet ID"),
        ("get", "/api/pets/0", "Invalid pet ID"),
        ("get", "/api/pets/99999999999999999999999/care-summary", "Invalid pet ID"),
        ("delete", "/api/events/99999999999999999999999", "Invalid event ID"),
        ("get", "/api/vaccinations/99999999999999999999999", "Invalid vaccination ID"),
        ("get", "/api/medications/99999999999999999999999", "Invalid medication ID"),
    ],
)
def test_out_of_range_path_id(client, method, path, message):
    response = getattr(client, method)(path)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == message


def test_out_of_range_pet_id_in_body(client):
    response = client.post("/api/weight-entries", json={
        "petId": 99999999999999999999999, "weight": 10, "recordedAt": "2025-08-01",
    })
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["code"] == "VALIDATION_400"


def test_pet_error_codes_render_envelope():
    from pethealth.domains.pets.exception import PET_ERRORS, pet_error

    for code, err in PET_ERRORS.items():
        response = pet_error(code, "/api/pets/1")
        assert response.status_code == err.status
        body = json.loads(response.body)
        assert body["code"] == code
        assert body["error"] == err.reason
        assert body["timeStamp"] != "..."
