"""
리마인더 / 대시보드 / 케어 요약 API 테스트 (오늘 = 2026-01-15)
"""
from fastapi import status


def test_reminders_window_and_counts(client, make_pet, make_event):
    pet = make_pet()
    make_event([pet["id"]], title="Too old", event_date="2026-01-01")
    make_event([pet["id"]], title="Missed", event_date="2026-01-12")
    make_event([pet["id"]], title="Today", event_date="2026-01-15")
    make_event([pet["id"]], title="Soon", event_date="2026-01-17")
    make_event([pet["id"]], title="Later", event_date="2026-03-15")
    make_event([pet["id"]], title="Too far", event_date="2026-06-01")

    response = client.get("/api/reminders")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()

    assert [r["title"] for r in data["reminders"]] == ["Missed", "Today", "Soon", "Later"]
    assert [r["status"] for r in data["reminders"]] == ["overdue", "today", "soon", "upcoming"]
    assert data["reminders"][0]["label"] == "3 days overdue"
    assert data["reminders"][2]["daysUntil"] == 2
    assert data["counts"] == {"overdue": 1, "today": 1, "soon": 1}


def test_dashboard(client, make_pet, make_event):
    buddy = make_pet()
    luna = make_pet(name="Luna", breed="Puggle")
    make_event([buddy["id"]], title="Exam", category="vet_visit", event_date="2025-12-10")
    make_event([buddy["id"], luna["id"]], title="Heartworm", category="medication",
               event_date="2026-01-20", reminder_date="2026-01-10")
    make_event([luna["id"]], title="Dental", category="appointment",
               event_date="2026-03-15", reminder_date="2026-03-10")

    client.post("/api/weight-entries", json={"petId": buddy["id"], "weight": 14.2, "recordedAt": "2025-08-01"})
    client.post("/api/weight-entries", json={"petId": luna["id"], "weight": 18.0, "recordedAt": "2025-08-01"})
    client.post("/api/weight-entries", json={"petId": buddy["id"], "weight": 14.5, "recordedAt": "2025-09-01"})

    data = client.get("/api/dashboard").json()

    assert data["totalPets"] == 2
    assert data["upcomingCount"] == 1
    assert [e["title"] for e in data["upcomingEvents"]] == ["Heartworm"]
    assert data["overdueCount"] == 1
    assert [e["title"] for e in data["overdueReminders"]] == ["Heartworm"]
    assert [e["title"] for e in data["recentEvents"]] == ["Exam"]
    assert {c["category"]: c["count"] for c in data["categoryCounts"]} == {
        "appointment": 1, "medication": 1, "vet_visit": 1,
    }
    assert data["weightSeries"]["petNames"] == ["Buddy", "Luna"]
    assert data["weightSeries"]["points"] == [
        {"date": "2025-08-01", "Buddy": 14.2, "Luna": 18.0},
        {"date": "2025-09-01", "Buddy": 14.5},
    ]


def test_dashboard_recent_events_limited_to_five(client, make_pet, make_event):
    pet = make_pet()
    for day in range(1, 8):
        make_event([pet["id"]], title=f"Visit {day}", event_date=f"2026-01-0{day}")

    recent = client.get("/api/dashboard").json()["recentEvents"]
    assert [e["title"] for e in recent] == ["Visit 7", "Visit 6", "Visit 5", "Visit 4", "Visit 3"]


def test_dashboard_empty(client):
    data = client.get("/api/dashboard").json()
    assert data["totalPets"] == 0
    assert data["upcomingEvents"] == []
    assert data["weightSeries"] == {"petNames": [], "points": []}


def test_care_summary(client, make_pet):
    pet = make_pet()
    client.post("/api/weight-entries", json={"petId": pet["id"], "weight": 14.2, "recordedAt": "2025-08-01"})
    client.post("/api/weight-entries", json={"petId": pet["id"], "weight": 15.0, "recordedAt": "2026-01-01"})
    client.post(f"/api/pets/{pet['id']}/vaccinations", json={
        "name": "Rabies", "dateAdministered": "2025-01-10", "nextDueDate": "2026-01-25",
    })
    client.post(f"/api/pets/{pet['id']}/vaccinations", json={
        "name": "Lepto", "dateAdministered": "2025-06-01", "nextDueDate": "2026-09-01",
    })
    client.post(f"/api/pets/{pet['id']}/medications", json={
        "name": "Apoquel", "dosage": "16mg", "frequency": "Twice daily", "startDate": "2026-01-01",
    })
    client.post(f"/api/pets/{pet['id']}/medications", json={
        "name": "Antibiotic", "startDate": "2025-10-01", "active": False,
    })

    response = client.get(f"/api/pets/{pet['id']}/care-summary")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()

    assert data["petId"] == pet["id"]
    assert data["latestWeight"]["weight"] == 15.0
    assert [(i["type"], i["label"], i["variant"]) for i in data["upcoming"]] == [
        ("medication", "Apoquel", "active"),
        ("vaccination", "Rabies", "due"),
    ]
    assert data["upcoming"][0]["detail"] == "16mg · Twice daily"
    assert len(data["vaccinations"]) == 2
    assert [m["name"] for m in data["activeMedications"]] == ["Apoquel"]
    assert [m["name"] for m in data["pastMedications"]] == ["Antibiotic"]


def test_care_summary_without_records(client, make_pet):
    pet = make_pet()
    data = client.get(f"/api/pets/{pet['id']}/care-summary").json()
    assert data["latestWeight"] is None
    assert data["upcoming"] == []


def test_care_summary_missing_pet(client):
    response = client.get("/api/pets/999/care-summary")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["code"] == "CARE_SUMMARY_404_1"
