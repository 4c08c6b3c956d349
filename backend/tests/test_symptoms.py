"""
Test symptom endpoints.
"""

from fastapi.testclient import TestClient


def log_symptom(client: TestClient, **fields):
    payload = {
        "symptomName": "Headache",
        "severity": 5,
        "dateRecorded": "2024-02-01",
    }
    payload.update(fields)
    return client.post("/api/symptoms", json=payload)


def test_symptoms_require_authentication(client: TestClient):
    assert client.get("/api/symptoms").status_code == 401
    assert log_symptom(client).status_code == 401


def test_create_and_list_symptoms(auth_client: TestClient):
    """Test created symptoms come back most recent first."""
    response = log_symptom(
        auth_client,
        triggers=["stress", "screen time"],
        medications=["ibuprofen"],
        timeOfDay="evening",
    )
    assert response.status_code == 201
    created = response.json()
    assert created["symptomName"] == "Headache"
    assert created["severity"] == 5
    assert created["triggers"] == ["stress", "screen time"]
    assert created["medications"] == ["ibuprofen"]
    assert created["timeOfDay"] == "evening"
    assert created["userId"] == "user-a"

    log_symptom(auth_client, symptomName="Fatigue", dateRecorded="2024-03-01")

    listed = auth_client.get("/api/symptoms").json()
    assert [s["symptomName"] for s in listed] == ["Fatigue", "Headache"]
    assert len(auth_client.get("/api/symptoms", params={"limit": 1}).json()) == 1


def test_severity_must_be_between_one_and_ten(auth_client):
    """Test severity outside 1-10 is a validation error."""
    for severity in (0, 11):
        response = log_symptom(auth_client, severity=severity)
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation error"
        assert body["errors"][0]["loc"][-1] == "severity"

    assert log_symptom(auth_client, severity=10).status_code == 201
    assert log_symptom(auth_client, severity=1).status_code == 201


def test_create_requires_name_and_date(auth_client):
    response = auth_client.post("/api/symptoms", json={"severity": 3})
    assert response.status_code == 400
    failed = {err["loc"][-1] for err in response.json()["errors"]}
    assert {"symptomName", "dateRecorded"} <= failed


def test_search_symptoms(auth_client):
    log_symptom(auth_client, symptomName="Lower back pain")
    log_symptom(auth_client, symptomName="Nausea")

    found = auth_client.get("/api/symptoms/search", params={"q": "BACK"}).json()
    assert [s["symptomName"] for s in found] == ["Lower back pain"]
    assert auth_client.get("/api/symptoms/search").status_code == 400


def test_partial_update_keeps_omitted_fields(auth_client):
    created = log_symptom(auth_client, notes="after coffee", location="temples").json()

    response = auth_client.put(f"/api/symptoms/{created['id']}", json={"severity": 8})
    assert response.status_code == 200
    updated = response.json()
    assert updated["severity"] == 8
    assert updated["notes"] == "after coffee"
    assert updated["location"] == "temples"
    assert updated["symptomName"] == "Headache"


def test_update_rejects_out_of_range_and_null_required(auth_client):
    created = log_symptom(auth_client).json()
    url = f"/api/symptoms/{created['id']}"

    assert auth_client.put(url, json={"severity": 11}).status_code == 400
    assert auth_client.put(url, json={"symptomName": None}).status_code == 400


def test_other_users_symptom_is_not_found(login):
    alice = login("alice")
    bob = login("bob")
    symptom_id = log_symptom(alice).json()["id"]

    assert bob.put(f"/api/symptoms/{symptom_id}", json={"severity": 1}).status_code == 404
    assert bob.delete(f"/api/symptoms/{symptom_id}").status_code == 404
    assert alice.get("/api/symptoms").json()[0]["severity"] == 5


def test_delete_symptom(auth_client):
    symptom_id = log_symptom(auth_client).json()["id"]

    response = auth_client.delete(f"/api/symptoms/{symptom_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Symptom deleted successfully"}
    assert auth_client.delete(f"/api/symptoms/{symptom_id}").status_code == 404
    assert auth_client.get("/api/symptoms").json() == []
