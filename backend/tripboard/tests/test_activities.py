"""
Tests for daily activity endpoints.
"""
from tripboard.tests.conftest import ACTIVITY_PAYLOAD, TRIP_PAYLOAD


def _create(client, trip_id, **overrides):
    return client.post(f"/api/trips/{trip_id}/activities", json={**ACTIVITY_PAYLOAD, **overrides})


def test_create_activity(alice, trip):
    response = _create(alice, trip["id"], time="09:30", notes="Board early", tags=["transit"])
    assert response.status_code == 201
    activity = response.json()["activity"]
    assert activity["tripId"] == trip["id"]
    assert activity["date"] == ACTIVITY_PAYLOAD["date"]
    assert activity["time"].startswith("09:30")
    assert activity["notes"] == "Board early"
    assert activity["tags"] == ["transit"]

    fetched = alice.get(f"/api/trips/{trip['id']}").json()["trip"]
    assert [a["id"] for a in fetched["dailyActivities"]] == [activity["id"]]


def test_activity_optional_fields_default(alice, trip):
    activity = _create(alice, trip["id"]).json()["activity"]
    assert activity["time"] is None
    assert activity["notes"] is None
    assert activity["tags"] == []


def test_activities_ordered_by_date_then_creation(alice, trip):
    late = _create(alice, trip["id"], date="2025-05-03", title="Late").json()["activity"]
    early_a = _create(alice, trip["id"], date="2025-05-01", title="Early A").json()["activity"]
    early_b = _create(alice, trip["id"], date="2025-05-01", title="Early B").json()["activity"]

    listed = alice.get(f"/api/trips/{trip['id']}/activities").json()["activities"]
    assert [a["id"] for a in listed] == [early_a["id"], early_b["id"], late["id"]]

    nested = alice.get(f"/api/trips/{trip['id']}").json()["trip"]["dailyActivities"]
    assert [a["id"] for a in nested] == [early_a["id"], early_b["id"], late["id"]]


def test_create_activity_outside_trip_dates(alice, trip):
    response = _create(alice, trip["id"], date="2025-06-01")
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_create_activity_on_trip_boundaries(alice, trip):
    assert _create(alice, trip["id"], date=TRIP_PAYLOAD["startDate"]).status_code == 201
    assert _create(alice, trip["id"], date=TRIP_PAYLOAD["endDate"]).status_code == 201


def test_create_activity_missing_field(alice, trip):
    payload = {k: v for k, v in ACTIVITY_PAYLOAD.items() if k != "title"}
    response = alice.post(f"/api/trips/{trip['id']}/activities", json=payload)
    assert response.status_code == 400


def test_create_activity_forbidden_for_other_user(bob, trip):
    assert _create(bob, trip["id"]).status_code == 403


def test_create_activity_anonymous(anonymous, trip):
    assert _create(anonymous, trip["id"]).status_code == 401


def test_create_activity_missing_trip(alice):
    assert _create(alice, 9999).status_code == 404


def test_get_activity(alice, trip):
    activity = _create(alice, trip["id"]).json()["activity"]
    response = alice.get(f"/api/trips/{trip['id']}/activities/{activity['id']}")
    assert response.status_code == 200
    assert response.json()["activity"]["title"] == ACTIVITY_PAYLOAD["title"]


def test_update_activity(alice, trip):
    activity = _create(alice, trip["id"]).json()["activity"]
    response = alice.put(
        f"/api/trips/{trip['id']}/activities",
        json={"id": activity["id"], "title": "Tram 12", "date": "2025-05-03"}
    )
    assert response.status_code == 200
    updated = response.json()["activity"]
    assert updated["title"] == "Tram 12"
    assert updated["date"] == "2025-05-03"
    assert updated["location"] == ACTIVITY_PAYLOAD["location"]


def test_update_activity_outside_trip_dates(alice, trip):
    activity = _create(alice, trip["id"]).json()["activity"]
    response = alice.put(
        f"/api/trips/{trip['id']}/activities",
        json={"id": activity["id"], "date": "2024-01-01"}
    )
    assert response.status_code == 400


def test_update_activity_forbidden_for_other_user(alice, bob, trip):
    activity = _create(alice, trip["id"]).json()["activity"]
    response = bob.put(f"/api/trips/{trip['id']}/activities", json={"id": activity["id"], "title": "x"})
    assert response.status_code == 403


def test_update_activity_via_other_trip(alice, trip):
    activity = _create(alice, trip["id"]).json()["activity"]
    other_trip = alice.post("/api/trips", json=TRIP_PAYLOAD).json()["trip"]
    response = alice.put(
        f"/api/trips/{other_trip['id']}/activities",
        json={"id": activity["id"], "title": "x"}
    )
    assert response.status_code == 404


def test_update_missing_activity(alice, trip):
    response = alice.put(f"/api/trips/{trip['id']}/activities", json={"id": 9999, "title": "x"})
    assert response.status_code == 404


def test_delete_activity(alice, trip):
    activity = _create(alice, trip["id"]).json()["activity"]
    response = alice.request("DELETE", f"/api/trips/{trip['id']}/activities", json={"id": activity["id"]})
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert alice.get(f"/api/trips/{trip['id']}/activities/{activity['id']}").status_code == 404
    assert alice.get(f"/api/trips/{trip['id']}").status_code == 200


def test_delete_activity_forbidden_for_other_user(alice, bob, trip):
    activity = _create(alice, trip["id"]).json()["activity"]
    response = bob.request("DELETE", f"/api/trips/{trip['id']}/activities", json={"id": activity["id"]})
    assert response.status_code == 403
    assert alice.get(f"/api/trips/{trip['id']}/activities/{activity['id']}").status_code == 200


def test_activity_ids_out_of_range(alice, trip):
    huge = 2 ** 64
    assert alice.get(f"/api/trips/{trip['id']}/activities/{huge}").status_code == 400
    response = alice.put(f"/api/trips/{trip['id']}/activities", json={"id": huge, "title": "x"})
    assert response.status_code == 400


def test_create_activity_empty_description(alice, trip):
    assert _create(alice, trip["id"], description="").status_code == 400
