from __future__ import annotations


async def test_custom_event_types_flow(client):
    payload = {
        "name": "Hoof Trimming",
        "description": "Trim and inspect hooves",
        "default_priority": "Low",
        "reminder_time": {"value": 2, "unit": "week"},
        "animal_categories": ["adult female", "adult male"],
    }
    created = await client.post("/api/v1/custom-event-types/", json=payload)
    assert created.status_code == 201
    event_type = created.json()
    assert event_type["reminder_time"] == {"value": 2, "unit": "week"}

    duplicate = await client.post("/api/v1/custom-event-types/", json=payload)
    assert duplicate.status_code == 409

    cow = (await client.post("/api/v1/animals/", json={"tag": "C-1", "gender": "female"})).json()
    calf = (
        await client.post(
            "/api/v1/animals/", json={"tag": "K-1", "gender": "male", "category": "calf"}
        )
    ).json()

    for_calf = await client.get("/api/v1/custom-event-types/", params={"animal_id": calf["id"]})
    assert for_calf.status_code == 200
    assert for_calf.json() == []

    applied = await client.post(
        f"/api/v1/animals/{cow['id']}/custom-events",
        json={"custom_event_type_id": event_type["id"], "notes": "Rear hooves"},
    )
    assert applied.status_code == 201
    body = applied.json()
    assert body["current_event"]["status"] == "Completed"
    assert body["current_event"]["priority"] == "Low"
    assert body["next_event"]["status"] == "Pending"
    assert body["next_event"]["associated_events"] == [body["current_event"]["id"]]

    rejected = await client.post(
        f"/api/v1/animals/{calf['id']}/custom-events",
        json={"custom_event_type_id": event_type["id"]},
    )
    assert rejected.status_code == 422

    deleted = await client.delete(f"/api/v1/custom-event-types/{event_type['id']}")
    assert deleted.status_code == 204
    again = await client.delete(f"/api/v1/custom-event-types/{event_type['id']}")
    assert again.status_code == 404

    history = await client.get(f"/api/v1/animals/{cow['id']}/events")
    assert history.json()["total"] == 2
