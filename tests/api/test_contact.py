import uuid
from unittest.mock import patch

import pytest


@pytest.mark.asyncio
async def test_submit_minimal_payload(client):
    payload = {
        "name": "Jo",
        "lastName": "Do",
        "email": "jo@x.com",
        "category": "feedback",
        "message": "1234567890",
    }
    resp = await client.post("/api/contact", json=payload)
    assert resp.status_code == 201
    data = resp.json()
    assert data["success"] is True
    assert data["message"] == "Your message has been received. We will get back to you soon!"
    uuid.UUID(data["submissionId"])


@pytest.mark.asyncio
async def test_submission_shows_up_in_listing(client, valid_payload):
    resp = await client.post("/api/contact", json=valid_payload)
    assert resp.status_code == 201
    submission_id = resp.json()["submissionId"]

    listing = await client.get("/api/submissions")
    assert listing.status_code == 200
    data = listing.json()
    assert data["success"] is True
    assert data["count"] == 1
    stored = data["submissions"][0]
    assert stored["id"] == submission_id
    assert stored["name"] == "Ada"
    assert stored["last_name"] == "Lovelace"
    assert stored["email"] == "ada.lovelace@analytical.engine.io"
    assert stored["department"] == "Engineering"
    assert stored["category"] == "suggestion"
    assert stored["message"] == valid_payload["message"]
    assert stored["created_at"]


@pytest.mark.asyncio
@pytest.mark.parametrize("department", [None, "", "   "])
async def test_missing_department_is_stored_as_null(client, valid_payload, department):
    if department is None:
        del valid_payload["department"]
    else:
        valid_payload["department"] = department

    resp = await client.post("/api/contact", json=valid_payload)
    assert resp.status_code == 201

    stored = (await client.get("/api/submissions")).json()["submissions"][0]
    assert stored["department"] is None


@pytest.mark.asyncio
async def test_values_are_trimmed_and_unknown_fields_dropped(client, valid_payload):
    valid_payload["name"] = "  Ada  "
    valid_payload["message"] = "\n" + valid_payload["message"] + "   "
    valid_payload["isAdmin"] = True

    resp = await client.post("/api/contact", json=valid_payload)
    assert resp.status_code == 201

    stored = (await client.get("/api/submissions")).json()["submissions"][0]
    assert stored["name"] == "Ada"
    assert stored["message"] == "The course could use more exercises on embeddings."
    assert "isAdmin" not in stored


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["name", "lastName", "email", "category", "message"])
async def test_missing_required_field_is_rejected(client, valid_payload, field):
    del valid_payload[field]

    resp = await client.post("/api/contact", json=valid_payload)
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "Validation failed"
    assert {d["field"] for d in data["details"]} == {field}

    # Nothing reached the store
    listing = (await client.get("/api/submissions")).json()
    assert listing["count"] == 0


@pytest.mark.asyncio
async def test_all_violations_are_reported(client):
    resp = await client.post("/api/contact", json={"email": "not-an-email", "category": "urgent"})
    assert resp.status_code == 400
    details = resp.json()["details"]
    assert details == [
        {"field": "name", "message": "Name is required"},
        {"field": "name", "message": "Name must be between 2 and 255 characters"},
        {"field": "lastName", "message": "Last name is required"},
        {"field": "lastName", "message": "Last name must be between 2 and 255 characters"},
        {"field": "email", "message": "Must be a valid email address"},
        {"field": "category", "message": "Category must be one of: feedback, suggestion, problem"},
        {"field": "message", "message": "Message is required"},
        {"field": "message", "message": "Message must be between 10 and 5000 characters"},
    ]


@pytest.mark.asyncio
async def test_invalid_email_is_rejected(client, valid_payload):
    valid_payload["email"] = "not-an-email"
    resp = await client.post("/api/contact", json=valid_payload)
    assert resp.status_code == 400
    assert {"field": "email", "message": "Must be a valid email address"} in resp.json()["details"]


@pytest.mark.asyncio
async def test_unknown_category_names_valid_values(client, valid_payload):
    valid_payload["category"] = "urgent"
    resp = await client.post("/api/contact", json=valid_payload)
    assert resp.status_code == 400
    message = resp.json()["details"][0]["message"]
    for category in ("feedback", "suggestion", "problem"):
        assert category in message


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field,value,accepted",
    [
        ("name", "A", False),
        ("name", "Al", True),
        ("message", "123456789", False),
        ("message", "1234567890", True),
    ],
)
async def test_length_boundaries(client, valid_payload, field, value, accepted):
    valid_payload[field] = value
    resp = await client.post("/api/contact", json=valid_payload)
    assert resp.status_code == (201 if accepted else 400)


@pytest.mark.asyncio
async def test_listing_is_newest_first_and_stable(client, valid_payload):
    for name in ("First", "Second", "Third"):
        valid_payload["name"] = name
        resp = await client.post("/api/contact", json=valid_payload)
        assert resp.status_code == 201

    first = (await client.get("/api/submissions")).json()
    second = (await client.get("/api/submissions")).json()

    assert first == second
    assert first["count"] == 3
    assert [s["name"] for s in first["submissions"]] == ["Third", "Second", "First"]


@pytest.mark.asyncio
async def test_empty_listing(client):
    resp = await client.get("/api/submissions")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "count": 0, "submissions": []}


@pytest.mark.asyncio
async def test_store_failure_on_submit(client_without_tables, valid_payload):
    resp = await client_without_tables.post("/api/contact", json=valid_payload)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to submit contact form. Please try again later."}


@pytest.mark.asyncio
async def test_store_failure_on_listing(client_without_tables):
    resp = await client_without_tables.get("/api/submissions")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch submissions"}


@pytest.mark.asyncio
async def test_unexpected_error_is_hidden(client, valid_payload):
    with patch(
        "feedback_api.api.contact.validate_submission",
        side_effect=RuntimeError("secret internals"),
    ):
        resp = await client.post("/api/contact", json=valid_payload)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


@pytest.mark.asyncio
async def test_unknown_route(client):
    resp = await client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Endpoint not found"}


@pytest.mark.asyncio
async def test_provider_aliases_are_folded_before_storing(client, valid_payload):
    valid_payload["email"] = "John.Doe+news@GoogleMail.com"
    resp = await client.post("/api/contact", json=valid_payload)
    assert resp.status_code == 201

    stored = (await client.get("/api/submissions")).json()["submissions"][0]
    assert stored["email"] == "johndoe@gmail.com"


@pytest.mark.asyncio
async def test_url_encoded_form_submission(client, valid_payload):
    del valid_payload["department"]
    resp = await client.post("/api/contact", data=valid_payload)
    assert resp.status_code == 201

    stored = (await client.get("/api/submissions")).json()["submissions"][0]
    assert stored["last_name"] == "Lovelace"
    assert stored["department"] is None


@pytest.mark.asyncio
async def test_url_encoded_form_is_validated(client):
    resp = await client.post("/api/contact", data={"name": "A", "email": "nope"})
    assert resp.status_code == 400
    fields = {d["field"] for d in resp.json()["details"]}
    assert fields == {"name", "lastName", "email", "category", "message"}


@pytest.mark.asyncio
async def test_malformed_json_is_rejected(client):
    resp = await client.post(
        "/api/contact",
        content=b'{"name": "Ada",',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]


@pytest.mark.asyncio
async def test_json_body_must_be_an_object(client):
    resp = await client.post("/api/contact", json=["Ada", "Lovelace"])
    assert resp.status_code == 400
    assert resp.json() == {"error": "Request body must be a JSON object"}


@pytest.mark.asyncio
async def test_wrong_method(client):
    resp = await client.delete("/api/contact")
    assert resp.status_code == 405
    assert resp.json()["error"]
