import uuid
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from personapi.api.deps import get_person_service, get_person_store
from personapi.api.models.person import Person
from personapi.api.routes.person import router as person_router
from personapi.services.store import InMemoryPersonStore

pytestmark = pytest.mark.testclient

BASE = "/api/v1/person"


@pytest.fixture
def store():
    return InMemoryPersonStore()


@pytest.fixture
def client(store):
    app = FastAPI()
    app.include_router(person_router)
    app.dependency_overrides[get_person_store] = lambda: store

    with TestClient(app) as client:
        yield client


@pytest.fixture
def mock_service():
    return MagicMock()


@pytest.fixture
def mock_client(mock_service):
    app = FastAPI()
    app.include_router(person_router)
    app.dependency_overrides[get_person_service] = lambda: mock_service

    with TestClient(app) as client:
        yield client


def _only_person(client):
    resp = client.get(BASE)
    assert resp.status_code == 200
    people = resp.json()
    assert len(people) == 1
    return people[0]


def test_person_router_crud_scenario(client):
    resp = client.get(BASE)
    assert resp.status_code == 200
    assert resp.json() == []

    resp = client.post(BASE, json={"name": "Alice"})
    assert resp.status_code == 200
    assert resp.content == b""

    person_id = _only_person(client)["id"]
    uuid.UUID(person_id)

    resp = client.get(f"{BASE}/{person_id}")
    assert resp.status_code == 200
    assert resp.json() == {"id": person_id, "name": "Alice"}

    resp = client.put(f"{BASE}/{person_id}", json={"name": "Alicia"})
    assert resp.status_code == 200
    assert resp.json() == 1

    resp = client.get(f"{BASE}/{person_id}")
    assert resp.json() == {"id": person_id, "name": "Alicia"}

    resp = client.delete(f"{BASE}/{person_id}")
    assert resp.status_code == 200
    assert resp.json() == 1

    resp = client.get(f"{BASE}/{person_id}")
    assert resp.status_code == 200
    assert resp.json() is None


def test_trailing_slash_routes(client):
    assert client.post(f"{BASE}/", json={"name": "Bob"}).status_code == 200
    resp = client.get(f"{BASE}/")
    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()] == ["Bob"]


def test_client_supplied_id_is_ignored(client):
    supplied = str(uuid.uuid4())
    client.post(BASE, json={"id": supplied, "name": "Carol"})
    assert _only_person(client)["id"] != supplied


def test_unknown_id_reports_absence(client):
    missing = uuid.uuid4()
    assert client.get(f"{BASE}/{missing}").json() is None
    assert client.delete(f"{BASE}/{missing}").json() == 0

    resp = client.put(f"{BASE}/{missing}", json={"name": "Nobody"})
    assert resp.status_code == 200
    assert resp.json() == 0


@pytest.mark.parametrize("method", ["get", "delete", "put"])
def test_malformed_id_is_bad_request(mock_client, mock_service, method):
    kwargs = {"json": {"name": "Alice"}} if method == "put" else {}
    resp = getattr(mock_client, method)(f"{BASE}/not-a-uuid", **kwargs)

    assert resp.status_code == 400
    assert "not-a-uuid" in resp.json()["detail"]
    assert mock_service.method_calls == []


@pytest.mark.parametrize(
    "payload, error_type",
    [
        ({}, "missing"),
        ({"name": ""}, "string_too_short"),
        ({"name": "   "}, "string_too_short"),
        ({"name": 42}, "string_type"),
        ({"name": "x" * 201}, "string_too_long"),
    ],
)
def test_invalid_payload_lists_violations(mock_client, mock_service, payload, error_type):
    resp = mock_client.post(BASE, json=payload)
    assert resp.status_code == 422
    errors = resp.json()["detail"]
    assert [(e["loc"], e["type"]) for e in errors] == [(["body", "name"], error_type)]

    resp = mock_client.put(f"{BASE}/{uuid.uuid4()}", json=payload)
    assert resp.status_code == 422

    assert mock_service.method_calls == []


def test_missing_body_is_validation_error(mock_client, mock_service):
    resp = mock_client.post(BASE)
    assert resp.status_code == 422
    assert resp.json()["detail"][0]["loc"] == ["body"]
    assert mock_service.method_calls == []


def test_service_results_are_returned_verbatim(mock_client, mock_service):
    person_id = uuid.uuid4()
    mock_service.get_all_persons.return_value = [
        Person(id=person_id, name="Dora"),
    ]
    mock_service.update_person.return_value = 1

    assert mock_client.get(BASE).json() == [{"id": str(person_id), "name": "Dora"}]

    resp = mock_client.put(f"{BASE}/{person_id}", json={"name": "  Dora  "})
    assert resp.json() == 1
    called_id, called_person = mock_service.update_person.call_args.args
    assert called_id == person_id
    assert called_person.name == "Dora"


@pytest.mark.parametrize(
    "raw",
    [
        "0f8fad5bd9cb469fa16570867728950e",
        "{0f8fad5b-d9cb-469f-a165-70867728950e}",
        "urn:uuid:0f8fad5b-d9cb-469f-a165-70867728950e",
        "0f8fad5b-d9cb-469f-a165-70867728950",
    ],
)
def test_non_canonical_id_is_bad_request(mock_client, mock_service, raw):
    for resp in (
        mock_client.get(f"{BASE}/{raw}"),
        mock_client.delete(f"{BASE}/{raw}"),
        mock_client.put(f"{BASE}/{raw}", json={"name": "Alice"}),
    ):
        assert resp.status_code == 400
    assert mock_service.method_calls == []


def test_uppercase_canonical_id_is_accepted(mock_client, mock_service):
    mock_service.get_person_by_id.return_value = None
    raw = "0F8FAD5B-D9CB-469F-A165-70867728950E"
    resp = mock_client.get(f"{BASE}/{raw}")
    assert resp.status_code == 200
    mock_service.get_person_by_id.assert_called_once_with(uuid.UUID(raw))
