"""
tests/e2e/test_generate_api.py
──────────────────────────────────────────────────────────────────────────────
End-to-end tests for the FastAPI app: HTTP body → validation → generator →
JSON response, with only the LLM mocked.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from pdgen.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ModelNotFoundError,
)
from pdgen.interfaces.api import app, get_generator_provider
from pdgen.services.generator import DescriptionGenerator

_URL = "/api/generate-description"


@pytest.fixture
def client_with(catalog, settings):
    """Factory: TestClient whose generator is backed by the given LLM."""
    def _make(llm):
        generator = DescriptionGenerator(llm=llm, catalog=catalog, settings=settings)
        app.dependency_overrides[get_generator_provider] = lambda: (lambda: generator)
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


# ── Success ────────────────────────────────────────────────────────────────

def test_valid_request_returns_description(api_client, valid_candidate, mock_llm):
    resp = api_client.post(_URL, json=valid_candidate)

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "description": mock_llm.text}
    assert len(mock_llm.calls) == 1


# ── Validation failures (400) ──────────────────────────────────────────────

def test_series_mismatch_returns_field_details(api_client, valid_candidate, mock_llm):
    valid_candidate["series"] = "0201"

    resp = api_client.post(_URL, json=valid_candidate)

    assert resp.status_code == 400
    assert resp.json() == {
        "success": False,
        "error": "Validation failed",
        "details": [
            {"field": "series", "message": "Invalid series code for the selected job family"}
        ],
    }
    assert mock_llm.calls == []


def test_multiple_errors_reported_together(api_client):
    resp = api_client.post(
        _URL,
        json={"jobTitle": "ab", "department": "Eng", "payScaleGrade": "GS-99",
              "jobFamily": "", "series": ""},
    )

    body = resp.json()
    assert resp.status_code == 400
    assert {d["field"] for d in body["details"]} == {"jobTitle", "payScaleGrade", "jobFamily", "series"}


def test_invalid_json(api_client):
    resp = api_client.post(_URL, content=b"{not json", headers={"content-type": "application/json"})

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Request body must be valid JSON"}


def test_non_object_body(api_client):
    resp = api_client.post(_URL, json=["jobTitle"])

    assert resp.status_code == 400
    assert resp.json()["error"] == "Request body must be a JSON object"


def test_validation_runs_before_generator_is_built(catalog, valid_candidate):
    def _broken_provider():
        raise ConfigurationError("no credentials")

    app.dependency_overrides[get_generator_provider] = lambda: _broken_provider
    try:
        valid_candidate["jobTitle"] = ""
        resp = TestClient(app).post(_URL, json=valid_candidate)
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 400


# ── Generation failures (500) ──────────────────────────────────────────────

@pytest.mark.parametrize(
    "exc, message",
    [
        (ModelNotFoundError("nope"),
         "The specified model was not found. Please check your model ID configuration."),
        (AuthenticationError("denied"),
         "Access denied to the generation service. Please check your credentials and permissions."),
    ],
)
def test_provider_errors_mapped(client_with, failing_llm, valid_candidate, exc, message):
    failing_llm.exc = exc
    client = client_with(failing_llm)

    resp = client.post(_URL, json=valid_candidate)

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": message}


def test_generic_generation_error(client_with, failing_llm, valid_candidate):
    client = client_with(failing_llm)

    resp = client.post(_URL, json=valid_candidate)

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "provider exploded"}


def test_empty_model_output(client_with, mock_llm, valid_candidate):
    mock_llm.text = ""
    client = client_with(mock_llm)

    resp = client.post(_URL, json=valid_candidate)

    assert resp.status_code == 500
    assert resp.json()["error"] == "No description generated"


# ── Taxonomy endpoints ─────────────────────────────────────────────────────

def test_health(api_client):
    assert api_client.get("/health").json() == {"status": "ok"}


def test_list_groups(api_client, catalog):
    resp = api_client.get("/api/taxonomy/groups")

    assert resp.status_code == 200
    assert [g["code"] for g in resp.json()] == [
        g.code for g in catalog.list_occupational_groups()
    ]


def test_list_series(api_client):
    resp = api_client.get("/api/taxonomy/groups/2200/series")

    assert [s["code"] for s in resp.json()] == ["2210", "2299"]
    assert resp.json()[0]["group_code"] == "2200"


def test_unknown_group_series_empty(api_client):
    resp = api_client.get("/api/taxonomy/groups/9999/series")

    assert resp.status_code == 200
    assert resp.json() == []


def test_pay_grades(api_client):
    grades = api_client.get("/api/pay-grades").json()
    assert "GS-12" in grades
    assert "SES" in grades


def test_unexpected_provider_error_keeps_json_contract(catalog, settings, failing_llm, valid_candidate):
    failing_llm.exc = RuntimeError("could not resolve credentials from session")
    generator = DescriptionGenerator(llm=failing_llm, catalog=catalog, settings=settings)
    app.dependency_overrides[get_generator_provider] = lambda: (lambda: generator)
    try:
        client = TestClient(app, raise_server_exceptions=False)
        resp = client.post(_URL, json=valid_candidate)
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {
        "success": False,
        "error": "Failed to generate job description. Please try again.",
    }
