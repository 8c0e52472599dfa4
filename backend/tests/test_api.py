"""Tests for the HTTP API."""

import pandas as pd
import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.deps import get_catalog
from app.main import app
from app.services.catalog_service import LenderCatalog

HEADER = ["Lender Name", "Specialty"] + [f"Column {i}" for i in range(2, 26)]


@pytest.fixture
def client(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def empty_client():
    empty = LenderCatalog()
    app.dependency_overrides[get_catalog] = lambda: empty
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def profile_payload():
    return {
        "client_name": "Dana Reyes",
        "company_name": "Reyes Landscaping LLC",
        "company_state": "tx",
        "capital_requested": 50000,
        "loan_purpose": "Working capital",
        "avg_monthly_deposits": 40000,
        "avg_annual_revenue": 480000,
        "legal_entity_type": "LLC",
        "business_start_date": "2019-03-01",
        "credit_score": "650-700",
        "industry": "Landscaping",
    }


def _csv_upload(rows):
    content = pd.DataFrame(rows).to_csv(header=False, index=False).encode("utf-8")
    return {"file": ("lenders.csv", content, "text/csv")}


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["docs"] == "/api/docs"


def test_health_reports_catalog(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "api": "healthy",
        "catalog": "loaded",
        "lenders": 3,
    }


def test_health_degraded_when_empty(empty_client):
    response = empty_client.get("/api/v1/health")

    assert response.json()["status"] == "degraded"
    assert response.json()["lenders"] == 0


def test_list_lenders(client):
    response = client.get("/api/v1/lenders")

    data = response.json()
    assert response.status_code == 200
    assert data["total"] == 3
    assert data["lenders"][0]["lender_name"] == "Acme Capital"
    assert data["lenders"][0]["allows_bankruptcies"] is False


def test_list_lenders_by_specialty(client):
    response = client.get("/api/v1/lenders", params={"specialty": "SBA"})

    assert [lender["lender_name"] for lender in response.json()["lenders"]] == [
        "Prime SBA Partners"
    ]


def test_list_specialties(client):
    response = client.get("/api/v1/lenders/specialties")

    assert response.json() == {"specialties": ["MCA", "SBA"]}


def test_get_lender(client):
    response = client.get("/api/v1/lenders/Acme Capital")

    assert response.status_code == 200
    assert response.json()["restricted_states"] == "CA,NY"


def test_get_unknown_lender(client):
    response = client.get("/api/v1/lenders/Nobody")

    assert response.status_code == 404


def test_upload_replaces_catalog(client, catalog, acme_row):
    rows = [HEADER, acme_row, [None] * 26, ["New Lender", "LOC"] + [None] * 24]

    response = client.post("/api/v1/lenders/upload", files=_csv_upload(rows))

    assert response.status_code == 201
    assert response.json() == {
        "filename": "lenders.csv",
        "rows_read": 3,
        "lenders_loaded": 2,
        "rows_skipped": 1,
    }
    assert [lender.lender_name for lender in catalog.lenders] == [
        "Acme Capital",
        "New Lender",
    ]


def test_upload_refreshes_cache(client, acme_row, tmp_path, monkeypatch):
    cache_path = tmp_path / "lenders.json"
    monkeypatch.setattr(settings, "LENDER_CACHE_PATH", str(cache_path))

    response = client.post("/api/v1/lenders/upload", files=_csv_upload([HEADER, acme_row]))

    assert response.status_code == 201
    restored = LenderCatalog()
    assert restored.load_cache(cache_path)
    assert restored.find("Acme Capital") is not None


def test_upload_rejects_unsupported_type(client, catalog):
    response = client.post(
        "/api/v1/lenders/upload",
        files={"file": ("lenders.pdf", b"%PDF-1.4", "application/pdf")},
    )

    assert response.status_code == 400
    assert len(catalog) == 3


def test_upload_rejects_oversized_file(client, acme_row, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 0)

    response = client.post("/api/v1/lenders/upload", files=_csv_upload([HEADER, acme_row]))

    assert response.status_code == 400
    assert "File size" in response.json()["detail"]


def test_upload_rejects_unreadable_file(client):
    response = client.post(
        "/api/v1/lenders/upload",
        files={"file": ("lenders.xlsx", b"not a workbook", "application/octet-stream")},
    )

    assert response.status_code == 400


def test_evaluate_qualification(client, profile_payload):
    response = client.post(
        "/api/v1/qualification/evaluate",
        json={"profile": profile_payload},
    )

    data = response.json()
    assert response.status_code == 200
    assert data["summary"]["total_lenders"] == 3
    assert data["summary"]["qualified_lenders"] == 2
    assert data["summary"]["profile_strength"] == "Fair"
    assert [result["lender_name"] for result in data["results"]] == [
        "Acme Capital",
        "Open Door Funding",
        "Prime SBA Partners",
    ]
    assert data["results"][0]["match_score"] == 100
    assert data["results"][0]["evidence"]["fico"] == {"actual": 650, "required": 550}
    assert not data["results"][2]["is_qualified"]


def test_evaluate_with_display_options(client, profile_payload):
    response = client.post(
        "/api/v1/qualification/evaluate",
        json={
            "profile": profile_payload,
            "only_qualified": True,
            "specialty": "MCA",
            "sort_by": "name",
        },
    )

    data = response.json()
    assert response.status_code == 200
    assert [result["lender_name"] for result in data["results"]] == ["Acme Capital"]
    assert data["summary"]["total_lenders"] == 3


def test_evaluate_restricted_state(client, profile_payload):
    profile_payload["company_state"] = "CA"

    response = client.post(
        "/api/v1/qualification/evaluate",
        json={"profile": profile_payload},
    )

    acme = next(
        result
        for result in response.json()["results"]
        if result["lender_name"] == "Acme Capital"
    )
    assert not acme["is_qualified"]
    assert "State CA is restricted by this lender" in acme["failed_criteria"]


@pytest.mark.parametrize(
    "field, value",
    [
        ("capital_requested", -1),
        ("company_state", "Texas"),
        ("credit_score", "800+"),
        ("business_start_date", "2999-01-01"),
        ("exact_credit_score", 900),
    ],
)
def test_evaluate_rejects_invalid_profile(client, profile_payload, field, value):
    profile_payload[field] = value

    response = client.post(
        "/api/v1/qualification/evaluate",
        json={"profile": profile_payload},
    )

    assert response.status_code == 422


def test_evaluate_with_empty_catalog(empty_client, profile_payload):
    response = empty_client.post(
        "/api/v1/qualification/evaluate",
        json={"profile": profile_payload},
    )

    assert response.status_code == 503
