"""
Tests for the HTTP endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.routes.medicine import medicine_routes
from app.utils.drugscom.models import (
    NOT_AVAILABLE,
    DocumentNotFound,
    MedicineRecord,
    NoSearchResults,
)

RECORD = MedicineRecord(
    name="Ibuprofen",
    generic="ibuprofen",
    brand_names="Advil, Motrin IB",
    drug_class="NSAIDs",
    uses="For minor aches.",
    warnings="May cause stomach bleeding.",
    dosage="200mg - every 4 to 6 hours",
    side_effects=NOT_AVAILABLE,
    interactions=NOT_AVAILABLE,
    precautions=NOT_AVAILABLE,
    source="https://www.drugs.com/ibuprofen.html",
)


class StubClient:
    """Returns a fixed record or raises a fixed error."""

    def __init__(self, record=None, error=None):
        self.record = record
        self.error = error
        self.names = []

    def get_medicine(self, name):
        self.names.append(name)
        if self.error is not None:
            raise self.error
        return self.record


@pytest.fixture
def api():
    return TestClient(app)


def test_health(api):
    """Health endpoint reports the service as active."""
    response = api.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "active"
    assert data["version"] == "1.2.0"
    assert "timestamp" in data


def test_get_medicine(api, monkeypatch):
    """Records are returned with camelCase keys."""
    stub = StubClient(record=RECORD)
    monkeypatch.setattr(medicine_routes, "client", stub)

    response = api.get("/medicine/Ibuprofen 200mg")

    assert response.status_code == 200
    assert response.json() == RECORD.to_dict()
    assert stub.names == ["Ibuprofen 200mg"]


def test_get_medicine_not_found(api, monkeypatch):
    """Error pages become a 404 carrying the attempted URL."""
    error = DocumentNotFound("Page not found", attempted_url="https://www.drugs.com/xyz.html")
    monkeypatch.setattr(medicine_routes, "client", StubClient(error=error))

    response = api.get("/medicine/xyz")

    assert response.status_code == 404
    assert response.json() == {
        "error": "Page not found",
        "attemptedUrl": "https://www.drugs.com/xyz.html",
        "suggestion": "Try different medication name",
    }


def test_get_medicine_lookup_failure(api, monkeypatch):
    """Other lookup failures become a 500 with troubleshooting hints."""
    error = NoSearchResults("No search results found",
                            attempted_url="https://www.drugs.com/search.php?searchterm=xyz")
    monkeypatch.setattr(medicine_routes, "client", StubClient(error=error))

    response = api.get("/medicine/xyz")

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Failed to retrieve information"
    assert data["details"] == "No search results found"
    assert data["attemptedUrl"].endswith("searchterm=xyz")
    assert "/medicine/aspirin" in data["troubleshooting"]


def test_popular_medicines_full(api):
    """Default format includes metadata and endpoint hints."""
    data = api.get("/popular-medicines").json()

    assert data["status"] == "success"
    assert data["count"] == 50
    assert data["categoryCount"] == 10
    assert data["data"]["statins"][0] == "Atorvastatin"
    assert data["endpoints"]["list"] == "/popular-medicines?format=list"


def test_popular_medicines_formats(api):
    """Category, list and grouped views."""
    by_category = api.get("/popular-medicines", params={"category": "statins"}).json()
    assert by_category == {
        "category": "statins",
        "medicines": ["Atorvastatin", "Simvastatin", "Rosuvastatin", "Pravastatin", "Lovastatin"],
    }

    flat = api.get("/popular-medicines", params={"format": "list"}).json()
    assert flat["count"] == 50
    assert flat["medicines"][0] == "Aspirin"

    grouped = api.get("/popular-medicines", params={"format": "grouped"}).json()
    assert grouped["categories"][0] == "painRelievers"
    assert "antibiotics" in grouped["medicines"]


def test_popular_medicines_unknown_category(api):
    """Unknown categories fall through to the requested format."""
    data = api.get("/popular-medicines", params={"category": "vitamins", "format": "list"}).json()

    assert data["count"] == 50


def test_random_medicine(api):
    """Random picks link to their lookup endpoint."""
    data = api.get("/random-medicine").json()

    assert data["info"] == f"/medicine/{data['medicine'].lower()}"
    assert data["category"]


def test_search_medicines(api):
    """Grouped search results with counts."""
    data = api.get("/search-medicines", params={"q": "PRAZ"}).json()

    assert data["query"] == "praz"
    assert data["matches"] == 4
    assert data["categories"] == 2
    assert data["results"]["anxiolytics"] == ["Alprazolam"]


def test_search_medicines_list(api):
    """List format flattens the results."""
    data = api.get("/search-medicines", params={"q": "zole", "format": "list"}).json()

    assert data == {
        "query": "zole",
        "count": 3,
        "results": ["Omeprazole", "Esomeprazole", "Pantoprazole"],
    }


def test_search_medicines_no_matches(api):
    """No matches returns a message instead of empty results."""
    data = api.get("/search-medicines", params={"q": "xyz"}).json()

    assert data["matches"] == 0
    assert "message" in data


@pytest.mark.parametrize("params", [{}, {"q": "a"}])
def test_search_medicines_short_query(api, params):
    """Queries under two characters are rejected."""
    response = api.get("/search-medicines", params=params)

    assert response.status_code == 400
    assert response.json()["hint"] == "Use /popular-medicines for a full list"
