"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient
from src.presentation.api.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    """Test health endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_regions(client):
    """Test region listing."""
    response = client.get("/regions")
    assert response.status_code == 200
    assert response.json()[0] == {"name": "Cairo", "zone": "Delta"}


def test_crops_and_rules(client):
    """Test crop reference and rules endpoints."""
    crops = client.get("/crops").json()
    assert crops[0]["ideal_range_display"] == "17–24"

    rules = client.get("/rules").json()["rules"]
    assert "Barley (Hordeum vulgare)" in rules


def test_recommend(client):
    """Test a recommendation for a known region."""
    response = client.post("/recommend", json={"region": "Cairo", "month": 1})
    assert response.status_code == 200

    data = response.json()
    assert data["known_region"] is True
    assert data["region_temperature"] == 17
    assert data["matches"][0]["name"] == "Wheat (Triticum aestivum)"


def test_recommend_unknown_region(client):
    """Unknown regions return an empty recommendation."""
    response = client.post("/recommend", json={"region": "Sahara", "month": 6})
    assert response.status_code == 200

    data = response.json()
    assert data["known_region"] is False
    assert data["region_temperature"] is None
    assert data["matches"] == []


@pytest.mark.parametrize("month", [0, 13])
def test_recommend_invalid_month(client, month):
    """Out-of-range months are rejected by request validation."""
    response = client.post("/recommend", json={"region": "Cairo", "month": month})
    assert response.status_code == 422
