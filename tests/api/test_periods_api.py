"""
Tests for accounting period endpoints.
"""


def create(client, name, start, end):
    return client.post("/api/accounting-periods", json={
        "name": name, "startDate": start, "endDate": end,
    })


def test_create_period_returns_201(client):
    response = create(client, "Q1 2024", "2024-01-01", "2024-03-31")

    assert response.status_code == 201
    data = response.json()
    assert data["startDate"] == "2024-01-01"
    assert data["status"] == "open"


def test_overlap_returns_400(client):
    create(client, "Q1 2024", "2024-01-01", "2024-03-31")

    response = create(client, "Feb 2024", "2024-02-01", "2024-02-29")

    assert response.status_code == 400
    assert "overlaps" in response.json()["error"]


def test_start_after_end_returns_400(client):
    response = create(client, "Backwards", "2024-03-31", "2024-01-01")
    assert response.status_code == 400


def test_list_most_recent_first(client):
    create(client, "Q1 2024", "2024-01-01", "2024-03-31")
    create(client, "Q2 2024", "2024-04-01", "2024-06-30")

    names = [p["name"] for p in client.get("/api/accounting-periods").json()]

    assert names == ["Q2 2024", "Q1 2024"]


def test_close_period(client):
    period_id = create(client, "Q1 2024", "2024-01-01", "2024-03-31").json()["id"]

    response = client.patch(
        f"/api/accounting-periods/{period_id}/status", json={"status": "closed"}
    )

    assert response.status_code == 200
    assert response.json()["status"] == "closed"


def test_unknown_status_returns_400(client):
    period_id = create(client, "Q1 2024", "2024-01-01", "2024-03-31").json()["id"]

    response = client.patch(
        f"/api/accounting-periods/{period_id}/status", json={"status": "locked"}
    )

    assert response.status_code == 400


def test_close_missing_period_returns_404(client):
    response = client.patch(
        "/api/accounting-periods/99/status", json={"status": "closed"}
    )
    assert response.status_code == 404
