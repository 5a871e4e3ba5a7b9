"""
Tests for chart-of-accounts and accounting summary endpoints.

These test the HTTP layer: status codes, camelCase payloads and
error bodies. Business rules are covered in tests/services.
"""

from datetime import date


def create(client, code, name, account_type, **extra):
    return client.post("/api/accounts", json={
        "code": code, "name": name, "type": account_type, **extra,
    })


class TestCreateAccount:

    def test_create_account_returns_201(self, client):
        response = create(client, "1000", "Cash", "Asset")
        assert response.status_code == 201

    def test_create_account_returns_camel_case(self, client):
        data = create(
            client, "1000", "Cash", "Asset", description="Main till"
        ).json()

        assert data["code"] == "1000"
        assert data["isActive"] is True
        assert data["parentId"] is None
        assert data["balance"] == 0
        assert "createdAt" in data

    def test_accepts_camel_case_request_fields(self, client):
        parent = create(client, "1000", "Cash", "Asset").json()
        response = create(
            client, "1010", "Bank", "Asset", parentId=parent["id"], isActive=False
        )

        data = response.json()
        assert data["parentId"] == parent["id"]
        assert data["isActive"] is False

    def test_duplicate_code_returns_400(self, client):
        create(client, "1000", "Cash", "Asset")
        response = create(client, "1000", "Cash Again", "Asset")

        assert response.status_code == 400
        assert "already exists" in response.json()["error"]

    def test_missing_fields_return_400(self, client):
        response = client.post("/api/accounts", json={"code": "1000"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        assert body["details"]


class TestReadAccounts:

    def test_get_account(self, client):
        account_id = create(client, "1000", "Cash", "Asset").json()["id"]

        response = client.get(f"/api/accounts/{account_id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Cash"

    def test_get_missing_account_returns_404(self, client):
        response = client.get("/api/accounts/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Account 999 not found"}

    def test_list_with_filters(self, client):
        create(client, "4000", "Sales", "Income")
        create(client, "1000", "Cash", "Asset")
        create(client, "1500", "Old Fixtures", "Asset", isActive=False)

        codes = [a["code"] for a in client.get("/api/accounts").json()]
        assert codes == ["1000", "4000"]

        response = client.get(
            "/api/accounts", params={"type": "Asset", "includeInactive": "true"}
        )
        assert [a["code"] for a in response.json()] == ["1000", "1500"]

    def test_unknown_type_filter_returns_400(self, client):
        response = client.get("/api/accounts", params={"type": "Revenue"})
        assert response.status_code == 400


class TestUpdateAccount:

    def test_patch_changes_only_sent_fields(self, client):
        account_id = create(
            client, "5100", "Rent", "Expense", description="Warehouse"
        ).json()["id"]

        response = client.patch(
            f"/api/accounts/{account_id}", json={"name": "Rent Expense"}
        )

        data = response.json()
        assert response.status_code == 200
        assert data["name"] == "Rent Expense"
        assert data["description"] == "Warehouse"

    def test_patch_missing_account_returns_404(self, client):
        response = client.patch("/api/accounts/999", json={"name": "X"})
        assert response.status_code == 404

    def test_patch_code_clash_returns_400(self, client):
        create(client, "1000", "Cash", "Asset")
        other_id = create(client, "1200", "Receivables", "Asset").json()["id"]

        response = client.patch(f"/api/accounts/{other_id}", json={"code": "1000"})

        assert response.status_code == 400


class TestAccountingSummary:

    def test_summary_counts(self, client, chart, post_entry):
        today = date.today()
        post_entry(today, [(chart["1000"], 250, 0), (chart["4000"], 0, 250)])
        post_entry(today, [(chart["5100"], 100, 0), (chart["1000"], 0, 100)])

        data = client.get("/api/accounting/summary").json()

        assert data == {
            "totalAccounts": 8,
            "journalEntries": 2,
            "revenueThisMonth": 250,
            "expensesThisMonth": 100,
        }
