"""API tests for the sales log and expenses."""

import pytest


class TestSalesEndpoints:
    async def test_list_most_recent_first(self, api_client, ledger_store):
        await ledger_store.seed_demo_data()

        response = await api_client.get("/api/sales")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [s["id"] for s in data["sales"]] == ["s1", "s2"]

    async def test_filters(self, api_client, ledger_store):
        await ledger_store.seed_demo_data()

        by_platform = (await api_client.get("/api/sales", params={"platform": "Poshmark"})).json()
        by_quarter = (await api_client.get("/api/sales", params={"quarter": "Q2"})).json()

        assert [s["id"] for s in by_platform["sales"]] == ["s2"]
        assert by_quarter["total"] == 0

    async def test_invalid_quarter(self, api_client):
        response = await api_client.get("/api/sales", params={"quarter": "Q7"})
        assert response.status_code == 422

    async def test_delete_restores_item(self, api_client, ledger_store):
        await ledger_store.seed_demo_data()

        response = await api_client.delete("/api/sales/s1")

        assert response.status_code == 204
        assert ledger_store.state.find_sale("s1") is None
        assert ledger_store.state.find_item("1").is_available


class TestExpenseEndpoints:
    async def test_add_and_list(self, api_client):
        response = await api_client.post(
            "/api/expenses",
            json={"date": "2024-05-02", "category": "Gas & Mileage", "amount": 18.4, "description": "Estate sale run"},
        )
        assert response.status_code == 201
        assert response.json()["quarter"] == "Q2"

        listing = (await api_client.get("/api/expenses")).json()
        assert listing["total"] == 1
        assert listing["total_amount"] == pytest.approx(18.4)

    async def test_filter_by_category(self, api_client, ledger_store):
        await ledger_store.seed_demo_data()

        listing = (await api_client.get("/api/expenses", params={"category": "Packaging/Boxes"})).json()

        assert [e["id"] for e in listing["expenses"]] == ["e1"]

    async def test_negative_amount_rejected(self, api_client):
        response = await api_client.post(
            "/api/expenses",
            json={"date": "2024-05-02", "category": "Other", "amount": -1, "description": "x"},
        )
        assert response.status_code == 422

    async def test_delete(self, api_client, ledger_store):
        await ledger_store.seed_demo_data()
        response = await api_client.delete("/api/expenses/e1")
        assert response.status_code == 204
        assert [e.id for e in ledger_store.state.expenses] == ["e2"]
