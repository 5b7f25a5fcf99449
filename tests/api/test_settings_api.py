"""API tests for workspace settings and data management."""


class TestSettingsEndpoints:
    async def test_defaults(self, api_client):
        data = (await api_client.get("/api/settings")).json()
        assert data["app_name"] == "Lansky"
        assert data["theme"] == "light"
        assert "eBay" in data["platforms"]

    async def test_partial_update(self, api_client, ledger_store):
        response = await api_client.patch("/api/settings", json={"theme": "dark", "primary_color": "#064e3b"})

        assert response.status_code == 200
        assert response.json()["theme"] == "dark"
        assert ledger_store.state.settings.primary_color == "#064e3b"
        assert ledger_store.state.settings.app_name == "Lansky"

    async def test_invalid_color(self, api_client):
        response = await api_client.patch("/api/settings", json={"primary_color": "navy"})
        assert response.status_code == 422

    async def test_palette(self, api_client):
        palette = (await api_client.get("/api/settings/palette")).json()
        assert palette[0] == {"name": "Power Blue", "value": "#1e3a8a"}
        assert len(palette) == 6

    async def test_logo_default_and_override(self, api_client, ledger_store):
        response = await api_client.get("/api/settings/logo")
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.text.startswith("<svg")

        await ledger_store.update_settings({"logo_svg_override": "<svg id='mine'/>"})
        assert (await api_client.get("/api/settings/logo")).text == "<svg id='mine'/>"

    async def test_platforms(self, api_client):
        added = (await api_client.post("/api/settings/platforms", json={"name": "Depop"})).json()
        again = (await api_client.post("/api/settings/platforms", json={"name": "Depop"})).json()
        assert added["platforms"] == again["platforms"]
        assert added["platforms"][-1] == "Depop"

        removed = (await api_client.delete("/api/settings/platforms/Depop")).json()
        assert "Depop" not in removed["platforms"]

    async def test_category_with_slash(self, api_client):
        response = await api_client.delete("/api/settings/expense-categories/Packaging/Boxes")
        assert response.status_code == 200
        assert "Packaging/Boxes" not in response.json()["expense_categories"]


class TestDataManagement:
    async def test_seed(self, api_client):
        data = (await api_client.post("/api/settings/seed")).json()
        assert data == {"inventory": 5, "sales": 2, "expenses": 2}

    async def test_clear_requires_confirm(self, api_client, ledger_store):
        await ledger_store.seed_demo_data()

        response = await api_client.post("/api/settings/clear", json={})

        assert response.status_code == 400
        assert response.json()["error_code"] == "CONFIRMATION_REQUIRED"
        assert len(ledger_store.state.sales) == 2

    async def test_clear(self, api_client, ledger_store):
        await ledger_store.seed_demo_data()
        await ledger_store.update_settings({"app_name": "Kept"})

        response = await api_client.post("/api/settings/clear", json={"confirm": True})

        assert response.json() == {"inventory": 0, "sales": 0, "expenses": 0}
        assert ledger_store.state.settings.app_name == "Kept"
