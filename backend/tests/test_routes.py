"""
Tests for API route endpoints.

Tests: /health, /options, /options/{enum_key}, /options/{enum_key}/select
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest


class TestHealthEndpoint:
    """Tests for GET /health."""

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_health_returns_200(self, client):
        response = await client.get("/health")
        assert response.status_code == 200

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_health_returns_status_and_version(self, client):
        data = (await client.get("/health")).json()
        assert data["status"] == "healthy"
        assert data["environment"] == "development"
        assert "version" in data
        assert "timestamp" in data


class TestOptionsEndpoints:
    """Tests for /options/* endpoints."""

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_list_registered_enums(self, client):
        response = await client.get("/options")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert {"key": "delivery-time", "name": "DeliveryTime", "count": 4} in body["data"]

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_delivery_time_options_with_selection(self, client):
        response = await client.get("/options/delivery-time", params={"selected": "ThreeDays"})
        assert response.status_code == 200
        body = response.json()
        assert body["data"] == [
            {"value": "OneDay", "label": "In 24 hours", "selected": False},
            {"value": "TwoDays", "label": "In 2 days", "selected": False},
            {"value": "ThreeDays", "label": "In 3 days", "selected": True},
            {"value": "OneWeekOrMore", "label": "OneWeekOrMore", "selected": False},
        ]
        assert body["meta"] == {"enum": "delivery-time", "count": 4}

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_options_set_cache_header(self, client):
        response = await client.get("/options/delivery-time")
        assert response.headers["cache-control"].startswith("public, max-age=")

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_select_by_value_on_str_enum(self, client):
        response = await client.get("/options/delivery-type", params={"selected": "express"})
        selected = [o["value"] for o in response.json()["data"] if o["selected"]]
        assert selected == ["EXPRESS"]

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_select_by_int_value_on_int_enum(self, client):
        response = await client.get("/options/delivery-time", params={"selected": "2"})
        assert response.status_code == 200
        selected = [o["value"] for o in response.json()["data"] if o["selected"]]
        assert selected == ["ThreeDays"]

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_select_markup_by_int_value(self, client):
        response = await client.get("/options/delivery-time/select", params={"selected": "3"})
        assert '<option value="OneWeekOrMore" selected>OneWeekOrMore</option>' in response.text

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_unknown_selection_is_ignored(self, client):
        response = await client.get("/options/delivery-time", params={"selected": "Never"})
        assert response.status_code == 200
        assert not any(o["selected"] for o in response.json()["data"])

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_unknown_enum_returns_404_envelope(self, client):
        response = await client.get("/options/colours")
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "notfound"
        assert "colours" in body["error"]["message"]
        assert "delivery-time" in body["error"]["details"]["available"]

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_select_markup(self, client):
        response = await client.get(
            "/options/delivery-time/select",
            params={"selected": "ThreeDays", "name": "DeliveryTime"},
        )
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        html = response.text
        assert html.startswith('<select name="DeliveryTime" id="DeliveryTime"')
        assert '<option value="ThreeDays" selected>In 3 days</option>' in html
        assert '<option value="OneWeekOrMore">OneWeekOrMore</option>' in html
        assert response.headers["cache-control"].startswith("public, max-age=")

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_select_name_defaults_to_key(self, client):
        response = await client.get("/options/delivery-type/select")
        assert response.text.startswith('<select name="delivery-type" id="delivery-type"')

    @pytest.mark.api
    @pytest.mark.asyncio
    async def test_select_unknown_enum_returns_404(self, client):
        response = await client.get("/options/nope/select")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "notfound"


class TestLifespan:
    """The synchronous client runs startup/shutdown."""

    @pytest.mark.api
    def test_startup_and_request(self, test_client):
        response = test_client.get("/options/delivery-time")
        assert response.status_code == 200
        assert len(response.json()["data"]) == 4
