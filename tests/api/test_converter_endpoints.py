"""
Test cases for timezone offsets (/api/v1/timezones) and the converter
(/api/v1/converter).
"""

import pytest
from httpx import AsyncClient

from tests.utils.assertions import assert_envelope, assert_error_code
from tests.utils.fakes import utc_millis


class TestZoneOffset:
    """Test cases for GET /api/v1/timezones/offset."""

    @pytest.mark.asyncio
    async def test_offset_now(self, test_client: AsyncClient, fixed_now):
        res = await test_client.get(
            "/api/v1/timezones/offset", params={"zone_id": "Asia/Kolkata"}
        )
        data = res.json()["data"]

        assert res.status_code == 200
        assert data == {
            "zone_id": "Asia/Kolkata",
            "at": fixed_now,
            "offset_hours": 5.5,
            "offset_label": "UTC+5.5",
        }

    @pytest.mark.asyncio
    async def test_offset_at_instant(self, test_client: AsyncClient):
        res = await test_client.get(
            "/api/v1/timezones/offset",
            params={
                "zone_id": "America/New_York",
                "at": utc_millis(2024, 1, 15, 12),
            },
        )
        assert res.json()["data"]["offset_label"] == "UTC-5"

    @pytest.mark.asyncio
    async def test_invalid_zone(self, test_client: AsyncClient):
        res = await test_client.get(
            "/api/v1/timezones/offset", params={"zone_id": "Mars/Olympus"}
        )
        body = res.json()

        assert res.status_code == 400
        assert_envelope(body, 400)
        assert_error_code(body, "INVALID_ZONE_ID")


class TestConverterZones:
    @pytest.mark.asyncio
    async def test_common_zones(self, test_client: AsyncClient):
        res = await test_client.get("/api/v1/converter/zones")
        data = res.json()["data"]

        assert res.status_code == 200
        assert len(data["common"]) == 10
        assert {"label", "value", "abbr"} == set(data["common"][0])
        assert data["total"] > 300


class TestConvertCivilTime:
    """Test cases for POST /api/v1/converter/convert."""

    @pytest.mark.asyncio
    async def test_skipped_wall_time(self, test_client: AsyncClient):
        res = await test_client.post(
            "/api/v1/converter/convert",
            json={
                "source_zone": "America/New_York",
                "date": "2024-03-10",
                "time": "02:30",
                "viewer_zone": "UTC",
            },
        )
        data = res.json()["data"]

        assert res.status_code == 200
        assert data["valid"] is True
        assert data["instant"] == utc_millis(2024, 3, 10, 7, 30)
        assert data["utc"] == "2024-03-10T07:30:00.000Z"
        assert data["viewer_local"] == "Sunday, March 10, 2024 07:30:00"
        assert data["countdown"]["elapsed"] is True
        assert data["countdown"]["text"] == "elapsed"

    @pytest.mark.asyncio
    async def test_future_time_counts_down(self, test_client: AsyncClient):
        res = await test_client.post(
            "/api/v1/converter/convert",
            json={
                "source_zone": "Asia/Tokyo",
                "date": "2024-06-16",
                "time": "08:00",
                "viewer_zone": "Asia/Shanghai",
            },
        )
        data = res.json()["data"]

        assert data["viewer_local"] == "Sunday, June 16, 2024 07:00:00"
        assert data["countdown"]["text"] == "11h 0m 0s"
        assert data["relative_day"] == {
            "kind": "tomorrow",
            "days": 1,
            "label": "Tomorrow",
        }

    @pytest.mark.asyncio
    async def test_defaults(self, test_client: AsyncClient):
        # 08:00 today in Los Angeles; today there is the 15th at 05:00
        res = await test_client.post("/api/v1/converter/convert", json={})
        data = res.json()["data"]

        assert data["source_zone"] == "America/Los_Angeles"
        assert data["viewer_zone"] == "Asia/Shanghai"
        assert data["source_civil"] == "2024-06-15T08:00:00"
        assert data["instant"] == utc_millis(2024, 6, 15, 15)
        assert data["countdown"]["text"] == "3h 0m 0s"
        assert data["relative_day"]["kind"] == "none"

    @pytest.mark.asyncio
    async def test_unparseable_input(self, test_client: AsyncClient):
        res = await test_client.post(
            "/api/v1/converter/convert",
            json={"date": "2024-13-01", "time": "08:00"},
        )
        body = res.json()

        assert res.status_code == 200
        assert body["message"] == "Invalid input"
        assert body["data"]["valid"] is False
        assert body["data"]["viewer_local"] == "invalid input"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "source_zone,date,time",
        [
            ("America/New_York", "0001-01-01", "00:30"),
            ("Asia/Tokyo", "9999-12-31", "23:30"),
        ],
    )
    async def test_calendar_edges_are_invalid_input(
        self, test_client: AsyncClient, source_zone, date, time
    ):
        res = await test_client.post(
            "/api/v1/converter/convert",
            json={
                "source_zone": source_zone,
                "date": date,
                "time": time,
                "viewer_zone": "Pacific/Kiritimati",
            },
        )
        body = res.json()

        assert res.status_code == 200
        assert body["data"]["valid"] is False
        assert body["data"]["viewer_local"] == "invalid input"
        assert body["data"]["relative_day"] is None

    @pytest.mark.asyncio
    async def test_unknown_source_zone(self, test_client: AsyncClient):
        res = await test_client.post(
            "/api/v1/converter/convert",
            json={"source_zone": "Asia/Gotham", "time": "08:00"},
        )
        assert res.status_code == 400
        assert_error_code(res.json(), "INVALID_ZONE_ID")


class TestConvertUnixTimestamp:
    """Test cases for GET /api/v1/converter/unix."""

    @pytest.mark.asyncio
    async def test_seconds(self, test_client: AsyncClient, fixed_now):
        res = await test_client.get(
            "/api/v1/converter/unix",
            params={"value": "1718452800", "viewer_zone": "Asia/Tokyo"},
        )
        data = res.json()["data"]

        assert res.status_code == 200
        assert data["valid"] is True
        assert data["instant"] == 1_718_452_800_000
        assert data["utc"] == "2024-06-15T12:00:00.000Z"
        assert data["viewer_local"] == "Saturday, June 15, 2024 21:00:00"
        assert data["current_unix_seconds"] == fixed_now // 1000

    @pytest.mark.asyncio
    async def test_invalid_value(self, test_client: AsyncClient):
        res = await test_client.get(
            "/api/v1/converter/unix", params={"value": "soon"}
        )
        data = res.json()["data"]

        assert res.status_code == 200
        assert data["valid"] is False
        assert data["viewer_local"] == "invalid input"
