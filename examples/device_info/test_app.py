"""Tests for the device_info example."""

import gzip

from home.testing import TestClient


class TestDeviceInfoApp:
    """Every route of the example, through the ASGI pipeline."""

    async def test_index_renders_view(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/")
            assert response.status == 200
            assert response.content_type == "text/html"
            assert "<h1>Device " in response.text
            assert "{sn}" not in response.text
            assert "{time}" not in response.text

    async def test_index_leaves_unknown_placeholders(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/")
            assert "Firmware: {firmware.version}" in response.text

    async def test_api_info_is_json(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/api/info")
            assert response.status == 200
            assert response.content_type == "application/json"
            data = response.json()
            assert set(data) == {"sn", "time"}
            assert isinstance(data["time"], int)

    async def test_stylesheet_is_served_plain(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/style.css")
            assert response.status == 200
            assert response.content_type == "text/css"
            assert "content-encoding" not in response.headers
            assert b"font-family" in response.body

    async def test_script_is_served_pre_gzipped(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/app.js")
            assert response.status == 200
            assert response.headers["content-encoding"] == "gzip"
            assert response.content_type == "application/javascript"
            assert b"/api/info" in gzip.decompress(response.body)

    async def test_reboot_is_an_expected_error(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.post("/api/reboot")
            assert response.status == 501
            assert response.text == "Reboot is not supported on this device"

    async def test_unknown_path_renders_404_view(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/nope")
            assert response.status == 404
            assert "Nothing at <code>/nope</code>" in response.text
