"""Tests for the server wiring and health check endpoint."""

from typing import Any

import pytest
from starlette.testclient import TestClient

from launcher_mcp.config import Settings


class TestHealthCheck:
    """Tests for health check endpoint."""

    @pytest.fixture
    def client(self) -> TestClient:
        """Create test client for HTTP server."""
        from launcher_mcp.server import create_server

        server = create_server(Settings())
        return TestClient(server.http_app())

    def test_health_returns_ok(self, client: Any) -> None:
        """Health endpoint returns OK status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.text == "OK"

    def test_health_returns_plain_text(self, client: Any) -> None:
        """Health endpoint returns plain text content type."""
        response = client.get("/health")
        assert "text/plain" in response.headers["content-type"]


class TestCreateServer:
    """Tests for server construction."""

    @pytest.mark.asyncio
    async def test_registers_tools(self) -> None:
        """All launcher tools are registered."""
        from launcher_mcp.server import create_server

        server = create_server(Settings())
        tools = await server.get_tools()

        assert set(tools) == {"escape_arg", "command_line", "relative_path", "binary_path"}
