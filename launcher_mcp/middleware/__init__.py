"""Launcher MCP middleware components."""

from launcher_mcp.middleware.base import LauncherMiddleware
from launcher_mcp.middleware.errors import ErrorHandlingMiddleware
from launcher_mcp.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LauncherMiddleware",
    "LoggingMiddleware",
]
