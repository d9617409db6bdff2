"""Launcher MCP FastMCP server.

Thin wiring: tools live in tools/, the algorithms in utils/.
"""

import logging
import sys

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from launcher_mcp.config import Settings
from launcher_mcp.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from launcher_mcp.state import get_settings
from launcher_mcp.tools import binary_path, command_line, escape_arg, relative_path
from launcher_mcp.utils.console import ColorfulFormatter

NOISY_LOGGERS = [
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "fastmcp",
    "starlette",
    "anyio",
]


def _configure_logging(settings: Settings) -> None:
    """Configure colorful logging for the launcher_mcp package.

    Called at module load time so loggers are ready however the server is started.
    """
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("launcher_mcp")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_logging(get_settings())

logger = logging.getLogger(__name__)


def configure_middleware(server: FastMCP, settings: Settings) -> None:
    """Add middleware: ErrorHandling (innermost) then Logging.

    Args:
        server: The FastMCP server to configure.
        settings: Logging options.
    """
    server.add_middleware(ErrorHandlingMiddleware(include_traceback=settings.include_traceback))
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=float(settings.slow_threshold_ms),
        )
    )


def create_server(settings: Settings | None = None) -> FastMCP:
    """Create and configure the MCP server.

    Args:
        settings: Settings to use. Defaults to the global settings.

    Returns:
        Configured FastMCP server instance
    """
    settings = settings or get_settings()
    server = FastMCP("launcher_mcp")

    configure_middleware(server, settings)

    server.tool()(escape_arg)
    server.tool()(command_line)
    server.tool()(relative_path)
    server.tool()(binary_path)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    logger.debug("Launcher MCP server created (transport=%s)", settings.transport)
    return server


# Default server instance
mcp = create_server()
