"""Configuration module for Launcher MCP."""

from launcher_mcp.config.settings import Settings

__all__ = ["Settings"]
