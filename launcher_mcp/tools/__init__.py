"""MCP tools for Launcher MCP."""

from launcher_mcp.tools.launcher import binary_path, command_line, escape_arg, relative_path

__all__ = ["binary_path", "command_line", "escape_arg", "relative_path"]
