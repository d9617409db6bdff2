"""Colorful console logging formatter."""

import logging
import re
from datetime import datetime, tzinfo

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

COMPONENT_COLORS = {
    "launcher_mcp.server": COLORS["bright_cyan"],
    "launcher_mcp.tools": COLORS["bright_blue"],
    "launcher_mcp.middleware": COLORS["yellow"],
    "launcher_mcp.config": COLORS["green"],
    "launcher_mcp.utils": COLORS["cyan"],
    "default": COLORS["white"],
}

# Markers printed by LoggingMiddleware
EVENT_MARKERS = {
    ">>>": COLORS["bright_cyan"],
    "<<<": COLORS["bright_green"],
    "!!!": COLORS["bright_red"],
}

DURATION_PATTERN = re.compile(r"(\d+\.?\d*ms)")
DRIVE_PATH_PATTERN = re.compile(r"([A-Za-z]:\\[^\s,)]*)")
PACKAGE_PREFIX = "launcher_mcp."


class ColorfulFormatter(logging.Formatter):
    """Log formatter with colored level, component and message highlights.

    Output: ``HH:MM:SS.mmm MM/DD | LEVEL | component | message``
    """

    def __init__(self, use_colors: bool = True, tz: tzinfo | None = None) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
            tz: Timezone for timestamps. Defaults to local time.
        """
        super().__init__()
        self.use_colors = use_colors
        self.tz = tz

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created, tz=self.tz)
        return f"{dt:%H:%M:%S}.{int(record.msecs):03d} {dt:%m/%d}"

    def _format_level(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelname, COLORS["white"])
        return self._colorize(f"{record.levelname:<8}", color)

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith(PACKAGE_PREFIX):
            name = name[len(PACKAGE_PREFIX) :]
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<20}", color)

    def _highlight_message(self, message: str) -> str:
        """Highlight event markers, durations and Windows paths."""
        if not self.use_colors:
            return message

        for marker, color in EVENT_MARKERS.items():
            if message.startswith(marker):
                message = self._colorize(marker, color) + message[len(marker) :]
                break

        if "ms" in message:
            message = DURATION_PATTERN.sub(
                f"{COLORS['bright_yellow']}\\1{COLORS['reset']}", message
            )
        if ":\\" in message:
            message = DRIVE_PATH_PATTERN.sub(
                lambda m: f"{COLORS['bright_magenta']}{m.group(1)}{COLORS['reset']}",
                message,
            )
        return message

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._format_level(record)
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line
