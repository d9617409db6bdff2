"""Error handling middleware."""

import logging
import traceback
from collections import defaultdict
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from launcher_mcp.middleware.base import LauncherMiddleware
from launcher_mcp.utils.diagnostics import LauncherError


class ErrorHandlingMiddleware(LauncherMiddleware):
    """Logs and counts exceptions raised while handling a request.

    Launcher errors (bad paths, mismatched drives) are expected user input
    problems and are logged at WARNING. Anything else is logged at ERROR.
    The exception is always re-raised.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Whether to include the traceback in ERROR logs.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self._error_counts: dict[str, int] = defaultdict(int)

    def get_error_stats(self) -> dict[str, int]:
        """Get error counts keyed by exception type name."""
        return dict(self._error_counts)

    def reset_stats(self) -> None:
        """Reset error statistics."""
        self._error_counts.clear()

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Call the next handler, recording any exception it raises."""
        try:
            return await call_next(context)

        except Exception as e:
            error_type = type(e).__name__
            self._error_counts[error_type] += 1

            if isinstance(e, LauncherError):
                self.logger.warning("Rejected %s: %s: %s", context.method, error_type, e)
            elif self.include_traceback:
                self.logger.error(
                    "Error in %s: %s: %s\n%s",
                    context.method,
                    error_type,
                    e,
                    traceback.format_exc(),
                )
            else:
                self.logger.error("Error in %s: %s: %s", context.method, error_type, e)
            raise
