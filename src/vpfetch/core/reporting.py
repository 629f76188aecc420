"""Default diagnostics sink backed by structlog."""

from ..observability import get_logger


class LogReporter:
    """Reporting sink that forwards messages to a structlog logger.

    Until `vpfetch.observability.configure_logging` (or any other
    `structlog.configure`) runs, structlog's defaults print every level,
    debug included, to stdout. Applications should configure logging
    once at startup; the CLI does.
    """

    def __init__(self, component: str = "fetch"):
        self._log = get_logger(__name__).bind(component=component)

    def info(self, message: str) -> None:
        self._log.info(message)

    def debug(self, message: str) -> None:
        self._log.debug(message)
