"""Structlog setup for the site metadata service.

Every entry carries the service name and deployed version, any request or
content context bound through ``infrastructure.logging.context``, and the
emitting call site. Output is JSON in production and a console renderer
elsewhere; under pytest nothing is emitted.
"""

import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import EventDict, Processor

SERVICE_NAME = "site-metadata"


def _running_under_pytest() -> bool:
    return "pytest" in sys.modules


def service_metadata(version: str) -> Processor:
    """Build a processor stamping ``service`` and ``version`` on every entry."""

    def add_service_metadata(_logger: Any, _method: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", SERVICE_NAME)
        event_dict.setdefault("version", version)
        return event_dict

    return add_service_metadata


def build_processors(is_production: bool, version: str = "unknown") -> List[Processor]:
    """Processor chain shared by every configured environment."""
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        service_metadata(version),
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.format_exc_info,
    ]
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    version: Optional[str] = None,
) -> BoundLogger:
    """Configure structlog for the process and return the root logger.

    Unset arguments are read from the application settings.

    Args:
        log_level: Level name such as "INFO" or "DEBUG".
        is_production: JSON output when True, console output otherwise.
        version: Deployed version stamped on every entry.
    """
    if _running_under_pytest():
        structlog.configure(
            processors=[structlog.stdlib.add_log_level, structlog.dev.ConsoleRenderer()],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", level=logging.CRITICAL + 1, force=True)
        return structlog.stdlib.get_logger()

    if log_level is None or is_production is None or version is None:
        # Deferred: providers import modules that create loggers at import time
        from infrastructure.services.providers import get_settings

        settings = get_settings()
        log_level = log_level or settings.LOG_LEVEL
        is_production = settings.is_production if is_production is None else is_production
        version = version or settings.GIT_SHA

    structlog.configure(
        processors=build_processors(is_production, version),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper(), logging.INFO),
    )
    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    Entries carry ``component`` (last dotted segment) and ``module_path``,
    e.g. ``service`` and ``modules.translations.service``.
    """
    module_path = sys._getframe(1).f_globals.get("__name__", "unknown")
    return structlog.stdlib.get_logger().bind(
        component=module_path.rsplit(".", 1)[-1], module_path=module_path
    )
