from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import (
    get_cache_backend,
    get_config_service,
    get_language_resolver,
    get_settings,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(
        log_level=settings.LOG_LEVEL,
        is_production=settings.is_production,
        version=settings.GIT_SHA,
    )


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump(exclude={"cache": {"REDIS_PASSWORD"}}).items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _activate_services(app: FastAPI, logger: BoundLogger) -> None:
    """Resolve the cache capability once and build the content services."""
    resolver = get_language_resolver()
    cache_backend = get_cache_backend()

    app.state.language_resolver = resolver
    app.state.cache_backend = cache_backend
    app.state.config_service = get_config_service()

    if cache_backend.is_available:
        logger.info(
            "multilingual_enabled",
            default_language=resolver.get_default_language(),
            supported_languages=resolver.get_supported_languages(),
        )
    else:
        logger.warning(
            "multilingual_disabled",
            reason="cache_unavailable",
            message="Serving configurations without translated content",
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)
    _activate_services(app, logger)

    try:
        yield
    finally:
        logger.info("application_shutdown")
