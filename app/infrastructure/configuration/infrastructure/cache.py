"""Cache infrastructure settings."""

from typing import Literal

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class CacheSettings(InfrastructureSettings):
    """Translation cache backend configuration.

    Environment Variables:
        CACHE_BACKEND: One of "redis", "memory" or "none" (default: redis)
        REDIS_HOST: Redis host (default: localhost)
        REDIS_PORT: Redis port (default: 6379)
        REDIS_DB: Redis database index (default: 0)
        REDIS_PASSWORD: Optional Redis password
        REDIS_SOCKET_TIMEOUT: Socket timeout in seconds for every Redis call (default: 2.0)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        if settings.cache.CACHE_BACKEND == "redis":
            host = settings.cache.REDIS_HOST
        ```
    """

    CACHE_BACKEND: Literal["redis", "memory", "none"] = Field(
        default="redis", alias="CACHE_BACKEND"
    )
    REDIS_HOST: str = Field(default="localhost", alias="REDIS_HOST")
    REDIS_PORT: int = Field(default=6379, alias="REDIS_PORT")
    REDIS_DB: int = Field(default=0, alias="REDIS_DB")
    REDIS_PASSWORD: str | None = Field(default=None, alias="REDIS_PASSWORD")
    REDIS_SOCKET_TIMEOUT: float = Field(default=2.0, alias="REDIS_SOCKET_TIMEOUT")
