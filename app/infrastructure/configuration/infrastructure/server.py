"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        HOST: Interface the HTTP server binds to (default: 0.0.0.0)
        PORT: Port the HTTP server listens on (default: 8000)
        CORS_ALLOW_ORIGINS: Comma-separated list of allowed CORS origins (default: *)

    Example:
        ```python
        from infrastructure.services import get_settings

        port = get_settings().server.PORT
        ```
    """

    HOST: str = Field(default="0.0.0.0", alias="HOST")
    PORT: int = Field(default=8000, alias="PORT")
    CORS_ALLOW_ORIGINS: str = Field(default="*", alias="CORS_ALLOW_ORIGINS")

    @property
    def allow_origins(self) -> list[str]:
        """Parsed CORS origin list."""
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
