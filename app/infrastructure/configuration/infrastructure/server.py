"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        BACKEND_URL: Public base URL of the site (default: http://127.0.0.1:8000)
        ALLOWED_ORIGINS: Comma separated CORS origins used outside production

    Example:
        ```python
        from infrastructure.services import get_settings

        backend_url = get_settings().server.BACKEND_URL
        origins = get_settings().server.allowed_origins
        ```
    """

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    ALLOWED_ORIGINS: str = Field(
        default="http://localhost:8000,http://127.0.0.1:8000",
        alias="ALLOWED_ORIGINS",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Split ALLOWED_ORIGINS into a list of origins."""
        return [
            origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()
        ]
