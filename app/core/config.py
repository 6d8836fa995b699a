"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    APP_NAME: str = "Applicant Tracking API"

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Identity
    PRINCIPAL_HEADER: str = "X-Principal"
    BOOTSTRAP_ADMINS: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"

    def bootstrap_admins(self) -> list[str]:
        """Return the principals to promote to admin at start-up.

        Blank entries are dropped and duplicates collapsed, keeping the
        order in which they were listed.
        """
        admins: list[str] = []
        for raw in self.BOOTSTRAP_ADMINS.split(","):
            principal = raw.strip()
            if principal and principal not in admins:
                admins.append(principal)
        return admins


settings = Settings()
