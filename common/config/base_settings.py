"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Extend this class for application-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        # App-specific settings
        DEFAULT_PAGE_SIZE: int = 20

    settings = Settings()
    print(settings.DEFAULT_PAGE_SIZE)
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for application-specific settings.
    """

    # ==========================================================================
    # Runtime Settings
    # ==========================================================================
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production
    LOG_LEVEL: str = "INFO"

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def get_config_errors(self) -> List[str]:
        """
        List configuration problems.

        Subclasses extend this with their own checks.
        """
        errors = []

        if self.LOG_LEVEL.upper() not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        return errors

    def validate_required(self) -> None:
        """
        Validate that settings are usable.

        Raises:
            ValueError: If any setting is invalid
        """
        errors = self.get_config_errors()

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
