"""
Career analytics application settings.

Extends the base settings with analytics-specific configuration.
"""

from typing import List

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Career analytics settings."""

    # ==========================================================================
    # Analytics Windows (days)
    # ==========================================================================
    ACTIVITY_TIMELINE_DAYS: int = 30  # Line chart window
    RECENT_PROGRESS_DAYS: int = 7  # Recent progress updates window
    INSIGHT_LOOKBACK_DAYS: int = 7  # Days of activity considered by insights

    # ==========================================================================
    # Insight Thresholds
    # ==========================================================================
    LOW_PROGRESS_THRESHOLD: int = 50  # Modules below this are flagged
    LOW_ACTIVITY_THRESHOLD: int = 3  # Fewer weekly activities is "low"

    # ==========================================================================
    # Activity Feed
    # ==========================================================================
    ACTIVITY_FEED_LIMIT: int = 50  # Default number of feed entries returned

    def get_config_errors(self) -> List[str]:
        """Base checks plus analytics windows and thresholds."""
        errors = super().get_config_errors()

        for name in ("ACTIVITY_TIMELINE_DAYS", "RECENT_PROGRESS_DAYS", "INSIGHT_LOOKBACK_DAYS"):
            if getattr(self, name) <= 0:
                errors.append(f"{name} must be a positive number of days")

        if not 0 <= self.LOW_PROGRESS_THRESHOLD <= 100:
            errors.append("LOW_PROGRESS_THRESHOLD must be between 0 and 100")

        if self.LOW_ACTIVITY_THRESHOLD < 1:
            errors.append("LOW_ACTIVITY_THRESHOLD must be at least 1")

        if self.ACTIVITY_FEED_LIMIT < 1:
            errors.append("ACTIVITY_FEED_LIMIT must be at least 1")

        return errors


# Global settings instance
settings = Settings()
