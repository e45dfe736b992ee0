"""
Career progress analytics.

Stateless services that turn a user's progress records, activity log
and stat counts into dashboard summaries, chart data and insights.
"""

import logging
from typing import Optional

from career.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from LOG_LEVEL (or an explicit level)."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
