"""
Dependencies for the Progress analytics system.

Holds the process-wide service instances the request layer injects.
"""

from typing import Optional

from career.config import settings
from career.progress.services.progress_aggregator import ProgressAggregator
from career.progress.services.report_builder import ReportBuilder
from career.progress.services.insight_engine import InsightEngine


_progress_aggregator: Optional[ProgressAggregator] = None
_insight_engine: Optional[InsightEngine] = None
_report_builder: Optional[ReportBuilder] = None


def init_progress_services(
    insight_engine: Optional[InsightEngine] = None
) -> None:
    """
    Initialize progress services.

    Called once at application startup.

    Args:
        insight_engine: Optional engine with a custom rule table

    Raises:
        ValueError: If analytics settings are out of range
    """
    global _progress_aggregator, _insight_engine, _report_builder

    settings.validate_required()

    _progress_aggregator = ProgressAggregator()
    _insight_engine = insight_engine or InsightEngine()
    _report_builder = ReportBuilder(insight_engine=_insight_engine)


def get_progress_aggregator() -> ProgressAggregator:
    """Get progress aggregator instance."""
    if _progress_aggregator is None:
        raise RuntimeError("Progress services not initialized.")
    return _progress_aggregator


def get_insight_engine() -> InsightEngine:
    """Get insight engine instance."""
    if _insight_engine is None:
        raise RuntimeError("Progress services not initialized.")
    return _insight_engine


def get_report_builder() -> ReportBuilder:
    """Get report builder instance."""
    if _report_builder is None:
        raise RuntimeError("Progress services not initialized.")
    return _report_builder
