"""Progress analytics services."""

from career.progress.services.progress_aggregator import ProgressAggregator
from career.progress.services.report_builder import ReportBuilder
from career.progress.services.insight_engine import InsightEngine, InsightRule

__all__ = [
    "ProgressAggregator",
    "ReportBuilder",
    "InsightEngine",
    "InsightRule",
]
