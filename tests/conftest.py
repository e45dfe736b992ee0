"""Shared test fixtures for career analytics tests."""

import pytest
from datetime import datetime, timezone, timedelta

from career.progress.services.progress_aggregator import ProgressAggregator
from career.progress.services.insight_engine import InsightEngine
from career.progress.services.report_builder import ReportBuilder


@pytest.fixture
def now():
    return datetime(2024, 1, 15, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def aggregator():
    return ProgressAggregator()


@pytest.fixture
def insight_engine():
    # Explicit values so tests don't depend on the environment
    return InsightEngine(lookback_days=7, low_progress_threshold=50, low_activity_threshold=3)


@pytest.fixture
def report_builder(insight_engine):
    return ReportBuilder(insight_engine=insight_engine, timeline_days=30, recent_progress_days=7)


@pytest.fixture
def sample_progress_records(now):
    return [
        {
            "module": "resume",
            "moduleName": "Resume Optimization",
            "progress": 40,
            "lastUpdated": now - timedelta(days=2),
        },
        {
            "module": "linkedin",
            "moduleName": "LinkedIn",
            "progress": 100,
            "lastUpdated": now - timedelta(days=20),
        },
        {
            "module": "network",
            "moduleName": "Networking",
            "progress": 75,
        },
    ]


@pytest.fixture
def full_stats():
    return {
        "resumes": 2,
        "jobApplications": 5,
        "contacts": 3,
        "assessments": 1,
        "badges": 4,
        "documents": 6,
    }


@pytest.fixture
def make_activity():
    """Build an activity record; timestamps may be datetimes or ISO strings."""
    def _make(activity_type, timestamp, **extra):
        return {"activityType": activity_type, "timestamp": timestamp, **extra}
    return _make
