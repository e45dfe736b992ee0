"""
Visual report data builder.

Shapes progress records, activities and user stats into chart-ready
structures for the dashboard.
"""

import logging
from datetime import datetime
from typing import Optional, List, Dict, Any

from common.utils.text import format_activity_label
from common.utils.timestamps import window_start, is_within_window, utc_date_string
from career.config import settings
from career.progress.services.insight_engine import InsightEngine
from career.progress.services.progress_aggregator import progress_value

logger = logging.getLogger(__name__)

STAT_FIELDS = (
    "resumes",
    "jobApplications",
    "contacts",
    "assessments",
    "badges",
    "documents",
)


def default_stats(user_stats: Optional[Dict[str, Any]]) -> Dict[str, int]:
    """Copy the known stat counts, with missing values as 0."""
    user_stats = user_stats or {}
    return {field: user_stats.get(field) or 0 for field in STAT_FIELDS}


class ReportBuilder:
    """
    Builds visualization data for the progress dashboard.
    """

    def __init__(
        self,
        insight_engine: Optional[InsightEngine] = None,
        timeline_days: Optional[int] = None,
        recent_progress_days: Optional[int] = None
    ):
        """
        Initialize ReportBuilder.

        Args:
            insight_engine: For the insights section (default engine if omitted)
            timeline_days: Activity timeline window (default from settings)
            recent_progress_days: Recent progress window (default from settings)
        """
        self._insight_engine = insight_engine or InsightEngine()
        self._timeline_days = (
            timeline_days if timeline_days is not None else settings.ACTIVITY_TIMELINE_DAYS
        )
        self._recent_progress_days = (
            recent_progress_days if recent_progress_days is not None
            else settings.RECENT_PROGRESS_DAYS
        )

    def generate_visual_report_data(
        self,
        progress_records: Optional[List[Dict[str, Any]]],
        activities: Optional[List[Dict[str, Any]]],
        user_stats: Optional[Dict[str, Any]],
        now: datetime
    ) -> Dict[str, Any]:
        """
        Prepare data for charts and visualizations.

        Args:
            progress_records: Progress records, one per module
            activities: Activity records
            user_stats: Counts of resumes, applications, contacts, etc.
            now: Moment of report generation, shared by every window

        Returns:
            dict with keys:
                - progressByModule: list (bar chart)
                - activityTimeline: list (line chart, last 30 days by date)
                - activityDistribution: list (pie chart, all activities by type)
                - stats: dict (counts, defaulted to 0)
                - recentProgressUpdates: list (modules updated in last 7 days)
                - insights: list (advisory messages)
        """
        progress_records = progress_records or []
        activities = activities or []
        stats = default_stats(user_stats)

        report = {
            "progressByModule": self._progress_by_module(progress_records),
            "activityTimeline": self._activity_timeline(activities, now),
            "activityDistribution": self._activity_distribution(activities),
            "stats": stats,
            "recentProgressUpdates": self._recent_progress_updates(progress_records, now),
            "insights": self._insight_engine.generate_insights(
                progress_records, activities, stats, now
            )
        }

        logger.debug(
            f"Built visual report: {len(progress_records)} modules, "
            f"{len(activities)} activities, {len(report['activityTimeline'])} active days"
        )
        return report

    def _progress_by_module(self, progress_records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [
            {"module": r.get("moduleName"), "progress": progress_value(r)}
            for r in progress_records
        ]

    def _activity_timeline(
        self,
        activities: List[Dict[str, Any]],
        now: datetime
    ) -> List[Dict[str, Any]]:
        """Count activities per UTC date within the timeline window."""
        start = window_start(now, self._timeline_days)

        counts: Dict[str, int] = {}
        for activity in activities:
            timestamp = activity.get("timestamp")
            if not is_within_window(timestamp, start):
                continue
            date = utc_date_string(timestamp)
            counts[date] = counts.get(date, 0) + 1

        return [{"date": date, "count": counts[date]} for date in sorted(counts)]

    def _activity_distribution(self, activities: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Count all activities per type, in first-seen order."""
        counts: Dict[str, int] = {}
        for activity in activities:
            activity_type = str(activity.get("activityType") or "")
            counts[activity_type] = counts.get(activity_type, 0) + 1

        return [
            {"type": format_activity_label(activity_type), "count": count}
            for activity_type, count in counts.items()
        ]

    def _recent_progress_updates(
        self,
        progress_records: List[Dict[str, Any]],
        now: datetime
    ) -> List[Dict[str, Any]]:
        """Modules whose progress changed within the recent window."""
        start = window_start(now, self._recent_progress_days)

        return [
            {
                "module": r.get("moduleName"),
                "date": utc_date_string(r["lastUpdated"]),
                "progress": progress_value(r)
            }
            for r in progress_records
            if is_within_window(r.get("lastUpdated"), start)
        ]
