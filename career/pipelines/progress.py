"""
Progress pipeline functions.

Stateless orchestration logic the request layer calls for the progress
overview, the visual report, the activity feed and progress updates.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

from common.utils import (
    success_response,
    list_response,
    BadRequestException,
    to_utc_datetime,
    to_iso_string,
)
from career.config import settings
from career.progress.services.progress_aggregator import ProgressAggregator, progress_value
from career.progress.services.report_builder import ReportBuilder

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_MODULES",
    "default_modules",
    "clamp_progress",
    "get_progress_overview_pipeline",
    "get_visual_report_pipeline",
    "get_activity_feed_pipeline",
    "apply_progress_update_pipeline",
]

DEFAULT_MODULES = (
    ("resume", "Resume Optimization"),
    ("jobs", "Job Applications"),
    ("network", "Networking"),
    ("profile", "Profile Optimization"),
    ("assessment", "Career Assessment"),
)

RESPONSE_FORMATS = ("object", "array")


def default_modules() -> List[Dict[str, Any]]:
    """Placeholder modules shown before a user has any progress."""
    return [
        {"module": module, "moduleName": name, "progress": 0}
        for module, name in DEFAULT_MODULES
    ]


def clamp_progress(value: Optional[float]) -> float:
    """Clamp a progress value into [0, 100]; None becomes 0."""
    if value is None:
        return 0
    return min(max(value, 0), 100)


def get_progress_overview_pipeline(
    aggregator: ProgressAggregator,
    progress_records: Optional[List[Dict[str, Any]]],
    response_format: str = "object",
) -> Any:
    """
    Build the progress overview for the dashboard or resources page.

    Args:
        aggregator: For the overall summary
        progress_records: User's progress records
        response_format: "object" (overall + modules) or "array" (modules only)

    Returns:
        Module list for "array", dict with overall and modules for "object"

    Raises:
        BadRequestException: Unknown response format
    """
    if response_format not in RESPONSE_FORMATS:
        raise BadRequestException(
            message=f"Unknown format '{response_format}'",
            code="INVALID_FORMAT",
            details={"allowed": list(RESPONSE_FORMATS)}
        )

    progress_records = progress_records or []

    if progress_records:
        modules = [_serialize_module(r) for r in progress_records]
    else:
        logger.info("No progress records, returning default modules")
        modules = default_modules()

    if response_format == "array":
        return modules

    overall = aggregator.calculate_overall_progress(progress_records)

    return {
        "overall": {
            "overallProgress": overall["overallProgress"],
            "completedModules": overall["completedModules"],
            "moduleCount": overall["moduleCount"],
            "averageProgress": overall["averageProgress"]
        },
        "modules": modules
    }


def get_visual_report_pipeline(
    report_builder: ReportBuilder,
    progress_records: Optional[List[Dict[str, Any]]],
    activities: Optional[List[Dict[str, Any]]],
    user_stats: Optional[Dict[str, Any]],
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Build the visual report, reading the clock once for every window.

    Args:
        report_builder: For the report data
        progress_records: User's progress records
        activities: User's activity records
        user_stats: User's stat counts
        now: Report time (current UTC time if omitted)

    Returns:
        success_response wrapping the report data
    """
    if now is None:
        now = datetime.now(timezone.utc)

    report = report_builder.generate_visual_report_data(
        progress_records, activities, user_stats, now
    )
    return success_response(report)


def get_activity_feed_pipeline(
    activities: Optional[List[Dict[str, Any]]],
    activity_type: Optional[str] = None,
    limit: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Most recent activities, optionally of one type.

    Args:
        activities: User's activity records
        activity_type: Only include this type when given
        limit: Maximum entries (default ACTIVITY_FEED_LIMIT)

    Returns:
        list_response with activities newest first

    Raises:
        BadRequestException: limit is below 1
    """
    if limit is None:
        limit = settings.ACTIVITY_FEED_LIMIT

    if limit < 1:
        raise BadRequestException(
            message="limit must be at least 1",
            code="INVALID_LIMIT"
        )

    feed = [
        a for a in (activities or [])
        if activity_type is None or a.get("activityType") == activity_type
    ]
    feed.sort(key=_activity_sort_key, reverse=True)

    return list_response([_serialize_activity(a) for a in feed[:limit]])


def apply_progress_update_pipeline(
    existing_record: Optional[Dict[str, Any]],
    update: Dict[str, Any],
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Merge a progress update into a module's record.

    Nothing is stored here; the caller saves the returned record and
    appends the returned activity to the user's timeline.

    Args:
        existing_record: Stored record for the module, or None for a new one
        update: Request body with module, moduleName and optional
            progress, completedTask and milestone
        now: Update time (current UTC time if omitted)

    Returns:
        dict with keys:
            - record: dict (merged progress record, input left untouched)
            - activity: dict ("other" activity describing the update)

    Raises:
        BadRequestException: module or moduleName is missing
    """
    module = update.get("module")
    module_name = update.get("moduleName")

    if not module or not module_name:
        raise BadRequestException(
            message="Module and moduleName are required",
            code="MISSING_MODULE"
        )

    if now is None:
        now = datetime.now(timezone.utc)

    if existing_record is None:
        record = {
            "module": module,
            "moduleName": module_name,
            "progress": clamp_progress(update.get("progress")),
            "completedTasks": [],
            "milestones": [],
        }
    else:
        record = dict(existing_record)
        record["moduleName"] = module_name
        record["completedTasks"] = list(existing_record.get("completedTasks") or [])
        record["milestones"] = list(existing_record.get("milestones") or [])
        if update.get("progress") is not None:
            record["progress"] = clamp_progress(update["progress"])

    # Generated ids are epoch milliseconds
    generated_id = str(int(now.timestamp() * 1000))

    completed_task = update.get("completedTask")
    if completed_task:
        record["completedTasks"].append({
            "taskId": completed_task.get("taskId") or generated_id,
            "taskName": completed_task.get("taskName"),
            "completedAt": now,
        })

    milestone = update.get("milestone")
    if milestone:
        record["milestones"].append({
            "milestoneId": milestone.get("milestoneId") or generated_id,
            "milestoneName": milestone.get("milestoneName"),
            "achievedAt": now,
        })

    record["lastUpdated"] = now
    progress = progress_value(record)

    activity = {
        "activityType": "other",
        "activityName": f"Progress updated: {module_name}",
        "description": f"Progress: {progress:g}%",
        "metadata": {"module": module, "progress": progress},
        "timestamp": now,
    }

    logger.info(f"Progress for module {module} set to {progress:g}%")
    return {"record": record, "activity": activity}


def _activity_sort_key(activity: Dict[str, Any]) -> datetime:
    """Timestamp for ordering; records without one sort last."""
    moment = to_utc_datetime(activity.get("timestamp"))
    return moment or datetime.min.replace(tzinfo=timezone.utc)


def _serialize_module(record: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "module": record.get("module"),
        "moduleName": record.get("moduleName"),
        "progress": progress_value(record),
        "lastUpdated": to_iso_string(record.get("lastUpdated"))
    }


def _serialize_activity(activity: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "activityType": activity.get("activityType"),
        "activityName": activity.get("activityName"),
        "description": activity.get("description"),
        "timestamp": to_iso_string(activity.get("timestamp"))
    }
