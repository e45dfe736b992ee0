"""
Insight generation engine.

Evaluates an ordered table of rules over progress, activity and stats
and produces advisory messages.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, List, Dict, Any, Callable, Sequence

from common.utils.timestamps import window_start, is_within_window
from career.config import settings
from career.progress.services.progress_aggregator import progress_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsightContext:
    """Values the rules are evaluated against, computed once per call."""
    low_progress_modules: List[Dict[str, Any]]
    recent_activity_count: int
    stats: Dict[str, Any]
    low_progress_threshold: int
    low_activity_threshold: int
    lookback_days: int

    def stat(self, name: str) -> int:
        return self.stats.get(name) or 0


@dataclass(frozen=True)
class InsightRule:
    """A trigger: when `condition` holds, `template` builds the message."""
    trigger_id: str
    insight_type: str
    condition: Callable[[InsightContext], bool]
    template: Callable[[InsightContext], str]


def _low_progress_message(ctx: InsightContext) -> str:
    names = ", ".join(str(m.get("moduleName") or "") for m in ctx.low_progress_modules)
    return (
        f"You have {len(ctx.low_progress_modules)} module(s) with less than "
        f"{ctx.low_progress_threshold}% progress. Consider focusing on: {names}"
    )


DEFAULT_RULES: Sequence[InsightRule] = (
    InsightRule(
        trigger_id="low-progress",
        insight_type="warning",
        condition=lambda ctx: len(ctx.low_progress_modules) > 0,
        template=_low_progress_message,
    ),
    # The next three are mutually exclusive; exactly one fires.
    InsightRule(
        trigger_id="no-recent-activity",
        insight_type="info",
        condition=lambda ctx: ctx.recent_activity_count == 0,
        template=lambda ctx: (
            f"No activity in the last {ctx.lookback_days} days. "
            "Start engaging with the platform to track your career progress!"
        ),
    ),
    InsightRule(
        trigger_id="low-recent-activity",
        insight_type="info",
        condition=lambda ctx: 0 < ctx.recent_activity_count < ctx.low_activity_threshold,
        template=lambda ctx: (
            "Low activity this week. Consider uploading a resume, "
            "applying to jobs, or completing an assessment."
        ),
    ),
    InsightRule(
        trigger_id="active-week",
        insight_type="success",
        condition=lambda ctx: ctx.recent_activity_count >= ctx.low_activity_threshold,
        template=lambda ctx: (
            f"Great activity! You've completed {ctx.recent_activity_count} activities "
            f"in the last {ctx.lookback_days} days. Keep it up!"
        ),
    ),
    InsightRule(
        trigger_id="no-resumes",
        insight_type="warning",
        condition=lambda ctx: ctx.stat("resumes") == 0,
        template=lambda ctx: (
            "Upload your resume to get started with resume optimization and ATS scoring."
        ),
    ),
    InsightRule(
        trigger_id="no-job-applications",
        insight_type="info",
        condition=lambda ctx: ctx.stat("jobApplications") == 0,
        template=lambda ctx: (
            "Start tracking your job applications to manage your job search effectively."
        ),
    ),
    InsightRule(
        trigger_id="no-contacts",
        insight_type="info",
        condition=lambda ctx: ctx.stat("contacts") == 0,
        template=lambda ctx: (
            "Build your professional network by adding contacts and tracking opportunities."
        ),
    ),
)


class InsightEngine:
    """
    Generates rule-based insights from a user's progress and activity.
    """

    def __init__(
        self,
        rules: Optional[Sequence[InsightRule]] = None,
        lookback_days: Optional[int] = None,
        low_progress_threshold: Optional[int] = None,
        low_activity_threshold: Optional[int] = None
    ):
        """
        Initialize InsightEngine.

        Args:
            rules: Ordered rule table (defaults to DEFAULT_RULES)
            lookback_days: Activity window in days (default from settings)
            low_progress_threshold: Modules below this progress are flagged
            low_activity_threshold: Weekly activity count below this is "low"
        """
        self._rules = tuple(rules) if rules is not None else tuple(DEFAULT_RULES)
        self._lookback_days = (
            lookback_days if lookback_days is not None else settings.INSIGHT_LOOKBACK_DAYS
        )
        self._low_progress_threshold = (
            low_progress_threshold if low_progress_threshold is not None
            else settings.LOW_PROGRESS_THRESHOLD
        )
        self._low_activity_threshold = (
            low_activity_threshold if low_activity_threshold is not None
            else settings.LOW_ACTIVITY_THRESHOLD
        )

    @property
    def rules(self) -> Sequence[InsightRule]:
        return self._rules

    def generate_insights(
        self,
        progress_records: Optional[List[Dict[str, Any]]],
        activities: Optional[List[Dict[str, Any]]],
        stats: Optional[Dict[str, Any]],
        now: datetime
    ) -> List[Dict[str, str]]:
        """
        Evaluate every rule in order and collect the messages that apply.

        Args:
            progress_records: Progress records, one per module
            activities: Activity records
            stats: User statistics (missing fields count as 0)
            now: Moment of evaluation

        Returns:
            List of {"type", "message"} dicts in rule order
        """
        ctx = self._build_context(progress_records or [], activities or [], stats or {}, now)

        insights = []
        for rule in self._rules:
            if rule.condition(ctx):
                insights.append({
                    "type": rule.insight_type,
                    "message": rule.template(ctx)
                })

        logger.debug(
            f"Generated {len(insights)} insights "
            f"({ctx.recent_activity_count} activities in last {self._lookback_days} days)"
        )
        return insights

    def _build_context(
        self,
        progress_records: List[Dict[str, Any]],
        activities: List[Dict[str, Any]],
        stats: Dict[str, Any],
        now: datetime
    ) -> InsightContext:
        """Compute the per-call values the rules need."""
        start = window_start(now, self._lookback_days)

        low_progress_modules = [
            r for r in progress_records
            if progress_value(r) < self._low_progress_threshold
        ]
        recent_activity_count = sum(
            1 for a in activities if is_within_window(a.get("timestamp"), start)
        )

        return InsightContext(
            low_progress_modules=low_progress_modules,
            recent_activity_count=recent_activity_count,
            stats=stats,
            low_progress_threshold=self._low_progress_threshold,
            low_activity_threshold=self._low_activity_threshold,
            lookback_days=self._lookback_days,
        )
