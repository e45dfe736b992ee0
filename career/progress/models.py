"""
Pydantic models for Progress analytics responses.

Describes the shapes returned by the aggregator, report builder and
insight engine. The services themselves return plain dicts; these models
are the documented contract and can serve as FastAPI response models.
"""

from typing import Optional, List, Literal, Any
from pydantic import BaseModel


# =============================================================================
# Overall Progress
# =============================================================================

class ModuleProgress(BaseModel):
    """Progress for a single module."""
    module: Any
    moduleName: Optional[str] = None
    progress: float = 0
    lastUpdated: Optional[str] = None


class OverallProgressSummary(BaseModel):
    """Overall progress across all modules."""
    overallProgress: int
    moduleCount: int
    completedModules: int
    averageProgress: int
    moduleProgress: Optional[List[ModuleProgress]] = None


class OverallStats(BaseModel):
    """Overall block of the progress overview."""
    overallProgress: int
    completedModules: int
    moduleCount: int
    averageProgress: int


class ProgressOverview(BaseModel):
    """Progress overview for the resources page."""
    overall: OverallStats
    modules: List[ModuleProgress]


# =============================================================================
# Visual Report
# =============================================================================

class ModuleChartPoint(BaseModel):
    """Bar chart entry."""
    module: Optional[str] = None
    progress: float = 0


class TimelinePoint(BaseModel):
    """Line chart entry: activities on one UTC date."""
    date: str
    count: int


class DistributionSlice(BaseModel):
    """Pie chart entry: activities of one type."""
    type: str
    count: int


class StatsSummary(BaseModel):
    """User statistics counts."""
    resumes: int = 0
    jobApplications: int = 0
    contacts: int = 0
    assessments: int = 0
    badges: int = 0
    documents: int = 0


class ProgressUpdate(BaseModel):
    """Recent progress update."""
    module: Optional[str] = None
    date: str
    progress: float = 0


class InsightItem(BaseModel):
    """Advisory message."""
    type: Literal["warning", "info", "success"]
    message: str


class VisualReportData(BaseModel):
    """Chart-ready report for the dashboard."""
    progressByModule: List[ModuleChartPoint]
    activityTimeline: List[TimelinePoint]
    activityDistribution: List[DistributionSlice]
    stats: StatsSummary
    recentProgressUpdates: List[ProgressUpdate]
    insights: List[InsightItem]
