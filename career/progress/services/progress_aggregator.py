"""
Overall progress aggregation.

Reduces per-module progress records into a single summary.
"""

import logging
import math
from typing import Optional, List, Dict, Any

logger = logging.getLogger(__name__)


def progress_value(record: Dict[str, Any]) -> float:
    """Progress of a record, with a missing value counted as 0."""
    return record.get("progress") or 0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


class ProgressAggregator:
    """
    Computes the overall progress summary for a user.
    """

    def calculate_overall_progress(
        self,
        progress_records: Optional[List[Dict[str, Any]]]
    ) -> Dict[str, Any]:
        """
        Aggregate progress across all modules.

        Args:
            progress_records: Progress records, one per module

        Returns:
            dict with keys:
                - overallProgress: int (same value as averageProgress)
                - moduleCount: int
                - completedModules: int (progress >= 100)
                - averageProgress: int (rounded mean)
                - moduleProgress: list (only when there are records)
        """
        if not progress_records:
            return {
                "overallProgress": 0,
                "moduleCount": 0,
                "completedModules": 0,
                "averageProgress": 0
            }

        module_count = len(progress_records)
        total_progress = sum(progress_value(r) for r in progress_records)
        average_progress = round_half_up(total_progress / module_count)
        completed_modules = sum(1 for r in progress_records if progress_value(r) >= 100)

        logger.debug(
            f"Aggregated {module_count} modules: average {average_progress}, "
            f"{completed_modules} completed"
        )

        return {
            "overallProgress": average_progress,
            "moduleCount": module_count,
            "completedModules": completed_modules,
            "averageProgress": average_progress,
            "moduleProgress": [
                {
                    "module": r.get("module"),
                    "moduleName": r.get("moduleName"),
                    "progress": progress_value(r)
                }
                for r in progress_records
            ]
        }
