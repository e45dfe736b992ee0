"""
Utilities module - Common helpers for API responses, exceptions, and formatting.
"""

from common.utils.responses import success_response, error_response, list_response
from common.utils.exceptions import APIException, BadRequestException
from common.utils.text import format_activity_label
from common.utils.timestamps import (
    to_utc_datetime,
    to_iso_string,
    utc_date_string,
    window_start,
    is_within_window,
)

__all__ = [
    "success_response",
    "error_response",
    "list_response",
    "APIException",
    "BadRequestException",
    "format_activity_label",
    "to_utc_datetime",
    "to_iso_string",
    "utc_date_string",
    "window_start",
    "is_within_window",
]
