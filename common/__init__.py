"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across projects:

- utils: Standard responses, exceptions, label and timestamp helpers
- config: Base settings class
"""

from common.utils import (
    success_response,
    error_response,
    list_response,
    APIException,
    BadRequestException,
    format_activity_label,
)
from common.config import BaseAppSettings

__all__ = [
    # Utils
    "success_response",
    "error_response",
    "list_response",
    "APIException",
    "BadRequestException",
    "format_activity_label",
    # Config
    "BaseAppSettings",
]
