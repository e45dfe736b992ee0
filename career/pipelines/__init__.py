"""
Career Pipelines.

Business logic orchestration functions.
"""

from career.pipelines.progress import *
