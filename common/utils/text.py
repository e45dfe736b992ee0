"""
Display label formatting.

Example:
    from common.utils import format_activity_label

    format_activity_label("job-application")  # "Job Application"
"""

import re


def format_activity_label(activity_type: str) -> str:
    """
    Turn a hyphenated activity type into a chart label.

    Every "-" becomes a space, then the first character of each
    whitespace-separated word is upper-cased. The rest of each word
    is left as is, so "ATS-check" stays "ATS Check".

    Args:
        activity_type: Raw activity type (e.g. "resume-upload")

    Returns:
        Display label (e.g. "Resume Upload")
    """
    spaced = activity_type.replace("-", " ")
    return re.sub(r"(^|\s)(\S)", lambda m: m.group(1) + m.group(2).upper(), spaced)
