"""
Error Classifier
Maps Gemini invocation failures to stable categories and user-facing messages
"""

from typing import Optional

from .constants import (
    ACCESS_DENIED_MARKERS, ACCESS_DENIED_STATUS_CODES, ACCESS_DENIED_MESSAGE,
    GENERIC_FAILURE_MESSAGE, NO_IMAGE_MESSAGE,
)
from .models import ErrorCategory


def get_status_code(exc: BaseException) -> Optional[int]:
    """
    Best-effort HTTP status of an invocation error.

    google-genai's APIError carries it on `code` (with the gRPC-style name on `status`);
    other transports use `status_code` or an integer `status`.
    """
    for attr in ('code', 'status_code', 'status'):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def get_error_text(exc: BaseException) -> str:
    """Message text of an error, including a string `status` such as PERMISSION_DENIED"""
    text = str(exc) if exc is not None else ''
    status = getattr(exc, 'status', None)
    if isinstance(status, str) and status not in text:
        text = f"{status} {text}".strip()
    return text


def classify_error(exc: BaseException) -> ErrorCategory:
    """
    Classify an invocation-level error.

    The matching stays string-based because google-genai exceptions differ across
    SDK versions. Quota errors (429) are deliberately not treated as access denial.

    Args:
        exc: Exception raised by `generate_content`

    Returns:
        ErrorCategory: ACCESS_DENIED, TRANSPORT, or UNKNOWN when the error carries
        neither a status nor any message
    """
    status_code = get_status_code(exc)
    text = get_error_text(exc)

    if status_code in ACCESS_DENIED_STATUS_CODES:
        return ErrorCategory.ACCESS_DENIED
    if any(marker in text for marker in ACCESS_DENIED_MARKERS):
        return ErrorCategory.ACCESS_DENIED
    if status_code is None and not text:
        return ErrorCategory.UNKNOWN
    return ErrorCategory.TRANSPORT


def user_message(category: ErrorCategory, detail: Optional[str] = None) -> str:
    """
    Final message shown to the user, applied once after any fallback is exhausted

    Args:
        category: Classified failure category
        detail: Model text (MODEL_REFUSED) or the underlying error message

    Returns:
        str: Non-empty message
    """
    if category == ErrorCategory.ACCESS_DENIED:
        return ACCESS_DENIED_MESSAGE
    if category == ErrorCategory.NO_IMAGE_PRODUCED:
        return NO_IMAGE_MESSAGE
    if category == ErrorCategory.MODEL_REFUSED and detail:
        return detail
    if detail and detail.strip():
        return detail
    return GENERIC_FAILURE_MESSAGE
