# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.translation_manager import tr
from services.exceptions import (
    ApiException, NetworkException, ValidationError, SubmissionError,
    TransportError, SubmissionCancelled
)
from utils.logger import get_logger

logger = get_logger(__name__)

_PHASE_MESSAGES = {
    "presign": "error.submission.presign",
    "upload": "error.submission.upload",
    "create": "error.submission.create",
}


def map_submission_error(error: SubmissionError) -> str:
    """Map a failed submission phase to a user-friendly message.

    Technical details (status, backend error body) are logged only.
    """
    if isinstance(error, SubmissionCancelled):
        return tr("error.submission.cancelled")

    if isinstance(error, TransportError):
        original = error.original_error
        if isinstance(original, NetworkException):
            return map_network_error(original)
        return tr("error.api.connection")

    details = _extract_validation_details(error.response_data)
    if details:
        logger.warning(f"Submission error ({error.phase}, {error.status_code}): {details}")
    else:
        logger.warning(f"Submission error ({error.phase}): {error}")

    return tr(_PHASE_MESSAGES.get(error.phase, "error.api.unknown"))


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    msg = str(error.original_error) if error.original_error else ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message.

    Technical details are logged only - never shown to the user.
    """
    if isinstance(error, SubmissionError):
        return map_submission_error(error)

    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        logger.warning(f"API error ({error.status_code}): {error}")
        return tr("error.api.connection")

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, ValidationError):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return "\n".join(error.errors.values()) or tr("validation.check_data")

    # Log unexpected errors
    logger.warning(f"Unexpected error: {error}")
    return tr("error.api.unknown")


def _extract_validation_details(response_data: dict) -> str:
    """Extract error details from an API error body."""
    if not response_data:
        return ""

    errors = response_data.get("errors", {})
    if isinstance(errors, dict) and errors:
        lines = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                for msg in messages:
                    lines.append(f"• {field}: {msg}")
            else:
                lines.append(f"• {field}: {messages}")
        return "\n".join(lines)

    if isinstance(errors, list) and errors:
        return "\n".join(f"• {e}" for e in errors)

    for key in ("message", "error", "title"):
        value = response_data.get(key)
        if value:
            return str(value)

    return ""
