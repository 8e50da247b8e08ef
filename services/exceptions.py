# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised for API errors (non-OK response)."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class ValidationError(Exception):
    """Field-scoped validation failure of one wizard step."""

    def __init__(self, message: str, errors: dict = None, step_index: int = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}
        self.step_index = step_index

    @property
    def fields(self) -> list:
        return list(self.errors.keys())


# ==================== Submission ====================

class SubmissionError(Exception):
    """
    Terminal failure of one submission attempt.

    `phase` is one of "presign", "upload", "create". The wizard stays on
    the last step and the user may retry the whole submission.
    """

    phase: str = None

    def __init__(self, message: str, phase: str = None, status_code: int = None,
                 response_data: dict = None, original_error: Exception = None):
        super().__init__(message)
        self.message = message
        if phase is not None:
            self.phase = phase
        self.status_code = status_code
        self.response_data = response_data or {}
        self.original_error = original_error

    def __str__(self):
        prefix = f"{self.phase}: " if self.phase else ""
        if self.status_code:
            return f"{prefix}[{self.status_code}] {self.message}"
        return f"{prefix}{self.message}"


class PresignError(SubmissionError):
    """Upload target could not be obtained."""
    phase = "presign"


class UploadError(SubmissionError):
    """Asset transfer to the presigned URL was not accepted."""
    phase = "upload"


class CreateError(SubmissionError):
    """Event record was rejected by the backend."""
    phase = "create"


class TransportError(SubmissionError):
    """Network-level failure (connection refused, timeout) during a phase."""


class SubmissionCancelled(SubmissionError):
    """Submission stopped at a phase boundary by its cancellation token."""
