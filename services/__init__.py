# -*- coding: utf-8 -*-
"""
Event Form Wizard Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "EventApiClient",
    "SubmissionPipeline",
    "DefaultGeoLocationProvider",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "EventApiClient":
        from .api_client import EventApiClient
        return EventApiClient
    elif name == "SubmissionPipeline":
        from .submission_service import SubmissionPipeline
        return SubmissionPipeline
    elif name == "DefaultGeoLocationProvider":
        from .geo_service import DefaultGeoLocationProvider
        return DefaultGeoLocationProvider
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
