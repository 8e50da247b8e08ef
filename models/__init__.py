# -*- coding: utf-8 -*-
"""
Event Form Data Models
"""

from .event import ImageAsset, GeoLocation, SubmissionRecord

__all__ = [
    "ImageAsset",
    "GeoLocation",
    "SubmissionRecord",
]
