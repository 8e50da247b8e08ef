# -*- coding: utf-8 -*-
"""
Geolocation providers for created events.

The wizard does not collect coordinates yet; the default provider returns
the configured placeholder pair. Pass another provider to the submission
pipeline to attach real coordinates.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from models.event import GeoLocation


class GeoLocationProvider(ABC):
    """Resolves the coordinates of an event from its form values."""

    @abstractmethod
    def locate(self, form_values: Mapping[str, Any]) -> GeoLocation:
        pass


class DefaultGeoLocationProvider(GeoLocationProvider):
    """Fixed coordinates, from Config unless given explicitly."""

    def __init__(self, latitude: Optional[str] = None, longitude: Optional[str] = None):
        from app.config import Config
        self.location = GeoLocation(
            latitude=latitude if latitude is not None else Config.DEFAULT_LATITUDE,
            longitude=longitude if longitude is not None else Config.DEFAULT_LONGITUDE,
        )

    def locate(self, form_values: Mapping[str, Any]) -> GeoLocation:
        return self.location
