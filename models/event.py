# -*- coding: utf-8 -*-
"""
Event entity models: poster asset, geolocation and the submitted record.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
import mimetypes


@dataclass(frozen=True)
class ImageAsset:
    """
    Binary poster file selected by the user.

    Holds the bytes in memory so the upload phase never touches the disk.
    """

    name: str
    content_type: str
    data: bytes = field(repr=False)

    @classmethod
    def from_path(cls, file_path: Union[str, Path], content_type: Optional[str] = None) -> "ImageAsset":
        """Read a file from disk and guess its media type from the extension."""
        path = Path(file_path)
        if content_type is None:
            content_type = mimetypes.guess_type(str(path))[0] or "application/octet-stream"
        return cls(name=path.name, content_type=content_type, data=path.read_bytes())

    @property
    def size(self) -> int:
        return len(self.data)

    def read(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class GeoLocation:
    """Coordinates attached to an event (kept as the backend's string format)."""

    latitude: str
    longitude: str


@dataclass(frozen=True)
class SubmissionRecord:
    """
    Event record sent to the create endpoint.

    Built once from the accumulated form values after the poster upload
    succeeded; `image` is the public URL of the uploaded poster.
    """

    fields: Mapping[str, Any]
    image: str
    latitude: str
    longitude: str
    category_id: int
    user_id: Optional[str]

    @classmethod
    def compose(
        cls,
        form_values: Mapping[str, Any],
        image_url: str,
        location: GeoLocation,
        category_id: int,
        user_id: Optional[str],
    ) -> "SubmissionRecord":
        """Compose a record from wizard values plus the computed fields."""
        fields = {
            key: value for key, value in form_values.items()
            if key != "image" and value is not None and not isinstance(value, ImageAsset)
        }
        return cls(
            fields=fields,
            image=image_url,
            latitude=location.latitude,
            longitude=location.longitude,
            category_id=category_id,
            user_id=user_id,
        )

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the create endpoint."""
        payload = dict(self.fields)
        payload.update({
            "image": self.image,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "categoryId": self.category_id,
            "userId": self.user_id,
        })
        return payload
