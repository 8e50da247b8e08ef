# -*- coding: utf-8 -*-
"""
Submission Pipeline - Creates an event from the wizard's values.

Three strictly sequential phases:
1. presign: ask the backend for a temporary upload URL for the poster
2. upload: send the poster bytes to that URL
3. create: submit the event record referencing the uploaded poster

Any failure stops the pipeline and is returned as a typed result; nothing
is retried.
"""

import asyncio
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit, urlunsplit

from app.config import Config
from models.event import ImageAsset, SubmissionRecord
from services.exceptions import (
    ApiException, NetworkException, SubmissionError, PresignError,
    UploadError, CreateError, TransportError, SubmissionCancelled
)
from services.geo_service import GeoLocationProvider, DefaultGeoLocationProvider
from utils.logger import get_logger

logger = get_logger(__name__)


class CancellationToken:
    """Cooperative cancellation flag, honoured between phases."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()


@dataclass(frozen=True)
class UploadTarget:
    """Where and how to send the poster bytes."""
    url: str
    method: str
    content_type: str


@dataclass
class SubmissionResult:
    """Outcome of one submission attempt."""
    success: bool
    record: Optional[SubmissionRecord] = None
    response: Dict[str, Any] = field(default_factory=dict)
    error: Optional[SubmissionError] = None

    @property
    def phase(self) -> Optional[str]:
        """Phase that failed, None on success."""
        return self.error.phase if self.error is not None else None

    @property
    def asset_url(self) -> Optional[str]:
        return self.record.image if self.record is not None else None


def derive_asset_url(upload_url: str) -> str:
    """
    Public URL of an uploaded asset: origin + path of the presigned URL.

    Query string (signature) and fragment are dropped, as are credentials.
    """
    parts = urlsplit(upload_url)
    host = parts.netloc.rsplit("@", 1)[-1]
    return urlunsplit((parts.scheme, host, parts.path, "", ""))


class SubmissionPipeline:
    """
    Orchestrates presign → upload → create for one event.

    Each remote call is a blocking client call run in a worker thread, so
    the caller's event loop suspends once per round trip.
    """

    def __init__(
        self,
        api_client=None,
        geo_provider: Optional[GeoLocationProvider] = None,
        category_id: Optional[int] = None
    ):
        """
        Args:
            api_client: Object exposing presign / upload_file / create_event
                (defaults to the shared EventApiClient)
            geo_provider: Coordinates source for the record
            category_id: Category sent with every event
        """
        if api_client is None:
            from services.api_client import get_api_client
            api_client = get_api_client()
        self.api = api_client
        self.geo_provider = geo_provider or DefaultGeoLocationProvider()
        self.category_id = category_id if category_id is not None else Config.EVENT_CATEGORY_ID

    async def submit(
        self,
        form_values: Mapping[str, Any],
        user_id: Optional[str],
        cancel_token: Optional[CancellationToken] = None
    ) -> SubmissionResult:
        """
        Run the three phases for the accumulated form values.

        Args:
            form_values: Values of every wizard step (read only)
            user_id: Owner of the created event
            cancel_token: Checked before each phase

        Returns:
            SubmissionResult; failures carry the phase-specific error
        """
        values = dict(form_values)
        logger.info(f"Submitting event '{values.get('name', '')}' for user {user_id}")

        try:
            asset = self._get_asset(values)

            self._check_cancelled(cancel_token, "presign")
            target = await self._presign(asset)

            self._check_cancelled(cancel_token, "upload")
            await self._upload(asset, target)

            self._check_cancelled(cancel_token, "create")
            record = SubmissionRecord.compose(
                values,
                image_url=derive_asset_url(target.url),
                location=self.geo_provider.locate(values),
                category_id=self.category_id,
                user_id=user_id,
            )
            response = await self._create(record)

        except SubmissionError as e:
            logger.error(f"Submission failed at {e.phase}: {e}")
            return SubmissionResult(success=False, error=e)

        logger.info(f"Event created, poster at {record.image}")
        return SubmissionResult(success=True, record=record, response=response)

    # =========================================================================
    # Phases
    # =========================================================================

    @staticmethod
    def _get_asset(values: Mapping[str, Any]) -> ImageAsset:
        asset = values.get("image")
        if not isinstance(asset, ImageAsset):
            raise PresignError("No poster file to upload")
        return asset

    @staticmethod
    def _check_cancelled(token: Optional[CancellationToken], phase: str):
        if token is not None and token.is_cancelled:
            logger.warning(f"Submission cancelled before {phase}")
            raise SubmissionCancelled("Submission cancelled", phase=phase)

    async def _presign(self, asset: ImageAsset) -> UploadTarget:
        logger.debug(f"Presign: {asset.name} ({asset.content_type}, {asset.size} bytes)")
        try:
            data = await asyncio.to_thread(self.api.presign, asset.name, asset.content_type)
        except ApiException as e:
            raise PresignError(
                e.message, status_code=e.status_code,
                response_data=e.response_data, original_error=e
            )
        except NetworkException as e:
            raise TransportError(e.message, phase="presign", original_error=e)

        url = data.get("url") if isinstance(data, dict) else None
        if not isinstance(url, str):
            raise PresignError("Presign response has no upload URL", response_data=data if isinstance(data, dict) else {})
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise PresignError(f"Presign response has an unusable upload URL: {url!r}", response_data=data)

        return UploadTarget(
            url=url,
            method=str(data.get("method") or Config.UPLOAD_METHOD).upper(),
            content_type=data.get("contentType") or asset.content_type,
        )

    async def _upload(self, asset: ImageAsset, target: UploadTarget):
        logger.debug(f"Upload: {target.method} {derive_asset_url(target.url)}")
        try:
            await asyncio.to_thread(
                self.api.upload_file, target.url, asset.read(), target.content_type, target.method
            )
        except ApiException as e:
            raise UploadError(
                e.message, status_code=e.status_code,
                response_data=e.response_data, original_error=e
            )
        except NetworkException as e:
            raise TransportError(e.message, phase="upload", original_error=e)

    async def _create(self, record: SubmissionRecord) -> Dict[str, Any]:
        logger.debug(f"Create: category {record.category_id}, image {record.image}")
        try:
            response = await asyncio.to_thread(self.api.create_event, record.to_payload())
        except ApiException as e:
            logger.error(f"Create rejected: {e.response_data}")
            raise CreateError(
                e.message, status_code=e.status_code,
                response_data=e.response_data, original_error=e
            )
        except NetworkException as e:
            raise TransportError(e.message, phase="create", original_error=e)
        return response if isinstance(response, dict) else {"data": response}
