# -*- coding: utf-8 -*-
"""
Event API Client
================

HTTP access to the three backend calls used by the event wizard:
presign (upload target), upload (poster bytes) and create (event record).
"""

import json
import requests
import urllib3
from typing import Optional, Dict, Any
from dataclasses import dataclass
from utils.logger import get_logger
from services.exceptions import ApiException, NetworkException

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    API connection settings.

    Unset fields are read from Config (which reads from .env).

    Example .env:
        API_BASE_URL=http://localhost:3000/api
        API_TIMEOUT=30
    """
    base_url: str = None  # Will be loaded from Config
    timeout: int = None
    verify_ssl: bool = None
    presign_path: str = None
    create_event_path: str = None

    def __post_init__(self):
        """Load from Config if not provided."""
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL
        if self.presign_path is None:
            self.presign_path = Config.PRESIGN_PATH
        if self.create_event_path is None:
            self.create_event_path = Config.CREATE_EVENT_PATH


class EventApiClient:
    """
    Backend client for event creation.

    Usage:
        client = EventApiClient(ApiConfig(base_url="http://localhost:3000/api"))
        target = client.presign("poster.png", "image/png")
        client.upload_file(target["url"], data, "image/png")
        client.create_event(payload)
    """

    def __init__(self, config: Optional[ApiConfig] = None):
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')

        if not self.config.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def _send(
        self,
        method: str,
        url: str,
        label: str,
        **kwargs
    ) -> requests.Response:
        """
        Send a request, mapping failures to ApiException / NetworkException.

        Args:
            method: HTTP method
            url: Absolute URL
            label: Short name used in log lines (endpoint path or "upload")

        Returns:
            The successful response
        """
        try:
            response = requests.request(
                method=method,
                url=url,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                **kwargs
            )
            response.raise_for_status()
            logger.info(f"[API RES] {response.status_code} {label}")
            return response

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except (ValueError, AttributeError):
                pass
            response_text = ''
            try:
                response_text = e.response.text[:500] if e.response is not None else ''
            except AttributeError:
                pass
            logger.error(f"[API ERR] {status_code} {method} {label} | Response: {response_data or response_text}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data if isinstance(response_data, dict) else {"errors": response_data},
                context=label
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {label} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                context=label
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {label} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                context=label
            )

    @staticmethod
    def _json(response: requests.Response, label: str) -> Dict[str, Any]:
        """Parse a JSON object body; anything else is an API error."""
        try:
            result = response.json() if response.text else {}
        except ValueError:
            logger.error(f"[API ERR] {label}: response is not JSON")
            raise ApiException(
                message="Invalid JSON response",
                status_code=response.status_code,
                context=label
            )
        if not isinstance(result, dict):
            raise ApiException(
                message="Unexpected JSON response",
                status_code=response.status_code,
                response_data={"body": result},
                context=label
            )
        return result

    # ==================== Event creation ====================

    def presign(self, filename: str, file_type: str) -> Dict[str, Any]:
        """
        Request a temporary upload URL for a poster.

        Endpoint: GET {presign_path}?file=<filename>&fileType=<type>

        Returns:
            Presign response, expected to carry "url"
        """
        endpoint = self.config.presign_path
        logger.info(f"[API REQ] GET {endpoint} File: {filename} ({file_type})")
        response = self._send(
            "GET",
            f"{self.base_url}{endpoint}",
            endpoint,
            params={"file": filename, "fileType": file_type},
            headers={"Accept": "application/json"}
        )
        return self._json(response, endpoint)

    def upload_file(
        self,
        url: str,
        data: bytes,
        content_type: str,
        method: str = "PUT"
    ) -> int:
        """
        Transfer raw bytes to a presigned URL.

        Returns:
            HTTP status code of the accepted upload
        """
        logger.info(f"[API REQ] {method} upload ({len(data)} bytes, {content_type})")
        response = self._send(
            method,
            url,
            "upload",
            data=data,
            headers={"Content-Type": content_type}
        )
        return response.status_code

    def create_event(self, event_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create an event record.

        Endpoint: POST {create_event_path}
        """
        endpoint = self.config.create_event_path
        logger.info(f"[API REQ] POST {endpoint}")
        try:
            logger.debug(f"[API REQ] Body: {json.dumps(event_data, indent=2, ensure_ascii=False, default=str)}")
        except (TypeError, ValueError):
            logger.debug(f"[API REQ] Body: {event_data}")

        response = self._send(
            "POST",
            f"{self.base_url}{endpoint}",
            endpoint,
            json=event_data,
            headers={"Content-Type": "application/json", "Accept": "application/json"}
        )
        if not response.text:
            return {}
        try:
            return response.json()
        except ValueError:
            return {"raw": response.text[:500]}


# ==================== Singleton Instance ====================

_api_client_instance: Optional[EventApiClient] = None


def get_api_client(config: Optional[ApiConfig] = None) -> EventApiClient:
    """
    Get the shared EventApiClient (Singleton).

    Args:
        config: API settings (only used on first call)
    """
    global _api_client_instance

    if _api_client_instance is None:
        _api_client_instance = EventApiClient(config)

    return _api_client_instance


def reset_api_client():
    """Reset the shared API client (for tests)."""
    global _api_client_instance
    _api_client_instance = None
