# -*- coding: utf-8 -*-
"""
Shared fixtures for the event wizard tests.
"""
import os
import sys
import threading
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Widgets are built without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from models.event import ImageAsset
from services.exceptions import ApiException, NetworkException
from services.translation_manager import set_language


PRESIGNED_URL = "https://bucket.example.com/uploads/poster.png?X-Amz-Signature=abc&X-Amz-Expires=300"


class FakeApiClient:
    """
    In-memory stand-in for EventApiClient.

    Counts calls per endpoint; `fail` maps an endpoint name to the
    exception it raises. `presign_gate` (threading.Event) blocks presign
    until set.
    """

    def __init__(self, presign_response=None, fail=None, presign_gate=None):
        self.presign_response = presign_response or {"url": PRESIGNED_URL}
        self.fail = fail or {}
        self.presign_gate = presign_gate
        self.presign_calls = []
        self.upload_calls = []
        self.create_calls = []

    def presign(self, filename, file_type):
        self.presign_calls.append((filename, file_type))
        if self.presign_gate is not None:
            self.presign_gate.wait(timeout=5)
        if "presign" in self.fail:
            raise self.fail["presign"]
        return self.presign_response

    def upload_file(self, url, data, content_type, method="PUT"):
        self.upload_calls.append((url, data, content_type, method))
        if "upload" in self.fail:
            raise self.fail["upload"]
        return 200

    def create_event(self, event_data):
        self.create_calls.append(event_data)
        if "create" in self.fail:
            raise self.fail["create"]
        return {"id": 42}


@pytest.fixture(autouse=True)
def french_messages():
    """Run every test with the default French messages."""
    set_language("fr")
    yield
    set_language("fr")


@pytest.fixture
def poster():
    """A small PNG poster."""
    return ImageAsset(name="poster.png", content_type="image/png", data=b"\x89PNG\r\n\x1a\nfake")


@pytest.fixture
def fake_api():
    return FakeApiClient()


@pytest.fixture
def api_factory():
    """Build a FakeApiClient with failures or a presign gate."""
    return FakeApiClient


@pytest.fixture
def concert_steps(poster):
    """Valid candidate values for each of the five steps."""
    return [
        {"name": "Concert", "address": "1 rue X", "zipCode": "75001", "city": "Paris"},
        {"startingDate": "2024-06-01"},
        {"image": poster},
        {"price": "12,50"},
        {"description": "Live"},
    ]


@pytest.fixture
def api_error():
    def _make(status_code=500, response_data=None):
        return ApiException("Server error", status_code=status_code, response_data=response_data)
    return _make


@pytest.fixture
def network_error():
    def _make(message="Connection refused"):
        return NetworkException(message, original_error=ConnectionError(message))
    return _make


@pytest.fixture
def presign_gate():
    gate = threading.Event()
    yield gate
    gate.set()
