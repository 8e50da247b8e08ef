# -*- coding: utf-8 -*-
"""
Tests for the event API client.

Tests cover:
- Request shape of presign / upload / create
- HTTP errors mapped to ApiException
- Connection errors mapped to NetworkException
"""

import json

import pytest
import requests

from services.api_client import ApiConfig, EventApiClient, get_api_client, reset_api_client
from services.exceptions import ApiException, NetworkException


def make_response(status_code=200, body=None, raw=None):
    response = requests.Response()
    response.status_code = status_code
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    response.encoding = "utf-8"
    response.url = "http://api.test"
    return response


@pytest.fixture
def client():
    return EventApiClient(ApiConfig(base_url="http://api.test/api/", timeout=5, verify_ssl=True))


@pytest.fixture
def sent(monkeypatch):
    """Capture requests.request calls and answer with queued responses."""
    calls = []
    responses = []

    def fake_request(**kwargs):
        calls.append(kwargs)
        outcome = responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(requests, "request", fake_request)
    return calls, responses


class TestRequests:
    """Test request shape."""

    def test_presign(self, client, sent):
        calls, responses = sent
        responses.append(make_response(200, {"url": "https://bucket/x.png?sig=1"}))

        result = client.presign("x.png", "image/png")

        assert result == {"url": "https://bucket/x.png?sig=1"}
        assert calls[0]["method"] == "GET"
        assert calls[0]["url"] == "http://api.test/api/presign"
        assert calls[0]["params"] == {"file": "x.png", "fileType": "image/png"}
        assert calls[0]["timeout"] == 5

    def test_upload(self, client, sent):
        calls, responses = sent
        responses.append(make_response(200))

        status = client.upload_file("https://bucket/x.png?sig=1", b"bytes", "image/png")

        assert status == 200
        assert calls[0]["method"] == "PUT"
        assert calls[0]["url"] == "https://bucket/x.png?sig=1"
        assert calls[0]["data"] == b"bytes"
        assert calls[0]["headers"]["Content-Type"] == "image/png"

    def test_create_event(self, client, sent):
        calls, responses = sent
        responses.append(make_response(201, {"id": 7}))

        result = client.create_event({"name": "Concert"})

        assert result == {"id": 7}
        assert calls[0]["method"] == "POST"
        assert calls[0]["url"] == "http://api.test/api/event/create/aws"
        assert calls[0]["json"] == {"name": "Concert"}

    def test_create_event_empty_body(self, client, sent):
        _, responses = sent
        responses.append(make_response(204))
        assert client.create_event({"name": "Concert"}) == {}


class TestErrors:
    """Test error mapping."""

    def test_http_error(self, client, sent):
        _, responses = sent
        responses.append(make_response(422, {"errors": {"name": ["required"]}}))

        with pytest.raises(ApiException) as exc_info:
            client.create_event({})

        assert exc_info.value.status_code == 422
        assert exc_info.value.response_data == {"errors": {"name": ["required"]}}

    def test_upload_rejected(self, client, sent):
        _, responses = sent
        responses.append(make_response(403, raw=b"<Error>AccessDenied</Error>"))

        with pytest.raises(ApiException) as exc_info:
            client.upload_file("https://bucket/x.png", b"x", "image/png")
        assert exc_info.value.status_code == 403
        assert exc_info.value.context == "upload"

    def test_presign_not_json(self, client, sent):
        _, responses = sent
        responses.append(make_response(200, raw=b"<html>"))

        with pytest.raises(ApiException):
            client.presign("x.png", "image/png")

    def test_connection_error(self, client, sent):
        _, responses = sent
        responses.append(requests.exceptions.ConnectionError("refused"))

        with pytest.raises(NetworkException) as exc_info:
            client.presign("x.png", "image/png")
        assert isinstance(exc_info.value.original_error, requests.exceptions.ConnectionError)

    def test_timeout(self, client, sent):
        _, responses = sent
        responses.append(requests.exceptions.Timeout("timed out"))

        with pytest.raises(NetworkException):
            client.create_event({})


class TestSingleton:
    """Test shared client."""

    def test_get_api_client_is_shared(self):
        reset_api_client()
        try:
            assert get_api_client() is get_api_client()
        finally:
            reset_api_client()
