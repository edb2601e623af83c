"""Shared fixtures for the client unit tests."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest
import requests

from api_client import APIClient

BASE_URL = "http://conversion.test"


def make_response(status_code: int = 200, body=None, url: str = BASE_URL) -> requests.Response:
    """Build a real requests.Response carrying a JSON body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp._content = b"" if body is None else json.dumps(body).encode("utf-8")
    resp.headers["Content-Type"] = "application/json"
    return resp


@pytest.fixture(name="make_response")
def make_response_fixture():
    return make_response


@pytest.fixture
def client() -> APIClient:
    """APIClient whose session.request is a mock returning an empty 200."""
    api_client = APIClient(BASE_URL)
    api_client.session.request = MagicMock(return_value=make_response(200, {}))
    return api_client
