"""Pytest configuration and fixtures for booking API validator tests.

This module provides reusable fixtures for testing:
- Sample request/response messages loaded from tests/data
- An in-memory file reader standing in for the filesystem
- Mock HTTP transports serving canned partner responses
"""

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from booking_validator.models import (
    BookingAvailabilityRequest,
    BookingAvailabilityResponse,
    BookingSubmitRequest,
    BookingSubmitResponse,
)

DATA_DIR = Path(__file__).parent / "data"

CREDENTIALS_PATH = "/path/to/credentials"
PEM_PATH = "/path/to/pem"


def read_data(name: str) -> str:
    """Read a file from tests/data as text."""
    return (DATA_DIR / name).read_text()


# === Sample Message Fixtures ===
# Each fixture returns a fresh model so tests can mutate it freely.


@pytest.fixture
def availability_request() -> BookingAvailabilityRequest:
    """Sample BookingAvailabilityRequest."""
    return BookingAvailabilityRequest.model_validate_json(read_data("BookingAvailabilityRequest.json"))


@pytest.fixture
def availability_response() -> BookingAvailabilityResponse:
    """Valid response to the sample availability request."""
    return BookingAvailabilityResponse.model_validate_json(read_data("BookingAvailabilityResponse.json"))


@pytest.fixture
def submit_request() -> BookingSubmitRequest:
    """Sample BookingSubmitRequest."""
    return BookingSubmitRequest.model_validate_json(read_data("BookingSubmitRequest.json"))


@pytest.fixture
def submit_response() -> BookingSubmitResponse:
    """Valid response to the sample submit request."""
    return BookingSubmitResponse.model_validate_json(read_data("BookingSubmitResponse.json"))


@pytest.fixture
def availability_body() -> str:
    """Raw JSON body of the valid availability response."""
    return read_data("BookingAvailabilityResponse.json")


@pytest.fixture
def submit_body() -> str:
    """Raw JSON body of the valid submit response."""
    return read_data("BookingSubmitResponse.json")


# === File Reader Fixtures ===


class FakeFileReader:
    """Dict-backed stand-in for the filesystem reader."""

    def __init__(self, files: dict[str, bytes]) -> None:
        self.files = dict(files)
        self.reads: list[str] = []

    def __call__(self, path: str) -> bytes:
        self.reads.append(path)
        if path not in self.files:
            raise FileNotFoundError(f"no record of filename: {path}")
        return self.files[path]


@pytest.fixture
def fake_reader() -> FakeFileReader:
    """Reader holding test credentials, the test CA and the sample requests."""
    return FakeFileReader(
        {
            CREDENTIALS_PATH: b"username:password\n",
            PEM_PATH: (DATA_DIR / "cafile.pem").read_bytes(),
            "/requests/availability.json": (DATA_DIR / "BookingAvailabilityRequest.json").read_bytes(),
            "/requests/availability.pb3": (DATA_DIR / "BookingAvailabilityRequest.pb3").read_bytes(),
            "/requests/submit.json": (DATA_DIR / "BookingSubmitRequest.json").read_bytes(),
        }
    )


# === HTTP Fixtures ===


class RecordingHandler:
    """MockTransport handler that serves canned bodies per URL path."""

    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, text=route)

    def sent_json(self, index: int = 0) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture
def make_transport() -> Callable[[dict[str, Any]], tuple[httpx.MockTransport, RecordingHandler]]:
    """Factory for a mock transport serving the given routes.

    Route values are response body strings, httpx.Response objects, or
    exceptions to raise.
    """

    def _make(routes: dict[str, Any]) -> tuple[httpx.MockTransport, RecordingHandler]:
        handler = RecordingHandler(routes)
        return httpx.MockTransport(handler), handler

    return _make
