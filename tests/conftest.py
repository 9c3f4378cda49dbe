"""Pytest configuration and fixtures for pyenvoy tests."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Generator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import pytest
from aioresponses import aioresponses


# Load sample API responses
SAMPLES_DIR = Path(__file__).parent / "samples"


def load_sample(filename: str) -> Any:
    """Load a sample JSON response file."""
    with open(SAMPLES_DIR / filename) as f:
        return json.load(f)


def load_sample_bytes(filename: str) -> bytes:
    """Load a sample response file as raw bytes."""
    return (SAMPLES_DIR / filename).read_bytes()


@pytest.fixture
def inventory_response() -> list[dict[str, Any]]:
    """Sample inventory.json response."""
    result: list[dict[str, Any]] = load_sample("inventory.json")
    return result


@pytest.fixture
def production_response() -> dict[str, Any]:
    """Sample production.json response."""
    result: dict[str, Any] = load_sample("production.json")
    return result


@pytest.fixture
def info_response() -> bytes:
    """Sample info.xml response."""
    return load_sample_bytes("info.xml")


@pytest.fixture
def mocked_api() -> Generator[aioresponses, None, None]:
    """Create aioresponses mock for HTTP requests.

    This fixture provides a context manager for mocking aiohttp requests
    using the aioresponses library.
    """
    with aioresponses() as m:
        yield m


class FakeResponse:
    """Minimal HTTPResponse test double."""

    def __init__(self, status: int, body: bytes) -> None:
        self.status = status
        self._body = body
        self.read_count = 0
        self.released = False

    async def read(self) -> bytes:
        self.read_count += 1
        return self._body


class FakeRequester:
    """HTTPRequester test double that records URLs and releases responses."""

    def __init__(self, status: int = 200, body: bytes = b"", error: Exception | None = None) -> None:
        self.status = status
        self.body = body
        self.error = error
        self.urls: list[str] = []
        self.responses: list[FakeResponse] = []

    @asynccontextmanager
    async def _request(self) -> AsyncIterator[FakeResponse]:
        if self.error is not None:
            raise self.error
        response = FakeResponse(self.status, self.body)
        self.responses.append(response)
        try:
            yield response
        finally:
            response.released = True

    def get(self, url: str) -> Any:
        self.urls.append(url)
        return self._request()


@pytest.fixture
def fake_requester() -> FakeRequester:
    """Requester answering 200 with an empty body; adjust attributes per test."""
    return FakeRequester()


@pytest.fixture
def requester_factory() -> type[FakeRequester]:
    """Factory for additional FakeRequester instances."""
    return FakeRequester
