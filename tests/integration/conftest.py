"""Shared fixtures for integration tests."""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from dotenv import load_dotenv

from pyenvoy import EnvoyClient, EnvoyConfig, create_client

# Load .env file before running tests
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

# Gateway location from environment
ENVOY_HOST = os.getenv("ENVOY_HOST")
ENVOY_PORT = int(os.getenv("ENVOY_PORT", "80"))
ENVOY_TIMEOUT = float(os.getenv("ENVOY_TIMEOUT", "10"))


@pytest.fixture
async def client() -> AsyncGenerator[EnvoyClient, None]:
    """Create a client for the gateway named by ENVOY_HOST."""
    if not ENVOY_HOST:
        pytest.skip("Integration tests require the ENVOY_HOST environment variable")

    config = EnvoyConfig(host=ENVOY_HOST, port=ENVOY_PORT, timeout=ENVOY_TIMEOUT)
    async with create_client(config) as client:
        yield client
