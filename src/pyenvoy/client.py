"""Enphase Envoy local API client.

This module provides an async client for reading data from an Envoy gateway
over its unauthenticated local HTTP API.

Key Features:
- Async/await support with aiohttp
- Support for an injected aiohttp.ClientSession, or any HTTPRequester
- JSON and XML responses decoded into Pydantic models
- One error type for non-200 responses; transport and decode errors
  reach the caller unchanged
"""

from __future__ import annotations

import json
import logging
from typing import Any

import aiohttp

from .constants import HTTP_OK, INFO_PATH, INVENTORY_PATH, PRODUCTION_PATH, URL_SCHEME
from .exceptions import EnvoyNotOKError
from .models import INVENTORY_ADAPTER, Info, Inventory, Production
from .protocol import HTTPRequester

_LOGGER = logging.getLogger(__name__)


class EnvoyClient:
    """Enphase Envoy local API client.

    Each operation issues a single GET and decodes the body. Nothing is
    cached and nothing is retried; retries, timeouts and connection pooling
    belong to the HTTP session.

    Example:
        ```python
        async with EnvoyClient("192.168.1.50") as client:
            info = await client.info()
            production = await client.production()
            for group in await client.inventory():
                print(f"{group.type}: {group.count} parts")
        ```
    """

    def __init__(
        self,
        address: str,
        *,
        session: HTTPRequester | None = None,
        timeout: aiohttp.ClientTimeout | None = None,
    ) -> None:
        """Initialize the Envoy client.

        Args:
            address: Gateway address as ``host`` or ``host:port``
            session: Optional aiohttp ClientSession (or other HTTPRequester)
                for session injection. An injected session is never
                configured or closed by the client.
            timeout: Timeout for the session the client creates itself.
                Ignored when a session is injected.
        """
        self._address = address
        self._timeout = timeout

        # Session management
        self._session: HTTPRequester | None = session
        self._owns_session: bool = session is None

    async def __aenter__(self) -> EnvoyClient:
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(address={self._address!r})"

    @property
    def address(self) -> str:
        """Gateway address this client talks to."""
        return self._address

    @property
    def base_url(self) -> str:
        """URL prefix every endpoint path is appended to."""
        return f"{URL_SCHEME}://{self._address}"

    @property
    def owns_session(self) -> bool:
        """Whether the client created, and will close, its HTTP session."""
        return self._owns_session

    def _get_session(self) -> HTTPRequester:
        """Get or create the HTTP session.

        Returns:
            The injected session, or an aiohttp.ClientSession owned by this client.
        """
        if self._session is not None and not self._owns_session:
            return self._session

        if not isinstance(self._session, aiohttp.ClientSession) or self._session.closed:
            _LOGGER.debug("Creating HTTP session for %s", self._address)
            if self._timeout is not None:
                self._session = aiohttp.ClientSession(timeout=self._timeout)
            else:
                self._session = aiohttp.ClientSession()

        return self._session

    async def close(self) -> None:
        """Close the session if we own it.

        Only closes the session if it was created by this client,
        not if it was injected.
        """
        session = self._session
        if (
            self._owns_session
            and isinstance(session, aiohttp.ClientSession)
            and not session.closed
        ):
            _LOGGER.debug("Closing HTTP session for %s", self._address)
            await session.close()

    async def _get(self, path: str) -> bytes:
        """Issue a GET request and return the raw response body.

        Args:
            path: Endpoint path including any query string

        Returns:
            bytes: Response body of a 200 response

        Raises:
            EnvoyNotOKError: If the gateway answers with any status but 200
        """
        url = f"{self.base_url}{path}"
        _LOGGER.debug("GET %s", url)

        async with self._get_session().get(url) as response:
            if response.status != HTTP_OK:
                _LOGGER.warning("GET %s returned HTTP %d", url, response.status)
                raise EnvoyNotOKError()

            data = await response.read()

        _LOGGER.debug("GET %s returned %d bytes", url, len(data))
        return data

    async def _get_json(self, path: str) -> Any:
        """GET a path and decode the body as JSON.

        Raises:
            EnvoyNotOKError: If the gateway answers with any status but 200
            json.JSONDecodeError: If the body is not valid JSON
        """
        data = await self._get(path)
        return json.loads(data)

    async def _get_xml(self, path: str) -> Info:
        """GET a path and decode the body as an info.xml document.

        Raises:
            EnvoyNotOKError: If the gateway answers with any status but 200
            xml.etree.ElementTree.ParseError: If the body is not valid XML
        """
        data = await self._get(path)
        return Info.from_xml(data)

    # Public API

    async def inventory(self) -> list[Inventory]:
        """Get the parts installed in the system and registered with the gateway.

        Deleted parts are included. A JSON null body yields an empty list.

        Returns:
            list[Inventory]: One entry per part type, in gateway order

        Raises:
            EnvoyNotOKError: If the gateway answers with any status but 200
            json.JSONDecodeError: If the body is not valid JSON
            pydantic.ValidationError: If the JSON is not a list of part groups
        """
        payload = await self._get_json(INVENTORY_PATH)
        if payload is None:
            return []
        return INVENTORY_ADAPTER.validate_python(payload)

    async def production(self) -> Production:
        """Get current data for production and consumption sensors, if equipped.

        A JSON null body yields an empty Production.

        Returns:
            Production: Production, consumption and storage readings

        Raises:
            EnvoyNotOKError: If the gateway answers with any status but 200
            json.JSONDecodeError: If the body is not valid JSON
            pydantic.ValidationError: If the JSON is not a production object
        """
        payload = await self._get_json(PRODUCTION_PATH)
        if payload is None:
            return Production()
        return Production.model_validate(payload)

    async def info(self) -> Info:
        """Get device information.

        Raises:
            EnvoyNotOKError: If the gateway answers with any status but 200
            xml.etree.ElementTree.ParseError: If the body is not valid XML
        """
        return await self._get_xml(INFO_PATH)
