"""Factory function for creating Envoy clients from configuration.

Example:
    config = EnvoyConfig(host="192.168.1.50", timeout=10.0)
    async with create_client(config) as client:
        info = await client.info()

    # With a session owned by the caller (e.g. Home Assistant)
    client = create_client(config, session=async_get_clientsession(hass))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import aiohttp

from .client import EnvoyClient

if TYPE_CHECKING:
    from .config import EnvoyConfig
    from .protocol import HTTPRequester


def create_client(
    config: EnvoyConfig,
    *,
    session: HTTPRequester | None = None,
) -> EnvoyClient:
    """Create an EnvoyClient for a validated configuration.

    Args:
        config: Gateway connection configuration
        session: Optional session to inject. When given, ``config.timeout``
            is not applied; the caller configures its own session.

    Returns:
        EnvoyClient ready for use

    Raises:
        ValueError: If the configuration is invalid
    """
    config.validate()

    timeout = None
    if session is None and config.timeout is not None:
        timeout = aiohttp.ClientTimeout(total=config.timeout)

    return EnvoyClient(config.address, session=session, timeout=timeout)


__all__ = [
    "create_client",
]
