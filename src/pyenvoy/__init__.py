"""Python client library for the Enphase Envoy local API.

Usage:
    from pyenvoy import EnvoyClient

    async with EnvoyClient("192.168.1.50") as client:
        inventory = await client.inventory()
        production = await client.production()
        info = await client.info()

    From stored configuration:
        from pyenvoy import EnvoyConfig, create_client

        client = create_client(EnvoyConfig.from_dict(entry_data))
"""

from __future__ import annotations

from .client import EnvoyClient
from .config import EnvoyConfig
from .exceptions import EnvoyError, EnvoyNotOKError
from .factory import create_client
from .models import (
    Info,
    InfoBuild,
    InfoDevice,
    InfoPackage,
    Inventory,
    InventoryDevice,
    Production,
    ProductionLine,
    ProductionReading,
)
from .protocol import HTTPRequester, HTTPResponse

__version__ = "0.1.0"
__all__ = [
    "EnvoyClient",
    "EnvoyConfig",
    "create_client",
    # Exceptions
    "EnvoyError",
    "EnvoyNotOKError",
    # Transport protocol
    "HTTPRequester",
    "HTTPResponse",
    # Models
    "Inventory",
    "InventoryDevice",
    "Production",
    "ProductionReading",
    "ProductionLine",
    "Info",
    "InfoDevice",
    "InfoPackage",
    "InfoBuild",
]
