"""Connection configuration for an Envoy gateway.

This module provides the EnvoyConfig dataclass for describing how to reach
a gateway on the local network, supporting serialization to/from
dictionaries for Home Assistant config entries.

Example:
    config = EnvoyConfig(host="192.168.1.50")
    config.validate()

    # Serialize to dict for storage
    data = config.to_dict()

    # Restore from dict
    restored = EnvoyConfig.from_dict(data)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .constants import DEFAULT_PORT


@dataclass
class EnvoyConfig:
    """Configuration for reaching one gateway.

    Attributes:
        host: IP address or hostname of the gateway
        port: HTTP port (default 80)
        timeout: Total request timeout in seconds for a session created by
            the client. None leaves aiohttp's default in place. Ignored when
            a session is injected.
    """

    host: str
    port: int = DEFAULT_PORT
    timeout: float | None = None

    @property
    def address(self) -> str:
        """Network address in ``host[:port]`` form."""
        if self.port == DEFAULT_PORT:
            return self.host
        return f"{self.host}:{self.port}"

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.host:
            raise ValueError("host is required")
        if "://" in self.host or "/" in self.host:
            raise ValueError("host must be a hostname or IP address, not a URL")
        if not 1 <= self.port <= 65535:
            raise ValueError("port must be between 1 and 65535")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "host": self.host,
            "port": self.port,
            "timeout": self.timeout,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EnvoyConfig:
        """Create configuration from dictionary.

        Args:
            data: Dictionary with configuration values (from to_dict() or
                Home Assistant config entry)

        Returns:
            EnvoyConfig instance with values from dictionary
        """
        return cls(
            host=data.get("host", ""),
            port=data.get("port", DEFAULT_PORT),
            timeout=data.get("timeout"),
        )


__all__ = [
    "EnvoyConfig",
]
