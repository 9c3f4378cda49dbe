"""Exceptions raised by pyenvoy.

Only conditions detected by this library get their own exception type.
Network failures from the HTTP transport and parse failures from the
JSON/XML decoders are not wrapped and reach the caller unchanged.
"""

from __future__ import annotations

NOT_OK_MESSAGE = "server did not return 200"


class EnvoyError(Exception):
    """Base exception for errors raised by pyenvoy."""

    pass


class EnvoyNotOKError(EnvoyError):
    """The gateway answered with a status other than 200.

    Every non-200 status maps to this one error kind. The status code and
    response body are not kept; catch the class to detect the condition.
    """

    def __init__(self) -> None:
        """Initialize with the fixed not-OK message."""
        super().__init__(NOT_OK_MESSAGE)


__all__ = [
    "NOT_OK_MESSAGE",
    "EnvoyError",
    "EnvoyNotOKError",
]
