"""Constants for the Envoy local API."""

from __future__ import annotations

# The local API is served over plain HTTP
URL_SCHEME = "http"
DEFAULT_PORT = 80

# Endpoint paths, including their query strings
INVENTORY_PATH = "/inventory.json?deleted=1"
PRODUCTION_PATH = "/production.json?details=1"
INFO_PATH = "/info.xml"

HTTP_OK = 200

# Sections of the production.json document
PRODUCTION_SECTIONS = ("production", "consumption", "storage")
