"""Pydantic models for Envoy local API responses.

Models mirror the field names the gateway uses on the wire, so they can be
validated straight from the decoded payload. Decoding is structural only:
every field is optional and unknown fields are kept, which lets the same
models cover the differences between firmware releases.

Example:
    inventory = TypeAdapter(list[Inventory]).validate_python(json.loads(body))
    production = Production.model_validate(json.loads(body))
    info = Info.from_xml(body)
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .constants import PRODUCTION_SECTIONS

_LOGGER = logging.getLogger(__name__)


def epoch_to_datetime(value: int | str | None) -> datetime | None:
    """Convert an Envoy epoch timestamp to an aware UTC datetime.

    The gateway reports times as seconds since the epoch, sometimes as a
    string. Zero or missing values mean "never" and map to None.

    Args:
        value: Epoch seconds as int or numeric string

    Returns:
        UTC datetime, or None if the value is empty or zero
    """
    if value is None or value == "":
        return None
    try:
        seconds = int(value)
    except (TypeError, ValueError):
        _LOGGER.debug("Ignoring non-numeric timestamp %r", value)
        return None
    if seconds <= 0:
        return None
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


# ============================================================================
# Inventory (/inventory.json)
# ============================================================================


class InventoryDevice(BaseModel):
    """One physical part registered with the gateway."""

    model_config = ConfigDict(extra="allow")

    part_num: str | None = None
    installed: str | None = None
    serial_num: str | None = None
    device_status: list[str] = Field(default_factory=list)
    last_rpt_date: str | None = None
    admin_state: int | None = None
    dev_type: int | None = None
    created_date: str | None = None
    img_load_date: str | None = None
    img_pnum_running: str | None = None
    ptpn: str | None = None
    chaneid: int | None = None
    device_control: list[dict[str, Any]] = Field(default_factory=list)
    producing: bool | None = None
    communicating: bool | None = None
    provisioned: bool | None = None
    operating: bool | None = None

    @property
    def last_report(self) -> datetime | None:
        """Time of the last report from this part."""
        return epoch_to_datetime(self.last_rpt_date)


class Inventory(BaseModel):
    """Inventory entry: the parts of one type (PCU, ACB, NSRB, ...)."""

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    devices: list[InventoryDevice] = Field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of parts of this type."""
        return len(self.devices)


INVENTORY_ADAPTER: TypeAdapter[list[Inventory]] = TypeAdapter(list[Inventory])


# ============================================================================
# Production (/production.json?details=1)
# ============================================================================


class ProductionLine(BaseModel):
    """Per-phase reading of a metered production or consumption channel."""

    model_config = ConfigDict(extra="allow")

    wNow: float | None = None
    whLifetime: float | None = None
    varhLeadLifetime: float | None = None
    varhLagLifetime: float | None = None
    vahLifetime: float | None = None
    rmsCurrent: float | None = None
    rmsVoltage: float | None = None
    reactPwr: float | None = None
    apprntPwr: float | None = None
    pwrFactor: float | None = None
    whToday: float | None = None
    whLastSevenDays: float | None = None
    vahToday: float | None = None
    varhLeadToday: float | None = None
    varhLagToday: float | None = None


class ProductionReading(ProductionLine):
    """One entry of the production, consumption or storage arrays.

    Inverter-only entries (``type == "inverters"``) carry just the counters
    common to all readings; ``eim`` entries add the metered fields and
    per-phase ``lines``; ``acb`` storage entries add ``whNow`` and ``state``.
    """

    type: str | None = None
    activeCount: int | None = None
    measurementType: str | None = None
    readingTime: int | None = None
    whNow: float | None = None
    state: str | None = None
    percentFull: int | None = None
    lines: list[ProductionLine] = Field(default_factory=list)

    @property
    def reading_datetime(self) -> datetime | None:
        """Time of this reading."""
        return epoch_to_datetime(self.readingTime)


class Production(BaseModel):
    """Current production and consumption sensor data."""

    model_config = ConfigDict(extra="allow")

    production: list[ProductionReading] = Field(default_factory=list)
    consumption: list[ProductionReading] = Field(default_factory=list)
    storage: list[ProductionReading] = Field(default_factory=list)

    def reading(
        self,
        section: str,
        *,
        reading_type: str | None = None,
        measurement_type: str | None = None,
    ) -> ProductionReading | None:
        """Find the first reading in a section matching the given filters.

        Args:
            section: "production", "consumption" or "storage"
            reading_type: Match on ``type`` (e.g. "inverters", "eim")
            measurement_type: Match on ``measurementType``
                (e.g. "total-consumption", "net-consumption")

        Returns:
            The matching reading, or None if there is none

        Raises:
            ValueError: If section is not one of the known sections
        """
        if section not in PRODUCTION_SECTIONS:
            raise ValueError(f"Unknown production section: {section!r}")

        readings: list[ProductionReading] = getattr(self, section)
        for entry in readings:
            if reading_type is not None and entry.type != reading_type:
                continue
            if measurement_type is not None and entry.measurementType != measurement_type:
                continue
            return entry
        return None


# ============================================================================
# Info (/info.xml)
# ============================================================================


def _element_to_dict(element: ET.Element) -> dict[str, Any]:
    """Convert an XML element into a dict suitable for model validation.

    Attributes become keys and tags that repeat become lists in document
    order. A leaf child becomes its stripped text, ignoring any attributes;
    a leaf without text becomes its attributes, or None when it has none.
    """
    data: dict[str, Any] = dict(element.attrib)
    repeated: set[str] = set()

    for child in element:
        value: Any
        if len(child):
            value = _element_to_dict(child)
        else:
            value = (child.text or "").strip() or None
            if value is None and child.attrib:
                value = dict(child.attrib)

        if child.tag in repeated:
            data[child.tag].append(value)
        elif child.tag in data:
            data[child.tag] = [data[child.tag], value]
            repeated.add(child.tag)
        else:
            data[child.tag] = value

    return data


class InfoDevice(BaseModel):
    """Identification of the gateway itself."""

    model_config = ConfigDict(extra="allow")

    sn: str | None = None
    pn: str | None = None
    software: str | None = None
    euaid: str | None = None
    seqnum: int | None = None
    apiver: int | None = None
    imeter: bool | None = None


class InfoPackage(BaseModel):
    """Firmware package installed on the gateway."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    pn: str | None = None
    version: str | None = None
    build: str | None = None


class InfoBuild(BaseModel):
    """Build metadata of the running firmware."""

    model_config = ConfigDict(extra="allow")

    build_id: str | None = None
    build_time_gmt: int | None = None
    release_ver: str | None = None
    release_stage: str | None = None


class Info(BaseModel):
    """Device information from ``<envoy_info>``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    time: int | None = None
    device: InfoDevice | None = None
    packages: list[InfoPackage] = Field(default_factory=list, alias="package")
    build_info: InfoBuild | None = None

    @field_validator("packages", mode="before")
    @classmethod
    def _single_package_as_list(cls, value: Any) -> Any:
        """A single <package> element decodes to a dict, not a list."""
        if value is None:
            return []
        if isinstance(value, dict):
            return [value]
        return value

    @classmethod
    def from_xml(cls, data: bytes | str) -> Info:
        """Decode an info.xml document.

        Raises:
            xml.etree.ElementTree.ParseError: If the document is not well-formed XML
            pydantic.ValidationError: If an element has the wrong shape
        """
        root = ET.fromstring(data)
        return cls.model_validate(_element_to_dict(root))

    @property
    def serial_number(self) -> str | None:
        """Serial number of the gateway."""
        return self.device.sn if self.device else None

    @property
    def software_version(self) -> str | None:
        """Running software version, e.g. "R4.10.35"."""
        return self.device.software if self.device else None

    @property
    def reported_at(self) -> datetime | None:
        """Time the document was generated."""
        return epoch_to_datetime(self.time)

    def package(self, name: str) -> InfoPackage | None:
        """Return the firmware package with the given name, if installed."""
        for pkg in self.packages:
            if pkg.name == name:
                return pkg
        return None


__all__ = [
    "INVENTORY_ADAPTER",
    "Info",
    "InfoBuild",
    "InfoDevice",
    "InfoPackage",
    "Inventory",
    "InventoryDevice",
    "Production",
    "ProductionLine",
    "ProductionReading",
    "epoch_to_datetime",
]
