"""Site environmental data for the Group Design basic inputs.

Provides:
- ``LocationData`` -- wind, seismic and temperature parameters of a site
- ``CustomLocationDraft`` -- the "Tabulate Custom Loading Parameters" sheet
- ``ApiLocationSource`` -- state / district lookups over HTTP
- ``CatalogueLocationSource`` -- the same lookups from a YAML catalogue

A lookup that fails is logged and answered with ``None``; callers keep
whatever they were showing before.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Protocol

import requests
import yaml
from pydantic import BaseModel, ValidationError

from .inputs import SeismicZone

logger = logging.getLogger(__name__)


# Zone factor Z per IRC 6 Table 17
ZONE_FACTORS: dict[str, float] = {
    "II": 0.10,
    "III": 0.16,
    "IV": 0.24,
    "V": 0.36,
}

REQUIRED_MESSAGE = "Required"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class Region(BaseModel):
    """A state or district entry in a lookup list."""
    id: str
    name: str


class LocationData(BaseModel):
    """Environmental parameters for one site."""
    basic_wind_speed: float      # m/s
    seismic_zone: SeismicZone
    zone_factor: float
    max_shade_air_temp: float    # °C
    min_shade_air_temp: float    # °C


# ---------------------------------------------------------------------------
# Custom loading parameters
# ---------------------------------------------------------------------------

_CUSTOM_REQUIRED = ("basic_wind_speed", "max_shade_air_temp", "min_shade_air_temp")


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass
class CustomLocationDraft:
    """Editable custom loading parameters; zone factor follows the zone."""

    basic_wind_speed: Optional[float] = None
    seismic_zone: str = SeismicZone.II.value
    zone_factor: float = ZONE_FACTORS[SeismicZone.II.value]
    max_shade_air_temp: Optional[float] = None
    min_shade_air_temp: Optional[float] = None
    errors: dict[str, str] = field(default_factory=dict)

    def set_value(self, name: str, value: Any) -> None:
        if name == "zone_factor":
            raise AttributeError("zone_factor is derived from seismic_zone")
        setattr(self, name, value)
        if name == "seismic_zone":
            self.zone_factor = ZONE_FACTORS[SeismicZone(value).value]
        self.errors.pop(name, None)

    def validate(self) -> bool:
        self.errors = {
            name: REQUIRED_MESSAGE
            for name in _CUSTOM_REQUIRED
            if _blank(getattr(self, name))
        }
        return not self.errors

    def save(self) -> Optional[LocationData]:
        """Return the tabulated data, or None (with errors set) if incomplete."""
        if not self.validate():
            return None
        return LocationData(
            basic_wind_speed=float(self.basic_wind_speed),
            seismic_zone=SeismicZone(self.seismic_zone),
            zone_factor=float(self.zone_factor),
            max_shade_air_temp=float(self.max_shade_air_temp),
            min_shade_air_temp=float(self.min_shade_air_temp),
        )


# ---------------------------------------------------------------------------
# Lookup sources
# ---------------------------------------------------------------------------

class LocationSource(Protocol):
    def states(self) -> Optional[list[Region]]: ...

    def districts(self, state_id: str) -> Optional[list[Region]]: ...

    def location_data(self, district_id: str) -> Optional[LocationData]: ...


class ApiLocationSource:
    """Client for the region lookup endpoints of the design backend."""

    def __init__(self, base_url: str, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, what: str, path: str, params: Optional[dict] = None) -> Any:
        url = f"{self.base_url}/{path}"
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Error fetching %s: %s", what, exc)
            return None

    def _regions(self, what: str, payload: Any) -> Optional[list[Region]]:
        if payload is None:
            return None
        try:
            return [Region(id=str(item["id"]), name=item["name"]) for item in payload]
        except (KeyError, TypeError, ValidationError) as exc:
            logger.error("Error fetching %s: malformed response (%s)", what, exc)
            return None

    def states(self) -> Optional[list[Region]]:
        return self._regions("states", self._get("states", "states/"))

    def districts(self, state_id: str) -> Optional[list[Region]]:
        payload = self._get("districts", "districts/", params={"state_id": state_id})
        return self._regions("districts", payload)

    def location_data(self, district_id: str) -> Optional[LocationData]:
        payload = self._get("location data", f"districts/{district_id}/location_data/")
        if payload is None:
            return None
        try:
            return LocationData.model_validate(payload)
        except ValidationError as exc:
            logger.error("Error fetching location data: malformed response (%s)", exc)
            return None


class CatalogueLocationSource:
    """Region lookups served from a YAML catalogue.

    Layout::

        states:
          - id: MH
            name: Maharashtra
            districts:
              - id: MH-PUN
                name: Pune
                basic_wind_speed: 39
                seismic_zone: III
                max_shade_air_temp: 43
                min_shade_air_temp: 6

    ``zone_factor`` defaults to the IRC 6 value for the zone.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._data: Optional[dict] = None

    def _load(self) -> Optional[dict]:
        if self._data is None:
            try:
                with open(self.path, encoding="utf-8") as fh:
                    data = yaml.safe_load(fh) or {}
            except (OSError, yaml.YAMLError) as exc:
                logger.error("Error reading location catalogue %s: %s", self.path, exc)
                return None
            if not isinstance(data, dict):
                logger.error("Error reading location catalogue %s: expected a mapping", self.path)
                return None
            self._data = data
        return self._data

    def _states(self) -> list[dict]:
        data = self._load()
        return (data.get("states") or []) if data else []

    def states(self) -> Optional[list[Region]]:
        if self._load() is None:
            return None
        try:
            return [Region(id=str(s["id"]), name=s["name"]) for s in self._states()]
        except (KeyError, TypeError, ValidationError) as exc:
            logger.error("Error fetching states: malformed catalogue entry (%s)", exc)
            return None

    def districts(self, state_id: str) -> Optional[list[Region]]:
        try:
            for state in self._states():
                if str(state["id"]) == str(state_id):
                    return [Region(id=str(d["id"]), name=d["name"])
                            for d in state.get("districts") or []]
        except (KeyError, TypeError, AttributeError, ValidationError) as exc:
            logger.error("Error fetching districts: malformed catalogue entry (%s)", exc)
            return None
        logger.error("Error fetching districts: unknown state %r", state_id)
        return None

    def location_data(self, district_id: str) -> Optional[LocationData]:
        try:
            district = self._find_district(district_id)
            if district is None:
                logger.error("Error fetching location data: unknown district %r", district_id)
                return None
            zone = str(district["seismic_zone"])
            return LocationData(
                basic_wind_speed=district["basic_wind_speed"],
                seismic_zone=zone,
                zone_factor=district.get("zone_factor", ZONE_FACTORS.get(zone)),
                max_shade_air_temp=district["max_shade_air_temp"],
                min_shade_air_temp=district["min_shade_air_temp"],
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as exc:
            logger.error("Error fetching location data for %s: %s", district_id, exc)
            return None

    def _find_district(self, district_id: str) -> Optional[dict]:
        for state in self._states():
            for district in state.get("districts") or []:
                if str(district["id"]) == str(district_id):
                    return district
        return None
