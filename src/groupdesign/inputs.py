"""
Input data models for the Group Design basic inputs using Pydantic for validation.
Ranges follow the software limits of the basic inputs form and IRC 24:2010.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional, List
from enum import Enum

from .geometry import BridgeGeometry, GeometryError, finalize


# Software range limits (m)
SPAN_MIN = 5.0
SPAN_MAX = 100.0
CARRIAGEWAY_MIN = 3.0
CARRIAGEWAY_MAX = 50.0

# IRC 24 (2010): skew beyond this needs detailed analysis (degrees)
SKEW_ANGLE_LIMIT = 20.0

OUT_OF_RANGE_MESSAGE = "Outside the software range."
SKEW_MESSAGE = "IRC 24 (2010) requires detailed analysis for skew angles > 20°"
OTHER_STRUCTURE_MESSAGE = "Other structures not included."


class StructureType(str, Enum):
    """Type of structure; only highway bridges are designed."""
    HIGHWAY = "highway"
    OTHER = "other"


class LocationMode(str, Enum):
    """How the site environmental data is obtained."""
    LOCATION = "location"  # state / district lookup
    CUSTOM = "custom"      # tabulated by the user


class Footpath(str, Enum):
    """Footpath arrangement."""
    NONE = "none"
    SINGLE = "single"
    BOTH = "both"


class SteelGrade(str, Enum):
    """Structural steel grades per IS 2062."""
    E250 = "E250"
    E350 = "E350"
    E450 = "E450"


class ConcreteGrade(str, Enum):
    """Deck concrete grades per IRC 112."""
    M25 = "M25"
    M30 = "M30"
    M35 = "M35"
    M40 = "M40"
    M45 = "M45"
    M50 = "M50"
    M55 = "M55"
    M60 = "M60"


class SeismicZone(str, Enum):
    """Seismic zones per IRC 6."""
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"


FOOTPATH_LABELS = {
    Footpath.NONE: "None",
    Footpath.SINGLE: "Single-sided",
    Footpath.BOTH: "Both",
}


# ---------------------------------------------------------------------------
# Field validators (return a message, or None when the value is acceptable)
# ---------------------------------------------------------------------------

def _to_float(value) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number != number:  # NaN
        return None
    return number


def validate_span(value) -> Optional[str]:
    number = _to_float(value)
    if number is None or number < SPAN_MIN or number > SPAN_MAX:
        return OUT_OF_RANGE_MESSAGE
    return None


def validate_carriageway(value) -> Optional[str]:
    number = _to_float(value)
    if number is None or number < CARRIAGEWAY_MIN or number > CARRIAGEWAY_MAX:
        return OUT_OF_RANGE_MESSAGE
    return None


def validate_skew_angle(value) -> Optional[str]:
    """Flag skew angles above the IRC 24 limit; blanks are not flagged."""
    number = _to_float(value)
    if number is not None and number > SKEW_ANGLE_LIMIT:
        return SKEW_MESSAGE
    return None


# ---------------------------------------------------------------------------
# Project input file models
# ---------------------------------------------------------------------------

class CustomLocationInput(BaseModel):
    """Tabulated environmental parameters."""
    basic_wind_speed: float = Field(..., gt=0, description="Basic wind speed in m/s")
    seismic_zone: SeismicZone = SeismicZone.II
    max_shade_air_temp: float = Field(..., description="Max shade air temperature in °C")
    min_shade_air_temp: float = Field(..., description="Min shade air temperature in °C")


class LocationInput(BaseModel):
    """Project location: a state/district lookup or custom parameters."""
    mode: LocationMode = LocationMode.LOCATION
    state: Optional[str] = None
    district: Optional[str] = None
    custom: Optional[CustomLocationInput] = None

    @model_validator(mode="after")
    def _check_mode(self):
        if self.mode == LocationMode.LOCATION and not (self.state and self.district):
            raise ValueError("state and district are required for location mode")
        if self.mode == LocationMode.CUSTOM and self.custom is None:
            raise ValueError("custom parameters are required for custom mode")
        return self


class GeometryInput(BaseModel):
    """Additional geometry; all three values are required together."""
    girder_spacing: float
    num_girders: int
    deck_overhang: float


class MaterialsInput(BaseModel):
    girder_steel: SteelGrade = SteelGrade.E250
    cross_bracing_steel: SteelGrade = SteelGrade.E250
    deck_concrete: ConcreteGrade = ConcreteGrade.M25


class ProjectInput(BaseModel):
    """Complete basic inputs for one highway bridge."""
    structure_type: StructureType = StructureType.HIGHWAY
    span: float = Field(..., ge=SPAN_MIN, le=SPAN_MAX, description="Span in meters")
    carriageway_width: float = Field(
        ...,
        ge=CARRIAGEWAY_MIN,
        le=CARRIAGEWAY_MAX,
        description="Carriageway width in meters"
    )
    footpath: Footpath = Footpath.NONE
    skew_angle: float = Field(default=0.0, ge=0, lt=90, description="Skew angle in degrees")
    location: LocationInput
    geometry: Optional[GeometryInput] = None
    materials: MaterialsInput = Field(default_factory=MaterialsInput)

    @model_validator(mode="after")
    def _check_structure(self):
        if self.structure_type == StructureType.OTHER:
            raise ValueError(OTHER_STRUCTURE_MESSAGE)
        return self

    @model_validator(mode="after")
    def _check_geometry(self):
        if self.geometry is not None:
            try:
                self.bridge_geometry()
            except GeometryError as exc:
                raise ValueError(f"geometry: {exc}") from exc
        return self

    def bridge_geometry(self) -> Optional[BridgeGeometry]:
        if self.geometry is None:
            return None
        return finalize(
            self.carriageway_width,
            self.geometry.girder_spacing,
            self.geometry.num_girders,
            self.geometry.deck_overhang,
        )

    def warnings(self) -> List[str]:
        """Non-blocking advisories for the inputs."""
        notes = []
        if validate_skew_angle(self.skew_angle):
            notes.append(SKEW_MESSAGE)
        return notes
