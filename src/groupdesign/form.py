"""Form state for the Group Design "Basic Inputs" tab.

Holds every input of the tab together with the per-field error map, the
state/district lookup lists, the environmental data on display and the
geometry saved from the "Modify Additional Geometry" popup.  All methods are
synchronous and never raise for bad user input: problems are recorded in
``errors`` against the offending field.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .geometry import BridgeGeometry, GeometryDraft
from .inputs import (
    ConcreteGrade, Footpath, LocationMode, SteelGrade, StructureType,
    validate_carriageway, validate_skew_angle, validate_span,
)
from .location import LocationData, LocationSource, Region

logger = logging.getLogger(__name__)


@dataclass
class BasicInputsForm:
    """Manages the basic inputs across edits and popups."""

    # Type of structure
    structure_type: StructureType = StructureType.HIGHWAY

    # Project location
    location_mode: LocationMode = LocationMode.LOCATION
    selected_state: Optional[str] = None
    selected_district: Optional[str] = None
    states: list[Region] = field(default_factory=list)
    districts: list[Region] = field(default_factory=list)
    location_data: Optional[LocationData] = None
    custom_location_data: Optional[LocationData] = None

    # Geometric details
    span: Optional[float] = None                # m
    carriageway: Optional[float] = None         # m
    footpath: Footpath = Footpath.NONE
    skew_angle: Optional[float] = None          # degrees
    geometry: Optional[BridgeGeometry] = None

    # Materials
    girder_steel: SteelGrade = SteelGrade.E250
    bracing_steel: SteelGrade = SteelGrade.E250
    deck_concrete: ConcreteGrade = ConcreteGrade.M25

    # Transient UI state
    errors: dict[str, str] = field(default_factory=dict)
    show_geometry_popup: bool = False
    show_location_popup: bool = False

    # -- structure type ---------------------------------------------------

    @property
    def disabled(self) -> bool:
        """Inputs are locked for structures other than highway bridges."""
        return self.structure_type == StructureType.OTHER

    def set_structure_type(self, value: StructureType | str) -> None:
        self.structure_type = StructureType(value)
        if self.disabled:
            self.errors.clear()

    # -- field validation -------------------------------------------------

    def _apply(self, name: str, message: Optional[str]) -> None:
        if message:
            self.errors[name] = message
        else:
            self.errors.pop(name, None)

    def set_span(self, value: Optional[float]) -> None:
        self.span = value
        self._apply("span", validate_span(value))

    def set_carriageway(self, value: Optional[float]) -> None:
        self.carriageway = value
        self._apply("carriageway", validate_carriageway(value))

    def set_skew_angle(self, value: Optional[float]) -> None:
        self.skew_angle = value
        self._apply("skew_angle", validate_skew_angle(value))

    # -- location ---------------------------------------------------------

    def set_location_mode(self, mode: LocationMode | str) -> None:
        self.location_mode = LocationMode(mode)
        if self.location_mode == LocationMode.LOCATION:
            self.custom_location_data = None
        else:
            self.location_data = None
            self.selected_state = None
            self.selected_district = None

    def load_states(self, source: LocationSource) -> None:
        states = source.states()
        if states is not None:
            self.states = states

    def select_state(self, state_id: Optional[str], source: LocationSource) -> None:
        """Pick a state and load its districts.

        A failed lookup keeps the previous district list and selection.
        """
        self.selected_state = state_id or None
        if not self.selected_state:
            return
        districts = source.districts(self.selected_state)
        if districts is None:
            return
        self.districts = districts
        self.selected_district = None
        self.location_data = None

    def select_district(self, district_id: Optional[str], source: LocationSource) -> None:
        self.selected_district = district_id or None
        if not self.selected_district:
            return
        data = source.location_data(self.selected_district)
        if data is not None:
            self.location_data = data

    def apply_custom_location(self, data: LocationData) -> None:
        self.custom_location_data = data
        self.show_location_popup = False

    @property
    def display_location_data(self) -> Optional[LocationData]:
        if self.location_mode == LocationMode.LOCATION:
            return self.location_data
        return self.custom_location_data

    # -- geometry ---------------------------------------------------------

    @property
    def can_modify_geometry(self) -> bool:
        return (
            not self.disabled
            and self.carriageway is not None
            and "carriageway" not in self.errors
        )

    def open_geometry_popup(self) -> Optional[GeometryDraft]:
        """Start a popup session seeded with the saved geometry."""
        if not self.can_modify_geometry:
            return None
        self.show_geometry_popup = True
        return GeometryDraft.from_saved(float(self.carriageway), self.geometry)

    def close_geometry_popup(self) -> None:
        self.show_geometry_popup = False

    def apply_geometry(self, geometry: BridgeGeometry) -> None:
        logger.info(
            "Geometry saved: %d girders @ %.3f m, overhang %.3f m, overall %.1f m",
            geometry.num_girders, geometry.girder_spacing,
            geometry.deck_overhang, geometry.overall_width,
        )
        self.geometry = geometry
        self.show_geometry_popup = False

    # -- summary ----------------------------------------------------------

    def summary(self) -> dict:
        """Flat view of the current inputs, e.g. for a review table."""
        data = self.display_location_data
        return {
            "structure_type": self.structure_type.value,
            "location_mode": self.location_mode.value,
            "state": self.selected_state,
            "district": self.selected_district,
            "location_data": data.model_dump(mode="json") if data else None,
            "span": self.span,
            "carriageway": self.carriageway,
            "footpath": self.footpath.value,
            "skew_angle": self.skew_angle,
            "geometry": self.geometry.to_dict() if self.geometry else None,
            "girder_steel": self.girder_steel.value,
            "bracing_steel": self.bracing_steel.value,
            "deck_concrete": self.deck_concrete.value,
            "errors": dict(self.errors),
        }
