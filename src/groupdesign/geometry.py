"""Deck cross-section geometry for the Group Design basic inputs.

Resolves the three secondary geometry quantities of a girder deck -- girder
spacing, number of girders and deck overhang -- from the carriageway width.
Any two of them fix the third through::

    (overall_width - 2 * overhang) / spacing = num_girders
    overall_width = carriageway_width + 5

Provides:
- ``solve`` -- recompute the missing quantity after one field is edited
- ``finalize`` -- the save gate producing a frozen ``BridgeGeometry``
- ``GeometryDraft`` -- the mutable record behind the geometry popup
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Optional


# Footpath / parapet allowance added to the carriageway (m)
OVERALL_WIDTH_ALLOWANCE = 5.0

MIN_GIRDERS = 2

# Decimal places kept on a solved deck overhang (m)
SOLVED_PRECISION = 9

SAVE_REFUSED_MESSAGE = "Please fill all fields correctly before saving."


# ---------------------------------------------------------------------------
# Field selector
# ---------------------------------------------------------------------------

class GeometryField(str, Enum):
    """The three user-editable geometry quantities."""
    GIRDER_SPACING = "girder_spacing"
    NUM_GIRDERS = "num_girders"
    DECK_OVERHANG = "deck_overhang"


# For each edited field: the partner recomputed first, then the fallback.
_RECOMPUTE_ORDER: dict[GeometryField, tuple[GeometryField, GeometryField]] = {
    GeometryField.GIRDER_SPACING: (GeometryField.NUM_GIRDERS, GeometryField.DECK_OVERHANG),
    GeometryField.NUM_GIRDERS: (GeometryField.GIRDER_SPACING, GeometryField.DECK_OVERHANG),
    GeometryField.DECK_OVERHANG: (GeometryField.NUM_GIRDERS, GeometryField.GIRDER_SPACING),
}


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class GeometryError(Exception):
    """Raised when geometry values violate a constraint.

    ``errors`` maps a field name (``girder_spacing``, ``num_girders``,
    ``deck_overhang`` or ``carriageway_width``) to a message.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        detail = "; ".join(f"{k}: {v}" for k, v in self.errors.items())
        super().__init__(detail or "Invalid geometry")


class IncompleteGeometryError(GeometryError):
    """Raised by the save gate when fields are missing or carry errors."""

    def __init__(self, errors: Optional[dict[str, str]] = None):
        super().__init__(errors or {})
        self.args = (SAVE_REFUSED_MESSAGE,)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GeometryValues:
    """A fully resolved set of the three geometry quantities."""
    girder_spacing: float   # m  -- c/c of girders
    num_girders: int
    deck_overhang: float    # m  -- beyond outermost girder


@dataclass(frozen=True)
class BridgeGeometry:
    """Finalized deck geometry handed to the parent form."""
    carriageway_width: float  # m
    girder_spacing: float     # m
    num_girders: int
    deck_overhang: float      # m

    @property
    def overall_width(self) -> float:
        return overall_width(self.carriageway_width)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["overall_width"] = self.overall_width
        return data


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def overall_width(carriageway_width: float) -> float:
    """Overall deck width = carriageway width + 5 m.

    Raises
    ------
    GeometryError
        If the carriageway width is missing or not positive.
    """
    if carriageway_width is None or not carriageway_width > 0:
        raise GeometryError({"carriageway_width": "Must be greater than 0"})
    return carriageway_width + OVERALL_WIDTH_ALLOWANCE


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values."""
    return int(math.floor(value + 0.5))


def _snap(value: float) -> float:
    """Drop float noise from a solved overhang; -0.0 becomes 0.0."""
    return round(value, SOLVED_PRECISION) + 0.0


def check_values(
    width: float,
    girder_spacing: Optional[float] = None,
    num_girders: Optional[float] = None,
    deck_overhang: Optional[float] = None,
) -> dict[str, str]:
    """Range-check whichever values are given against overall *width*.

    Returns a ``{field: message}`` map; empty when everything is valid.
    """
    limit = f"Must be less than overall width ({width:.1f} m)"
    errors: dict[str, str] = {}

    if girder_spacing is not None:
        if not girder_spacing > 0:
            errors[GeometryField.GIRDER_SPACING.value] = "Must be greater than 0"
        elif girder_spacing >= width:
            errors[GeometryField.GIRDER_SPACING.value] = limit

    if num_girders is not None:
        if not float(num_girders).is_integer():
            errors[GeometryField.NUM_GIRDERS.value] = "Must be a whole number"
        elif num_girders < MIN_GIRDERS:
            errors[GeometryField.NUM_GIRDERS.value] = f"At least {MIN_GIRDERS} girders are required"
        elif num_girders >= width:
            errors[GeometryField.NUM_GIRDERS.value] = limit

    if deck_overhang is not None:
        if not deck_overhang >= 0:
            errors[GeometryField.DECK_OVERHANG.value] = "Must not be negative"
        elif deck_overhang >= width:
            errors[GeometryField.DECK_OVERHANG.value] = limit

    return errors


def _pick_target(changed: GeometryField, present: dict[GeometryField, bool]) -> GeometryField:
    first, second = _RECOMPUTE_ORDER[changed]
    if not present[first]:
        return first
    if not present[second]:
        return second
    return first


# ---------------------------------------------------------------------------
# Solver
# ---------------------------------------------------------------------------

def solve(
    carriageway_width: float,
    girder_spacing: Optional[float],
    num_girders: Optional[int],
    deck_overhang: Optional[float],
    changed_field: GeometryField | str,
) -> GeometryValues:
    """Recompute one geometry quantity after *changed_field* was edited.

    The edited field and one partner are held fixed; the other partner is
    recomputed (the missing one, or the preferred one from the dispatch
    table when both are present).

    Parameters
    ----------
    carriageway_width : float
        Carriageway width in m.
    girder_spacing, num_girders, deck_overhang :
        Current values, ``None`` when empty.
    changed_field : GeometryField or str
        The field the user just edited.

    Returns
    -------
    GeometryValues

    Raises
    ------
    GeometryError
        With field-tagged messages when an input or the solved value is out
        of range, or when too few values are given.
    """
    changed = GeometryField(changed_field)
    width = overall_width(carriageway_width)

    values = {
        GeometryField.GIRDER_SPACING: girder_spacing,
        GeometryField.NUM_GIRDERS: num_girders,
        GeometryField.DECK_OVERHANG: deck_overhang,
    }
    present = {k: v is not None for k, v in values.items()}

    if not present[changed]:
        raise GeometryError({changed.value: "Required"})
    partners = _RECOMPUTE_ORDER[changed]
    if not any(present[p] for p in partners):
        raise GeometryError({changed.value: "Enter one more value to calculate the third"})

    target = _pick_target(changed, present)
    given = {k: v for k, v in values.items() if k is not target}

    errors = check_values(width, **{k.value: v for k, v in given.items()})
    if errors:
        raise GeometryError(errors)

    spacing = given.get(GeometryField.GIRDER_SPACING)
    count = given.get(GeometryField.NUM_GIRDERS)
    overhang = given.get(GeometryField.DECK_OVERHANG)

    if target is GeometryField.NUM_GIRDERS:
        count = round_half_up((width - 2 * overhang) / spacing)
    elif target is GeometryField.GIRDER_SPACING:
        spacing = (width - 2 * overhang) / count
    else:
        overhang = _snap((width - spacing * count) / 2)

    solved = {
        GeometryField.GIRDER_SPACING: spacing,
        GeometryField.NUM_GIRDERS: count,
        GeometryField.DECK_OVERHANG: overhang,
    }
    errors = check_values(width, **{target.value: solved[target]})
    if errors:
        raise GeometryError(errors)

    return GeometryValues(
        girder_spacing=float(spacing),
        num_girders=int(count),
        deck_overhang=float(overhang),
    )


def finalize(
    carriageway_width: float,
    girder_spacing: Optional[float],
    num_girders: Optional[int],
    deck_overhang: Optional[float],
    errors: Optional[dict[str, str]] = None,
) -> BridgeGeometry:
    """Save gate: freeze the geometry if all three values are present and valid.

    Raises
    ------
    IncompleteGeometryError
        If a value is missing or *errors* holds an active field error.
    GeometryError
        If a value is out of range (e.g. fewer than 2 girders).
    """
    if errors or None in (girder_spacing, num_girders, deck_overhang):
        raise IncompleteGeometryError(errors)

    width = overall_width(carriageway_width)
    range_errors = check_values(width, girder_spacing, num_girders, deck_overhang)
    if range_errors:
        raise GeometryError(range_errors)

    return BridgeGeometry(
        carriageway_width=float(carriageway_width),
        girder_spacing=float(girder_spacing),
        num_girders=int(num_girders),
        deck_overhang=float(deck_overhang),
    )


# ---------------------------------------------------------------------------
# Popup session record
# ---------------------------------------------------------------------------

@dataclass
class GeometryDraft:
    """Editable geometry for one popup session.

    Built from the previously saved geometry (or empty), edited field by
    field, and frozen through :meth:`save`.
    """

    carriageway_width: float
    girder_spacing: Optional[float] = None
    num_girders: Optional[float] = None
    deck_overhang: Optional[float] = None
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_saved(cls, carriageway_width: float,
                   saved: Optional[BridgeGeometry] = None) -> "GeometryDraft":
        if saved is None:
            return cls(carriageway_width=carriageway_width)
        return cls(
            carriageway_width=carriageway_width,
            girder_spacing=saved.girder_spacing,
            num_girders=saved.num_girders,
            deck_overhang=saved.deck_overhang,
        )

    @property
    def overall_width(self) -> float:
        return self.carriageway_width + OVERALL_WIDTH_ALLOWANCE

    def get(self, name: GeometryField | str) -> Optional[float]:
        return getattr(self, GeometryField(name).value)

    def set_value(self, name: GeometryField | str, value: Optional[float]) -> None:
        """Store a raw edit; nothing is recomputed until the field is left."""
        setattr(self, GeometryField(name).value, value)

    def blur(self, name: GeometryField | str) -> bool:
        """Field lost focus: solve if it and at least one other field are filled.

        Returns True when a solve was attempted.
        """
        changed = GeometryField(name)
        others = [f for f in GeometryField if f is not changed]
        if self.get(changed) is None or all(self.get(f) is None for f in others):
            return False
        self.calculate(changed)
        return True

    def calculate(self, changed: GeometryField | str) -> None:
        try:
            result = solve(
                self.carriageway_width,
                self.girder_spacing,
                self.num_girders,
                self.deck_overhang,
                changed,
            )
        except GeometryError as exc:
            self.errors = exc.errors
            return
        self.girder_spacing = result.girder_spacing
        self.num_girders = result.num_girders
        self.deck_overhang = result.deck_overhang
        self.errors = {}

    def save(self) -> BridgeGeometry:
        """Finalize without touching the draft; raises on refusal."""
        return finalize(
            self.carriageway_width,
            self.girder_spacing,
            self.num_girders,
            self.deck_overhang,
            errors=self.errors,
        )
