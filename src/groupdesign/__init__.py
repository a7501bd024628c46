# Group Design basic inputs: deck geometry solver, form state and lookups
from .geometry import (
    BridgeGeometry, GeometryDraft, GeometryError, GeometryField, GeometryValues,
    IncompleteGeometryError, finalize, overall_width, solve,
)
from .form import BasicInputsForm
from .location import LocationData, Region, CustomLocationDraft
