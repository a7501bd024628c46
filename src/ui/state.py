"""Session state management for the Group Design app.

Keeps the basic inputs form, the open popup drafts and the location source
in ``st.session_state`` so they survive Streamlit reruns.
"""

from __future__ import annotations

import streamlit as st

from groupdesign.form import BasicInputsForm
from groupdesign.geometry import GeometryDraft
from groupdesign.location import CustomLocationDraft, LocationSource
from groupdesign.settings import load_settings

TAB_NAMES = {
    "basic": "Basic Inputs",
    "additional": "Additional Inputs",
}

_DEFAULTS = {
    "geometry_draft": None,
    "location_draft": None,
    "states_loaded": False,
}


def init_state() -> None:
    """Initialize session state with defaults if not already set."""
    if "form" not in st.session_state:
        st.session_state["form"] = BasicInputsForm()
    if "location_source" not in st.session_state:
        st.session_state["location_source"] = load_settings().location_source_factory()
    for key, val in _DEFAULTS.items():
        if key not in st.session_state:
            st.session_state[key] = val

    if not st.session_state["states_loaded"]:
        get_form().load_states(get_source())
        st.session_state["states_loaded"] = True


def reset_state() -> None:
    """Clear all state and reset to defaults."""
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    init_state()


def get_form() -> BasicInputsForm:
    return st.session_state["form"]


def get_source() -> LocationSource:
    return st.session_state["location_source"]


def get_geometry_draft() -> GeometryDraft | None:
    return st.session_state.get("geometry_draft")


def set_geometry_draft(draft: GeometryDraft | None) -> None:
    st.session_state["geometry_draft"] = draft


def get_location_draft() -> CustomLocationDraft | None:
    return st.session_state.get("location_draft")


def set_location_draft(draft: CustomLocationDraft | None) -> None:
    st.session_state["location_draft"] = draft
