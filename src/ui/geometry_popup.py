"""The "Modify Additional Geometry" popup.

Enter any two of girder spacing, number of girders and deck overhang; the
third is recalculated when a field is committed (Enter or focus change).
"""

from __future__ import annotations

import streamlit as st

from groupdesign.geometry import (
    GeometryError, GeometryField, IncompleteGeometryError,
)
from ui.state import get_form, get_geometry_draft, set_geometry_draft

_WIDGET_KEYS = {
    GeometryField.GIRDER_SPACING: "geo_girder_spacing",
    GeometryField.NUM_GIRDERS: "geo_num_girders",
    GeometryField.DECK_OVERHANG: "geo_deck_overhang",
}


def open_geometry_popup() -> None:
    """Start a popup session from the saved geometry."""
    draft = get_form().open_geometry_popup()
    if draft is None:
        return
    set_geometry_draft(draft)
    _sync_widgets()


def _sync_widgets() -> None:
    draft = get_geometry_draft()
    for name, key in _WIDGET_KEYS.items():
        value = draft.get(name)
        if name is GeometryField.NUM_GIRDERS and value is not None:
            value = int(value)
        st.session_state[key] = value


def _on_commit(name: GeometryField) -> None:
    draft = get_geometry_draft()
    draft.set_value(name, st.session_state[_WIDGET_KEYS[name]])
    if draft.blur(name):
        _sync_widgets()


def _close() -> None:
    get_form().close_geometry_popup()
    set_geometry_draft(None)


def _save() -> None:
    draft = get_geometry_draft()
    try:
        geometry = draft.save()
    except IncompleteGeometryError as exc:
        st.session_state["geometry_save_error"] = str(exc)
        return
    except GeometryError as exc:
        st.session_state["geometry_save_error"] = "; ".join(exc.errors.values())
        return
    get_form().apply_geometry(geometry)
    set_geometry_draft(None)


def _field_error(draft, name: GeometryField) -> None:
    message = draft.errors.get(name.value)
    if message:
        st.markdown(f'<div class="error-message">{message}</div>', unsafe_allow_html=True)


def render_geometry_popup() -> None:
    draft = get_geometry_draft()
    if draft is None:
        return

    with st.container(border=True):
        st.markdown("### Modify Additional Geometry")

        st.markdown(
            f"""
            <div class="info-box">
            <b>Constraints:</b><br>
            Overall Bridge Width = Carriageway Width + 5 meters<br>
            (Overall Width - 2 x Overhang) / Spacing = No. of Girders<br>
            <b>Overall Width = {draft.overall_width:.1f} m</b>
            </div>
            """,
            unsafe_allow_html=True,
        )

        c1, c2, c3 = st.columns(3)
        with c1:
            st.number_input(
                "Girder Spacing (m)", min_value=0.0, step=0.1, format="%.3f",
                key=_WIDGET_KEYS[GeometryField.GIRDER_SPACING],
                on_change=_on_commit, args=(GeometryField.GIRDER_SPACING,))
            _field_error(draft, GeometryField.GIRDER_SPACING)
        with c2:
            st.number_input(
                "Number of Girders", min_value=0, step=1,
                key=_WIDGET_KEYS[GeometryField.NUM_GIRDERS],
                on_change=_on_commit, args=(GeometryField.NUM_GIRDERS,))
            _field_error(draft, GeometryField.NUM_GIRDERS)
        with c3:
            st.number_input(
                "Deck Overhang Width (m)", min_value=0.0, step=0.1, format="%.3f",
                key=_WIDGET_KEYS[GeometryField.DECK_OVERHANG],
                on_change=_on_commit, args=(GeometryField.DECK_OVERHANG,))
            _field_error(draft, GeometryField.DECK_OVERHANG)

        if "carriageway_width" in draft.errors:
            st.error(f"Carriageway width: {draft.errors['carriageway_width']}")

        st.markdown(
            "**How it works:**\n"
            "- Enter any two values, third will auto-calculate\n"
            f"- All values must be less than overall width ({draft.overall_width:.1f} m)"
        )

        save_error = st.session_state.pop("geometry_save_error", None)
        if save_error:
            st.error(save_error)

        col1, col2 = st.columns(2)
        with col1:
            st.button("Cancel", use_container_width=True, on_click=_close,
                      key="geo_cancel")
        with col2:
            st.button("Save", type="primary", use_container_width=True,
                      on_click=_save, key="geo_save")
