"""The "Basic Inputs" tab of the Group Design app."""

from __future__ import annotations

import streamlit as st

from groupdesign.inputs import (
    ConcreteGrade, Footpath, FOOTPATH_LABELS, LocationMode, OTHER_STRUCTURE_MESSAGE,
    SteelGrade, StructureType,
)
from ui.geometry_popup import open_geometry_popup, render_geometry_popup
from ui.location_popup import open_location_popup, render_location_popup
from ui.state import get_form, get_source

_STEEL = [g.value for g in SteelGrade]
_CONCRETE = [g.value for g in ConcreteGrade]


# ── Callbacks ────────────────────────────────────────────────────────────────

def _on_structure_type() -> None:
    get_form().set_structure_type(st.session_state["bi_structure_type"])


def _on_location_mode() -> None:
    get_form().set_location_mode(st.session_state["bi_location_mode"])


def _on_state() -> None:
    get_form().select_state(st.session_state["bi_state"], get_source())


def _on_district() -> None:
    get_form().select_district(st.session_state["bi_district"], get_source())


def _on_number(name: str) -> None:
    form = get_form()
    setter = {
        "span": form.set_span,
        "carriageway": form.set_carriageway,
        "skew_angle": form.set_skew_angle,
    }[name]
    setter(st.session_state[f"bi_{name}"])


def _error(name: str) -> None:
    message = get_form().errors.get(name)
    if message:
        st.markdown(f'<div class="error-message">{message}</div>', unsafe_allow_html=True)


# ── Sections ─────────────────────────────────────────────────────────────────

def _section_structure() -> None:
    form = get_form()
    st.markdown("#### Type of Structure")
    st.selectbox(
        "Type of Structure",
        [t.value for t in StructureType],
        index=[t.value for t in StructureType].index(form.structure_type.value),
        format_func=str.title,
        key="bi_structure_type",
        on_change=_on_structure_type,
        label_visibility="collapsed",
    )
    if form.disabled:
        st.warning(OTHER_STRUCTURE_MESSAGE)


def _section_location() -> None:
    form = get_form()
    st.markdown("#### Project Location")

    modes = [LocationMode.LOCATION.value, LocationMode.CUSTOM.value]
    labels = {
        LocationMode.LOCATION.value: "Enter Location Name",
        LocationMode.CUSTOM.value: "Tabulate Custom Loading Parameters",
    }
    st.radio(
        "Location mode", modes,
        index=modes.index(form.location_mode.value),
        format_func=labels.get,
        key="bi_location_mode",
        on_change=_on_location_mode,
        disabled=form.disabled,
        label_visibility="collapsed",
    )

    if form.location_mode == LocationMode.CUSTOM:
        st.button("Open Spreadsheet", on_click=open_location_popup,
                  disabled=form.disabled)
        if form.show_location_popup:
            render_location_popup()
    else:
        state_names = {s.id: s.name for s in form.states}
        state_ids = [""] + list(state_names)
        c1, c2 = st.columns(2)
        with c1:
            st.selectbox(
                "State", state_ids,
                index=state_ids.index(form.selected_state) if form.selected_state in state_ids else 0,
                format_func=lambda i: state_names.get(i, "Select State"),
                key="bi_state", on_change=_on_state, disabled=form.disabled)
        district_names = {d.id: d.name for d in form.districts}
        district_ids = [""] + list(district_names)
        with c2:
            st.selectbox(
                "District", district_ids,
                index=district_ids.index(form.selected_district) if form.selected_district in district_ids else 0,
                format_func=lambda i: district_names.get(i, "Select District"),
                key="bi_district", on_change=_on_district,
                disabled=form.disabled or not form.selected_state)

    data = form.display_location_data
    if data is not None:
        st.markdown(
            f"| Parameter | Value |\n|---|---|\n"
            f"| Basic Wind Speed (m/s) | {data.basic_wind_speed:g} |\n"
            f"| Seismic Zone | {data.seismic_zone.value} |\n"
            f"| Zone Factor | {data.zone_factor:.2f} |\n"
            f"| Max Shade Air Temperature (°C) | {data.max_shade_air_temp:g} |\n"
            f"| Min Shade Air Temperature (°C) | {data.min_shade_air_temp:g} |"
        )


def _section_geometry() -> None:
    form = get_form()
    st.markdown("#### Geometric Details")

    c1, c2 = st.columns(2)
    with c1:
        st.number_input("Span (m)", value=form.span, step=0.1, key="bi_span",
                        on_change=_on_number, args=("span",), disabled=form.disabled)
        _error("span")
        st.number_input("Skew Angle (°)", value=form.skew_angle, step=0.1,
                        key="bi_skew_angle", on_change=_on_number, args=("skew_angle",),
                        disabled=form.disabled)
        _error("skew_angle")
    with c2:
        st.number_input("Carriageway Width (m)", value=form.carriageway, step=0.1,
                        key="bi_carriageway", on_change=_on_number, args=("carriageway",),
                        disabled=form.disabled)
        _error("carriageway")
        footpaths = list(Footpath)
        form.footpath = st.selectbox(
            "Footpath", footpaths, index=footpaths.index(form.footpath),
            format_func=FOOTPATH_LABELS.get, disabled=form.disabled)

    st.button("Modify Additional Geometry", on_click=open_geometry_popup,
              disabled=not form.can_modify_geometry, type="primary")
    if form.show_geometry_popup:
        render_geometry_popup()

    if form.geometry is not None:
        g = form.geometry
        st.markdown(
            f"**Girder Spacing:** {g.girder_spacing:.3f} m  \n"
            f"**Number of Girders:** {g.num_girders}  \n"
            f"**Deck Overhang:** {g.deck_overhang:.3f} m  \n"
            f"**Overall Width:** {g.overall_width:.1f} m"
        )


def _section_materials() -> None:
    form = get_form()
    st.markdown("#### Material Inputs")
    c1, c2, c3 = st.columns(3)
    with c1:
        form.girder_steel = SteelGrade(st.selectbox(
            "Girder Steel", _STEEL, index=_STEEL.index(form.girder_steel.value),
            disabled=form.disabled))
    with c2:
        form.bracing_steel = SteelGrade(st.selectbox(
            "Cross Bracing Steel", _STEEL, index=_STEEL.index(form.bracing_steel.value),
            disabled=form.disabled))
    with c3:
        form.deck_concrete = ConcreteGrade(st.selectbox(
            "Deck Concrete", _CONCRETE, index=_CONCRETE.index(form.deck_concrete.value),
            disabled=form.disabled))


# ── Main entry point ─────────────────────────────────────────────────────────

def render_basic_inputs() -> None:
    _section_structure()
    st.markdown("---")
    _section_location()
    st.markdown("---")
    _section_geometry()
    st.markdown("---")
    _section_materials()
