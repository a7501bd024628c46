"""The "Custom Loading Parameters" popup."""

from __future__ import annotations

import streamlit as st

from groupdesign.inputs import SeismicZone
from groupdesign.location import CustomLocationDraft
from ui.state import get_form, get_location_draft, set_location_draft

_ZONES = [z.value for z in SeismicZone]


def open_location_popup() -> None:
    form = get_form()
    form.show_location_popup = True
    draft = CustomLocationDraft()
    set_location_draft(draft)
    for name in ("basic_wind_speed", "max_shade_air_temp", "min_shade_air_temp"):
        st.session_state[f"loc_{name}"] = None
    st.session_state["loc_seismic_zone"] = draft.seismic_zone


def _on_change(name: str) -> None:
    get_location_draft().set_value(name, st.session_state[f"loc_{name}"])


def _close() -> None:
    get_form().show_location_popup = False
    set_location_draft(None)


def _save() -> None:
    data = get_location_draft().save()
    if data is None:
        return
    get_form().apply_custom_location(data)
    set_location_draft(None)


def _number(label: str, name: str, draft: CustomLocationDraft) -> None:
    st.number_input(label, step=1.0, key=f"loc_{name}",
                    on_change=_on_change, args=(name,))
    if name in draft.errors:
        st.markdown(f'<div class="error-message">{draft.errors[name]}</div>',
                    unsafe_allow_html=True)


def render_location_popup() -> None:
    draft = get_location_draft()
    if draft is None:
        return

    with st.container(border=True):
        st.markdown("### Custom Loading Parameters")

        c1, c2 = st.columns(2)
        with c1:
            _number("Basic Wind Speed (m/s)", "basic_wind_speed", draft)
            st.selectbox(
                "Seismic Zone", _ZONES,
                format_func=lambda z: f"Zone {z}",
                key="loc_seismic_zone",
                on_change=_on_change, args=("seismic_zone",))
            st.text_input("Zone Factor", value=f"{draft.zone_factor:.2f}", disabled=True)
        with c2:
            _number("Max Temperature (°C)", "max_shade_air_temp", draft)
            _number("Min Temperature (°C)", "min_shade_air_temp", draft)

        col1, col2 = st.columns(2)
        with col1:
            st.button("Cancel", use_container_width=True, on_click=_close, key="loc_cancel")
        with col2:
            st.button("Save", type="primary", use_container_width=True,
                      on_click=_save, key="loc_save")
