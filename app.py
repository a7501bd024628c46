"""Group Design - Bridge Basic Inputs Application

Collects the basic inputs of a highway girder bridge: project location and
its environmental data, span, carriageway and deck geometry, and materials.
"""

import sys
from pathlib import Path

# Ensure src/ is on the import path
sys.path.insert(0, str(Path(__file__).parent / "src"))

import streamlit as st

from groupdesign.settings import configure_logging, load_settings
from ui.state import init_state, reset_state, get_form, TAB_NAMES

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Group Design",
    page_icon="\U0001F309",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    .info-box {
        background-color: #e8f4f8;
        padding: 1rem;
        border-radius: 0.5rem;
        border-left: 4px solid #3498db;
        margin-bottom: 1rem;
    }
    .error-message {
        color: #e74c3c;
        font-size: 0.85rem;
        margin-top: -0.5rem;
        margin-bottom: 0.5rem;
    }
</style>
""", unsafe_allow_html=True)


# ── Initialise state ─────────────────────────────────────────────────────────

configure_logging(load_settings().log_level)
init_state()


# ── Sidebar ──────────────────────────────────────────────────────────────────

with st.sidebar:
    st.markdown("### Group Design")
    st.markdown("---")
    if st.button("Reset Inputs", use_container_width=True):
        reset_state()
        st.rerun()
    st.markdown(
        "<small>Design codes: IRC 6:2017, IRC 24:2010, IRC 112:2020</small>",
        unsafe_allow_html=True,
    )


# ── Main content ─────────────────────────────────────────────────────────────

def main():
    st.markdown("# Group Design")
    st.markdown("---")

    left, right = st.columns([3, 2])

    with left:
        basic_tab, additional_tab = st.tabs(list(TAB_NAMES.values()))
        with basic_tab:
            from ui.basic_inputs import render_basic_inputs
            render_basic_inputs()
        with additional_tab:
            st.info("Additional inputs are not available yet.")

    with right:
        from ui.diagrams import draw_cross_section
        form = get_form()
        st.markdown("### Bridge Cross-Section and Plan")
        st.pyplot(draw_cross_section(form.geometry, form.carriageway))


main()
