"""Bridge cross-section diagram for the Group Design app.

Returns a ``matplotlib.figure.Figure`` that the caller passes to ``st.pyplot()``.

Colour conventions:
    - Concrete deck: light gray fill (#d9d9d9), black outline
    - Steel girders: dark gray (#444444)
    - Dimension lines: black, thin
"""

from __future__ import annotations

from typing import Optional

import matplotlib
matplotlib.use("Agg")          # non-interactive backend for Streamlit
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
import numpy as np

from groupdesign.geometry import BridgeGeometry, OVERALL_WIDTH_ALLOWANCE


# ── Colours ──────────────────────────────────────────────────────────────────

_CONCRETE = "#d9d9d9"
_GIRDER   = "#444444"
_DIM      = "#333333"

_DECK_DEPTH = 0.25     # m, drawing only
_GIRDER_DEPTH = 1.2    # m, drawing only
_GIRDER_FLANGE = 0.35  # m, drawing only


def _add_dim_h(ax, y, x0, x1, text, offset=0.06, fontsize=8):
    """Draw a horizontal dimension line with arrows and a label."""
    ax.annotate(
        "", xy=(x1, y), xytext=(x0, y),
        arrowprops=dict(arrowstyle="<->", color=_DIM, lw=0.8),
    )
    ax.text((x0 + x1) / 2, y + offset, text, ha="center", va="bottom",
            fontsize=fontsize, color=_DIM)


def girder_positions(geometry: BridgeGeometry) -> np.ndarray:
    """Girder centre-lines measured from the left deck edge (m)."""
    return geometry.deck_overhang + geometry.girder_spacing * np.arange(geometry.num_girders)


def draw_cross_section(geometry: Optional[BridgeGeometry] = None,
                       carriageway: Optional[float] = None) -> plt.Figure:
    """Deck cross-section with girders and key dimensions.

    Without a saved geometry a schematic three-girder section is drawn.
    """
    fig, ax = plt.subplots(figsize=(8, 4))

    if geometry is not None:
        width = geometry.overall_width
        xs = girder_positions(geometry)
    else:
        width = (carriageway or 10.0) + OVERALL_WIDTH_ALLOWANCE
        xs = np.linspace(0.15 * width, 0.85 * width, 3)

    # Deck slab
    ax.add_patch(mpatches.Rectangle(
        (0, 0), width, _DECK_DEPTH,
        facecolor=_CONCRETE, edgecolor="black", lw=1.0))

    # Girders (I-sections: top flange, web, bottom flange)
    for x in xs:
        ax.add_patch(mpatches.Rectangle(
            (x - _GIRDER_FLANGE / 2, -0.05), _GIRDER_FLANGE, 0.05, color=_GIRDER))
        ax.add_patch(mpatches.Rectangle(
            (x - 0.02, -_GIRDER_DEPTH + 0.05), 0.04, _GIRDER_DEPTH - 0.1, color=_GIRDER))
        ax.add_patch(mpatches.Rectangle(
            (x - _GIRDER_FLANGE / 2, -_GIRDER_DEPTH), _GIRDER_FLANGE, 0.05, color=_GIRDER))

    # Dimensions
    _add_dim_h(ax, _DECK_DEPTH + 0.35, 0, width, f"Overall width {width:.1f} m")
    if geometry is not None:
        y = -_GIRDER_DEPTH - 0.35
        if geometry.num_girders > 1:
            _add_dim_h(ax, y, xs[0], xs[1], f"{geometry.girder_spacing:.2f} m", offset=-0.3)
        if geometry.deck_overhang > 0:
            _add_dim_h(ax, y, 0, xs[0], f"{geometry.deck_overhang:.2f} m", offset=-0.3)
        title = f"{geometry.num_girders} girders @ {geometry.girder_spacing:.2f} m c/c"
    else:
        title = "Bridge Cross-Section Reference"

    ax.set_title(title, fontsize=10)
    ax.set_xlim(-0.5, width + 0.5)
    ax.set_ylim(-_GIRDER_DEPTH - 1.0, _DECK_DEPTH + 1.0)
    ax.set_aspect("auto")
    ax.axis("off")
    fig.tight_layout()
    return fig
