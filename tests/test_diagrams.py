"""Tests for the cross-section diagram."""
import matplotlib.pyplot as plt
import pytest

from groupdesign.geometry import BridgeGeometry
from ui.diagrams import draw_cross_section, girder_positions


def test_girder_positions():
    xs = girder_positions(BridgeGeometry(10.0, 2.5, 6, 0.5))
    assert list(xs) == pytest.approx([0.5, 3.0, 5.5, 8.0, 10.5, 13.0])


@pytest.mark.parametrize("geometry, carriageway", [
    (BridgeGeometry(10.0, 2.5, 6, 0.5), 10.0),
    (None, 7.5),
    (None, None),
])
def test_draw_returns_figure(geometry, carriageway):
    fig = draw_cross_section(geometry, carriageway)
    assert isinstance(fig, plt.Figure)
    assert fig.axes
    plt.close(fig)
