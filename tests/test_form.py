"""Tests for the Basic Inputs form state."""
import pytest

from groupdesign.form import BasicInputsForm
from groupdesign.geometry import BridgeGeometry, GeometryError
from groupdesign.inputs import (
    OUT_OF_RANGE_MESSAGE, SKEW_MESSAGE, LocationMode, StructureType,
)
from groupdesign.location import LocationData


@pytest.fixture
def form():
    return BasicInputsForm()


class TestStructureType:

    def test_highway_enabled(self, form):
        assert form.structure_type == StructureType.HIGHWAY
        assert not form.disabled

    def test_other_disables_and_clears_errors(self, form):
        form.set_span(2)
        form.set_carriageway(60)
        assert form.errors
        form.set_structure_type("other")
        assert form.disabled
        assert form.errors == {}
        assert not form.can_modify_geometry


class TestFieldErrors:

    def test_span_error_set_and_cleared(self, form):
        form.set_span(120)
        assert form.errors["span"] == OUT_OF_RANGE_MESSAGE
        form.set_span(30)
        assert "span" not in form.errors
        assert form.span == 30

    def test_carriageway_error(self, form):
        form.set_carriageway(2.5)
        assert form.errors["carriageway"] == OUT_OF_RANGE_MESSAGE
        form.set_carriageway(None)
        assert form.errors["carriageway"] == OUT_OF_RANGE_MESSAGE
        form.set_carriageway(10)
        assert "carriageway" not in form.errors

    def test_skew_warning(self, form):
        form.set_skew_angle(30)
        assert form.errors["skew_angle"] == SKEW_MESSAGE
        form.set_skew_angle(15)
        assert "skew_angle" not in form.errors


class TestLocation:

    def test_load_states(self, form, source):
        form.load_states(source)
        assert [s.id for s in form.states] == ["MH", "DL"]

    def test_failed_states_lookup_keeps_list(self, form, source):
        form.load_states(source)
        source.fail = True
        form.load_states(source)
        assert len(form.states) == 2

    def test_select_state_loads_districts(self, form, source):
        form.select_state("MH", source)
        assert [d.id for d in form.districts] == ["MH-1", "MH-2"]
        assert form.selected_district is None

    def test_select_district_loads_data(self, form, source):
        form.select_state("MH", source)
        form.select_district("MH-1", source)
        assert form.location_data.zone_factor == pytest.approx(0.16)
        assert form.display_location_data is form.location_data

    def test_new_state_clears_district(self, form, source):
        form.select_state("MH", source)
        form.select_district("MH-1", source)
        form.select_state("DL", source)
        assert form.selected_district is None
        assert form.location_data is None
        assert [d.id for d in form.districts] == ["DL-1", "DL-2"]

    def test_failed_district_lookup_keeps_previous(self, form, source):
        form.select_state("MH", source)
        form.select_district("MH-1", source)
        previous = form.location_data
        source.fail = True
        form.select_state("DL", source)
        assert [d.id for d in form.districts] == ["MH-1", "MH-2"]
        assert form.location_data is previous

    def test_empty_state_does_not_query(self, form, source):
        form.select_state("", source)
        assert form.selected_state is None
        assert source.calls == []

    def test_switch_to_custom_clears_location(self, form, source):
        form.select_state("MH", source)
        form.select_district("MH-1", source)
        form.set_location_mode("custom")
        assert form.location_data is None
        assert form.selected_state is None
        assert form.selected_district is None
        assert form.display_location_data is None

    def test_switch_back_clears_custom(self, form):
        data = LocationData(basic_wind_speed=44, seismic_zone="IV", zone_factor=0.24,
                            max_shade_air_temp=45, min_shade_air_temp=5)
        form.set_location_mode(LocationMode.CUSTOM)
        form.show_location_popup = True
        form.apply_custom_location(data)
        assert form.display_location_data is data
        assert not form.show_location_popup
        form.set_location_mode("location")
        assert form.custom_location_data is None


class TestGeometryPopup:

    def test_requires_carriageway(self, form):
        assert not form.can_modify_geometry
        assert form.open_geometry_popup() is None
        assert not form.show_geometry_popup

    def test_blocked_by_carriageway_error(self, form):
        form.set_carriageway(60)
        assert form.open_geometry_popup() is None

    def test_open_seeds_draft(self, form):
        form.set_carriageway(10)
        draft = form.open_geometry_popup()
        assert form.show_geometry_popup
        assert draft.overall_width == 15
        assert draft.girder_spacing is None

    def test_reopen_seeds_saved_values(self, form):
        form.set_carriageway(10)
        form.apply_geometry(BridgeGeometry(10.0, 2.5, 6, 0.5))
        assert not form.show_geometry_popup
        draft = form.open_geometry_popup()
        assert (draft.girder_spacing, draft.num_girders, draft.deck_overhang) == (2.5, 6, 0.5)

    def test_edit_and_save(self, form):
        form.set_carriageway(10)
        draft = form.open_geometry_popup()
        draft.set_value("girder_spacing", 2.5)
        draft.set_value("deck_overhang", 0.5)
        draft.blur("deck_overhang")
        form.apply_geometry(draft.save())
        assert form.geometry.num_girders == 6
        assert form.summary()["geometry"]["overall_width"] == 15

    def test_invalid_save_keeps_saved_geometry(self, form):
        form.set_carriageway(10)
        saved = BridgeGeometry(10.0, 2.5, 6, 0.5)
        form.apply_geometry(saved)
        draft = form.open_geometry_popup()
        draft.set_value("num_girders", 1)
        with pytest.raises(GeometryError):
            draft.save()
        assert form.geometry is saved

    def test_cancel(self, form):
        form.set_carriageway(10)
        form.open_geometry_popup()
        form.close_geometry_popup()
        assert not form.show_geometry_popup
        assert form.geometry is None


def test_summary(form, source):
    form.set_span(30)
    form.select_state("MH", source)
    form.select_district("MH-2", source)
    summary = form.summary()
    assert summary["structure_type"] == "highway"
    assert summary["district"] == "MH-2"
    assert summary["location_data"]["seismic_zone"] == "III"
    assert summary["girder_steel"] == "E250"
    assert summary["geometry"] is None
