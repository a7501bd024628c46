"""Tests for settings loading and location source selection."""
import pytest
from pydantic import ValidationError

from groupdesign.location import ApiLocationSource, CatalogueLocationSource
from groupdesign.settings import Settings, _clear_settings_cache, load_settings


@pytest.fixture(autouse=True)
def fresh_cache():
    _clear_settings_cache()
    yield
    _clear_settings_cache()


def test_defaults():
    settings = Settings()
    assert settings.api_base_url == "http://localhost:8000/api"
    assert settings.request_timeout == 10.0
    assert settings.location_source == "catalogue"


def test_bundled_settings_use_catalogue(catalogue_path):
    settings = load_settings()
    source = settings.location_source_factory()
    assert isinstance(source, CatalogueLocationSource)
    assert source.path == catalogue_path.resolve()
    assert load_settings() is settings


def test_api_source(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "api_base_url: http://backend:9000/api\n"
        "request_timeout: 3\n"
        "location_source: api\n",
        encoding="utf-8",
    )
    source = load_settings(path).location_source_factory()
    assert isinstance(source, ApiLocationSource)
    assert source.base_url == "http://backend:9000/api"
    assert source.timeout == 3


def test_catalogue_relative_to_settings_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("catalogue_file: regions.yaml\n", encoding="utf-8")
    assert load_settings(path).catalogue_path == tmp_path.resolve() / "regions.yaml"


def test_missing_explicit_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_timeout_must_be_positive(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("request_timeout: 0\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_settings(path)


def test_unknown_source_rejected():
    with pytest.raises(ValidationError):
        Settings(location_source="database")
