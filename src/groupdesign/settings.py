"""Application settings for Group Design.

Settings are read from ``config/settings.yaml`` in the project layout; any
key missing from the file takes its default.  Also configures logging.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field

from .location import ApiLocationSource, CatalogueLocationSource, LocationSource


CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"


class Settings(BaseModel):
    """Runtime configuration."""
    api_base_url: str = "http://localhost:8000/api"
    request_timeout: float = Field(default=10.0, gt=0, description="Seconds per lookup request")
    location_source: Literal["api", "catalogue"] = "catalogue"
    catalogue_file: str = "locations.yaml"
    log_level: str = "INFO"
    config_dir: Path = CONFIG_DIR

    @property
    def catalogue_path(self) -> Path:
        path = Path(self.catalogue_file)
        return path if path.is_absolute() else self.config_dir / path

    def location_source_factory(self) -> LocationSource:
        if self.location_source == "api":
            return ApiLocationSource(self.api_base_url, timeout=self.request_timeout)
        return CatalogueLocationSource(self.catalogue_path)


_settings_cache: Optional[Settings] = None


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from *path* (default ``config/settings.yaml``).

    The default file is cached so repeated calls do not re-read from disk.
    A missing default file yields the built-in defaults.
    """
    global _settings_cache
    if path is None and _settings_cache is not None:
        return _settings_cache

    config_path = Path(path) if path is not None else CONFIG_DIR / "settings.yaml"
    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    elif path is not None:
        raise FileNotFoundError(f"settings file not found: {config_path}")

    data.setdefault("config_dir", config_path.resolve().parent)
    settings = Settings(**data)
    if path is None:
        _settings_cache = settings
    return settings


def _clear_settings_cache() -> None:
    """Reset the internal cache (useful in tests)."""
    global _settings_cache
    _settings_cache = None


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
