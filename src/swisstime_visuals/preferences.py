"""
User preferences: watch selection, time zones, display options.

Settings are an explicit value passed to whoever needs them. Updates return new
objects, and load/save are plain functions over a JSON file.
"""
from enum import Enum
import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from swisstime_visuals import constants
from swisstime_visuals.watches import ALL_WATCHES, is_known_watch, require_watch

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".swisstime" / "settings.json"


class ThemeMode(str, Enum):
    """Color theme preference"""
    LIGHT = "Light"
    DARK = "Dark"
    SYSTEM = "System"


class AppSettings(BaseModel):
    """Persisted application preferences."""

    selected_watch_names: frozenset[str] = Field(default_factory=frozenset)
    selected_time_zone_id: str = "UTC"
    use_us_time_format: bool = True
    use_double_tap_for_removal: bool = False
    theme_mode: ThemeMode = ThemeMode.SYSTEM
    watch_time_zones: dict[str, str] = Field(default_factory=dict)
    water_effect_enabled: bool = True
    solar_reference_zone: str = constants.DEFAULT_REFERENCE_ZONE

    model_config = {"frozen": True}

    @field_validator("selected_watch_names")
    @classmethod
    def drop_unknown_watches(cls, names):
        unknown = sorted(n for n in names if not is_known_watch(n))
        if unknown:
            logger.warning("Ignoring unknown watches in settings: %s", ", ".join(unknown))
        return frozenset(n for n in names if is_known_watch(n))

    @field_validator("watch_time_zones")
    @classmethod
    def drop_unknown_watch_zones(cls, zones):
        return {name: zone for name, zone in zones.items() if is_known_watch(name)}

    # Watch selection

    def is_watch_selected(self, name: str) -> bool:
        return name in self.selected_watch_names

    def selected_watches(self):
        """Selected catalog entries in catalog order."""
        return [watch for watch in ALL_WATCHES if watch.name in self.selected_watch_names]

    def select_watch(self, name: str) -> "AppSettings":
        """Raises ValueError for names not in the catalog."""
        require_watch(name)
        return self.model_copy(update={"selected_watch_names": self.selected_watch_names | {name}})

    def deselect_watch(self, name: str) -> "AppSettings":
        return self.model_copy(update={"selected_watch_names": self.selected_watch_names - {name}})

    def toggle_watch(self, name: str) -> tuple["AppSettings", bool]:
        """Returns the updated settings and whether the watch is now selected."""
        require_watch(name)
        if self.is_watch_selected(name):
            return self.deselect_watch(name), False
        return self.select_watch(name), True

    def clear_selected_watches(self) -> "AppSettings":
        return self.model_copy(update={"selected_watch_names": frozenset()})

    # Per-watch time zones

    def watch_time_zone(self, name: str) -> str:
        """Zone override for a watch, or the globally selected zone."""
        return self.watch_time_zones.get(name, self.selected_time_zone_id)

    def with_watch_time_zone(self, name: str, time_zone_id: str) -> "AppSettings":
        require_watch(name)
        zones = dict(self.watch_time_zones)
        zones[name] = time_zone_id
        return self.model_copy(update={"watch_time_zones": zones})

    def clear_watch_time_zone(self, name: str) -> "AppSettings":
        zones = {k: v for k, v in self.watch_time_zones.items() if k != name}
        return self.model_copy(update={"watch_time_zones": zones})


def load_settings(path=None) -> AppSettings:
    """
    Load settings from a JSON file.

    Missing files yield defaults; unreadable or invalid files yield defaults
    and a warning.
    """
    path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    if not path.exists():
        return AppSettings()
    try:
        return AppSettings.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError, json.JSONDecodeError) as e:
        logger.warning("Could not read settings from %s (%s), using defaults", path, e)
        return AppSettings()


def save_settings(settings: AppSettings, path=None) -> Path:
    """
    Write settings as JSON, creating parent directories.

    Returns:
        The path written
    """
    path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = settings.model_dump(mode="json")
    payload["selected_watch_names"] = sorted(payload["selected_watch_names"])
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path
