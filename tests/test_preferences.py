import json

import pytest
from pydantic import ValidationError

from swisstime_visuals.preferences import AppSettings, ThemeMode, load_settings, save_settings

ZEITWERK = "Alpenglühen Zeitwerk"
LUCERNA = "Lucerna Roma"
KNOT = "Knot Urushi"
VOSTOK = "Vostok Military"


def test_defaults():
    settings = AppSettings()
    assert settings.selected_watch_names == frozenset()
    assert settings.selected_time_zone_id == "UTC"
    assert settings.use_us_time_format is True
    assert settings.use_double_tap_for_removal is False
    assert settings.theme_mode is ThemeMode.SYSTEM
    assert settings.water_effect_enabled is True
    assert settings.solar_reference_zone == "UTC"


def test_toggle_watch_adds_then_removes():
    settings = AppSettings()
    added, was_added = settings.toggle_watch(ZEITWERK)
    assert was_added is True
    assert added.is_watch_selected(ZEITWERK)
    # Updates return new objects
    assert not settings.is_watch_selected(ZEITWERK)

    removed, was_added = added.toggle_watch(ZEITWERK)
    assert was_added is False
    assert not removed.is_watch_selected(ZEITWERK)


def test_select_does_not_duplicate():
    settings = AppSettings().select_watch(LUCERNA).select_watch(LUCERNA)
    assert settings.selected_watch_names == frozenset({LUCERNA})
    assert settings.clear_selected_watches().selected_watch_names == frozenset()


def test_settings_are_immutable():
    settings = AppSettings()
    with pytest.raises(ValidationError):
        settings.use_us_time_format = False


def test_watch_time_zone_override():
    settings = AppSettings(selected_time_zone_id="Europe/Zurich")
    assert settings.watch_time_zone(ZEITWERK) == "Europe/Zurich"

    settings = settings.with_watch_time_zone(ZEITWERK, "Asia/Tokyo")
    assert settings.watch_time_zone(ZEITWERK) == "Asia/Tokyo"
    assert settings.watch_time_zone(LUCERNA) == "Europe/Zurich"

    settings = settings.clear_watch_time_zone(ZEITWERK)
    assert settings.watch_time_zone(ZEITWERK) == "Europe/Zurich"


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    settings = (AppSettings(theme_mode=ThemeMode.DARK, use_us_time_format=False)
                .select_watch(VOSTOK).select_watch(KNOT)
                .with_watch_time_zone(KNOT, "America/Chicago"))

    written = save_settings(settings, path)
    assert written == path
    payload = json.loads(path.read_text())
    assert payload["selected_watch_names"] == [KNOT, VOSTOK]
    assert payload["theme_mode"] == "Dark"

    loaded = load_settings(path)
    assert loaded.model_dump() == settings.model_dump()


def test_missing_file_yields_defaults(tmp_path):
    assert load_settings(tmp_path / "absent.json") == AppSettings()


def test_corrupt_file_yields_defaults(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    with caplog.at_level("WARNING"):
        assert load_settings(path) == AppSettings()
    assert "using defaults" in caplog.text


def test_invalid_values_yield_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"theme_mode": "Sepia"}))
    assert load_settings(path) == AppSettings()


def test_unknown_watch_is_rejected():
    settings = AppSettings()
    with pytest.raises(ValueError):
        settings.select_watch("Casio F-91W")
    with pytest.raises(ValueError):
        settings.toggle_watch("Casio F-91W")
    with pytest.raises(ValueError):
        settings.with_watch_time_zone("Casio F-91W", "Asia/Tokyo")


def test_selected_watches_in_catalog_order():
    settings = AppSettings().select_watch(VOSTOK).select_watch(ZEITWERK)
    assert [w.name for w in settings.selected_watches()] == [ZEITWERK, VOSTOK]


def test_load_drops_unknown_watches(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "selected_watch_names": [KNOT, "Retired Model"],
        "watch_time_zones": {KNOT: "Asia/Tokyo", "Retired Model": "Europe/Rome"},
        "theme_mode": "Dark",
    }))
    with caplog.at_level("WARNING"):
        loaded = load_settings(path)
    assert loaded.selected_watch_names == frozenset({KNOT})
    assert loaded.watch_time_zones == {KNOT: "Asia/Tokyo"}
    # The rest of the file is kept
    assert loaded.theme_mode is ThemeMode.DARK
    assert "Retired Model" in caplog.text


if __name__ == "__main__":
    pytest.main([__file__])
