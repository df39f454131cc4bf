import pytest

from swisstime_visuals.watches import (
    ALL_WATCHES,
    WatchFaceType,
    WatchInfo,
    find_watch,
    is_known_watch,
    require_watch,
    watch_names,
)


def test_catalog_covers_every_face_once():
    """Each face type backs exactly one watch, and names are unique."""
    assert len(ALL_WATCHES) == len(WatchFaceType) == 19
    assert {w.face_type for w in ALL_WATCHES} == set(WatchFaceType)
    assert len(set(watch_names())) == len(ALL_WATCHES)


def test_face_display_name_matches_watch_name():
    for watch in ALL_WATCHES:
        assert watch.face_type.display_name == watch.name
        assert watch.description


def test_lookup():
    watch = find_watch("Roma Marina")
    assert watch.face_type is WatchFaceType.ROMA_MARINA
    assert find_watch("山の時").face_type is WatchFaceType.YAMA_NO_TOKI
    assert find_watch("roma marina") is None
    assert is_known_watch("Грань Секунды")
    assert not is_known_watch("")


def test_require_watch_raises_for_unknown():
    assert require_watch("Vostok Military").face_type is WatchFaceType.VOSTOK
    with pytest.raises(ValueError):
        require_watch("Vostok Amphibia")


def test_identity_is_the_name():
    original = find_watch("Knot Urushi")
    renamed_copy = WatchInfo(name="Knot Urushi", description="", face_type=WatchFaceType.KNOT_URUSHI)
    assert original == renamed_copy
    assert len({original, renamed_copy}) == 1


def test_face_type_round_trips_through_value():
    assert WatchFaceType("Alpenglühen Zeitwerk") is WatchFaceType.ZEITWERK


if __name__ == "__main__":
    pytest.main([__file__])
