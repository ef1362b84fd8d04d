"""Tests for models — pointer movement, click configuration and settings."""
import pytest

from models import (
    ApplicationSettings,
    ClickConfiguration,
    PointerPosition,
)


START = PointerPosition(100, 100)


class TestPointerMovement:
    def test_just_under_threshold_does_not_stop(self):
        assert not PointerPosition(129, 100).has_moved_from(START, 30)

    def test_exactly_threshold_stops(self):
        assert PointerPosition(130, 100).has_moved_from(START, 30)

    @pytest.mark.parametrize("dx, dy", [(0, 0), (29, 29), (-29, -29), (29, -29), (-29, 0), (0, 29)])
    def test_within_box_never_stops(self, dx, dy):
        assert not PointerPosition(100 + dx, 100 + dy).has_moved_from(START, 30)

    @pytest.mark.parametrize("dx, dy", [(30, 0), (-30, 0), (0, 30), (0, -30), (31, 2), (-5, -100)])
    def test_either_axis_past_threshold_stops(self, dx, dy):
        assert PointerPosition(100 + dx, 100 + dy).has_moved_from(START, 30)

    def test_diagonal_is_not_combined_magnitude(self):
        # |(25, 25)| is ~35 but neither axis reaches 30
        assert not PointerPosition(125, 125).has_moved_from(START, 30)

    def test_displacement_is_signed(self):
        assert PointerPosition(90, 120).displacement_from(START) == (-10, 20)

    def test_from_tuple_truncates_floats(self):
        assert PointerPosition.from_tuple((10.7, -3.2)) == PointerPosition(10, -3)

    def test_str(self):
        assert str(PointerPosition(5, -7)) == "5, -7"


class TestClickConfiguration:
    def test_defaults(self):
        config = ClickConfiguration()
        assert config.click_delay_ms == 300
        assert config.stop_threshold == 30
        assert config.get_delay_between_clicks() == pytest.approx(0.3)

    @pytest.mark.parametrize("delay", [0, -1])
    def test_rejects_non_positive_delay(self, delay):
        with pytest.raises(ValueError):
            ClickConfiguration(click_delay_ms=delay)

    def test_rejects_non_positive_threshold(self):
        with pytest.raises(ValueError):
            ClickConfiguration(stop_threshold=0)


class TestApplicationSettings:
    def test_defaults(self):
        settings = ApplicationSettings()
        assert settings.stop_hotkey == "F7"
        assert settings.debug_output_enabled is False
        assert settings.log_export_path is None

    def test_from_dict_fills_missing_keys(self):
        settings = ApplicationSettings.from_dict({"log_export_path": "run.log"})
        assert settings.log_export_path == "run.log"
        assert settings.stop_hotkey == "F7"

    def test_timing_keys_are_ignored(self):
        settings = ApplicationSettings.from_dict({"click_delay_ms": 5, "stop_threshold": 1})
        assert settings == ApplicationSettings()

    def test_empty_or_null_hotkey_disables(self):
        assert ApplicationSettings.from_dict({"stop_hotkey": ""}).stop_hotkey == ""
        assert ApplicationSettings.from_dict({"stop_hotkey": None}).stop_hotkey == ""

    def test_empty_export_path_is_none(self):
        assert ApplicationSettings.from_dict({"log_export_path": ""}).log_export_path is None

    @pytest.mark.parametrize("raw, expected", [
        (True, True), (False, False), ("true", True), ("false", False),
        ("FALSE", False), ("yes", True), ("off", False), (1, True), (0, False), (None, False),
    ])
    def test_debug_flag_spellings(self, raw, expected):
        settings = ApplicationSettings.from_dict({"debug_output_enabled": raw})
        assert settings.debug_output_enabled is expected

    @pytest.mark.parametrize("raw", ["maybe", [1], {"on": True}])
    def test_unreadable_debug_flag(self, raw):
        with pytest.raises(ValueError):
            ApplicationSettings.from_dict({"debug_output_enabled": raw})
