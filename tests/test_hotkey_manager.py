"""Tests for hotkey_manager — hotkey parsing and registration guards."""
import pytest

from hotkey_manager import HotkeyManager


class TestHotkeyParsing:
    @pytest.mark.parametrize("raw, expected", [
        ("F7", "<f7>"),
        ("ctrl+shift+q", "<ctrl>+<shift>+q"),
        ("Control + Alt + X", "<ctrl>+<alt>+x"),
        ("esc", "<esc>"),
        ("cmd q", "<cmd>+q"),
    ])
    def test_to_pynput_hotkey(self, raw, expected):
        assert HotkeyManager()._to_pynput_hotkey(raw) == expected

    @pytest.mark.parametrize("raw", ["", "  + ", "ctrl+banana"])
    def test_invalid_hotkeys(self, raw):
        with pytest.raises(ValueError):
            HotkeyManager()._to_pynput_hotkey(raw)


class TestRegistration:
    def test_empty_hotkey_disables_registration(self):
        manager = HotkeyManager("")
        manager.register_stop_callback(lambda: None)
        assert manager.enable_hotkeys() is False
        assert not manager.is_registered()

    def test_requires_callback(self):
        assert HotkeyManager("F7").enable_hotkeys() is False

    def test_invalid_hotkey_is_a_warning(self):
        manager = HotkeyManager("ctrl+banana")
        manager.register_stop_callback(lambda: None)
        assert manager.enable_hotkeys() is False

    def test_disable_when_not_registered_is_noop(self):
        manager = HotkeyManager()
        manager.disable_hotkeys()
        assert not manager.is_registered()
