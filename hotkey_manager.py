"""Global stop hotkey built on top of pynput."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from logger import StatusLogger


class HotkeyManager:
    """Registers a single global hotkey that ends the current run."""

    _SPECIAL_KEY_ALIASES: Dict[str, str] = {
        "ctrl": "ctrl",
        "control": "ctrl",
        "alt": "alt",
        "shift": "shift",
        "win": "cmd",
        "cmd": "cmd",
        "command": "cmd",
        "option": "alt",
        "super": "cmd",
        "esc": "esc",
        "escape": "esc",
    }

    def __init__(self, stop_hotkey: str = "F7", logger: Optional[StatusLogger] = None) -> None:
        self._stop_hotkey = stop_hotkey
        self._stop_callback: Optional[Callable[[], None]] = None
        self._listener: Optional[object] = None
        self._is_registered = False
        self._logger = logger or StatusLogger()

    def register_stop_callback(self, callback: Callable[[], None]) -> None:
        self._stop_callback = callback

    def is_registered(self) -> bool:
        return self._is_registered

    def enable_hotkeys(self) -> bool:
        if self._is_registered:
            return True

        if not self._stop_hotkey or self._stop_callback is None:
            return False

        try:
            hotkey = self._to_pynput_hotkey(self._stop_hotkey)
        except ValueError as exc:
            self._logger.log_warning(f"Invalid hotkey definition: {exc}")
            return False

        try:
            from pynput import keyboard  # type: ignore
            self._listener = keyboard.GlobalHotKeys({hotkey: self._stop_callback})
            self._listener.start()
        except Exception as exc:  # pragma: no cover - system specific
            self._logger.log_warning(f"Failed to register stop hotkey: {exc}")
            self._listener = None
            self._is_registered = False
            return False

        self._is_registered = True
        self._logger.log_debug(f"stop hotkey {self._stop_hotkey} registered")
        return True

    def disable_hotkeys(self) -> None:
        if not self._is_registered:
            return

        if self._listener is not None:
            try:
                self._listener.stop()  # type: ignore[attr-defined]
            except Exception as exc:  # pragma: no cover - system specific
                self._logger.log_warning(f"Failed to stop hotkey listener: {exc}")
            self._listener = None

        self._is_registered = False

    def get_stop_hotkey(self) -> str:
        return self._stop_hotkey

    def _to_pynput_hotkey(self, hotkey: str) -> str:
        if not hotkey:
            raise ValueError("Empty hotkey string")

        tokens = [token.strip() for token in hotkey.replace("+", " ").split() if token.strip()]
        if not tokens:
            raise ValueError("Hotkey contains no tokens")

        parsed: list[str] = []
        for token in tokens:
            lower_token = token.lower()

            if lower_token in self._SPECIAL_KEY_ALIASES:
                parsed.append(f"<{self._SPECIAL_KEY_ALIASES[lower_token]}>")
                continue

            if lower_token.startswith("f") and lower_token[1:].isdigit():
                parsed.append(f"<{lower_token}>")
                continue

            if len(lower_token) == 1:
                parsed.append(lower_token)
                continue

            raise ValueError(f"Unknown key: {token}")

        return "+".join(parsed)
