"""
Domain models for the Pointer Clicker application.
Each class follows the Single Responsibility Principle (SRP).
"""

from enum import Enum
from dataclasses import dataclass
from typing import Tuple, Dict, Any


DEFAULT_CLICK_DELAY_MS = 300
DEFAULT_STOP_THRESHOLD = 30


class ClickerState(Enum):
    """Lifecycle of a run, as seen by the supervisor."""
    RUNNING = "running"
    STOPPING = "stopping"
    JOINED = "joined"


@dataclass(frozen=True)
class PointerPosition:
    """Pointer coordinates in screen space, in display pixels."""
    x: int
    y: int

    def to_tuple(self) -> Tuple[int, int]:
        """Returns position as a tuple for compatibility with mouse libraries."""
        return (self.x, self.y)

    def displacement_from(self, reference: "PointerPosition") -> Tuple[int, int]:
        """Horizontal and vertical offset of this position from ``reference``."""
        return (self.x - reference.x, self.y - reference.y)

    def has_moved_from(self, reference: "PointerPosition", threshold: int) -> bool:
        """
        Check whether the pointer left the tolerance box around ``reference``.

        Each axis is compared on its own, so a diagonal move that stays under
        the threshold on both axes does not count as movement.
        """
        dx, dy = self.displacement_from(reference)
        return abs(dx) >= threshold or abs(dy) >= threshold

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"

    @staticmethod
    def from_tuple(raw: Tuple[Any, Any]) -> "PointerPosition":
        """Create a PointerPosition from an (x, y) pair as returned by pynput."""
        x_raw, y_raw = raw
        return PointerPosition(x=int(x_raw), y=int(y_raw))


@dataclass
class ClickConfiguration:
    """
    Timing and movement tolerance for the click loop.

    Validation lives here so the engine can trust its inputs.
    """
    click_delay_ms: int = DEFAULT_CLICK_DELAY_MS
    stop_threshold: int = DEFAULT_STOP_THRESHOLD

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.click_delay_ms <= 0:
            raise ValueError("Click delay must be positive")

        if self.stop_threshold <= 0:
            raise ValueError("Stop threshold must be positive")

    def get_delay_between_clicks(self) -> float:
        """Delay between clicks in seconds."""
        return self.click_delay_ms / 1000.0


@dataclass
class ApplicationSettings:
    """User preferences read at startup. Click timing is not configurable."""

    stop_hotkey: str = "F7"
    debug_output_enabled: bool = False
    log_export_path: str | None = None

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ApplicationSettings":
        """Create settings instance from JSON dictionary."""
        hotkey_raw = data.get("stop_hotkey", "F7")
        export_raw = data.get("log_export_path")

        return ApplicationSettings(
            stop_hotkey=str(hotkey_raw) if hotkey_raw is not None else "",
            debug_output_enabled=_parse_flag(data.get("debug_output_enabled", False)),
            log_export_path=str(export_raw) if export_raw not in (None, "") else None,
        )


_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def _parse_flag(value: Any) -> bool:
    """Read a JSON flag, accepting booleans, 0/1 and the usual spellings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    if value is None:
        return False
    raise ValueError(f"Not a flag value: {value!r}")
