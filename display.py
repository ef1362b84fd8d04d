"""
Display access for the click loop: pointer query and click injection.

pynput drives the pointer (position reads, press/release of the left
button); pyautogui resolves the root screen. Both talk to the display server
as blocking calls and are imported lazily, because importing them without a
reachable display already fails.
"""

from __future__ import annotations

from typing import Any, Tuple

from errors import ConnectionFailure, NoRootScreen, PointerQueryFailure
from models import PointerPosition


class PointerDisplay:
    """
    A live connection to the display server, owned by the click worker.

    Only the thread that created the connection should use it.
    """

    def __init__(self, controller: Any, button: Any, screen_size: Tuple[int, int]):
        self._controller = controller
        self._button = button
        self._screen_size = screen_size

    @classmethod
    def connect(cls) -> "PointerDisplay":
        """
        Open the connection and resolve the root screen.

        Raises:
            ConnectionFailure: the pointer backend cannot reach the display
            NoRootScreen: the display reports no usable screen
        """
        try:
            from pynput.mouse import Controller as MouseController, Button as MouseButton  # type: ignore
            controller = MouseController()
        except Exception as e:
            raise ConnectionFailure(cause=e)

        return cls(controller, MouseButton.left, _resolve_root_screen())

    @property
    def screen_size(self) -> Tuple[int, int]:
        return self._screen_size

    def pointer_position(self) -> PointerPosition:
        """Read the current pointer coordinates."""
        try:
            return PointerPosition.from_tuple(self._controller.position)
        except Exception as e:
            raise PointerQueryFailure(cause=e)

    def click(self) -> None:
        """Press and release the left button where the pointer is now."""
        # The backend flushes each event to the server before returning.
        self._controller.press(self._button)
        self._controller.release(self._button)


def _resolve_root_screen() -> Tuple[int, int]:
    try:
        import pyautogui  # local import, needs a display
        width, height = pyautogui.size()
    except Exception as e:
        raise NoRootScreen(cause=e)
    if width <= 0 or height <= 0:
        raise NoRootScreen()
    return int(width), int(height)
