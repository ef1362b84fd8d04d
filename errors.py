"""
Failure kinds reported by the click loop.

Every failure is fatal to the click loop only. The optional ``cause`` keeps the
lower-level error from the display backend for diagnostic display.
"""

from __future__ import annotations

from typing import Optional


class ClickerError(Exception):
    """Base class for all click loop failures."""

    default_message = "click loop failed"

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None):
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class ConnectionFailure(ClickerError):
    """The display server could not be reached."""

    default_message = "cannot connect to display"


class NoRootScreen(ClickerError):
    """The display server advertises no usable root screen."""

    default_message = "no root screen available"


class PointerQueryFailure(ClickerError):
    """Reading the pointer coordinates failed."""

    default_message = "pointer query failed"
