"""Shared test fixtures."""
import sys
from pathlib import Path
from typing import Iterable, List, Optional

import pytest

# Ensure project root is on sys.path so the flat modules import
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from errors import PointerQueryFailure  # noqa: E402
from models import PointerPosition  # noqa: E402


class FakeDisplay:
    """Scripted stand-in for PointerDisplay.

    ``positions`` are returned by successive pointer queries; the last one
    repeats once the script runs out. ``fail_on_query`` makes that query
    (0-based) raise PointerQueryFailure.
    """

    def __init__(self, positions: Iterable[tuple] = ((100, 100),), fail_on_query: Optional[int] = None):
        self._positions: List[PointerPosition] = [PointerPosition(x, y) for x, y in positions]
        self._fail_on_query = fail_on_query
        self.queries = 0
        self.events: List[str] = []

    def pointer_position(self) -> PointerPosition:
        index = self.queries
        self.queries += 1
        if self._fail_on_query is not None and index == self._fail_on_query:
            raise PointerQueryFailure(cause=RuntimeError("BadWindow"))
        return self._positions[min(index, len(self._positions) - 1)]

    def click(self) -> None:
        self.events.append("press")
        self.events.append("release")

    @property
    def clicks(self) -> int:
        return self.events.count("press")


@pytest.fixture
def fake_display():
    return FakeDisplay()
