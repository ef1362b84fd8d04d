"""Shared stop flag between the click worker and the supervisor."""

from __future__ import annotations

import threading
from typing import Optional


class CancellationSignal:
    """
    One-way flag: created "running", moved to "stop" exactly once.

    Both threads may request a stop; repeated requests are no-ops. There is no
    way to go back to "running", so readers never see the flag flip back.
    """

    def __init__(self) -> None:
        self._stopped = threading.Event()

    def is_running(self) -> bool:
        return not self._stopped.is_set()

    def is_stopped(self) -> bool:
        return self._stopped.is_set()

    def request_stop(self) -> None:
        self._stopped.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Sleep for up to ``timeout`` seconds, waking early on a stop request.

        Returns:
            bool: True if the signal reads "stop" when the wait ends
        """
        return self._stopped.wait(timeout)

    def __repr__(self) -> str:
        state = "stop" if self.is_stopped() else "running"
        return f"CancellationSignal({state})"
