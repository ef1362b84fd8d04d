"""
Shutdown supervisor - owns the run budget and the final teardown.

Runs on the main thread: starts the click loop, waits according to the run
budget, then stops the loop and joins it so no click is injected after the
process reports completion.
"""

from __future__ import annotations

from typing import Optional, Sequence

from cancellation import CancellationSignal
from clicker_engine import AutoClickerEngine
from logger import StatusLogger
from models import ClickerState


DEFAULT_TICK_SECONDS = 1.0


def parse_run_budget(args: Sequence[str]) -> Optional[int]:
    """
    Read the run budget in seconds from the first argument.

    Only a plain ASCII digit string (optionally with a leading "+") counts.
    Missing, unparseable or zero input means "unbounded" and yields None.
    """
    if not args:
        return None
    raw = args[0]
    digits = raw[1:] if raw.startswith("+") else raw
    if not (digits.isascii() and digits.isdigit()):
        return None
    budget = int(digits)
    return budget if budget > 0 else None


class ShutdownSupervisor:
    """Decides how long clicking may run and forces termination."""

    def __init__(
        self,
        engine: AutoClickerEngine,
        signal: CancellationSignal,
        run_budget: Optional[int] = None,
        poll_seconds: float = 0.3,
        tick_seconds: float = DEFAULT_TICK_SECONDS,
        logger: Optional[StatusLogger] = None,
    ) -> None:
        self._engine = engine
        self._signal = signal
        self._run_budget = run_budget if run_budget and run_budget > 0 else None
        self._poll_seconds = poll_seconds
        self._tick_seconds = tick_seconds
        self._logger = logger or StatusLogger()
        self._state = ClickerState.RUNNING
        self._ticks_elapsed = 0

    @property
    def state(self) -> ClickerState:
        return self._state

    @property
    def ticks_elapsed(self) -> int:
        """Budget ticks that have passed; stays 0 in unbounded mode."""
        return self._ticks_elapsed

    def run(self) -> None:
        """Start the click loop, wait, stop it and wait for it to finish."""
        self._engine.start()

        try:
            if self._run_budget is not None:
                self._wait_for_budget(self._run_budget)
            else:
                self._wait_for_stop()
        except KeyboardInterrupt:
            self._logger.log_info("Interrupted, stopping")

        self._state = ClickerState.STOPPING
        self._signal.request_stop()

        self._join_click_loop()
        self._state = ClickerState.JOINED

    def _join_click_loop(self) -> None:
        # The signal already reads "stop", so the worker ends within one
        # click delay; a second Ctrl+C must not abandon it mid-click.
        while True:
            try:
                self._engine.join()
                return
            except KeyboardInterrupt:
                self._logger.log_info("Waiting for the click loop to finish")
            except RuntimeError as e:
                self._logger.log_warning(f"Could not join click loop: {e}")
                return

    def _wait_for_budget(self, budget: int) -> None:
        self._logger.log_debug(f"click {budget} seconds")
        remaining = budget
        while remaining > 0 and self._signal.is_running():
            self._signal.wait(self._tick_seconds)
            remaining -= 1
            self._ticks_elapsed += 1

    def _wait_for_stop(self) -> None:
        self._logger.log_debug("click until pointer moved")
        while self._signal.is_running():
            self._signal.wait(self._poll_seconds)
