"""
Auto-Clicker Engine - the click loop.

SRP: This class has one responsibility - clicking at the pointer until told
to stop or until the user moves the pointer away. It knows nothing about run
budgets, hotkeys or the command line.
"""

import threading
from typing import Optional, Callable

from cancellation import CancellationSignal
from display import PointerDisplay
from errors import ClickerError
from logger import StatusLogger
from models import ClickConfiguration, PointerPosition


DoneCallback = Callable[[bool, str], None]


class AutoClickerEngine:
    """
    Clicks at the current pointer location on a worker thread.

    The worker owns the display connection for its whole lifetime. It stops
    when the shared signal reads "stop" or when the pointer drifts past the
    stop threshold, and always leaves the signal in "stop" when it exits.
    """

    def __init__(
        self,
        signal: CancellationSignal,
        configuration: Optional[ClickConfiguration] = None,
        connect: Callable[[], PointerDisplay] = PointerDisplay.connect,
        logger: Optional[StatusLogger] = None,
    ):
        """
        Initialize the engine.

        Args:
            signal: Stop flag shared with the supervisor
            configuration: Click delay and movement tolerance
            connect: Factory opening the display connection, called on the worker thread
            logger: Receives diagnostics and the run outcome
        """
        self._signal = signal
        self._config = configuration or ClickConfiguration()
        self._connect = connect
        self._logger = logger or StatusLogger()
        self._worker_thread: Optional[threading.Thread] = None
        self._clicks_executed = 0
        self._done_callback: Optional[DoneCallback] = None

    def register_done_callback(self, callback: DoneCallback) -> None:
        """
        Register a callback receiving ``(ok, message)`` when the worker finishes.

        ``message`` is ``"clicked N times"`` on success and the error text on failure.
        """
        self._done_callback = callback

    def start(self) -> bool:
        """
        Start the click loop in a separate thread.

        Returns:
            bool: True if started, False if the worker is already running
        """
        if self.is_alive():
            self._logger.log_warning("Click loop already running")
            return False

        self._clicks_executed = 0
        self._worker_thread = threading.Thread(
            target=self._click_worker, name="click-loop", daemon=True
        )
        self._worker_thread.start()
        return True

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for the worker thread to finish."""
        if self._worker_thread is not None:
            self._worker_thread.join(timeout)

    def is_alive(self) -> bool:
        return bool(self._worker_thread and self._worker_thread.is_alive())

    def get_clicks_executed(self) -> int:
        """Returns the number of clicks issued so far in the current run."""
        return self._clicks_executed

    def run(self) -> int:
        """
        Click until stopped and return the number of clicks.

        A click always happens before the movement check that may end the
        loop, so the count equals the number of press/release pairs sent.

        Raises:
            ClickerError: connection, root screen or pointer query failed
        """
        display = self._connect()
        delay = self._config.get_delay_between_clicks()
        threshold = self._config.stop_threshold

        pointer_start = display.pointer_position()
        self._logger.log_debug(f"pointer at {pointer_start}")

        clicked = 0
        while self._signal.is_running():
            clicked += 1
            self._clicks_executed = clicked
            display.click()

            # Throttles the display server and sets the movement sampling rate.
            self._signal.wait(delay)

            position = display.pointer_position()
            if self._is_pointer_moved(pointer_start, position, threshold):
                self._logger.log_debug(f"moved to {position}")
                break

        return clicked

    @staticmethod
    def _is_pointer_moved(start: PointerPosition, current: PointerPosition, threshold: int) -> bool:
        return current.has_moved_from(start, threshold)

    def _click_worker(self) -> None:
        try:
            clicked = self.run()
        except ClickerError as e:
            self._logger.log_error(str(e))
            self._notify_done(False, str(e))
        except Exception as e:
            self._logger.log_error(f"Error: {e}")
            self._notify_done(False, f"Error: {e}")
        else:
            self._logger.log_info(f"Completed. Total clicks: {clicked}")
            self._notify_done(True, f"clicked {clicked} times")
        finally:
            # Wake the supervisor if it is still waiting.
            self._signal.request_stop()

    def _notify_done(self, ok: bool, message: str) -> None:
        if self._done_callback:
            self._done_callback(ok, message)
