"""
Main entry point for the Pointer Clicker application.

Usage:
    pointer-clicker [SECONDS]

Clicks at the pointer for SECONDS seconds, or until the pointer is moved
when no (valid) duration is given.
"""

from __future__ import annotations

import sys
from typing import Callable, List, Optional, TextIO

from cancellation import CancellationSignal
from clicker_engine import AutoClickerEngine
from display import PointerDisplay
from hotkey_manager import HotkeyManager
from logger import StatusLogger
from models import ApplicationSettings, ClickConfiguration
from settings_manager import SettingsManager
from supervisor import ShutdownSupervisor, parse_run_budget


def run_clicker(
    args: List[str],
    settings: ApplicationSettings,
    configuration: Optional[ClickConfiguration] = None,
    connect: Callable[[], PointerDisplay] = PointerDisplay.connect,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    enable_hotkey: bool = True,
) -> int:
    """Wire up one run and block until it has fully stopped."""
    out = stdout or sys.stdout
    err = stderr or sys.stderr

    if settings.debug_output_enabled:
        logger = StatusLogger(echo_stream=err, echo_level="DEBUG")
    else:
        logger = StatusLogger(echo_stream=err, echo_level="WARNING")

    signal = CancellationSignal()
    configuration = configuration or ClickConfiguration()
    engine = AutoClickerEngine(signal, configuration, connect=connect, logger=logger)

    outcome = {"ok": False}

    def on_done(ok: bool, message: str) -> None:
        outcome["ok"] = ok
        # Failures already reach stderr through the logger.
        if ok:
            print(message, file=out, flush=True)

    engine.register_done_callback(on_done)

    hotkeys = HotkeyManager(settings.stop_hotkey, logger=logger)
    hotkeys.register_stop_callback(signal.request_stop)
    if enable_hotkey:
        hotkeys.enable_hotkeys()

    supervisor = ShutdownSupervisor(
        engine,
        signal,
        run_budget=parse_run_budget(args),
        poll_seconds=configuration.get_delay_between_clicks(),
        logger=logger,
    )
    try:
        supervisor.run()
    finally:
        hotkeys.disable_hotkeys()

    if settings.log_export_path:
        logger.export_logs_to_file(settings.log_export_path)

    return 0 if outcome["ok"] else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Application entry point."""
    args = sys.argv[1:] if argv is None else argv
    settings = SettingsManager(logger=StatusLogger(echo_stream=sys.stderr)).load()
    return run_clicker(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
