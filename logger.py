"""
Status Logger - tracks what the clicker and the supervisor report during a run.

SRP: This class has one responsibility - logging and status management.
"""

import threading
from datetime import datetime
from typing import List, Optional, TextIO
from dataclasses import dataclass


LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


@dataclass
class LogEntry:
    """A single log entry."""
    timestamp: datetime
    message: str
    level: str = "INFO"

    def __str__(self) -> str:
        time_str = self.timestamp.strftime("%H:%M:%S")
        return f"[{time_str}] {self.level}: {self.message}"


class StatusLogger:
    """
    Keeps a bounded log history and optionally echoes entries to a stream.

    Both the click worker and the supervisor write to the same logger, so
    history updates are guarded by a lock.
    """

    def __init__(
        self,
        max_entries: int = 100,
        echo_stream: Optional[TextIO] = None,
        echo_level: str = "WARNING",
    ):
        """
        Initialize the logger.

        Args:
            max_entries: Maximum number of log entries to keep in memory
            echo_stream: Stream that receives entries at or above ``echo_level``
            echo_level: Minimum level that gets echoed
        """
        if echo_level not in LEVELS:
            raise ValueError(f"Unknown log level: {echo_level}")
        self._log_entries: List[LogEntry] = []
        self._max_entries = max_entries
        self._echo_stream = echo_stream
        self._echo_level = echo_level
        self._current_status = "Ready"
        self._lock = threading.Lock()

    def log_debug(self, message: str) -> None:
        """Log a diagnostic message, echoed only in debug mode."""
        self._add_entry(message, "DEBUG")

    def log_info(self, message: str) -> None:
        """Log an informational message."""
        self._add_entry(message, "INFO")

    def log_warning(self, message: str) -> None:
        """Log a warning message."""
        self._add_entry(message, "WARNING")

    def log_error(self, message: str) -> None:
        """Log an error message."""
        self._add_entry(message, "ERROR")

    def update_status(self, status: str) -> None:
        """
        Update the current status.

        Args:
            status: The new status message
        """
        self._current_status = status
        self.log_info(status)

    def get_current_status(self) -> str:
        """Returns the current status message."""
        return self._current_status

    def get_recent_logs(self, count: int = 10) -> List[LogEntry]:
        """
        Get the most recent log entries.

        Args:
            count: Number of recent entries to return

        Returns:
            List of recent log entries
        """
        with self._lock:
            return self._log_entries[-count:]

    def get_all_logs(self) -> List[LogEntry]:
        """Returns all log entries."""
        with self._lock:
            return self._log_entries.copy()

    def _add_entry(self, message: str, level: str) -> None:
        entry = LogEntry(
            timestamp=datetime.now(),
            message=message,
            level=level
        )

        with self._lock:
            self._log_entries.append(entry)

            # Trim old entries if we exceed max
            if len(self._log_entries) > self._max_entries:
                self._log_entries = self._log_entries[-self._max_entries:]

            if self._echo_stream is not None and LEVELS[level] >= LEVELS[self._echo_level]:
                self._echo_stream.write(f"{entry}\n")
                self._echo_stream.flush()

    def export_logs_to_file(self, filepath: str) -> bool:
        """
        Export all logs to a text file.

        Args:
            filepath: Path where the log file should be saved

        Returns:
            bool: True if export was successful
        """
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Pointer Clicker - Log Export\n")
                f.write(f"Generated: {datetime.now()}\n")
                f.write("=" * 50 + "\n\n")

                for entry in self.get_all_logs():
                    time_str = entry.timestamp.strftime("%Y-%m-%d %H:%M:%S")
                    f.write(f"[{time_str}] {entry.level}: {entry.message}\n")

            return True
        except OSError as e:
            self.log_error(f"Failed to export logs: {e}")
            return False
