"""
Hook logger adapter - implements LoggerProtocol for hook processes.

Hook stdout is reserved for the JSON answer to Claude Code, so log entries
are appended to a JSON-lines file instead:

    {"timestamp": "...", "service": "ddev-bridge", "level": "debug", "message": "..."}

Once the file reaches max_bytes it is moved to <name>.1 before the next
write, replacing any earlier backup.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ddev_bridge.base_model import StrictModel

LEVELS = ('debug', 'info', 'warning', 'error')


class LogEntry(StrictModel):
    """One line of the hook log."""

    timestamp: str
    service: str
    level: str
    message: str


class HookLogger:
    """Logger implementation for hooks (implements LoggerProtocol from services)."""

    def __init__(self, log_file: Path, service: str, min_level: str = 'info', max_bytes: int = 1_000_000) -> None:
        """
        Initialize hook logger.

        Args:
            log_file: JSON-lines file to append to (parent created on demand)
            service: Service name recorded with every entry
            min_level: Entries below this level are dropped
            max_bytes: Size at which the file is moved aside to <name>.1 before the next write
        """
        self.log_file = log_file
        self.service = service
        self.min_level = LEVELS.index(min_level)
        self.max_bytes = max_bytes

    @property
    def backup_file(self) -> Path:
        return self.log_file.with_name(self.log_file.name + '.1')

    def _rotate_if_full(self) -> None:
        try:
            size = self.log_file.stat().st_size
        except FileNotFoundError:
            return
        if size >= self.max_bytes:
            # Replaces any previous backup
            self.log_file.replace(self.backup_file)

    def _write(self, level: str, message: str) -> None:
        if LEVELS.index(level) < self.min_level:
            return

        entry = LogEntry(
            timestamp=datetime.now(UTC).strftime('%Y-%m-%d %H:%M:%S'),
            service=self.service,
            level=level,
            message=message,
        )
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self._rotate_if_full()
        with self.log_file.open('a') as f:
            f.write(entry.model_dump_json() + '\n')

    async def debug(self, message: str) -> None:
        self._write('debug', message)

    async def info(self, message: str) -> None:
        self._write('info', message)

    async def warning(self, message: str) -> None:
        self._write('warning', message)

    async def error(self, message: str) -> None:
        self._write('error', message)
