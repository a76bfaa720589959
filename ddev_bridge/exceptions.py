"""
Shared exceptions for ddev-bridge.

Exception Hierarchy:
    DdevBridgeError (base)
    ├── ProbeError (ddev describe failed or returned unparseable output)
    └── LogRetrievalError (ddev logs exited non-zero)
"""

from __future__ import annotations


class DdevBridgeError(Exception):
    """Base exception for all ddev-bridge errors."""


class ProbeError(DdevBridgeError):
    """Raised when the environment probe fails or its output cannot be parsed."""

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        self.exit_code = exit_code
        super().__init__(message)


class LogRetrievalError(DdevBridgeError):
    """Raised when the log command exits non-zero."""

    def __init__(self, exit_code: int, output: str) -> None:
        self.exit_code = exit_code
        self.output = output
        super().__init__(f'DDEV logs command failed (exit code {exit_code}): {output}')
