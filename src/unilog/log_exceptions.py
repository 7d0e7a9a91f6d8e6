from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from unilog.log_severity import LogSeverity


class UniLogError(Exception):
    pass


class EscalatedLogError(UniLogError):
    """
    Raised in place of output when an escalating logger receives
    an ERROR-or-above call. The message is the formatted log line.
    """

    def __init__(self, logger_name: str, severity: "LogSeverity", line: str):
        self.logger_name = logger_name
        self.severity = severity
        self.line = line
        super().__init__(line)


class UnknownLevelError(UniLogError, ValueError):
    def __init__(self, level_name: str):
        self.level_name = level_name
        super().__init__(f"Unknown log level name: {level_name!r}")
