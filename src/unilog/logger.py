from __future__ import annotations

from unilog.log_exceptions import EscalatedLogError
from unilog.log_severity import LogSeverity, level_name
from unilog.log_sinks import LogSink


class Logger:
    """
    Named, independently configured emitter of severity-tagged messages.

    Instances are handed out by LoggerRegistry, one per name. Configuration
    fields are plain attributes and may be changed at any time; every call
    is evaluated against the current values.

    format: template with three positional slots,
        {0} = logger name, {1} = level display name, {2} = message
    """

    def __init__(
        self,
        name: str,
        *,
        sink: LogSink,
        threshold: LogSeverity = LogSeverity.WARN,
        format: str | None = None,
        escalate_on_error: bool = False,
    ):
        self._name = name
        self.sink = sink
        self.threshold = threshold
        self.format = format if format is not None else sink.default_format
        self.escalate_on_error = escalate_on_error

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<Logger {self._name!r} threshold={level_name(self.threshold)}>"

    # --------------------------
    # Filtering / dispatch
    # --------------------------

    def is_enabled_for(self, severity: LogSeverity) -> bool:
        return severity.value >= self.threshold.value

    def log(self, severity: LogSeverity, message: str) -> None:
        if severity is LogSeverity.OFF:
            raise ValueError("OFF is a threshold, not a message severity")

        if not self.is_enabled_for(severity):
            return

        line = self.format.format(self._name, level_name(severity), message)

        if severity.value >= LogSeverity.ERROR.value and self.escalate_on_error:
            raise EscalatedLogError(self._name, severity, line)

        self.sink.emit(self._name, severity, line)

    # --------------------------
    # Per-severity calls
    # --------------------------

    def debug(self, message: str) -> None:
        self.log(LogSeverity.DEBUG, message)

    def verbose(self, message: str) -> None:
        self.log(LogSeverity.VERBOSE, message)

    def info(self, message: str) -> None:
        self.log(LogSeverity.INFO, message)

    def warn(self, message: str) -> None:
        self.log(LogSeverity.WARN, message)

    def error(self, message: str) -> None:
        self.log(LogSeverity.ERROR, message)
