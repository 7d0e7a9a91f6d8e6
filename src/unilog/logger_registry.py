"""
Module: logger_registry.py
Location: src/unilog/
Version: 0.1.0

Process-wide registry of named loggers.

Lifecycle:
  - the module-level registry is created on first use (get_registry())
  - it is never torn down before process exit
  - set_registry() swaps it, e.g. for tests or an embedding host
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional

from unilog.log_severity import LogSeverity, parse_level
from unilog.log_severity import level_from_name as resolve_level
from unilog.log_sinks import ConsoleSink, LogSink
from unilog.logger import Logger


SinkFactory = Callable[[str], LogSink]


def shared_sink_factory(sink: LogSink) -> SinkFactory:
    """Sink factory handing the same sink to every new logger."""
    return lambda name: sink


@dataclass
class LoggerDefaults:
    """
    Settings applied to a Logger when it is created.

    Changing these never affects loggers that already exist.
    """

    threshold: LogSeverity = LogSeverity.WARN
    escalate_on_error: bool = False
    format: Optional[str] = None          # None -> the sink's default_format
    sink_factory: SinkFactory = field(
        default_factory=lambda: shared_sink_factory(ConsoleSink())
    )


class LoggerRegistry:
    """
    Single authoritative mapping of logger names to Logger singletons.

    Lookups of an existing name take no lock. Creation takes the lock and
    re-checks, so concurrent first-time lookups of one name agree on a
    single instance. Entries are only ever inserted.
    """

    def __init__(self, defaults: Optional[LoggerDefaults] = None):
        self.defaults = defaults or LoggerDefaults()
        self._lock = threading.Lock()
        self._loggers: Dict[str, Logger] = {}

    # -------------------------------------------------
    # Lookup / creation
    # -------------------------------------------------
    def get_logger(self, name: str) -> Logger:
        logger = self._loggers.get(name)
        if logger is not None:
            return logger

        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = self._create(name)
                self._loggers[name] = logger
            return logger

    def _create(self, name: str) -> Logger:
        d = self.defaults
        return Logger(
            name,
            sink=d.sink_factory(name),
            threshold=d.threshold,
            format=d.format,
            escalate_on_error=d.escalate_on_error,
        )

    # -------------------------------------------------
    # Level configuration
    # -------------------------------------------------
    def level_from_name(self, name: str) -> LogSeverity:
        return resolve_level(name, self.defaults.threshold)

    def configure_levels(self, levels: Mapping[str, str], *, strict: bool = False) -> None:
        """
        Set thresholds in bulk from {logger name: level display name}.

        Unrecognized level names fall back to the default threshold.
        With strict=True they raise UnknownLevelError instead, and no
        logger is touched.
        """
        if strict:
            resolved = {name: parse_level(lvl) for name, lvl in levels.items()}
        else:
            resolved = {name: self.level_from_name(lvl) for name, lvl in levels.items()}

        for name, severity in resolved.items():
            self.get_logger(name).threshold = severity

    # -------------------------------------------------
    # Introspection
    # -------------------------------------------------
    def names(self) -> List[str]:
        return list(self._loggers.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)


# ----------------------------
# Process-wide access point
# ----------------------------

_registry: Optional[LoggerRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> LoggerRegistry:
    global _registry
    registry = _registry
    if registry is not None:
        return registry

    with _registry_lock:
        if _registry is None:
            _registry = LoggerRegistry()
        return _registry


def set_registry(registry: Optional[LoggerRegistry]) -> Optional[LoggerRegistry]:
    """
    Replace the process-wide registry. Returns the previous one
    (None if none had been created yet). Passing None makes the next
    get_registry() build a fresh one.
    """
    global _registry
    with _registry_lock:
        previous = _registry
        _registry = registry
        return previous


def get_logger(name: str) -> Logger:
    # Level, format and escalation only get applied if the logger is new
    return get_registry().get_logger(name)


def configure_levels(levels: Mapping[str, str], *, strict: bool = False) -> None:
    get_registry().configure_levels(levels, strict=strict)


def level_from_name(name: str) -> LogSeverity:
    return get_registry().level_from_name(name)
