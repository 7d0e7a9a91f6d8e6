"""
Module: log_severity.py
Location: src/unilog/
Version: 0.1.0

Defines the ordered severity levels and the fixed severity <-> display-name table.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from unilog.log_exceptions import UnknownLevelError


class LogSeverity(Enum):
    """
    Semantic severity level for log calls.

    Ordered by numeric rank. OFF is a threshold sentinel only:
    no logging call is ever made at OFF.
    """

    DEBUG = 10      # Developer-focused diagnostic information
    VERBOSE = 20    # Fine-grained but still useful detail
    INFO = 30       # Normal operation
    WARN = 40       # Unexpected but recoverable condition
    ERROR = 50      # Operation failed
    OFF = 1000      # Suppress everything


# ----------------------------
# Display names
# ----------------------------

LEVEL_NAMES: Mapping[LogSeverity, str] = MappingProxyType({
    LogSeverity.DEBUG: "Debug",
    LogSeverity.VERBOSE: "Verbose",
    LogSeverity.INFO: "Info",
    LogSeverity.WARN: "Warn",
    LogSeverity.ERROR: "Error",
    LogSeverity.OFF: "Off",
})

_LEVELS_BY_NAME: Mapping[str, LogSeverity] = MappingProxyType(
    {name: severity for severity, name in LEVEL_NAMES.items()}
)


def level_name(severity: LogSeverity) -> str:
    return LEVEL_NAMES[severity]


def level_from_name(name: str, default: LogSeverity) -> LogSeverity:
    """
    Resolve a display name to a severity.

    Matching is exact. Unrecognized names resolve to `default`.
    """
    return _LEVELS_BY_NAME.get(name, default)


def parse_level(name: str) -> LogSeverity:
    """Strict variant of level_from_name()."""
    if name not in _LEVELS_BY_NAME:
        raise UnknownLevelError(name)
    return _LEVELS_BY_NAME[name]
