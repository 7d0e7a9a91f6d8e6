"""
Module: log_config.py
Location: src/unilog/
Version: 0.2.0

Typed logger configuration, applied to a registry once at startup.

Priority (highest -> lowest):
  1. Explicit values (JSON file, dict, CLI flags)
  2. UNILOG_* environment variables
  3. Defaults below

Example file:

    {
        "default_level": "Warn",
        "escalate_on_error": false,
        "sink": "console",
        "levels": {"net": "Debug", "ui": "Off"}
    }

From the environment, UNILOG_LEVELS is a JSON object:

    UNILOG_LEVELS='{"net": "Debug"}'
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from unilog.log_severity import LogSeverity, level_from_name, parse_level
from unilog.log_sinks import ConsoleSink, HostLoggingSink, LogSink
from unilog.logger_registry import LoggerRegistry, get_registry, shared_sink_factory


SINK_CONSOLE = "console"
SINK_HOST = "host"
SINK_KINDS = (SINK_CONSOLE, SINK_HOST)


def build_sink(kind: str) -> LogSink:
    if kind == SINK_CONSOLE:
        return ConsoleSink()
    if kind == SINK_HOST:
        return HostLoggingSink()
    raise ValueError(f"Unknown sink kind: {kind!r} (expected one of {SINK_KINDS})")


class LogConfig(BaseSettings):
    """Logger defaults plus per-logger levels."""

    default_level: str = Field(default="Warn")
    escalate_on_error: bool = Field(default=False)
    format: Optional[str] = Field(default=None)
    sink: Literal["console", "host"] = Field(default=SINK_CONSOLE)
    levels: Dict[str, str] = Field(default_factory=dict)
    strict: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="UNILOG_",
        case_sensitive=False,
        extra="forbid",
    )

    # -------------------------------------------------
    # Loading
    # -------------------------------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LogConfig":
        """
        Validate `data`; fields it omits come from the environment.

        Unknown keys and wrongly typed values raise
        pydantic.ValidationError (a ValueError).
        """
        return cls(**dict(data))

    @classmethod
    def from_file(cls, path: str | Path) -> "LogConfig":
        with Path(path).open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Log config must be a JSON object: {path}")
        return cls.from_dict(data)

    # -------------------------------------------------
    # Applying
    # -------------------------------------------------
    def default_threshold(self) -> LogSeverity:
        if self.strict:
            return parse_level(self.default_level)
        return level_from_name(self.default_level, LogSeverity.WARN)

    def apply(self, registry: Optional[LoggerRegistry] = None) -> LoggerRegistry:
        """
        Set the registry defaults, then the per-logger levels.

        Everything that can fail is resolved first: on error the registry
        is left exactly as it was. Loggers created before this call keep
        their format, escalation flag and sink; only levels named in
        `levels` are updated on them.
        """
        if registry is None:
            registry = get_registry()

        threshold = self.default_threshold()
        sink = build_sink(self.sink)
        if self.strict:
            for lvl in self.levels.values():
                parse_level(lvl)

        defaults = registry.defaults
        defaults.threshold = threshold
        defaults.escalate_on_error = self.escalate_on_error
        defaults.format = self.format
        defaults.sink_factory = shared_sink_factory(sink)

        registry.configure_levels(self.levels, strict=self.strict)
        return registry
