from unilog.log_exceptions import EscalatedLogError, UniLogError, UnknownLevelError
from unilog.log_severity import LEVEL_NAMES, LogSeverity, level_name, parse_level
from unilog.log_sinks import ConsoleSink, HostLoggingSink, LogSink, QueueSink, ZmqSink
from unilog.logger import Logger
from unilog.logger_registry import (
    LoggerDefaults,
    LoggerRegistry,
    configure_levels,
    get_logger,
    get_registry,
    level_from_name,
    set_registry,
)
from unilog.log_config import LogConfig

__version__ = "0.1.0"
