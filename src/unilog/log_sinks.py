"""
Module: log_sinks.py
Location: src/unilog/
Version: 0.1.0

Output collaborators for Logger. Each logger writes every emitted line
to exactly one sink; the sink decides where the line goes.

Variants:
  - ConsoleSink:      plain console / stream output
  - HostLoggingSink:  host runtime's logging API (stdlib `logging`)
  - QueueSink:        thread-safe queue, e.g. for a GUI viewer
  - ZmqSink:          host runtime collecting lines over ZeroMQ
"""

from __future__ import annotations

import logging
import queue
import sys
import threading
from typing import Optional, Protocol, TextIO

import zmq

from unilog.log_severity import LogSeverity


CONSOLE_FORMAT = "[{0}] {1}: {2}"
HOST_FORMAT = "{1}: {2}"

TIER_INFO = "info"
TIER_WARNING = "warning"
TIER_ERROR = "error"


def tier_of(severity: LogSeverity) -> str:
    """
    Collapse a severity to the three output tiers a host usually distinguishes.
    """
    if severity.value >= LogSeverity.ERROR.value:
        return TIER_ERROR
    if severity.value >= LogSeverity.WARN.value:
        return TIER_WARNING
    return TIER_INFO


class LogSink(Protocol):
    """
    Destination for formatted log lines.

    Sink failures are not the logger's concern: whatever a sink
    raises reaches the caller of the logging call unchanged.
    """

    default_format: str

    def emit(self, logger_name: str, severity: LogSeverity, line: str) -> None:
        """
        Write one formatted line.

        Must not block indefinitely.
        """


class ConsoleSink:
    """
    Writes each line to a text stream (stdout unless told otherwise).
    """

    default_format = CONSOLE_FORMAT

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lock = threading.Lock()

    def emit(self, logger_name: str, severity: LogSeverity, line: str) -> None:
        # Resolved per call so a redirected sys.stdout is honoured
        stream = self._stream if self._stream is not None else sys.stdout
        with self._lock:
            stream.write(line + "\n")
            stream.flush()


class HostLoggingSink:
    """
    Forwards lines to the host runtime's logging API.

    Every UniLog logger maps to the child `<root>.<logger_name>` of the
    host logger, so the host's own handlers and formatters apply.
    """

    default_format = HOST_FORMAT

    def __init__(self, root: str = "unilog"):
        self._root = logging.getLogger(root)

    def host_logger(self, logger_name: str) -> logging.Logger:
        return self._root.getChild(logger_name)

    def emit(self, logger_name: str, severity: LogSeverity, line: str) -> None:
        host = self.host_logger(logger_name)
        tier = tier_of(severity)
        if tier == TIER_ERROR:
            host.error(line)
        elif tier == TIER_WARNING:
            host.warning(line)
        else:
            host.info(line)


class QueueSink:
    """
    Forwards (logger_name, severity, line) tuples to a thread-safe queue.

    Performs no UI work itself and is safe to use from any thread.
    """

    default_format = CONSOLE_FORMAT

    def __init__(self, out_queue: "queue.Queue[tuple[str, LogSeverity, str]]"):
        self._queue = out_queue

    def emit(self, logger_name: str, severity: LogSeverity, line: str) -> None:
        self._queue.put_nowait((logger_name, severity, line))


class ZmqSink:
    """
    Sends lines to a host that collects logs over ZeroMQ.

    Wire format: two frames, [tier, line], both UTF-8.
    The socket is created on first emit and shared by all loggers
    using this sink; zmq sockets are not thread-safe, so sends are
    serialized.
    """

    default_format = CONSOLE_FORMAT

    def __init__(
        self,
        endpoint: str,
        *,
        context: Optional[zmq.Context] = None,
        socket_type: int = zmq.PUSH,
    ):
        self.endpoint = endpoint
        self._ctx = context
        self._socket_type = socket_type
        self._sock: Optional[zmq.Socket] = None
        self._lock = threading.Lock()

    def _socket(self) -> zmq.Socket:
        if self._sock is None:
            ctx = self._ctx or zmq.Context.instance()
            sock = ctx.socket(self._socket_type)
            sock.setsockopt(zmq.LINGER, 0)
            sock.connect(self.endpoint)
            self._sock = sock
        return self._sock

    def emit(self, logger_name: str, severity: LogSeverity, line: str) -> None:
        with self._lock:
            self._socket().send_multipart([
                tier_of(severity).encode("utf-8"),
                line.encode("utf-8"),
            ])

    def close(self) -> None:
        with self._lock:
            if self._sock is not None:
                self._sock.close()
                self._sock = None
