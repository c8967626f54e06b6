"""Buffered single-threaded logger."""

import sys

from light_bench.logging.config import LoggerConfig, LogLevel
from light_bench.logging.handlers import BaseLogHandler
from light_bench.time.time import time_iso8601, time_s


class Logger:
    """A simple logger that buffers formatted messages and pushes them to the
    configured handlers once the buffer fills, the flush interval elapses, an
    error is logged, or ``flush()``/``shutdown()`` is called.
    """

    def __init__(
        self,
        name: str = "",
        config: LoggerConfig | None = None,
        handlers: list[BaseLogHandler] | None = None,
    ):
        """Initializes a Logger with specified configuration and handlers.

        Args:
            name (str): Name of the logger. Defaults to an empty string.
            config (LoggerConfig): Configuration settings for the logger (base level, stdout, buffer size, etc.).
            handlers (list[BaseLogHandler], optional): A list of handler objects that inherit from BaseLogHandler.
                Defaults to an empty list if not provided.

        Raises:
            TypeError: If one of the provided handlers does not inherit from BaseLogHandler.

        """
        self._name = name

        self._config = config
        if self._config is None:
            self._config = LoggerConfig()

        self._handlers = handlers
        if self._handlers is None:
            self._handlers = []

        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(
                    f"Invalid handler type; expected BaseLogHandler but got {type(handler).__name__}"
                )

            # Forward the str_format so handlers can reformat if they need to.
            handler.add_primary_config(self._config)

        self._buffer: list[str] = []
        self._buffer_start_time_s = time_s()
        self._is_running = True

    def flush(self) -> None:
        """Flushes the log message buffer to all handlers."""
        if not self._buffer:
            return

        if self._config.do_stdout:
            sys.stdout.write("\n".join(self._buffer) + "\n")

        for handler in self._handlers:
            handler.push(self._buffer)

        self._buffer = []
        self._buffer_start_time_s = time_s()

    def _process_log(self, level: LogLevel, msg: str) -> None:
        """Formats a message, buffers it and flushes if due.

        Args:
            level (LogLevel): The severity level of the message.
            msg (str): The actual log message.

        """
        log_msg = self._config.str_format % {
            "asctime": time_iso8601(),
            "name": self._name,
            "levelname": level.name,
            "message": msg,
        }
        if not self._buffer:
            self._buffer_start_time_s = time_s()
        self._buffer.append(log_msg)

        if (
            level >= LogLevel.ERROR
            or len(self._buffer) >= self._config.buffer_size
            or (time_s() - self._buffer_start_time_s) >= self._config.flush_interval_s
        ):
            self.flush()

    def _log(self, level: LogLevel, msg: str) -> None:
        if self._is_running and self._config.base_level <= level:
            self._process_log(level, msg)

    def set_log_level(self, level: LogLevel) -> None:
        """Modify the logger's base log level at runtime.

        Args:
            level (LogLevel): The new base log level.

        """
        self.debug(f"Changing base log level from {self._config.base_level.name} to {level.name}")
        self._config.base_level = level
        for handler in self._handlers:
            handler.add_primary_config(self._config)

    def trace(self, msg: str) -> None:
        """Send a trace-level log message."""
        self._log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        """Send a debug-level log message."""
        self._log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        """Send an info-level log message."""
        self._log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        """Send a warning-level log message."""
        self._log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        """Send an error-level log message."""
        self._log(LogLevel.ERROR, msg)

    def shutdown(self) -> None:
        """Flushes any buffered messages and closes all handlers.

        Messages logged afterwards are dropped.
        """
        self.flush()
        self._is_running = False
        for handler in self._handlers:
            handler.close()

    def is_running(self) -> bool:
        """Check if the logger is running."""
        return self._is_running

    def get_name(self) -> str:
        """Get the name of the logger."""
        return self._name

    def get_config(self) -> LoggerConfig:
        """Get the configuration of the logger."""
        return self._config
