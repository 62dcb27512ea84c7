"""Structured console logging for the locale keys generator."""

import logging
import sys
from typing import Optional, Dict, Any
from localekeys.core.constants import GeneratedCode, LogLevels


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the whole line by level for console output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None,
                 use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        result = super().format(record)
        color = self.COLORS.get(record.levelname)
        if not self.use_colors or color is None:
            return result
        return f"{color}{result}{self.RESET}"


class StructuredLogger:
    """Factory for creating structured loggers with context."""

    _initialized = False
    _loggers: Dict[str, logging.Logger] = {}

    DEFAULT_FORMAT = f'{GeneratedCode.TOOL_NAME}: %(levelname)s %(message)s'

    @classmethod
    def setup_logging(cls, level: str = LogLevels.INFO,
                      format_string: Optional[str] = None,
                      date_format: Optional[str] = None,
                      use_colors: Optional[bool] = None):
        """
        Setup global logging configuration.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            format_string: Custom format string for log messages
            date_format: Custom date format string
            use_colors: Force colours on or off (default: only on a TTY)
        """
        if cls._initialized:
            return

        log_level = getattr(logging, level.upper(), logging.INFO)

        if format_string is None:
            format_string = cls.DEFAULT_FORMAT

        if use_colors is None:
            use_colors = sys.stdout.isatty()

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ColoredFormatter(format_string, date_format, use_colors))

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(log_level)

        cls._initialized = True

    @classmethod
    def get_logger(cls, name: str, context: Optional[Dict[str, Any]] = None) -> 'ContextLogger':
        """
        Get or create a logger with optional context.

        Args:
            name: Logger name (typically __name__ of the module)
            context: Optional context dictionary to include in all log messages

        Returns:
            ContextLogger instance
        """
        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)

        return ContextLogger(cls._loggers[name], context or {})

    @classmethod
    def reset(cls):
        """Reset logging configuration (mainly for testing)."""
        cls._initialized = False
        cls._loggers.clear()
        logging.root.handlers.clear()


class ContextLogger:
    """Logger wrapper that includes context in all log messages."""

    def __init__(self, logger: logging.Logger, context: Dict[str, Any]):
        self.logger = logger
        self.context = context

    def _format_message(self, msg: str) -> str:
        if not self.context:
            return msg

        context_str = " | ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{msg} [{context_str}]"

    def with_context(self, **kwargs) -> 'ContextLogger':
        """
        Create a new logger with additional context.

        Args:
            **kwargs: Additional context key-value pairs

        Returns:
            New ContextLogger with merged context
        """
        return ContextLogger(self.logger, {**self.context, **kwargs})

    def debug(self, msg: str, *args, **kwargs):
        self.logger.debug(self._format_message(msg), *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self.logger.info(self._format_message(msg), *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self.logger.warning(self._format_message(msg), *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self.logger.error(self._format_message(msg), *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        self.logger.exception(self._format_message(msg), *args, **kwargs)


def get_logger(name: str, context: Optional[Dict[str, Any]] = None) -> ContextLogger:
    """
    Convenience function to get a logger.

    Args:
        name: Logger name (typically __name__)
        context: Optional context dictionary

    Returns:
        ContextLogger instance
    """
    return StructuredLogger.get_logger(name, context)


def setup_logging(level: str = LogLevels.INFO,
                  format_string: Optional[str] = None,
                  date_format: Optional[str] = None,
                  use_colors: Optional[bool] = None):
    """Convenience function to setup logging."""
    StructuredLogger.setup_logging(level, format_string, date_format, use_colors)
