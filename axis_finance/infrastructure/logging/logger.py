"""Application loggers writing to dated files under ``logs/``.

``LoggerBuilder`` assembles a standard library logger with a file handler
and an optional console handler. ``AppLogger`` and ``UsageLogger`` wrap
builder output as process-wide singletons.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from axis_finance.utils.utils import get_project_root

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class LoggerBuilder:
    """Fluent builder for file (and console) loggers."""

    def __init__(self) -> None:
        self._name = "axis_finance"
        self._subdir = "app"
        self._prefix = "app"
        self._console = False
        self._level = logging.INFO
        self._formatter_factory: Callable[[], logging.Formatter] = (
            self._default_formatter
        )
        self._file_handler_factory: Callable[
            [Path, logging.Formatter], logging.Handler
        ] = self._default_file_handler
        self._console_handler_factory: Callable[
            [logging.Formatter], logging.Handler
        ] = self._default_console_handler

    def name(self, name: str) -> "LoggerBuilder":
        self._name = name
        return self

    def subdir(self, subdir: str) -> "LoggerBuilder":
        self._subdir = subdir
        return self

    def prefix(self, prefix: str) -> "LoggerBuilder":
        self._prefix = prefix
        return self

    def console(self, enabled: bool = True) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, level: int) -> "LoggerBuilder":
        self._level = level
        return self

    def formatter(self, factory) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(self, factory) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(self, factory) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Return the configured logger.

        Handlers are only attached the first time a given logger name is
        built, so repeated calls never duplicate output.

        Returns:
            logging.Logger: Logger writing to
            ``logs/<subdir>/<YYYYMMDD>_<prefix>.log``.
        """
        logger = logging.getLogger(self._name)
        logger.setLevel(self._level)
        if logger.handlers:
            return logger

        log_dir = get_project_root() / "logs" / self._subdir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{self._today_stamp()}_{self._prefix}.log"

        fmt = self._formatter_factory()
        logger.addHandler(self._file_handler_factory(log_path, fmt))
        if self._console:
            logger.addHandler(self._console_handler_factory(fmt))
        logger.propagate = False
        return logger

    @staticmethod
    def _today_stamp() -> str:
        return datetime.now().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(LOG_FORMAT)

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.Handler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(fmt: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper around a built logger.

    Subclasses keep their own ``_instance`` so each one is a separate
    singleton.
    """

    _instance = None
    _subdir = "app"
    _prefix = "app"
    _console = False

    def __new__(cls, name: str = "axis_finance"):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = (
                LoggerBuilder()
                .name(name)
                .subdir(cls._subdir)
                .prefix(cls._prefix)
                .console(cls._console)
                .build()
            )
            cls._instance = instance
        return cls._instance

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def critical(self, message: str) -> None:
        self.logger.critical(message)


class AppLogger(Logger):
    """Logger for use cases and adapters."""

    _instance = None
    _console = True


class UsageLogger(Logger):
    """Logger for user-triggered actions (CLI runs)."""

    _instance = None
    _subdir = "usage"
    _prefix = "usage"


def get_app_logger() -> AppLogger:
    return AppLogger("axis_finance.app")


def get_usage_logger() -> UsageLogger:
    return UsageLogger("axis_finance.usage")


__all__ = [
    "LoggerBuilder",
    "Logger",
    "AppLogger",
    "UsageLogger",
    "get_app_logger",
    "get_usage_logger",
]
