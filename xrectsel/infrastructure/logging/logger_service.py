# xrectsel/infrastructure/logging/logger_service.py
"""
Implementation of the logger service using Python's built-in logging module.

Standard output carries the rendered region and nothing else, so console
logging goes to stderr.
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional, TextIO

from xrectsel.domain.services.i_logger_service import ILoggerService

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ConsoleLoggerService(ILoggerService):
    """
    Logger service that writes to stderr.

    Uses Python's built-in logging module to handle log messages.
    """

    def __init__(self, level: int = logging.WARNING, name: str = "xrectsel",
                 stream: Optional[TextIO] = None):
        """
        Initialize the logger service.

        Args:
            level: Initial log level (default: WARNING)
            name: Logger name
            stream: Console stream (default: sys.stderr)
        """
        self.logger = logging.getLogger(name)
        self.logger.propagate = False

        # Don't add handlers if they already exist
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(stream or sys.stderr)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(console_handler)

        self.set_level(level)

    def debug(self, message: str, **kwargs) -> None:
        self.logger.debug(self._with_extra(message, kwargs))

    def info(self, message: str, **kwargs) -> None:
        self.logger.info(self._with_extra(message, kwargs))

    def warning(self, message: str, **kwargs) -> None:
        self.logger.warning(self._with_extra(message, kwargs))

    def error(self, message: str, **kwargs) -> None:
        self.logger.error(self._with_extra(message, kwargs))

    def critical(self, message: str, **kwargs) -> None:
        self.logger.critical(self._with_extra(message, kwargs))

    def set_level(self, level: int) -> None:
        """
        Set the minimum log level to display.

        Args:
            level: Minimum log level (e.g., logging.INFO, logging.DEBUG)
        """
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def _with_extra(self, message: str, extra: Dict[str, Any]) -> str:
        formatted = self._format_extra(extra)
        return f"{message} {formatted}" if formatted else message

    def _format_extra(self, extra: Dict[str, Any]) -> str:
        """
        Format extra context information for logging.

        Args:
            extra: Dictionary of extra context information

        Returns:
            Formatted string of context information
        """
        if not extra:
            return ""

        formatted = [f"{key}={value}" for key, value in extra.items()]
        return f"[{' '.join(formatted)}]"


class FileLoggerService(ConsoleLoggerService):
    """
    Extension of ConsoleLoggerService that also logs to a rotating file.
    """

    def __init__(self, log_file: str, level: int = logging.WARNING,
                 name: str = "xrectsel", stream: Optional[TextIO] = None):
        """
        Initialize the file logger service.

        Args:
            log_file: Path of the log file; its directory is created if needed
            level: Initial log level (default: WARNING)
            name: Logger name
            stream: Console stream (default: sys.stderr)
        """
        super().__init__(level, name, stream)

        log_dir = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(log_dir, exist_ok=True)

        already_attached = any(
            isinstance(handler, RotatingFileHandler)
            and handler.baseFilename == os.path.abspath(log_file)
            for handler in self.logger.handlers
        )
        if not already_attached:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5
            )
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(file_handler)

        self.set_level(level)


def parse_level(name: Any, default: int = logging.WARNING) -> int:
    """Translate a level name such as ``"debug"`` into a logging level."""
    if isinstance(name, int):
        return name
    if isinstance(name, str):
        level = logging.getLevelName(name.strip().upper())
        if isinstance(level, int):
            return level
    return default
