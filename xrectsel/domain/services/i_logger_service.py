# xrectsel/domain/services/i_logger_service.py
"""
Logger service interface.

Every service takes one of these in its constructor. Keyword arguments are
context (``display=":0"``, ``status=1``) appended to the message.
"""
from abc import ABC, abstractmethod


class ILoggerService(ABC):
    """Interface for logging services."""

    @abstractmethod
    def debug(self, message: str, **kwargs) -> None:
        """
        Log a debug message.

        Args:
            message: The message to log
            **kwargs: Additional context information to log
        """
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Log an info message."""
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Log a warning message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Log an error message."""
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs) -> None:
        """Log a critical message."""
        pass

    @abstractmethod
    def set_level(self, level: int) -> None:
        """
        Set the minimum log level to display.

        Args:
            level: Minimum log level (e.g., logging.INFO, logging.DEBUG)
        """
        pass
