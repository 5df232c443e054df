# xrectsel/domain/services/i_config_repository_service.py
"""
Configuration repository interface.

The configuration only supplies defaults (format string, display name,
logging); anything given on the command line wins.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from xrectsel.domain.common.result import Result


class IConfigRepository(ABC):
    """Interface for reading the user's configuration."""

    @abstractmethod
    def load_config(self, force_reload: bool = False) -> Result[Dict[str, Any]]:
        """
        Load configuration from storage, merged over the built-in defaults.

        Args:
            force_reload: Ignore any cached copy

        Returns:
            Result containing the configuration dictionary
        """
        pass

    @abstractmethod
    def get_setting(self, key: str, default: Any = None) -> Any:
        """
        Get a single setting.

        Args:
            key: Setting key
            default: Value returned when the key is absent or loading failed

        Returns:
            Setting value or default
        """
        pass
