# xrectsel/infrastructure/config/json_config_repository.py

"""
JSON-based implementation of the configuration repository.

Reads ``$XRECTSEL_CONFIG`` or ``$XDG_CONFIG_HOME/xrectsel/config.json``. The
file is optional; the tool never writes it.
"""
import json
import os
from typing import Any, Dict, Optional

from xrectsel.domain.common.errors import ConfigurationError
from xrectsel.domain.common.result import Result
from xrectsel.domain.services.i_config_repository_service import IConfigRepository
from xrectsel.domain.services.i_logger_service import ILoggerService

DEFAULT_FORMAT = "%wx%h+%x+%y\n"


def default_config_path() -> str:
    """Location of the configuration file for the current environment."""
    override = os.environ.get("XRECTSEL_CONFIG")
    if override:
        return override
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(config_home, "xrectsel", "config.json")


class JsonConfigRepository(IConfigRepository):
    """
    JSON-based implementation of the configuration repository.

    Keys missing from the file take their default value. Keys present with
    the wrong type are reset to the default with a warning rather than
    failing the run.
    """

    # key -> (default, accepted types)
    DEFAULT_CONFIG = {
        "format": (DEFAULT_FORMAT, (str,)),
        "display": (None, (str, type(None))),
        "log_level": ("WARNING", (str,)),
        "log_file": (None, (str, type(None))),
    }

    def __init__(self, config_file: Optional[str], logger: ILoggerService):
        """
        Initialize the repository.

        Args:
            config_file: Path to the JSON configuration file (None: default location)
            logger: Logger service
        """
        self.config_file = config_file or default_config_path()
        self.logger = logger
        self._config_cache: Optional[Dict[str, Any]] = None

    def load_config(self, force_reload: bool = False) -> Result[Dict[str, Any]]:
        if self._config_cache is not None and not force_reload:
            return Result.ok(self._config_cache)

        config = {key: default for key, (default, _) in self.DEFAULT_CONFIG.items()}

        if not os.path.exists(self.config_file):
            self.logger.debug("Config file not found, using defaults", path=self.config_file)
            self._config_cache = config
            return Result.ok(config)

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                stored = json.load(f)
        except (OSError, ValueError) as e:
            return Result.fail(ConfigurationError(
                message=f"failed to read config file {self.config_file}: {e}",
                details={"path": self.config_file},
                inner_error=e
            ))

        if not isinstance(stored, dict):
            return Result.fail(ConfigurationError(
                message=f"config file {self.config_file} must contain a JSON object",
                details={"path": self.config_file}
            ))

        for key, value in stored.items():
            if key not in self.DEFAULT_CONFIG:
                self.logger.warning(f"Ignoring unknown config key '{key}'", path=self.config_file)
                continue
            default, accepted = self.DEFAULT_CONFIG[key]
            if not isinstance(value, accepted):
                self.logger.warning(
                    f"Config key '{key}' has the wrong type, using the default",
                    value=repr(value), default=repr(default)
                )
                continue
            config[key] = value

        self.logger.info(f"Config loaded successfully from {self.config_file}")
        self._config_cache = config
        return Result.ok(config)

    def get_setting(self, key: str, default: Any = None) -> Any:
        result = self.load_config()
        if result.is_failure:
            return default
        value = result.value.get(key)
        return default if value is None else value
