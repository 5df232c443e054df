# xrectsel/application/app.py

import logging
from typing import Any, Dict, Optional

from xrectsel.domain.common.di_container import DIContainer
from xrectsel.domain.services.i_config_repository_service import IConfigRepository
from xrectsel.domain.services.i_display_service import IDisplayService
from xrectsel.domain.services.i_logger_service import ILoggerService
from xrectsel.domain.services.i_region_selector_service import IRegionSelectorService
from xrectsel.domain.services.i_template_renderer_service import ITemplateRendererService

from xrectsel.infrastructure.config.json_config_repository import JsonConfigRepository
from xrectsel.infrastructure.formatting.template_renderer_service import TemplateRendererService
from xrectsel.infrastructure.logging.logger_service import (
    ConsoleLoggerService, FileLoggerService, parse_level
)
from xrectsel.infrastructure.platform.region_selector_service import RegionSelectorService
from xrectsel.infrastructure.platform.xlib_display_service import XlibDisplayService

APP_NAME = "xrectsel"
APP_VERSION = "1.0.0"


def initialize_app(config_file: Optional[str] = None,
                   display_name: Optional[str] = None) -> DIContainer:
    """
    Wire the services used by the command line.

    Args:
        config_file: Configuration file to read (None: default location)
        display_name: X display to use; overrides the ``display`` setting
    """
    container = DIContainer()

    logger = ConsoleLoggerService(level=logging.WARNING, name=APP_NAME)
    container.register_instance(ILoggerService, logger)

    container.register_instance(IConfigRepository, JsonConfigRepository(config_file, logger))

    container.register_factory(
        IDisplayService,
        lambda: XlibDisplayService(
            logger=container.resolve(ILoggerService),
            display_name=display_name or container.resolve(IConfigRepository).get_setting("display")
        ),
        singleton=True
    )

    container.register_factory(
        IRegionSelectorService,
        lambda: RegionSelectorService(container.resolve(ILoggerService))
    )

    container.register_factory(
        ITemplateRendererService,
        lambda: TemplateRendererService(container.resolve(ILoggerService))
    )

    return container


def configure_logging(container: DIContainer, config: Dict[str, Any], verbosity: int = 0) -> ILoggerService:
    """
    Apply the configured log level and optional log file.

    ``-v`` on the command line selects INFO and ``-vv`` DEBUG regardless of
    the ``log_level`` setting.
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = parse_level(config.get("log_level"))

    logger = container.resolve(ILoggerService)
    log_file = config.get("log_file")
    logger.set_level(level)
    if log_file:
        try:
            logger = FileLoggerService(log_file, level=level, name=APP_NAME)
            container.register_instance(ILoggerService, logger)
        except OSError as e:
            logger.warning(f"Cannot write log file, logging to stderr only: {e}", log_file=log_file)

    logger.debug("Logging configured", level=logging.getLevelName(level), log_file=log_file)
    return logger
