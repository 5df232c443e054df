# xrectsel/application/cli.py
"""
Command line entry point.

    xrectsel [-v] [--display NAME] [--config PATH] [FORMAT]

Drag out a rectangle with any mouse button; its geometry is printed using
FORMAT (default ``%wx%h+%x+%y\\n``).
"""
import argparse
import sys
from typing import List, Optional

from xrectsel.application.app import APP_NAME, APP_VERSION, configure_logging, initialize_app
from xrectsel.domain.common.di_container import DIContainer
from xrectsel.domain.common.errors import DomainError
from xrectsel.domain.services.i_config_repository_service import IConfigRepository
from xrectsel.domain.services.i_display_service import IDisplayService
from xrectsel.domain.services.i_logger_service import ILoggerService
from xrectsel.domain.services.i_region_selector_service import IRegionSelectorService
from xrectsel.domain.services.i_template_renderer_service import ITemplateRendererService

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

FORMAT_HELP = """\
format directives:
  %x, %y   offset from left/top of screen
  %X, %Y   offset from right/bottom of screen
  %w, %h   width and height
  %b, %d   border width and depth of the root window
  %%       a literal %
  %[N]f    field f rounded down to a multiple of N, e.g. %[10]w
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Print the geometry of a rectangular screen region.",
        epilog=FORMAT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("format", nargs="?", default=None,
                        help="output template (default: %%wx%%h+%%x+%%y\\n)")
    parser.add_argument("-d", "--display", default=None,
                        help="X display to connect to (default: $DISPLAY)")
    parser.add_argument("-c", "--config", default=None,
                        help="configuration file (default: $XRECTSEL_CONFIG or "
                             "$XDG_CONFIG_HOME/xrectsel/config.json)")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="log progress to stderr; repeat for debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def report(message: str) -> None:
    """Write a diagnostic line prefixed with the tool name to stderr."""
    print(f"{APP_NAME}: {message}", file=sys.stderr)


def report_error(error: DomainError, logger: Optional[ILoggerService] = None) -> None:
    if logger is not None:
        logger.debug("Failing", code=error.code, category=error.category.value, **error.details)
    report(error.message)


def run(argv: Optional[List[str]] = None, container: Optional[DIContainer] = None) -> int:
    """
    Parse arguments, select a region and print it.

    Args:
        argv: Arguments without the program name (None: sys.argv[1:])
        container: Pre-wired services (None: the real X11-backed ones)

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    if container is None:
        container = initialize_app(config_file=args.config, display_name=args.display)

    config_result = container.resolve(IConfigRepository).load_config()
    if config_result.is_failure:
        report_error(config_result.error)
        return EXIT_FAILURE
    config = config_result.value

    logger = configure_logging(container, config, args.verbose)

    fmt = args.format if args.format is not None else config["format"]
    renderer = container.resolve(ITemplateRendererService)
    validation = renderer.validate(fmt)
    if validation.is_failure:
        report_error(validation.error, logger)
        return EXIT_FAILURE

    display = container.resolve(IDisplayService)
    open_result = display.open()
    if open_result.is_failure:
        report_error(open_result.error, logger)
        return EXIT_FAILURE

    try:
        root = display.default_root()
        selection = container.resolve(IRegionSelectorService).select(display, root)
    except KeyboardInterrupt:
        report("interrupted")
        return EXIT_INTERRUPTED
    except Exception as e:
        # Lost connection or an X protocol error outside the drawing requests
        logger.debug("Selection aborted", error_type=type(e).__name__)
        report(str(e) or type(e).__name__)
        report("failed to select a rectangular region")
        return EXIT_FAILURE
    finally:
        display.close()

    if selection.is_failure:
        report_error(selection.error, logger)
        report("failed to select a rectangular region")
        return EXIT_FAILURE

    rendered = renderer.render(fmt, selection.value)
    if rendered.is_failure:
        report_error(rendered.error, logger)
        return EXIT_FAILURE

    sys.stdout.write(rendered.value)
    sys.stdout.flush()
    return EXIT_SUCCESS


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
