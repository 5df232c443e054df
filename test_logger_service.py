import io
import logging
import uuid

from xrectsel.infrastructure.logging.logger_service import (
    ConsoleLoggerService, FileLoggerService, parse_level
)


def unique_name():
    return f"xrectsel-test-{uuid.uuid4().hex}"


def test_console_logger_writes_context():
    stream = io.StringIO()
    logger = ConsoleLoggerService(level=logging.DEBUG, name=unique_name(), stream=stream)

    logger.info("Region selected", x=1, w=20)

    line = stream.getvalue().strip()
    assert line.endswith("INFO - Region selected [x=1 w=20]")


def test_console_logger_respects_level():
    stream = io.StringIO()
    logger = ConsoleLoggerService(level=logging.WARNING, name=unique_name(), stream=stream)

    logger.info("hidden")
    logger.warning("shown")
    logger.set_level(logging.DEBUG)
    logger.debug("now shown")

    output = stream.getvalue()
    assert "hidden" not in output
    assert "shown" in output
    assert "now shown" in output


def test_file_logger_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "xrectsel.log"
    logger = FileLoggerService(str(log_file), level=logging.INFO, name=unique_name(), stream=io.StringIO())

    logger.error("failed to grab pointer", status="AlreadyGrabbed")
    for handler in logger.logger.handlers:
        handler.flush()

    assert "failed to grab pointer [status=AlreadyGrabbed]" in log_file.read_text()


def test_parse_level():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Info ") == logging.INFO
    assert parse_level(logging.ERROR) == logging.ERROR
    assert parse_level("nonsense") == logging.WARNING
    assert parse_level(None, default=logging.INFO) == logging.INFO
