"""
Shared fixtures: a recording logger and a scripted display.

FakeDisplayService replays a list of pointer events and models the
inverting graphics context: drawing a rectangle toggles it in ``visible``,
so a rectangle drawn twice disappears again.
"""
from collections import deque
from typing import Any, Iterable, List, Optional, Union

import pytest

from xrectsel.domain.common.di_container import DIContainer
from xrectsel.domain.common.errors import (
    DisplayConnectionError, GeometryQueryError, GrabFailedError
)
from xrectsel.domain.common.result import Result
from xrectsel.domain.models.pointer_event import PointerEvent, PointerEventKind
from xrectsel.domain.models.region_model import RootGeometry
from xrectsel.domain.services.i_config_repository_service import IConfigRepository
from xrectsel.domain.services.i_display_service import IDisplayService
from xrectsel.domain.services.i_logger_service import ILoggerService
from xrectsel.domain.services.i_region_selector_service import IRegionSelectorService
from xrectsel.domain.services.i_template_renderer_service import ITemplateRendererService
from xrectsel.infrastructure.config.json_config_repository import JsonConfigRepository
from xrectsel.infrastructure.formatting.template_renderer_service import TemplateRendererService
from xrectsel.infrastructure.platform.region_selector_service import RegionSelectorService

ROOT = "root-window"
SCREEN = RootGeometry(x=0, y=0, width=1920, height=1080, border_width=0, depth=24)


def press(x, y):
    return PointerEvent(PointerEventKind.PRESS, x, y)


def motion(x, y):
    return PointerEvent(PointerEventKind.MOTION, x, y)


def release(x=0, y=0):
    return PointerEvent(PointerEventKind.RELEASE, x, y)


def other():
    return PointerEvent(PointerEventKind.OTHER)


class RecordingLogger(ILoggerService):
    def __init__(self):
        self.records = []
        self.level = None

    def _record(self, level, message, kwargs):
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs) -> None:
        self._record("debug", message, kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._record("info", message, kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._record("warning", message, kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._record("error", message, kwargs)

    def critical(self, message: str, **kwargs) -> None:
        self._record("critical", message, kwargs)

    def set_level(self, level: int) -> None:
        self.level = level

    def messages(self, level):
        return [message for lvl, message, _ in self.records if lvl == level]


class FakeDisplayService(IDisplayService):
    def __init__(self, events: Iterable[Union[PointerEvent, BaseException]] = (),
                 grab_ok: bool = True,
                 geometry: RootGeometry = SCREEN,
                 geometry_ok: bool = True,
                 open_ok: bool = True,
                 draw_errors: Optional[List[Exception]] = None):
        self.events = deque(events)
        self.grab_ok = grab_ok
        self.geometry = geometry
        self.geometry_ok = geometry_ok
        self.open_ok = open_ok
        self.draw_errors = list(draw_errors or [])

        self.calls: List[str] = []
        self.draws: List[tuple] = []
        self.visible = set()
        self.events_read = 0
        self.is_open = False
        self.grabbed = False
        self.live_cursors = set()
        self.live_gcs = set()
        self._next_id = 0

    def _new_handle(self, prefix):
        self._next_id += 1
        return f"{prefix}-{self._next_id}"

    def open(self) -> Result[bool]:
        self.calls.append("open")
        if not self.open_ok:
            return Result.fail(DisplayConnectionError("failed to open display :99"))
        self.is_open = True
        return Result.ok(True)

    def close(self) -> None:
        self.calls.append("close")
        self.is_open = False

    def default_root(self) -> Any:
        return ROOT

    def create_crosshair_cursor(self) -> Any:
        self.calls.append("create_cursor")
        cursor = self._new_handle("cursor")
        self.live_cursors.add(cursor)
        return cursor

    def free_cursor(self, cursor: Any) -> None:
        self.calls.append("free_cursor")
        self.live_cursors.remove(cursor)

    def grab_pointer(self, root: Any, cursor: Any) -> Result[bool]:
        self.calls.append("grab")
        assert cursor in self.live_cursors
        if not self.grab_ok:
            return Result.fail(GrabFailedError(details={"status": "AlreadyGrabbed"}))
        self.grabbed = True
        return Result.ok(True)

    def ungrab_pointer(self) -> None:
        self.calls.append("ungrab")
        self.grabbed = False

    def create_invert_gc(self, root: Any) -> Any:
        self.calls.append("create_gc")
        gc = self._new_handle("gc")
        self.live_gcs.add(gc)
        return gc

    def free_gc(self, gc: Any) -> None:
        self.calls.append("free_gc")
        self.live_gcs.remove(gc)

    def draw_rectangle(self, root: Any, gc: Any, x: int, y: int, width: int, height: int) -> None:
        assert root == ROOT
        assert gc in self.live_gcs
        assert self.grabbed
        self.calls.append("draw")
        rect = (x, y, width, height)
        self.draws.append(rect)
        self.visible ^= {rect}

    def flush(self) -> None:
        self.calls.append("flush")

    def sync_discard(self) -> List[Exception]:
        self.calls.append("sync")
        errors, self.draw_errors = self.draw_errors, []
        return errors

    def next_event(self) -> PointerEvent:
        if not self.events:
            raise AssertionError("selection loop read past the scripted events")
        self.events_read += 1
        event = self.events.popleft()
        if isinstance(event, BaseException):
            raise event
        return event

    def get_geometry(self, root: Any) -> Result[RootGeometry]:
        self.calls.append("geometry")
        if not self.geometry_ok:
            return Result.fail(GeometryQueryError(details={"root": root}))
        return Result.ok(self.geometry)


class StaticConfigRepository(IConfigRepository):
    def __init__(self, **overrides):
        self.config = {key: default for key, (default, _) in JsonConfigRepository.DEFAULT_CONFIG.items()}
        self.config.update(overrides)

    def load_config(self, force_reload: bool = False) -> Result[dict]:
        return Result.ok(self.config)

    def get_setting(self, key, default=None):
        value = self.config.get(key)
        return default if value is None else value


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def selector(logger):
    return RegionSelectorService(logger)


@pytest.fixture
def renderer(logger):
    return TemplateRendererService(logger)


@pytest.fixture
def make_container(logger):
    """Build a container around a fake display and an in-memory config."""
    def build(display: FakeDisplayService, config: Optional[IConfigRepository] = None) -> DIContainer:
        container = DIContainer()
        container.register_instance(ILoggerService, logger)
        container.register_instance(IConfigRepository, config or StaticConfigRepository())
        container.register_instance(IDisplayService, display)
        container.register_factory(IRegionSelectorService, lambda: RegionSelectorService(logger))
        container.register_factory(ITemplateRendererService, lambda: TemplateRendererService(logger))
        return container
    return build
