# xrectsel/infrastructure/platform/xlib_display_service.py
"""
X11 implementation of the display service using python-xlib.
"""
import os
from typing import Any, List, Optional

from Xlib import X, Xcursorfont
from Xlib import display as xdisplay
from Xlib import error as xerror

from xrectsel.domain.common.errors import (
    DisplayConnectionError, GeometryQueryError, GrabFailedError
)
from xrectsel.domain.common.result import Result
from xrectsel.domain.models.pointer_event import PointerEvent, PointerEventKind
from xrectsel.domain.models.region_model import RootGeometry
from xrectsel.domain.services.i_display_service import IDisplayService
from xrectsel.domain.services.i_logger_service import ILoggerService

GRAB_EVENT_MASK = X.PointerMotionMask | X.ButtonPressMask | X.ButtonReleaseMask

GRAB_STATUS_NAMES = {
    X.AlreadyGrabbed: "AlreadyGrabbed",
    X.GrabInvalidTime: "GrabInvalidTime",
    X.GrabNotViewable: "GrabNotViewable",
    X.GrabFrozen: "GrabFrozen",
}

EVENT_KINDS = {
    X.ButtonPress: PointerEventKind.PRESS,
    X.MotionNotify: PointerEventKind.MOTION,
    X.ButtonRelease: PointerEventKind.RELEASE,
}

# Cursor font glyphs are followed by their mask glyph
BLACK = (0, 0, 0)
WHITE = (0xFFFF, 0xFFFF, 0xFFFF)


class XlibDisplayService(IDisplayService):
    """
    Display service talking to an X server through python-xlib.

    Drawing requests share one error catcher instead of the library's
    default handler, which only prints; ``sync_discard`` hands the caught
    error back to the caller.
    """

    def __init__(self, logger: ILoggerService, display_name: Optional[str] = None):
        """
        Initialize the display service.

        Args:
            logger: Logger service for logging
            display_name: X display to connect to (None: $DISPLAY)
        """
        self.logger = logger
        self.display_name = display_name
        self._display: Optional[xdisplay.Display] = None
        self._draw_errors = xerror.CatchError()

    @property
    def display(self) -> xdisplay.Display:
        if self._display is None:
            raise RuntimeError("Display connection is not open")
        return self._display

    def open(self) -> Result[bool]:
        if self._display is not None:
            return Result.ok(True)

        shown_name = self.display_name or os.environ.get("DISPLAY", "")
        result = Result.from_operation(
            lambda: xdisplay.Display(self.display_name),
            self.logger,
            DisplayConnectionError,
            f"failed to open display {shown_name}",
            log_level="debug",
            display=shown_name
        )
        if result.is_failure:
            return Result.fail(result.error)

        self._display = result.value
        self.logger.debug("Connected to display", display=self._display.get_display_name())
        return Result.ok(True)

    def close(self) -> None:
        if self._display is None:
            return
        self._display.close()
        self._display = None
        self._draw_errors.reset()
        self.logger.debug("Display connection closed")

    def default_root(self) -> Any:
        return self.display.screen().root

    def create_crosshair_cursor(self) -> Any:
        font = self.display.open_font("cursor")
        try:
            return font.create_glyph_cursor(
                font, Xcursorfont.tcross, Xcursorfont.tcross + 1, BLACK, WHITE
            )
        finally:
            font.close()

    def free_cursor(self, cursor: Any) -> None:
        cursor.free()

    def grab_pointer(self, root: Any, cursor: Any) -> Result[bool]:
        status = root.grab_pointer(
            True, GRAB_EVENT_MASK,
            X.GrabModeAsync, X.GrabModeAsync,
            X.NONE, cursor, X.CurrentTime
        )
        if status != X.GrabSuccess:
            status_name = GRAB_STATUS_NAMES.get(status, str(status))
            self.logger.debug("Pointer grab refused", status=status_name)
            return Result.fail(GrabFailedError(details={"status": status_name}))
        return Result.ok(True)

    def ungrab_pointer(self) -> None:
        self.display.ungrab_pointer(X.CurrentTime)

    def create_invert_gc(self, root: Any) -> Any:
        return root.create_gc(
            function=X.GXinvert,
            subwindow_mode=X.IncludeInferiors,
            line_width=1
        )

    def free_gc(self, gc: Any) -> None:
        gc.free()

    def draw_rectangle(self, root: Any, gc: Any, x: int, y: int, width: int, height: int) -> None:
        root.rectangle(gc, x, y, width, height, onerror=self._draw_errors)

    def flush(self) -> None:
        self.display.flush()

    def sync_discard(self) -> List[Exception]:
        self.display.sync()
        discarded = 0
        while self.display.pending_events():
            self.display.next_event()
            discarded += 1
        if discarded:
            self.logger.debug("Discarded queued events", count=discarded)

        # The catcher keeps only the most recent error
        error = self._draw_errors.get_error()
        self._draw_errors.reset()
        return [error] if error is not None else []

    def next_event(self) -> PointerEvent:
        event = self.display.next_event()
        kind = EVENT_KINDS.get(event.type, PointerEventKind.OTHER)
        if kind is PointerEventKind.OTHER:
            return PointerEvent(kind)
        return PointerEvent(kind, event.root_x, event.root_y)

    def get_geometry(self, root: Any) -> Result[RootGeometry]:
        return Result.from_operation(
            root.get_geometry,
            self.logger,
            GeometryQueryError,
            "failed to get root window geometry",
            log_level="debug"
        ).map(lambda reply: RootGeometry(
            x=reply.x,
            y=reply.y,
            width=reply.width,
            height=reply.height,
            border_width=reply.border_width,
            depth=reply.depth
        ))
