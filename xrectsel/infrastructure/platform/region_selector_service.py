# xrectsel/infrastructure/platform/region_selector_service.py
"""
Interactive rectangle selection on the root window.

The pointer is grabbed with a cross-hair cursor and the rectangle being
dragged is outlined with an inverting graphics context. Drawing the same
outline a second time restores the pixels underneath, so every outline is
erased by redrawing it before the next one is drawn and again before the
grab is released.
"""
from typing import Any

from xrectsel.domain.common.result import Result
from xrectsel.domain.models.drag_state import DragState
from xrectsel.domain.models.pointer_event import PointerEvent, PointerEventKind
from xrectsel.domain.models.region_model import Region
from xrectsel.domain.services.i_display_service import IDisplayService
from xrectsel.domain.services.i_logger_service import ILoggerService
from xrectsel.domain.services.i_region_selector_service import IRegionSelectorService


class RegionSelectorService(IRegionSelectorService):
    """Service implementation of the drag-to-select loop."""

    def __init__(self, logger: ILoggerService):
        self.logger = logger

    def select(self, display: IDisplayService, root: Any) -> Result[Region]:
        """
        Let the user drag out a rectangle and measure it against ``root``.

        The first button release ends the selection. A press while a drag
        is already in progress starts the drag over from the new point.

        Args:
            display: Open display connection
            root: Root window handle from ``display.default_root()``

        Returns:
            Result containing the selected Region, or failing with
            GrabFailedError or GeometryQueryError
        """
        cursor = display.create_crosshair_cursor()

        grab_result = display.grab_pointer(root, cursor)
        if grab_result.is_failure:
            display.free_cursor(cursor)
            return Result.fail(grab_result.error)

        self.logger.debug("Pointer grabbed, waiting for selection")

        state = DragState()
        gc = None
        try:
            gc = display.create_invert_gc(root)
            self._track(display, root, gc, state)
        finally:
            try:
                if gc is not None and state.last_drawn is not None:
                    self._erase(display, root, gc, state)
                    display.flush()
            finally:
                display.ungrab_pointer()
                display.free_cursor(cursor)
                if gc is not None:
                    display.free_gc(gc)

        for error in display.sync_discard():
            self.logger.warning("Display reported an error while drawing the selection", error=error)

        geometry_result = display.get_geometry(root)
        if geometry_result.is_failure:
            return Result.fail(geometry_result.error)

        region = Region.from_selection(root, state.rect, geometry_result.value)
        self.logger.info(
            "Region selected",
            x=region.x, y=region.y, w=region.w, h=region.h, X=region.X, Y=region.Y
        )
        return Result.ok(region)

    def _track(self, display: IDisplayService, root: Any, gc: Any, state: DragState) -> None:
        """Process events until a button is released."""
        while True:
            event = display.next_event()
            if event.kind is PointerEventKind.PRESS:
                self._on_press(display, root, gc, state, event)
            elif event.kind is PointerEventKind.MOTION:
                self._on_motion(display, root, gc, state, event)
            elif event.kind is PointerEventKind.RELEASE:
                return

    def _on_press(self, display: IDisplayService, root: Any, gc: Any,
                  state: DragState, event: PointerEvent) -> None:
        if state.last_drawn is not None:
            self._erase(display, root, gc, state)
            display.flush()
        state.press(event.x_root, event.y_root)
        self.logger.debug("Drag started", x=event.x_root, y=event.y_root)

    def _on_motion(self, display: IDisplayService, root: Any, gc: Any,
                   state: DragState, event: PointerEvent) -> None:
        if not state.pressed:
            return
        self._erase(display, root, gc, state)
        state.move(event.x_root, event.y_root)
        self._draw(display, root, gc, state)
        display.flush()

    def _draw(self, display: IDisplayService, root: Any, gc: Any, state: DragState) -> None:
        display.draw_rectangle(root, gc, *state.rect)
        state.last_drawn = state.rect

    def _erase(self, display: IDisplayService, root: Any, gc: Any, state: DragState) -> None:
        if state.last_drawn is None:
            return
        display.draw_rectangle(root, gc, *state.last_drawn)
        state.last_drawn = None
