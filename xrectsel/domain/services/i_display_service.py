# xrectsel/domain/services/i_display_service.py

"""
Display service interface.

The window-system primitives the selection loop needs: a cursor, a pointer
grab, an inverting graphics context to draw outlines with, an event stream
and the root window's geometry. Handles returned by this interface (root,
cursor, gc) are opaque to callers and only passed back into it.
"""
from abc import ABC, abstractmethod
from typing import Any, List

from xrectsel.domain.common.result import Result
from xrectsel.domain.models.pointer_event import PointerEvent
from xrectsel.domain.models.region_model import RootGeometry


class IDisplayService(ABC):
    """Interface for a connection to a display server."""

    @abstractmethod
    def open(self) -> Result[bool]:
        """
        Connect to the display.

        Returns:
            Result failing with DisplayConnectionError if the display is unreachable
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the connection. Safe to call when not connected."""
        pass

    @abstractmethod
    def default_root(self) -> Any:
        """Root window of the default screen."""
        pass

    @abstractmethod
    def create_crosshair_cursor(self) -> Any:
        """Create the cross-hair cursor shown while the pointer is grabbed."""
        pass

    @abstractmethod
    def free_cursor(self, cursor: Any) -> None:
        pass

    @abstractmethod
    def grab_pointer(self, root: Any, cursor: Any) -> Result[bool]:
        """
        Grab the pointer for motion, button-press and button-release events.

        Returns:
            Result failing with GrabFailedError when another client holds the grab
        """
        pass

    @abstractmethod
    def ungrab_pointer(self) -> None:
        pass

    @abstractmethod
    def create_invert_gc(self, root: Any) -> Any:
        """Create a graphics context that inverts the pixels it draws over."""
        pass

    @abstractmethod
    def free_gc(self, gc: Any) -> None:
        pass

    @abstractmethod
    def draw_rectangle(self, root: Any, gc: Any, x: int, y: int, width: int, height: int) -> None:
        """Draw a rectangle outline; with an inverting gc a second call erases it."""
        pass

    @abstractmethod
    def flush(self) -> None:
        """Send buffered requests to the server."""
        pass

    @abstractmethod
    def sync_discard(self) -> List[Exception]:
        """
        Round-trip to the server and drop queued events.

        Returns:
            Errors the server reported for earlier drawing requests
        """
        pass

    @abstractmethod
    def next_event(self) -> PointerEvent:
        """Block until the next event arrives."""
        pass

    @abstractmethod
    def get_geometry(self, root: Any) -> Result[RootGeometry]:
        """
        Query the geometry of ``root``.

        Returns:
            Result failing with GeometryQueryError if the query is refused
        """
        pass
