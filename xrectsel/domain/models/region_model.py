# xrectsel/domain/models/region_model.py
from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class RootGeometry:
    """Geometry reported for the root window."""
    x: int
    y: int
    width: int
    height: int
    border_width: int
    depth: int


@dataclass(frozen=True)
class Region:
    """
    A selected screen area, measured against the root window.

    ``X`` and ``Y`` are the distances from the selection's right and bottom
    edges to the root window's right and bottom edges. They are computed
    from the stored root size so they cannot disagree with ``x``/``w`` and
    ``y``/``h``.
    """
    root: Any  # Opaque root window handle
    x: int  # Offset from left of screen
    y: int  # Offset from top of screen
    w: int  # Width
    h: int  # Height
    b: int  # Border width of the root window
    d: int  # Depth of the root window
    root_width: int
    root_height: int

    def __post_init__(self):
        if self.w < 0 or self.h < 0:
            raise ValueError(f"Region size must be non-negative, got {self.w}x{self.h}")

    @property
    def X(self) -> int:
        """Offset from right of screen."""
        return self.root_width - self.x - self.w

    @property
    def Y(self) -> int:
        """Offset from bottom of screen."""
        return self.root_height - self.y - self.h

    @classmethod
    def from_selection(cls, root: Any, rect: Tuple[int, int, int, int],
                       geometry: RootGeometry) -> 'Region':
        """Build a region from an ``(x, y, width, height)`` rectangle on ``root``."""
        x, y, w, h = rect
        return cls(
            root=root,
            x=x,
            y=y,
            w=w,
            h=h,
            b=geometry.border_width,
            d=geometry.depth,
            root_width=geometry.width,
            root_height=geometry.height
        )
