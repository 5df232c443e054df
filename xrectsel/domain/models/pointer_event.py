# xrectsel/domain/models/pointer_event.py
from dataclasses import dataclass
from enum import Enum


class PointerEventKind(Enum):
    """Pointer events the selection loop distinguishes."""
    PRESS = "press"
    MOTION = "motion"
    RELEASE = "release"
    OTHER = "other"


@dataclass(frozen=True)
class PointerEvent:
    """A display event reduced to its kind and root-relative pointer position."""
    kind: PointerEventKind
    x_root: int = 0
    y_root: int = 0
