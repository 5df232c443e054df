import dataclasses

import pytest

from xrectsel.domain.models.drag_state import DragState
from xrectsel.domain.models.region_model import Region, RootGeometry


GEOMETRY = RootGeometry(x=0, y=0, width=1366, height=768, border_width=0, depth=24)


def test_region_from_selection_derives_mirrored_offsets():
    region = Region.from_selection("root", (100, 200, 300, 150), GEOMETRY)

    assert (region.x, region.y, region.w, region.h) == (100, 200, 300, 150)
    assert region.X == 1366 - 100 - 300
    assert region.Y == 768 - 200 - 150
    assert (region.b, region.d) == (0, 24)


def test_region_is_immutable():
    region = Region.from_selection("root", (0, 0, 1, 1), GEOMETRY)

    with pytest.raises(dataclasses.FrozenInstanceError):
        region.x = 5


def test_region_rejects_negative_size():
    with pytest.raises(ValueError):
        Region(root=None, x=0, y=0, w=-1, h=0, b=0, d=0, root_width=10, root_height=10)


def test_drag_state_press_resets_rectangle():
    state = DragState()
    state.press(10, 10)
    state.move(40, 30)
    state.press(5, 6)

    assert state.pressed
    assert state.rect == (5, 6, 0, 0)
    assert (state.anchor_x, state.anchor_y) == (5, 6)


@pytest.mark.parametrize("pointer,expected", [
    ((60, 80), (50, 50, 10, 30)),
    ((40, 80), (40, 50, 10, 30)),
    ((40, 20), (40, 20, 10, 30)),
    ((60, 20), (50, 20, 10, 30)),
    ((50, 50), (50, 50, 0, 0)),
])
def test_drag_state_move_normalizes(pointer, expected):
    state = DragState()
    state.press(50, 50)
    state.move(*pointer)

    assert state.rect == expected
    assert (state.pointer_x, state.pointer_y) == pointer
