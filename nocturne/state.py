"""Mouse and interface input state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

LMB_MASK = 0b01
RMB_MASK = 0b10
BUTTONS_MASK = LMB_MASK | RMB_MASK
DOWN_EDGE_SHIFT = 2
UP_EDGE_SHIFT = 4


@dataclass
class Mouse:
    """Pointer position, scroll and button bits.

    ``state`` packs three groups of two bits, lowest first: the buttons
    currently held, buttons pressed this frame and buttons released this
    frame, each ordered [rmb, lmb].
    """

    x: int = 0
    y: int = 0
    anchor_x: int = 0
    anchor_y: int = 0
    state: int = 0
    scroll: int = 0

    def is_pressed(self, mask: int) -> bool:
        return bool(self.state & mask)

    def went_down(self, mask: int) -> bool:
        return bool(self.state & (mask << DOWN_EDGE_SHIFT))

    def went_up(self, mask: int) -> bool:
        return bool(self.state & (mask << UP_EDGE_SHIFT))


@dataclass
class UIState:
    """Input state shared by the interface elements."""

    window: Any = None
    mouse: Mouse = field(default_factory=Mouse)
    volume: int = 0


def update_mouse_state(mouse: Mouse, x: int, y: int, left: bool, right: bool) -> None:
    """Record the pointer position and buttons, deriving press and release edges."""
    mouse.x = x
    mouse.y = y

    old_buttons = mouse.state & BUTTONS_MASK
    new_buttons = (LMB_MASK if left else 0) | (RMB_MASK if right else 0)

    changed = new_buttons ^ old_buttons
    down_edge = changed & new_buttons
    up_edge = changed & old_buttons

    mouse.state = (
        new_buttons
        | (down_edge << DOWN_EDGE_SHIFT)
        | (up_edge << UP_EDGE_SHIFT)
    )


def clear_mouse_edges(mouse: Mouse) -> None:
    """Forget the press and release edges, keeping the held buttons."""
    mouse.state &= ~(BUTTONS_MASK << DOWN_EDGE_SHIFT)
    mouse.state &= ~(BUTTONS_MASK << UP_EDGE_SHIFT)