"""The element tree of the interface: updating and drawing its widgets."""

from __future__ import annotations

import enum
import math
import sys
from dataclasses import dataclass, field
from typing import Any, Callable

import pygame

from nocturne.audio import MAX_VOLUME
from nocturne.state import UIState
from nocturne.widgets import Box, Button, Image, SongList, StatusBar
from nocturne.window import Window

BACKGROUND_COLOR = (40, 42, 54, 255)
ROW_COLOR = (0x44, 0x47, 0x5A, 255)
SELECTED_COLOR = (0x62, 0x72, 0xA4, 255)
BAR_COLOR = (0x62, 0x72, 0xA4, 255)
FILL_COLOR = (0xF8, 0xF8, 0xF2, 255)
BAR_THICKNESS = 6


class ElementType(enum.Enum):
    BOX = 0
    BUTTON = 1
    IMAGE = 2
    SONGLIST = 3
    STATUSBAR = 4
    TEXT = 5


@dataclass
class Element:
    """A widget in the interface; invisible ones are not drawn, frozen ones not updated."""

    type: ElementType
    data: Any = None
    invisible: bool = False
    frozen: bool = False


@dataclass
class UI:
    """A window and the elements drawn into it, in order."""

    window: Window
    elements: list[Element] = field(default_factory=list)

    def push_element(self, element: Element) -> None:
        self.elements.append(element)

    def update(self, state: UIState) -> None:
        for element in self.elements:
            update_element(state, element)

    def draw(self) -> None:
        self.window.draw_color = BACKGROUND_COLOR
        self.window.surface.fill(BACKGROUND_COLOR)
        for element in self.elements:
            draw_element(element, self)


def create_ui(window: Window) -> UI:
    """Create an empty interface drawing into ``window``."""
    return UI(window)


_UPDATABLE = frozenset(
    {ElementType.BOX, ElementType.IMAGE, ElementType.SONGLIST, ElementType.STATUSBAR}
)


def update_element(state: UIState, element: Element) -> None:
    """Let an element react to the input state, unless it is frozen."""
    if element.frozen:
        return
    if element.type in _UPDATABLE:
        element.data.update(state)
    else:
        print(
            f"couldn't find a method to UPDATE element type: {element.type.value}",
            file=sys.stderr,
        )


def _rgba(color: int) -> tuple[int, int, int, int]:
    return (color >> 24 & 0xFF, color >> 16 & 0xFF, color >> 8 & 0xFF, color & 0xFF)


def _fill(window: Window, color: tuple[int, int, int, int], rect: pygame.Rect) -> None:
    window.draw_color = color
    window.fill_rectangle(rect.x, rect.y, rect.w, rect.h)


def _scaled(surface: pygame.Surface, size: tuple[int, int]) -> pygame.Surface:
    try:
        return pygame.transform.smoothscale(surface, size)
    except ValueError:
        return pygame.transform.scale(surface, size)


def _draw_box(box: Box | Button, ui: UI) -> None:
    _fill(ui.window, _rgba(box.color), pygame.Rect(box.x, box.y, box.width, box.height))


def _draw_image(image: Image, ui: UI) -> None:
    if image.surface is None or image.width <= 0 or image.height <= 0:
        return
    scaled = pygame.transform.scale(image.surface, (image.width, image.height))
    ui.window.surface.blit(scaled, (image.x, image.y))


def _draw_thumbnail(window: Window, image: pygame.Surface, size: tuple[int, int], dest: pygame.Rect) -> None:
    width, height = size
    area = pygame.Rect(0, height // 8, width, height * 3 // 4)
    if area.w <= 0 or area.h <= 0 or dest.w <= 0 or dest.h <= 0:
        return
    area = area.clip(image.get_rect())
    if area.w <= 0 or area.h <= 0:
        return
    window.surface.blit(_scaled(image.subsurface(area), dest.size), dest)


def _draw_songlist(songlist: SongList, ui: UI) -> None:
    window = ui.window
    row_height = songlist.row_height
    if row_height <= 0:
        return

    first = max(0, math.floor(songlist.scrolloff / row_height))
    last = min(len(songlist.songs), math.ceil((songlist.scrolloff + window.height) / row_height))

    for index in range(first, last):
        song = songlist.songs[index]
        color = SELECTED_COLOR if index == songlist.selected_index else ROW_COLOR
        background = pygame.Rect(
            songlist.x,
            songlist.y + index * row_height - songlist.scrolloff + songlist.margin,
            songlist.width,
            songlist.song_size,
        )
        _fill(window, color, background)

        dest = pygame.Rect(background.x, background.y, background.h * 16 // 9, background.h)
        if song.image is not None:
            _draw_thumbnail(window, song.image, song.image_size, dest)

        title = song.title_surface
        if title is None:
            continue
        inset = dest.w + songlist.padding
        title_width, title_height = title.get_size()
        max_width = background.w - inset - songlist.padding
        shown = max(0, min(title_width, max_width))
        window.surface.blit(
            title,
            (background.x + inset, background.y + (background.h - title_height) // 2),
            pygame.Rect(0, 0, shown, title_height),
        )


def _draw_statusbar(bar: StatusBar, ui: UI) -> None:
    window = ui.window
    background = pygame.Rect(
        bar.margin,
        window.height - (bar.size + bar.margin),
        window.width - 2 * bar.margin,
        bar.size,
    )
    bar.x, bar.y, bar.width, bar.height = background.x, background.y, background.w, background.h
    _fill(window, ROW_COLOR, background)

    playbar = pygame.Rect(
        (background.w - bar.progress_bar_length) // 2,
        background.y + (background.h - BAR_THICKNESS) // 2,
        bar.progress_bar_length,
        BAR_THICKNESS,
    )
    bar.playbar_x, bar.playbar_y = playbar.x, playbar.y
    bar.playbar_width, bar.playbar_height = playbar.w, playbar.h
    _fill(window, BAR_COLOR, playbar)

    fraction = bar.song_progress / bar.song_length if bar.song_length > 0 else 0.0
    playbar.w = max(0, min(playbar.w, int(playbar.w * fraction)))
    _fill(window, FILL_COLOR, playbar)

    volume_bar = pygame.Rect(
        window.width - bar.volume_bar_length - bar.margin - bar.padding,
        background.y + (background.h - BAR_THICKNESS) // 2,
        bar.volume_bar_length,
        BAR_THICKNESS,
    )
    bar.volume_x, bar.volume_y = volume_bar.x, volume_bar.y
    bar.volume_width, bar.volume_height = volume_bar.w, volume_bar.h
    _fill(window, BAR_COLOR, volume_bar)

    volume_bar.w = max(0, min(volume_bar.w, int(volume_bar.w * (bar.song_volume / MAX_VOLUME))))
    _fill(window, FILL_COLOR, volume_bar)


_DRAWERS: dict[ElementType, Callable[[Any, UI], None]] = {
    ElementType.BOX: _draw_box,
    ElementType.BUTTON: _draw_box,
    ElementType.IMAGE: _draw_image,
    ElementType.SONGLIST: _draw_songlist,
    ElementType.STATUSBAR: _draw_statusbar,
}


def draw_element(element: Element, ui: UI) -> None:
    """Draw an element into the interface's window, unless it is invisible."""
    if element.invisible:
        return
    drawer = _DRAWERS.get(element.type)
    if drawer is None:
        print(
            f"couldn't find a method to DRAW element type: {element.type.value}",
            file=sys.stderr,
        )
        return
    drawer(element.data, ui)