"""The application window and simple drawing primitives."""

from __future__ import annotations

import os
from dataclasses import dataclass

import pygame

from nocturne.playlist import Playlist

VISIBLE_ROWS = 4


@dataclass
class Window:
    """A drawing target with a current draw colour."""

    surface: pygame.Surface
    draw_color: tuple[int, int, int, int] = (255, 255, 255, 255)

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def draw_rectangle(self, x: int, y: int, width: int, height: int) -> None:
        """Draw a one pixel outline of a rectangle in the draw colour."""
        pygame.draw.rect(self.surface, self.draw_color, pygame.Rect(x, y, width, height), 1)

    def fill_rectangle(self, x: int, y: int, width: int, height: int) -> None:
        """Fill a rectangle with the draw colour."""
        self.surface.fill(self.draw_color, pygame.Rect(x, y, width, height))


def create_window(width: int, height: int, title: str) -> Window:
    """Open the display with the given size and title."""
    pygame.display.init()
    surface = pygame.display.set_mode((width, height))
    pygame.display.set_caption(title)
    return Window(surface)


def _load_surface(path: str | os.PathLike[str]) -> pygame.Surface | None:
    try:
        return pygame.image.load(os.fspath(path))
    except (pygame.error, OSError):
        return None


def _crop(image: pygame.Surface, area: pygame.Rect) -> pygame.Surface:
    out = pygame.Surface(area.size, pygame.SRCALPHA, 32)
    out.blit(image, (0, 0), area)
    return out


def draw_playlist(window: Window, playlist: Playlist) -> None:
    """Draw each song's thumbnail, cropped from 4:3 to 16:9, one per row.

    Songs whose thumbnail cannot be loaded are skipped.
    """
    row_height = window.height // VISIBLE_ROWS * 3 // 4
    for index, song in enumerate(playlist):
        image = _load_surface(song.thumbnail_path)
        if image is None:
            continue
        image_width, image_height = image.get_size()
        area = pygame.Rect(0, image_height // 8, image_width, image_height * 3 // 4)
        if area.width == 0 or area.height == 0:
            continue
        ratio = image_width / image_height * 4 / 3
        dest = pygame.Rect(
            (window.width - image_width) // 2,
            row_height * index,
            int(row_height * ratio),
            row_height,
        )
        scaled = pygame.transform.smoothscale(_crop(image, area), dest.size)
        window.surface.blit(scaled, dest)