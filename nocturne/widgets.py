"""Interactive interface widgets: boxes, buttons, images, song list, status bar."""

from __future__ import annotations

import enum
import os
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pygame

from nocturne.audio import MAX_VOLUME, MusicPlayer
from nocturne.playlist import Playlist
from nocturne.song import WavError, get_wav_length
from nocturne.state import LMB_MASK, UIState

BOX_IDLE_COLOR = 0x00FF00FF
BOX_HOVER_COLOR = 0xFF0000FF
SCROLL_STEP = 64
DOUBLE_CLICK_MILLIS = 250


def _inside(px: int, py: int, x: int, y: int, width: int, height: int) -> bool:
    return x <= px < x + width and y <= py < y + height


class ButtonState(enum.Enum):
    RELEASED = 0
    CLICKED = 1


@dataclass
class Button:
    """A plain coloured rectangle with a pressed state."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    color: int = 0
    state: ButtonState = ButtonState.RELEASED


@dataclass
class Box:
    """A rectangle that highlights on hover and reports clicks."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    color: int = 0
    onclick: Callable[[UIState, Box], None] | None = None

    def contains(self, x: int, y: int) -> bool:
        return _inside(x, y, self.x, self.y, self.width, self.height)

    def update(self, state: UIState) -> None:
        mouse = state.mouse
        self.color = BOX_IDLE_COLOR
        if self.contains(mouse.x, mouse.y):
            self.color = BOX_HOVER_COLOR
            if mouse.went_down(LMB_MASK) and self.onclick is not None:
                self.onclick(state, self)


@dataclass
class Image:
    """A picture drawn into a rectangle that reports clicks."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    surface: Any = None
    image_size: tuple[int, int] = (0, 0)
    onclick: Callable[[UIState, Image], None] | None = None

    def contains(self, x: int, y: int) -> bool:
        return _inside(x, y, self.x, self.y, self.width, self.height)

    def update(self, state: UIState) -> None:
        mouse = state.mouse
        if self.contains(mouse.x, mouse.y) and mouse.went_down(LMB_MASK):
            if self.onclick is not None:
                self.onclick(state, self)


def load_image(path: str | os.PathLike[str], x: int, y: int, width: int, height: int) -> Image:
    """Load a picture from disk into an Image widget.

    Raises OSError when the file is missing or cannot be decoded.
    """
    try:
        surface = pygame.image.load(os.fspath(path))
    except pygame.error as exc:
        raise OSError(f"cannot load image {os.fspath(path)}") from exc
    return Image(x=x, y=y, width=width, height=height, surface=surface, image_size=surface.get_size())


@dataclass
class StatusBar:
    """The bottom bar with the progress bar and volume bar.

    The bar geometry fields are filled in when the bar is drawn.
    """

    song_name: str = ""
    song_progress: float = 0.0
    song_length: float = 0.0
    song_volume: int = 0
    progress_bar_length: int = 0
    font: Any = None
    song_name_surface: Any = None
    padding: int = 0
    margin: int = 0
    size: int = 0
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    playbar_x: int = 0
    playbar_y: int = 0
    playbar_width: int = 0
    playbar_height: int = 0
    volume_bar_length: int = 0
    volume_x: int = 0
    volume_y: int = 0
    volume_width: int = 0
    volume_height: int = 0
    player: MusicPlayer | None = None

    def update(self, state: UIState) -> None:
        """Track playback progress; clicks seek on the playbar or set the volume."""
        progress = self.player.position() if self.player is not None else 0.0
        self.song_progress = max(0.0, progress)

        mouse = state.mouse
        if not mouse.went_down(LMB_MASK):
            return
        if _inside(mouse.x, mouse.y, self.playbar_x, self.playbar_y, self.playbar_width, self.playbar_height):
            fraction = (mouse.x - self.playbar_x) / self.playbar_width
            if self.player is not None:
                self.player.seek(fraction * self.song_length)
        elif _inside(mouse.x, mouse.y, self.volume_x, self.volume_y, self.volume_width, self.volume_height):
            fraction = (mouse.x - self.volume_x) / self.volume_width
            self.song_volume = int(fraction * MAX_VOLUME)
            if self.player is not None:
                self.player.set_volume(self.song_volume)


@dataclass
class SongList:
    """A scrollable list of songs; click once to select, again to play."""

    songs: Playlist = field(default_factory=Playlist)
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    song_size: int = 0
    margin: int = 0
    padding: int = 0
    scrolloff: int = 0
    selected_index: int = -1
    font: Any = None
    player: MusicPlayer | None = None
    status_bar: StatusBar | None = None

    @property
    def row_height(self) -> int:
        return self.song_size + self.margin

    def contains(self, x: int, y: int) -> bool:
        return _inside(x, y, self.x, self.y, self.width, self.height)

    def update(self, state: UIState) -> None:
        mouse = state.mouse
        if not self.contains(mouse.x, mouse.y):
            return

        if mouse.scroll:
            self.scrolloff -= mouse.scroll * SCROLL_STEP
            total = self.row_height * len(self.songs)
            if total < self.height:
                self.scrolloff = 0
            else:
                if self.scrolloff <= 0:
                    self.scrolloff = 0
                if total - self.scrolloff <= self.height:
                    self.scrolloff = total - self.height

        if mouse.went_down(LMB_MASK):
            track = (mouse.y - self.y + self.scrolloff) // self.row_height
            if 0 <= track < len(self.songs):
                if track == self.selected_index:
                    self._play(track)
                else:
                    print(f"selected track {track}: {self.songs[track].name}")
                    self.selected_index = track

    def _play(self, track: int) -> None:
        song = self.songs[track]
        print(f"playing track {track}: {song.name}")
        self.selected_index = -1

        path = song.audio_path
        if self.status_bar is not None:
            volume = self.status_bar.song_volume
            try:
                self.status_bar.song_length = get_wav_length(path)
            except WavError:
                self.status_bar.song_length = -1.0
        else:
            volume = self.player.volume if self.player is not None else 0

        if self.player is not None:
            try:
                self.player.play(path, volume)
            except OSError:
                print("Could not load song", file=sys.stderr)