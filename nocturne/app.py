"""The player application: builds the interface and runs the event loop."""

from __future__ import annotations

import argparse
import enum
import sys
from dataclasses import dataclass
from typing import Any

import pygame

from nocturne.audio import MusicPlayer
from nocturne.playlist import Playlist, download_list, load_list
from nocturne.state import UIState, clear_mouse_edges, update_mouse_state
from nocturne.ui import UI, Element, ElementType, create_ui
from nocturne.widgets import SongList, StatusBar
from nocturne.window import Window, create_window

LIMIT_FRAMERATE = False
FRAMERATE_COUNTER = True
FRAMERATE = 240

DEFAULT_LIST = "list.txt"
FONT_PATH = "fonts/NotoSansCJKjp-Regular.otf"
TITLE_COLOR = (0xF8, 0xF8, 0xF2)
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720


class PlayerPage(enum.Enum):
    HOME = 0
    LIBRARY = 1
    PLAYLIST = 2
    QUEUE = 3
    SETTINGS = 4


@dataclass
class FrameCounter:
    """Counts frames and reports the rate once at least a second has passed."""

    start_ms: int = 0
    frames: int = 0
    fps: float = 0.0

    def tick(self, now_ms: int) -> float | None:
        """Count one frame; return the frame rate when a measurement completes."""
        self.frames += 1
        elapsed = now_ms - self.start_ms
        if elapsed < 1000:
            return None
        self.fps = self.frames / (elapsed / 1000)
        self.frames = 0
        self.start_ms = now_ms
        return self.fps


def build_interface(window: Window, playlist: Playlist, player: MusicPlayer) -> UI:
    """Create the interface with the song list above the status bar."""
    ui = create_ui(window)

    songlist = SongList(
        songs=playlist,
        x=100,
        y=0,
        width=1080,
        height=720,
        song_size=32,
        margin=8,
        padding=8,
        selected_index=-1,
        player=player,
    )
    status_bar = StatusBar(
        song_length=100,
        song_progress=64,
        song_volume=10,
        progress_bar_length=window.width // 2,
        volume_bar_length=window.width // 8,
        margin=8,
        padding=8,
        size=32,
        player=player,
    )
    songlist.status_bar = status_bar
    songlist.height -= status_bar.size + status_bar.padding * 2

    ui.push_element(Element(ElementType.SONGLIST, songlist))
    ui.push_element(Element(ElementType.STATUSBAR, status_bar))
    return ui


def _find(ui: UI, kind: ElementType) -> Any:
    return next(element.data for element in ui.elements if element.type is kind)


def _load_font(size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(FONT_PATH, size)
    except (OSError, pygame.error):
        return pygame.font.Font(None, size)


def _prepare_songs(playlist: Playlist, font: pygame.font.Font) -> None:
    for song in playlist:
        try:
            song.image = pygame.image.load(song.thumbnail_path)
            song.image_size = song.image.get_size()
        except (OSError, pygame.error):
            song.image = None
            song.image_size = (0, 0)
        song.title_surface = font.render(song.name, True, TITLE_COLOR)


def _wants_quit(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return (
        event.type == pygame.KEYDOWN
        and event.key == pygame.K_q
        and bool(event.mod & pygame.KMOD_CTRL)
    )


def _run(ui: UI, state: UIState) -> None:
    mouse = state.mouse
    clock = pygame.time.Clock()
    counter = FrameCounter(pygame.time.get_ticks()) if FRAMERATE_COUNTER else None
    mouse_events = (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP)

    while True:
        mouse.scroll = 0
        for event in pygame.event.get():
            if _wants_quit(event):
                return
            if event.type in mouse_events:
                x, y = pygame.mouse.get_pos()
                left, _, right = pygame.mouse.get_pressed()[:3]
                update_mouse_state(mouse, x, y, left, right)
            elif event.type == pygame.MOUSEWHEEL:
                mouse.scroll = event.y

        ui.draw()
        ui.update(state)
        clear_mouse_edges(mouse)
        pygame.display.flip()

        if LIMIT_FRAMERATE:
            clock.tick(FRAMERATE)
        if counter is not None:
            fps = counter.tick(pygame.time.get_ticks())
            if fps is not None:
                print(f"FPS: {fps:.2f}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Download the listed songs and run the player window."""
    parser = argparse.ArgumentParser(prog="nocturne", description="Play the songs of a list file.")
    parser.add_argument("list", nargs="?", default=DEFAULT_LIST, help="list of song ids and names")
    args = parser.parse_args(argv)

    try:
        playlist = load_list(args.list)
    except OSError as exc:
        print(f"Could not read {args.list}: {exc}", file=sys.stderr)
        return 1
    download_list(playlist)
    print("Cataloging done!")

    try:
        pygame.display.init()
    except pygame.error:
        print("Could not initialize the display", file=sys.stderr)
        return 1
    try:
        pygame.font.init()
    except pygame.error:
        print("Could not initialize fonts", file=sys.stderr)
        return 1
    try:
        pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=2048)
    except pygame.error:
        print("Could not initialize the mixer", file=sys.stderr)
        return 1

    try:
        window = create_window(WINDOW_WIDTH, WINDOW_HEIGHT, "Nocturne")
        player = MusicPlayer()
        ui = build_interface(window, playlist, player)

        songlist: SongList = _find(ui, ElementType.SONGLIST)
        status_bar: StatusBar = _find(ui, ElementType.STATUSBAR)
        songlist.font = _load_font(songlist.song_size - 2 * songlist.padding)
        status_bar.font = _load_font(status_bar.size - 2 * status_bar.padding)
        _prepare_songs(playlist, songlist.font)

        _run(ui, UIState(window=window))
    finally:
        pygame.quit()
    return 0