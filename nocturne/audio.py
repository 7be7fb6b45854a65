"""Music playback through the pygame mixer."""

from __future__ import annotations

import os
from typing import Any

import pygame

MAX_VOLUME = 128


class MusicPlayer:
    """Plays one track at a time and keeps track of its position across seeks.

    Volume is expressed on a 0..MAX_VOLUME scale.
    """

    def __init__(self, music: Any = None) -> None:
        self._music = music if music is not None else pygame.mixer.music
        self.path: str | None = None
        self.volume = 0
        self._offset = 0.0

    def play(self, path: str | os.PathLike[str], volume: int) -> None:
        """Load a track and play it once from the start.

        Raises OSError when the track cannot be loaded.
        """
        path = os.fspath(path)
        try:
            self._music.load(path)
        except (pygame.error, OSError) as exc:
            raise OSError(f"could not load song {path}") from exc
        self.path = path
        self._offset = 0.0
        self.set_volume(volume)
        self._music.play(0)

    def set_volume(self, volume: int) -> None:
        """Set the volume, clamped to 0..MAX_VOLUME."""
        self.volume = max(0, min(MAX_VOLUME, int(volume)))
        self._music.set_volume(self.volume / MAX_VOLUME)

    def position(self) -> float:
        """Return the playback position in seconds, or 0 when nothing plays."""
        if self.path is None:
            return 0.0
        elapsed = self._music.get_pos()
        if elapsed < 0:
            return 0.0
        return self._offset + elapsed / 1000

    def seek(self, seconds: float) -> None:
        """Continue the current track from ``seconds``; ignored with no track."""
        if self.path is None:
            return
        seconds = max(0.0, float(seconds))
        self._music.play(0, seconds)
        self._offset = seconds