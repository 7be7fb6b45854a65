"""Songs, their downloads and WAV duration probing."""

from __future__ import annotations

import os
import shlex
import struct
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from nocturne.fileio import file_exists

SONGS_DIR = "songs"
COOKIES_FILE = "cookies/cookies.txt"
COOKIE_COLLECTOR = "./cookies/collect.sh"

_COMMAND_NOT_FOUND = 127

# RIFF header, "WAVE" tag and the 16 bytes of a PCM fmt chunk.
_WAV_HEADER = struct.Struct("<4sI4s4sIHHIIHH")
_CHUNK_HEADER = struct.Struct("<4sI")


class WavError(ValueError):
    """Raised when a WAV file cannot be read or has no data chunk."""


@dataclass
class Song:
    """A track identified by its video id, with optional rendering resources."""

    id: str
    name: str = ""
    image: Any = None
    image_size: tuple[int, int] = (0, 0)
    title_surface: Any = None

    @property
    def audio_path(self) -> str:
        return f"{SONGS_DIR}/{self.id}.wav"

    @property
    def thumbnail_path(self) -> str:
        return f"{SONGS_DIR}/{self.id}.jpg"


def song_from_yt(id: str) -> Song:
    """Create a song from a video id, with no name."""
    return Song(id=id)


def _run(cmd: str | Sequence[str], *, silent: bool) -> int:
    output = subprocess.DEVNULL if silent else None
    try:
        result = subprocess.run(
            cmd,
            shell=isinstance(cmd, str),
            stdout=output,
            stderr=output,
            check=False,
        )
    except OSError:
        return _COMMAND_NOT_FOUND
    return result.returncode


def system_silent(cmd: str | Sequence[str]) -> int:
    """Run a command with its output discarded and return its exit status.

    A string is run through the shell; a sequence is run directly.
    """
    return _run(cmd, silent=True)


def download_song(song: Song) -> None:
    """Fetch the song's audio as WAV unless it is already on disk.

    When the first attempt fails, the cookie collector is run and the
    download is retried once with its output shown.
    """
    if file_exists(song.audio_path):
        return

    command = [
        "yt-dlp",
        "--cookies",
        COOKIES_FILE,
        "-f",
        "bestaudio",
        "-x",
        "--audio-format",
        "wav",
        "-o",
        f"{SONGS_DIR}/{song.id}.%(ext)s",
        f"youtu.be/{song.id}",
    ]
    print(shlex.join(command))
    if system_silent(command):
        _run([COOKIE_COLLECTOR], silent=False)
        _run(command, silent=False)


def download_thumbnail(song: Song) -> None:
    """Fetch the song's thumbnail image unless it is already on disk."""
    if file_exists(song.thumbnail_path):
        return

    url = f"https://img.youtube.com/vi/{song.id}/0.jpg"
    command = ["curl", "-o", song.thumbnail_path, url]
    print(shlex.join(command))
    system_silent(command)


def get_wav_length(path: str | os.PathLike[str]) -> float:
    """Return the duration in seconds of a WAV file.

    The duration is the size of the data chunk divided by the byte rate
    from the fmt chunk.
    """
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise WavError(f"cannot open {os.fspath(path)}") from exc

    with handle:
        header = handle.read(_WAV_HEADER.size)
        if len(header) < _WAV_HEADER.size:
            raise WavError("truncated WAV header")
        (_, _, _, _, fmt_size, _, _, _, byte_rate, _, _) = _WAV_HEADER.unpack(header)
        if fmt_size > 16:
            handle.seek(fmt_size - 16, os.SEEK_CUR)

        while True:
            chunk = handle.read(_CHUNK_HEADER.size)
            if len(chunk) < _CHUNK_HEADER.size:
                raise WavError("no data chunk found")
            chunk_id, chunk_size = _CHUNK_HEADER.unpack(chunk)
            if chunk_id == b"data":
                break
            handle.seek(chunk_size, os.SEEK_CUR)

    if byte_rate == 0:
        raise WavError("byte rate is zero")
    return chunk_size / byte_rate