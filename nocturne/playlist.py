"""Playlists read from a plain-text list and downloaded in parallel."""

from __future__ import annotations

import os
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from nocturne.fileio import read_file
from nocturne.song import Song, download_song, download_thumbnail

ID_LENGTH = 11
MAX_DOWNLOAD_THREADS = 4


@dataclass
class Playlist:
    """An ordered collection of songs."""

    songs: list[Song] = field(default_factory=list)

    def add_song(self, song: Song) -> None:
        self.songs.append(song)

    def __len__(self) -> int:
        return len(self.songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self.songs)

    def __getitem__(self, index: int) -> Song:
        return self.songs[index]


def parse_list(text: str) -> Playlist:
    """Parse list text where each entry is an 11 character id, one separator
    character and a name running to the end of the line.

    Entries with an empty name are skipped, as is a trailing fragment
    shorter than an id.
    """
    playlist = Playlist()
    pos = 0
    length = len(text)
    while pos < length:
        song_id = text[pos : pos + ID_LENGTH]
        pos += ID_LENGTH
        if len(song_id) != ID_LENGTH:
            continue
        print(f'Found ID: "{song_id}"')

        pos += 1  # separator
        end = text.find("\n", pos)
        if end == -1:
            end = length
        name = text[pos:end] if pos < end else ""
        pos = end + 1

        if name:
            playlist.add_song(Song(id=song_id, name=name))
    return playlist


def load_list(path: str | os.PathLike[str]) -> Playlist:
    """Read and parse a list file."""
    return parse_list(read_file(path))


def _download(song: Song) -> None:
    download_song(song)
    download_thumbnail(song)


def download_list(playlist: Playlist, max_workers: int = MAX_DOWNLOAD_THREADS) -> None:
    """Download audio and thumbnail for every song, a few at a time."""
    if max_workers < 1:
        raise ValueError("max_workers must be at least 1")
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        for _ in pool.map(_download, playlist):
            pass