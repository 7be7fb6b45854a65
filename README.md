# nocturne

A small desktop music player built on pygame. It reads a plain-text list of
tracks, downloads any audio and cover images that are missing, and shows the
tracks in a scrollable list above a status bar that holds a seek bar and a
volume bar.

## Installing

```
pip install .
```

Downloading needs `yt-dlp` and `curl` on your `PATH`.

## The list file

Each entry is an 11-character video id, one separator character (a space, by
convention) and the name to show, running to the end of the line:

```
AAAAAAAAAAA My first song
BBBBBBBBBBB Another track
```

The id is always taken as the next 11 characters, so every line must start
with a full id. Entries with an empty name are skipped, and a trailing
fragment shorter than 11 characters is ignored. Each id found is echoed as
`Found ID: "<id>"`.

## Running

```
nocturne [LIST]
```

`LIST` defaults to `list.txt` in the working directory. If it cannot be read,
the command prints an error and exits with status 1.

Before the window opens, every track is fetched into `songs/`, up to four at a
time, skipping files that already exist:

- audio as `songs/<id>.wav`, with `yt-dlp` using the cookie file
  `cookies/cookies.txt`. If that fails, `./cookies/collect.sh` is run and the
  download is tried once more with its output shown;
- the cover as `songs/<id>.jpg`, with `curl`.

`Cataloging done!` is printed when all downloads have finished. The window is
1280×720 and titled "Nocturne".

- Scroll over the list to move through it, 64 pixels per wheel step.
- Click a track once to select it; click it again to play it. Its length is
  read from the WAV header.
- Click the seek bar in the middle of the status bar to jump within the track.
- Click the volume bar on the right to set the volume (0 to 128; it starts at
  10).
- Press Ctrl+Q or close the window to quit.

Titles are drawn with `fonts/NotoSansCJKjp-Regular.otf`, or pygame's default
font if that file cannot be loaded. While running, the player writes its frame
rate to standard error about once a second (`FPS: 239.87`).

## What it does not do

There is a single screen. `nocturne.app.PlayerPage` names home, library,
playlist, queue and settings pages, but only the song list and status bar
exist. There is no queue and no moving on to the next track when one ends, and
the name of the playing track is not shown in the status bar.

## Using it as a library

```python
from nocturne.playlist import parse_list, load_list, download_list
from nocturne.song import get_wav_length, WavError

playlist = parse_list("AAAAAAAAAAA My song\n")
print([song.name for song in playlist])       # ['My song']

try:
    print(get_wav_length("songs/AAAAAAAAAAA.wav"))  # seconds
except WavError as exc:
    print("not a usable WAV file:", exc)
```

`get_wav_length` divides the size of the data chunk by the byte rate of the
fmt chunk. It raises `WavError` when the file cannot be opened, its header is
truncated, it has no data chunk, or its byte rate is zero.

Other modules:

- `nocturne.fileio`: `read_file` and `file_exists`.
- `nocturne.song`: `Song`, `song_from_yt`, `download_song`,
  `download_thumbnail` and `system_silent`.
- `nocturne.state`: `Mouse`, `UIState`, `update_mouse_state` and
  `clear_mouse_edges`, which track held buttons and press/release edges.
- `nocturne.audio`: `MusicPlayer`, wrapping the pygame mixer with `play`,
  `set_volume`, `position` and `seek`.
- `nocturne.window`: `Window`, `create_window` and `draw_playlist`.
- `nocturne.widgets`: `Box`, `Button`, `Image`, `load_image`, `SongList` and
  `StatusBar`.
- `nocturne.ui`: `UI`, `Element`, `ElementType`, `create_ui`,
  `update_element` and `draw_element`.
- `nocturne.app`: `build_interface`, `FrameCounter` and `main`.

## Tests

```
pip install .[test]
pytest
```