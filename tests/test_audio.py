import pygame
import pytest

from nocturne.audio import MAX_VOLUME, MusicPlayer


class FakeMusic:
    def __init__(self, fail=False):
        self.loaded = None
        self.volume = None
        self.starts = []
        self.pos_ms = -1
        self.fail = fail

    def load(self, path):
        if self.fail:
            raise pygame.error("cannot load")
        self.loaded = path

    def play(self, loops=0, start=0.0):
        self.starts.append(start)
        self.pos_ms = 0

    def set_volume(self, value):
        self.volume = value

    def get_pos(self):
        return self.pos_ms


def test_play_loads_and_starts_from_beginning():
    music = FakeMusic()
    player = MusicPlayer(music)
    player.play("songs/x.wav", MAX_VOLUME)
    assert music.loaded == "songs/x.wav"
    assert music.starts == [0.0]
    assert music.volume == pytest.approx(1.0)
    assert player.path == "songs/x.wav"


def test_play_with_zero_volume_is_silent():
    music = FakeMusic()
    player = MusicPlayer(music)
    player.play("a.wav", 0)
    assert music.volume == 0.0
    assert player.volume == 0


def test_play_failure_raises_oserror():
    player = MusicPlayer(FakeMusic(fail=True))
    with pytest.raises(OSError):
        player.play("missing.wav", 10)
    assert player.path is None


def test_set_volume_is_clamped():
    music = FakeMusic()
    player = MusicPlayer(music)
    player.set_volume(MAX_VOLUME * 10)
    assert player.volume == MAX_VOLUME
    assert music.volume == pytest.approx(1.0)
    player.set_volume(-5)
    assert player.volume == 0
    assert music.volume == 0.0


def test_position_without_track_is_zero():
    music = FakeMusic()
    music.pos_ms = 5000
    assert MusicPlayer(music).position() == 0.0


def test_position_negative_is_clamped():
    music = FakeMusic()
    player = MusicPlayer(music)
    player.play("a.wav", 1)
    music.pos_ms = -1
    assert player.position() == 0.0


def test_position_reports_elapsed_seconds():
    music = FakeMusic()
    player = MusicPlayer(music)
    player.play("a.wav", 1)
    music.pos_ms = 2500
    assert player.position() == pytest.approx(2.5)


def test_seek_restarts_at_offset():
    music = FakeMusic()
    player = MusicPlayer(music)
    player.play("a.wav", 1)
    player.seek(42.0)
    assert music.starts[-1] == 42.0
    assert player.position() == pytest.approx(42.0)


def test_seek_without_track_does_nothing():
    music = FakeMusic()
    player = MusicPlayer(music)
    player.seek(10.0)
    assert music.starts == []