import pygame
import pytest

from nocturne.playlist import Playlist
from nocturne.song import Song
from nocturne.state import Mouse, UIState, update_mouse_state
from nocturne.ui import (
    BACKGROUND_COLOR,
    FILL_COLOR,
    ROW_COLOR,
    SELECTED_COLOR,
    Element,
    ElementType,
    create_ui,
    draw_element,
    update_element,
)
from nocturne.widgets import BOX_IDLE_COLOR, Box, Button, SongList, StatusBar
from nocturne.window import Window


@pytest.fixture
def ui():
    return create_ui(Window(pygame.Surface((100, 100))))


def clicked_state(x, y):
    mouse = Mouse()
    update_mouse_state(mouse, x, y, True, False)
    return UIState(mouse=mouse)


def test_create_ui_starts_empty(ui):
    assert ui.elements == []


def test_push_element_keeps_order(ui):
    first = Element(ElementType.BOX, Box())
    second = Element(ElementType.BUTTON, Button())
    ui.push_element(first)
    ui.push_element(second)
    assert ui.elements == [first, second]


def test_update_runs_elements_in_order(ui):
    calls = []
    for name in ("first", "second"):
        box = Box(0, 0, 10, 10, onclick=lambda state, box, name=name: calls.append(name))
        ui.push_element(Element(ElementType.BOX, box))
    ui.update(clicked_state(5, 5))
    assert calls == ["first", "second"]


def test_update_element_updates_box():
    box = Box(0, 0, 10, 10, color=0)
    update_element(clicked_state(50, 50), Element(ElementType.BOX, box))
    assert box.color == BOX_IDLE_COLOR


def test_frozen_element_is_not_updated():
    box = Box(0, 0, 10, 10, color=0)
    update_element(clicked_state(50, 50), Element(ElementType.BOX, box, frozen=True))
    assert box.color == 0


def test_update_statusbar_element_tracks_progress():
    bar = StatusBar(song_progress=5.0)
    update_element(UIState(), Element(ElementType.STATUSBAR, bar))
    assert bar.song_progress == 0.0


def test_update_unknown_type_reports(capsys):
    update_element(UIState(), Element(ElementType.BUTTON, Button()))
    assert "UPDATE" in capsys.readouterr().err


def test_draw_unknown_type_reports(ui, capsys):
    draw_element(Element(ElementType.TEXT), ui)
    assert "DRAW" in capsys.readouterr().err


def test_draw_clears_background(ui):
    ui.draw()
    assert ui.window.surface.get_at((0, 0)) == BACKGROUND_COLOR


def test_draw_box_uses_rgba_color(ui):
    ui.push_element(Element(ElementType.BOX, Box(10, 10, 20, 20, color=0xFF0000FF)))
    ui.draw()
    assert ui.window.surface.get_at((15, 15)) == (255, 0, 0, 255)
    assert ui.window.surface.get_at((5, 5)) == BACKGROUND_COLOR


def test_draw_button(ui):
    draw_element(Element(ElementType.BUTTON, Button(0, 0, 10, 10, color=0x0000FFFF)), ui)
    assert ui.window.surface.get_at((5, 5)) == (0, 0, 255, 255)


def test_invisible_element_is_not_drawn(ui):
    ui.push_element(Element(ElementType.BOX, Box(0, 0, 50, 50, color=0xFF0000FF), invisible=True))
    ui.draw()
    assert ui.window.surface.get_at((10, 10)) == BACKGROUND_COLOR


def make_songlist(**kwargs):
    playlist = Playlist()
    for letter in "abc":
        playlist.add_song(Song(id=letter * 11, name=letter))
    values = dict(songs=playlist, x=0, y=0, width=100, height=100, song_size=10, margin=2, padding=2)
    values.update(kwargs)
    return SongList(**values)


def test_draw_songlist_highlights_selection(ui):
    songlist = make_songlist(selected_index=1)
    draw_element(Element(ElementType.SONGLIST, songlist), ui)
    surface = ui.window.surface
    assert surface.get_at((50, 3)) == ROW_COLOR
    assert surface.get_at((50, 15)) == SELECTED_COLOR
    assert surface.get_at((50, 0)) == (0, 0, 0, 255)


def test_draw_songlist_respects_scroll(ui):
    songlist = make_songlist(selected_index=1, scrolloff=12)
    draw_element(Element(ElementType.SONGLIST, songlist), ui)
    assert ui.window.surface.get_at((50, 3)) == SELECTED_COLOR


def test_draw_songlist_clips_long_titles(ui):
    songlist = make_songlist()
    title = pygame.Surface((500, 4))
    title.fill((255, 0, 0))
    songlist.songs[0].title_surface = title
    draw_element(Element(ElementType.SONGLIST, songlist), ui)
    surface = ui.window.surface
    assert surface.get_at((50, 7)) == (255, 0, 0, 255)
    assert surface.get_at((99, 7)) == ROW_COLOR


def make_bar(**kwargs):
    values = dict(margin=4, padding=4, size=20, progress_bar_length=100, volume_bar_length=25, song_length=10.0)
    values.update(kwargs)
    return StatusBar(**values)


def test_draw_statusbar_records_geometry():
    ui = create_ui(Window(pygame.Surface((200, 100))))
    bar = make_bar()
    draw_element(Element(ElementType.STATUSBAR, bar), ui)
    assert bar.playbar_width == 100
    assert bar.volume_width == 25
    assert bar.playbar_height == bar.volume_height
    assert bar.y + bar.height + bar.margin == 100
    assert bar.volume_x + bar.volume_width + bar.margin + bar.padding == 200


@pytest.mark.parametrize("progress, expected", [(0.0, ROW_COLOR[:0] or None), (10.0, FILL_COLOR)])
def test_draw_statusbar_progress_fill(progress, expected):
    ui = create_ui(Window(pygame.Surface((200, 100))))
    bar = make_bar(song_progress=progress)
    draw_element(Element(ElementType.STATUSBAR, bar), ui)
    pixel = ui.window.surface.get_at((bar.playbar_x + bar.playbar_width // 2, bar.playbar_y + 1))
    assert pixel == (expected or SELECTED_COLOR)