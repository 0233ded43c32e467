import io
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from spaceimpact.assets import IMAGE_DIR, IMAGE_FILES, load_assets
from spaceimpact.entities import GameOptions
from spaceimpact.menus import (
    MENU_ENTRIES,
    TITLE_COLORS,
    ColorCycler,
    MenuCursor,
    OptionsCursor,
    QuitGame,
    run_menu,
    show_controls_screen,
    show_options_screen,
)


def _png_bytes(size):
    surface = pygame.Surface(size)
    buffer = io.BytesIO()
    pygame.image.save(surface, buffer, "png")
    return buffer.getvalue()


@pytest.fixture
def screen():
    pygame.display.init()
    surface = pygame.display.set_mode((800, 600))
    yield surface
    pygame.display.quit()


@pytest.fixture
def assets(tmp_path):
    image_dir = tmp_path / IMAGE_DIR
    image_dir.mkdir()
    data = _png_bytes((4, 4))
    for filename in IMAGE_FILES.values():
        (image_dir / filename).write_bytes(data)
    return load_assets(tmp_path)


def _post(*events):
    pygame.event.clear()
    for kind, key in events:
        if kind == "quit":
            pygame.event.post(pygame.event.Event(pygame.QUIT))
        else:
            event_type = pygame.KEYDOWN if kind == "down" else pygame.KEYUP
            pygame.event.post(pygame.event.Event(event_type, key=key))


def test_color_cycler_changes_after_interval():
    cycler = ColorCycler()
    seen = [cycler.tick() for _ in range(29)]
    assert set(seen) == {TITLE_COLORS[0]}
    assert cycler.tick() == TITLE_COLORS[1]


def test_color_cycler_wraps():
    cycler = ColorCycler()
    for _ in range(30 * len(TITLE_COLORS)):
        color = cycler.tick()
    assert color == TITLE_COLORS[0]


def test_menu_cursor_wraps_both_ways():
    cursor = MenuCursor()
    assert cursor.move(-1) == len(MENU_ENTRIES) - 1
    assert cursor.move(1) == 0
    for _ in range(len(MENU_ENTRIES)):
        cursor.move(1)
    assert cursor.selected == 0


def test_options_cursor_starts_with_first_of_each_group_checked():
    cursor = OptionsCursor()
    assert [i for i, on in enumerate(cursor.checked) if on] == [0, 3, 6, 9]


def test_options_cursor_vertical_limits_and_reset():
    cursor = OptionsCursor()
    cursor.up()
    assert cursor.group == 0
    cursor.right()
    cursor.down()
    assert (cursor.group, cursor.option) == (1, 0)
    for _ in range(5):
        cursor.down()
    assert cursor.group == 3


def test_options_cursor_horizontal_wrap():
    cursor = OptionsCursor()
    cursor.left()
    assert cursor.option == 2
    cursor.right()
    assert cursor.option == 0


def test_options_cursor_confirm_records_choice():
    cursor = OptionsCursor()
    options = GameOptions()
    cursor.down()
    cursor.down()
    cursor.right()
    cursor.right()
    index = cursor.confirm(options)
    assert index == cursor.highlighted
    assert options.new_option_2 == 2
    assert options.group_3_selected == 2
    assert cursor.checked[6:9] == [False, False, True]


def test_run_menu_start_returns_options(screen, assets):
    options = GameOptions()
    _post(("down", pygame.K_RETURN))
    assert run_menu(screen, pygame.time.Clock(), assets, options) is options


def test_run_menu_quit_entry_raises(screen, assets):
    _post(("down", pygame.K_UP), ("down", pygame.K_RETURN))
    with pytest.raises(QuitGame):
        run_menu(screen, pygame.time.Clock(), assets, GameOptions())


def test_run_menu_window_close_raises(screen, assets):
    _post(("quit", None))
    with pytest.raises(QuitGame):
        run_menu(screen, pygame.time.Clock(), assets, GameOptions())


def test_run_menu_through_options_screen(screen, assets):
    _post(
        ("down", pygame.K_DOWN),
        ("down", pygame.K_DOWN),
        ("down", pygame.K_RETURN),
        ("up", pygame.K_RIGHT),
        ("up", pygame.K_RETURN),
        ("up", pygame.K_ESCAPE),
        ("down", pygame.K_UP),
        ("down", pygame.K_UP),
        ("down", pygame.K_RETURN),
    )
    options = run_menu(screen, pygame.time.Clock(), assets, GameOptions())
    assert options.sprite_option == 1
    assert options.group_1_selected == 1


def test_run_menu_through_controls_screen(screen, assets):
    _post(
        ("down", pygame.K_DOWN),
        ("down", pygame.K_RETURN),
        ("down", pygame.K_ESCAPE),
        ("down", pygame.K_UP),
        ("down", pygame.K_RETURN),
    )
    options = run_menu(screen, pygame.time.Clock(), assets, GameOptions())
    assert options == GameOptions()


def test_controls_screen_window_close_raises(screen, assets):
    _post(("quit", None))
    with pytest.raises(QuitGame):
        show_controls_screen(screen, pygame.time.Clock(), assets)


def test_options_screen_selects_background(screen, assets):
    _post(
        ("up", pygame.K_DOWN),
        ("up", pygame.K_DOWN),
        ("up", pygame.K_DOWN),
        ("up", pygame.K_LEFT),
        ("up", pygame.K_RETURN),
        ("up", pygame.K_ESCAPE),
    )
    options = show_options_screen(screen, pygame.time.Clock(), assets, GameOptions())
    assert options.new_option_3 == 2
    assert options.sprite_option == 0


def test_options_screen_ignores_key_presses(screen, assets):
    _post(("down", pygame.K_RIGHT), ("down", pygame.K_RETURN), ("up", pygame.K_ESCAPE))
    options = show_options_screen(screen, pygame.time.Clock(), assets, GameOptions())
    assert options == GameOptions()