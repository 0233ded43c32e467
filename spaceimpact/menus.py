"""The title menu, the controls screen and the options screen."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pygame

from .assets import Assets
from .entities import OPTION_GROUPS, OPTIONS_PER_GROUP, SCREEN_WIDTH, GameOptions

FPS = 50
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
CYAN = (0, 255, 255)
RED = (255, 0, 0)
CHECKBOX_FILL = (200, 200, 200)

TITLE_COLORS = (
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (255, 165, 0),
    (255, 255, 255),
)
COLOR_CHANGE_INTERVAL = 30

MENU_ENTRIES = ("Começar", "Controles", "Opções", "Sair")
START, CONTROLS, OPTIONS, QUIT = range(len(MENU_ENTRIES))
MENU_TITLE = "Space Impact"
MENU_TITLE_Y = 80
MENU_FIRST_Y = 270
MENU_SPACING = 75

CONTROL_LINES = (
    ("CONTROLES", CYAN, 20),
    ("MOVER: W, A, S, D", WHITE, 120),
    ("ATIRAR: ENTER", WHITE, 220),
    ("PAUSAR: P", WHITE, 320),
    ("VOLTAR: ESC", CYAN, 520),
)

OPTIONS_TITLE = "CONFIGURAÇÕES"
GROUP_TITLES = (
    "Escolha sua Nave",
    "Escolha seu disparo",
    "Escolha o Cenário da fase 1",
    "Escolha o Cenário da fase 2",
)
OPTIONS_CENTER_X = 360
OPTIONS_CENTER_Y = 300
OPTION_SPACING = 250
GROUP_SPACING = 100
CHECKBOX_SIZE = 20
IMAGE_SCALE = 0.8
HIGHLIGHT_ALPHA = 0.1
OPTIONS_EXIT_TEXT = "ESC PARA SAIR"

ENTER_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
CENTER_X = SCREEN_WIDTH // 2


class QuitGame(Exception):
    """Raised when the player closes the window or chooses to leave."""


@dataclass
class ColorCycler:
    """Steps through the title colours, changing every ``interval`` frames."""

    colors: tuple[tuple[int, int, int], ...] = TITLE_COLORS
    interval: int = COLOR_CHANGE_INTERVAL
    frame: int = 0
    index: int = 0

    def tick(self) -> tuple[int, int, int]:
        """Advance one frame and return the current colour."""
        self.frame += 1
        if self.frame >= self.interval:
            self.frame = 0
            self.index = (self.index + 1) % len(self.colors)
        return self.colors[self.index]


@dataclass
class MenuCursor:
    """The highlighted entry of the title menu; it wraps around."""

    selected: int = 0
    size: int = len(MENU_ENTRIES)

    def move(self, step: int) -> int:
        """Move by ``step`` entries and return the new selection."""
        self.selected = (self.selected + step) % self.size
        return self.selected


def _default_checkboxes() -> list[bool]:
    return [i % OPTIONS_PER_GROUP == 0 for i in range(OPTION_GROUPS * OPTIONS_PER_GROUP)]


@dataclass
class OptionsCursor:
    """Navigation and check marks on the options screen."""

    group: int = 0
    option: int = 0
    checked: list[bool] = field(default_factory=_default_checkboxes)

    @property
    def highlighted(self) -> int:
        """Index of the highlighted checkbox across all groups."""
        return self.group * OPTIONS_PER_GROUP + self.option

    def up(self) -> None:
        """Go to the group above, starting at its first option."""
        if self.group > 0:
            self.group -= 1
            self.option = 0

    def down(self) -> None:
        """Go to the group below, starting at its first option."""
        if self.group < OPTION_GROUPS - 1:
            self.group += 1
            self.option = 0

    def left(self) -> None:
        """Go to the option on the left, wrapping to the last."""
        self.option = (self.option - 1) % OPTIONS_PER_GROUP

    def right(self) -> None:
        """Go to the option on the right, wrapping to the first."""
        self.option = (self.option + 1) % OPTIONS_PER_GROUP

    def confirm(self, options: GameOptions) -> int:
        """Check the highlighted option alone in its group and record it; return its index."""
        start = self.group * OPTIONS_PER_GROUP
        for index in range(start, start + OPTIONS_PER_GROUP):
            self.checked[index] = False
        self.checked[self.highlighted] = True
        options.select(self.group, self.option)
        return self.highlighted


def _events() -> Iterator[Any]:
    # Events are taken one at a time so that a nested screen sees the rest.
    while True:
        event = pygame.event.poll()
        if event.type == pygame.NOEVENT:
            return
        yield event


def _scroll(screen: Any, image: Any, x: float, speed: float) -> float:
    x -= speed
    width = image.get_width()
    if x <= -width:
        x = 0.0
    screen.fill(BLACK)
    screen.blit(image, (x, 0))
    screen.blit(image, (x + width, 0))
    return x


def _text(screen: Any, font: Any, text: str, color: tuple[int, int, int], x: float, y: float) -> None:
    image = font.render(text, True, color)
    screen.blit(image, (x - image.get_width() / 2, y))


def _start_menu_music(assets: Assets) -> None:
    path = assets.music.get("menu")
    if path is None or not pygame.mixer.get_init() or not Path(path).is_file():
        return
    try:
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(-1)
    except pygame.error:
        pass


def run_menu(screen: Any, clock: Any, assets: Assets, options: GameOptions) -> GameOptions:
    """Show the title menu until the player starts; return the chosen options.

    Raises QuitGame if the player leaves.
    """
    _start_menu_music(assets)
    cursor = MenuCursor()
    colors = ColorCycler()
    background = assets.images["menu"]
    title_font = assets.fonts["title"]
    entry_font = assets.fonts["menu"]
    background_x = 0.0

    while True:
        for event in _events():
            if event.type == pygame.QUIT:
                raise QuitGame
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_DOWN:
                cursor.move(1)
            elif event.key == pygame.K_UP:
                cursor.move(-1)
            elif event.key in ENTER_KEYS:
                if cursor.selected == START:
                    return options
                if cursor.selected == CONTROLS:
                    show_controls_screen(screen, clock, assets)
                elif cursor.selected == OPTIONS:
                    show_options_screen(screen, clock, assets, options)
                else:
                    raise QuitGame

        background_x = _scroll(screen, background, background_x, 1.0)
        _text(screen, title_font, MENU_TITLE, colors.tick(), CENTER_X, MENU_TITLE_Y)
        for index, label in enumerate(MENU_ENTRIES):
            color = WHITE if index == cursor.selected else BLACK
            _text(screen, entry_font, label, color, CENTER_X, MENU_FIRST_Y + index * MENU_SPACING)
        pygame.display.flip()
        clock.tick(FPS)


def show_controls_screen(screen: Any, clock: Any, assets: Assets) -> None:
    """List the controls until Escape is pressed; raise QuitGame if the window closes."""
    background = assets.images["menu"]
    font = assets.fonts["menu"]
    background_x = 0.0
    while True:
        for event in _events():
            if event.type == pygame.QUIT:
                raise QuitGame
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return

        background_x = _scroll(screen, background, background_x, 1.0)
        for text, color, y in CONTROL_LINES:
            _text(screen, font, text, color, CENTER_X, y)
        pygame.display.flip()
        clock.tick(FPS)


def _draw_options(screen: Any, assets: Assets, cursor: OptionsCursor) -> None:
    _text(screen, assets.fonts["menu"], OPTIONS_TITLE, CYAN, CENTER_X, 40)
    label_font = assets.fonts["small"]
    first_offset = (OPTIONS_PER_GROUP - 1) * OPTION_SPACING // 2
    for group, title in enumerate(GROUP_TITLES):
        start_y = OPTIONS_CENTER_Y + (group - 1) * GROUP_SPACING
        _text(screen, label_font, title, RED, OPTIONS_CENTER_X + 22, start_y - 60)
        for i in range(OPTIONS_PER_GROUP):
            index = group * OPTIONS_PER_GROUP + i
            box_x = OPTIONS_CENTER_X - first_offset + i * OPTION_SPACING - CHECKBOX_SIZE // 2
            box_y = start_y - CHECKBOX_SIZE // 2
            box = pygame.Rect(box_x, box_y, CHECKBOX_SIZE, CHECKBOX_SIZE)
            if cursor.checked[index]:
                pygame.draw.rect(screen, CHECKBOX_FILL, box)
            else:
                pygame.draw.rect(screen, WHITE, box, 2)

            source = assets.option_images[index]
            width = int(source.get_width() * IMAGE_SCALE)
            height = int(source.get_height() * IMAGE_SCALE)
            image = pygame.transform.scale(source, (width, height))
            if index == cursor.highlighted:
                image.set_alpha(int(255 * HIGHLIGHT_ALPHA))
            screen.blit(image, (box_x + CHECKBOX_SIZE + 10, start_y - height // 2))
    _text(screen, assets.fonts["info"], OPTIONS_EXIT_TEXT, WHITE, CENTER_X, 560)


def show_options_screen(screen: Any, clock: Any, assets: Assets, options: GameOptions) -> GameOptions:
    """Let the player pick ship, shot and backgrounds; return ``options`` when Escape is released.

    Keys act on release. Raises QuitGame if the window closes.
    """
    cursor = OptionsCursor()
    background = assets.images["menu"]
    background_x = 0.0
    actions = {
        pygame.K_UP: cursor.up,
        pygame.K_DOWN: cursor.down,
        pygame.K_LEFT: cursor.left,
        pygame.K_RIGHT: cursor.right,
    }
    while True:
        for event in _events():
            if event.type == pygame.QUIT:
                raise QuitGame
            if event.type != pygame.KEYUP:
                continue
            if event.key in actions:
                actions[event.key]()
            elif event.key in ENTER_KEYS:
                cursor.confirm(options)
            elif event.key == pygame.K_ESCAPE:
                return options

        background_x = _scroll(screen, background, background_x, 1.0)
        _draw_options(screen, assets, cursor)
        pygame.display.flip()
        clock.tick(FPS)