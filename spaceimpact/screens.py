"""Full-screen interludes: pause, game over, phase transition, victory and the story slides."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import pygame

from .assets import Assets
from .entities import IMAGE_SWITCH_TIME, NUM_IMAGES, SCREEN_HEIGHT, SCREEN_WIDTH
from .menus import ENTER_KEYS, FPS, ColorCycler, QuitGame

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (200, 200, 200)
CENTER_X = SCREEN_WIDTH // 2

PAUSE_OVERLAY_ALPHA = 150
PAUSE_TITLE = "Jogo Pausado"
PAUSE_LINES = (
    ("Pressione ENTER para Retomar", 250),
    ("Pressione ESC para Sair", 400),
)

GAME_OVER_TITLE = "Você foi Derrotado!"
GAME_OVER_LINES = (
    ("Pressione ENTER para Reiniciar", 350),
    ("Pressione ESQ para Sair", 450),
)
GAME_OVER_SCROLL = 0.5

TRANSITION_TITLE = "Boss Derrotado!"
TRANSITION_LINES = (
    ("Pressione ENTER para", 230),
    ("Avancar a Proxima Fase", 280),
    ("Pressione ESC para Sair", 390),
)
TRANSITION_SCROLL = 0.2

VICTORY_LINES = (("Parabens!", 180), ("Voce zerou o jogo!", 250))
VICTORY_PROMPT = ("Pressione Enter para Sair", 500)
VICTORY_SCROLL = 0.2
TYPING_RATE = 10  # letters per second

TITLE_Y = 100
SLIDE_FRAME_TIME = 1.0 / 60.0


@dataclass
class SlideShow:
    """Which story slide is showing and for how long it has been up."""

    count: int = NUM_IMAGES
    switch_time: float = IMAGE_SWITCH_TIME
    current: int = 0
    timer: float = 0.0

    @property
    def finished(self) -> bool:
        """True once every slide has been shown."""
        return self.current >= self.count

    def tick(self, dt: float) -> bool:
        """Let ``dt`` seconds pass, moving on when the slide's time is up; return ``finished``."""
        self.timer += dt
        if self.timer >= self.switch_time:
            self.timer = 0.0
            self.current += 1
        return self.finished

    def advance(self) -> bool:
        """Skip to the next slide; return ``finished``."""
        self.current += 1
        self.timer = 0.0
        return self.finished


def typed_prefixes(text: str) -> list[str]:
    """Return the growing prefixes of ``text`` shown by the typewriter effect."""
    return [text[: end + 1] for end in range(len(text))]


def _events() -> Iterator[Any]:
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
    _draw_background(screen, image, x)
    return x


def _draw_background(screen: Any, image: Any, x: float) -> None:
    screen.blit(image, (x, 0))
    screen.blit(image, (x + image.get_width(), 0))


def _text(screen: Any, font: Any, text: str, color: tuple[int, int, int], x: float, y: float) -> None:
    image = font.render(text, True, color)
    screen.blit(image, (x - image.get_width() / 2, y))


def _choice(event: Any) -> bool | None:
    """Map an event to Enter (True) or Escape (False); raise QuitGame on window close."""
    if event.type == pygame.QUIT:
        raise QuitGame
    if event.type == pygame.KEYDOWN:
        if event.key in ENTER_KEYS:
            return True
        if event.key == pygame.K_ESCAPE:
            return False
    return None


def draw_pause_message(screen: Any, clock: Any, assets: Assets, background: Any) -> bool:
    """Show the pause screen; return True to resume (Enter) or False to leave (Escape).

    Raises QuitGame if the window closes.
    """
    colors = ColorCycler()
    overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, PAUSE_OVERLAY_ALPHA))
    title_font = assets.fonts["menu"]
    button_font = assets.fonts["large_button"]
    background_x = 0.0
    while True:
        for event in _events():
            choice = _choice(event)
            if choice is not None:
                return choice

        background_x = _scroll(screen, background, background_x, 1.0)
        screen.blit(overlay, (0, 0))
        _text(screen, title_font, PAUSE_TITLE, colors.tick(), CENTER_X, TITLE_Y)
        for line, y in PAUSE_LINES:
            _text(screen, button_font, line, WHITE, CENTER_X, y)
        pygame.display.flip()
        clock.tick(FPS)


def _choice_screen(
    screen: Any,
    clock: Any,
    assets: Assets,
    background: Any,
    speed: float,
    title: str,
    lines: tuple[tuple[str, int], ...],
    button_font: Any,
    button_color: tuple[int, int, int],
) -> bool:
    colors = ColorCycler()
    title_font = assets.fonts["menu"]
    background_x = 0.0
    while True:
        background_x = _scroll(screen, background, background_x, speed)
        _text(screen, title_font, title, colors.tick(), CENTER_X, TITLE_Y)
        for line, y in lines:
            _text(screen, button_font, line, button_color, CENTER_X, y)
        pygame.display.flip()
        clock.tick(FPS)

        for event in _events():
            choice = _choice(event)
            if choice is not None:
                return choice


def show_game_over_menu(screen: Any, clock: Any, assets: Assets) -> bool:
    """Show the defeat screen; return True to restart (Enter) or False to leave (Escape).

    Raises QuitGame if the window closes.
    """
    return _choice_screen(
        screen,
        clock,
        assets,
        assets.images["menu_restart"],
        GAME_OVER_SCROLL,
        GAME_OVER_TITLE,
        GAME_OVER_LINES,
        assets.fonts["button"],
        WHITE,
    )


def show_transition_menu(screen: Any, clock: Any, assets: Assets) -> bool:
    """Show the boss-defeated screen; return True to go on (Enter) or False to leave (Escape).

    Raises QuitGame if the window closes.
    """
    return _choice_screen(
        screen,
        clock,
        assets,
        assets.images["menu"],
        TRANSITION_SCROLL,
        TRANSITION_TITLE,
        TRANSITION_LINES,
        assets.fonts["alt_button"],
        GREY,
    )


def show_victory_message(screen: Any, clock: Any, assets: Assets) -> None:
    """Type out the congratulations, then wait for Enter or the window to close."""
    background = assets.images["menu"]
    normal_font = assets.fonts["menu"]
    prompt_font = assets.fonts["button"]
    background_x = 0.0

    screen.fill(BLACK)
    for line, y in VICTORY_LINES:
        for prefix in typed_prefixes(line):
            _draw_background(screen, background, background_x)
            _text(screen, normal_font, prefix, WHITE, CENTER_X, y)
            pygame.display.flip()
            pygame.event.pump()
            clock.tick(TYPING_RATE)

    while True:
        background_x = _scroll(screen, background, background_x, VICTORY_SCROLL)
        for line, y in VICTORY_LINES:
            _text(screen, normal_font, line, WHITE, CENTER_X, y)
        prompt, prompt_y = VICTORY_PROMPT
        _text(screen, prompt_font, prompt, WHITE, CENTER_X, prompt_y)
        pygame.display.flip()
        clock.tick(FPS)

        for event in _events():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN and event.key in ENTER_KEYS:
                return


def start_history_slide(screen: Any, clock: Any, assets: Assets) -> SlideShow:
    """Show the story slides, each for a few seconds or until Enter; return the finished show.

    Raises QuitGame if the window closes.
    """
    slides = assets.slides
    show = SlideShow(count=len(slides))
    while True:
        for event in _events():
            if event.type == pygame.QUIT:
                raise QuitGame
            if event.type == pygame.KEYDOWN and event.key in ENTER_KEYS and show.advance():
                return show

        if show.tick(SLIDE_FRAME_TIME):
            return show
        screen.fill(BLACK)
        screen.blit(slides[show.current], (0, 0))
        pygame.display.flip()
        clock.tick(FPS)