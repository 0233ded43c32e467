"""Command-line entry point: open the window and run menus, story and the game."""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import Any

import pygame

from .assets import Assets, load_assets
from .entities import SCREEN_HEIGHT, SCREEN_WIDTH, GameOptions
from .menus import FPS, QuitGame, run_menu
from .render import (
    draw_boss,
    draw_bullets,
    draw_enemies,
    draw_hud,
    draw_item_and_warning,
    draw_player,
    draw_player_life,
    draw_shooting_enemies,
)
from .rules import Key, update_backgrounds
from .screens import (
    draw_pause_message,
    show_game_over_menu,
    show_transition_menu,
    show_victory_message,
    start_history_slide,
)
from .session import GameSession, Outcome

WINDOW_TITLE = "Space Impact"
PLAYER_NAME = "Player 1"

_KEY_BINDINGS = {
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_p: Key.P,
}


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(prog="spaceimpact", description="A side-scrolling space shooter.")
    parser.add_argument(
        "--assets",
        default=".",
        help="directory holding the imagens, fonts and musicas folders (default: current directory)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for enemy placement")
    return parser


def _events() -> Any:
    while True:
        event = pygame.event.poll()
        if event.type == pygame.NOEVENT:
            return
        yield event


def _play_music(path: Path) -> None:
    if not pygame.mixer.get_init() or not Path(path).is_file():
        return
    try:
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(-1)
    except pygame.error:
        pass


def _draw_frame(screen: Any, assets: Assets, session: GameSession, background: Any, now: float) -> None:
    sprites = assets.sprites
    phase = session.game_phase
    screen.fill((0, 0, 0))
    screen.blit(background, (session.background_x, 0))
    screen.blit(background, (session.background_x + background.get_width(), 0))

    draw_player(screen, session.player, session.options, sprites, now)
    draw_player_life(screen, assets.images["heart_full"], assets.images["heart_null"], session.player)
    draw_bullets(screen, session.bullets, phase, session.player, session.options, sprites)

    if session.remaining_time(now) > 0:
        draw_enemies(screen, session.enemies, phase, sprites, now)
        draw_item_and_warning(screen, session.item, session.player, phase, assets.fonts["warn"])
        draw_shooting_enemies(screen, session.shooting_enemies, sprites, phase, now)

    for item in (session.item, session.item_phase2):
        if item.active:
            screen.blit(item.sprite, (item.x, item.y))

    if session.boss.active:
        draw_boss(screen, session.boss, session.boss_bullets, sprites, phase, now)

    draw_hud(screen, assets.fonts["info"], assets.images["icon"], session.board.score, PLAYER_NAME)


def _play(screen: Any, clock: Any, assets: Assets, rng: random.Random) -> None:
    options = run_menu(screen, clock, assets, GameOptions())
    pygame.mixer.music.stop() if pygame.mixer.get_init() else None
    pygame.event.clear()

    session = GameSession(now=time.monotonic(), rng=rng)
    session.options = options
    session.item.sprite = assets.images["item"]
    session.item_phase2.sprite = assets.images["item_2"]
    _play_music(assets.music["game"])

    backgrounds = assets.backgrounds
    current, current_2 = update_backgrounds(options, backgrounds, backgrounds[0], backgrounds[1])

    start_history_slide(screen, clock, assets)

    while True:
        for event in _events():
            if event.type == pygame.QUIT:
                return
            key = _KEY_BINDINGS.get(getattr(event, "key", None))
            if key is None:
                continue
            if event.type == pygame.KEYDOWN:
                if session.press(key):
                    if not draw_pause_message(screen, clock, assets, current):
                        return
                    session.player.paused = False
            elif event.type == pygame.KEYUP:
                session.release(key)

        now = time.monotonic()
        session.background_width = current.get_width()
        outcome = session.update(now)

        if outcome is Outcome.GAME_OVER:
            if not show_game_over_menu(screen, clock, assets):
                return
            session.restart(time.monotonic())
            continue
        if outcome is Outcome.PHASE_CLEARED:
            if not show_transition_menu(screen, clock, assets):
                return
            session.start_second_phase(time.monotonic())
        elif outcome is Outcome.VICTORY:
            show_victory_message(screen, clock, assets)
            return

        background = current if session.game_phase == 1 else current_2
        _draw_frame(screen, assets, session, background, now)
        pygame.display.flip()
        clock.tick(FPS)


def main(argv: list[str] | None = None) -> int:
    """Run the game; return the process exit status."""
    args = build_parser().parse_args(argv)
    pygame.init()
    try:
        try:
            assets = load_assets(args.assets)
        except FileNotFoundError as exc:
            print(f"spaceimpact: {exc}", file=sys.stderr)
            return 1

        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.display.set_icon(assets.images["icon"])
        clock = pygame.time.Clock()
        try:
            _play(screen, clock, assets, random.Random(args.seed))
        except QuitGame:
            pass
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())