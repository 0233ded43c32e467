"""Drawing of the playfield: ship, shots, enemies, boss, items and HUD.

Sprites are passed as a mapping from name to image. The names used are:

``player``, ``player_down``, ``player_up``
    Sequences of three ship images, one for each ship choice.
``bullet``, ``bullet_dif1``, ``bullet_dif2``
    The player's normal shots, one for each shot choice.
``bullet_2``, ``bullet_3``
    The player's powered-up shots in phase 1 and phase 2.
``enemy``, ``enemy_2``
    Basic enemies in phase 1 and phase 2.
``shooting_enemy``, ``shooting_enemy_2``
    Shooting enemies in phase 1 and phase 2.
``enemy_bullet``
    A shooting enemy's shot.
``explosion``
    The small explosion shown when an enemy is hit.
``boss``, ``boss_2``
    The boss in phase 1 and phase 2.
``boss_bullet``, ``boss_bullet_2``
    The boss's normal shot, and its special shot in phase 2.
``boss_explosion``
    The faint flash shown when the boss is hit.

Surfaces only need a ``blit(image, position)`` method and fonts a
``render(text, antialias, color)`` method returning an image with ``get_width()``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .boss import Boss
from .bullets import BossBullet, Bullet
from .enemies import Enemy, ShootingEnemy
from .entities import GameOptions, Item
from .player import Player

WHITE = (255, 255, 255)

EXPLOSION_DURATION = 0.1
ENEMY_EXPLOSION_OFFSET = (-5, 5)
BOSS_EXPLOSION_OFFSET = (25, 25)
BOSS_EXPLOSION_ALPHA = 0.01

BULLET_DRAW_OFFSET = (15, 10)
ENEMY_BULLET_DRAW_OFFSET = (-30, 20)

LIFE_SLOTS = 4
LIFE_X = 90
LIFE_Y = 10
LIFE_SPACING = 40

WARNING_POSITION = (400, 550)
PHASE_WARNINGS = {
    1: "Voce pegou disparos rapidos por 5 segundos!",
    2: "Voce pegou disparos com 2x de dano por 5 segundos!",
}

SCORE_POSITION = (680, 10)
ICON_POSITION = (0, 0)
NAME_POSITION = (90, 50)

_SHOT_SPRITES = ("bullet", "bullet_dif1", "bullet_dif2")


def _draw_text(surface: Any, font: Any, text: str, color: tuple[int, int, int], x: float, y: float,
               centred: bool = False) -> None:
    image = font.render(text, True, color)
    if centred:
        x -= image.get_width() / 2
    surface.blit(image, (x, y))


def explosion_visible(entity: Any, duration: float, now: float) -> bool:
    """Return whether the entity's hit explosion is still showing; end it once it has lasted."""
    if not entity.exploding:
        return False
    if now - entity.explosion_time < duration:
        return True
    entity.exploding = False
    return False


def draw_player(surface: Any, player: Player, options: GameOptions, sprites: Mapping[str, Any],
                now: float) -> Any:
    """Draw the ship facing its direction of travel; it blinks while invulnerable.

    Return the image drawn, or None when nothing was drawn.
    """
    if player.invulnerable and int(now * 10) % 2 != 0:
        return None
    if player.joystick.down:
        variants = sprites["player_down"]
    elif player.joystick.up:
        variants = sprites["player_up"]
    else:
        variants = sprites["player"]
    choice = options.sprite_option
    if not 0 <= choice < len(variants):
        return None
    image = variants[choice]
    surface.blit(image, (player.x, player.y))
    return image


def draw_player_life(surface: Any, heart_full: Any, heart_empty: Any, player: Player) -> None:
    """Draw one heart per life slot, full for each life left."""
    for slot in range(LIFE_SLOTS):
        image = heart_full if slot < player.lives else heart_empty
        surface.blit(image, (LIFE_X + slot * LIFE_SPACING, LIFE_Y))


def _shot_sprite(game_phase: int, player: Player, options: GameOptions,
                 sprites: Mapping[str, Any]) -> Any:
    if player.special_attack_active:
        return sprites["bullet_2"] if game_phase == 1 else sprites["bullet_3"]
    choice = options.new_option_1
    if 0 <= choice < len(_SHOT_SPRITES):
        return sprites[_SHOT_SPRITES[choice]]
    return None


def draw_bullets(surface: Any, bullets: Iterable[Bullet], game_phase: int, player: Player,
                 options: GameOptions, sprites: Mapping[str, Any]) -> int:
    """Draw the player's shots in flight; return how many were drawn."""
    image = _shot_sprite(game_phase, player, options, sprites)
    if image is None:
        return 0
    dx, dy = BULLET_DRAW_OFFSET
    drawn = 0
    for bullet in bullets:
        if bullet.active:
            surface.blit(image, (bullet.x + dx, bullet.y + dy))
            drawn += 1
    return drawn


def draw_enemies(surface: Any, enemies: Iterable[Enemy], game_phase: int, sprites: Mapping[str, Any],
                 now: float) -> None:
    """Draw the active basic enemies and any explosions still showing."""
    image = sprites["enemy"] if game_phase == 1 else sprites["enemy_2"]
    dx, dy = ENEMY_EXPLOSION_OFFSET
    for enemy in enemies:
        if enemy.active:
            surface.blit(image, (enemy.x, enemy.y))
        if explosion_visible(enemy, EXPLOSION_DURATION, now):
            surface.blit(sprites["explosion"], (enemy.x + dx, enemy.y + dy))


def draw_item_and_warning(surface: Any, item: Item, player: Player, game_phase: int,
                          font: Any) -> str | None:
    """Draw the item if it is out, and the power-up notice while it lasts; return the notice."""
    if item.active:
        surface.blit(item.sprite, (item.x, item.y))
    if not player.special_attack_active:
        return None
    message = PHASE_WARNINGS.get(game_phase)
    if message is not None:
        x, y = WARNING_POSITION
        _draw_text(surface, font, message, WHITE, x, y, centred=True)
    return message


def draw_shooting_enemies(surface: Any, shooting_enemies: Iterable[ShootingEnemy],
                          sprites: Mapping[str, Any], game_phase: int, now: float) -> None:
    """Draw the active shooting enemies, their shots and their explosions."""
    body = {1: sprites["shooting_enemy"], 2: sprites["shooting_enemy_2"]}.get(game_phase)
    bx, by = ENEMY_BULLET_DRAW_OFFSET
    ex, ey = ENEMY_EXPLOSION_OFFSET
    for shooter in shooting_enemies:
        if not shooter.active:
            continue
        if body is not None:
            shooter.ready_to_shoot = True
            surface.blit(body, (shooter.x, shooter.y))
        for bullet in shooter.bullets:
            if bullet.active:
                surface.blit(sprites["enemy_bullet"], (bullet.x + bx, bullet.y + by))
        if explosion_visible(shooter, EXPLOSION_DURATION, now):
            surface.blit(sprites["explosion"], (shooter.x + ex, shooter.y + ey))


def draw_boss(surface: Any, boss: Boss, boss_bullets: Iterable[BossBullet], sprites: Mapping[str, Any],
              game_phase: int, now: float) -> None:
    """Draw the boss's shots, advance and draw the boss, and show its hit flash."""
    if game_phase == 2 and boss.special_attack_active:
        shot = sprites["boss_bullet_2"]
    else:
        shot = sprites["boss_bullet"]
    for bullet in boss_bullets:
        if bullet.active:
            surface.blit(shot, (bullet.x, bullet.y))

    boss.move(game_phase)

    body = {1: sprites["boss"], 2: sprites["boss_2"]}.get(game_phase)
    if body is not None:
        surface.blit(body, (boss.x, boss.y))

    if explosion_visible(boss, EXPLOSION_DURATION, now):
        flash = sprites["boss_explosion"].copy()
        flash.set_alpha(int(255 * BOSS_EXPLOSION_ALPHA))
        dx, dy = BOSS_EXPLOSION_OFFSET
        surface.blit(flash, (boss.x + dx, boss.y + dy))


def draw_hud(surface: Any, font: Any, icon: Any, score: int, player_name: str) -> None:
    """Draw the score, the player's icon and the player's name."""
    _draw_text(surface, font, f"Score: {score}", WHITE, *SCORE_POSITION)
    surface.blit(icon, ICON_POSITION)
    _draw_text(surface, font, player_name, WHITE, *NAME_POSITION)