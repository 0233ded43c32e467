"""Projectiles fired by the player, the boss and shooting enemies."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .entities import BULLET_SPEED, SCREEN_WIDTH, Box
from .player import Player

PLAYER_BULLET_WIDTH = 50
PLAYER_BULLET_HEIGHT = 30
MUZZLE_OFFSET_X = 20
MUZZLE_OFFSET_Y = 5
BOSS_BULLET_WIDTH = 45
BOSS_BULLET_HEIGHT = 25
SPECIAL_ATTACK_DURATION = 5.0

_SPECIAL_SPEED_FACTOR = {1: 4, 2: 1.5}


@dataclass
class Bullet(Box):
    """A shot fired by the player."""

    active: bool = False


@dataclass
class EnemyBullet(Box):
    """A shot fired by a shooting enemy; it travels left."""

    active: bool = False
    speed: float = 0.0


@dataclass
class BossBullet(Box):
    """A shot fired by the boss; it travels left."""

    active: bool = False
    speed: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    spawn_time: float = 0.0


def new_player_bullets(count: int) -> list[Bullet]:
    """Return ``count`` inactive player bullets."""
    return [Bullet() for _ in range(count)]


def new_boss_bullets(count: int) -> list[BossBullet]:
    """Return ``count`` inactive boss bullets of the boss's shot size."""
    return [BossBullet(width=BOSS_BULLET_WIDTH, height=BOSS_BULLET_HEIGHT) for _ in range(count)]


def fire_bullet(bullets: Sequence[Bullet], x: float, y: float) -> Bullet | None:
    """Launch the first free bullet from the muzzle at (x, y); None if all are in flight."""
    bullet = next((b for b in bullets if not b.active), None)
    if bullet is not None:
        bullet.x = x + MUZZLE_OFFSET_X
        bullet.y = y - MUZZLE_OFFSET_Y
        bullet.width = PLAYER_BULLET_WIDTH
        bullet.height = PLAYER_BULLET_HEIGHT
        bullet.active = True
    return bullet


def move_bullets(bullets: Iterable[Bullet], player: Player, game_phase: int, now: float) -> None:
    """Advance the player's bullets, expiring the rapid-fire power-up when due."""
    if player.special_attack_active and now - player.special_attack_start_time > SPECIAL_ATTACK_DURATION:
        player.special_attack_active = False

    if player.special_attack_active:
        factor = _SPECIAL_SPEED_FACTOR.get(game_phase)
        step = None if factor is None else BULLET_SPEED * factor
    else:
        step = BULLET_SPEED

    for bullet in bullets:
        if not bullet.active:
            continue
        if step is not None:
            bullet.x += step
        if bullet.x > SCREEN_WIDTH:
            bullet.active = False


def _move_left(bullets: Iterable[EnemyBullet | BossBullet]) -> None:
    for bullet in bullets:
        if bullet.active:
            bullet.x -= bullet.speed
            if bullet.x < 0:
                bullet.active = False


def move_boss_bullets(bullets: Iterable[BossBullet]) -> None:
    """Advance the boss's bullets leftwards, retiring those that leave the screen."""
    _move_left(bullets)


def move_enemy_bullets(bullets: Iterable[EnemyBullet]) -> None:
    """Advance enemy bullets leftwards, retiring those that leave the screen."""
    _move_left(bullets)