"""Basic enemies and the enemies that shoot back."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .bullets import EnemyBullet
from .entities import ENEMY_SPEED, ENEMY_SPEED_SHOOTING, SCREEN_HEIGHT, SCREEN_WIDTH, Box

ENEMY_WIDTH = 70
ENEMY_HEIGHT = 40
ENEMY_HEALTH = 2
PHASE2_ENEMY_SPEED = 8
SPAWN_MARGIN = 30

SHOOTING_ENEMY_WIDTH = 100
SHOOTING_ENEMY_HEIGHT = 50
SHOOTING_ENEMY_HEALTH = 2
SHOOTING_ENEMY_VERTICAL_SPEED = 0.5
BULLET_SLOTS = 10
PREPARED_BULLETS = 4
ACTIVE_SHOTS = 3
ENEMY_BULLET_SIZE = 10
ENEMY_BULLET_SPEED = 8
GUN_OFFSET_X = 20

SHOT_INTERVALS = {1: 1.0, 2: 0.1}


@dataclass
class Enemy(Box):
    """A basic enemy that drifts left and bounces vertically."""

    width: int = ENEMY_WIDTH
    height: int = ENEMY_HEIGHT
    active: bool = False
    health: int = ENEMY_HEALTH
    vertical_speed: float = 1.0
    original_y: float = 0.0
    moving_up: bool = True
    damaged: bool = False
    damaged_time: float = 0.0
    explosion_time: float = 0.0
    exploding: bool = False

    def reset(self, rng: random.Random) -> None:
        """Return to the dormant state at a random height."""
        self.active = False
        self.health = ENEMY_HEALTH
        self.vertical_speed = 1.0
        self.original_y = rng.randrange(SCREEN_HEIGHT - SPAWN_MARGIN)
        self.y = self.original_y
        self.moving_up = True
        self.exploding = False
        self.explosion_time = 0.0


@dataclass
class ShootingEnemy(Box):
    """An enemy that weaves vertically and fires at the player."""

    width: int = SHOOTING_ENEMY_WIDTH
    height: int = SHOOTING_ENEMY_HEIGHT
    active: bool = False
    health: int = SHOOTING_ENEMY_HEALTH
    vertical_speed: float = SHOOTING_ENEMY_VERTICAL_SPEED
    bullets: list[EnemyBullet] = field(default_factory=lambda: [EnemyBullet() for _ in range(BULLET_SLOTS)])
    last_shot_time: float = 0.0
    moving_up: bool = True
    damaged: bool = False
    damaged_time: float = 0.0
    explosion_time: float = 0.0
    exploding: bool = False
    ready_to_shoot: bool = False

    def reset(self, rng: random.Random) -> None:
        """Activate just beyond the right edge at a random height."""
        self.x = SCREEN_WIDTH + rng.randrange(100)
        self.y = rng.randrange(SCREEN_HEIGHT - SPAWN_MARGIN)
        self.width = SHOOTING_ENEMY_WIDTH
        self.height = SHOOTING_ENEMY_HEIGHT
        self.active = True
        self.health = SHOOTING_ENEMY_HEALTH
        self.vertical_speed = SHOOTING_ENEMY_VERTICAL_SPEED
        self.last_shot_time = 0.0
        self.moving_up = True
        self.explosion_time = 0.0
        self.exploding = False
        for bullet in self.bullets[:PREPARED_BULLETS]:
            bullet.active = False
            bullet.width = ENEMY_BULLET_SIZE
            bullet.height = ENEMY_BULLET_SIZE
            bullet.speed = ENEMY_BULLET_SPEED

    def move(self, rng: random.Random) -> None:
        """Drift left while weaving; wrap back to the right after leaving the screen."""
        if not self.active:
            return
        self.x -= ENEMY_SPEED_SHOOTING
        if self.moving_up:
            self.y -= self.vertical_speed
            if self.y <= 0:
                self.moving_up = False
        else:
            self.y += self.vertical_speed
            if self.y >= SCREEN_HEIGHT - self.height:
                self.moving_up = True
        if self.x < -self.width:
            self.x = SCREEN_WIDTH + rng.randrange(100)
            self.y = rng.randrange(SCREEN_HEIGHT - self.height)

    def shoot(self, game_phase: int, now: float) -> EnemyBullet | None:
        """Fire a bullet if the phase's interval has passed; return the bullet fired."""
        self.ready_to_shoot = True
        shots = self.bullets[:ACTIVE_SHOTS]
        if self.health <= 0:
            for bullet in shots:
                bullet.active = False

        interval = SHOT_INTERVALS.get(game_phase)
        if interval is None or now - self.last_shot_time < interval:
            return None
        bullet = next((b for b in shots if not b.active), None)
        if bullet is not None:
            bullet.x = self.x - GUN_OFFSET_X
            bullet.y = self.y
            bullet.active = True
            self.last_shot_time = now
        return bullet


def init_enemies(count: int, rng: random.Random) -> list[Enemy]:
    """Return ``count`` dormant basic enemies."""
    enemies = [Enemy() for _ in range(count)]
    for enemy in enemies:
        enemy.reset(rng)
    return enemies


def move_enemies(enemies: Iterable[Enemy], game_phase: int, rng: random.Random) -> None:
    """Move every active basic enemy according to the rules of the phase."""
    if game_phase == 1:
        speed, spawn_spread = ENEMY_SPEED, 100
    elif game_phase == 2:
        speed, spawn_spread = PHASE2_ENEMY_SPEED, 50
    else:
        return

    for enemy in enemies:
        if not enemy.active:
            continue
        enemy.x -= speed
        enemy.y += enemy.vertical_speed
        if enemy.y <= 0 or enemy.y >= SCREEN_HEIGHT - enemy.height:
            enemy.vertical_speed *= -1
        if enemy.x < -enemy.width:
            enemy.x = SCREEN_WIDTH + rng.randrange(spawn_spread)
            enemy.y = rng.randrange(SCREEN_HEIGHT - enemy.height)
            if game_phase == 1:
                magnitude = rng.randrange(3) + 1
                enemy.vertical_speed = magnitude * (1 if rng.randrange(2) == 0 else -1)
            else:
                enemy.vertical_speed = rng.randrange(2) + 1


def generate_enemy(enemies: Sequence[Enemy], rng: random.Random) -> Enemy | None:
    """Activate the first dormant basic enemy just past the right edge."""
    enemy = next((e for e in enemies if not e.active), None)
    if enemy is not None:
        enemy.x = SCREEN_WIDTH + rng.randrange(100)
        enemy.y = rng.randrange(SCREEN_HEIGHT)
        enemy.width = ENEMY_WIDTH
        enemy.height = ENEMY_HEIGHT
        enemy.active = True
        enemy.health = ENEMY_HEALTH
    return enemy


def generate_shooting_enemy(
    enemies: Sequence[ShootingEnemy], game_phase: int, rng: random.Random
) -> ShootingEnemy | None:
    """Activate the first dormant shooting enemy, whatever the phase."""
    enemy = next((e for e in enemies if not e.active), None)
    if enemy is not None:
        enemy.reset(rng)
    return enemy