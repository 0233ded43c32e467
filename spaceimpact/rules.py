"""Game rules outside the per-frame physics: input, backgrounds, restarts and spawning."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from .boss import BOSS_HEALTH, Boss
from .bullets import Bullet
from .collision import Scoreboard
from .enemies import Enemy, ShootingEnemy, generate_enemy, generate_shooting_enemy
from .entities import OPTIONS_PER_GROUP, SCREEN_HEIGHT, SCREEN_WIDTH, GameOptions
from .player import Player

DEFAULT_BACKGROUND_SPEED = 2.0
SLOW_BACKGROUND_SPEED = 0.5
FAST_BACKGROUND_SPEED = 4.0

PHASE2_BOSS_SPEED = 6
PHASE2_BOSS_HORIZONTAL_SPEED = 2
PHASE2_SHOOTER_VERTICAL_SPEED = 4

PHASE1_SHOOTER_ODDS = 200
PHASE1_ENEMY_ODDS = 60
PHASE2_SHOOTER_ODDS = 100
PHASE2_ENEMY_ODDS = 30
PHASE2_SPAWN_DELAY = 1.0

T = TypeVar("T")


class Key(Enum):
    """Keys the game reacts to."""

    W = "w"
    S = "s"
    A = "a"
    D = "d"
    ENTER = "enter"
    P = "p"
    ESCAPE = "escape"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def handle_key_down(player: Player, key: Key, background_speed: float) -> float:
    """Apply a key press to the player; return the new background scroll speed."""
    stick = player.joystick
    if key is Key.W:
        stick.up = True
    elif key is Key.S:
        stick.down = True
    elif key is Key.A:
        stick.left = True
        background_speed = SLOW_BACKGROUND_SPEED
    elif key is Key.D:
        stick.right = True
        background_speed = FAST_BACKGROUND_SPEED
    elif key is Key.ENTER:
        stick.fire = True
    elif key is Key.P:
        player.paused = not player.paused
    return background_speed


def handle_key_up(player: Player, key: Key, background_speed: float) -> float:
    """Apply a key release to the player; return the new background scroll speed."""
    stick = player.joystick
    if key is Key.W:
        stick.up = False
    elif key is Key.S:
        stick.down = False
    elif key is Key.A:
        stick.left = False
        background_speed = DEFAULT_BACKGROUND_SPEED
    elif key is Key.D:
        stick.right = False
        background_speed = DEFAULT_BACKGROUND_SPEED
    elif key is Key.ENTER:
        stick.fire = False
    return background_speed


def set_background(option: int, backgrounds: Sequence[T], current: T) -> T:
    """Return the background chosen by ``option``, or ``current`` if the option is out of range."""
    if 0 <= option < OPTIONS_PER_GROUP:
        return backgrounds[option]
    return current


def update_backgrounds(
    options: GameOptions, backgrounds: Sequence[Any], current: Any, current_2: Any
) -> tuple[Any, Any]:
    """Return the phase 1 and phase 2 backgrounds selected in ``options``."""
    return (
        set_background(options.new_option_2, backgrounds, current),
        set_background(options.new_option_3, backgrounds, current_2),
    )


def _clear_bullets(bullets: Iterable[Bullet]) -> None:
    for bullet in bullets:
        bullet.active = False


def restart_game(
    player: Player,
    boss: Boss,
    enemies: Iterable[Enemy],
    bullets: Iterable[Bullet],
    board: Scoreboard,
    rng: random.Random,
    now: float,
) -> float:
    """Reset the game after a defeat; return the new start time."""
    player.reset()
    boss.reset()
    for enemy in enemies:
        enemy.reset(rng)
    _clear_bullets(bullets)
    player.invulnerable = True
    player.invulnerable_time = now
    board.reset()
    return now


def init_second_phase(
    player: Player,
    enemies: Iterable[Enemy],
    bullets: Iterable[Bullet],
    shooting_enemies: Iterable[ShootingEnemy],
    boss: Boss,
    board: Scoreboard,
    rng: random.Random,
) -> None:
    """Prepare the player, enemies and a tougher boss for phase 2."""
    boss.health = BOSS_HEALTH
    boss.speed = float(PHASE2_BOSS_SPEED)
    boss.horizontal_speed = PHASE2_BOSS_HORIZONTAL_SPEED
    boss.y = float(SCREEN_HEIGHT // 4)
    boss.x = float(SCREEN_WIDTH)
    board.player_won = False
    board.enemy_destroyed_count = 0

    for shooter in shooting_enemies:
        shooter.vertical_speed = PHASE2_SHOOTER_VERTICAL_SPEED

    player.reset()
    for enemy in enemies:
        enemy.reset(rng)
    _clear_bullets(bullets)


@dataclass
class Spawner:
    """Random enemy generation for each phase."""

    phase2_start_time: float = -1.0
    phase2_started: bool = False

    def reset(self) -> None:
        """Forget when phase 2 began."""
        self.phase2_start_time = -1.0
        self.phase2_started = False

    def phase1(
        self, shooting_enemies: Sequence[ShootingEnemy], enemies: Sequence[Enemy], rng: random.Random
    ) -> None:
        """Occasionally bring in a shooting enemy or a basic enemy."""
        if rng.randrange(PHASE1_SHOOTER_ODDS) == 0:
            generate_shooting_enemy(shooting_enemies, 1, rng)
        if rng.randrange(PHASE1_ENEMY_ODDS) == 0:
            generate_enemy(enemies, rng)

    def phase2(
        self,
        shooting_enemies: Sequence[ShootingEnemy],
        enemies: Sequence[Enemy],
        rng: random.Random,
        now: float,
    ) -> None:
        """After a short grace period, bring in enemies more often than in phase 1."""
        if not self.phase2_started:
            self.phase2_start_time = now
            self.phase2_started = True
        if now - self.phase2_start_time >= PHASE2_SPAWN_DELAY:
            if rng.randrange(PHASE2_SHOOTER_ODDS) == 0:
                generate_shooting_enemy(shooting_enemies, 2, rng)
            if rng.randrange(PHASE2_ENEMY_ODDS) == 0:
                generate_enemy(enemies, rng)