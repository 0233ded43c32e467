"""The end-of-phase boss: movement, normal shots, special attacks and arrival."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .bullets import BossBullet
from .enemies import Enemy, ShootingEnemy
from .entities import BOSS_SHOT_INTERVAL, BULLET_SPEED, SCREEN_HEIGHT, SCREEN_WIDTH, Box

BOSS_WIDTH = 200
BOSS_HEIGHT = 200
BOSS_SPEED = 2
BOSS_HEALTH = 18
NORMAL_SHOT_OFFSET_Y = 20

SPECIAL_INTERVAL = 2.0
SPECIAL_DURATION = 1.0
SPECIAL_SHOTS = 3
SPECIAL_SPACING = 40
SPECIAL_SPEED = BULLET_SPEED * 2

SPECIAL_2_INTERVAL = 3.0
SPECIAL_2_DURATION = 0.5
SPECIAL_2_SHOTS = 4
SPECIAL_2_SPACING = 100
SPECIAL_2_SPEED = BULLET_SPEED * 1.5

SPECIAL_OFFSET_Y = 10
BOSS_ARRIVAL_DELAY = 2.0


def _launch(bullets: Sequence[BossBullet], x: float, y: float, speed: float) -> bool:
    bullet = next((b for b in bullets if not b.active), None)
    if bullet is None:
        return False
    bullet.x = x
    bullet.y = y
    bullet.speed = speed
    bullet.active = True
    return True


@dataclass
class Boss(Box):
    """The large ship that closes each phase."""

    x: float = float(SCREEN_WIDTH)
    y: float = float(SCREEN_HEIGHT // 2)
    width: int = BOSS_WIDTH
    height: int = BOSS_HEIGHT
    active: bool = False
    speed: float = float(BOSS_SPEED)
    health: int = BOSS_HEALTH
    horizontal_speed: int = 0
    last_shot_time: float = 0.0
    damaged: bool = False
    damaged_time: float = 0.0
    last_special_attack_time: float = 0.0
    special_attack_active: bool = False
    explosion_time: float = 0.0
    exploding: bool = False

    def reset(self) -> None:
        """Return to the dormant state, off screen to the right."""
        self.x = float(SCREEN_WIDTH)
        self.y = float(SCREEN_HEIGHT // 2)
        self.width = BOSS_WIDTH
        self.height = BOSS_HEIGHT
        self.active = False
        self.speed = float(BOSS_SPEED)
        self.health = BOSS_HEALTH
        self.last_shot_time = 0.0
        self.last_special_attack_time = 0.0
        self.special_attack_active = False

    def move(self, game_phase: int) -> None:
        """Bob vertically, twice as fast in phase 2, bouncing off the screen edges."""
        if not self.active:
            return
        if game_phase == 1:
            self.y += self.speed
        elif game_phase == 2:
            self.y += self.speed * 2
        else:
            return
        if self.y <= 0 or self.y >= SCREEN_HEIGHT - self.height:
            self.speed = -self.speed

    def shoot(self, bullets: Sequence[BossBullet], game_phase: int, now: float) -> int:
        """Fire a normal shot when due, then the phase's special attack; return bullets fired."""
        fired = 0
        if now - self.last_shot_time >= BOSS_SHOT_INTERVAL and not self.special_attack_active:
            y = self.y + self.height // 2 - NORMAL_SHOT_OFFSET_Y
            if _launch(bullets, self.x, y, BULLET_SPEED):
                self.last_shot_time = now
                fired += 1

        if game_phase == 1:
            fired += self.special_attack_2(bullets, now)
        elif game_phase == 2:
            fired += self.special_attack(bullets, now)
        return fired

    def _special(
        self,
        bullets: Sequence[BossBullet],
        now: float,
        interval: float,
        duration: float,
        shots: int,
        spacing: int,
        speed: float,
    ) -> int:
        fired = 0
        if not self.special_attack_active and now - self.last_special_attack_time >= interval:
            self.special_attack_active = True
            self.last_special_attack_time = now
            for i in range(shots):
                y = self.y - SPECIAL_OFFSET_Y + i * spacing
                if _launch(bullets, self.x, y, speed):
                    fired += 1
        if self.special_attack_active and now - self.last_special_attack_time >= duration:
            self.special_attack_active = False
        return fired

    def special_attack(self, bullets: Sequence[BossBullet], now: float) -> int:
        """Phase 2 volley: three fast, tightly spaced shots every two seconds."""
        return self._special(
            bullets, now, SPECIAL_INTERVAL, SPECIAL_DURATION, SPECIAL_SHOTS, SPECIAL_SPACING, SPECIAL_SPEED
        )

    def special_attack_2(self, bullets: Sequence[BossBullet], now: float) -> int:
        """Phase 1 volley: four widely spaced shots every three seconds."""
        return self._special(
            bullets,
            now,
            SPECIAL_2_INTERVAL,
            SPECIAL_2_DURATION,
            SPECIAL_2_SHOTS,
            SPECIAL_2_SPACING,
            SPECIAL_2_SPEED,
        )


@dataclass
class BossActivation:
    """Tracks the short wait between the countdown ending and the boss appearing."""

    start_time: float = 0.0
    shoot_start_time: float = 0.0
    waiting: bool = False

    def update(
        self,
        boss: Boss,
        now: float,
        remaining_time: float,
        screen_width: int,
        enemies: Iterable[Enemy],
        shooting_enemies: Iterable[ShootingEnemy],
    ) -> bool:
        """Advance the arrival sequence; return True when the boss has just arrived."""
        if boss.active:
            for enemy in enemies:
                enemy.active = False
            for shooter in shooting_enemies:
                shooter.active = False

        if remaining_time <= 0 and not self.waiting and not boss.active:
            self.waiting = True
            self.start_time = now

        if self.waiting and now - self.start_time >= BOSS_ARRIVAL_DELAY:
            self.waiting = False
            boss.active = True
            boss.x = screen_width - boss.width
            self.shoot_start_time = now
            return True
        return False