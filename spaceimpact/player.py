"""The player's ship: position, lives, invulnerability and movement."""

from __future__ import annotations

from dataclasses import dataclass, field

from .entities import INVULNERABILITY_TIME, PLAYER_SPEED, SCREEN_HEIGHT, SCREEN_WIDTH, Box, Joystick

START_X = 50
START_Y = SCREEN_HEIGHT // 2
PLAYER_WIDTH = 50
PLAYER_HEIGHT = 30
START_LIVES = 4
BOTTOM_MARGIN = 20


@dataclass
class Player(Box):
    """The ship steered by the player."""

    x: int = START_X
    y: int = START_Y
    width: int = PLAYER_WIDTH
    height: int = PLAYER_HEIGHT
    lives: int = START_LIVES
    invulnerable: bool = False
    invulnerable_time: float = 0.0
    joystick: Joystick = field(default_factory=Joystick)
    paused: bool = False
    special_attack_active: bool = False
    special_attack_start_time: float = 0.0
    speed_multiplier: float = 0.0
    slow_effect_end_time: float = 0.0

    def reset(self) -> None:
        """Put the ship back at its starting state."""
        self.x = START_X
        self.y = START_Y
        self.width = PLAYER_WIDTH
        self.height = PLAYER_HEIGHT
        self.lives = START_LIVES
        self.invulnerable = False
        self.invulnerable_time = 0.0
        self.joystick.release_all()
        self.paused = False
        self.special_attack_active = False
        self.speed_multiplier = 0.0

    def move(self, now: float) -> None:
        """Move according to the joystick, keeping the ship on screen."""
        if self.speed_multiplier < 1.0 and now > self.slow_effect_end_time:
            self.speed_multiplier = 1.0

        step = PLAYER_SPEED * self.speed_multiplier
        right_limit = SCREEN_WIDTH - self.width
        bottom_limit = SCREEN_HEIGHT - self.height - BOTTOM_MARGIN
        stick = self.joystick

        if stick.up and self.y > 0:
            self.y = int(self.y - step)
        if stick.down and self.y < bottom_limit:
            self.y = int(self.y + step)
        if stick.left and self.x > 0:
            self.x = int(self.x - step)
        if stick.right and self.x < right_limit:
            self.x = int(self.x + step)

        self.x = min(max(self.x, 0), right_limit)
        self.y = min(max(self.y, 0), bottom_limit)

    def take_hit(self, now: float) -> bool:
        """Lose a life unless invulnerable; return whether the hit counted."""
        if self.invulnerable:
            return False
        self.lives -= 1
        self.invulnerable = True
        self.invulnerable_time = now
        return True

    def update_invulnerability(self, now: float) -> None:
        """End the invulnerability window once it has lasted long enough."""
        if self.invulnerable and now - self.invulnerable_time > INVULNERABILITY_TIME:
            self.invulnerable = False