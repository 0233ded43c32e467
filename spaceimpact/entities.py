"""Game-wide constants and the small records shared by every part of the game."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
PLAYER_SPEED = 6
BULLET_SPEED = 6
ENEMY_SPEED = 5
ENEMY_SPEED_SHOOTING = 3
MAX_BULLETS = 8
MAX_BULLET_COUNT = 4
MAX_BOSS_BULLETS = 8
MAX_ENEMIES = 4
MAX_SHOOTING_ENEMIES = 1
FIRE_INTERVAL = 0.2
INVULNERABILITY_TIME = 1.5
BOSS_SHOT_INTERVAL = 0.4
TIME_TO_BOSS = 30
SCROLL_SPEED = 60
EXPLOSION_FRAME_COUNT = 5
BULLET_WIDTH = 50
BULLET_HEIGHT = 12
NUM_IMAGES = 3
IMAGE_SWITCH_TIME = 6.0

OPTION_GROUPS = 4
OPTIONS_PER_GROUP = 3

ITEM_WIDTH = 40
ITEM_HEIGHT = 15


@dataclass
class Box:
    """An axis-aligned rectangle with its top-left corner at (x, y)."""

    x: float = 0.0
    y: float = 0.0
    width: int = 0
    height: int = 0

    def overlaps(self, other: Box) -> bool:
        """Return True when the two rectangles intersect (touching edges do not count)."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass
class Joystick:
    """State of the player's directional and fire buttons."""

    right: bool = False
    left: bool = False
    up: bool = False
    down: bool = False
    fire: bool = False

    def release_all(self) -> None:
        """Mark every button as released."""
        for button in fields(self):
            setattr(self, button.name, False)


_GROUP_FIELDS = (
    ("sprite_option", "group_1_selected"),
    ("new_option_1", "group_2_selected"),
    ("new_option_2", "group_3_selected"),
    ("new_option_3", "group_4_selected"),
)


@dataclass
class GameOptions:
    """Choices made on the options screen: ship, shot, and the two phase backgrounds."""

    sprite_option: int = 0
    group_1_selected: int = 0
    new_option_1: int = 0
    group_2_selected: int = 0
    new_option_2: int = 0
    group_3_selected: int = 0
    new_option_3: int = 0
    group_4_selected: int = 0

    def select(self, group: int, option: int) -> None:
        """Record ``option`` as the choice for option ``group``."""
        if not 0 <= group < OPTION_GROUPS:
            raise ValueError(f"option group must be in 0..{OPTION_GROUPS - 1}, got {group}")
        if not 0 <= option < OPTIONS_PER_GROUP:
            raise ValueError(f"option must be in 0..{OPTIONS_PER_GROUP - 1}, got {option}")
        value_field, selected_field = _GROUP_FIELDS[group]
        setattr(self, value_field, option)
        setattr(self, selected_field, option)


@dataclass
class Item(Box):
    """A power-up that drops where an enemy died."""

    x: int = 0
    y: int = 0
    width: int = ITEM_WIDTH
    height: int = ITEM_HEIGHT
    active: bool = False
    sprite: Any = None

    def spawn_at(self, x: float, y: float) -> None:
        """Place the item at the given position and make it collectable."""
        self.x = int(x)
        self.y = int(y)
        self.active = True