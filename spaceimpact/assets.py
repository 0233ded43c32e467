"""Loading of the game's images, fonts and music from an asset directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pygame

IMAGE_DIR = "imagens"
FONT_DIR = "fonts"
MUSIC_DIR = "musicas"

IMAGE_FILES = {
    "background": "background.png",
    "background_2": "background_2.png",
    "background_3": "background_3.png",
    "player": "nave.png",
    "player_dir": "nave_dir.png",
    "player_esq": "nave_esq.png",
    "player_dif1": "nave1.png",
    "player_dir_dif1": "nave_1_dir.png",
    "player_esq_dif1": "nave_1_esq.png",
    "player_dif2": "nave2.png",
    "player_dir_dif2": "nave_2_dir.png",
    "player_esq_dif2": "nave_2_esq.png",
    "bullet": "bullet.png",
    "bullet_2": "bullet_2.png",
    "bullet_3": "bullet_3.png",
    "bullet_dif1": "bullet_dif1.png",
    "bullet_dif2": "bullet_dif2.png",
    "enemy": "enemy.png",
    "enemy_2": "enemy_2.png",
    "shooting_enemy": "enemyShoot.png",
    "shooting_enemy_2": "enemyShoot_2.png",
    "enemy_bullet": "bulletEnemy.png",
    "explosion": "frame5.png",
    "boss": "ship_1.png",
    "boss_2": "ship_6.png",
    "boss_bullet_special": "bullet_boss1.png",
    "boss_bullet_2": "bulletEnemy_boss2.png",
    "boss_explosion": "frame4.png",
    "heart_full": "heart_full.png",
    "heart_null": "heart_null.png",
    "icon": "icon.png",
    "item": "item.png",
    "item_2": "item_2.png",
    "slide_1": "img1.png",
    "slide_2": "img2.png",
    "slide_3": "img3.png",
    "menu": "menu.jpg",
    "menu_restart": "menu_restart.png",
    "background_1_icon": "background_1_icon.png",
    "background_2_icon": "background_2_icon.png",
    "background_3_icon": "background_3_icon.png",
}

FONT_SPECS = {
    "game": ("ATC.ttf", 12),
    "menu": ("menu_f.ttf", 50),
    "warn": ("menu_f.ttf", 12),
    "info": ("menu_f.ttf", 20),
    "small": ("menu_f.ttf", 10),
    "button": ("menu_f.ttf", 35),
    "large_button": ("menu_f.ttf", 40),
    "title": ("game_f.ttf", 72),
    "alt_button": ("game_f.ttf", 35),
}

MUSIC_FILES = {
    "game": "musica_fundo.ogg",
    "menu": "musica_menu.ogg",
}

_SHIPS = ("player", "player_dif1", "player_dif2")
_SHIPS_DOWN = ("player_dir", "player_dir_dif1", "player_dir_dif2")
_SHIPS_UP = ("player_esq", "player_esq_dif1", "player_esq_dif2")
_SPRITE_NAMES = (
    "bullet", "bullet_2", "bullet_3", "bullet_dif1", "bullet_dif2",
    "enemy", "enemy_2", "shooting_enemy", "shooting_enemy_2", "enemy_bullet",
    "explosion", "boss", "boss_2", "boss_bullet_2", "boss_explosion",
)
_OPTION_IMAGES = (
    "player", "player_dif1", "player_dif2",
    "bullet", "bullet_dif1", "bullet_dif2",
    "background_1_icon", "background_2_icon", "background_3_icon",
    "background_1_icon", "background_2_icon", "background_3_icon",
)


@dataclass
class Assets:
    """Everything loaded from disk that the game draws or plays."""

    root: Path
    fonts: dict[str, Any]
    images: dict[str, Any]
    music: dict[str, Path]
    sprites: dict[str, Any] = field(default_factory=dict)
    backgrounds: list[Any] = field(default_factory=list)
    option_images: list[Any] = field(default_factory=list)
    slides: list[Any] = field(default_factory=list)


def _load_font(path: Path, size: int) -> Any:
    # A missing font file falls back to pygame's built-in font.
    if path.is_file():
        return pygame.font.Font(str(path), size)
    return pygame.font.Font(None, size)


def _load_image(path: Path) -> Any:
    if not path.is_file():
        raise FileNotFoundError(f"missing image: {path}")
    return pygame.image.load(str(path))


def _build_sprites(images: dict[str, Any]) -> dict[str, Any]:
    sprites = {name: images[name] for name in _SPRITE_NAMES}
    sprites["player"] = tuple(images[name] for name in _SHIPS)
    sprites["player_down"] = tuple(images[name] for name in _SHIPS_DOWN)
    sprites["player_up"] = tuple(images[name] for name in _SHIPS_UP)
    sprites["boss_bullet"] = images["enemy_bullet"]
    return sprites


def load_assets(root: str | Path) -> Assets:
    """Load every image, font and music path from the directory ``root``.

    Raises FileNotFoundError if an image is missing.
    """
    root = Path(root)
    if not pygame.font.get_init():
        pygame.font.init()

    images = {name: _load_image(root / IMAGE_DIR / filename) for name, filename in IMAGE_FILES.items()}
    fonts = {name: _load_font(root / FONT_DIR / filename, size) for name, (filename, size) in FONT_SPECS.items()}
    music = {name: root / MUSIC_DIR / filename for name, filename in MUSIC_FILES.items()}

    return Assets(
        root=root,
        fonts=fonts,
        images=images,
        music=music,
        sprites=_build_sprites(images),
        backgrounds=[images["background"], images["background_2"], images["background_3"]],
        option_images=[images[name] for name in _OPTION_IMAGES],
        slides=[images["slide_1"], images["slide_2"], images["slide_3"]],
    )