"""Hit detection between the player, enemies, the boss, their shots and items."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .boss import Boss
from .bullets import BossBullet, Bullet
from .enemies import ACTIVE_SHOTS, Enemy, ShootingEnemy
from .entities import Item
from .player import Player

SLOW_MULTIPLIER = 0.2
SLOW_DURATION = 1.0
PHASE1_ITEM_KILLS = 5
PHASE2_ITEM_KILLS = 4


@dataclass
class Scoreboard:
    """Score and end-of-game flags shared between the collision checks."""

    score: int = 0
    game_over: bool = False
    player_won: bool = False
    enemy_destroyed_count: int = 0

    def reset(self) -> None:
        """Clear the score and every flag."""
        self.score = 0
        self.game_over = False
        self.player_won = False
        self.enemy_destroyed_count = 0


def _damage(player: Player, game_phase: int) -> int:
    return 2 if game_phase == 2 and player.special_attack_active else 1


def _hit_player(player: Player, board: Scoreboard, now: float) -> None:
    if player.take_hit(now) and player.lives <= 0:
        board.game_over = True


def check_boss_collision(
    player: Player, bullets: Iterable[Bullet], boss: Boss, board: Scoreboard, game_phase: int, now: float
) -> None:
    """Apply player shots to the boss and the boss's body to the player."""
    for bullet in bullets:
        if bullet.active and boss.active and bullet.overlaps(boss):
            bullet.active = False
            boss.health -= _damage(player, game_phase)
            boss.exploding = True
            boss.explosion_time = now
            boss.damaged = True
            boss.damaged_time = now
            board.score += 1
            if boss.health <= 0:
                boss.active = False
                board.player_won = True

    if boss.active and player.overlaps(boss):
        _hit_player(player, board, now)


def check_boss_bullet_collisions(
    player: Player,
    boss: Boss,
    boss_bullets: Iterable[BossBullet],
    board: Scoreboard,
    game_phase: int,
    now: float,
) -> None:
    """Apply the boss's shots to the player; in phase 2 a special shot also slows the ship."""
    for bullet in boss_bullets:
        if not (bullet.active and bullet.overlaps(player)):
            continue
        _hit_player(player, board, now)
        bullet.active = False
        if game_phase == 2 and boss.special_attack_active:
            player.speed_multiplier = SLOW_MULTIPLIER
            player.slow_effect_end_time = now + SLOW_DURATION
        if player.lives <= 0:
            board.game_over = True


def check_enemy_bullet_collisions(player: Player, enemy: ShootingEnemy, board: Scoreboard, now: float) -> None:
    """Apply a shooting enemy's live shots to the player."""
    for bullet in enemy.bullets[:ACTIVE_SHOTS]:
        if bullet.active and bullet.overlaps(player):
            _hit_player(player, board, now)
            bullet.active = False


def _pick_up(item: Item | None, player: Player, now: float) -> None:
    if item is not None and item.active and player.overlaps(item):
        item.active = False
        player.special_attack_start_time = now
        player.special_attack_active = True


def check_collisions(
    player: Player,
    bullets: Iterable[Bullet],
    enemies: Iterable[Enemy],
    shooting_enemies: Iterable[ShootingEnemy],
    item_phase1: Item | None,
    item_phase2: Item | None,
    board: Scoreboard,
    game_phase: int,
    now: float,
) -> None:
    """Resolve shots against enemies, enemies against the player and item pickups."""
    enemies = list(enemies)
    shooting_enemies = list(shooting_enemies)
    damage = _damage(player, game_phase)

    for bullet in bullets:
        if not bullet.active:
            continue
        # A shot already spent on one target is not re-checked within this pass.
        for enemy in enemies:
            if not (enemy.active and bullet.overlaps(enemy)):
                continue
            bullet.active = False
            enemy.health -= damage
            enemy.damaged = True
            enemy.damaged_time = now
            board.score += 1
            enemy.exploding = True
            enemy.explosion_time = now
            if enemy.health <= 0:
                enemy.active = False
                board.enemy_destroyed_count += 1
                if (
                    game_phase == 1
                    and item_phase1 is not None
                    and not item_phase1.active
                    and board.enemy_destroyed_count == PHASE1_ITEM_KILLS
                ):
                    item_phase1.spawn_at(enemy.x, enemy.y)
                elif (
                    game_phase == 2
                    and item_phase2 is not None
                    and not item_phase2.active
                    and board.enemy_destroyed_count == PHASE2_ITEM_KILLS
                ):
                    item_phase2.spawn_at(enemy.x, enemy.y)

        for shooter in shooting_enemies:
            if not (shooter.active and bullet.overlaps(shooter)):
                continue
            bullet.active = False
            shooter.health -= damage
            shooter.exploding = True
            shooter.explosion_time = now
            board.score += 1
            if shooter.health <= 0:
                shooter.active = False

    for enemy in enemies:
        if enemy.active and enemy.overlaps(player):
            _hit_player(player, board, now)

    _pick_up(item_phase1, player, now)
    _pick_up(item_phase2, player, now)

    for shooter in shooting_enemies:
        if shooter.active and shooter.overlaps(player):
            _hit_player(player, board, now)