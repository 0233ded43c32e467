"""One running game: all entities, the clock and the per-frame update."""

from __future__ import annotations

import random
from enum import Enum

from .boss import Boss, BossActivation
from .bullets import fire_bullet, move_boss_bullets, move_bullets, move_enemy_bullets, new_boss_bullets, new_player_bullets
from .collision import (
    Scoreboard,
    check_boss_bullet_collisions,
    check_boss_collision,
    check_collisions,
    check_enemy_bullet_collisions,
)
from .enemies import ACTIVE_SHOTS, ShootingEnemy, init_enemies, move_enemies
from .entities import (
    FIRE_INTERVAL,
    MAX_BOSS_BULLETS,
    MAX_BULLETS,
    MAX_ENEMIES,
    MAX_SHOOTING_ENEMIES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TIME_TO_BOSS,
    GameOptions,
    Item,
)
from .player import Player
from .rules import (
    DEFAULT_BACKGROUND_SPEED,
    Key,
    Spawner,
    handle_key_down,
    handle_key_up,
    init_second_phase,
    restart_game,
)

PHASE1_BOSS_FIRE_DELAY = 1.0
FINAL_PHASE = 2


class Outcome(Enum):
    """What a frame update asks the caller to do next."""

    RUNNING = "running"
    GAME_OVER = "game_over"
    PHASE_CLEARED = "phase_cleared"
    VICTORY = "victory"


class GameSession:
    """The complete state of a game in progress."""

    def __init__(self, now: float = 0.0, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player = Player()
        self.bullets = new_player_bullets(MAX_BULLETS)
        self.enemies = init_enemies(MAX_ENEMIES, self.rng)
        self.boss_bullets = new_boss_bullets(MAX_BOSS_BULLETS)
        self.shooting_enemies = [ShootingEnemy() for _ in range(MAX_SHOOTING_ENEMIES)]
        self.shooting_enemies[0].reset(self.rng)
        self.boss = Boss()
        self.options = GameOptions()
        self.item = Item()
        self.item_phase2 = Item()
        self.board = Scoreboard()
        self.activation = BossActivation()
        self.spawner = Spawner()
        self.game_phase = 1
        self.start_time = now
        self.last_fire_time = 0.0
        self.boss_bullet_count = 0
        self.background_x = 0.0
        self.background_speed = DEFAULT_BACKGROUND_SPEED
        self.background_width = SCREEN_WIDTH

    def remaining_time(self, now: float) -> float:
        """Seconds left before the boss is summoned (negative once overdue)."""
        return TIME_TO_BOSS - (now - self.start_time)

    def restart(self, now: float) -> None:
        """Start over from phase 1's state after a defeat."""
        self.item_phase2.active = False
        self.item.active = False
        self.start_time = restart_game(
            self.player, self.boss, self.enemies, self.bullets, self.board, self.rng, now
        )

    def start_second_phase(self, now: float) -> None:
        """Move on to phase 2 after the first boss falls."""
        init_second_phase(
            self.player, self.enemies, self.bullets, self.shooting_enemies, self.boss, self.board, self.rng
        )
        self.start_time = now
        self.game_phase = 2
        self.item_phase2.active = False
        self.board.player_won = False

    def _update_enemies(self, now: float) -> None:
        phase = self.game_phase
        if not self.boss.active:
            if phase == 1:
                self.spawner.phase1(self.shooting_enemies, self.enemies, self.rng)
            elif phase == 2:
                self.spawner.phase2(self.shooting_enemies, self.enemies, self.rng, now)

        move_enemies(self.enemies, phase, self.rng)
        check_collisions(
            self.player,
            self.bullets,
            self.enemies,
            self.shooting_enemies,
            self.item,
            self.item_phase2,
            self.board,
            phase,
            now,
        )

        for shooter in self.shooting_enemies:
            shooter.move(self.rng)
            on_screen = (
                shooter.x + shooter.width >= 0
                and shooter.x <= SCREEN_WIDTH
                and shooter.y + shooter.height >= 0
                and shooter.y <= SCREEN_HEIGHT
            )
            if on_screen:
                shooter.shoot(phase, now)
            move_enemy_bullets(shooter.bullets[:ACTIVE_SHOTS])
            check_enemy_bullet_collisions(self.player, shooter, self.board, now)

    def _boss_turn(self, now: float) -> None:
        boss, phase = self.boss, self.game_phase
        fight = True
        if phase == 1:
            self.item.active = False
            fight = now - self.activation.shoot_start_time >= PHASE1_BOSS_FIRE_DELAY
        else:
            self.item_phase2.active = False
        if fight:
            self.boss_bullet_count += boss.shoot(self.boss_bullets, phase, now)
            move_boss_bullets(self.boss_bullets)
            check_boss_bullet_collisions(self.player, boss, self.boss_bullets, self.board, phase, now)
        check_boss_collision(self.player, self.bullets, boss, self.board, phase, now)

    def update(self, now: float) -> Outcome:
        """Advance the game by one frame."""
        if self.board.game_over:
            return Outcome.GAME_OVER

        self.background_x -= self.background_speed
        if self.background_x <= -self.background_width:
            self.background_x = 0.0

        if self.player.paused:
            return Outcome.RUNNING

        remaining = self.remaining_time(now)
        if remaining > 0:
            self._update_enemies(now)

        self.activation.update(
            self.boss, now, remaining, SCREEN_WIDTH, self.enemies, self.shooting_enemies
        )

        if self.player.lives <= 0:
            for bullet in self.boss_bullets:
                bullet.active = False

        if self.boss.active:
            self._boss_turn(now)

        outcome = Outcome.RUNNING
        if self.board.player_won:
            outcome = Outcome.PHASE_CLEARED if self.game_phase < FINAL_PHASE else Outcome.VICTORY

        player = self.player
        player.move(now)
        move_bullets(self.bullets, player, self.game_phase, now)
        player.update_invulnerability(now)

        if player.joystick.fire and now - self.last_fire_time > FIRE_INTERVAL:
            fire_bullet(self.bullets, player.x + player.width, player.y + player.height // 2)
            self.last_fire_time = now

        return outcome

    def press(self, key: Key) -> bool:
        """Handle a key press; return whether the game is now paused."""
        self.background_speed = handle_key_down(self.player, key, self.background_speed)
        return self.player.paused

    def release(self, key: Key) -> None:
        """Handle a key release."""
        self.background_speed = handle_key_up(self.player, key, self.background_speed)