import random

from spaceimpact.boss import BOSS_HEALTH, Boss
from spaceimpact.bullets import new_player_bullets
from spaceimpact.collision import Scoreboard
from spaceimpact.enemies import ShootingEnemy, init_enemies
from spaceimpact.entities import SCREEN_HEIGHT, SCREEN_WIDTH, GameOptions
from spaceimpact.player import Player
from spaceimpact.rules import (
    Key,
    Spawner,
    handle_key_down,
    handle_key_up,
    init_second_phase,
    restart_game,
    set_background,
    update_backgrounds,
)


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return min(self.value, n - 1)


def test_key_down_sets_joystick():
    player = Player()
    assert handle_key_down(player, Key.W, 2.0) == 2.0
    assert player.joystick.up
    handle_key_down(player, Key.ENTER, 2.0)
    assert player.joystick.fire


def test_horizontal_keys_change_scroll_speed():
    player = Player()
    assert handle_key_down(player, Key.A, 2.0) == 0.5
    assert player.joystick.left
    assert handle_key_down(player, Key.D, 2.0) == 4.0
    assert player.joystick.right
    assert handle_key_up(player, Key.A, 0.5) == 2.0
    assert handle_key_up(player, Key.D, 4.0) == 2.0
    assert not player.joystick.left and not player.joystick.right


def test_pause_toggles():
    player = Player()
    handle_key_down(player, Key.P, 2.0)
    assert player.paused
    handle_key_down(player, Key.P, 2.0)
    assert not player.paused


def test_release_fire():
    player = Player()
    handle_key_down(player, Key.ENTER, 2.0)
    handle_key_up(player, Key.ENTER, 2.0)
    assert not player.joystick.fire


def test_set_background():
    backgrounds = ["a", "b", "c"]
    assert set_background(2, backgrounds, "x") == "c"
    assert set_background(3, backgrounds, "x") == "x"
    assert set_background(-1, backgrounds, "x") == "x"


def test_update_backgrounds_uses_scenery_options():
    options = GameOptions()
    options.select(2, 1)
    options.select(3, 2)
    assert update_backgrounds(options, ["a", "b", "c"], "a", "b") == ("b", "c")


def test_restart_game_resets_everything():
    rng = random.Random(3)
    player = Player()
    player.lives = 1
    boss = Boss()
    boss.active = True
    boss.health = 3
    enemies = init_enemies(4, rng)
    enemies[0].active = True
    bullets = new_player_bullets(8)
    bullets[0].active = True
    board = Scoreboard(score=9, game_over=True, enemy_destroyed_count=3)

    start = restart_game(player, boss, enemies, bullets, board, rng, 12.5)

    assert start == 12.5
    assert player.lives == Player().lives
    assert player.invulnerable and player.invulnerable_time == 12.5
    assert not boss.active and boss.health == BOSS_HEALTH
    assert not any(e.active for e in enemies)
    assert not any(b.active for b in bullets)
    assert board == Scoreboard()


def test_init_second_phase():
    rng = random.Random(5)
    player = Player()
    player.x = 300
    enemies = init_enemies(4, rng)
    enemies[1].active = True
    bullets = new_player_bullets(8)
    bullets[2].active = True
    shooters = [ShootingEnemy()]
    boss = Boss()
    boss.health = 0
    board = Scoreboard(score=20, player_won=True, enemy_destroyed_count=7)

    init_second_phase(player, enemies, bullets, shooters, boss, board, rng)

    assert boss.health == BOSS_HEALTH
    assert boss.speed == 6
    assert boss.horizontal_speed == 2
    assert boss.y == SCREEN_HEIGHT // 4
    assert boss.x == SCREEN_WIDTH
    assert shooters[0].vertical_speed == 4
    assert not board.player_won
    assert board.enemy_destroyed_count == 0
    assert board.score == 20
    assert player.x == Player().x
    assert not any(e.active for e in enemies)
    assert not any(b.active for b in bullets)


def test_phase1_spawns_when_dice_hit():
    shooters = [ShootingEnemy()]
    enemies = init_enemies(4, random.Random(0))
    Spawner().phase1(shooters, enemies, FixedRng(0))
    assert shooters[0].active
    assert sum(e.active for e in enemies) == 1


def test_phase1_spawns_nothing_otherwise():
    shooters = [ShootingEnemy()]
    enemies = init_enemies(4, random.Random(0))
    Spawner().phase1(shooters, enemies, FixedRng(1))
    assert not shooters[0].active
    assert not any(e.active for e in enemies)


def test_phase2_waits_one_second():
    spawner = Spawner()
    shooters = [ShootingEnemy()]
    enemies = init_enemies(4, random.Random(0))
    spawner.phase2(shooters, enemies, FixedRng(0), 10.0)
    assert spawner.phase2_started and spawner.phase2_start_time == 10.0
    assert not shooters[0].active and not any(e.active for e in enemies)
    spawner.phase2(shooters, enemies, FixedRng(0), 11.0)
    assert shooters[0].active
    assert sum(e.active for e in enemies) == 1


def test_spawner_reset():
    spawner = Spawner()
    spawner.phase2([ShootingEnemy()], [], FixedRng(1), 4.0)
    spawner.reset()
    assert spawner == Spawner()