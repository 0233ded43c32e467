import pytest

from spaceimpact.boss import Boss
from spaceimpact.bullets import BossBullet, Bullet, EnemyBullet
from spaceimpact.collision import (
    PHASE1_ITEM_KILLS,
    PHASE2_ITEM_KILLS,
    SLOW_DURATION,
    SLOW_MULTIPLIER,
    Scoreboard,
    check_boss_bullet_collisions,
    check_boss_collision,
    check_collisions,
    check_enemy_bullet_collisions,
)
from spaceimpact.enemies import Enemy, ShootingEnemy
from spaceimpact.entities import Item
from spaceimpact.player import Player

NOW = 10.0


@pytest.fixture
def player():
    return Player()


@pytest.fixture
def board():
    return Scoreboard()


@pytest.fixture
def boss():
    return Boss(x=600.0, y=200.0, active=True)


def boss_shot():
    return Bullet(x=650.0, y=250.0, width=50, height=30, active=True)


def on_player(player, cls, **extra):
    return cls(x=player.x, y=player.y, width=10, height=10, active=True, **extra)


def test_scoreboard_reset():
    b = Scoreboard(score=7, game_over=True, player_won=True, enemy_destroyed_count=3)
    b.reset()
    assert b == Scoreboard()


def test_bullet_damages_boss(player, board, boss):
    shot = boss_shot()
    health = boss.health
    check_boss_collision(player, [shot], boss, board, 1, NOW)
    assert boss.health == health - 1
    assert board.score == 1
    assert shot.active is False
    assert boss.exploding and boss.damaged
    assert boss.explosion_time == NOW


def test_double_damage_in_phase2_with_power_up(player, board, boss):
    player.special_attack_active = True
    health = boss.health
    check_boss_collision(player, [boss_shot()], boss, board, 2, NOW)
    assert boss.health == health - 2


def test_power_up_does_not_double_in_phase1(player, board, boss):
    player.special_attack_active = True
    health = boss.health
    check_boss_collision(player, [boss_shot()], boss, board, 1, NOW)
    assert boss.health == health - 1


def test_killing_boss_wins(player, board, boss):
    boss.health = 1
    check_boss_collision(player, [boss_shot()], boss, board, 1, NOW)
    assert boss.active is False
    assert board.player_won is True


def test_missed_bullet_stays_active(player, board, boss):
    shot = Bullet(x=100.0, y=100.0, width=50, height=30, active=True)
    check_boss_collision(player, [shot], boss, board, 1, NOW)
    assert shot.active
    assert board.score == 0


def test_touching_boss_costs_life(player, board, boss):
    boss.x, boss.y = player.x, player.y
    lives = player.lives
    check_boss_collision(player, [], boss, board, 1, NOW)
    assert player.lives == lives - 1
    assert player.invulnerable
    check_boss_collision(player, [], boss, board, 1, NOW)
    assert player.lives == lives - 1


def test_last_life_ends_game(player, board, boss):
    boss.x, boss.y = player.x, player.y
    player.lives = 1
    check_boss_collision(player, [], boss, board, 1, NOW)
    assert board.game_over is True


def test_boss_bullet_hits_player(player, board, boss):
    shot = on_player(player, BossBullet)
    lives = player.lives
    check_boss_bullet_collisions(player, boss, [shot], board, 1, NOW)
    assert player.lives == lives - 1
    assert shot.active is False
    assert player.speed_multiplier == 0.0


def test_boss_bullet_removed_even_when_invulnerable(player, board, boss):
    player.invulnerable = True
    shot = on_player(player, BossBullet)
    lives = player.lives
    check_boss_bullet_collisions(player, boss, [shot], board, 1, NOW)
    assert player.lives == lives
    assert shot.active is False


def test_special_boss_bullet_slows_in_phase2(player, board, boss):
    boss.special_attack_active = True
    check_boss_bullet_collisions(player, boss, [on_player(player, BossBullet)], board, 2, NOW)
    assert player.speed_multiplier == SLOW_MULTIPLIER
    assert player.slow_effect_end_time == NOW + SLOW_DURATION


def test_enemy_bullet_hits_player(player, board):
    shooter = ShootingEnemy()
    shooter.bullets[0] = on_player(player, EnemyBullet)
    lives = player.lives
    check_enemy_bullet_collisions(player, shooter, board, NOW)
    assert player.lives == lives - 1
    assert shooter.bullets[0].active is False


def test_enemy_bullet_beyond_live_slots_is_ignored(player, board):
    shooter = ShootingEnemy()
    shooter.bullets[3] = on_player(player, EnemyBullet)
    lives = player.lives
    check_enemy_bullet_collisions(player, shooter, board, NOW)
    assert player.lives == lives
    assert shooter.bullets[3].active


def enemy_and_shot():
    enemy = Enemy(x=400.0, y=100.0, active=True)
    shot = Bullet(x=410.0, y=105.0, width=50, height=30, active=True)
    return enemy, shot


def test_bullet_damages_enemy(player, board):
    enemy, shot = enemy_and_shot()
    health = enemy.health
    check_collisions(player, [shot], [enemy], [], None, None, board, 1, NOW)
    assert enemy.health == health - 1
    assert enemy.exploding and enemy.damaged
    assert enemy.explosion_time == NOW
    assert shot.active is False
    assert board.score == 1


def test_enemy_kill_drops_phase1_item(player, board):
    enemy, shot = enemy_and_shot()
    enemy.health = 1
    board.enemy_destroyed_count = PHASE1_ITEM_KILLS - 1
    item = Item()
    check_collisions(player, [shot], [enemy], [], item, Item(), board, 1, NOW)
    assert enemy.active is False
    assert board.enemy_destroyed_count == PHASE1_ITEM_KILLS
    assert item.active
    assert (item.x, item.y) == (int(enemy.x), int(enemy.y))


def test_enemy_kill_drops_phase2_item(player, board):
    enemy, shot = enemy_and_shot()
    enemy.health = 1
    board.enemy_destroyed_count = PHASE2_ITEM_KILLS - 1
    item1, item2 = Item(), Item()
    check_collisions(player, [shot], [enemy], [], item1, item2, board, 2, NOW)
    assert item2.active
    assert item1.active is False


def test_no_item_on_other_kill_counts(player, board):
    enemy, shot = enemy_and_shot()
    enemy.health = 1
    item = Item()
    check_collisions(player, [shot], [enemy], [], item, None, board, 1, NOW)
    assert board.enemy_destroyed_count == 1
    assert item.active is False


def test_one_shot_hits_every_overlapping_enemy(player, board):
    first, shot = enemy_and_shot()
    second = Enemy(x=first.x, y=first.y, active=True)
    check_collisions(player, [shot], [first, second], [], None, None, board, 1, NOW)
    assert first.health == second.health == Enemy().health - 1
    assert board.score == 2


def test_bullet_damages_shooting_enemy(player, board):
    shooter = ShootingEnemy(x=400.0, y=100.0, active=True, health=1)
    shot = Bullet(x=410.0, y=105.0, width=50, height=30, active=True)
    check_collisions(player, [shot], [], [shooter], None, None, board, 1, NOW)
    assert shooter.active is False
    assert shooter.exploding
    assert board.score == 1


def test_touching_enemy_costs_life(player, board):
    enemy = Enemy(x=player.x, y=player.y, active=True)
    lives = player.lives
    check_collisions(player, [], [enemy], [], None, None, board, 1, NOW)
    assert player.lives == lives - 1


def test_touching_shooting_enemy_on_last_life_ends_game(player, board):
    player.lives = 1
    shooter = ShootingEnemy(x=player.x, y=player.y, active=True)
    check_collisions(player, [], [], [shooter], None, None, board, 1, NOW)
    assert board.game_over is True


def test_item_pickup_activates_power_up(player, board):
    item = Item(x=player.x, y=player.y, active=True)
    check_collisions(player, [], [], [], item, None, board, 1, NOW)
    assert item.active is False
    assert player.special_attack_active is True
    assert player.special_attack_start_time == NOW


def test_inactive_item_is_not_picked_up(player, board):
    item = Item(x=player.x, y=player.y, active=False)
    check_collisions(player, [], [], [], None, item, board, 2, NOW)
    assert player.special_attack_active is False