import pytest

from aetherwar.entities import Bullet, BulletKind, Enemy, Player, Sprite


def test_sprite_move_by_accumulates():
    sprite = Sprite(x=10, y=20, width=5, height=5)
    sprite.move_by(3, -4)
    sprite.move_by(1, 1)
    assert sprite.pos == (14, 17)


def test_sprite_rect_applies_scale():
    sprite = Sprite(x=1, y=2, width=10, height=20, scale=0.5)
    assert sprite.rect() == (1, 2, 5, 10)


def test_overlapping_sprites_collide_symmetrically():
    a = Sprite(x=0, y=0, width=10, height=10)
    b = Sprite(x=5, y=5, width=10, height=10)
    assert a.collides_with(b)
    assert b.collides_with(a)


@pytest.mark.parametrize("bx, by", [(20, 0), (0, 20), (-20, -20)])
def test_separate_sprites_do_not_collide(bx, by):
    a = Sprite(x=0, y=0, width=10, height=10)
    b = Sprite(x=bx, y=by, width=10, height=10)
    assert not a.collides_with(b)
    assert not b.collides_with(a)


def test_empty_sprite_never_collides():
    a = Sprite(x=0, y=0, width=10, height=10)
    b = Sprite(x=2, y=2, width=0, height=0)
    assert not a.collides_with(b)


def test_scale_shrinks_collision_box():
    bullet = Bullet(x=0, y=0, width=10, height=10)
    target = Sprite(x=8, y=0, width=10, height=10)
    assert not bullet.collides_with(target)
    assert Sprite(x=0, y=0, width=10, height=10).collides_with(target)


def test_bullet_defaults_follow_source():
    bullet = Bullet(x=0, y=0, width=10, height=10)
    assert bullet.speed == 2
    assert bullet.scale == 0.6
    assert bullet.kind is BulletKind.PLAYER


def test_player_bullet_moves_right_by_speed():
    bullet = Bullet(x=50, y=30, width=4, height=4)
    bullet.move()
    assert bullet.pos == (50 + bullet.speed, 30)


def test_enemy_bullet_moves_left_by_speed():
    bullet = Bullet(x=50, y=30, width=4, height=4, kind=BulletKind.ENEMY)
    bullet.enemy_move()
    assert bullet.pos == (50 - bullet.speed, 30)


def test_bullet_custom_direction_scales_by_speed():
    bullet = Bullet(x=0, y=0, speed=3)
    bullet.move((0, 1))
    bullet.enemy_move((1, -1))
    assert bullet.pos == (3, 0)


def test_enemy_moves_left_by_move_speed():
    enemy = Enemy(x=1024, y=100, width=30, height=30)
    enemy.move()
    assert enemy.pos == (1024 - enemy.move_speed, 100)
    assert enemy.shoot_speed == 1000


def test_enemy_custom_direction():
    enemy = Enemy(x=0, y=0, move_speed=2)
    enemy.move((0, 1))
    assert enemy.pos == (0, 2)


def test_player_defaults_follow_source():
    player = Player()
    assert player.pos == (100, 200)
    assert player.move_speed == 1
    assert player.cooldown_ms == 300
    assert player.can_shoot


def test_player_cooldown_blocks_until_elapsed():
    player = Player()
    player.start_cooldown()
    assert not player.can_shoot
    player.update(player.cooldown_ms - 1)
    assert not player.can_shoot
    player.update(1)
    assert player.can_shoot
    assert not player.cooling_down


def test_player_cooldown_restart_resets_countdown():
    player = Player()
    player.start_cooldown()
    player.update(player.cooldown_ms / 2)
    player.start_cooldown()
    player.update(player.cooldown_ms / 2)
    assert not player.can_shoot
    player.update(player.cooldown_ms / 2)
    assert player.can_shoot


def test_player_update_without_cooldown_keeps_state():
    player = Player()
    player.can_shoot = False
    player.update(1000)
    assert player.can_shoot is False