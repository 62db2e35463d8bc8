"""The game rules: scrolling, steering, shooting, spawning, collisions and scoring."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable

from .engine import (
    BACKGROUND_INTERVAL_MS,
    ENEMY_BULLET_INTERVAL_MS,
    ENEMY_MOVE_INTERVAL_MS,
    ENEMY_SHOOT_INTERVAL_MS,
    ENEMY_SPAWN_INTERVAL_MS,
    EXPLOSION_Y_OFFSET,
    PLANE_INTERVAL_MS,
    PLAYER_BULLET_INTERVAL_MS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Explosion,
    Key,
    Scene,
    Timer,
)
from .entities import Bullet, BulletKind, Enemy, Player, Sprite

Size = tuple[float, float]

BACKGROUND_STEP = 2
PLANE_START = (100.0, 100.0)
MUZZLE_OFFSET = (23, 40)
EDGE_MARGIN = 10


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


class Game:
    """The whole game state, advanced by simulated milliseconds."""

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        plane_size: Size = (64, 64),
        enemy_size: Size = (64, 64),
        bullet_size: Size = (32, 16),
        enemy_bullet_size: Size = (32, 16),
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.width = SCREEN_WIDTH
        self.height = SCREEN_HEIGHT
        self.enemy_size = enemy_size
        self.bullet_size = bullet_size
        self.enemy_bullet_size = enemy_bullet_size

        self.scene = Scene.START
        self.started = False
        self.score = 0
        self.clock_ms = 0.0
        self.start_time_ms = 0.0
        self.end_seconds: int | None = None

        self.backgrounds = [
            Sprite(x=0, y=0, width=SCREEN_WIDTH, height=SCREEN_HEIGHT),
            Sprite(x=SCREEN_WIDTH, y=0, width=SCREEN_WIDTH, height=SCREEN_HEIGHT),
        ]
        self.plane = Player(
            x=PLANE_START[0], y=PLANE_START[1], width=plane_size[0], height=plane_size[1]
        )

        self.keys: list[Key] = []
        self.player_bullets: list[Bullet] = []
        self.enemies: list[Enemy] = []
        self.enemy_bullets: list[Bullet] = []
        self.explosions: list[Explosion] = []

        self.background_timer = Timer(self.scroll_background)
        self.plane_timer = Timer(self.plane_step)
        self.player_bullet_timer = Timer(self._player_bullet_tick)
        self.enemy_spawn_timer = Timer(self.spawn_enemy)
        self.enemy_move_timer = Timer(self.move_enemies)
        self.enemy_shoot_timer = Timer(self._enemy_shoot_tick)
        self.enemy_bullet_timer = Timer(self.move_enemy_bullets)

    @property
    def timers(self) -> tuple[Timer, ...]:
        return (
            self.background_timer,
            self.plane_timer,
            self.player_bullet_timer,
            self.enemy_spawn_timer,
            self.enemy_move_timer,
            self.enemy_shoot_timer,
            self.enemy_bullet_timer,
        )

    # --- input -----------------------------------------------------------

    def _start(self) -> None:
        self.started = True
        self.score = 0
        self.scene = Scene.GAME
        self.background_timer.start(BACKGROUND_INTERVAL_MS)
        self.plane_timer.start(PLANE_INTERVAL_MS)
        self.player_bullet_timer.start(PLAYER_BULLET_INTERVAL_MS)
        self.enemy_spawn_timer.start(ENEMY_SPAWN_INTERVAL_MS)
        self.enemy_move_timer.start(ENEMY_MOVE_INTERVAL_MS)
        self.enemy_shoot_timer.start(ENEMY_SHOOT_INTERVAL_MS)
        self.enemy_bullet_timer.start(ENEMY_BULLET_INTERVAL_MS)
        self.start_time_ms = self.clock_ms

    def press_key(self, key: Key) -> None:
        """Handle a key press; the first press of any key starts the game."""
        if not self.started:
            self._start()
            return
        if key.is_control:
            self.keys.append(key)
        self._clamp_plane()

    def _clamp_plane(self) -> None:
        plane = self.plane
        if plane.x < 0:
            plane.x = 0
        if plane.y < -EDGE_MARGIN:
            plane.y = -EDGE_MARGIN
        right = self.width // 2 - plane.width
        if plane.x > right:
            plane.x = right
        bottom = self.height - plane.height + EDGE_MARGIN
        if plane.y > bottom:
            plane.y = bottom

    def release_key(self, key: Key) -> None:
        """Forget one held instance of the key, if any."""
        if key in self.keys:
            self.keys.remove(key)

    # --- time ------------------------------------------------------------

    def advance(self, elapsed_ms: float) -> None:
        """Let simulated time pass, running every timer in millisecond steps."""
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time cannot be negative, got {elapsed_ms}")
        remaining = float(elapsed_ms)
        while remaining > 0:
            step = min(1.0, remaining)
            remaining -= step
            self.clock_ms += step
            self.plane.update(step)
            for timer in self.timers:
                timer.advance(step)
            for explosion in self.explosions:
                explosion.advance(step)
            self.explosions = [e for e in self.explosions if not e.finished]

    # --- behaviour -------------------------------------------------------

    def scroll_background(self) -> None:
        """Scroll both backgrounds left, wrapping one round when it leaves."""
        first, second = self.backgrounds
        first.move_by(-BACKGROUND_STEP, 0)
        second.move_by(-BACKGROUND_STEP, 0)
        if first.x <= -self.width:
            first.x = self.width
        elif second.x <= -self.width:
            second.x = self.width

    def plane_step(self) -> None:
        """Apply every held key once: steer, and fire when the gun is ready."""
        speed = self.plane.move_speed
        for key in list(self.keys):
            if key is Key.W:
                self.plane.move_by(0, -speed)
            elif key is Key.S:
                self.plane.move_by(0, speed)
            elif key is Key.A:
                self.plane.move_by(-speed, 0)
            elif key is Key.D:
                self.plane.move_by(speed, 0)
            elif key is Key.SPACE and self.plane.can_shoot:
                self.plane_shoot()
                self.plane.start_cooldown()

    def plane_shoot(self) -> Bullet:
        """Fire a player bullet from the plane's muzzle."""
        width, height = self.bullet_size
        bullet = Bullet(
            x=int(self.plane.x + MUZZLE_OFFSET[0]),
            y=int(self.plane.y + MUZZLE_OFFSET[1]),
            width=width,
            height=height,
            kind=BulletKind.PLAYER,
        )
        self.player_bullets.append(bullet)
        return bullet

    def spawn_enemy(self) -> Enemy:
        """Create an enemy at the right edge at a random height."""
        width, height = self.enemy_size
        y = self.rng.randrange(self.height) - height
        enemy = Enemy(x=self.width, y=y, width=width, height=height)
        self.enemies.append(enemy)
        return enemy

    def enemy_shoot(self, enemy: Enemy) -> Bullet:
        """Fire an enemy bullet from the enemy's position."""
        width, height = self.enemy_bullet_size
        bullet = Bullet(
            x=int(enemy.x),
            y=int(enemy.y),
            width=width,
            height=height,
            kind=BulletKind.ENEMY,
        )
        self.enemy_bullets.append(bullet)
        return bullet

    def _enemy_shoot_tick(self) -> None:
        for enemy in list(self.enemies):
            self.enemy_shoot(enemy)

    def move_player_bullets(self) -> None:
        """Move player bullets right, dropping those past the right edge."""
        for bullet in self.player_bullets:
            bullet.move()
        self.player_bullets = [b for b in self.player_bullets if b.x < self.width]

    def _player_bullet_tick(self) -> None:
        self.move_player_bullets()
        self.resolve_collisions()
        self.check_player_hit()

    def move_enemies(self) -> None:
        """Move enemies left, dropping those that reached the left edge."""
        for enemy in self.enemies:
            enemy.move()
        self.enemies = [e for e in self.enemies if e.x > 0]

    def move_enemy_bullets(self) -> None:
        """Move enemy bullets left, dropping any at or past the right edge."""
        for bullet in self.enemy_bullets:
            bullet.enemy_move()
        self.enemy_bullets = [b for b in self.enemy_bullets if b.x < self.width]

    def play_explosion(self, position: Iterable[float]) -> Explosion:
        """Start an explosion animation just above the given point."""
        x, y = position
        explosion = Explosion(x, y + EXPLOSION_Y_OFFSET)
        self.explosions.append(explosion)
        return explosion

    def resolve_collisions(self) -> int:
        """Destroy enemies hit by player bullets; return the points scored."""
        hit_bullets: list[Bullet] = []
        hit_enemies: list[Enemy] = []
        scored = 0
        for bullet in self.player_bullets:
            enemy = next((e for e in self.enemies if bullet.collides_with(e)), None)
            if enemy is None:
                continue
            self.play_explosion((_round_half_away(enemy.x), _round_half_away(enemy.y)))
            self.score += 1
            scored += 1
            hit_bullets.append(bullet)
            hit_enemies.append(enemy)
        self.player_bullets = [
            b for b in self.player_bullets if not any(b is h for h in hit_bullets)
        ]
        self.enemies = [e for e in self.enemies if not any(e is h for h in hit_enemies)]
        return scored

    def check_player_hit(self) -> bool:
        """End the game if any enemy bullet touches the plane."""
        if any(bullet.collides_with(self.plane) for bullet in self.enemy_bullets):
            self.play_explosion(
                (_round_half_away(self.plane.x), _round_half_away(self.plane.y))
            )
            self.end_game()
            return True
        return False

    def end_game(self) -> None:
        """Stop play and switch to the game-over screen."""
        for timer in (
            self.background_timer,
            self.plane_timer,
            self.player_bullet_timer,
            self.enemy_shoot_timer,
            self.enemy_bullet_timer,
        ):
            timer.stop()
        self.end_seconds = int((self.clock_ms - self.start_time_ms) // 1000)
        self.scene = Scene.END

    # --- text ------------------------------------------------------------

    def score_text(self) -> str:
        """The in-game score caption."""
        return f"Score: {self.score}"

    def game_over_text(self) -> str:
        """The game-over caption with score and seconds played."""
        if self.end_seconds is None:
            raise RuntimeError("the game is not over")
        return f"Game Over\nScore: {self.score}\nTime: {self.end_seconds}s"