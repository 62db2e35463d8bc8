"""Game objects: the player's plane, enemy planes and bullets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Vector = tuple[float, float]


@dataclass
class Sprite:
    """A positioned, scalable image-sized box on the playfield."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    scale: float = 1.0

    @property
    def pos(self) -> Vector:
        return (self.x, self.y)

    def move_by(self, dx: float, dy: float) -> None:
        """Shift the sprite by the given offsets."""
        self.x += dx
        self.y += dy

    def rect(self) -> tuple[float, float, float, float]:
        """Return the scaled bounding box as (left, top, width, height)."""
        return (self.x, self.y, self.width * self.scale, self.height * self.scale)

    def collides_with(self, other: Sprite) -> bool:
        """Return True when the two bounding boxes overlap."""
        left, top, width, height = self.rect()
        o_left, o_top, o_width, o_height = other.rect()
        if width <= 0 or height <= 0 or o_width <= 0 or o_height <= 0:
            return False
        return (
            left < o_left + o_width
            and o_left < left + width
            and top < o_top + o_height
            and o_top < top + height
        )


class BulletKind(Enum):
    """Who fired a bullet."""

    PLAYER = 0
    ENEMY = 1


@dataclass
class Bullet(Sprite):
    """A projectile moving in a straight line at a fixed speed."""

    scale: float = 0.6
    kind: BulletKind = BulletKind.PLAYER
    speed: float = 2

    def move(self, direction: Vector = (1, 0)) -> None:
        """Advance one step; player bullets travel right by default."""
        dx, dy = direction
        self.move_by(dx * self.speed, dy * self.speed)

    def enemy_move(self, direction: Vector = (-1, 0)) -> None:
        """Advance one step; enemy bullets travel left by default."""
        dx, dy = direction
        self.move_by(dx * self.speed, dy * self.speed)


@dataclass
class Enemy(Sprite):
    """An enemy plane flying towards the player."""

    move_speed: float = 1.0
    shoot_speed: float = 1000.0

    def move(self, direction: Vector = (-1, 0)) -> None:
        """Advance one step; enemies travel left by default."""
        dx, dy = direction
        self.move_by(dx * self.move_speed, dy * self.move_speed)


@dataclass
class Player(Sprite):
    """The player's plane, with a single-shot firing cooldown."""

    x: float = 100.0
    y: float = 200.0
    move_speed: float = 1.0
    cooldown_ms: float = 300.0
    can_shoot: bool = True
    _cooldown_remaining: float | None = field(default=None, init=False, repr=False)

    @property
    def cooling_down(self) -> bool:
        return self._cooldown_remaining is not None

    def start_cooldown(self) -> None:
        """Block shooting and (re)start the cooldown countdown."""
        self.can_shoot = False
        self._cooldown_remaining = self.cooldown_ms

    def update(self, elapsed_ms: float) -> None:
        """Let time pass; shooting is allowed again once the cooldown ends."""
        if self._cooldown_remaining is None:
            return
        self._cooldown_remaining -= elapsed_ms
        if self._cooldown_remaining <= 0:
            self._cooldown_remaining = None
            self.can_shoot = True