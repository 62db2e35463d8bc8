"""Simulation plumbing: keys, scenes, millisecond timers and explosion animations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 512

BACKGROUND_INTERVAL_MS = 10
PLANE_INTERVAL_MS = 7
PLAYER_BULLET_INTERVAL_MS = 3
ENEMY_SPAWN_INTERVAL_MS = 2000
ENEMY_MOVE_INTERVAL_MS = 15
ENEMY_SHOOT_INTERVAL_MS = 2000
ENEMY_BULLET_INTERVAL_MS = 10

EXPLOSION_FRAME_MS = 80
EXPLOSION_FRAMES = (
    "explosion1.png",
    "explosion2.png",
    "explosion3.png",
    "explosion4.png",
)
EXPLOSION_Y_OFFSET = -20


class Key(Enum):
    """Keys the game reacts to; anything else is OTHER."""

    W = "w"
    S = "s"
    A = "a"
    D = "d"
    SPACE = "space"
    OTHER = "other"

    @property
    def is_control(self) -> bool:
        """True for keys that steer or fire the plane."""
        return self is not Key.OTHER


class Scene(Enum):
    """Which screen is shown."""

    START = "start"
    GAME = "game"
    END = "end"


@dataclass
class Timer:
    """A repeating or single-shot timer driven by simulated elapsed time."""

    callback: Callable[[], object]
    interval_ms: float = 0.0
    single_shot: bool = False
    active: bool = field(default=False, init=False)
    _elapsed: float = field(default=0.0, init=False, repr=False)

    def start(self, interval_ms: float | None = None) -> None:
        """Start or restart the countdown, optionally with a new interval."""
        if interval_ms is not None:
            self.interval_ms = interval_ms
        if self.interval_ms <= 0:
            raise ValueError(f"timer interval must be positive, got {self.interval_ms}")
        self.active = True
        self._elapsed = 0.0

    def stop(self) -> None:
        """Stop the timer; pending time is discarded."""
        self.active = False
        self._elapsed = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Let time pass, firing the callback once per full interval.

        Returns how many times the callback fired.
        """
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time cannot be negative, got {elapsed_ms}")
        if not self.active:
            return 0
        self._elapsed += elapsed_ms
        fired = 0
        while self.active and self._elapsed >= self.interval_ms:
            self._elapsed -= self.interval_ms
            if self.single_shot:
                self.active = False
                self._elapsed = 0.0
            fired += 1
            self.callback()
        return fired


@dataclass
class Explosion:
    """A four-frame explosion shown at a fixed spot, one frame every 80 ms."""

    x: float
    y: float
    frame: int = field(default=0, init=False)
    finished: bool = field(default=False, init=False)
    _timer: Timer = field(init=False, repr=False)
    _next_frame: int = field(default=1, init=False, repr=False)

    def __post_init__(self) -> None:
        self._timer = Timer(self._tick, EXPLOSION_FRAME_MS)
        self._timer.start()

    @property
    def image(self) -> str:
        """Name of the frame image currently shown."""
        return EXPLOSION_FRAMES[self.frame]

    def _tick(self) -> None:
        if self._next_frame < len(EXPLOSION_FRAMES):
            self.frame = self._next_frame
            self._next_frame += 1
        else:
            self._timer.stop()
            self.finished = True

    def advance(self, elapsed_ms: float) -> None:
        """Let time pass, stepping through frames until the animation ends."""
        self._timer.advance(elapsed_ms)