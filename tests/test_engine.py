import pytest

from aetherwar.engine import (
    EXPLOSION_FRAME_MS,
    EXPLOSION_FRAMES,
    Explosion,
    Timer,
)


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def test_timer_inactive_until_started():
    counter = Counter()
    timer = Timer(counter, 10)
    assert timer.advance(100) == 0
    assert counter.calls == 0


def test_timer_fires_once_per_interval():
    counter = Counter()
    timer = Timer(counter)
    timer.start(10)
    assert timer.advance(35) == 3
    assert counter.calls == 3
    assert timer.advance(5) == 1
    assert counter.calls == 4


def test_timer_accumulates_partial_time():
    counter = Counter()
    timer = Timer(counter)
    timer.start(10)
    for _ in range(9):
        timer.advance(1)
    assert counter.calls == 0
    timer.advance(1)
    assert counter.calls == 1


def test_timer_stop_discards_pending_time():
    counter = Counter()
    timer = Timer(counter)
    timer.start(10)
    timer.advance(9)
    timer.stop()
    assert not timer.active
    timer.start()
    timer.advance(9)
    assert counter.calls == 0


def test_single_shot_fires_once_and_deactivates():
    counter = Counter()
    timer = Timer(counter, 300, single_shot=True)
    timer.start()
    assert timer.advance(1000) == 1
    assert not timer.active
    assert timer.advance(1000) == 0
    assert counter.calls == 1


def test_callback_stopping_timer_halts_firing():
    fired = []
    timer = Timer(lambda: (fired.append(1), timer.stop()), 10)
    timer.start()
    assert timer.advance(100) == 1
    assert fired == [1]


def test_timer_rejects_non_positive_interval():
    timer = Timer(Counter())
    with pytest.raises(ValueError):
        timer.start(0)
    with pytest.raises(ValueError):
        timer.start(-5)


def test_timer_rejects_negative_elapsed():
    timer = Timer(Counter(), 10)
    timer.start()
    with pytest.raises(ValueError):
        timer.advance(-1)


def test_explosion_starts_on_first_frame():
    explosion = Explosion(10, 20)
    assert explosion.frame == 0
    assert explosion.image == EXPLOSION_FRAMES[0]
    assert not explosion.finished


def test_explosion_steps_through_frames_then_finishes():
    explosion = Explosion(0, 0)
    for expected in range(1, len(EXPLOSION_FRAMES)):
        explosion.advance(EXPLOSION_FRAME_MS)
        assert explosion.frame == expected
        assert not explosion.finished
    explosion.advance(EXPLOSION_FRAME_MS)
    assert explosion.finished
    assert explosion.image == EXPLOSION_FRAMES[-1]


def test_explosion_ignores_time_after_finishing():
    explosion = Explosion(0, 0)
    explosion.advance(EXPLOSION_FRAME_MS * 100)
    assert explosion.finished
    frame = explosion.frame
    explosion.advance(EXPLOSION_FRAME_MS * 10)
    assert explosion.frame == frame
    assert explosion.finished


def test_explosion_waits_for_full_frame_interval():
    explosion = Explosion(0, 0)
    explosion.advance(EXPLOSION_FRAME_MS - 1)
    assert explosion.frame == 0
    explosion.advance(1)
    assert explosion.frame == 1