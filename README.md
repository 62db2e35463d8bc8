# aetherwar

A small side-scrolling shoot-'em-up. You fly a jet on the left half of a
1024×512 field while enemy planes come in from the right and fire back.
Shoot them down for points and stay out of the way of their bullets. One hit
ends the run.

## Installing

```
pip install .
```

You need Python 3.10 or later. The game uses `pygame` for its window,
drawing and input.

## Playing

```
aetherwar
```

The game opens on a cover screen. Press any key to start.

| Key     | Action                                |
|---------|---------------------------------------|
| `W`     | move up                               |
| `S`     | move down                             |
| `A`     | move left                             |
| `D`     | move right                            |
| `Space` | fire (at most once every 300 ms)      |

Keys stay active while they are held, so you can move diagonally and fire at
the same time. On every key press the plane is pulled back inside the left
half of the screen.

A new enemy appears at the right edge every two seconds at a random height,
and every enemy on screen fires a bullet every two seconds. The score sits in
the top-left corner and goes up by one for each enemy you shoot down. When an
enemy bullet hits you, the game shows a "Game Over" screen with your final
score and how many seconds you lasted. The **Exit Game** button on that
screen, or closing the window, ends the program.

### Options

```
aetherwar --assets DIR --seed N
```

- `--assets DIR` loads the images from `DIR`. It must hold `cover.png`,
  `background.png`, `jetthing2.png` (player), `enemy_2.png`, `bullet.png`
  (player bullet), `bullet_1.png` (enemy bullet) and `explosion1.png` to
  `explosion4.png`. A missing file stops the program with a
  `FileNotFoundError`. Without `--assets` the game draws plain coloured
  shapes instead.
- `--seed N` seeds the random placement of enemies, so a run can be repeated.

## Using it as a library

The game logic does not depend on a window and can be driven step by step:

```python
from aetherwar.engine import Key
from aetherwar.game import Game

game = Game()
game.press_key(Key.SPACE)      # the first key press starts the game
game.press_key(Key.D)          # hold D
game.advance(500)              # run the simulation for 500 ms
print(game.score_text())       # "Score: 0"
```

- `aetherwar.entities` holds the sprites: `Sprite`, `Player`, `Enemy`,
  `Bullet` and `BulletKind`.
- `aetherwar.engine` holds `Key`, `Scene`, the millisecond `Timer` and the
  four-frame `Explosion` animation.
- `aetherwar.game.Game` ties them together: `press_key`, `release_key` and
  `advance` drive it; `score`, `scene`, `score_text()` and
  `game_over_text()` report on it. Pass `rng=random.Random(seed)` for
  repeatable enemy placement.
- `aetherwar.app` draws a `Game` with pygame (`Renderer`, `Assets`) and feeds
  it keyboard input (`translate_key`, `run`, `main`).

## What it does not do

There is no sound, no pause, no restart after a game over (start the program
again), and scores are not saved anywhere.

## Running the tests

```
pip install ".[test]"
pytest
```