"""Window, artwork and main loop that put the game on screen."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from pathlib import Path

import pygame

from .engine import EXPLOSION_FRAMES, SCREEN_HEIGHT, SCREEN_WIDTH, Key, Scene
from .entities import Sprite
from .game import Game

TITLE = "AetherWar"
FPS = 60
KEY_REPEAT_DELAY_MS = 500
KEY_REPEAT_INTERVAL_MS = 30

COVER_FILE = "cover.png"
BACKGROUND_FILE = "background.png"
PLANE_FILE = "jetthing2.png"
BULLET_FILE = "bullet.png"
ENEMY_BULLET_FILE = "bullet_1.png"
ENEMY_FILE = "enemy_2.png"

SCORE_POS = (0, 0)
SCORE_FONT_SIZE = 28
GAME_OVER_POS = (400, 100)
GAME_OVER_FONT_SIZE = 42
EXIT_BUTTON_RECT = (400, 320, 180, 40)
EXIT_BUTTON_COLOR = (0x69, 0x69, 0x69)
EXIT_BUTTON_LABEL = "Exit Game"
EXIT_BUTTON_FONT_SIZE = 24
TEXT_COLOR = (255, 255, 255)
CLEAR_COLOR = (0, 0, 0)

_KEY_MAP = {
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_SPACE: Key.SPACE,
}


def _solid(size: tuple[int, int], color: tuple[int, int, int]) -> pygame.Surface:
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


@dataclass(frozen=True)
class Assets:
    """The images the game draws."""

    cover: pygame.Surface
    background: pygame.Surface
    plane: pygame.Surface
    bullet: pygame.Surface
    enemy_bullet: pygame.Surface
    enemy: pygame.Surface
    explosions: tuple[pygame.Surface, ...]

    @classmethod
    def load(cls, directory: str | Path) -> Assets:
        """Load every image from a directory; a missing file raises FileNotFoundError."""
        root = Path(directory)

        def image(name: str) -> pygame.Surface:
            path = root / name
            if not path.is_file():
                raise FileNotFoundError(f"missing asset: {path}")
            return pygame.image.load(str(path))

        return cls(
            cover=image(COVER_FILE),
            background=image(BACKGROUND_FILE),
            plane=image(PLANE_FILE),
            bullet=image(BULLET_FILE),
            enemy_bullet=image(ENEMY_BULLET_FILE),
            enemy=image(ENEMY_FILE),
            explosions=tuple(image(name) for name in EXPLOSION_FRAMES),
        )

    @classmethod
    def placeholder(cls) -> Assets:
        """Plain coloured images, usable when no artwork is at hand."""
        screen = (SCREEN_WIDTH, SCREEN_HEIGHT)
        explosion_colors = ((255, 220, 0), (255, 160, 0), (230, 90, 0), (150, 40, 0))
        return cls(
            cover=_solid(screen, (20, 20, 70)),
            background=_solid(screen, (10, 30, 60)),
            plane=_solid((64, 64), (60, 200, 255)),
            bullet=_solid((32, 16), (255, 255, 120)),
            enemy_bullet=_solid((32, 16), (255, 80, 200)),
            enemy=_solid((64, 64), (220, 40, 40)),
            explosions=tuple(_solid((64, 64), color) for color in explosion_colors),
        )


class Renderer:
    """Draws the current scene of a game onto a surface."""

    def __init__(self, assets: Assets) -> None:
        self.assets = assets
        self._fonts: dict[int, pygame.font.Font] = {}
        self._scaled: dict[tuple[int, float], pygame.Surface] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def _image_for(self, image: pygame.Surface, scale: float) -> pygame.Surface:
        if scale == 1.0:
            return image
        cache_key = (id(image), scale)
        scaled = self._scaled.get(cache_key)
        if scaled is None:
            width, height = image.get_size()
            size = (max(1, round(width * scale)), max(1, round(height * scale)))
            scaled = self._scaled[cache_key] = pygame.transform.scale(image, size)
        return scaled

    def _blit_sprite(
        self, surface: pygame.Surface, image: pygame.Surface, sprite: Sprite
    ) -> None:
        surface.blit(self._image_for(image, sprite.scale), (round(sprite.x), round(sprite.y)))

    def _blit_lines(
        self, surface: pygame.Surface, text: str, pos: tuple[int, int], size: int
    ) -> None:
        font = self._font(size)
        x, y = pos
        for line in text.splitlines():
            surface.blit(font.render(line, True, TEXT_COLOR), (x, y))
            y += font.get_linesize()

    def draw(self, surface: pygame.Surface, game: Game) -> None:
        """Paint the scene the game is currently in."""
        surface.fill(CLEAR_COLOR)
        if game.scene is Scene.START:
            surface.blit(self.assets.cover, (0, 0))
        elif game.scene is Scene.GAME:
            self._draw_play(surface, game)
        else:
            self._draw_end(surface, game)

    def _draw_play(self, surface: pygame.Surface, game: Game) -> None:
        assets = self.assets
        for background in game.backgrounds:
            surface.blit(assets.background, (round(background.x), round(background.y)))
        self._blit_sprite(surface, assets.plane, game.plane)
        for bullet in game.player_bullets:
            self._blit_sprite(surface, assets.bullet, bullet)
        for enemy in game.enemies:
            self._blit_sprite(surface, assets.enemy, enemy)
        for bullet in game.enemy_bullets:
            self._blit_sprite(surface, assets.enemy_bullet, bullet)
        for explosion in game.explosions:
            image = assets.explosions[explosion.frame]
            surface.blit(image, (round(explosion.x), round(explosion.y)))
        self._blit_lines(surface, game.score_text(), SCORE_POS, SCORE_FONT_SIZE)

    def _draw_end(self, surface: pygame.Surface, game: Game) -> None:
        surface.blit(self.assets.background, (0, 0))
        if game.end_seconds is not None:
            self._blit_lines(
                surface, game.game_over_text(), GAME_OVER_POS, GAME_OVER_FONT_SIZE
            )
        button = pygame.Rect(EXIT_BUTTON_RECT)
        surface.fill(EXIT_BUTTON_COLOR, button)
        label = self._font(EXIT_BUTTON_FONT_SIZE).render(
            EXIT_BUTTON_LABEL, True, TEXT_COLOR
        )
        surface.blit(label, label.get_rect(center=button.center))


def translate_key(pygame_key: int) -> Key:
    """Map a pygame key code to the game's key."""
    return _KEY_MAP.get(pygame_key, Key.OTHER)


def parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="aetherwar", description="A side-scrolling shooter.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=None,
        help="directory holding the game images; plain shapes are used without it",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for enemy placement"
    )
    return parser.parse_args(argv)


def _new_game(assets: Assets, seed: int | None = None) -> Game:
    return Game(
        rng=random.Random(seed),
        plane_size=assets.plane.get_size(),
        enemy_size=assets.enemy.get_size(),
        bullet_size=assets.bullet.get_size(),
        enemy_bullet_size=assets.enemy_bullet.get_size(),
    )


def run(game: Game, assets: Assets) -> int:
    """Open the window and play until it is closed; returns the exit status."""
    pygame.init()
    try:
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)
        renderer = Renderer(assets)
        clock = pygame.time.Clock()
        exit_button = pygame.Rect(EXIT_BUTTON_RECT)
        held: set[int] = set()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    key = translate_key(event.key)
                    if event.key in held:
                        # An auto-repeated press replaces the held one.
                        game.release_key(key)
                    held.add(event.key)
                    game.press_key(key)
                elif event.type == pygame.KEYUP:
                    held.discard(event.key)
                    game.release_key(translate_key(event.key))
                elif (
                    event.type == pygame.MOUSEBUTTONDOWN
                    and event.button == 1
                    and game.scene is Scene.END
                    and exit_button.collidepoint(event.pos)
                ):
                    return 0
            game.advance(clock.tick(FPS))
            renderer.draw(surface, game)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game from the command line."""
    args = parse_args(argv)
    assets = Assets.load(args.assets) if args.assets is not None else Assets.placeholder()
    return run(_new_game(assets, args.seed), assets)


if __name__ == "__main__":
    raise SystemExit(main())