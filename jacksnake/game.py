"""The game loop: menu, play field, score display and game-over screen."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Sequence
from pathlib import Path

import pygame

from jacksnake.collision import Rect, check_self_collision, check_wall_collision
from jacksnake.food import Food
from jacksnake.obstacle import Obstacle
from jacksnake.snake import Direction, Jack

log = logging.getLogger(__name__)

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
TITLE = "Jack&5tr"
FRAME_DELAY_MS = 150
POINTS_PER_FOOD = 5
FOOD_START = (200, 200, 20)

BUTTON_RECT = Rect(100, 50, 200, 60)
DIGIT_SIZE = (20, 30)
DIGIT_ORIGIN = (10, 10)
DIGIT_ADVANCE = 22

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

_OBSTACLE_LETTERS = ("K", "I", "C", "M", "T", "H", "I2", "E", "N", "A", "dash")
_OBSTACLE_SPELLINGS = (
    ("K", "dash", "I", "C", "M"),
    ("T", "H", "I2", "E", "N", "dash", "A", "N"),
)


def _build_obstacles() -> list[Obstacle]:
    return [
        Obstacle("K-ICM", 100, 100, 20, False, 5),
        Obstacle("THIÊN-AN", 200, 200, 20, True, 5),
    ]


class GameState:
    """Everything on the play field, advanced one tick at a time."""

    def __init__(
        self,
        rng: random.Random | None = None,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height
        self.snake = Jack()
        self.food = Food(*FOOD_START)
        self.obstacles: list[Obstacle] = []
        self.score = 0
        self.reset()

    def reset(self) -> None:
        """Start a fresh round: new snake, food, obstacles and a zero score."""
        self.snake = Jack()
        self.food = Food(*FOOD_START)
        self.obstacles = _build_obstacles()
        self.score = 0

    def _hits_obstacle(self, head: Rect) -> bool:
        return any(
            head.intersects(rect) for obstacle in self.obstacles for rect in obstacle.rects
        )

    def step(self) -> bool:
        """Advance one tick; return True if the round has ended.

        When the round ends nothing else moves, so the final score and
        positions stay as they were at the moment of the crash.
        """
        self.snake.move()
        head = self.snake.head
        if (
            check_wall_collision(head, self.width, self.height)
            or check_self_collision(self.snake.body)
            or self._hits_obstacle(head)
        ):
            return True

        if head.intersects(self.food.rect):
            self.food.respawn(self.snake.body, self.rng)
            self.score += POINTS_PER_FOOD
            self.snake.grow()

        for obstacle in self.obstacles:
            obstacle.move(self.width, self.height)
        return False


class Game:
    """The window, its assets and the screens the player moves between."""

    def __init__(self, asset_dir: str | Path = "assets", rng: random.Random | None = None) -> None:
        self.asset_dir = Path(asset_dir)
        self.state = GameState(rng)
        self.running = True
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._images: dict[str, pygame.Surface] = {}
        self._letters: dict[str, pygame.Surface] = {}
        self._digits: list[pygame.Surface] = []
        self._eat_sound: pygame.mixer.Sound | None = None
        self._mixer_open = False
        self._started = False

    def __enter__(self) -> Game:
        self.init()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _load_image(self, relative: str, size: tuple[int, int] | None = None) -> pygame.Surface:
        image = pygame.image.load(str(self.asset_dir / relative)).convert_alpha()
        return pygame.transform.scale(image, size) if size else image

    def init(self) -> None:
        """Open the window and audio and load every asset.

        Raises pygame.error or OSError if anything fails; whatever was
        opened is released first.
        """
        try:
            pygame.init()
            self._started = True
            self._screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(TITLE)
            self._clock = pygame.time.Clock()
            full = (SCREEN_WIDTH, SCREEN_HEIGHT)

            self._images = {
                "head": self._load_image("images/jack.png"),
                "body": self._load_image("images/dom_dom.png"),
                "food": self._load_image("images/nam_trieu.png"),
                "background": self._load_image("images/background.png", full),
                "menu": self._load_image("images/menu.png", full),
                "button": self._load_image("images/nut.png", (BUTTON_RECT.w, BUTTON_RECT.h)),
                "game_over": self._load_image("images/thua.png", full),
            }
            self._letters = {
                name: self._load_image(f"obstacles/{name}.png") for name in _OBSTACLE_LETTERS
            }

            pygame.mixer.init(44100, -16, 2, 2048)
            self._mixer_open = True
            pygame.mixer.music.load(str(self.asset_dir / "sounds/ThienLyOi.mp3"))
            pygame.mixer.music.play(-1)
            self._eat_sound = pygame.mixer.Sound(str(self.asset_dir / "sounds/an.mp3"))

            self._digits = [
                self._load_image(f"scores/{digit}.png", DIGIT_SIZE) for digit in range(10)
            ]
        except (pygame.error, OSError):
            self.close()
            raise

        self._dress()

    def _dress(self) -> None:
        """Hand the loaded textures to the pieces of the current round."""
        state = self.state
        state.snake.head_texture = self._images.get("head")
        state.snake.body_texture = self._images.get("body")
        state.food.texture = self._images.get("food")
        for obstacle, spelling in zip(state.obstacles, _OBSTACLE_SPELLINGS):
            obstacle.textures = [self._letters[name] for name in spelling]

    def _flip(self) -> None:
        pygame.display.flip()
        if self._clock is not None:
            self._clock.tick(60)

    def _show_menu(self) -> None:
        screen = self._screen
        in_menu = True
        while in_menu:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    in_menu = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    x, y = event.pos
                    if (
                        BUTTON_RECT.x <= x <= BUTTON_RECT.x + BUTTON_RECT.w
                        and BUTTON_RECT.y <= y <= BUTTON_RECT.y + BUTTON_RECT.h
                    ):
                        in_menu = False
                elif event.type == pygame.KEYDOWN:
                    in_menu = False
            screen.fill((0, 0, 0))
            screen.blit(self._images["menu"], (0, 0))
            screen.blit(self._images["button"], (BUTTON_RECT.x, BUTTON_RECT.y))
            self._flip()

    def _show_game_over(self) -> None:
        screen = self._screen
        waiting = True
        while waiting:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    waiting = False
                elif event.type == pygame.KEYDOWN:
                    waiting = False
            screen.fill((0, 0, 0))
            screen.blit(self._images["game_over"], (0, 0))
            self._render_score()
            self._flip()

    def _render_score(self) -> None:
        x, y = DIGIT_ORIGIN
        for char in str(self.state.score):
            self._screen.blit(self._digits[int(char)], (x, y))
            x += DIGIT_ADVANCE

    def _render_field(self) -> None:
        screen = self._screen
        screen.fill((0, 0, 0))
        screen.blit(self._images["background"], (0, 0))
        self.state.snake.render(screen)
        self.state.food.render(screen)
        for obstacle in self.state.obstacles:
            obstacle.render(screen)
        self._render_score()
        pygame.display.flip()

    def run(self) -> None:
        """Play until the window is closed."""
        if self._screen is None:
            raise RuntimeError("Game.init() must succeed before run()")
        self._show_menu()
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key in _KEY_DIRECTIONS:
                    self.state.snake.turn(_KEY_DIRECTIONS[event.key])

            score_before = self.state.score
            if self.state.step():
                log.info("GAME OVER! Score: %d", self.state.score)
                self._show_game_over()
                self.state.reset()
                self._dress()
                self._show_menu()
                continue

            if self.state.score > score_before and self._eat_sound is not None:
                self._eat_sound.play()

            self._render_field()
            pygame.time.delay(FRAME_DELAY_MS)

    def close(self) -> None:
        """Release audio, assets and the window; safe to call more than once."""
        if self._mixer_open:
            pygame.mixer.music.stop()
            pygame.mixer.quit()
            self._mixer_open = False
        self._eat_sound = None
        self._images.clear()
        self._letters.clear()
        self._digits.clear()
        self._screen = None
        if self._started:
            pygame.quit()
            self._started = False


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; the window opens only if every asset loads."""
    parser = argparse.ArgumentParser(prog="jacksnake", description="Play Jack the snake.")
    parser.add_argument(
        "--assets", default="assets", help="directory holding images, sounds and scores"
    )
    args = parser.parse_args(argv)

    game = Game(args.assets)
    try:
        game.init()
    except (pygame.error, OSError) as exc:
        log.error("could not start the game: %s", exc)
        return 0
    try:
        game.run()
    finally:
        game.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())