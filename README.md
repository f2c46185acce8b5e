# jacksnake

A small snake arcade game. You steer Jack around a 640×480 field on a 20-pixel
grid. Each piece of food you eat scores points and makes Jack longer. You must
avoid the walls, your own body, and two words of letter tiles that slide back
and forth across the screen.

## Installing

```
pip install .
```

This installs `pygame`, the only dependency.

## Assets

The game loads its images and sounds from an asset directory. By default this
is `assets`, resolved against the current working directory. It must contain:

- `images/`: `jack.png` (head), `dom_dom.png` (body), `nam_trieu.png` (food),
  `background.png`, `menu.png`, `nut.png` (menu button), `thua.png`
  (game-over screen)
- `obstacles/`: `K.png`, `I.png`, `C.png`, `M.png`, `T.png`, `H.png`,
  `I2.png`, `E.png`, `N.png`, `A.png`, `dash.png`
- `scores/`: `0.png` to `9.png`
- `sounds/`: `ThienLyOi.mp3` (background music, looped) and `an.mp3` (eat sound)

No assets ship with the package. If a file is missing or cannot be loaded,
`jacksnake` logs the error, releases whatever it has opened, and exits without
opening the game.

## Playing

```
jacksnake
jacksnake --assets /path/to/assets
```

You can also start it with `python -m jacksnake.game`.

- At the menu, press any key or click the button to start.
- Steer with the arrow keys. Jack cannot turn straight back onto himself.
- Each piece of food adds 5 points and one body segment. The food then moves
  to a random grid cell that Jack does not cover.
- The word `K-ICM` moves up and down and the word `THIÊN-AN` moves left and
  right. Each turns back when it reaches an edge.
- The round ends when Jack's head leaves the field, touches his body, or hits a
  letter tile. The game-over screen shows the score. Press any key to return
  to the menu and start a fresh round.
- Close the window to quit.

## Using the pieces

The game logic needs no window, so you can drive it directly:

```python
import random

from jacksnake.collision import Rect, check_self_collision, check_wall_collision
from jacksnake.game import GameState
from jacksnake.snake import Direction

state = GameState(rng=random.Random(1))
state.snake.turn(Direction.DOWN)
ended = state.step()      # advance one tick; True once the round is over
print(state.score, state.snake.body[0])
state.reset()             # new snake, food and obstacles, score back to 0
```

- `jacksnake.collision`: `Rect` with `intersects()`, plus
  `check_wall_collision()` and `check_self_collision()`. Rectangles that only
  share an edge do not intersect.
- `jacksnake.snake`: `Jack` with `turn()`, `move()`, `grow()`,
  `check_self_collision()` and `render()`, and the `Direction` enum.
- `jacksnake.food`: `Food` with `respawn(snake_body, rng)` and `render()`.
- `jacksnake.obstacle`: `Obstacle`, a row or column of tiles, with `move()`
  and `render()`.
- `jacksnake.game`: `GameState` (the play field and score), `Game` (window,
  assets and screens; also usable as a context manager that calls `init()`
  and `close()`), and `main()`.

## Limitations

Scores last only for the round being played. There is no high-score table, no
pause, and no setting for speed, field size or difficulty.

## Running the tests

```
pip install ".[test]"
pytest
```