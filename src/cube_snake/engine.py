"""Tick engine and the headless game driver built on it."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from cube_snake.config import GameConfig
from cube_snake.fruit import FruitSpawner
from cube_snake.grid import CellType, Cube, GridBounds, GridPoint
from cube_snake.heading import Heading
from cube_snake.snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    """Cells changed by one tick. ``vacated`` is None on a feeding tick."""

    occupied: GridPoint
    vacated: GridPoint | None = None


def tick(snake: Snake, did_eat: bool = False) -> TickResult:
    """Advance *snake* by one cell.

    Running into its own body (tail included) marks the snake bitten but
    the move still happens; the caller decides what a bite means. Bounds
    are not checked here either.
    """
    next_head = snake.next_head()
    if snake.occupies(next_head):
        snake.mark_bitten()
    snake.grow_head(next_head)
    vacated = None if did_eat else snake.shrink_tail()
    return TickResult(occupied=next_head, vacated=vacated)


def create_snake(
    bounds: GridBounds, rng: np.random.Generator | None = None,
) -> Snake:
    return Snake.spawn(bounds, rng)


def turn(snake: Snake, command: Heading) -> Heading:
    return snake.turn(command)


def turn_absolute(snake: Snake, heading: Heading) -> None:
    snake.set_heading(heading)


def is_bitten(snake: Snake) -> bool:
    return snake.bitten


def is_out_of_bounds(snake: Snake, bounds: GridBounds) -> bool:
    """Check whether the snake's head has left the cube."""
    return not bounds.in_bounds(snake.head)


class GameEngine:
    """Step-based cube snake game for one to four independent snakes.

    The engine owns the cube surface, the snakes and the fruit. It never
    reads a clock: callers either invoke :meth:`step` directly or feed
    elapsed milliseconds to :meth:`advance`.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self.bounds = GridBounds(self.config.size)
        self.cube = Cube(self.bounds)
        self.rng = np.random.default_rng(self.config.seed)
        self.fruit = FruitSpawner(self.cube, rng=self.rng)
        self.snakes: list[Snake] = []
        self.alive: list[bool] = []
        self.tick = 0
        self.paused = False
        self.game_over = True
        self._elapsed_ms = 0.0
        self.new_game()

    def new_game(self) -> None:
        """Discard the current snakes and start over."""
        self.cube.clear()
        self.fruit.position = None
        self.snakes = []
        for _ in range(self.config.player_count):
            snake = create_snake(self.bounds, self.rng)
            for point in snake:
                self.cube.switch_on(point)
            self.snakes.append(snake)
        self.alive = [True] * len(self.snakes)
        self.fruit.spawn()
        self.tick = 0
        self._elapsed_ms = 0.0
        self.paused = False
        self.game_over = False
        logger.info(
            "New game on a cube of size %d with %d snake(s).",
            self.bounds.size,
            len(self.snakes),
        )

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def turn(self, player: int, command: Heading) -> Heading | None:
        """Relay a relative command to a player's snake.

        Returns the new heading, or None when the input was ignored.
        """
        snake = self._player_snake(player)
        if snake is None:
            return None
        return turn(snake, command)

    def turn_absolute(self, player: int, heading: Heading) -> None:
        """Relay an absolute heading to a player's snake."""
        snake = self._player_snake(player)
        if snake is not None:
            turn_absolute(snake, heading)

    def advance(self, elapsed_ms: float) -> bool:
        """Accumulate elapsed time and step once the tick interval has passed.

        Returns True if a step was taken.
        """
        if self.paused or self.game_over:
            return False
        self._elapsed_ms += elapsed_ms
        if self._elapsed_ms <= self.config.tick_interval_ms:
            return False
        self.step()
        self._elapsed_ms = 0.0
        return True

    def step(self) -> dict:
        """Advance every live snake by one tick.

        Returns the full game state as a serializable dict.
        """
        if self.paused or self.game_over:
            return self.get_state()

        for sid, snake in enumerate(self.snakes):
            if not self.alive[sid]:
                continue

            feeding = snake.next_head() == self.fruit.position
            result = tick(snake, did_eat=feeding)

            if is_out_of_bounds(snake, self.bounds) or is_bitten(snake):
                self._kill_snake(sid, result)
                continue

            self.cube.switch_on(result.occupied)
            if feeding:
                self.fruit.spawn()
            if result.vacated is not None:
                self._release(result.vacated)

        self.tick += 1
        logger.debug("Tick %d complete.", self.tick)
        if not any(self.alive):
            self.game_over = True
            logger.info("Game over at tick %d.", self.tick)
        return self.get_state()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "paused": self.paused,
            "game_over": self.game_over,
            "snakes": [s.to_dict() for s in self.snakes],
            "alive": list(self.alive),
            "fruit": self.fruit.to_dict(),
            "cube": self.cube.to_dict(),
        }

    def _player_snake(self, player: int) -> Snake | None:
        if not 0 <= player < len(self.snakes):
            raise ValueError(
                f"player {player} out of range [0, {len(self.snakes)})."
            )
        if self.game_over or not self.alive[player]:
            return None
        return self.snakes[player]

    def _release(self, point: GridPoint) -> None:
        """Switch a vacated cell off unless something else still lights it."""
        if self.cube.get(point) != CellType.SNAKE:
            return
        if any(s.occupies(point) for s in self.snakes):
            return
        self.cube.switch_off(point)

    def _kill_snake(self, sid: int, result: TickResult) -> None:
        """Mark a snake as dead; its body stays lit where it stopped.

        The fatal move has already been applied to the body, so the cube is
        brought in line with it: in-bounds segments lit, the vacated tail
        released.
        """
        self.alive[sid] = False
        snake = self.snakes[sid]
        for point in snake:
            if self.bounds.in_bounds(point):
                self.cube.switch_on(point)
        if result.vacated is not None:
            self._release(result.vacated)
        cause = "bit itself" if snake.bitten else "left the cube"
        logger.info(
            "Snake %d %s at tick %d with length %d.",
            sid,
            cause,
            self.tick + 1,
            len(snake),
        )
