"""
World - the simulation engine.

Owns the snake, the reward cell and the game state, and advances them one
tick at a time. A driver calls ``step()`` once per tick and
``change_direction()`` whenever input arrives; everything else is read-only
introspection for rendering.
"""

import logging
from typing import Optional, Tuple, Union

from .constants import Direction, GameStatus, INITIAL_LENGTH
from .game_state import WorldSnapshot, status_text
from .grid import next_cell
from .random_source import PythonRandomSource, RandomSource
from .snake import Snake

logger = logging.getLogger(__name__)


def coerce_direction(direction: Union[Direction, str]) -> Direction:
    """Accept a Direction or its name (any case)."""
    if isinstance(direction, Direction):
        return direction
    try:
        return Direction(str(direction).strip().upper())
    except ValueError:
        valid = ", ".join(d.value for d in Direction)
        raise ValueError(f"Unknown direction {direction!r}. Valid directions: {valid}") from None


class World:
    """
    A ``width x width`` board with a single snake on it.

    The state machine only moves forward: ``None -> PLAYING -> WON | LOST``.
    Once terminal, ``step()`` is a no-op.
    """

    def __init__(
        self,
        width: int,
        spawn_index: int,
        random_source: Optional[RandomSource] = None,
    ):
        self._validate(width, spawn_index)

        self._width = width
        self._size = width * width
        self._initial_length = INITIAL_LENGTH
        self._random = random_source or PythonRandomSource()

        self.snake = Snake.spawn(spawn_index, self._initial_length)
        self._pending_cell: Optional[int] = None
        self._game_state: Optional[GameStatus] = None
        self._tick = 0
        self._reward_cell: Optional[int] = self._gen_reward_cell()

        logger.debug(
            f"Created {width}x{width} world, snake at {self.snake.body}, reward at {self._reward_cell}"
        )

    @staticmethod
    def _validate(width: int, spawn_index: int) -> None:
        if not isinstance(width, int) or width < 1:
            raise ValueError(f"Width must be a positive integer, got {width!r}.")
        if not isinstance(spawn_index, int):
            raise ValueError(f"Spawn index must be an integer, got {spawn_index!r}.")

        size = width * width
        if size <= INITIAL_LENGTH:
            raise ValueError(
                f"A {width}x{width} board has no room for a snake of length "
                f"{INITIAL_LENGTH} and a reward."
            )
        if spawn_index < INITIAL_LENGTH - 1:
            raise ValueError(
                f"Spawn index {spawn_index} is too small: the snake is laid out "
                f"backwards and needs spawn_index >= {INITIAL_LENGTH - 1}."
            )
        if spawn_index >= size:
            raise ValueError(f"Spawn index {spawn_index} is outside the board (size {size}).")

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def size(self) -> int:
        return self._size

    @property
    def initial_length(self) -> int:
        return self._initial_length

    @property
    def reward_cell(self) -> Optional[int]:
        return self._reward_cell

    @property
    def game_state(self) -> Optional[GameStatus]:
        return self._game_state

    @property
    def game_state_text(self) -> str:
        return status_text(self._game_state)

    @property
    def is_over(self) -> bool:
        return self._game_state in (GameStatus.WON, GameStatus.LOST)

    @property
    def score(self) -> int:
        return self.snake_length - self._initial_length

    @property
    def snake_head(self) -> int:
        return self.snake.head

    @property
    def snake_length(self) -> int:
        return len(self.snake.body)

    @property
    def snake_cells(self) -> Tuple[int, ...]:
        return tuple(self.snake.body)

    @property
    def direction(self) -> Direction:
        return self.snake.direction

    @property
    def pending_cell(self) -> Optional[int]:
        return self._pending_cell

    @property
    def tick(self) -> int:
        return self._tick

    def get_current_state(self) -> WorldSnapshot:
        """
        Return a snapshot of the current world as a WorldSnapshot.
        """
        return WorldSnapshot(
            tick=self._tick,
            width=self._width,
            size=self._size,
            snake_cells=self.snake_cells,
            direction=self.snake.direction,
            reward_cell=self._reward_cell,
            game_state=self._game_state,
            score=self.score,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start_game(self) -> None:
        """Mark the game as playing without advancing it."""
        if self._game_state is None:
            self._game_state = GameStatus.PLAYING
            logger.info("Game started")

    def change_direction(self, direction: Union[Direction, str]) -> bool:
        """
        Turn the snake for the next tick.

        The next head cell is computed now and handed to the next ``step()``,
        so a turn is applied exactly once. A turn whose next cell is the
        neck (a 180 degree reversal) is ignored.

        Returns:
            True if the turn was accepted, False if it was rejected.
        """
        direction = coerce_direction(direction)
        candidate = self._next_cell(direction)

        if candidate == self.snake.neck:
            logger.debug(f"Rejected turn {direction.value}: cell {candidate} is the snake's neck")
            return False

        self._pending_cell = candidate
        self.snake.direction = direction
        return True

    def step(self) -> None:
        """
        Advance the world by one tick:
          1) Start the game if it has not started yet
          2) Do nothing if it is already won or lost
          3) Move the head and shift every segment into its predecessor's cell
          4) Check self-collision on the shifted body
          5) Eat the reward: grow and place a new one, or win on a full board
        """
        if self._game_state is None:
            self.start_game()
        elif self._game_state is not GameStatus.PLAYING:
            return

        self._play_step()

    def _play_step(self) -> None:
        body = self.snake.body
        previous = list(body)

        if self._pending_cell is not None:
            body[0] = self._pending_cell
            self._pending_cell = None
        else:
            body[0] = self._next_cell(self.snake.direction)

        for i in range(1, len(body)):
            body[i] = previous[i - 1]

        self._tick += 1
        head = body[0]

        if head in body[1:]:
            self._game_state = GameStatus.LOST
            logger.info(f"Snake ran into itself at cell {head} on tick {self._tick}. Score: {self.score}")

        if self._reward_cell is not None and head == self._reward_cell:
            if len(body) < self._size:
                self._reward_cell = self._gen_reward_cell()
                body.append(previous[1])
                logger.debug(f"Reward eaten at {head}, new reward at {self._reward_cell}")
            else:
                self._game_state = GameStatus.WON
                self._reward_cell = None
                logger.info(f"Board filled on tick {self._tick}. Score: {self.score}")

    def _next_cell(self, direction: Direction) -> int:
        return next_cell(direction, self.snake.head, self._width, self._size)

    def _gen_reward_cell(self) -> int:
        """
        Return a random cell not occupied by the snake.
        We'll do a simple loop to find one.
        """
        while True:
            cell = self._random.draw_uniform(self._size)
            if cell not in self.snake.body:
                return cell

    def __repr__(self):
        return (
            f"<World {self._width}x{self._width}, tick={self._tick}, "
            f"length={self.snake_length}, reward={self._reward_cell}, "
            f"state={self.game_state_text}>"
        )
