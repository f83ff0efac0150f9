"""
Tests for snake_world.world - the tick-driven simulation engine.

The reward source is fed fixed sequences so every game here is
deterministic.
"""

import os
import random
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snake_world import (  # noqa: E402
    World,
    GameStatus,
    WorldSnapshot,
    PythonRandomSource,
    SequenceRandomSource,
    UP, DOWN, LEFT, RIGHT,
)
from players import RandomPlayer  # noqa: E402


def make_world(width=8, spawn=10, values=(0,)):
    return World(width, spawn, random_source=SequenceRandomSource(values))


def boustrophedon(width):
    """Every cell of the board as one connected path, snaking row by row."""
    path = []
    for row in range(width):
        cols = range(width) if row % 2 == 0 else reversed(range(width))
        path.extend(row * width + col for col in cols)
    return path


class TestConstruction:
    """Tests for building a World."""

    def test_initial_snake_layout(self):
        """The snake is laid out backwards from the spawn cell, facing down."""
        world = make_world()
        assert world.snake_cells == (10, 9, 8)
        assert world.snake_head == 10
        assert world.snake_length == 3
        assert world.direction is DOWN

    def test_initial_status(self):
        """A new world is waiting, with no score and nothing pending."""
        world = make_world()
        assert world.game_state is None
        assert world.game_state_text == "Waiting..."
        assert world.score == 0
        assert world.tick == 0
        assert world.pending_cell is None
        assert world.initial_length == 3
        assert world.is_over is False

    def test_dimensions(self):
        world = make_world()
        assert world.width == 8
        assert world.size == 64

    def test_reward_uses_random_source(self):
        """The initial reward comes from the injected source."""
        world = make_world(values=[42])
        assert world.reward_cell == 42

    def test_reward_skips_occupied_cells(self):
        """Draws that land on the snake are rejected until a free cell comes up."""
        source = SequenceRandomSource([10, 9, 8, 42])
        world = World(8, 10, random_source=source)
        assert world.reward_cell == 42
        assert source.draws == 4

    def test_default_random_source(self):
        """Without an injected source the reward is still placed off the snake."""
        world = World(8, 10)
        assert world.reward_cell is not None
        assert 0 <= world.reward_cell < world.size
        assert world.reward_cell not in world.snake_cells

    def test_smallest_valid_spawn(self):
        """Spawning at cell 2 fits the body exactly."""
        world = make_world(spawn=2, values=[30])
        assert world.snake_cells == (2, 1, 0)

    def test_body_may_start_across_rows(self):
        """Backward layout follows flat indices even across a row boundary."""
        world = make_world(spawn=9, values=[30])
        assert world.snake_cells == (9, 8, 7)

    @pytest.mark.parametrize("width,spawn", [
        (0, 10),    # zero width
        (-3, 10),   # negative width
        (8, 1),     # body would run below cell 0
        (8, 0),
        (8, -1),
        (8, 64),    # spawn outside the board
        (1, 0),     # board too small for snake and reward
        (1, 2),
    ])
    def test_invalid_construction_raises(self, width, spawn):
        """Bad width or spawn fails fast instead of producing wrapped indices."""
        with pytest.raises(ValueError):
            World(width, spawn, random_source=SequenceRandomSource([0]))

    def test_non_integer_arguments_raise(self):
        with pytest.raises(ValueError):
            World(8.0, 10)
        with pytest.raises(ValueError):
            World(8, "10")


class TestStep:
    """Tests for World.step()."""

    def test_first_step_starts_and_moves(self):
        """The first step starts the game and advances one cell down."""
        world = make_world()
        world.step()

        assert world.game_state is GameStatus.PLAYING
        assert world.game_state_text == "Playing"
        assert world.snake_cells == (18, 10, 9)
        assert world.tick == 1

    def test_segments_follow_their_predecessor(self):
        """Each segment takes the cell its predecessor held before the tick."""
        world = make_world()
        world.step()
        before = world.snake_cells
        world.step()
        after = world.snake_cells

        assert after[0] == 26
        assert after[1:] == before[:-1]

    def test_start_game_does_not_advance(self):
        """start_game switches to PLAYING without moving the snake."""
        world = make_world()
        world.start_game()

        assert world.game_state is GameStatus.PLAYING
        assert world.snake_cells == (10, 9, 8)
        assert world.tick == 0

        world.step()
        assert world.snake_head == 18

    def test_wraps_bottom_to_top(self):
        """Moving down off the last row re-enters on row 0."""
        world = make_world(spawn=58, values=[0])
        world.step()
        assert world.snake_head == 2

    def test_eating_grows_and_moves_reward(self):
        """Landing on the reward grows the snake by one and places a new reward."""
        world = make_world(values=[18, 30])
        assert world.reward_cell == 18

        world.step()

        assert world.snake_head == 18
        assert world.reward_cell == 30
        assert world.snake_length == 4
        assert world.score == 1
        # The new tail segment repeats the pre-tick neck until the body moves on
        assert world.snake_cells == (18, 10, 9, 9)

        world.step()
        assert world.snake_cells == (26, 18, 10, 9)

    def test_new_reward_avoids_moved_body(self):
        """The replacement reward is drawn against the body after the move."""
        source = SequenceRandomSource([18, 18, 10, 9, 40])
        world = World(8, 10, random_source=source)
        world.step()
        assert world.reward_cell == 40

    def test_reward_draw_stops_when_sequence_runs_out(self):
        """Eating the only scripted reward ends in an error, not an endless draw loop."""
        source = SequenceRandomSource([0])
        world = World(8, 10, random_source=source)
        assert world.reward_cell == 0

        world.change_direction(UP)
        world.step()
        world.change_direction(LEFT)
        world.step()
        assert world.snake_head == 1

        with pytest.raises(ValueError, match="exhausted"):
            world.step()
        assert source.draws == 1

    def test_self_collision_loses(self):
        """Turning the head into its own body ends the game."""
        world = make_world()
        world.snake.body = [9, 10, 18, 17, 16]
        world.snake.direction = LEFT

        assert world.change_direction(DOWN) is True
        world.step()

        assert world.snake_head == 17
        assert world.game_state is GameStatus.LOST
        assert world.game_state_text == "Lost"
        assert world.is_over is True

    def test_following_tail_is_safe(self):
        """The tail cell is vacated during the tick, so moving into it is fine."""
        world = make_world()
        world.snake.body = [9, 10, 18, 17]
        world.snake.direction = LEFT

        world.change_direction(DOWN)
        world.step()

        assert world.snake_cells == (17, 9, 10, 18)
        assert world.game_state is GameStatus.PLAYING

    def test_full_game_on_two_by_two_board(self):
        """A 2x2 board can be filled: eat once, then win on the last cell."""
        world = World(2, 3, random_source=SequenceRandomSource([0, 2]))
        assert world.reward_cell == 0

        world.step()
        assert world.snake_cells == (1, 3, 2)

        world.change_direction(LEFT)
        world.step()
        assert world.snake_cells == (0, 1, 3, 3)
        assert world.reward_cell == 2

        world.change_direction(DOWN)
        world.step()
        assert world.snake_cells == (2, 0, 1, 3)
        assert world.game_state is GameStatus.WON
        assert world.reward_cell is None
        assert world.score == 1

    def test_board_full_wins(self):
        """A snake covering the whole 8x8 board wins when it reaches the last reward."""
        world = make_world()
        path = boustrophedon(8)
        last_free = path[-1]
        # Head next to the last free cell; the tail repeats itself after growing
        world.snake.body = list(reversed(path[:-1])) + [path[0]]
        world.snake.direction = LEFT
        world._reward_cell = last_free
        world.start_game()

        assert world.snake_length == 64
        world.step()

        assert world.snake_head == last_free
        assert sorted(world.snake_cells) == list(range(64))
        assert world.game_state is GameStatus.WON
        assert world.game_state_text == "Won"
        assert world.reward_cell is None
        assert world.snake_length == 64

    def test_won_is_terminal(self):
        world = World(2, 3, random_source=SequenceRandomSource([0, 2]))
        world.step()
        world.change_direction(LEFT)
        world.step()
        world.change_direction(DOWN)
        world.step()
        frozen = world.get_current_state()

        for _ in range(5):
            world.step()

        assert world.get_current_state() == frozen

    def test_lost_is_terminal(self):
        """After losing, step changes neither state, body, reward nor tick."""
        world = make_world()
        world.snake.body = [9, 10, 18, 17, 16]
        world.snake.direction = LEFT
        world.change_direction(DOWN)
        world.step()
        assert world.game_state is GameStatus.LOST

        body, reward, tick = world.snake_cells, world.reward_cell, world.tick
        world.change_direction(RIGHT)
        for _ in range(5):
            world.step()

        assert world.game_state is GameStatus.LOST
        assert world.snake_cells == body
        assert world.reward_cell == reward
        assert world.tick == tick

    def test_start_game_does_not_revive_finished_game(self):
        world = make_world()
        world.snake.body = [9, 10, 18, 17, 16]
        world.snake.direction = LEFT
        world.change_direction(DOWN)
        world.step()

        world.start_game()
        assert world.game_state is GameStatus.LOST


class TestChangeDirection:
    """Tests for World.change_direction()."""

    def test_turn_is_applied_on_next_step(self):
        """An accepted turn sets the facing and is consumed by the next step."""
        world = make_world()
        assert world.change_direction(RIGHT) is True
        assert world.direction is RIGHT
        assert world.pending_cell == 11

        world.step()
        assert world.snake_head == 11
        assert world.pending_cell is None

        world.step()
        assert world.snake_head == 12

    def test_reversal_into_neck_rejected(self):
        """Turning straight back into the neck is silently ignored."""
        world = make_world()
        # Neck (9) is left of the head (10)
        assert world.change_direction(LEFT) is False
        assert world.direction is DOWN
        assert world.pending_cell is None

        world.step()
        assert world.snake_head == 18

    def test_up_then_down_keeps_up(self):
        """On an upward snake, UP then DOWN before a tick leaves the UP turn pending."""
        world = make_world()
        world.change_direction(UP)
        world.step()
        assert world.snake_cells == (2, 10, 9)
        assert world.direction is UP

        assert world.change_direction(UP) is True
        assert world.change_direction(DOWN) is False
        assert world.direction is UP
        assert world.pending_cell == 58

        world.step()
        assert world.snake_head == 58

    def test_later_turn_replaces_pending_one(self):
        """The mailbox holds one turn; a second accepted turn overwrites it."""
        world = make_world()
        world.change_direction(RIGHT)
        world.change_direction(UP)

        assert world.pending_cell == 2
        world.step()
        assert world.snake_head == 2

    def test_accepts_direction_names(self):
        world = make_world()
        assert world.change_direction("right") is True
        assert world.direction is RIGHT

    def test_unknown_direction_raises(self):
        world = make_world()
        with pytest.raises(ValueError):
            world.change_direction("NORTH")

    def test_pending_never_equals_neck(self):
        """No sequence of turns installs the neck as the next head."""
        world = World(8, 10, random_source=PythonRandomSource(3))
        rng = random.Random(3)
        for _ in range(50):
            world.change_direction(rng.choice([UP, DOWN, LEFT, RIGHT]))
            if world.pending_cell is not None:
                assert world.pending_cell != world.snake_cells[1]
            if rng.random() < 0.5:
                world.step()
            if world.is_over:
                break


class TestInvariants:
    """Properties that hold over whole random games."""

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_random_games_keep_invariants(self, seed):
        world = World(6, 20, random_source=PythonRandomSource(seed))
        player = RandomPlayer(random.Random(seed))
        previous_length = world.snake_length

        for _ in range(400):
            world.change_direction(player.get_move(world.get_current_state()))
            world.step()

            assert world.snake_length >= previous_length
            previous_length = world.snake_length
            assert world.score == world.snake_length - world.initial_length >= 0
            if world.reward_cell is not None:
                assert world.reward_cell not in world.snake_cells
            if world.is_over:
                break

    def test_snapshot_is_detached_from_world(self):
        """A snapshot does not change when the world moves on."""
        world = make_world()
        snapshot = world.get_current_state()
        world.step()

        assert isinstance(snapshot, WorldSnapshot)
        assert snapshot.snake_cells == (10, 9, 8)
        assert snapshot.tick == 0
        assert snapshot.game_state is None

    def test_repr(self):
        world = make_world()
        assert "8x8" in repr(world)
        assert "Waiting..." in repr(world)
