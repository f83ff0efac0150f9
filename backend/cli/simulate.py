#!/usr/bin/env python3
"""
Run a headless snake game from the command line

Drives a World tick by tick with a player deciding the turns, the same
loop a graphical front end would run, and prints a JSON summary at the end.

Usage:
    python simulate.py
    python simulate.py --width 10 --seed 7 --show-board
    python simulate.py --moves "RRDD-L" --max-ticks 20

Environment (or .env):
    SNAKE_WIDTH, SNAKE_SPAWN, SNAKE_SEED, SNAKE_FPS, SNAKE_MAX_TICKS, LOG_LEVEL
"""

import os
import sys
import json
import time
import random
import argparse
import logging
from typing import Any, Callable, Dict, List, Optional

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cli.settings import SimulationSettings, load_settings  # noqa: E402
from snake_world import World, PythonRandomSource, INITIAL_LENGTH  # noqa: E402
from players import Player, RandomPlayer, ScriptedPlayer  # noqa: E402

logger = logging.getLogger(__name__)


def run_simulation(
    world: World,
    player: Player,
    max_ticks: int,
    fps: float = 0,
    show_board: bool = False,
    sleep: Callable[[float], None] = time.sleep,
) -> Dict[str, Any]:
    """
    Run the tick loop until the game ends or max_ticks is reached.

    Args:
        world: The world to drive
        player: Decides the turn before every tick
        max_ticks: Upper limit on ticks played
        fps: Ticks per second; 0 runs without pausing
        show_board: Print the board after every tick
        sleep: Called with the frame delay between ticks

    Returns:
        A dictionary summarising the game (ticks, score, game_state, snake_length, final_state).
    """
    world.start_game()
    delay = 1.0 / fps if fps > 0 else 0.0

    if show_board:
        print("\n" + world.get_current_state().print_board() + "\n")

    while not world.is_over and world.tick < max_ticks:
        move = player.get_move(world.get_current_state())
        if move is not None:
            world.change_direction(move)

        world.step()

        if show_board:
            print(f"Tick {world.tick} | Score {world.score} | {world.game_state_text}")
            print(world.get_current_state().print_board() + "\n")

        if delay:
            sleep(delay)

    if not world.is_over:
        logger.info(f"Stopped after {world.tick} ticks without a result.")

    final_state = world.get_current_state()
    return {
        "ticks": world.tick,
        "score": world.score,
        "game_state": world.game_state_text,
        "snake_length": world.snake_length,
        "final_state": final_state.to_dict(),
    }


def build_parser(defaults) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Run a headless snake game on a wrapping grid',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--width', type=int, default=defaults.width,
                        help=f'Cells per row and column (default: {defaults.width})')
    parser.add_argument('--spawn', type=int, default=defaults.spawn_index,
                        help='Spawn cell of the snake head (default: random)')
    parser.add_argument('--seed', type=int, default=defaults.seed,
                        help='Seed for reward placement and the random player')
    parser.add_argument('--max-ticks', type=int, default=defaults.max_ticks,
                        help=f'Maximum number of ticks (default: {defaults.max_ticks})')
    parser.add_argument('--fps', type=float, default=defaults.fps,
                        help='Ticks per second, 0 for no delay')
    parser.add_argument('--moves', type=str, default=None,
                        help='Scripted moves, e.g. "RRDD-L" or "RIGHT,DOWN" (default: random player)')
    parser.add_argument('--show-board', action='store_true',
                        help='Print the board after every tick')
    return parser


def main(argv: Optional[List[str]] = None):
    try:
        settings = load_settings()
    except ValueError as e:
        build_parser(SimulationSettings()).error(str(e))
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Spawn and player draws use their own stream, apart from reward placement
    rng = random.Random(args.seed + 1 if args.seed is not None else None)
    spawn = args.spawn
    if spawn is None and args.width > 0:
        spawn = rng.randrange(INITIAL_LENGTH - 1, max(args.width * args.width, INITIAL_LENGTH))

    try:
        world = World(args.width, spawn, random_source=PythonRandomSource(args.seed))
    except ValueError as e:
        parser.error(str(e))

    if args.moves:
        try:
            player = ScriptedPlayer.from_script(args.moves)
        except ValueError as e:
            parser.error(str(e))
    else:
        player = RandomPlayer(rng)

    logger.info(f"Starting game: {world!r}")
    result = run_simulation(
        world,
        player,
        max_ticks=args.max_ticks,
        fps=args.fps,
        show_board=args.show_board,
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
