"""Entry point: python -m tilt_maze"""

import argparse
import logging

from tilt_maze.config import CELL_SIZE, MAZE_HEIGHT, MAZE_WIDTH, GameConfig


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tilt Maze - turn the maze to roll the ball to the exit",
        epilog="Controls: LEFT/RIGHT turn the maze, R restarts, Q quits",
    )

    maze_group = parser.add_argument_group('Maze Options')
    maze_group.add_argument("--width", type=int, default=MAZE_WIDTH,
                            help=f"Maze width in cells, odd and at least 5 (default: {MAZE_WIDTH})")
    maze_group.add_argument("--height", type=int, default=MAZE_HEIGHT,
                            help=f"Maze height in cells, odd and at least 5 (default: {MAZE_HEIGHT})")
    maze_group.add_argument("--cell-size", type=int, default=CELL_SIZE,
                            help=f"Cell size in pixels (default: {CELL_SIZE})")
    maze_group.add_argument("--seed", type=int, default=None,
                            help="Random seed for a reproducible maze")

    display_group = parser.add_argument_group('Display Options')
    display_group.add_argument("--fullscreen", action="store_true", help="Run full screen")
    display_group.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    return parser


def main(argv=None):
    """Entry point"""
    args = create_argument_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = GameConfig.from_args(args)

    # pygame is only needed once we actually open a window
    from tilt_maze.game import Game
    game = Game(config, fullscreen=args.fullscreen)
    game.run()


if __name__ == "__main__":
    main()
