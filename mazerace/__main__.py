"""Main entry point for Maze Race."""

import argparse
import logging
import os
import sys


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Race a computer opponent through a maze")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible mazes")
    parser.add_argument("--rows", type=int, default=21)
    parser.add_argument("--cols", type=int, default=21)
    parser.add_argument("--carve-chance", type=float, default=0.16,
                        help="Probability of extra loop-making openings")
    parser.add_argument("--leaderboard-url", default=None,
                        help="Leaderboard service URL (default: $MAZERACE_LEADERBOARD_URL "
                             "or http://localhost:5000/leaderboard)")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the application."""
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Set environment variables to fix DPI scaling issues on macOS
    os.environ.setdefault('QT_AUTO_SCREEN_SCALE_FACTOR', '0')
    os.environ.setdefault('QT_SCALE_FACTOR', '1')

    from PySide6.QtWidgets import QApplication

    from .app.config import RaceConfig
    from .app.controller import RaceController
    from .domain.types import MazeConfig
    from .leaderboard.client import LeaderboardClient, LocalLeaderboard
    from .utils.rng import SeededRNG

    try:
        maze_config = MazeConfig(rows=args.rows, cols=args.cols, carve_chance=args.carve_chance)
        race_config = RaceConfig.from_env(leaderboard_url=args.leaderboard_url)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Maze Race")
    app.setApplicationVersion("1.0.0")

    # Import UI components (after QApplication is created)
    from .ui.main_window import MainWindow

    leaderboard = LeaderboardClient(
        race_config.leaderboard_url,
        local=LocalLeaderboard(race_config.leaderboard_path),
    )

    controller = None
    try:
        controller = RaceController(
            maze_config=maze_config,
            race_config=race_config,
            rng=SeededRNG(args.seed),
            leaderboard=leaderboard,
        )
        window = MainWindow(controller)
        window.show()
        return app.exec()

    except Exception as e:
        print(f"Application error: {e}")
        return 1

    finally:
        if controller is not None:
            controller.shutdown()


if __name__ == "__main__":
    sys.exit(main())
