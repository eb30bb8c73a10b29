#!/usr/bin/env python3

import argparse
import sys
import os

# Ensure src directory is in path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Load64 - browse a local game library with keyboard or gamepad"
    )
    parser.add_argument(
        "--games-dir",
        default=None,
        help="Directory containing one sub-directory per game (overrides settings)",
    )
    parser.add_argument(
        "--start-at",
        default=None,
        metavar="GAME_ID",
        help="Select this game on startup instead of the last one viewed",
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()

    # Import and run the main application
    from app import main
    main(games_dir=args.games_dir, start_at=args.start_at)
