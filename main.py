"""
main.py - Entry point.

Run with:
    python main.py [--difficulty easy|normal|hard] [--history PATH]

Requires:
    pip install pygame
"""

import argparse
import logging

from gridsnake.config import DIFFICULTIES, DEFAULT_DIFFICULTY, HISTORY_PATH
from gridsnake.controller import GameController


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake game")
    parser.add_argument("--difficulty", choices=sorted(DIFFICULTIES),
                        default=DEFAULT_DIFFICULTY, help="Starting speed")
    parser.add_argument("--history", default=HISTORY_PATH,
                        help="JSON file holding the score history")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    GameController(difficulty=args.difficulty, history_path=args.history).run()


if __name__ == "__main__":
    main()
