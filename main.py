"""
Entrypoint for Lunar Lander.

- Parse command-line options into Settings
- Run the pygame game loop
"""
import argparse
from dataclasses import replace
from pathlib import Path

from lunar_lander import config as C
from lunar_lander.config import Settings
from lunar_lander.game_loop import run


def main():
    parser = argparse.ArgumentParser(description="Lunar Lander")
    parser.add_argument("--seed", type=int, default=None, help="Seed for terrain, spawn and track selection")
    parser.add_argument("--scores", type=Path, default=C.HIGH_SCORES_PATH, help="High-score JSON file")
    parser.add_argument("--no-music", action="store_true", dest="no_music", help="Disable background music")
    parser.add_argument("--debug", action="store_true", help="Draw the lander bounding box")
    args = parser.parse_args()

    settings = replace(Settings(), debug=args.debug)
    run(settings, seed=args.seed, scores_path=args.scores, music=not args.no_music)


if __name__ == "__main__":
    main()
