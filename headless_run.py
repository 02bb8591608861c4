"""
Headless drop test for the Lunar Lander simulation.

Runs seeded worlds with no pilot input until each lander lands, crashes or
runs out of time, printing one line per run. No display is opened, so this is
handy for checking terrain generation and the touchdown rules in bulk.
"""
import argparse
import random
import time
from collections import Counter

from lunar_lander.config import Settings
from lunar_lander.controls import InputState
from lunar_lander.highscores import HighScoreTable
from lunar_lander.lander import Phase
from lunar_lander.world import World


def drop_run(settings: Settings, seed: int, max_ticks: int):
    """Fly one world with no input. Returns (phase, ticks, score or None, zone count)."""
    world = World(settings, random.Random(seed), HighScoreTable())
    inputs = InputState()

    ticks = 0
    snap = world.snapshot()
    while snap.lander.phase is Phase.FLYING and ticks < max_ticks:
        snap = world.tick(inputs)
        ticks += 1

    total = snap.score.total if snap.score else None
    return snap.lander.phase, ticks, total, len(snap.zones)


def main():
    parser = argparse.ArgumentParser(description="Headless drop test for Lunar Lander")
    parser.add_argument("--runs", type=int, default=20, help="Number of seeded worlds to fly")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first run; run i uses seed + i")
    parser.add_argument("--max-ticks", type=int, default=10_000, dest="max_ticks", help="Safety cap per run")
    args = parser.parse_args()

    settings = Settings()
    outcomes = Counter()
    start = time.perf_counter()

    for i in range(args.runs):
        seed = args.seed + i
        phase, ticks, total, zones = drop_run(settings, seed, args.max_ticks)
        outcomes[phase.value] += 1
        score = f"{total:7.1f}" if total is not None else "      -"
        print(f"Run {i + 1:03d} | seed={seed:<6d} | zones={zones:<2d} | ticks={ticks:<5d} | {phase.value:<7s} | score={score}")

    elapsed = time.perf_counter() - start
    summary = "  ".join(f"{k}={v}" for k, v in sorted(outcomes.items()))
    print(f"Done {args.runs} runs in {elapsed:.2f}s | {summary}")


if __name__ == "__main__":
    main()
