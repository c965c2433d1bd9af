#!/usr/bin/env python3
"""
Generate the random-sample and dead-reckoning figures.

All outputs are saved into `pictures/dead_reckoning/` relative to this file
unless --output is given.

Figures generated:
- normal_dist.png
    1000 samples of a 2-D normal distribution (mean 20, std 5) as a scatter.
- x_true.png
    True vehicle position vs position integrated from a noisy speed sensor.
- spd_true.png
    True vehicle speed over time.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from deadreckon import MatplotlibRenderer, SimulationConfig, run_all

OUTPUT_DIR = Path(__file__).parent / "pictures" / "dead_reckoning"


def ensure_output_dir(output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render random-sample and dead-reckoning figures")
    parser.add_argument("--output", type=Path, default=OUTPUT_DIR, help="Directory to store figures")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (unseeded by default)")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    output_dir = ensure_output_dir(args.output)
    config = SimulationConfig(seed=args.seed)

    run_all(config, MatplotlibRenderer(config.plot), output_dir)

    print(f"Saved figures to {output_dir}")


if __name__ == "__main__":
    main()
