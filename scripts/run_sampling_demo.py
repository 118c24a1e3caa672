#!/usr/bin/env python
from __future__ import annotations

import sys
import argparse
from pathlib import Path
import numpy as np

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from aura import Arithma, Vector3
from aura.rng import seed_all, uniform, weighted_pick, unit_vector3
from aura.types import SamplingParams, WeightedItem


def parse_params(argv=None) -> tuple[SamplingParams, argparse.Namespace]:
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--draws", type=int, default=10000)
    ap.add_argument("--low", type=float, default=0.0, help="lower bound for uniform draws")
    ap.add_argument("--high", type=float, default=1.0, help="upper bound for uniform draws (exclusive)")
    ap.add_argument("--items", type=str, nargs="+", default=["a", "b"])
    ap.add_argument("--weights", type=float, nargs="+", default=[1.0, 3.0])
    ap.add_argument("--bins", type=int, default=20, help="histogram bins")
    ap.add_argument("--plot", action="store_true", help="show a histogram of the uniform draws")
    args = ap.parse_args(argv)
    if len(args.items) != len(args.weights):
        ap.error("--items and --weights must have the same length")
    params = SamplingParams(
        seed=args.seed,
        draws=max(1, args.draws),
        low=args.low,
        high=args.high,
        items=tuple(args.items),
        weights=tuple(args.weights),
        bins=max(1, args.bins),
    )
    return params, args


def run(params: SamplingParams) -> dict:
    """Draw samples according to `params` and return a summary report."""

    seed_all(params.seed)
    entries = [WeightedItem(i, w) for i, w in zip(params.items, params.weights)]

    counts = {item: 0 for item in params.items}
    for _ in range(params.draws):
        counts[weighted_pick(entries)] += 1

    xs = [uniform(params.low, params.high) for _ in range(params.draws)]

    # mean resultant of random directions should shrink towards zero
    resultant = Vector3.zero()
    for _ in range(params.draws):
        resultant = resultant + unit_vector3()

    total_w = Arithma.sum(params.weights)
    return {
        "frequencies": {k: c / params.draws for k, c in counts.items()},
        "expected": {i: w / total_w for i, w in zip(params.items, params.weights)},
        "uniform": xs,
        "mean": Arithma.mean(xs),
        "median": Arithma.median(xs),
        "std": Arithma.standard_deviation(xs),
        "min": Arithma.min(xs),
        "max": Arithma.max(xs),
        "resultant": resultant.length() / params.draws,
    }


def main() -> None:
    params, args = parse_params()

    print("=" * 70)
    print("Aura Sampling Demo - Starting")
    print("=" * 70)
    print(f"Sampling parameters:")
    print(f"  Draws: {params.draws}")
    print(f"  Uniform interval: [{params.low}, {params.high})")
    print(f"  Items: {list(params.items)}")
    print(f"  Weights: {list(params.weights)}")
    print(f"  Random seed: {params.seed}")
    print("=" * 70)

    report = run(params)
    print("✓ Sampling finished")

    print("\nWeighted selection:")
    for item in params.items:
        print(f"  {item:>10s}: observed {report['frequencies'][item]:.4f}  expected {report['expected'][item]:.4f}")

    print("\nUniform draws:")
    for key in ("mean", "median", "std", "min", "max"):
        print(f"  {key:>10s}: {report[key]:.6f}")
    print(f"\nMean resultant length of {params.draws} random 3D directions: {report['resultant']:.6f}")

    if args.plot:
        try:
            import matplotlib.pyplot as plt
            fig, ax = plt.subplots(figsize=(6, 4))
            ax.hist(np.asarray(report["uniform"]), bins=params.bins)
            ax.set_xlabel('x')
            ax.set_ylabel('count')
            ax.set_title('Uniform draws')
            fig.tight_layout()
            plt.show()
        except Exception as e:
            print(f"⚠ Plotting disabled: {e}")

    print("\n" + "=" * 70)
    print("Done.")
    print("=" * 70)


if __name__ == "__main__":
    main()
