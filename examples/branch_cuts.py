#!/usr/bin/env python3
"""
Plot the phase of the inverse functions over a grid of the complex plane.

Discontinuities in the phase show where each function's branch cuts lie;
the cuts follow the C99 conventions (for example asin along the real axis
outside [-1, 1], atanh along the same rays, acosh left of 1).

Usage:
  python examples/branch_cuts.py --outdir figures --functions asin acosh atanh

Notes:
  - Requires matplotlib. If missing, install with: pip install c99complex[examples]
"""

import argparse
import os
import sys
from typing import List

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import numpy as np

import c99complex as cc
from c99complex import Complex

DEFAULT_FUNCTIONS = ["asin", "acos", "atan", "asinh", "acosh", "atanh"]


def phase_grid(name: str, extent: float = 3.0, n: int = 201) -> np.ndarray:
    """Evaluate ``arg(f(x + iy))`` on an ``n`` x ``n`` grid."""
    func = getattr(cc, name)
    xs = np.linspace(-extent, extent, n)
    ys = np.linspace(-extent, extent, n)
    out = np.empty((n, n))
    for i, y in enumerate(ys):
        for j, x in enumerate(xs):
            out[i, j] = func(Complex(x, y)).phase
    return out


def plot_phases(functions: List[str], outdir: str, extent: float, n: int, filename: str = "branch_cuts.png"):
    try:
        import matplotlib.pyplot as plt
    except ImportError as e:
        print(f"matplotlib not available: {e}. Skipping branch cut plot.")
        return None

    cols = 3
    rows = (len(functions) + cols - 1) // cols
    fig, axes = plt.subplots(rows, cols, figsize=(4 * cols, 4 * rows), squeeze=False)
    axes = axes.flatten()

    for ax, name in zip(axes, functions):
        im = ax.imshow(
            phase_grid(name, extent, n),
            extent=(-extent, extent, -extent, extent),
            origin="lower",
            cmap="twilight",
            vmin=-np.pi,
            vmax=np.pi,
        )
        ax.set_title(name)
        ax.set_xlabel("Re z")
        ax.set_ylabel("Im z")
    for ax in axes[len(functions):]:
        ax.axis("off")

    fig.colorbar(im, ax=axes.tolist(), shrink=0.8, label="arg f(z)")
    os.makedirs(outdir, exist_ok=True)
    path = os.path.join(outdir, filename)
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"Saved {path}")
    return path


def main():
    parser = argparse.ArgumentParser(description="Plot branch cuts of the inverse functions")
    parser.add_argument("--outdir", default="figures")
    parser.add_argument("--functions", nargs="+", default=DEFAULT_FUNCTIONS)
    parser.add_argument("--extent", type=float, default=3.0)
    parser.add_argument("--resolution", type=int, default=201)
    args = parser.parse_args()

    unknown = [name for name in args.functions if not hasattr(cc, name)]
    if unknown:
        parser.error(f"unknown functions: {', '.join(unknown)}")

    plot_phases(args.functions, args.outdir, args.extent, args.resolution)


if __name__ == "__main__":
    main()
