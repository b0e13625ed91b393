#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import numpy as np
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.experiments.summarize import load_many

COLORS = {
    "UCS":            "#E69F00",  # orange
    "A* (misplaced)": "#009E73",  # green
    "A* (manhattan)": "#0072B2",  # blue
}
TITLES = {
    "expanded":  "Node expansions",
    "max_queue": "Peak frontier size",
    "time_ms":   "Elapsed time (ms)",
}


def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)


def plot_metric(ax, df, metric, log=False):
    for label, sub in sorted(df.groupby("label"), key=lambda kv: kv[0]):
        agg = sub.groupby("depth")[metric].agg(["mean", sem]).sort_index()
        ax.errorbar(agg.index, agg["mean"], yerr=agg["sem"], marker="o", capsize=3,
                    color=COLORS.get(label), label=label)
    if log:
        ax.set_yscale("log")
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{TITLES.get(metric, metric)} (mean ± sem)")
    ax.grid(True, alpha=0.3)
    ax.legend()


def save_fig(fig, outdir: Path, name: str):
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--log", action="store_true", help="Log-scale y axis")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return
    df = df[(df["solvable"] == 1) & (df["termination"] == "ok")]

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded", "max_queue", "time_ms"]):
        plot_metric(ax, df, metric, log=args.log)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")

    if args.show:
        plt.show()
    plt.close(fig)


if __name__ == "__main__":
    main()
