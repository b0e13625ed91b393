#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import List

import pandas as pd

METRICS = ["path_length", "expanded", "max_queue", "time_ms"]


def load_many(paths: List[str]) -> pd.DataFrame:
    dfs = []
    for p in paths:
        df = pd.read_csv(p, dtype={"state": str})
        df["__src__"] = Path(p).name
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)
    for c in ("depth", "seed", "solvable", *METRICS):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    df["heuristic"] = df["heuristic"].fillna("")
    df["label"] = df.apply(
        lambda r: r["algorithm"] if not r["heuristic"] else f"{r['algorithm']} ({r['heuristic']})", axis=1)
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean and std of every metric per (label, depth, solvable)."""
    g = df.groupby(["label", "depth", "solvable"])[METRICS].agg(["mean", "std"])
    g.columns = [f"{m}_{stat}" for m, stat in g.columns]
    return g.reset_index().sort_values(["solvable", "depth", "label"], ascending=[False, True, True])


def dominance_violations(df: pd.DataFrame) -> pd.DataFrame:
    """Rows where an informed search expanded more than a weaker one on the same instance.

    Expected ordering per instance: A* (manhattan) <= A* (misplaced) <= UCS.
    """
    wide = df.pivot_table(index=["state"], columns="label", values="expanded", aggfunc="first")
    checks = [("A* (manhattan)", "A* (misplaced)"), ("A* (misplaced)", "UCS"), ("A* (manhattan)", "UCS")]
    bad = []
    for lo, hi in checks:
        if lo in wide.columns and hi in wide.columns:
            m = wide[lo] > wide[hi]
            for state in wide.index[m.to_numpy()]:
                bad.append({"state": state, "informed": lo, "weaker": hi,
                            "informed_expanded": wide.at[state, lo], "weaker_expanded": wide.at[state, hi]})
    return pd.DataFrame(bad, columns=["state", "informed", "weaker", "informed_expanded", "weaker_expanded"])


def main(argv=None):
    ap = argparse.ArgumentParser(description="Aggregate runner CSVs into a per-depth summary table.")
    ap.add_argument("csv", nargs="+")
    ap.add_argument("--out", type=Path, default=None, help="Write the summary table as CSV")
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to summarize.")
        return
    table = summarize(df)
    with pd.option_context("display.width", 160, "display.max_columns", None):
        print(table.to_string(index=False, float_format=lambda x: f"{x:.2f}"))

    bad = dominance_violations(df[df["solvable"] == 1])
    if bad.empty:
        print("\nExpansion ordering held on every instance.")
    else:
        print(f"\n{len(bad)} expansion ordering violation(s):")
        print(bad.to_string(index=False))

    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")


if __name__ == "__main__":
    main()
