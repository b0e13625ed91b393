#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("UCS vs A*", f"{sys.executable} -m eightpuzzle.experiments.runner --depths 4 8 12 16 --per_depth 10 --algo all --heuristic both --out results/ucs_vs_astar.csv")
    run("Summary", f"{sys.executable} -m eightpuzzle.experiments.summarize results/ucs_vs_astar.csv --out results/summary.csv")
    run("Plots", f"{sys.executable} -m eightpuzzle.experiments.plot results/ucs_vs_astar.csv --log --save results/plots")

if __name__ == "__main__":
    main()
