#!/usr/bin/env python3
"""
Benchmark runner.

Times monotri.triangulate_polygon over the generated polygon families and
sizes, validates every result, and writes:
- raw per-run rows      (--out-raw-csv)
- per family/size means (--out-csv)
"""

from __future__ import annotations

import argparse
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Dict, List

import pandas as pd

from monotri import PolygonTriangulator
from monotri.cli import DEFAULT_ROTATION
from monotri.polylines import comb_polygon, convex_polygon, random_polygon, rotate_points, star_polygon
from monotri.validate import validate

RESULTS_DIR = Path(__file__).resolve().parent.parent / "results"


def log(msg: str) -> None:
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}", flush=True)


def make_polygon(ptype: str, n: int, seed: int):
    if ptype == "convex":
        pts = convex_polygon(n, radius=100.0)
    elif ptype == "random":
        pts = random_polygon(n, seed=seed)
    elif ptype == "star":
        pts = star_polygon(max(3, n // 2), outer=100.0, inner=30.0)
    elif ptype == "comb":
        pts = comb_polygon(max(1, (n - 4) // 3))
    else:
        raise ValueError(f"Unknown polygon type: {ptype}")
    return rotate_points(pts, DEFAULT_ROTATION)


def run_once(pts) -> Dict[str, float]:
    start = time.perf_counter()
    tri = PolygonTriangulator(pts)
    triangles = tri.triangulate()
    elapsed_ms = (time.perf_counter() - start) * 1000
    ok, msg = validate(tri.pts, tri.indices)
    if not ok:
        raise RuntimeError(msg)
    return {
        "time_ms": elapsed_ms,
        "triangles": len(triangles),
        "diagonals": len(tri.diagonals),
        "pieces": len(tri.loops),
    }


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--types", nargs="+", default=["convex", "random", "star", "comb"])
    parser.add_argument("--sizes", nargs="+", type=int, default=[10, 100, 1000, 5000])
    parser.add_argument("--seeds", nargs="+", type=int, default=[0, 1, 2])
    parser.add_argument("--repeats", type=int, default=3)
    parser.add_argument("--out-csv", type=Path, default=RESULTS_DIR / "benchmark_results.csv")
    parser.add_argument("--out-raw-csv", type=Path, default=RESULTS_DIR / "benchmark_results_raw.csv")
    args = parser.parse_args()

    rows: List[Dict] = []
    for ptype in args.types:
        for n in args.sizes:
            # only the random family depends on the seed
            seeds = args.seeds if ptype == "random" else args.seeds[:1]
            for seed in seeds:
                pts = make_polygon(ptype, n, seed)
                for rep in range(args.repeats):
                    row = {"polygon_type": ptype, "n": len(pts), "seed": seed, "repeat": rep}
                    row.update(run_once(pts))
                    rows.append(row)
            log(f"{ptype} n={n}: done")

    df = pd.DataFrame(rows)
    summary = df.groupby(["polygon_type", "n"]).agg(
        time_ms=("time_ms", "mean"),
        time_std=("time_ms", "std"),
        diagonals=("diagonals", "mean"),
        pieces=("pieces", "mean"),
    ).reset_index()

    args.out_csv.parent.mkdir(parents=True, exist_ok=True)
    args.out_raw_csv.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.out_raw_csv, index=False)
    summary.to_csv(args.out_csv, index=False)

    print(summary.to_string(index=False))
    log(f"Results saved to {args.out_csv}")
    log(f"Raw per-run results saved to {args.out_raw_csv}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
