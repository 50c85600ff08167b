#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from luach.engines import hebrew as heb


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "luach[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "luach[diagnostics]"') from e


def year_lengths(np, start_year: int, end_year: int) -> "np.ndarray":
    return np.array([heb.days_in_year(y) for y in range(start_year, end_year + 1)], dtype=int)


def histogram(np, lengths: "np.ndarray") -> List[Tuple[int, int]]:
    """(length, count) for each of the six legal year lengths."""
    values = np.array(heb.VALID_YEAR_LENGTHS)
    counts = (lengths[:, None] == values[None, :]).sum(axis=0)
    return [(int(v), int(c)) for v, c in zip(values, counts)]


def leap_counts_per_cycle(np, start_year: int, end_year: int) -> "np.ndarray":
    """Number of leap years in each window of 19 consecutive years."""
    leap = np.array([heb.is_leap_year(y) for y in range(start_year, end_year + 1)], dtype=int)
    if len(leap) < 19:
        return np.array([], dtype=int)
    return np.convolve(leap, np.ones(19, dtype=int), mode="valid")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Distribution of Hebrew year lengths over a span of years.")
    p.add_argument("--start-year", type=int, default=3760)
    p.add_argument("--end-year", type=int, default=5811)
    p.add_argument("--plot", action="store_true", help="Draw a bar chart (needs matplotlib).")
    p.add_argument("--out", default="year_lengths.png")
    args = p.parse_args(argv)

    np = _need_numpy()

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    lengths = year_lengths(np, args.start_year, args.end_year)
    hist = histogram(np, lengths)
    total = int(lengths.size)
    print(f"Years {args.start_year}..{args.end_year}  ({total} years)")
    for length, count in hist:
        print(f"  {length}: {count:6d}  ({100.0 * count / total:5.2f}%)")

    bad = int(total - sum(c for _, c in hist))
    print(f"  illegal lengths: {bad}")

    cycles = leap_counts_per_cycle(np, args.start_year, args.end_year)
    if cycles.size:
        print(f"  leap years per 19-year window: min={int(cycles.min())} max={int(cycles.max())}")

    if args.plot:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(7, 4))
        ax.bar([str(v) for v, _ in hist], [c for _, c in hist], color="0.3")
        ax.set_xlabel("days in year")
        ax.set_ylabel("count")
        ax.set_title(f"Hebrew year lengths {args.start_year}-{args.end_year}")
        fig.tight_layout()
        fig.savefig(args.out, dpi=150)
        print(f"wrote {args.out}")

    return 1 if bad else 0


if __name__ == "__main__":
    raise SystemExit(main())
