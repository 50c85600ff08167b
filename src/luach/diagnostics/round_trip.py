from __future__ import annotations

import argparse
import random

import luach
from luach.core.time import from_epoch_day, to_epoch_day
from luach.engines import hebrew as heb


def roundtrip_test(N: int, start_ed: int, end_ed: int, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        ed = random.randint(start_ed, end_ed)
        s = from_epoch_day(ed)
        h = heb.from_epoch_day(ed)
        back_ed = to_epoch_day(s)
        back_h = heb.to_epoch_day(h)
        if back_ed != ed or back_h != ed:
            failures += 1
            print("\nFAIL")
            print("epoch day:", ed)
            print("solar:", s, "->", back_ed)
            print("hebrew:", h, "->", back_h)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: epoch day -> solar/hebrew -> epoch day.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start", type=str, default="0000-01-01", help="Start date (YYYY-MM-DD or +YYYY-MM-DD).")
    p.add_argument("--end", type=str, default="2050-12-31", help="End date.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = luach.parse_date(args.start).epoch_day
    end = luach.parse_date(args.end).epoch_day
    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
    print(f"{args.N} trials, {failures} failures")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
