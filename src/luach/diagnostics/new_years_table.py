from __future__ import annotations

import argparse

from luach.core.time import weekday
from luach.engines import hebrew as heb

_WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def row(year: int) -> tuple[int, str, str, bool, int, str]:
    ed = heb.year_start(year)
    return (
        year,
        heb.new_year(year).isoformat(),
        _WEEKDAYS[weekday(ed)],
        heb.is_leap_year(year),
        heb.days_in_year(year),
        heb.year_length_class(year).value,
    )


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Rosh Hashanah dates with year length and class for a range of Hebrew years."
    )
    p.add_argument("--from-year", type=int, default=5780)
    p.add_argument("--to-year", type=int, default=5800)
    args = p.parse_args(argv)

    y0, y1 = args.from_year, args.to_year
    if y1 < y0:
        raise SystemExit("--to-year must be >= --from-year")
    if y0 < 1:
        raise SystemExit("--from-year must be >= 1")

    headers = ("Year", "1 Tishrei", "Day", "Leap", "Days", "Class")
    colw = (6, 11, 4, 5, 5, 9)
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for y in range(y0, y1 + 1):
        year, start, dow, leap, days, cls = row(y)
        cells = (str(year), start, dow, "yes" if leap else "", str(days), cls)
        print("  ".join(c.ljust(w) for c, w in zip(cells, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
