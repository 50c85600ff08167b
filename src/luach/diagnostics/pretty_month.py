from __future__ import annotations

import argparse

from luach.core.time import days_in_month, from_epoch_day, to_epoch_day, weekday
from luach.core.types import HebrewDate, HebrewMonth, SolarDate
from luach.engines import hebrew as heb


CELL_WIDTH = 6
DAY_NAMES = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sh")


def cell(top: str, bot: str) -> tuple[str, str]:
    return (top[:CELL_WIDTH].ljust(CELL_WIDTH), bot[:CELL_WIDTH].ljust(CELL_WIDTH))


def grid_lines(title: str, weeks: list[list[tuple[str, str]]]) -> list[str]:
    """Two text rows per week (day label over paired label), Sunday first."""
    header = " ".join(n.ljust(CELL_WIDTH) for n in DAY_NAMES).rstrip()
    lines = [title, header, "=" * len(header)]
    for wk in weeks:
        for row in (0, 1):
            lines.append(" ".join(c[row] for c in wk).rstrip())
    return lines


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print("\n".join(grid_lines(title, weeks)))
    print()


def layout(first_ed: int, labels: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(weekday(first_ed))]
    for top, bot in labels:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def hebrew_month_calendar(year: int, month: HebrewMonth) -> None:
    first = heb.to_epoch_day(HebrewDate(year, month, 1))
    n = heb.month_length(year, month)
    labels = []
    for i in range(n):
        s = from_epoch_day(first + i)
        labels.append((f"{i + 1:2d}", f"{s.month:02d}-{s.day:02d}"))
    name = month.display_name(heb.is_leap_year(year))
    title = f"Hebrew month {name} {year}   ({from_epoch_day(first)} .. {from_epoch_day(first + n - 1)})"
    print_grid(title, layout(first, labels))


def solar_month_calendar(gy: int, gm: int) -> None:
    first = to_epoch_day(SolarDate(gy, gm, 1))
    labels = []
    for i in range(days_in_month(gy, gm)):
        h = heb.from_epoch_day(first + i)
        labels.append((f"{i + 1:2d}", f"{h.month.number(heb.is_leap_year(h.year)):02d}-{h.day:02d}"))
    print_grid(f"Gregorian month  {gy:04d}-{gm:02d}", layout(first, labels))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Hebrew-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--hebrew", nargs=2, metavar=("Y", "MONTH"),
                   help="Hebrew month to print: year and month name (e.g. 5784 KISLEV)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 3)")
    args = p.parse_args(argv)

    if not args.hebrew and not args.greg:
        hebrew_month_calendar(5784, HebrewMonth.KISLEV)
        solar_month_calendar(2023, 12)
        return 0

    if args.hebrew:
        y, name = args.hebrew
        try:
            month = HebrewMonth[name.upper()]
        except KeyError:
            raise SystemExit(f"Unknown month {name!r}. Choose from {[m.name for m in HebrewMonth]}")
        hebrew_month_calendar(int(y), month)

    if args.greg:
        gy, gm = args.greg
        solar_month_calendar(gy, gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
