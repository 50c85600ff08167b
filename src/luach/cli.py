from __future__ import annotations

import argparse
import importlib
import json
import logging
import re
import sys
from typing import Optional

from .config import LuachConfig, load_config
from .core.errors import LuachError
from .core.types import DailyRecord, GeoLocation, HebrewDate, HebrewMonth

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^[+-]?[0-9]{4,}-[0-9]{2}-[0-9]{2}$")

_PRESETS = {
    "jerusalem": GeoLocation.jerusalem,
    "new-york": GeoLocation.new_york,
}


def _run_diagnostic(modpath: str, argv: list[str]) -> int:
    """Import a diagnostics module on demand and run its ``main(argv)``."""
    mod = importlib.import_module(modpath)
    return int(mod.main(argv) or 0)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--config", default=None, help="config file (default: $LUACH_CONFIG or ~/.config/luach/config.json)")
    p.add_argument("--json", action="store_true", help="print JSON instead of text")


def _add_location(p: argparse.ArgumentParser) -> None:
    p.add_argument("--preset", choices=sorted(_PRESETS), help="named location")
    p.add_argument("--lat", type=float, help="latitude in degrees (north positive)")
    p.add_argument("--lon", type=float, help="longitude in degrees (east positive)")
    p.add_argument("--elevation", type=float, default=0.0, help="elevation in meters")
    p.add_argument("--tz", type=int, default=None, help="fixed UTC offset in minutes")
    p.add_argument("--no-location", action="store_true", help="skip times of day")


def _location(args, cfg: LuachConfig) -> Optional[GeoLocation]:
    if args.no_location:
        return None
    if args.lat is not None or args.lon is not None:
        if args.lat is None or args.lon is None:
            raise SystemExit("--lat and --lon must be given together")
        loc = GeoLocation(args.lat, args.lon, elevation_m=args.elevation, tz_offset_minutes=args.tz or 0)
    elif args.preset:
        loc = _PRESETS[args.preset]()
    else:
        loc = cfg.default_location
    if loc is not None and args.tz is not None:
        loc = loc.with_timezone(args.tz)
    return loc


def _prepare(args) -> LuachConfig:
    _setup_logging(args.verbose)
    return load_config(args.config)


def _print_record(rec: DailyRecord) -> None:
    from .api import format_display_date

    print(f"{rec.solar.isoformat()}  ({format_display_date(rec.solar)})")
    print(f"  Hebrew:      {rec.hebrew}")
    if rec.weekly_reading is not None:
        print(f"  Reading:     {rec.weekly_reading.label}")
    if rec.observances:
        print(f"  Observances: {', '.join(o.label for o in rec.observances)}")
    if rec.is_restriction_day:
        print("  Shabbat / Yom Tov")
    if rec.candle_lighting is not None:
        print(f"  Candles:     {rec.candle_lighting.strftime('%H:%M')}")
    if rec.times is not None:
        for name, value in rec.times.as_dict().items():
            print(f"    {name:<20} {value or '--:--'}")
    if rec.attributes:
        for k, v in rec.attributes.items():
            print(f"  {k}: {v}")


def cmd_day(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach day", description="Gregorian date -> Hebrew date, observances and times")
    p.add_argument("date", help="YYYY-MM-DD or +YYYY-MM-DD")
    _add_common(p)
    _add_location(p)
    p.add_argument("--candle-offset", type=int, default=None, help="minutes before sunset")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)
    cfg = _prepare(args)

    offset = cfg.candle_lighting_offset_minutes if args.candle_offset is None else args.candle_offset
    rec = luach.compute_daily_record(
        luach.parse_date(args.date), _location(args, cfg), offset, attributes=tuple(args.attr)
    )
    if args.json:
        print(json.dumps(rec.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_record(rec)
    return 0


def cmd_range(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach range", description="Daily records for an inclusive date range")
    p.add_argument("start", help="YYYY-MM-DD")
    p.add_argument("end", help="YYYY-MM-DD")
    _add_common(p)
    _add_location(p)
    p.add_argument("--candle-offset", type=int, default=None)
    args = p.parse_args(argv)
    cfg = _prepare(args)

    offset = cfg.candle_lighting_offset_minutes if args.candle_offset is None else args.candle_offset
    recs = luach.daily_records(
        luach.parse_date(args.start), luach.parse_date(args.end), _location(args, cfg), offset,
        max_days=cfg.max_range_days,
    )
    if args.json:
        print(json.dumps([r.to_dict() for r in recs], ensure_ascii=False, indent=2))
        return 0
    for r in recs:
        extra = [o.label for o in r.observances]
        if r.weekly_reading is not None:
            extra.insert(0, r.weekly_reading.label)
        print(f"{r.solar.isoformat()}  {str(r.hebrew):<22} {'; '.join(extra)}")
    return 0


def cmd_zmanim(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach zmanim", description="Halachic times of day for a date and location")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_common(p)
    _add_location(p)
    p.add_argument("--use-elevation", action="store_true", help="correct sunrise/sunset for horizon dip")
    args = p.parse_args(argv)
    cfg = _prepare(args)

    loc = _location(args, cfg)
    if loc is None:
        raise SystemExit("zmanim needs a location")
    times = luach.zmanim(luach.parse_date(args.date), loc, use_elevation=args.use_elevation)
    if args.json:
        print(json.dumps({"location": loc.to_dict(), "times": times.as_dict()}, indent=2))
        return 0
    print(f"{args.date}  {loc.name or f'{loc.latitude:.4f},{loc.longitude:.4f}'}  (UTC{loc.tz_offset_minutes:+d}m)")
    for name, value in times.as_dict().items():
        print(f"  {name:<20} {value or '--:--'}")
    return 0


def cmd_hebrew(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach hebrew", description="Hebrew date -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", help=f"one of {[m.name for m in HebrewMonth]}")
    p.add_argument("day", type=int)
    _add_common(p)
    args = p.parse_args(argv)
    _prepare(args)

    try:
        month = HebrewMonth[args.month.upper()]
    except KeyError:
        raise SystemExit(f"Unknown month {args.month!r}")
    s = luach.to_solar(HebrewDate(args.year, month, args.day))
    if args.json:
        print(json.dumps({"solar": s.isoformat(), "weekday": s.weekday}))
    else:
        print(s.isoformat())
    return 0


def cmd_holidays(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach holidays", description="Observances of a Hebrew year")
    p.add_argument("year", type=int, help="Hebrew year, e.g. 5785")
    p.add_argument("--all", action="store_true", help="include Omer days and Rosh Chodesh")
    _add_common(p)
    args = p.parse_args(argv)
    _prepare(args)

    rows = []
    for s, h, obs in luach.year_observances(args.year):
        if not args.all:
            obs = tuple(o for o in obs if o.omer_day is None and o is not luach.Observance.ROSH_CHODESH)
        if obs:
            rows.append((s, h, obs))
    if args.json:
        print(json.dumps([
            {"solar": s.isoformat(), "hebrew": str(h), "observances": [o.label for o in obs]}
            for s, h, obs in rows
        ], ensure_ascii=False, indent=2))
        return 0
    for s, h, obs in rows:
        print(f"{s.isoformat()}  {str(h):<22} {', '.join(o.label for o in obs)}")
    return 0


def cmd_reading(argv: list[str]) -> int:
    from .engines import parsha

    p = argparse.ArgumentParser(prog="luach reading", description="Weekly readings of a Hebrew year")
    p.add_argument("year", type=int, help="Hebrew year, e.g. 5784")
    _add_common(p)
    args = p.parse_args(argv)
    _prepare(args)

    rows = list(parsha.year_readings(args.year))
    if args.json:
        print(json.dumps([{"solar": s.isoformat(), "reading": r.label} for s, r in rows], ensure_ascii=False, indent=2))
        return 0
    for s, r in rows:
        print(f"{s.isoformat()}  {r.label:<22} {r.hebrew_name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        return _dispatch(argv)
    except LuachError as e:
        logger.debug("command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2


def _dispatch(argv: list[str]) -> int:
    # `luach YYYY-MM-DD ...` is shorthand for `luach day YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="luach", description="Hebrew calendar, observances, readings and zmanim.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Hebrew date with observances and times", add_help=False)
    sub.add_parser("range", help="Daily records for a date range", add_help=False)
    sub.add_parser("zmanim", help="Halachic times for a date and location", add_help=False)
    sub.add_parser("hebrew", help="Hebrew -> Gregorian date", add_help=False)
    sub.add_parser("holidays", help="Observances of a Hebrew year", add_help=False)
    sub.add_parser("reading", help="Weekly readings of a Hebrew year", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print Hebrew/Gregorian month grids (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print Rosh Hashanah table (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["year-lengths", "round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    commands = {
        "day": cmd_day,
        "range": cmd_range,
        "zmanim": cmd_zmanim,
        "hebrew": cmd_hebrew,
        "holidays": cmd_holidays,
        "reading": cmd_reading,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "pretty-month":
        return _run_diagnostic("luach.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_diagnostic("luach.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "year-lengths": "luach.diagnostics.year_lengths",
            "round-trip": "luach.diagnostics.round_trip",
        }
        return _run_diagnostic(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
