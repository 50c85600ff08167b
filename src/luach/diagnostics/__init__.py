"""Diagnostics package.

- new_years_table, pretty_month, round_trip: standard library only
- year_lengths: needs numpy (and matplotlib for --plot)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "year_lengths"]
