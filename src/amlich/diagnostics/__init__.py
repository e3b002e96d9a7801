"""Diagnostics package.

- pretty_month, new_years_table, round_trip: text output, no extra dependencies
- leap_months: plot, requires the `diagnostics` extra (numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_months"]
