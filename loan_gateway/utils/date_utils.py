"""Date manipulation utilities"""

from datetime import date


def whole_years_between(start: date, end: date) -> int:
    """Completed years from start to end (birthday not yet reached this year doesn't count)"""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years
