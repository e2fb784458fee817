"""
Stateless field validators used by the payment validation chain.
"""

import string
from typing import Any

_ACCOUNT_ID_CHARS = frozenset(string.ascii_letters + string.digits + "-.@")
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_ASCII_DIGITS = frozenset(string.digits)


def is_valid_account_id(value: Any) -> bool:
    if not value or not isinstance(value, str):
        return False
    return all(char in _ACCOUNT_ID_CHARS for char in value)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def is_valid_execution_date(value: Any) -> bool:
    """
    Strict YYYY-MM-DD check.

    No lenient parsing: exact length, literal dashes, ASCII digits only, year in
    [1000, 9999] and a day that exists in the given month (leap-year aware).
    """
    if not value or not isinstance(value, str):
        return False
    if len(value) != 10 or value[4] != "-" or value[7] != "-":
        return False

    year_str, month_str, day_str = value[0:4], value[5:7], value[8:10]
    if not all(char in _ASCII_DIGITS for char in year_str + month_str + day_str):
        return False

    year, month, day = int(year_str), int(month_str), int(day_str)
    if year < 1000 or year > 9999:
        return False
    if month < 1 or month > 12:
        return False
    return 1 <= day <= days_in_month(year, month)
