# tefila_rules/tefila_lib/hebrew.py
"""
Month and weekday numbering, and chronological ordering of Hebrew dates.

Month numbers follow pyluach: 1=Nissan … 12=Adar (Adar I in a leap year),
13=Adar II. The Hebrew year starts at Tishrei (7), so month numbers can NOT be
compared directly to tell which of two dates in the same year comes first.
"""
from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

from pyluach import dates, hebrewcal


class Month(IntEnum):
    NISSAN = 1
    IYAR = 2
    SIVAN = 3
    TAMMUZ = 4
    AV = 5
    ELUL = 6
    TISHREI = 7
    CHESHVAN = 8
    KISLEV = 9
    TEVES = 10
    SHEVAT = 11
    ADAR = 12
    ADAR_II = 13


class Weekday(IntEnum):
    """pyluach weekday numbering (1=Sunday … 7=Shabbos)."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


class HebrewDay(NamedTuple):
    """A bare (year, month, day) reference date."""

    year: int
    month: Month
    day: int


def month_position(month: int) -> int:
    """Position of a month inside its year, counted from Tishrei = 0."""
    return month - 7 if month >= Month.TISHREI else month + 6


def compare_ordinal(a, b) -> int:
    """
    Chronological comparison of two Hebrew dates.

    Accepts anything with ``year``, ``month`` and ``day`` (a DateSnapshot, a
    HebrewDay or a pyluach HebrewDate). Returns -1, 0 or 1.
    """
    ka = (a.year, month_position(a.month), a.day)
    kb = (b.year, month_position(b.month), b.day)
    return (ka > kb) - (ka < kb)


def is_leap(year: int) -> bool:
    return hebrewcal.Year(year).leap


def month_length_safe(y: int, m: int) -> int:
    """Return 29 or 30 without constructing an invalid HebrewDate(…, 30) on 29-day months."""
    try:
        dates.HebrewDate(y, m, 30)   # will raise if month has only 29
        return 30
    except ValueError:
        return 29
