# tefila_rules/tefila_lib/helper.py

"""
Calendar provider built on pyluach.

The rule engine never converts dates itself. It is handed a DateSnapshot: a
frozen record of everything it needs to know about one Hebrew day (month, day,
weekday, holiday flags and the tekufah day count), built here from a pyluach
HebrewDate in a fixed Israel/diaspora and modern-holiday context.

Requires:
    pip install pyluach
"""
from __future__ import annotations

import datetime
import logging
import math
from dataclasses import dataclass

from pyluach import dates

from .hebrew import HebrewDay, Month, Weekday, compare_ordinal, is_leap, month_length_safe
from .holidays import (
    Holiday,
    get_holiday,
    is_erev_yom_tov,
    is_rosh_chodesh,
    is_taanis,
    is_yom_tov,
)

_LOGGER = logging.getLogger(__name__)

# 1 Tishrei of year 1 as a proleptic Gregorian ordinal (date.toordinal()).
HEBREW_EPOCH_ORDINAL = -1373427

# Tekufas Shmuel: a solar year of 365.25 days.
SOLAR_YEAR_DAYS = 365.25


@dataclass(frozen=True)
class DateSnapshot:
    """Facts about one Hebrew day, as seen from one calendar context."""

    year: int
    month: Month
    day: int
    weekday: Weekday
    is_leap_year: bool
    in_israel: bool
    use_modern_holidays: bool
    holiday: Holiday = Holiday.NONE
    is_yom_tov: bool = False
    is_erev_yom_tov: bool = False
    is_taanis: bool = False
    is_rosh_chodesh: bool = False
    is_isru_chag: bool = False
    tekufas_tishrei_elapsed_days: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.month, Month):
            raise ValueError(f"Unsupported month value {self.month!r}")
        if not isinstance(self.weekday, Weekday):
            raise ValueError(f"Unsupported weekday value {self.weekday!r}")
        if not isinstance(self.holiday, Holiday):
            raise ValueError(f"Unsupported holiday value {self.holiday!r}")
        if not 1 <= self.day <= 30:
            raise ValueError(f"Day of month {self.day} is outside 1..30")
        if self.month == Month.ADAR_II and not self.is_leap_year:
            raise ValueError(f"Adar II does not occur in the non-leap year {self.year}")

    @property
    def hebrew_day(self) -> HebrewDay:
        return HebrewDay(self.year, self.month, self.day)

    def same_context(self, other: "DateSnapshot") -> bool:
        """True if both snapshots were built for the same Israel/modern-holiday context."""
        return (
            self.in_israel == other.in_israel
            and self.use_modern_holidays == other.use_modern_holidays
        )


def tekufas_tishrei_elapsed_days(hd: dates.HebrewDate) -> int:
    """
    Days elapsed since tekufas Tishrei for the given date.

    Tekufas Tishrei of year 1 fell 9 hours into the day; adding half a day lets
    all four years of the civil leap cycle share the same count of 47 for the
    first day of Vesein Tal Umatar outside Israel.
    """
    since_epoch = hd.to_pydate().toordinal() - HEBREW_EPOCH_ORDINAL
    days = since_epoch + 1 + 0.5
    solar = (hd.year - 1) * SOLAR_YEAR_DAYS
    return math.floor(days - solar)


def _to_hebrew(value) -> dates.HebrewDate:
    """Normalize the accepted date types into a pyluach HebrewDate."""
    if isinstance(value, dates.HebrewDate):
        return value
    if isinstance(value, dates.GregorianDate):
        return value.to_heb()
    if isinstance(value, DateSnapshot):
        return dates.HebrewDate(value.year, int(value.month), value.day)
    if isinstance(value, datetime.datetime):
        return dates.HebrewDate.from_pydate(value.date())
    if isinstance(value, datetime.date):
        return dates.HebrewDate.from_pydate(value)
    raise TypeError(f"Unsupported date type {type(value).__name__!r}")


class HebrewCalendarProvider:
    """Produces DateSnapshots for a fixed Israel/diaspora and modern-holiday context."""

    def __init__(self, in_israel: bool = False, use_modern_holidays: bool = False) -> None:
        self.in_israel = in_israel
        self.use_modern_holidays = use_modern_holidays

    def __repr__(self) -> str:
        return (
            f"HebrewCalendarProvider(in_israel={self.in_israel}, "
            f"use_modern_holidays={self.use_modern_holidays})"
        )

    def snapshot(self, value) -> DateSnapshot:
        """
        Return the snapshot for a ``datetime.date``, a pyluach GregorianDate or
        HebrewDate, or an existing DateSnapshot (re-derived in this context).
        """
        hd = _to_hebrew(value)
        year, month, day = hd.year, Month(hd.month), hd.day
        weekday = Weekday(hd.weekday())
        leap = is_leap(year)

        holiday = get_holiday(
            month,
            day,
            weekday,
            is_leap_year=leap,
            kislev_short=month_length_safe(year, Month.KISLEV) == 29,
            in_israel=self.in_israel,
            use_modern_holidays=self.use_modern_holidays,
        )
        snap = DateSnapshot(
            year=year,
            month=month,
            day=day,
            weekday=weekday,
            is_leap_year=leap,
            in_israel=self.in_israel,
            use_modern_holidays=self.use_modern_holidays,
            holiday=holiday,
            is_yom_tov=is_yom_tov(holiday),
            is_erev_yom_tov=is_erev_yom_tov(holiday, month, day),
            is_taanis=is_taanis(holiday),
            is_rosh_chodesh=is_rosh_chodesh(month, day),
            is_isru_chag=holiday == Holiday.ISRU_CHAG,
            tekufas_tishrei_elapsed_days=tekufas_tishrei_elapsed_days(hd),
        )
        _LOGGER.debug("Snapshot for %s: %s", hd, snap)
        return snap

    def from_hebrew(self, year: int, month: int, day: int) -> DateSnapshot:
        """Snapshot for a Hebrew date; pyluach raises ValueError if it does not exist."""
        return self.snapshot(dates.HebrewDate(year, int(month), day))

    def advance_by_days(self, snapshot: DateSnapshot, n: int) -> DateSnapshot:
        """Snapshot for ``n`` days after ``snapshot``, in this provider's context."""
        pydate = _to_hebrew(snapshot).to_pydate() + datetime.timedelta(days=n)
        return self.snapshot(pydate)

    @staticmethod
    def compare_ordinal(a, b) -> int:
        return compare_ordinal(a, b)

    @staticmethod
    def to_pydate(snapshot: DateSnapshot) -> datetime.date:
        return _to_hebrew(snapshot).to_pydate()
