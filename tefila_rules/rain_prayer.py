# tefila_rules/rain_prayer.py
"""
Seasonal rain insertions in Shemoneh Esrei.

- Vesein Tal Umatar / Vesein Beracha (Birkas Hashanim):
    • In Israel: Tal Umatar from Maariv of 7 Cheshvan (the Jewish day of 7
      Cheshvan) until the first night of Pesach.
    • In Diaspora: from the 60th day after tekufas Tishrei (Maariv of Dec 4,
      Dec 5 before a civil leap year, drifting a day every century not
      divisible by 400) until the first night of Pesach. Never started on
      Friday night; a start landing on Shabbos moves to Motzei Shabbos.
    • Vesein Beracha the rest of the year.
- Mashiv Haruach / Morid Hatal (Gevuros):
    • Mashiv Haruach from Musaf of Shemini Atzeres (22 Tishrei) through Shacharis
      of the first day of Pesach (15 Nissan); Morid Hatal otherwise. Both
      boundary days count as Morid Hatal days.

All functions take a DateSnapshot; none of these depend on a custom.
"""
from __future__ import annotations

from .tefila_lib.helper import DateSnapshot
from .tefila_lib.hebrew import HebrewDay, Month, Weekday, compare_ordinal

# Day count from tekufas Tishrei on which Tal Umatar starts outside Israel.
TAL_UMATAR_ELAPSED_DAYS = 47


def is_vesein_tal_umatar_start_date(date: DateSnapshot) -> bool:
    """True on the first Jewish day (from the night before) of Vesein Tal Umatar."""
    if date.in_israel:
        # 7 Cheshvan can't fall on Shabbos
        return date.month == Month.CHESHVAN and date.day == 7

    elapsed = date.tekufas_tishrei_elapsed_days
    if date.weekday == Weekday.SATURDAY:  # not started on Friday night
        return False
    if date.weekday == Weekday.SUNDAY:
        # either the start date itself or delayed from Shabbos
        return elapsed in (TAL_UMATAR_ELAPSED_DAYS, TAL_UMATAR_ELAPSED_DAYS + 1)
    return elapsed == TAL_UMATAR_ELAPSED_DAYS


def is_vesein_tal_umatar_starting_tonight(date: DateSnapshot) -> bool:
    """True on the day whose evening Maariv begins Vesein Tal Umatar."""
    if date.in_israel:
        return date.month == Month.CHESHVAN and date.day == 6

    elapsed = date.tekufas_tishrei_elapsed_days
    if date.weekday == Weekday.FRIDAY:
        return False
    if date.weekday == Weekday.SATURDAY:
        # Motzei Shabbos: the start date or delayed from Friday night
        return elapsed in (TAL_UMATAR_ELAPSED_DAYS - 1, TAL_UMATAR_ELAPSED_DAYS)
    return elapsed == TAL_UMATAR_ELAPSED_DAYS - 1


def is_vesein_tal_umatar_recited(date: DateSnapshot) -> bool:
    """
    True for the whole Tal Umatar season, Shabbos included (it tells which
    text applies, not whether a weekday Shemoneh Esrei is said).
    """
    if date.month == Month.NISSAN and date.day < 15:
        return True
    # Nissan 15 … Elul
    if date.month < Month.CHESHVAN:
        return False
    if date.in_israel:
        return date.month != Month.CHESHVAN or date.day >= 7
    return date.tekufas_tishrei_elapsed_days >= TAL_UMATAR_ELAPSED_DAYS


def is_vesein_beracha_recited(date: DateSnapshot) -> bool:
    return not is_vesein_tal_umatar_recited(date)


def is_mashiv_haruach_start_date(date: DateSnapshot) -> bool:
    return date.month == Month.TISHREI and date.day == 22


def is_mashiv_haruach_end_date(date: DateSnapshot) -> bool:
    return date.month == Month.NISSAN and date.day == 15


def is_mashiv_haruach_recited(date: DateSnapshot) -> bool:
    """True strictly between 22 Tishrei and 15 Nissan of the same year."""
    start = HebrewDay(date.year, Month.TISHREI, 22)
    end = HebrewDay(date.year, Month.NISSAN, 15)
    return compare_ordinal(date, start) > 0 and compare_ordinal(date, end) < 0


def is_morid_hatal_recited(date: DateSnapshot) -> bool:
    return (
        not is_mashiv_haruach_recited(date)
        or is_mashiv_haruach_start_date(date)
        or is_mashiv_haruach_end_date(date)
    )
