"""
Shared fixtures for the rule tests.

``make_snapshot`` builds synthetic DateSnapshots so each rule can be pinned down
without depending on which weekday a date happens to fall on; provider fixtures
give real pyluach-backed snapshots.
"""

import pytest

from tefila_rules import DateSnapshot, HebrewCalendarProvider, Holiday, Month, Weekday
from tefila_rules.tefila_lib import holidays


@pytest.fixture
def make_snapshot():
    """
    Factory for synthetic snapshots. Holiday flags are derived from ``holiday``
    unless given explicitly.
    """

    def _make(
        month=Month.TISHREI,
        day=25,
        weekday=Weekday.TUESDAY,
        *,
        year=5785,
        is_leap_year=False,
        in_israel=False,
        use_modern_holidays=False,
        holiday=Holiday.NONE,
        elapsed=0,
        **flags,
    ):
        fields = dict(
            is_yom_tov=holidays.is_yom_tov(holiday),
            is_erev_yom_tov=holidays.is_erev_yom_tov(holiday, month, day),
            is_taanis=holidays.is_taanis(holiday),
            is_rosh_chodesh=holidays.is_rosh_chodesh(month, day),
            is_isru_chag=holiday == Holiday.ISRU_CHAG,
        )
        fields.update(flags)
        return DateSnapshot(
            year=year,
            month=month,
            day=day,
            weekday=weekday,
            is_leap_year=is_leap_year,
            in_israel=in_israel,
            use_modern_holidays=use_modern_holidays,
            holiday=holiday,
            tekufas_tishrei_elapsed_days=elapsed,
            **fields,
        )

    return _make


@pytest.fixture
def diaspora():
    return HebrewCalendarProvider(in_israel=False)


@pytest.fixture
def israel():
    return HebrewCalendarProvider(in_israel=True)
