# tests/test_rain_prayer.py

from datetime import timedelta

import pytest

from tefila_rules import Month, Weekday
from tefila_rules import rain_prayer as rp

from .known_dates import (
    DAYS_IN_5785,
    ROSH_HASHANA_5785,
    SEVEN_CHESHVAN_5785,
    TAL_UMATAR_START_2023,
    TAL_UMATAR_START_2024,
)


# --- Vesein Tal Umatar start ---

def test_israel_start_on_7_cheshvan(make_snapshot):
    assert rp.is_vesein_tal_umatar_start_date(make_snapshot(Month.CHESHVAN, 7, in_israel=True))
    assert not rp.is_vesein_tal_umatar_start_date(make_snapshot(Month.CHESHVAN, 8, in_israel=True))
    assert rp.is_vesein_tal_umatar_starting_tonight(make_snapshot(Month.CHESHVAN, 6, in_israel=True))
    assert not rp.is_vesein_tal_umatar_starting_tonight(
        make_snapshot(Month.CHESHVAN, 7, in_israel=True)
    )


def test_israel_ignores_tekufah(make_snapshot):
    snap = make_snapshot(Month.KISLEV, 20, Weekday.WEDNESDAY, in_israel=True, elapsed=47)
    assert not rp.is_vesein_tal_umatar_start_date(snap)


@pytest.mark.parametrize(
    "weekday,elapsed,expected",
    [
        (Weekday.THURSDAY, 47, True),
        (Weekday.THURSDAY, 48, False),
        (Weekday.THURSDAY, 46, False),
        (Weekday.SUNDAY, 47, True),
        (Weekday.SUNDAY, 48, True),   # pushed off from Shabbos
        (Weekday.SATURDAY, 47, False),
    ],
)
def test_diaspora_start_date(make_snapshot, weekday, elapsed, expected):
    snap = make_snapshot(Month.KISLEV, 22, weekday, elapsed=elapsed)
    assert rp.is_vesein_tal_umatar_start_date(snap) is expected


@pytest.mark.parametrize(
    "weekday,elapsed,expected",
    [
        (Weekday.WEDNESDAY, 46, True),
        (Weekday.WEDNESDAY, 47, False),
        (Weekday.SATURDAY, 46, True),
        (Weekday.SATURDAY, 47, True),  # Motzei Shabbos after a Friday-night start
        (Weekday.FRIDAY, 46, False),
    ],
)
def test_diaspora_starting_tonight(make_snapshot, weekday, elapsed, expected):
    snap = make_snapshot(Month.KISLEV, 21, weekday, elapsed=elapsed)
    assert rp.is_vesein_tal_umatar_starting_tonight(snap) is expected


def test_diaspora_start_real_dates(diaspora):
    for start in (TAL_UMATAR_START_2024, TAL_UMATAR_START_2023):
        eve = start - timedelta(days=1)
        assert diaspora.snapshot(start).tekufas_tishrei_elapsed_days == 47
        assert diaspora.snapshot(eve).tekufas_tishrei_elapsed_days == 46
        assert rp.is_vesein_tal_umatar_start_date(diaspora.snapshot(start))
        assert rp.is_vesein_tal_umatar_starting_tonight(diaspora.snapshot(eve))
        assert rp.is_vesein_tal_umatar_recited(diaspora.snapshot(start))
        assert not rp.is_vesein_tal_umatar_recited(diaspora.snapshot(eve))


def test_israel_start_real_date(israel):
    snap = israel.snapshot(SEVEN_CHESHVAN_5785)
    assert (snap.month, snap.day) == (Month.CHESHVAN, 7)
    assert snap.weekday != Weekday.SATURDAY
    assert rp.is_vesein_tal_umatar_start_date(snap)
    assert rp.is_vesein_tal_umatar_starting_tonight(israel.snapshot(SEVEN_CHESHVAN_5785 - timedelta(days=1)))


# --- Vesein Tal Umatar season ---

@pytest.mark.parametrize(
    "month,day,in_israel,elapsed,expected",
    [
        (Month.NISSAN, 14, False, 0, True),
        (Month.NISSAN, 15, False, 0, False),
        (Month.ELUL, 29, False, 0, False),
        (Month.TISHREI, 25, True, 0, False),
        (Month.CHESHVAN, 6, True, 0, False),
        (Month.CHESHVAN, 7, True, 0, True),
        (Month.KISLEV, 1, True, 0, True),
        (Month.KISLEV, 20, False, 40, False),
        (Month.KISLEV, 27, False, 47, True),
        (Month.SHEVAT, 10, False, 100, True),
    ],
)
def test_tal_umatar_recited(make_snapshot, month, day, in_israel, elapsed, expected):
    snap = make_snapshot(month, day, in_israel=in_israel, elapsed=elapsed)
    assert rp.is_vesein_tal_umatar_recited(snap) is expected
    assert rp.is_vesein_beracha_recited(snap) is not expected


def test_tal_umatar_recited_in_adar_ii(make_snapshot):
    snap = make_snapshot(Month.ADAR_II, 5, year=5784, is_leap_year=True, elapsed=160)
    assert rp.is_vesein_tal_umatar_recited(snap)


# --- Mashiv Haruach / Morid Hatal ---

def test_mashiv_haruach_boundaries(make_snapshot):
    start = make_snapshot(Month.TISHREI, 22)
    end = make_snapshot(Month.NISSAN, 15)

    assert rp.is_mashiv_haruach_start_date(start)
    assert rp.is_mashiv_haruach_end_date(end)
    for boundary in (start, end):
        assert not rp.is_mashiv_haruach_recited(boundary)
        assert rp.is_morid_hatal_recited(boundary)


@pytest.mark.parametrize(
    "month,day,expected",
    [
        (Month.TISHREI, 21, False),
        (Month.TISHREI, 23, True),
        (Month.CHESHVAN, 1, True),
        (Month.ADAR, 14, True),
        (Month.NISSAN, 14, True),
        (Month.NISSAN, 16, False),
        (Month.SIVAN, 6, False),
        (Month.ELUL, 29, False),
    ],
)
def test_mashiv_haruach_follows_the_year_order(make_snapshot, month, day, expected):
    snap = make_snapshot(month, day)
    assert rp.is_mashiv_haruach_recited(snap) is expected
    assert rp.is_morid_hatal_recited(snap) is not expected


def test_mashiv_haruach_leap_year_adar_ii(make_snapshot):
    snap = make_snapshot(Month.ADAR_II, 29, year=5784, is_leap_year=True)
    assert rp.is_mashiv_haruach_recited(snap)


# --- whole-year properties ---

@pytest.mark.parametrize("provider_name", ["diaspora", "israel"])
def test_year_long_properties(request, provider_name):
    provider = request.getfixturevalue(provider_name)
    started = 0
    for offset in range(DAYS_IN_5785):
        snap = provider.snapshot(ROSH_HASHANA_5785 + timedelta(days=offset))
        assert snap.year == 5785

        assert rp.is_vesein_beracha_recited(snap) is not rp.is_vesein_tal_umatar_recited(snap)

        mashiv = rp.is_mashiv_haruach_recited(snap)
        morid = rp.is_morid_hatal_recited(snap)
        boundary = rp.is_mashiv_haruach_start_date(snap) or rp.is_mashiv_haruach_end_date(snap)
        if boundary:
            assert morid and not mashiv
        else:
            assert mashiv is not morid

        if rp.is_vesein_tal_umatar_start_date(snap):
            started += 1
    assert started == 1
