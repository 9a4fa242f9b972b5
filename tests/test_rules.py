# tests/test_rules.py

from datetime import timedelta

import pytest
import voluptuous as vol
from pyluach import dates

from tefila_rules import HebrewCalendarProvider, RuleConfiguration, TefilaRules, Weekday
from tefila_rules import const

from .known_dates import (
    DAYS_IN_5785,
    EREV_ROSH_HASHANA_5785,
    PESACH_SHENI_5784,
    ROSH_HASHANA_5785,
    SEVEN_CHESHVAN_5785,
    TAL_UMATAR_START_2024,
)


@pytest.fixture
def rules():
    return TefilaRules()


def test_defaults(rules):
    assert not rules.provider.in_israel
    assert not rules.provider.use_modern_holidays
    assert rules.config == RuleConfiguration()


def test_from_options_splits_context_and_customs():
    rules = TefilaRules.from_options(
        {
            const.CONF_IS_IN_ISRAEL: True,
            const.CONF_USE_MODERN_HOLIDAYS: True,
            const.CONF_RECITED_SUNDAYS: False,
        }
    )
    assert rules.provider.in_israel
    assert rules.provider.use_modern_holidays
    assert rules.config == RuleConfiguration(recited_sundays=False)


def test_from_options_rejects_unknown_keys():
    with pytest.raises(vol.Invalid):
        TefilaRules.from_options({"candlelighting_offset": 18})


def test_with_config_keeps_provider(rules):
    changed = rules.with_config(recited_mincha_all_year=False)
    assert changed.provider is rules.provider
    assert changed.config.recited_mincha_all_year is False
    assert rules.config.recited_mincha_all_year is True


def test_mincha_before_erev_rosh_hashana(rules):
    the_day_before = EREV_ROSH_HASHANA_5785 - timedelta(days=1)
    assert rules.is_tachanun_recited_shacharis(the_day_before)
    assert rules.is_tachanun_recited_mincha(the_day_before)
    assert not rules.is_tachanun_recited_shacharis(EREV_ROSH_HASHANA_5785)
    assert not rules.is_tachanun_recited_mincha(EREV_ROSH_HASHANA_5785)


def test_mincha_before_pesach_sheni(rules):
    the_day_before = PESACH_SHENI_5784 - timedelta(days=1)
    assert rules.is_tachanun_recited_mincha(the_day_before)


def test_accepts_pyluach_and_snapshots(rules):
    heb = dates.HebrewDate.from_pydate(TAL_UMATAR_START_2024)
    snap = rules.provider.snapshot(TAL_UMATAR_START_2024)
    assert rules.is_vesein_tal_umatar_start_date(heb)
    assert rules.is_vesein_tal_umatar_start_date(snap)
    assert rules.is_vesein_tal_umatar_start_date(TAL_UMATAR_START_2024)


def test_snapshot_from_another_context_is_rederived():
    israel_rules = TefilaRules(HebrewCalendarProvider(in_israel=True))
    diaspora_snap = HebrewCalendarProvider().snapshot(SEVEN_CHESHVAN_5785)
    assert not TefilaRules().is_vesein_tal_umatar_recited(diaspora_snap)
    assert israel_rules.is_vesein_tal_umatar_recited(diaspora_snap)
    assert israel_rules.is_vesein_tal_umatar_start_date(diaspora_snap)


def test_summary_keys_and_values(rules):
    flags = rules.summary(TAL_UMATAR_START_2024)
    assert set(flags) == {
        "tachanun_recited_shacharis",
        "tachanun_recited_mincha",
        "vesein_tal_umatar_start_date",
        "vesein_tal_umatar_starting_tonight",
        "vesein_tal_umatar_recited",
        "vesein_beracha_recited",
        "mashiv_haruach_start_date",
        "mashiv_haruach_end_date",
        "mashiv_haruach_recited",
        "morid_hatal_recited",
    }
    assert flags["vesein_tal_umatar_start_date"]
    assert flags["vesein_tal_umatar_recited"]
    assert not flags["vesein_beracha_recited"]
    assert flags["mashiv_haruach_recited"]
    assert not flags["morid_hatal_recited"]


def test_year_long_tachanun_properties(rules):
    for offset in range(DAYS_IN_5785):
        day = ROSH_HASHANA_5785 + timedelta(days=offset)
        snap = rules.provider.snapshot(day)
        shacharis = rules.is_tachanun_recited_shacharis(snap)
        mincha = rules.is_tachanun_recited_mincha(snap)

        if snap.weekday == Weekday.SATURDAY:
            assert not shacharis and not mincha
        if snap.weekday == Weekday.FRIDAY:
            assert not mincha
        if snap.month == 1:
            assert not shacharis
        # Mincha never adds Tachanun where Shacharis omits it
        assert shacharis or not mincha
