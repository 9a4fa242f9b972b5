# tefila_rules/tachanun.py
"""
When Tachanun is said at Shacharis and at Mincha.

Shacharis: Tachanun is said unless one of the omitting conditions below holds.
  • Shabbos, and (by custom) Sunday or Friday
  • All of Nissan
  • Tishrei from the 9th: to the end of the month, or (by custom) through the 21st
  • Sivan from Rosh Chodesh through the 12th (13th outside Israel by custom),
    or only through the 6th when it is said the week after Shavuos
  • Yom Tov and its erev; Pesach Sheni (and 15 Iyar outside Israel) by custom
  • Tisha B'Av, Isru Chag, Rosh Chodesh
  • Shivas Yemei Hamiluim (23 Adar on) and the week of Purim, by custom
  • Yom HaAtzmaut and Yom Yerushalayim where modern holidays are kept
  • The week of Hod (14–20 Iyar), by custom

Mincha: never where Shacharis already omits it, never on Friday, and not on the
day before a day that omits it, except the day before Erev Rosh Hashana, Erev
Yom Kippur and Pesach Sheni.
"""
from __future__ import annotations

import logging

from .config import DEFAULT_CONFIGURATION, RuleConfiguration
from .tefila_lib.helper import DateSnapshot
from .tefila_lib.hebrew import Month, Weekday
from .tefila_lib.holidays import Holiday

_LOGGER = logging.getLogger(__name__)

# Mincha keeps Tachanun on the day before these, although they omit it at Shacharis.
MINCHA_LOOKAHEAD_EXEMPT = {
    Holiday.EREV_ROSH_HASHANA,
    Holiday.EREV_YOM_KIPPUR,
    Holiday.PESACH_SHENI,
}


def _shacharis_omitted_because(date: DateSnapshot, cfg: RuleConfiguration) -> str | None:
    """Return the first reason Tachanun is omitted at Shacharis, or None."""
    day = date.day
    month = date.month
    wd = date.weekday
    # the Adar that holds Purim: Adar II in a leap year
    in_purim_month = month == (Month.ADAR_II if date.is_leap_year else Month.ADAR)

    if wd == Weekday.SATURDAY:
        return "shabbos"
    if wd == Weekday.SUNDAY and not cfg.recited_sundays:
        return "sunday"
    if wd == Weekday.FRIDAY and not cfg.recited_fridays:
        return "friday"
    if month == Month.NISSAN:
        return "nissan"
    if month == Month.TISHREI and (
        (not cfg.recited_end_of_tishrei and day > 8)
        or (cfg.recited_end_of_tishrei and 8 < day < 22)
    ):
        return "tishrei"
    if month == Month.SIVAN:
        last_omitted = 14 if (not date.in_israel and not cfg.recited_13_sivan_out_of_israel) else 13
        if (cfg.recited_week_after_shavuos and day < 7) or (
            not cfg.recited_week_after_shavuos and day < last_omitted
        ):
            return "sivan"
    # erev Yom Tov counts as Yom Tov here
    if date.is_yom_tov and (
        not date.is_taanis
        or (not cfg.recited_pesach_sheni and date.holiday == Holiday.PESACH_SHENI)
    ):
        return "yom_tov"
    # sfaika deyoma of Pesach Sheni
    if (
        not date.in_israel
        and not cfg.recited_pesach_sheni
        and not cfg.recited_15_iyar_out_of_israel
        and month == Month.IYAR
        and day == 15
    ):
        return "15_iyar"
    if date.holiday == Holiday.TISHA_BEAV:
        return "tisha_beav"
    if date.is_isru_chag:
        return "isru_chag"
    if date.is_rosh_chodesh:
        return "rosh_chodesh"
    if not cfg.recited_shivas_yemei_hamiluim and in_purim_month and day > 22:
        return "shivas_yemei_hamiluim"
    if not cfg.recited_week_of_purim and in_purim_month and 10 < day < 18:
        return "week_of_purim"
    if date.use_modern_holidays and date.holiday in (
        Holiday.YOM_HAATZMAUT,
        Holiday.YOM_YERUSHALAYIM,
    ):
        return "modern_holiday"
    if not cfg.recited_week_of_hod and month == Month.IYAR and 13 < day < 21:
        return "week_of_hod"
    return None


def is_recited_shacharis(
    date: DateSnapshot, config: RuleConfiguration = DEFAULT_CONFIGURATION
) -> bool:
    """Return True if Tachanun is said at Shacharis on ``date``."""
    reason = _shacharis_omitted_because(date, config)
    if reason is not None:
        _LOGGER.debug("No Tachanun at Shacharis on %s: %s", date.hebrew_day, reason)
        return False
    return True


def is_recited_mincha(
    date: DateSnapshot,
    tomorrow: DateSnapshot,
    config: RuleConfiguration = DEFAULT_CONFIGURATION,
) -> bool:
    """
    Return True if Tachanun is said at Mincha on ``date``.

    ``tomorrow`` is the provider's snapshot of the following day in the same
    Israel/modern-holiday context.
    """
    if not date.same_context(tomorrow):
        raise ValueError(
            f"Snapshots for {date.hebrew_day} and {tomorrow.hebrew_day} "
            "come from different calendar contexts"
        )

    if not config.recited_mincha_all_year:
        return False
    if date.weekday == Weekday.FRIDAY:
        return False
    if not is_recited_shacharis(date, config):
        return False
    if (
        not is_recited_shacharis(tomorrow, config)
        and tomorrow.holiday not in MINCHA_LOOKAHEAD_EXEMPT
    ):
        _LOGGER.debug("No Tachanun at Mincha on %s: omitted tomorrow", date.hebrew_day)
        return False
    if not config.recited_mincha_erev_lag_baomer and tomorrow.holiday == Holiday.LAG_BAOMER:
        return False
    return True
