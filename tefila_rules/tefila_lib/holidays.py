# tefila_rules/tefila_lib/holidays.py
"""
Holiday classification for a single Hebrew day.

Only one holiday is returned per day. Rosh Chodesh is not a holiday here; it is
a separate flag on the snapshot. Fasts that fall on Shabbos are moved the way
the calendar moves them (Tammuz, Av and Gedalyah to Sunday, Esther back to
Thursday). Yom HaShoah, Yom HaZikaron, Yom HaAtzmaut and Yom Yerushalayim are
only produced when modern holidays are in use.
"""
from __future__ import annotations

from enum import Enum

from .hebrew import Month, Weekday


class Holiday(Enum):
    NONE = "none"
    EREV_PESACH = "erev_pesach"
    PESACH = "pesach"
    CHOL_HAMOED_PESACH = "chol_hamoed_pesach"
    PESACH_SHENI = "pesach_sheni"
    EREV_SHAVUOS = "erev_shavuos"
    SHAVUOS = "shavuos"
    SEVENTEEN_OF_TAMMUZ = "seventeen_of_tammuz"
    TISHA_BEAV = "tisha_beav"
    TU_BEAV = "tu_beav"
    EREV_ROSH_HASHANA = "erev_rosh_hashana"
    ROSH_HASHANA = "rosh_hashana"
    FAST_OF_GEDALYAH = "fast_of_gedalyah"
    EREV_YOM_KIPPUR = "erev_yom_kippur"
    YOM_KIPPUR = "yom_kippur"
    EREV_SUCCOS = "erev_succos"
    SUCCOS = "succos"
    CHOL_HAMOED_SUCCOS = "chol_hamoed_succos"
    HOSHANA_RABBA = "hoshana_rabba"
    SHEMINI_ATZERES = "shemini_atzeres"
    SIMCHAS_TORAH = "simchas_torah"
    CHANUKAH = "chanukah"
    TENTH_OF_TEVES = "tenth_of_teves"
    TU_BESHVAT = "tu_beshvat"
    FAST_OF_ESTHER = "fast_of_esther"
    PURIM = "purim"
    SHUSHAN_PURIM = "shushan_purim"
    PURIM_KATAN = "purim_katan"
    SHUSHAN_PURIM_KATAN = "shushan_purim_katan"
    YOM_HASHOAH = "yom_hashoah"
    YOM_HAZIKARON = "yom_hazikaron"
    YOM_HAATZMAUT = "yom_haatzmaut"
    YOM_YERUSHALAYIM = "yom_yerushalayim"
    LAG_BAOMER = "lag_baomer"
    ISRU_CHAG = "isru_chag"


FAST_DAYS = {
    Holiday.SEVENTEEN_OF_TAMMUZ,
    Holiday.TISHA_BEAV,
    Holiday.YOM_KIPPUR,
    Holiday.FAST_OF_GEDALYAH,
    Holiday.TENTH_OF_TEVES,
    Holiday.FAST_OF_ESTHER,
}

EREV_YOM_TOV = {
    Holiday.EREV_PESACH,
    Holiday.EREV_SHAVUOS,
    Holiday.EREV_ROSH_HASHANA,
    Holiday.EREV_YOM_KIPPUR,
    Holiday.EREV_SUCCOS,
    Holiday.HOSHANA_RABBA,
}


def _nissan(day, wd, in_israel, modern):
    if day == 14:
        return Holiday.EREV_PESACH
    if day in (15, 21) or (not in_israel and day in (16, 22)):
        return Holiday.PESACH
    if 17 <= day <= 20 or (day == 16 and in_israel):
        return Holiday.CHOL_HAMOED_PESACH
    if (day == 22 and in_israel) or (day == 23 and not in_israel):
        return Holiday.ISRU_CHAG
    if modern and (
        (day == 26 and wd == Weekday.THURSDAY)
        or (day == 28 and wd == Weekday.MONDAY)
        or (day == 27 and wd not in (Weekday.SUNDAY, Weekday.FRIDAY))
    ):
        return Holiday.YOM_HASHOAH
    return Holiday.NONE


def _iyar(day, wd, modern):
    if modern and (
        (day == 4 and wd == Weekday.TUESDAY)
        or (day in (2, 3) and wd == Weekday.WEDNESDAY)
        or (day == 5 and wd == Weekday.MONDAY)
    ):
        return Holiday.YOM_HAZIKARON
    # 5 Iyar on Friday or Shabbos moves back to Thursday, on Monday forward to Tuesday
    if modern and (
        (day == 5 and wd == Weekday.WEDNESDAY)
        or (day in (3, 4) and wd == Weekday.THURSDAY)
        or (day == 6 and wd == Weekday.TUESDAY)
    ):
        return Holiday.YOM_HAATZMAUT
    if day == 14:
        return Holiday.PESACH_SHENI
    if day == 18:
        return Holiday.LAG_BAOMER
    if modern and day == 28:
        return Holiday.YOM_YERUSHALAYIM
    return Holiday.NONE


def _sivan(day, in_israel):
    if day == 5:
        return Holiday.EREV_SHAVUOS
    if day == 6 or (day == 7 and not in_israel):
        return Holiday.SHAVUOS
    if (day == 7 and in_israel) or (day == 8 and not in_israel):
        return Holiday.ISRU_CHAG
    return Holiday.NONE


def _tishrei(day, wd, in_israel):
    if day in (1, 2):
        return Holiday.ROSH_HASHANA
    if (day == 3 and wd != Weekday.SATURDAY) or (day == 4 and wd == Weekday.SUNDAY):
        return Holiday.FAST_OF_GEDALYAH
    if day == 9:
        return Holiday.EREV_YOM_KIPPUR
    if day == 10:
        return Holiday.YOM_KIPPUR
    if day == 14:
        return Holiday.EREV_SUCCOS
    if day == 15 or (day == 16 and not in_israel):
        return Holiday.SUCCOS
    if 17 <= day <= 20 or (day == 16 and in_israel):
        return Holiday.CHOL_HAMOED_SUCCOS
    if day == 21:
        return Holiday.HOSHANA_RABBA
    if day == 22:
        return Holiday.SHEMINI_ATZERES
    if day == 23 and not in_israel:
        return Holiday.SIMCHAS_TORAH
    if (day == 23 and in_israel) or (day == 24 and not in_israel):
        return Holiday.ISRU_CHAG
    return Holiday.NONE


def _purim_month(day, wd):
    # 13 Adar on Friday or Shabbos: the fast is pushed back to Thursday
    if (day in (11, 12) and wd == Weekday.THURSDAY) or (
        day == 13 and wd not in (Weekday.FRIDAY, Weekday.SATURDAY)
    ):
        return Holiday.FAST_OF_ESTHER
    if day == 14:
        return Holiday.PURIM
    if day == 15:
        return Holiday.SHUSHAN_PURIM
    return Holiday.NONE


def get_holiday(
    month: Month,
    day: int,
    weekday: Weekday,
    *,
    is_leap_year: bool,
    kislev_short: bool,
    in_israel: bool,
    use_modern_holidays: bool,
) -> Holiday:
    """Return the holiday (or Holiday.NONE) for one Hebrew day."""
    wd = weekday
    if month == Month.NISSAN:
        return _nissan(day, wd, in_israel, use_modern_holidays)
    if month == Month.IYAR:
        return _iyar(day, wd, use_modern_holidays)
    if month == Month.SIVAN:
        return _sivan(day, in_israel)
    if month == Month.TAMMUZ:
        if (day == 17 and wd != Weekday.SATURDAY) or (day == 18 and wd == Weekday.SUNDAY):
            return Holiday.SEVENTEEN_OF_TAMMUZ
    elif month == Month.AV:
        if (day == 9 and wd != Weekday.SATURDAY) or (day == 10 and wd == Weekday.SUNDAY):
            return Holiday.TISHA_BEAV
        if day == 15:
            return Holiday.TU_BEAV
    elif month == Month.ELUL:
        if day == 29:
            return Holiday.EREV_ROSH_HASHANA
    elif month == Month.TISHREI:
        return _tishrei(day, wd, in_israel)
    elif month == Month.KISLEV:
        if day >= 25:
            return Holiday.CHANUKAH
    elif month == Month.TEVES:
        if day in (1, 2) or (day == 3 and kislev_short):
            return Holiday.CHANUKAH
        if day == 10:
            return Holiday.TENTH_OF_TEVES
    elif month == Month.SHEVAT:
        if day == 15:
            return Holiday.TU_BESHVAT
    elif month == Month.ADAR:
        if not is_leap_year:
            return _purim_month(day, wd)
        if day == 14:
            return Holiday.PURIM_KATAN
        if day == 15:
            return Holiday.SHUSHAN_PURIM_KATAN
    elif month == Month.ADAR_II:
        return _purim_month(day, wd)
    return Holiday.NONE


def is_taanis(holiday: Holiday) -> bool:
    return holiday in FAST_DAYS


def is_erev_yom_tov(holiday: Holiday, month: Month, day: int) -> bool:
    """Erev Pesach/Shavuos/Rosh Hashana/Yom Kippur/Succos, Hoshana Rabba and erev Shvi'i shel Pesach."""
    return holiday in EREV_YOM_TOV or (
        holiday == Holiday.CHOL_HAMOED_PESACH and month == Month.NISSAN and day == 20
    )


def is_yom_tov(holiday: Holiday) -> bool:
    """
    True for any holiday day, its erev included. Fasts other than Yom Kippur
    and Isru Chag are not Yom Tov.
    """
    if holiday == Holiday.NONE or holiday == Holiday.ISRU_CHAG:
        return False
    if is_taanis(holiday) and holiday != Holiday.YOM_KIPPUR:
        return False
    return True


def is_rosh_chodesh(month: Month, day: int) -> bool:
    # Rosh Hashana is not Rosh Chodesh; Elul never has 30 days
    return (day == 1 and month != Month.TISHREI) or day == 30
