# tefila_rules/const.py
"""Option keys and defaults for the Tachanun customs."""

DOMAIN = "tefila_rules"

# ============ Tachanun customs ============
CONF_RECITED_END_OF_TISHREI = "tachanun_recited_end_of_tishrei"
CONF_RECITED_WEEK_AFTER_SHAVUOS = "tachanun_recited_week_after_shavuos"
CONF_RECITED_13_SIVAN_OUT_OF_ISRAEL = "tachanun_recited_13_sivan_out_of_israel"
CONF_RECITED_PESACH_SHENI = "tachanun_recited_pesach_sheni"
CONF_RECITED_15_IYAR_OUT_OF_ISRAEL = "tachanun_recited_15_iyar_out_of_israel"
CONF_RECITED_MINCHA_EREV_LAG_BAOMER = "tachanun_recited_mincha_erev_lag_baomer"
CONF_RECITED_SHIVAS_YEMEI_HAMILUIM = "tachanun_recited_shivas_yemei_hamiluim"
CONF_RECITED_WEEK_OF_HOD = "tachanun_recited_week_of_hod"
CONF_RECITED_WEEK_OF_PURIM = "tachanun_recited_week_of_purim"
CONF_RECITED_FRIDAYS = "tachanun_recited_fridays"
CONF_RECITED_SUNDAYS = "tachanun_recited_sundays"
CONF_RECITED_MINCHA_ALL_YEAR = "tachanun_recited_mincha_all_year"

DEFAULT_RECITED_END_OF_TISHREI = True
DEFAULT_RECITED_WEEK_AFTER_SHAVUOS = False
DEFAULT_RECITED_13_SIVAN_OUT_OF_ISRAEL = True
DEFAULT_RECITED_PESACH_SHENI = False
DEFAULT_RECITED_15_IYAR_OUT_OF_ISRAEL = True
DEFAULT_RECITED_MINCHA_EREV_LAG_BAOMER = False
DEFAULT_RECITED_SHIVAS_YEMEI_HAMILUIM = True
DEFAULT_RECITED_WEEK_OF_HOD = True
DEFAULT_RECITED_WEEK_OF_PURIM = True
DEFAULT_RECITED_FRIDAYS = True
DEFAULT_RECITED_SUNDAYS = True
DEFAULT_RECITED_MINCHA_ALL_YEAR = True

# ============ Calendar context ============
CONF_IS_IN_ISRAEL = "is_in_israel"
DEFAULT_IS_IN_ISRAEL = False
CONF_USE_MODERN_HOLIDAYS = "use_modern_holidays"
DEFAULT_USE_MODERN_HOLIDAYS = False
