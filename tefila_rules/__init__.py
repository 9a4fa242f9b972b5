"""
Tachanun and rain-prayer rules for the Jewish calendar.

Keep this surface small: callers mostly need a provider, a configuration and
the rule functions re-exported here.
"""
from .config import DEFAULT_CONFIGURATION, OPTIONS_SCHEMA, RuleConfiguration
from .rain_prayer import (
    is_mashiv_haruach_end_date,
    is_mashiv_haruach_recited,
    is_mashiv_haruach_start_date,
    is_morid_hatal_recited,
    is_vesein_beracha_recited,
    is_vesein_tal_umatar_recited,
    is_vesein_tal_umatar_start_date,
    is_vesein_tal_umatar_starting_tonight,
)
from .rules import TefilaRules
from .tachanun import is_recited_mincha, is_recited_shacharis
from .tefila_lib.hebrew import HebrewDay, Month, Weekday, compare_ordinal
from .tefila_lib.helper import DateSnapshot, HebrewCalendarProvider
from .tefila_lib.holidays import Holiday

__all__ = [
    "DEFAULT_CONFIGURATION",
    "OPTIONS_SCHEMA",
    "RuleConfiguration",
    "TefilaRules",
    "DateSnapshot",
    "HebrewCalendarProvider",
    "HebrewDay",
    "Holiday",
    "Month",
    "Weekday",
    "compare_ordinal",
    "is_recited_shacharis",
    "is_recited_mincha",
    "is_vesein_tal_umatar_start_date",
    "is_vesein_tal_umatar_starting_tonight",
    "is_vesein_tal_umatar_recited",
    "is_vesein_beracha_recited",
    "is_mashiv_haruach_start_date",
    "is_mashiv_haruach_end_date",
    "is_mashiv_haruach_recited",
    "is_morid_hatal_recited",
]
