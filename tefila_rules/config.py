# tefila_rules/config.py
"""
Community customs that change when Tachanun is said.

A RuleConfiguration is a frozen value. Changing a custom means building a new
value with ``replace``; the rule functions never modify the one they are given.
Option mappings (as stored by a caller, keyed by the CONF_* names) are checked
with voluptuous before they are turned into a configuration.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Mapping

import voluptuous as vol

from .const import (
    CONF_RECITED_END_OF_TISHREI,
    CONF_RECITED_WEEK_AFTER_SHAVUOS,
    CONF_RECITED_13_SIVAN_OUT_OF_ISRAEL,
    CONF_RECITED_PESACH_SHENI,
    CONF_RECITED_15_IYAR_OUT_OF_ISRAEL,
    CONF_RECITED_MINCHA_EREV_LAG_BAOMER,
    CONF_RECITED_SHIVAS_YEMEI_HAMILUIM,
    CONF_RECITED_WEEK_OF_HOD,
    CONF_RECITED_WEEK_OF_PURIM,
    CONF_RECITED_FRIDAYS,
    CONF_RECITED_SUNDAYS,
    CONF_RECITED_MINCHA_ALL_YEAR,
    DEFAULT_RECITED_END_OF_TISHREI,
    DEFAULT_RECITED_WEEK_AFTER_SHAVUOS,
    DEFAULT_RECITED_13_SIVAN_OUT_OF_ISRAEL,
    DEFAULT_RECITED_PESACH_SHENI,
    DEFAULT_RECITED_15_IYAR_OUT_OF_ISRAEL,
    DEFAULT_RECITED_MINCHA_EREV_LAG_BAOMER,
    DEFAULT_RECITED_SHIVAS_YEMEI_HAMILUIM,
    DEFAULT_RECITED_WEEK_OF_HOD,
    DEFAULT_RECITED_WEEK_OF_PURIM,
    DEFAULT_RECITED_FRIDAYS,
    DEFAULT_RECITED_SUNDAYS,
    DEFAULT_RECITED_MINCHA_ALL_YEAR,
    CONF_IS_IN_ISRAEL,
    DEFAULT_IS_IN_ISRAEL,
    CONF_USE_MODERN_HOLIDAYS,
    DEFAULT_USE_MODERN_HOLIDAYS,
)

_LOGGER = logging.getLogger(__name__)

# option key -> RuleConfiguration attribute
_OPTION_FIELDS = {
    CONF_RECITED_END_OF_TISHREI: "recited_end_of_tishrei",
    CONF_RECITED_WEEK_AFTER_SHAVUOS: "recited_week_after_shavuos",
    CONF_RECITED_13_SIVAN_OUT_OF_ISRAEL: "recited_13_sivan_out_of_israel",
    CONF_RECITED_PESACH_SHENI: "recited_pesach_sheni",
    CONF_RECITED_15_IYAR_OUT_OF_ISRAEL: "recited_15_iyar_out_of_israel",
    CONF_RECITED_MINCHA_EREV_LAG_BAOMER: "recited_mincha_erev_lag_baomer",
    CONF_RECITED_SHIVAS_YEMEI_HAMILUIM: "recited_shivas_yemei_hamiluim",
    CONF_RECITED_WEEK_OF_HOD: "recited_week_of_hod",
    CONF_RECITED_WEEK_OF_PURIM: "recited_week_of_purim",
    CONF_RECITED_FRIDAYS: "recited_fridays",
    CONF_RECITED_SUNDAYS: "recited_sundays",
    CONF_RECITED_MINCHA_ALL_YEAR: "recited_mincha_all_year",
}

TACHANUN_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_RECITED_END_OF_TISHREI, default=DEFAULT_RECITED_END_OF_TISHREI): bool,
        vol.Optional(CONF_RECITED_WEEK_AFTER_SHAVUOS, default=DEFAULT_RECITED_WEEK_AFTER_SHAVUOS): bool,
        vol.Optional(CONF_RECITED_13_SIVAN_OUT_OF_ISRAEL, default=DEFAULT_RECITED_13_SIVAN_OUT_OF_ISRAEL): bool,
        vol.Optional(CONF_RECITED_PESACH_SHENI, default=DEFAULT_RECITED_PESACH_SHENI): bool,
        vol.Optional(CONF_RECITED_15_IYAR_OUT_OF_ISRAEL, default=DEFAULT_RECITED_15_IYAR_OUT_OF_ISRAEL): bool,
        vol.Optional(CONF_RECITED_MINCHA_EREV_LAG_BAOMER, default=DEFAULT_RECITED_MINCHA_EREV_LAG_BAOMER): bool,
        vol.Optional(CONF_RECITED_SHIVAS_YEMEI_HAMILUIM, default=DEFAULT_RECITED_SHIVAS_YEMEI_HAMILUIM): bool,
        vol.Optional(CONF_RECITED_WEEK_OF_HOD, default=DEFAULT_RECITED_WEEK_OF_HOD): bool,
        vol.Optional(CONF_RECITED_WEEK_OF_PURIM, default=DEFAULT_RECITED_WEEK_OF_PURIM): bool,
        vol.Optional(CONF_RECITED_FRIDAYS, default=DEFAULT_RECITED_FRIDAYS): bool,
        vol.Optional(CONF_RECITED_SUNDAYS, default=DEFAULT_RECITED_SUNDAYS): bool,
        vol.Optional(CONF_RECITED_MINCHA_ALL_YEAR, default=DEFAULT_RECITED_MINCHA_ALL_YEAR): bool,
    }
)

# Customs plus the calendar context the provider is built with.
OPTIONS_SCHEMA = TACHANUN_SCHEMA.extend(
    {
        vol.Optional(CONF_IS_IN_ISRAEL, default=DEFAULT_IS_IN_ISRAEL): bool,
        vol.Optional(CONF_USE_MODERN_HOLIDAYS, default=DEFAULT_USE_MODERN_HOLIDAYS): bool,
    }
)


@dataclass(frozen=True)
class RuleConfiguration:
    """Which customs of saying Tachanun are accepted.

    Each attribute is True when Tachanun IS said in the situation it names.
    """

    recited_end_of_tishrei: bool = DEFAULT_RECITED_END_OF_TISHREI
    recited_week_after_shavuos: bool = DEFAULT_RECITED_WEEK_AFTER_SHAVUOS
    recited_13_sivan_out_of_israel: bool = DEFAULT_RECITED_13_SIVAN_OUT_OF_ISRAEL
    recited_pesach_sheni: bool = DEFAULT_RECITED_PESACH_SHENI
    recited_15_iyar_out_of_israel: bool = DEFAULT_RECITED_15_IYAR_OUT_OF_ISRAEL
    recited_mincha_erev_lag_baomer: bool = DEFAULT_RECITED_MINCHA_EREV_LAG_BAOMER
    recited_shivas_yemei_hamiluim: bool = DEFAULT_RECITED_SHIVAS_YEMEI_HAMILUIM
    recited_week_of_hod: bool = DEFAULT_RECITED_WEEK_OF_HOD
    recited_week_of_purim: bool = DEFAULT_RECITED_WEEK_OF_PURIM
    recited_fridays: bool = DEFAULT_RECITED_FRIDAYS
    recited_sundays: bool = DEFAULT_RECITED_SUNDAYS
    recited_mincha_all_year: bool = DEFAULT_RECITED_MINCHA_ALL_YEAR

    def replace(self, **changes: bool) -> "RuleConfiguration":
        """Return a copy with the given customs changed."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "RuleConfiguration":
        """
        Build a configuration from an option mapping keyed by the CONF_* names.

        Missing keys take their defaults. Unknown keys or non-boolean values
        raise ``vol.MultipleInvalid``.
        """
        data = TACHANUN_SCHEMA(dict(options or {}))
        cfg = cls(**{attr: data[key] for key, attr in _OPTION_FIELDS.items()})
        _LOGGER.debug("Tachanun customs from options: %s", cfg)
        return cfg

    def as_options(self) -> dict[str, bool]:
        """Return the option mapping form of this configuration."""
        return {key: getattr(self, attr) for key, attr in _OPTION_FIELDS.items()}


DEFAULT_CONFIGURATION = RuleConfiguration()
