# tefila_rules/rules.py
"""TefilaRules: one calendar provider plus one set of customs."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from . import rain_prayer, tachanun
from .config import OPTIONS_SCHEMA, RuleConfiguration
from .const import CONF_IS_IN_ISRAEL, CONF_USE_MODERN_HOLIDAYS
from .tefila_lib.helper import DateSnapshot, HebrewCalendarProvider

_LOGGER = logging.getLogger(__name__)


class TefilaRules:
    """
    Answers the per-day questions of the rule modules for any accepted date.

    Dates may be given as DateSnapshots, ``datetime.date`` objects or pyluach
    dates; anything but a snapshot from this provider's context is converted
    through the provider first.
    """

    def __init__(
        self,
        provider: HebrewCalendarProvider | None = None,
        config: RuleConfiguration | None = None,
    ) -> None:
        self.provider = provider or HebrewCalendarProvider()
        self.config = config or RuleConfiguration()

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "TefilaRules":
        """Build provider and customs from one option mapping (see OPTIONS_SCHEMA)."""
        data = OPTIONS_SCHEMA(dict(options or {}))
        provider = HebrewCalendarProvider(
            in_israel=data.pop(CONF_IS_IN_ISRAEL),
            use_modern_holidays=data.pop(CONF_USE_MODERN_HOLIDAYS),
        )
        return cls(provider, RuleConfiguration.from_options(data))

    def with_config(self, **changes: bool) -> "TefilaRules":
        """Return rules for the same provider with some customs changed."""
        return TefilaRules(self.provider, self.config.replace(**changes))

    def _snapshot(self, date) -> DateSnapshot:
        if (
            isinstance(date, DateSnapshot)
            and date.in_israel == self.provider.in_israel
            and date.use_modern_holidays == self.provider.use_modern_holidays
        ):
            return date
        return self.provider.snapshot(date)

    # ---------- Tachanun ----------

    def is_tachanun_recited_shacharis(self, date) -> bool:
        return tachanun.is_recited_shacharis(self._snapshot(date), self.config)

    def is_tachanun_recited_mincha(self, date) -> bool:
        today = self._snapshot(date)
        tomorrow = self.provider.advance_by_days(today, 1)
        return tachanun.is_recited_mincha(today, tomorrow, self.config)

    # ---------- Vesein Tal Umatar / Vesein Beracha ----------

    def is_vesein_tal_umatar_start_date(self, date) -> bool:
        return rain_prayer.is_vesein_tal_umatar_start_date(self._snapshot(date))

    def is_vesein_tal_umatar_starting_tonight(self, date) -> bool:
        return rain_prayer.is_vesein_tal_umatar_starting_tonight(self._snapshot(date))

    def is_vesein_tal_umatar_recited(self, date) -> bool:
        return rain_prayer.is_vesein_tal_umatar_recited(self._snapshot(date))

    def is_vesein_beracha_recited(self, date) -> bool:
        return rain_prayer.is_vesein_beracha_recited(self._snapshot(date))

    # ---------- Mashiv Haruach / Morid Hatal ----------

    def is_mashiv_haruach_start_date(self, date) -> bool:
        return rain_prayer.is_mashiv_haruach_start_date(self._snapshot(date))

    def is_mashiv_haruach_end_date(self, date) -> bool:
        return rain_prayer.is_mashiv_haruach_end_date(self._snapshot(date))

    def is_mashiv_haruach_recited(self, date) -> bool:
        return rain_prayer.is_mashiv_haruach_recited(self._snapshot(date))

    def is_morid_hatal_recited(self, date) -> bool:
        return rain_prayer.is_morid_hatal_recited(self._snapshot(date))

    def summary(self, date) -> dict[str, bool]:
        """Every flag above for one day, keyed by method name without ``is_``."""
        snap = self._snapshot(date)
        names = [
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
        ]
        flags = {name: getattr(self, f"is_{name}")(snap) for name in names}
        _LOGGER.debug("Tefila summary for %s: %s", snap.hebrew_day, flags)
        return flags
