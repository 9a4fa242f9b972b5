"""Civil dates whose Hebrew date and weekday the tests rely on."""
from datetime import date

ROSH_HASHANA_5785 = date(2024, 10, 3)      # 1 Tishrei, Thursday
EREV_ROSH_HASHANA_5785 = date(2024, 10, 2)  # 29 Elul 5784, Wednesday
YOM_KIPPUR_5785 = date(2024, 10, 12)       # 10 Tishrei, Shabbos
SIMCHAS_TORAH_5785 = date(2024, 10, 25)    # 23 Tishrei, Friday
SEVEN_CHESHVAN_5785 = date(2024, 11, 8)    # Friday
PESACH_SHENI_5784 = date(2024, 5, 22)      # 14 Iyar, Wednesday
LAG_BAOMER_5784 = date(2024, 5, 26)        # 18 Iyar, Sunday
YOM_HAATZMAUT_5784 = date(2024, 5, 14)     # 6 Iyar, Tuesday (5 Iyar was a Monday)
SHABBOS_TISHA_BEAV_5782 = date(2022, 8, 6)  # 9 Av on Shabbos, fast pushed to Sunday
TAL_UMATAR_START_2024 = date(2024, 12, 5)  # Thursday
TAL_UMATAR_START_2023 = date(2023, 12, 6)  # Wednesday, year before a civil leap year
DAYS_IN_5785 = 355
