from app.models.stats.WorldometerResponse import CountryStat, GlobalStat
from app.models.stats.CountryStatsQuery import CountryStatsQuery

__all__ = ["CountryStat", "GlobalStat", "CountryStatsQuery"]
