"""
Country Stats: latest snapshot per country.

Picks the newest worldometers row for every country, attaches the ISO code
from apps_countries and derives fatality/recovery rates.
"""

from typing import Optional, Sequence

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import DEFAULT_TOP_LIMIT, EXCLUDED_COUNTRIES
from app.models.db.Worldometer import Worldometer
from app.models.db.AppsCountry import AppsCountry
from app.models.stats import CountryStat
from app.api.worldometer_utils.rates import percentage_of, truncate


async def get_country_stats(
    db: AsyncSession,
    country_code: Optional[str] = None,
    limit: int = DEFAULT_TOP_LIMIT,
    excluded_countries: Sequence[str] = EXCLUDED_COUNTRIES,
) -> list[CountryStat]:
    """
    Latest snapshot per country, ordered by total cases descending.

    SQL Logic:
    - Subquery ranks each country's rows by last_updated DESC (id DESC breaks
      ties between snapshots sharing a timestamp), skipping the excluded names
    - Outer query keeps rank 1 only, so every country appears exactly once
      before LIMIT is applied
    - LEFT JOIN apps_countries on alias; countries without metadata keep a
      NULL code
    - Optional code filter, then ORDER BY total_cases DESC and LIMIT

    When a country code is given at most one country is returned.
    """
    ranked_query = select(
        Worldometer,
        func.row_number()
        .over(
            partition_by=Worldometer.country,
            order_by=(Worldometer.last_updated.desc(), Worldometer.id.desc()),
        )
        .label("snapshot_rank"),
    )
    if excluded_countries:
        ranked_query = ranked_query.where(
            Worldometer.country.notin_(list(excluded_countries))
        )
    ranked = ranked_query.subquery("ranked")

    if country_code:
        limit = min(limit, 1)

    query = (
        select(
            AppsCountry.country_code,
            ranked.c.country,
            ranked.c.total_cases,
            ranked.c.total_deaths,
            ranked.c.total_recovered,
            ranked.c.new_cases,
            ranked.c.new_deaths,
            ranked.c.active_cases,
            ranked.c.serious_critical_cases,
            ranked.c.total_cases_per_million_pop,
            ranked.c.last_updated,
        )
        .select_from(ranked)
        .outerjoin(AppsCountry, ranked.c.country == AppsCountry.country_alias)
        .where(ranked.c.snapshot_rank == 1)
    )
    if country_code:
        query = query.where(AppsCountry.country_code == country_code)

    query = query.order_by(
        ranked.c.total_cases.desc().nulls_last(), ranked.c.country
    ).limit(limit)

    result = await db.execute(query)

    return [
        CountryStat(
            country_code=row.country_code,
            country=row.country,
            total_confirmed=row.total_cases,
            total_deaths=row.total_deaths,
            total_recovered=row.total_recovered,
            daily_confirmed=row.new_cases,
            daily_deaths=row.new_deaths,
            active_cases=row.active_cases,
            total_critical=row.serious_critical_cases,
            total_confirmed_per_million=truncate(row.total_cases_per_million_pop),
            fatality_rate=percentage_of(row.total_deaths, row.total_cases),
            recovery_rate=percentage_of(row.total_recovered, row.total_cases),
            last_updated=row.last_updated,
        )
        for row in result.all()
    ]
