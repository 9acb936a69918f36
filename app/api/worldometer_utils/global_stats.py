"""
Global Stats: newest row of worldometers_total_sum.
"""

from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.db.WorldometerTotalSum import WorldometerTotalSum
from app.models.stats import GlobalStat
from app.api.worldometer_utils.rates import truncate


async def get_global_stats(db: AsyncSession) -> Optional[GlobalStat]:
    """
    Returns the aggregate row whose last_updated equals the table maximum,
    or None when the table is empty.
    """
    latest = select(func.max(WorldometerTotalSum.last_updated)).scalar_subquery()
    query = (
        select(WorldometerTotalSum)
        .where(WorldometerTotalSum.last_updated == latest)
        .order_by(WorldometerTotalSum.id.desc())
        .limit(1)
    )

    result = await db.execute(query)
    row = result.scalar_one_or_none()
    if row is None:
        return None

    return GlobalStat(
        total_confirmed=row.total_cases,
        total_deaths=row.total_deaths,
        total_recovered=row.total_recovered,
        total_new_cases=row.new_cases,
        total_new_deaths=row.new_deaths,
        total_active_cases=row.active_cases,
        total_cases_per_million=truncate(row.total_cases_per_million_pop),
        created=row.last_updated,
    )
