from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import DEFAULT_TOP_LIMIT
from app.core.errors import format_validation_errors
from app.database import get_db
from app.models.stats import CountryStat, CountryStatsQuery, GlobalStat
from app.api.worldometer_utils import get_country_stats, get_global_stats

router = APIRouter()


def build_stats_query(**params) -> CountryStatsQuery:
    """Validate raw query-string values, turning failures into a 400."""
    # empty values mean "not given", as with a missing parameter
    params = {name: value for name, value in params.items() if value not in (None, "")}
    try:
        return CountryStatsQuery(**params)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=format_validation_errors(e.errors()),
        )


def country_query(
    countryCode: Optional[str] = Query(
        default=None, description="Optional countryCode to retrieve the stats for"
    ),
) -> CountryStatsQuery:
    return build_stats_query(countryCode=countryCode)


def top_query(
    limit: Optional[str] = Query(
        default=None,
        description=f"Limit to top N countries to return (default {DEFAULT_TOP_LIMIT})",
    ),
) -> CountryStatsQuery:
    return build_stats_query(limit=limit)


@router.get(
    "/country",
    status_code=status.HTTP_200_OK,
    response_model=list[CountryStat],
    summary="All country or country-specific stats",
)
async def get_country_stats_endpoint(
    query: CountryStatsQuery = Depends(country_query),
    db: AsyncSession = Depends(get_db),
):
    """
    GET /v3/stats/worldometer/country - Latest worldometer stats per country

    Returns every country, or only the one matching countryCode, based on
    the newest worldometer snapshot.

    Response:
        [
            {
                "countryCode": "CN",
                "country": "China",
                "totalConfirmed": 81008,
                "totalDeaths": 3255,
                ...
                "FR": 4.0181,
                "PR": 88.5592,
                "lastUpdated": "2020-03-21T04:00:12"
            }
        ]
    """
    stats = await get_country_stats(db, country_code=query.country_code, limit=query.limit)
    return JSONResponse(
        content=[stat.model_dump(mode="json", by_alias=True) for stat in stats]
    )


@router.get(
    "/global",
    status_code=status.HTTP_200_OK,
    response_model=GlobalStat,
    summary="Global stats",
    responses={404: {"description": "No global stats available"}},
)
async def get_global_stats_endpoint(db: AsyncSession = Depends(get_db)):
    """
    GET /v3/stats/worldometer/global - Global stats

    Returns the latest worldwide totals, used in the home and analytics page.

    Response:
        {
            "totalConfirmed": 276113,
            "totalDeaths": 11402,
            "totalRecovered": 91952,
            "totalNewCases": 562,
            "totalNewDeaths": 23,
            "totalActiveCases": 172759,
            "totalCasesPerMillionPop": 35,
            "created": "2020-03-21T13:00:13"
        }
    """
    stats = await get_global_stats(db)
    if stats is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="No global stats available"
        )
    return JSONResponse(content=stats.model_dump(mode="json", by_alias=True))


@router.get(
    "/top",
    status_code=status.HTTP_200_OK,
    response_model=list[CountryStat],
    summary="Top N countries",
)
async def get_top_countries_endpoint(
    query: CountryStatsQuery = Depends(top_query),
    db: AsyncSession = Depends(get_db),
):
    """
    GET /v3/stats/worldometer/top - Top N countries by confirmed cases

    Query Parameters:
        - limit (int, default=999): number of countries to return, >= 0
    """
    stats = await get_country_stats(db, limit=query.limit)
    return JSONResponse(
        content=[stat.model_dump(mode="json", by_alias=True) for stat in stats]
    )
