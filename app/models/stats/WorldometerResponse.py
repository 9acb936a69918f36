from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class CountryStat(BaseModel):
    """Latest snapshot for one country, as served by /country and /top."""

    model_config = ConfigDict(populate_by_name=True)

    country_code: Optional[str] = Field(default=None, alias="countryCode")
    country: str
    total_confirmed: Optional[int] = Field(default=None, alias="totalConfirmed")
    total_deaths: Optional[int] = Field(default=None, alias="totalDeaths")
    total_recovered: Optional[int] = Field(default=None, alias="totalRecovered")
    daily_confirmed: Optional[int] = Field(default=None, alias="dailyConfirmed")
    daily_deaths: Optional[int] = Field(default=None, alias="dailyDeaths")
    active_cases: Optional[int] = Field(default=None, alias="activeCases")
    total_critical: Optional[int] = Field(default=None, alias="totalCritical")
    total_confirmed_per_million: Optional[int] = Field(
        default=None, alias="totalConfirmedPerMillionPopulation"
    )
    fatality_rate: Optional[float] = Field(
        default=None, alias="FR", description="Deaths per 100 confirmed cases"
    )
    recovery_rate: Optional[float] = Field(
        default=None, alias="PR", description="Recoveries per 100 confirmed cases"
    )
    last_updated: datetime = Field(alias="lastUpdated")


class GlobalStat(BaseModel):
    """Latest worldwide totals."""

    model_config = ConfigDict(populate_by_name=True)

    total_confirmed: Optional[int] = Field(default=None, alias="totalConfirmed")
    total_deaths: Optional[int] = Field(default=None, alias="totalDeaths")
    total_recovered: Optional[int] = Field(default=None, alias="totalRecovered")
    total_new_cases: Optional[int] = Field(default=None, alias="totalNewCases")
    total_new_deaths: Optional[int] = Field(default=None, alias="totalNewDeaths")
    total_active_cases: Optional[int] = Field(default=None, alias="totalActiveCases")
    total_cases_per_million: Optional[int] = Field(
        default=None, alias="totalCasesPerMillionPop"
    )
    created: datetime
