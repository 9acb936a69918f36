from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from app.core.config import DEFAULT_TOP_LIMIT

# largest value a 32-bit signed LIMIT accepts on every backend
MAX_LIMIT = 2**31 - 1


class CountryStatsQuery(BaseModel):
    """Filters for the country stats query, validated once at the HTTP boundary."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    country_code: Optional[str] = Field(
        default=None,
        alias="countryCode",
        pattern=r"^[A-Za-z]{2,3}$",
        description="ISO country code, e.g. CN",
    )
    limit: int = Field(default=DEFAULT_TOP_LIMIT, ge=0, le=MAX_LIMIT)

    @field_validator("country_code")
    @classmethod
    def normalize_country_code(cls, value: Optional[str]) -> Optional[str]:
        return value.upper() if value else value
