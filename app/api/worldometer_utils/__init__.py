"""
Worldometer utilities package.

Re-exports the response cache and the query functions for convenient importing.
"""

# Cache
from app.api.worldometer_utils.cache import (
    get_cached_response,
    cache_response,
    cache_size,
    clear_cache,
    cache_stats_responses,
)

# Queries
from app.api.worldometer_utils.country_stats import get_country_stats
from app.api.worldometer_utils.global_stats import get_global_stats

__all__ = [
    # Cache
    "get_cached_response",
    "cache_response",
    "cache_size",
    "clear_cache",
    "cache_stats_responses",
    # Queries
    "get_country_stats",
    "get_global_stats",
]
