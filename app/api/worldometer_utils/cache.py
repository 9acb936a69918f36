"""
In-memory response cache for the stats endpoints.

Cache Configuration:
- TTL from STATS_CACHE_TTL_SECONDS (5 minutes by default)
- Cache key is the request signature: method, path and sorted query string
- At most STATS_CACHE_MAX_ENTRIES entries; expired ones are purged on write
- Stores the rendered response body so repeated hits are byte-identical
- Uses monotonic() for TTL comparison (immune to system clock changes)
"""

from time import monotonic
from urllib.parse import urlencode

from fastapi import Request, Response, status

from app.core.config import STATS_CACHE_TTL_SECONDS, STATS_CACHE_MAX_ENTRIES
from app.core.logging import get_logger

logger = get_logger(__name__)

CACHED_PATH_PREFIXES = ("/v3/stats/",)

# Cache structure: { request_key: (timestamp_monotonic, body_bytes) }
_response_cache: dict[str, tuple[float, bytes]] = {}


def request_cache_key(request: Request) -> str:
    query = urlencode(sorted(request.query_params.multi_items()))
    return f"{request.method}:{request.url.path}?{query}"


def get_cached_response(key: str, ttl_seconds: int = STATS_CACHE_TTL_SECONDS) -> bytes | None:
    """
    Retrieve a cached body if it exists and is within TTL.

    Expired entries are dropped on read.
    """
    cached = _response_cache.get(key)
    if cached is None:
        return None
    if monotonic() - cached[0] <= ttl_seconds:
        return cached[1]
    _response_cache.pop(key, None)
    return None


def purge_expired(ttl_seconds: int = STATS_CACHE_TTL_SECONDS) -> None:
    now = monotonic()
    expired = [
        key for key, (stored_at, _) in _response_cache.items()
        if now - stored_at > ttl_seconds
    ]
    for key in expired:
        del _response_cache[key]


def cache_response(
    key: str,
    body: bytes,
    ttl_seconds: int = STATS_CACHE_TTL_SECONDS,
    max_entries: int = STATS_CACHE_MAX_ENTRIES,
) -> None:
    """
    Store a response body with the current timestamp.

    Expired entries are purged first; if the cache is still full the oldest
    entries are evicted (dicts keep insertion order, and a re-stored key is
    moved to the end).
    """
    purge_expired(ttl_seconds)
    _response_cache.pop(key, None)
    while _response_cache and len(_response_cache) >= max_entries:
        del _response_cache[next(iter(_response_cache))]
    _response_cache[key] = (monotonic(), body)


def cache_size() -> int:
    return len(_response_cache)


def clear_cache() -> None:
    """Clear all cached responses."""
    _response_cache.clear()


async def cache_stats_responses(request: Request, call_next):
    """
    Cache-or-compute for GET requests under the stats prefixes.

    A hit short-circuits the handler. On a miss the handler runs and its body
    is stored, but only for 200 responses so errors are retried next time.
    """
    if request.method != "GET" or not request.url.path.startswith(CACHED_PATH_PREFIXES):
        return await call_next(request)

    key = request_cache_key(request)
    cached = get_cached_response(key)
    if cached is not None:
        logger.debug("cache hit", extra={"cache_key": key})
        return Response(
            content=cached,
            media_type="application/json",
            headers={"X-Cache": "HIT"},
        )

    response = await call_next(request)
    body = b"".join([chunk async for chunk in response.body_iterator])

    if response.status_code == status.HTTP_200_OK:
        cache_response(key, body)

    headers = dict(response.headers)
    headers["X-Cache"] = "MISS"
    return Response(
        content=body,
        status_code=response.status_code,
        headers=headers,
        media_type=response.media_type,
    )
