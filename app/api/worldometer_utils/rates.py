from typing import Optional


def percentage_of(part: Optional[int], total: Optional[int]) -> Optional[float]:
    """
    part / total * 100, rounded to 4 decimals.

    Returns None when total is zero or missing, so a country with no
    confirmed cases serializes FR/PR as null instead of NaN.
    """
    if not total or part is None:
        return None
    return round(part / total * 100, 4)


def truncate(value: Optional[float]) -> Optional[int]:
    return int(value) if value is not None else None
