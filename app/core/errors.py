from typing import Any, Sequence


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """Flatten pydantic error dicts into 'field: message; ...'."""
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in errors
    )
