from typing import Optional


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Normalize optional natural keys: whitespace-only or empty means absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def reject_null(value, field_name: str):
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value
