"""Utility functions."""
from typing import Optional


def to_int(s: Optional[str]) -> Optional[int]:
    """Convert string to int, returning None if conversion fails."""
    try:
        return int(s) if s is not None else None
    except (TypeError, ValueError):
        return None


def to_float(s: Optional[str]) -> Optional[float]:
    """Convert string to float, returning None if conversion fails."""
    try:
        return float(s) if s is not None else None
    except (TypeError, ValueError):
        return None


def to_seconds(value: int, unit: Optional[str]) -> int:
    """Convert a duration to seconds. Units starting with 'm' are minutes."""
    if unit and unit.strip().lower().startswith("m"):
        return value * 60
    return value
