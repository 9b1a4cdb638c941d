#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from typing import Optional, Any
from datetime import date, datetime


def safe_int(value: Optional[Any], default: int = 0) -> int:
    """
    Safely convert value to int.

    Args:
        value: Value to convert.
        default: Default value if conversion fails or value is None.

    Returns:
        Integer value.
    """
    if value is None:
        return default

    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def safe_str(value: Optional[Any], default: str = "") -> str:
    """
    Safely convert value to string.

    Args:
        value: Value to convert.
        default: Default value if value is None.

    Returns:
        String value.
    """
    if value is None:
        return default
    return str(value)


def safe_datetime_iso(dt: Optional[Any]) -> Optional[str]:
    """
    Safely convert a date or datetime to ISO format string.

    Args:
        dt: date or datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    if isinstance(dt, (date, datetime)):
        return dt.isoformat()
    return str(dt)
