#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

import uuid
from typing import Optional, Any
from datetime import datetime

from fastapi import HTTPException

from core.utils import ensure_utc


def safe_int(value: Optional[Any], default: int = 0) -> int:
    """int(value), or default when value is None or not numeric."""
    if value is None:
        return default
    
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def safe_str(value: Optional[Any], default: str = "") -> str:
    """str(value), or default when value is None."""
    if value is None:
        return default
    return str(value)


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string (UTC).
    
    Args:
        dt: Datetime object.
    
    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return ensure_utc(dt).isoformat()


def validate_uuid(value: str, name: str = "id") -> uuid.UUID:
    """Parse a path parameter as a UUID, 400 if it is not one."""
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {name} format: {value}. Must be a valid UUID."
        )
