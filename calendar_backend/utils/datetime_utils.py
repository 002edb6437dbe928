"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the application.
Every timestamp the service stores or compares is a timezone-aware UTC
datetime; naive values coming from clients or from PyMongo are treated
as UTC.

Functions:
- utc_now(): current UTC time (timezone-aware)
- ensure_utc(): normalize a datetime into timezone-aware UTC
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)
