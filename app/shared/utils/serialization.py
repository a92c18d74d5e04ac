"""Conversion of application DTOs to JSON-compatible cache payloads.

Cached reads return the same shape on a hit and on a miss: fetch closures
convert DTOs with to_cache_payload() before the gateway stores them, so a
value read back from Redis is indistinguishable from a freshly fetched one.
"""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from app.shared.utils.datetime import ensure_utc


def to_cache_payload(value: Any) -> Any:
    """Return value as plain dicts/lists/scalars (datetimes as ISO strings, enums as values)."""
    if isinstance(value, Enum):
        return value.value
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, datetime):
        return ensure_utc(value).isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_cache_payload(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {str(k): to_cache_payload(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_cache_payload(v) for v in value]
    raise TypeError(f"Cannot convert {type(value).__name__} to a cache payload")
