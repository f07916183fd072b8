from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from ..core.constants import TIMESTAMP_FORMAT


def now_utc() -> datetime:
    """Current UTC time, naive (SQLite stores UTC without offset).

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Normalize a stored timestamp (text from SQLite) into datetime."""

    if value is None:
        return None

    if isinstance(value, datetime):
        return value

    if isinstance(value, str):
        return datetime.fromisoformat(value.strip())

    raise TypeError(f"Unsupported timestamp value type: {type(value)!r}")
