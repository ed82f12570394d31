"""Identity assignment and timestamp helpers shared by the domain and services."""

from datetime import datetime, timezone
from uuid import uuid4


def new_document_id() -> str:
    """Return a fresh random identity (UUID4 rendered as text).

    Collisions are treated as impossible; callers do not re-check the store.
    """
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes so every comparison is tz-aware."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
