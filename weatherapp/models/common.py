"""Common timestamp helpers shared across models."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def parse_timestamp(iso_str: str) -> datetime:
    """Parse an ISO timestamp; naive values are taken as UTC."""
    dt = datetime.fromisoformat(iso_str)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_epoch(dt: datetime) -> int:
    return int(dt.timestamp())


def utc_date_key(timestamp: int) -> str:
    """YYYY-MM-DD of the UTC calendar day containing the timestamp."""
    return datetime.fromtimestamp(timestamp, UTC).date().isoformat()


def utc_hour(timestamp: int) -> int:
    return datetime.fromtimestamp(timestamp, UTC).hour


def date_key_to_epoch(date_key: str) -> int:
    """Epoch seconds of UTC midnight for a YYYY-MM-DD key."""
    return to_epoch(datetime.fromisoformat(date_key).replace(tzinfo=UTC))
