"""UTC clock helpers for response timestamps."""

from datetime import datetime, timezone


def system_utc_now() -> datetime:
    """Return the current timezone-aware UTC time."""

    return datetime.now(timezone.utc)


def system_format_timestamp(moment: datetime) -> str:
    """Render a moment as ISO-8601 UTC with millisecond precision.

    Args:
        moment: Timezone-aware or naive-UTC datetime.

    Returns:
        str: Timestamp such as `2026-10-19T12:00:00.123Z`.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
