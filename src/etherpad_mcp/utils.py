"""
Shared utility functions for Etherpad MCP server.

Timestamp conversions used by the tool modules.
"""

from datetime import datetime, timezone
from typing import Optional, Union


def to_unix_timestamp(value: Union[int, float, str]) -> int:
    """Convert a timestamp given as seconds or ISO 8601 text to unix seconds.

    Args:
        value: Unix seconds (int/float or numeric string), or an ISO 8601
            date/datetime such as "2026-12-31" or "2026-12-31T18:00:00+01:00".
            Naive ISO values are taken as UTC.

    Returns:
        Unix timestamp in seconds

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp {value!r}")
    if isinstance(value, (int, float)):
        return int(value)

    text = value.strip()
    try:
        return int(float(text))
    except ValueError:
        pass

    return int(_parse_iso(value, "unix seconds").timestamp())


def to_unix_millis(value: Union[int, float, str]) -> int:
    """Convert a timestamp given as milliseconds or ISO 8601 text to unix milliseconds.

    Etherpad chat times are milliseconds since the epoch. Numbers are
    taken as milliseconds; naive ISO values are taken as UTC.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp {value!r}")
    if isinstance(value, (int, float)):
        return int(value)

    try:
        return int(float(value.strip()))
    except ValueError:
        pass

    return int(_parse_iso(value, "unix milliseconds").timestamp() * 1000)


def _parse_iso(value: str, numeric_form: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        raise ValueError(
            f"Invalid timestamp '{value}'. Use {numeric_form} or ISO 8601 (YYYY-MM-DD[THH:MM:SS])"
        )
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(seconds: Optional[Union[int, float]]) -> Optional[str]:
    """Format unix seconds as an ISO 8601 UTC string, or None."""
    if seconds is None or isinstance(seconds, bool):
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc).isoformat()
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def format_timestamp_ms(millis: Optional[Union[int, float]]) -> Optional[str]:
    """Format milliseconds since the epoch (as sent by getLastEdited)."""
    if millis is None or isinstance(millis, bool):
        return None
    try:
        return format_timestamp(millis / 1000)
    except TypeError:
        return None
