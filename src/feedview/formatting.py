"""Presentation helpers for article cards and the feed header."""

from datetime import datetime, tzinfo


def _parse(iso: str) -> datetime:
    return datetime.fromisoformat(iso)


def format_published_at(iso: str, tz: tzinfo | None = None) -> str:
    """Format a publication timestamp as ``YYYY年MM月DD日 HH時MM分``.

    Args:
        iso: ISO 8601 timestamp, e.g. ``"2026-02-01T10:00:00Z"``.
        tz: Display timezone. Naive timestamps are shown as-is.

    Returns:
        The formatted date, or the input unchanged if it cannot be parsed.
    """
    try:
        dt = _parse(iso)
    except ValueError:
        return iso
    if tz is not None and dt.tzinfo is not None:
        dt = dt.astimezone(tz)
    return f"{dt.year}年{dt.month:02d}月{dt.day:02d}日 {dt.hour:02d}時{dt.minute:02d}分"


def format_last_updated(iso: str | None, tz: tzinfo | None = None) -> str:
    """Format the feed's last-updated timestamp as ``M月D日 HH:MM``."""
    if not iso:
        return ""
    try:
        dt = _parse(iso)
    except ValueError:
        return iso
    if tz is not None and dt.tzinfo is not None:
        dt = dt.astimezone(tz)
    return f"{dt.month}月{dt.day}日 {dt.hour:02d}:{dt.minute:02d}"


def short_source(name: str, limit: int = 12) -> str:
    """Truncate a source name for the card's source tag."""
    return name[:limit] if len(name) > limit else name


def stagger_delay_ms(position: int, batch_size: int, step_ms: int) -> int:
    """Entrance animation delay for an article at ``position``.

    The delay restarts at 0 for every batch so appended batches animate in
    the same rhythm as the first one.
    """
    return (position % batch_size) * step_ms
