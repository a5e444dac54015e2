"""Parse and format due dates entered at the prompt."""

from __future__ import annotations

from datetime import UTC, datetime

from ticklist.config.constants import DEFAULT_DATE_FORMAT
from ticklist.errors import ValidationError


def parse_due_date(raw: str, *, allow_empty: bool = False) -> datetime | None:
    """Parse ``YYYY-MM-DD`` or an ISO-8601 timestamp into an aware datetime.

    Naive values are taken as UTC. Returns ``None`` for blank input when
    ``allow_empty`` is set (the caller then falls back to "now").
    """
    text = raw.strip()
    if not text:
        if allow_empty:
            return None
        raise ValidationError("Invalid date format")
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError("Invalid date format") from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_due_date(value: datetime, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Render a due date in UTC using ``fmt``."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime(fmt)
