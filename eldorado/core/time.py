"""Clock helpers."""

from __future__ import annotations

from datetime import date, datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def today() -> date:
    """Return the server-local calendar date scores are bucketed under."""
    return date.today()


__all__ = ["today", "utcnow"]
