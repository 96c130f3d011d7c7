"""Request-time helpers.

PayWay expects the request time as a 14 digit UTC string and enforces a
freshness window on it, so every helper here reads the clock when it is
called. Pass a ``clock`` to pin the time in tests.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

Clock = Callable[[], datetime]

REQUEST_TIME_FORMAT = "%Y%m%d%H%M%S"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken to already be UTC.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def format_request_time(moment: datetime) -> str:
    """Return ``moment`` as ``YYYYMMDDHHMMSS`` in UTC."""

    return _as_utc(moment).strftime(REQUEST_TIME_FORMAT)


def request_time(clock: Optional[Clock] = None) -> str:
    return format_request_time((clock or utc_now)())


def expiry_timestamp(seconds: Optional[int], clock: Optional[Clock] = None) -> Optional[int]:
    """Absolute UNIX time ``seconds`` from now, or ``None`` when unset."""

    if seconds is None:
        return None
    moment = _as_utc((clock or utc_now)()) + timedelta(seconds=seconds)
    return round(moment.timestamp())
