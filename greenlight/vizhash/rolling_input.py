"""
Rolling Input
-------------

Time-windowed input for the VizHash pattern. The window changes twice per
hour, at minute 0 and at minute 20, so a displayed permit image goes stale
quickly without the client having to refresh continuously:

    10:00:00 - 10:19:59  -> "2024-01-01T10:00"
    10:20:00 - 10:59:59  -> "2024-01-01T10:20"

The window key is combined with the server secret and hashed, so the value
differs between servers and cannot be predicted without the secret.
"""

# Standard library imports
import hashlib
from datetime import datetime
from typing import Optional

# Local application imports
from ..utils.datetime_utils import ensure_utc, utc_now
from .exceptions import ConfigError

# Minute inside each hour at which the second window starts
SECOND_WINDOW_MINUTE = 20


def window_key(now: datetime) -> str:
    """
    Window identifier for a point in time (UTC).

    Naive datetimes are taken as UTC.
    """
    now = ensure_utc(now)
    minute = 0 if now.minute < SECOND_WINDOW_MINUTE else SECOND_WINDOW_MINUTE
    return f"{now:%Y-%m-%dT%H}:{minute:02d}"


def current_input(secret: str, now: Optional[datetime] = None) -> str:
    """
    Rolling input for the current window.

    Args:
        secret: Long-lived server secret, must be non-empty
        now: Point in time to derive for; defaults to the current UTC time

    Returns:
        Hex SHA-256 digest of window key + secret

    Raises:
        ConfigError: If no secret is configured
    """
    if not secret:
        raise ConfigError("A server secret is required to derive the rolling input")
    if now is None:
        now = utc_now()
    return hashlib.sha256((window_key(now) + secret).encode("utf-8")).hexdigest()
