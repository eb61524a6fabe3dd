"""Utility modules for the permit backend."""

from .datetime_utils import ensure_utc, to_iso, utc_now

__all__ = [
    "ensure_utc",
    "to_iso",
    "utc_now",
]
