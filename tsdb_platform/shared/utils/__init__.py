"""Shared utility helpers (time, identifiers)."""

from tsdb_platform.shared.utils.datetime import ensure_utc, utc_now
from tsdb_platform.shared.utils.generators import generate_id, generate_token

__all__ = [
    "ensure_utc",
    "generate_id",
    "generate_token",
    "utc_now",
]
