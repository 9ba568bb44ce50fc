"""Shared utilities (datetime, id generation)."""

from content.shared.utils.datetime import ensure_utc
from content.shared.utils.generators import generate_cuid

__all__ = ["ensure_utc", "generate_cuid"]
