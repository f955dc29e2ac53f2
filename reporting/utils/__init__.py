"""Utility helpers for reusable functionality."""

from .datetime import ensure_utc, now_utc

__all__ = ["ensure_utc", "now_utc"]
