"""Utility functions."""

from app.utils.time import as_datetime, utc_now

__all__ = ["utc_now", "as_datetime"]
