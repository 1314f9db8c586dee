"""Utility functions for fitness-tracker."""

from .serialization import omit_none, utc_now_iso

__all__ = ["omit_none", "utc_now_iso"]
