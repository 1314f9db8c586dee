"""Helpers shared by the record models' dict conversion."""

from datetime import datetime, timezone


def omit_none(data: dict) -> dict:
    """Drop keys whose value is None.

    Optional record fields are left out of the stored JSON rather than
    written as null. Readers accept both forms.
    """
    return {key: value for key, value in data.items() if value is not None}


def utc_now_iso() -> str:
    """Current UTC time in the stored timestamp format, e.g. 2025-03-25T08:15:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
