"""Value coercion shared by the JSON adapters."""

from __future__ import annotations

import math
from typing import Any, Optional, Tuple

from transcript_aligner.core.timecode import parse_timestamp


def as_seconds(value: Any) -> Optional[float]:
    """Coerce a JSON time value to float seconds, or None when unknown.

    Numbers pass through; strings go through parse_timestamp so "1.25"
    and "00:01:02,5" both work. Negative times and anything else are
    unknown.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        seconds = float(value)
    elif isinstance(value, str):
        seconds = parse_timestamp(value)
    else:
        return None
    if seconds is None or math.isnan(seconds) or seconds < 0:
        return None
    return seconds


def timing_pair(start: Any, end: Any) -> Tuple[Optional[float], Optional[float]]:
    """Coerce a start/end pair; an end before its start becomes unknown."""
    start_s = as_seconds(start)
    end_s = as_seconds(end)
    if start_s is not None and end_s is not None and end_s < start_s:
        return start_s, None
    return start_s, end_s


def first_present(item: dict, *keys: str) -> Any:
    """Value of the first key in *item* whose value is not None."""
    for key in keys:
        value = item.get(key)
        if value is not None:
            return value
    return None


def first_text(item: dict, *keys: str) -> str:
    """First non-empty string among *keys*, else ""."""
    for key in keys:
        value = item.get(key)
        if value:
            return str(value)
    return ""
