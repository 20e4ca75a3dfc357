"""Display timestamp formatting and parsing.

WHY: Exported transcripts mark each paragraph with a readable timestamp,
and users type timestamps back in by hand. Both directions need one
consistent format.

HOW: format_timestamp() renders HH:MM:SS.d from whole milliseconds, the
way a UTC clock would show that many milliseconds after the epoch.
parse_timestamp() accepts HH:MM:SS, MM:SS or SS with "." or "," as the
decimal separator.

RULES:
- Negative or NaN seconds format as "00:00:00.0"
- Milliseconds are truncated, not rounded; d is the first digit of the
  zero-padded millisecond field
- Hours wrap at 24 (clock arithmetic)
- Parsing never raises: malformed input returns None
"""

from __future__ import annotations

import math
from typing import Optional

_MS_PER_DAY = 24 * 3600 * 1000


def format_timestamp(seconds: float) -> str:
    """Format seconds as HH:MM:SS.d.

    >>> format_timestamp(3725.5)
    '01:02:05.5'
    """
    if math.isnan(seconds) or seconds < 0:
        return "00:00:00.0"

    total_ms = int(seconds * 1000) % _MS_PER_DAY
    hours, remainder = divmod(total_ms, 3600 * 1000)
    minutes, remainder = divmod(remainder, 60 * 1000)
    secs, millis = divmod(remainder, 1000)
    return "{:02d}:{:02d}:{:02d}.{}".format(hours, minutes, secs, "{:03d}".format(millis)[0])


def _parse_part(part: str) -> Optional[float]:
    try:
        value = float(part.strip().replace(",", "."))
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def parse_timestamp(text: str) -> Optional[float]:
    """Parse HH:MM:SS, MM:SS or SS (decimal "." or ",") into seconds.

    Returns None for any non-numeric component or unsupported shape.
    """
    parts = []
    for raw in text.split(":"):
        value = _parse_part(raw)
        if value is None:
            return None
        parts.append(value)

    if len(parts) == 3:
        return parts[0] * 3600 + parts[1] * 60 + parts[2]
    if len(parts) == 2:
        return parts[0] * 60 + parts[1]
    if len(parts) == 1:
        return parts[0]
    return None
